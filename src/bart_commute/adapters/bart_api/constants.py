"""Constants for the BART API adapter.

Uses the BART legacy API.
API Documentation: https://api.bart.gov/docs/overview/index.aspx

Station list: {base}/stn.aspx?cmd=stns&key=...&json=y
"""

SCHEDULE_PATH = "sched.aspx"

# Query parameters sent with every schedule lookup
JSON_FORMAT_PARAMS = {"json": "y"}
# Number of trips before/after the requested one; kept at their minimum
TRIPS_BEFORE = "0"
TRIPS_AFTER = "0"
ARRIVE_COMMAND = "arrive"

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/json",
}
