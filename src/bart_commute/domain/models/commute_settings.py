"""Commute settings domain model."""

from dataclasses import dataclass

from bart_commute.domain.models.station import Station, StationRole


@dataclass(frozen=True)
class CommuteSettings:
    """Fixed stations, buffers and API access shared by every component.

    Buffers are in minutes. ``bike_home_station_minutes`` covers the ride
    between home and the home-side station in either direction,
    ``bike_work_station_minutes`` the ride between the work-side station and
    work.
    """

    work_station: Station = Station(code="CIVC", name="Civic Center")
    home_station: Station = Station(code="DUBL", name="Dublin/Pleasanton")
    bike_home_station_minutes: int = 35
    bike_work_station_minutes: int = 10
    shower_minutes: int = 15
    api_base_url: str = "https://api2.bart.gov/api"
    api_key: str = "MW9S-E7SL-26DU-VV8V"  # BART public sample key

    def station_for(self, role: StationRole) -> Station:
        """Return the station playing the given role."""
        if role is StationRole.WORK:
            return self.work_station
        return self.home_station
