"""Commute planner for BART: when to leave to make it on time."""

__version__ = "0.1.0"
