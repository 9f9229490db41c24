"""BART API adapters."""

from bart_commute.adapters.bart_api.bart_schedule_repository import BartScheduleRepository

__all__ = ["BartScheduleRepository"]
