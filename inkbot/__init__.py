"""inkbot -- LINE bot for Splatoon 3 schedules."""

__version__ = "0.1.0"
