"""Team time-off tracker: members, time-off entries, on-call rotation, holidays."""

__version__ = "1.0.0"
