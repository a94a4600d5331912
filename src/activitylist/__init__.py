"""activitylist: validated activity records and their trace driver."""

__version__ = "0.1.0"
