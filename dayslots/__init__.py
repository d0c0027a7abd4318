"""Plan a day in nine two-hour slots, record what was done, compare the two and time focused work."""

__version__ = "0.1.0"