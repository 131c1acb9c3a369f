"""
calendarspots - find bookable appointment slots in a calendar.
"""

__version__ = "0.1.0"
