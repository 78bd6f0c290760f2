#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Mar 10 19:42:11 2025

@author: Marcel Hesselberth
"""


class CalendarError(Exception):
    pass


class InvalidTimestamp(CalendarError, ValueError):
    """An operation needs a valid instant but the date is invalid."""


class NotRegistered(CalendarError, LookupError):
    """No calendar implementation is registered for a calendar type."""


class InvalidWeekConfig(CalendarError, TypeError):
    """A week numbering scheme or week configuration is malformed."""


class EraNotFound(CalendarError, LookupError):
    """
    No era boundary matches a date.

    This is a defect in the era table of the locale data, not a transient
    condition.
    """


class CalendarRangeError(CalendarError, ValueError):
    """A date lies outside the range an algorithmic calendar supports."""
