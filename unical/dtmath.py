#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Mar 10 20:11:05 2025

@author: Marcel Hesselberth
"""

from math import isfinite
from collections import namedtuple
from unical.constants import MS_PER_DAY, MS_PER_HOUR, MS_PER_MINUTE, \
    MS_PER_SECOND, MAX_TIMESTAMP, JDN_ALIGN, UNIX_EPOCH_ORD, UNIX_EPOCH_WDAY
from unical.cnumba import cnjit

DateTuple = namedtuple("DateTuple", ["year", "month", "day"])
TimeFields = namedtuple("TimeFields", ["year", "month", "day", "hours",
                                       "minutes", "seconds", "milliseconds",
                                       "weekday"])

"""
Integer day arithmetic in the proleptic Gregorian calendar.

All calendars in this package convert through the proleptic Gregorian
calendar. Dates are counted as ordinals (day 1 is January 1 of the year 1),
as Julian day numbers (JDN, the integer Julian day at noon) or as timestamps
in milliseconds since 1970-01-01T00:00:00Z. Year 0 exists (astronomical
year numbering) and negative years are handled.

The low level kernels take 1-based months. The timestamp helpers take and
return 0-based months, which is what the calendar classes use.
"""

@cnjit(signature_or_function='i8(i8, i8)')
def div(a, b):
    """Integer division rounding towards minus infinity."""
    return a // b

@cnjit(signature_or_function='i8(i8, i8)')
def mod(a, b):
    """Remainder of div(a, b), non-negative for positive b."""
    return a % b

@cnjit(signature_or_function='boolean(i8)')
def is_gregorian_leapyear(year):
    """
    Check if a given year is a leap year in the (proleptic) Gregorian calendar

    Parameters
    ----------
    year : int
        Year, astronomical numbering.

    Returns
    -------
    leapyear : Boolean
        True if year is a leap year

    """
    if year % 4 == 0:               # possibly leap
        if year % 400 == 0:         # leap
            leapyear = True
        else:
            if year % 100 == 0:     # common
                leapyear = False
            else:                   # leap
                leapyear = True
    else:
        leapyear = False
    return leapyear

@cnjit(signature_or_function='i8(i8, i8, i8)')
def GD(gr_year, gr_month, gr_day):
    """
    Given a Gregorian date, compute the day number (ordinal).
    Handles positive and negative years. Day 1 is 1-1-1, day 0 is 0-12-31.

    The day enters linearly, so days outside the month roll over into the
    adjacent months.

    Parameters
    ----------
    gr_year : int
        Year in the Gregorian calendar.
    gr_month : int
        Month in the Gregorian calendar (1-12).
    gr_day : int
        Day in the Gregorian calendar.

    Returns
    -------
    int
        The ordinal day number.
    """
    y = gr_year - 1
    ord = 365 * y + y // 4 - y // 100 + y // 400
    ord += (367 * gr_month - 362) // 12
    if gr_month > 2:
        if is_gregorian_leapyear(gr_year):
            ord -= 1
        else:
            ord -= 2
    ord += gr_day
    return ord

@cnjit(signature_or_function='UniTuple(i8, 3)(i8)')
def RGD(ord):
    """
    Given an ordinal day number, compute the corresponding Gregorian Date.

    RGD(GD(y, m, d)) is an invariant.

    Parameters
    ----------
    ord : int
         Day number.

    Returns
    -------
    year, month, day
        Gregorian date, month 1-12.
    """
    d = ord - 1
    n400 = d // 146097
    d1 = d % 146097
    n100 = d1 // 36524
    d2 = d1 % 36524
    n4 = d2 // 1461
    d3 = d2 % 1461
    n1 = d3 // 365
    y = 400 * n400 + 100 * n100 + 4 * n4 + n1
    if n1 == 4 or n100 == 4:
        return y, 12, 31
    y += 1
    p = d3 % 365
    if is_gregorian_leapyear(y):
        if p < 60:
            c = 0
        else:
            c = 1
    else:
        if p < 59:
            c = 0
        else:
            c = 2
    m = (12 * (p + c) + 373) // 367
    d = d - GD(y, m, 0) + 1
    return y, m, d

@cnjit(signature_or_function='i8(i8, i8, i8)')
def JDg(gr_year, gr_month, gr_day):
    """Julian day number of a proleptic Gregorian date (month 1-12)."""
    return GD(gr_year, gr_month, gr_day) + JDN_ALIGN

@cnjit(signature_or_function='UniTuple(i8, 3)(i8)')
def RJDg(jdn):
    """Proleptic Gregorian date (month 1-12) of a Julian day number."""
    return RGD(jdn - JDN_ALIGN)

# 0 is sunday, 1 is monday etc.
def weekday_nr(jdn):
    return (jdn + 1) % 7

def is_valid_timestamp(timestamp):
    if timestamp is None or isinstance(timestamp, bool):
        return False
    try:
        if not isfinite(timestamp):
            return False
    except TypeError:
        return False
    return -MAX_TIMESTAMP <= timestamp <= MAX_TIMESTAMP

def check_timestamp(timestamp):
    """
    Normalize a timestamp.

    Returns the timestamp as an int (milliseconds, truncated towards zero
    like ECMAScript TimeClip), or None if it does not denote a valid instant.
    """
    if not is_valid_timestamp(timestamp):
        return None
    return int(timestamp)

def days_from_civil(year, month, day):
    """
    Days since 1970-01-01 of a proleptic Gregorian date.

    month is 0-based. Months outside 0..11 carry into the year and days
    outside the month roll over.
    """
    year += month // 12
    month %= 12
    return GD(year, month + 1, day) - UNIX_EPOCH_ORD

def civil_from_days(days):
    """Proleptic Gregorian date (0-based month) of a day count since 1970."""
    year, month, day = RGD(days + UNIX_EPOCH_ORD)
    return DateTuple(year, month - 1, day)

def timestamp_from_fields(year, month=0, day=1, hours=0, minutes=0,
                          seconds=0, milliseconds=0):
    """
    Timestamp (ms) of UTC calendar fields, like Date.UTC.

    All fields may overflow; the excess carries into the next larger field.
    """
    days = days_from_civil(year, month, day)
    return days * MS_PER_DAY + hours * MS_PER_HOUR + \
        minutes * MS_PER_MINUTE + seconds * MS_PER_SECOND + milliseconds

def fields_from_timestamp(timestamp):
    """Decompose a valid timestamp (ms) into UTC calendar fields."""
    days, ms = divmod(timestamp, MS_PER_DAY)
    year, month, day = civil_from_days(days)
    hours, ms = divmod(ms, MS_PER_HOUR)
    minutes, ms = divmod(ms, MS_PER_MINUTE)
    seconds, ms = divmod(ms, MS_PER_SECOND)
    weekday = (days + UNIX_EPOCH_WDAY) % 7
    return TimeFields(year, month, day, hours, minutes, seconds, ms, weekday)

def weekday_from_timestamp(timestamp):
    return (timestamp // MS_PER_DAY + UNIX_EPOCH_WDAY) % 7

def add_days(timestamp, days):
    return timestamp + days * MS_PER_DAY
