#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Thu Mar 13 20:37:16 2025

@author: Marcel Hesselberth
"""

from collections import namedtuple
from unical.calendar import Calendar, CalendarType, LocalDate
from unical.constants import JALAALI_BREAKS, JALAALI_MIN_YEAR, \
    JALAALI_MAX_YEAR
from unical.cnumba import cnjit
from unical.dtmath import DateTuple, div, mod, JDg, RJDg
from unical.errors import CalendarRangeError

JalCal = namedtuple("JalCal", ["leap", "gy", "march"])

"""
The Persian (Jalaali, Solar Hijri) calendar, algorithmic variant.

The first 6 months have 31 days, the next 5 have 30 days and the last has 29
days, 30 in a leap year. Leap years follow 33 year cycles that are broken at
the years in JALAALI_BREAKS, which keeps the new year (Nowruz) on March 20
or 21 (Gregorian). Conversions go through the Julian day number (JDN):
g2d/d2g for Gregorian dates and j2d/d2j for Jalaali dates, months 1-12.

Valid for Jalaali years -61 until 3177.
"""

@cnjit(signature_or_function='i8(i8, i8, i8)')
def g2d(gy, gm, gd):
    """JDN of a proleptic Gregorian date."""
    return JDg(gy, gm, gd)

@cnjit(signature_or_function='UniTuple(i8, 3)(i8)')
def d2g(jdn):
    """Proleptic Gregorian date of a JDN."""
    return RJDg(jdn)

@cnjit(signature_or_function='UniTuple(i8, 3)(i8)')
def _jal_cal(jy):
    bl = len(JALAALI_BREAKS)
    gy = jy + 621
    leap_j = -14
    jp = JALAALI_BREAKS[0]
    jump = 0
    if jy < jp or jy >= JALAALI_BREAKS[bl - 1]:
        raise ValueError("Invalid Jalaali year")

    # Find the limiting years for the Jalaali year jy.
    for i in range(1, bl):
        jm = JALAALI_BREAKS[i]
        jump = jm - jp
        if jy < jm:
            break
        leap_j = leap_j + div(jump, 33) * 8 + div(mod(jump, 33), 4)
        jp = jm
    n = jy - jp

    # Leap years from AD 621 to the start of jy, in the Jalaali calendar
    leap_j = leap_j + div(n, 33) * 8 + div(mod(n, 33) + 3, 4)
    if mod(jump, 33) == 4 and jump - n == 4:
        leap_j += 1

    # and in the Gregorian calendar (until the year gy).
    leap_g = div(gy, 4) - div((div(gy, 100) + 1) * 3, 4) - 150

    # Gregorian day in March of Farvardin 1.
    march = 20 + leap_j - leap_g

    # Years since the last leap year, 0 is leap.
    if jump - n < 6:
        n = n - jump + div(jump + 4, 33) * 33
    r = mod(n + 1, 33) - 1
    if r == -1:
        leap = 4
    else:
        leap = mod(r, 4)
    return leap, gy, march

def jal_cal(jy):
    """
    Leap year state and new year of a Jalaali year.

    Parameters
    ----------
    jy : int
        Jalaali year.

    Raises
    ------
    CalendarRangeError
        jy lies outside the break table.

    Returns
    -------
    JalCal
        leap: years since the last leap year (0: jy is a leap year),
        gy: the Gregorian year in which jy starts,
        march: the day in March (Gregorian) of Farvardin 1.
    """
    _check_jalaali_year(jy)
    return JalCal(*_jal_cal(jy))

@cnjit(signature_or_function='i8(i8, i8, i8)')
def j2d(jy, jm, jd):
    """JDN of a Jalaali date (month 1-12)."""
    leap, gy, march = _jal_cal(jy)
    return g2d(gy, 3, march) + (jm - 1) * 31 - div(jm, 7) * (jm - 7) + jd - 1

@cnjit(signature_or_function='UniTuple(i8, 3)(i8)')
def d2j(jdn):
    """Jalaali date (month 1-12) of a JDN."""
    gy = d2g(jdn)[0]
    jy = gy - 621
    leap, gy1, march = _jal_cal(jy)
    jdn1f = g2d(gy, 3, march)

    # Days since Farvardin 1
    k = jdn - jdn1f
    if k >= 0:
        if k <= 185:
            # The first 6 months.
            jm = 1 + div(k, 31)
            jd = mod(k, 31) + 1
            return jy, jm, jd
        k -= 186
    else:
        # Previous Jalaali year.
        jy -= 1
        k += 179
        if leap == 1:
            k += 1
    jm = 7 + div(k, 30)
    jd = mod(k, 30) + 1
    return jy, jm, jd

def _check_jalaali_year(jy):
    if not JALAALI_MIN_YEAR <= jy <= JALAALI_MAX_YEAR:
        raise CalendarRangeError(
            f"Jalaali year must be in {JALAALI_MIN_YEAR}..{JALAALI_MAX_YEAR}",
            jy)

def is_leap_jalaali_year(jy):
    return jal_cal(jy).leap == 0

def jalaali_month_length(jy, jm):
    """Number of days in month jm (1-12) of Jalaali year jy."""
    if jm <= 6:
        return 31
    if jm <= 11:
        return 30
    if is_leap_jalaali_year(jy):
        return 30
    return 29


class PersianCalendar(Calendar):
    calendar_type = CalendarType.Persian

    def to_local(self, year, month, day):
        # Farvardin 1 lies in March, so the Jalaali year is gy - 621 or one
        # less. Both have to be in the table.
        _check_jalaali_year(year - 621)
        _check_jalaali_year(year - 622)
        jy, jm, jd = d2j(g2d(year, month + 1, day))
        return LocalDate(jy, jm - 1, jd)

    def to_gregorian(self, year, month, day, era=None):
        _check_jalaali_year(year)
        gy, gm, gd = d2g(j2d(year, month + 1, day))
        return DateTuple(gy, gm - 1, gd)
