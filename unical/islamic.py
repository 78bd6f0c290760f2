#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Fri Mar 14 17:58:20 2025

@author: Marcel Hesselberth
"""

from math import ceil, floor
from threading import Lock
from loguru import logger
from unical.calendar import Calendar, CalendarType, LocalDate
from unical.constants import ISLAMIC_EPOCH_JDN, SYNODIC_MONTH
from unical.dtmath import DateTuple, JDg, RJDg

"""
The tabular Islamic calendar.

Months alternate between 30 and 29 days, the last month has 30 days in 11
of the 30 years of a cycle. Day 0 is 1 Muharram 1 AH, July 16, 622 in the
Julian calendar (JD 1948439.5), which is July 19, 622 in the proleptic
Gregorian calendar.

The observed calendar deviates from the tabular one by a day or two. The
deviations can be entered in the customization table of the locale data:
per profile (date format), the Gregorian date on which an Islamic month
starts. Months without an entry use the tabular month start.
"""

def month_start(year, month):
    """
    Days from the epoch until the start of a tabular Islamic month.

    Parameters
    ----------
    year : int
        Islamic year.
    month : int
        Islamic month (0-11).

    Returns
    -------
    int
        Days since 1 Muharram 1 AH.
    """
    return ceil(29.5 * month) + (year - 1) * 354 + (3 + 11 * year) // 30

def parse_date(date_string):
    """Parse a YYYYMMDD string into year, month (1-12), day."""
    return DateTuple(int(date_string[0:4]), int(date_string[4:6]),
                     int(date_string[6:8]))


class IslamicCalendar(Calendar):
    calendar_type = CalendarType.Islamic

    def __init__(self, context):
        super().__init__(context)
        self._customization = None
        self._lock = Lock()

    def reset(self):
        with self._lock:
            self._customization = None

    @property
    def customization(self):
        """
        Month start table of the active profile.

        Maps the month index (12 * (year - 1) + month) to the days since the
        epoch. Built once from the locale data.
        """
        customization = self._customization
        if customization is None:
            customization = self._build_customization()
            with self._lock:
                if self._customization is None:
                    self._customization = customization
                customization = self._customization
        return customization

    def _build_customization(self):
        profile = self.context.islamic_profile
        entries = self.context.locale_data.get_custom_islamic_calendar_data()
        customization = {}
        if not entries:
            logger.warning("No Islamic calendar customizations.")
            return customization
        for entry in entries:
            if entry.date_format != profile:
                continue
            gy, gm, gd = parse_date(entry.greg_date)
            month_start_days = JDg(gy, gm, gd) - ISLAMIC_EPOCH_JDN
            iy, im, iday = parse_date(entry.islamic_month_start)
            customization[(iy - 1) * 12 + im - 1] = month_start_days
        if not customization:
            logger.warning(f"No Islamic calendar customizations for "
                           f"profile {profile!r}.")
        else:
            logger.info(f"Working with Islamic profile {profile!r} and "
                        f"{len(customization)} customized months.")
        return customization

    def custom_month_start(self, months):
        """Days from the epoch until the start of month index months."""
        days = self.customization.get(months)
        if days is None:
            days = month_start(months // 12 + 1, months % 12)
        return days

    def to_local(self, year, month, day):
        days = JDg(year, month + 1, day) - ISLAMIC_EPOCH_JDN
        # A customized month start differs from the tabular one by a few
        # days at most, so the estimate is at most a month off.
        months = floor(days / SYNODIC_MONTH)
        while self.custom_month_start(months) > days:
            months -= 1
        while self.custom_month_start(months + 1) <= days:
            months += 1
        islamic_year = months // 12 + 1
        islamic_month = months % 12
        islamic_day = days - self.custom_month_start(months) + 1
        return LocalDate(islamic_year, islamic_month, islamic_day)

    def to_gregorian(self, year, month, day, era=None):
        start = self.custom_month_start(12 * (year - 1) + month)
        jdn = day + start + ISLAMIC_EPOCH_JDN - 1
        gy, gm, gd = RJDg(jdn)
        return DateTuple(gy, gm - 1, gd)
