#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Wed Mar 12 18:25:09 2025

@author: Marcel Hesselberth
"""

from unical.calendar import Calendar, CalendarType, LocalDate
from unical.constants import BUDDHIST_ERA, BUDDHIST_NEW_YEAR_REFORM, \
    BUDDHIST_OLD_NEW_YEAR_MONTH
from unical.dtmath import DateTuple


class BuddhistCalendar(Calendar):
    """
    The Thai solar (Buddhist) calendar.

    Months and days are Gregorian, the year is counted from the start of the
    Buddhist era (543 BC, the start of era 1 in the locale data). Until 1940
    the new year fell on April 1, so January to March belong to the previous
    Buddhist year. The year 2483 BE therefore only has 9 months.
    """
    calendar_type = CalendarType.Buddhist

    def _era_start_year(self):
        return self.context.eras.era_start_date(self.calendar_type,
                                                BUDDHIST_ERA).year

    def to_local(self, year, month, day):
        local_year = year - self._era_start_year() + 1
        if year < BUDDHIST_NEW_YEAR_REFORM and \
                month < BUDDHIST_OLD_NEW_YEAR_MONTH:
            local_year -= 1
        return LocalDate(local_year, month, day)

    def to_gregorian(self, year, month, day, era=None):
        gr_year = year + self._era_start_year() - 1
        if gr_year < BUDDHIST_NEW_YEAR_REFORM and \
                month < BUDDHIST_OLD_NEW_YEAR_MONTH:
            gr_year += 1
        return DateTuple(gr_year, month, day)
