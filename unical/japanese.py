#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Wed Mar 12 19:02:44 2025

@author: Marcel Hesselberth
"""

from unical.calendar import Calendar, CalendarType, LocalDate
from unical.constants import JAPANESE_ERA_YEAR_LIMIT
from unical.dtmath import DateTuple


class JapaneseCalendar(Calendar):
    """
    The Japanese imperial calendar.

    Months and days are Gregorian. Years are counted within an era, the
    first (partial) year of an era is year 1. A year is only meaningful
    together with its era, so local dates carry the era index of the era
    table in the locale data (e.g. 236 for Reiwa).
    """
    calendar_type = CalendarType.Japanese
    is_era_based = True

    def _era_start_year(self, era):
        return self.context.eras.era_start_date(self.calendar_type, era).year

    def to_local(self, year, month, day):
        era = self.context.eras.era_by_date(self.calendar_type,
                                            year, month, day)
        local_year = year - self._era_start_year(era) + 1
        return LocalDate(local_year, month, day, era)

    def to_gregorian(self, year, month, day, era=None):
        """
        Gregorian date of a year in an era.

        Without an era the year is counted in the current era.
        """
        if era is None:
            era = self.context.eras.current_era(self.calendar_type)
        gr_year = self._era_start_year(era) + year - 1
        return DateTuple(gr_year, month, day)

    def gregorian_arguments(self, year, month=0, day=1):
        """
        Interpret a year given to a constructor.

        A tuple (era, year) is explicit. A plain number of 100 or more is a
        Gregorian year. A smaller number is a year in the current era.
        """
        if isinstance(year, tuple):
            era, year = year
            return self.encode(year, month, day, era)
        if year >= JAPANESE_ERA_YEAR_LIMIT:
            year += month // 12
            return DateTuple(year, month % 12, day)
        return self.encode(year, month, day,
                           self.context.eras.current_era(self.calendar_type))
