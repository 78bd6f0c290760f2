#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Tue Mar 11 21:14:40 2025

@author: Marcel Hesselberth
"""

from enum import Enum
from collections import namedtuple
from unical.dtmath import DateTuple
from unical.errors import NotRegistered

LocalDate = namedtuple("LocalDate", ["year", "month", "day", "era"],
                       defaults=[None])

"""
Calendar classes.

A calendar converts between its own local date and the proleptic Gregorian
date. There are 5 supported calendars:
    - Gregorian: The identity conversion.
    - Buddhist: Gregorian months and days, years counted from 543 BC. Before
      1941 the year started on April 1.
    - Islamic: The tabular (arithmetic) lunar calendar, optionally corrected
      by a customization table of month starts.
    - Japanese: Gregorian months and days, years counted within imperial eras.
    - Persian: The algorithmic Jalaali calendar.
All dates are integer (year, month, day) triples with a 0-based month, as in
ECMAScript. Time of day is not affected by calendar conversions.
"""


class CalendarType(Enum):
    Gregorian = "Gregorian"
    Buddhist = "Buddhist"
    Islamic = "Islamic"
    Japanese = "Japanese"
    Persian = "Persian"

    @classmethod
    def coerce(cls, calendar_type):
        """
        Calendar type from a CalendarType or its name.

        Raises
        ------
        NotRegistered
            The name is not a known calendar type.
        """
        if isinstance(calendar_type, cls):
            return calendar_type
        try:
            return cls(calendar_type)
        except ValueError:
            raise NotRegistered(
                f"Unknown calendar type {calendar_type!r}") from None


class Calendar:
    """
    Base class of the calendar implementations.

    Subclasses implement to_local and to_gregorian. The context supplies the
    era tables and locale data some calendars depend on.
    """
    calendar_type = None
    is_era_based = False

    def __init__(self, context):
        self.context = context

    def to_local(self, year, month, day):
        """
        Convert a proleptic Gregorian date to a date in this calendar.

        Parameters
        ----------
        year : int
            Gregorian year.
        month : int
            Gregorian month (0-11).
        day : int
            Gregorian day.

        Returns
        -------
        LocalDate
            The date in this calendar.
        """
        raise NotImplementedError

    def to_gregorian(self, year, month, day, era=None):
        """
        Convert a date in this calendar to a proleptic Gregorian date.

        Parameters
        ----------
        year : int
            Year in this calendar.
        month : int
            Month in this calendar (0-11).
        day : int
            Day in this calendar.
        era : int, optional
            Era index, only used by era based calendars.

        Returns
        -------
        DateTuple
            The Gregorian date. The day may lie outside the month, the
            timestamp arithmetic rolls it over.
        """
        raise NotImplementedError

    def encode(self, year, month, day, era=None):
        """to_gregorian, with months outside 0..11 carried into the year."""
        year += month // 12
        month %= 12
        return self.to_gregorian(year, month, day, era)

    def gregorian_arguments(self, year, month=0, day=1):
        """Gregorian date for the (year, month, day) given to a constructor."""
        return self.encode(year, month, day)

    def reset(self):
        """Drop data cached from the locale data."""

    def __repr__(self):
        return f"{type(self).__name__}()"


class GregorianCalendar(Calendar):
    calendar_type = CalendarType.Gregorian

    def to_local(self, year, month, day):
        return LocalDate(year, month, day)

    def to_gregorian(self, year, month, day, era=None):
        return DateTuple(year, month, day)


class CalendarRegistry:
    """Static dispatch table from calendar type to implementation."""

    def __init__(self):
        self._calendars = {}

    def register(self, calendar_type, impl):
        """Register (or replace) the implementation for a calendar type."""
        self._calendars[CalendarType.coerce(calendar_type)] = impl

    def resolve(self, calendar_type):
        """
        The implementation registered for calendar_type.

        Raises
        ------
        NotRegistered
            No implementation is registered for the calendar type.
        """
        calendar_type = CalendarType.coerce(calendar_type)
        try:
            return self._calendars[calendar_type]
        except KeyError:
            raise NotRegistered(
                f"No calendar registered for {calendar_type.value}") from None

    def types(self):
        return tuple(self._calendars)

    def __contains__(self, calendar_type):
        try:
            return CalendarType.coerce(calendar_type) in self._calendars
        except NotRegistered:
            return False

    def __iter__(self):
        return iter(self._calendars.values())

    def __len__(self):
        return len(self._calendars)
