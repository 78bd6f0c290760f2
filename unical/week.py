#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Mar 16 11:23:38 2025

@author: Marcel Hesselberth
"""

from enum import Enum
from threading import Lock
from collections import namedtuple
from collections.abc import Mapping
from loguru import logger
from unical.constants import MS_PER_WEEK
from unical.dtmath import timestamp_from_fields, fields_from_timestamp, \
    weekday_from_timestamp, add_days, is_valid_timestamp
from unical.errors import InvalidWeekConfig, InvalidTimestamp
from unical.localedata import normalize_locale

WeekConfig = namedtuple("WeekConfig", ["first_day_of_week",
                                       "minimal_days_in_first_week"])

"""
Calendar weeks.

A week numbering scheme fixes the first day of the week (0 is Sunday) and
the minimal number of days of the new year in its first week. Weeks are
counted from 0: the first week of a year is week 0, the last one week 51,
52 or 53. The ISO week 53 of 2015 is CalendarWeek(2015, 52), its number
attribute is 53.

In locales where January 1 always starts the first week (en_US) the weeks
of the Default and WesternTraditional schemes are split at the turn of the
year: January 1 is in week 0 of its year even if the week started in
December.
"""


class CalendarWeekNumbering(Enum):
    Default = "Default"
    ISO_8601 = "ISO_8601"
    MiddleEastern = "MiddleEastern"
    WesternTraditional = "WesternTraditional"


class CalendarWeek(namedtuple("CalendarWeek", ["year", "week"])):
    __slots__ = ()

    @property
    def number(self):
        """The 1-based week number, as printed in calendars."""
        return self.week + 1


week_configuration_values = {
    CalendarWeekNumbering.ISO_8601: WeekConfig(1, 4),
    CalendarWeekNumbering.MiddleEastern: WeekConfig(6, 1),
    CalendarWeekNumbering.WesternTraditional: WeekConfig(0, 1),
}

SPLIT_WEEK_SCHEMES = (CalendarWeekNumbering.Default,
                      CalendarWeekNumbering.WesternTraditional)


def _check_fields(first_day_of_week, minimal_days_in_first_week):
    for value in first_day_of_week, minimal_days_in_first_week:
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidWeekConfig(
                "Week config requires first_day_of_week and "
                "minimal_days_in_first_week to be integers")
    if not 0 <= first_day_of_week <= 6:
        raise InvalidWeekConfig("first_day_of_week must be in 0..6",
                                first_day_of_week)
    if not 1 <= minimal_days_in_first_week <= 7:
        raise InvalidWeekConfig("minimal_days_in_first_week must be in 1..7",
                                minimal_days_in_first_week)
    return WeekConfig(first_day_of_week, minimal_days_in_first_week)

def check_week_config(numbering):
    """
    Validate a week numbering.

    Parameters
    ----------
    numbering : CalendarWeekNumbering, str, WeekConfig or Mapping
        A scheme, the name of a scheme, or an explicit configuration with
        first_day_of_week and minimal_days_in_first_week.

    Raises
    ------
    InvalidWeekConfig
        Unknown scheme, missing or out of range values.

    Returns
    -------
    CalendarWeekNumbering or WeekConfig
    """
    if isinstance(numbering, CalendarWeekNumbering):
        return numbering
    if isinstance(numbering, WeekConfig):
        return _check_fields(*numbering)
    if isinstance(numbering, Mapping):
        try:
            return _check_fields(numbering["first_day_of_week"],
                                 numbering["minimal_days_in_first_week"])
        except KeyError:
            raise InvalidWeekConfig(
                "Week config requires first_day_of_week and "
                "minimal_days_in_first_week to be set") from None
    if isinstance(numbering, str):
        try:
            return CalendarWeekNumbering(numbering)
        except ValueError:
            pass
    raise InvalidWeekConfig(
        f"Illegal calendar week numbering: {numbering!r}")


class CalendarWeekCalculator:
    """
    Calendar weeks of dates in any calendar of a context.

    Dates are local dates of the calendar (0-based month). The week year is
    the local year; for era based calendars an era can be passed, the
    current era is used otherwise.
    """

    def __init__(self, context):
        self.context = context
        self._configs = {}
        self._lock = Lock()

    def reset(self):
        with self._lock:
            self._configs = {}
        logger.debug("Week configurations reset")

    def _numbering(self, numbering):
        if numbering is None:
            numbering = self.context.calendar_week_numbering
        return check_week_config(numbering)

    def _locale(self, locale):
        return normalize_locale(locale or self.context.locale)

    def get_week_config(self, numbering=None, locale=None):
        """
        First day of the week and minimal days in the first week.

        The Default scheme takes them from the locale data of the locale.
        """
        numbering = self._numbering(numbering)
        if isinstance(numbering, WeekConfig):
            return numbering
        if numbering is not CalendarWeekNumbering.Default:
            return week_configuration_values[numbering]
        locale = self._locale(locale)
        config = self._configs.get(locale)
        if config is None:
            locale_data = self.context.locale_data
            config = _check_fields(
                locale_data.first_day_of_week(locale),
                locale_data.minimal_days_in_first_week(locale))
            with self._lock:
                config = self._configs.setdefault(locale, config)
            logger.debug(f"Week configuration of {locale}: {config}")
        return config

    def is_split_week(self, numbering=None, locale=None):
        numbering = self._numbering(numbering)
        if numbering not in SPLIT_WEEK_SCHEMES:
            return False
        return self.context.locale_data.first_day_starts_first_week(
            self._locale(locale))

    def _timestamp(self, calendar, year, month, day, era):
        gregorian = calendar.encode(year, month, day, era)
        return timestamp_from_fields(*gregorian)

    def _local_date(self, calendar, timestamp):
        gregorian = fields_from_timestamp(timestamp)
        return calendar.to_local(gregorian.year, gregorian.month,
                                 gregorian.day)

    def _first_day(self, calendar, year, config, era):
        timestamp = self._timestamp(calendar, year, 0, 1, era)
        if not is_valid_timestamp(timestamp):
            raise InvalidTimestamp(
                "Could not determine the first day of the week, "
                "the date is invalid")
        day_count = 7
        while weekday_from_timestamp(timestamp) != config.first_day_of_week:
            timestamp = add_days(timestamp, -1)
            day_count -= 1
        # Too few days of the year in this week, take the next one
        if day_count < config.minimal_days_in_first_week:
            timestamp = add_days(timestamp, 7)
        return timestamp

    def first_day_of_first_week(self, calendar_type, year, locale=None,
                                numbering=None, era=None):
        """
        UTC timestamp of the first day of week 0 of a year.

        Starting from January 1 (of the calendar), step back to the first day
        of the week. If that leaves fewer than minimal_days_in_first_week
        days of the new year in the week, week 0 starts a week later.
        """
        calendar = self.context.get_calendar(calendar_type)
        config = self.get_week_config(numbering, locale)
        return self._first_day(calendar, year, config, era)

    def get_week_by_date(self, calendar_type, year, month, day, locale=None,
                         numbering=None, era=None):
        """
        Calendar week of a date.

        Parameters
        ----------
        calendar_type : CalendarType or str

        year : int
            Local year.
        month : int
            Local month (0-11).
        day : int
            Local day.
        locale : str, optional
            Defaults to the locale of the context.
        numbering : CalendarWeekNumbering, str, WeekConfig or Mapping
            Defaults to the week numbering of the context.
        era : int, optional
            Era of era based calendars.

        Raises
        ------
        InvalidWeekConfig
            The numbering is not valid.

        Returns
        -------
        CalendarWeek
            The week year, which can differ from year around January 1, and
            the 0-based week.
        """
        calendar = self.context.get_calendar(calendar_type)
        config = self.get_week_config(numbering, locale)
        first_day = self._first_day(calendar, year, config, era)
        date = self._timestamp(calendar, year, month, day, era)
        if self.is_split_week(numbering, locale):
            week = (date - first_day) // MS_PER_WEEK
            return CalendarWeek(year, week)
        next_first_day = self._first_day(calendar, year + 1, config, era)
        if date >= next_first_day:
            return CalendarWeek(year + 1, 0)
        if date < first_day:
            last_first_day = self._first_day(calendar, year - 1, config, era)
            week = (date - last_first_day) // MS_PER_WEEK
            return CalendarWeek(year - 1, week)
        return CalendarWeek(year, (date - first_day) // MS_PER_WEEK)

    def get_first_date_of_week(self, calendar_type, year, week, locale=None,
                               numbering=None, era=None):
        """
        First day of a calendar week.

        In split weeks, week 0 starts on January 1.

        Returns
        -------
        LocalDate
            The local date, with the era for era based calendars.
        """
        calendar = self.context.get_calendar(calendar_type)
        config = self.get_week_config(numbering, locale)
        first_day = self._first_day(calendar, year, config, era)
        if self.is_split_week(numbering, locale) and week == 0:
            local = self._local_date(calendar, first_day)
            if local.year < year:
                return self._local_date(
                    calendar, self._timestamp(calendar, year, 0, 1, era))
        return self._local_date(calendar, add_days(first_day, 7 * week))

    def first_date_of_week_containing(self, calendar_type, year, month, day,
                                      locale=None, numbering=None, era=None):
        """First day of the calendar week of a date."""
        week = self.get_week_by_date(calendar_type, year, month, day, locale,
                                     numbering, era)
        return self.get_first_date_of_week(calendar_type, week.year,
                                           week.week, locale, numbering, era)

    def weeks_in_year(self, calendar_type, year, locale=None, numbering=None,
                      era=None):
        """Number of calendar weeks of a week year."""
        calendar = self.context.get_calendar(calendar_type)
        config = self.get_week_config(numbering, locale)
        first_day = self._first_day(calendar, year, config, era)
        if self.is_split_week(numbering, locale):
            last_day = add_days(self._timestamp(calendar, year + 1, 0, 1, era),
                                -1)
            return (last_day - first_day) // MS_PER_WEEK + 1
        next_first_day = self._first_day(calendar, year + 1, config, era)
        return (next_first_day - first_day) // MS_PER_WEEK

    def first_date_of_month(self, calendar_type, year, month, era=None):
        """Day 1 of a month, months outside 0..11 carry into the year."""
        calendar = self.context.get_calendar(calendar_type)
        return self._local_date(calendar,
                                self._timestamp(calendar, year, month, 1, era))
