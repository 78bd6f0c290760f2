#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Mar 17 20:48:03 2025

@author: Marcel Hesselberth
"""

from math import nan
from functools import total_ordering
from collections import namedtuple
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from loguru import logger
from unical.calendar import CalendarType
from unical.context import default_context
from unical.dtmath import check_timestamp, timestamp_from_fields, \
    fields_from_timestamp
from unical.errors import InvalidTimestamp, CalendarRangeError

CalendarFields = namedtuple("CalendarFields", ["era", "year", "month", "day",
                                               "hours", "minutes", "seconds",
                                               "milliseconds", "day_of_week"])

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MS = timedelta(milliseconds=1)

"""
A date in any of the supported calendars.

A UniversalDate stores one instant, a timestamp in milliseconds since
1970-01-01T00:00:00Z, and a calendar type. All date fields are computed from
the timestamp: the timestamp is split into proleptic Gregorian fields (in
the time zone of the context, or in UTC for the utc_ fields) and the
Gregorian date is converted to the calendar. Setters convert the current
fields to the calendar, replace the given fields, convert back and store the
new timestamp.

Months are 0-based and day_of_week is 0 for Sunday, as in ECMAScript.

An invalid date (NaN or a timestamp outside +-8.64e15 ms) has None for all
fields, and setters leave it invalid.
"""

def _field(name, utc=False):
    def fget(self):
        fields = self._decompose(utc)
        if fields is None:
            return None
        return getattr(fields, name)
    prefix = "UTC " if utc else ""
    return property(fget, doc=f"{prefix}{name.replace('_', ' ')}, None if "
                              f"the date is invalid.")


@total_ordering
class UniversalDate:
    """
    Parameters
    ----------
    timestamp : int or float, optional
        Milliseconds since 1970-01-01T00:00:00Z, now if None.
    calendar_type : CalendarType or str, optional
        Defaults to the calendar type of the context.
    context : CalendarContext, optional
        Defaults to the process wide context.

    Raises
    ------
    NotRegistered
        The calendar type is unknown.
    """

    def __init__(self, timestamp=None, calendar_type=None, context=None):
        self.context = context or default_context()
        if calendar_type is None:
            calendar_type = self.context.calendar_type
        self.calendar_type = CalendarType.coerce(calendar_type)
        self.calendar = self.context.get_calendar(self.calendar_type)
        if timestamp is None:
            timestamp = self.context.now()
        self._timestamp = check_timestamp(timestamp)

    @classmethod
    def now(cls, calendar_type=None, context=None):
        return cls(None, calendar_type, context)

    @classmethod
    def from_datetime(cls, dt, calendar_type=None, context=None):
        """
        Date of a datetime.

        A naive datetime is local time in the time zone of the context.
        """
        context = context or default_context()
        if dt.tzinfo is None:
            local = timestamp_from_fields(dt.year, dt.month - 1, dt.day,
                                          dt.hour, dt.minute, dt.second,
                                          dt.microsecond // 1000)
            timestamp = context.from_local_time(local)
        else:
            timestamp = (dt - _EPOCH) // _MS
        return cls(timestamp, calendar_type, context)

    @classmethod
    def get_instance(cls, value=None, calendar_type=None, context=None):
        """
        Date from a UniversalDate, datetime, timestamp or None (now).

        A UniversalDate is copied into the calendar type, keeping its context
        unless another one is given.
        """
        if isinstance(value, UniversalDate):
            context = context or value.context
            timestamp = value._timestamp
            if timestamp is None:
                timestamp = nan
            return cls(timestamp, calendar_type, context)
        if isinstance(value, datetime):
            return cls.from_datetime(value, calendar_type, context)
        return cls(value, calendar_type, context)

    @classmethod
    def from_fields(cls, year, month=0, day=1, hours=0, minutes=0, seconds=0,
                    milliseconds=0, calendar_type=None, utc=False,
                    context=None):
        """
        Date from the fields of a calendar.

        Fields outside their range carry over into the next larger field. For
        the Japanese calendar year can be a tuple (era, year); a number below
        100 is a year in the current era, a larger one a Gregorian year.

        Parameters
        ----------
        utc : bool
            The time fields are UTC, not local time of the context.
        """
        timestamp = cls.utc(year, month, day, hours, minutes, seconds,
                            milliseconds, calendar_type, context, clip=False)
        context = context or default_context()
        if timestamp is None:
            return cls(nan, calendar_type, context)
        if not utc:
            timestamp = context.from_local_time(timestamp)
        return cls(timestamp, calendar_type, context)

    @classmethod
    def utc(cls, year, month=0, day=1, hours=0, minutes=0, seconds=0,
            milliseconds=0, calendar_type=None, context=None, clip=True):
        """
        Timestamp of UTC calendar fields.

        None if the fields are outside the range of the calendar, or if
        clip is set and the timestamp is outside the valid range.
        """
        context = context or default_context()
        calendar = context.get_calendar(calendar_type)
        try:
            gregorian = calendar.gregorian_arguments(year, month, day)
        except CalendarRangeError as exc:
            logger.debug(f"No timestamp: {exc}")
            return None
        timestamp = timestamp_from_fields(gregorian.year, gregorian.month,
                                          gregorian.day, hours, minutes,
                                          seconds, milliseconds)
        if clip:
            return check_timestamp(timestamp)
        return timestamp

    @property
    def timestamp(self):
        """Milliseconds since 1970-01-01T00:00:00Z, None if invalid."""
        return self._timestamp

    def is_valid(self):
        return self._timestamp is not None

    def _decompose(self, utc):
        if self._timestamp is None:
            return None
        timestamp = self._timestamp
        if not utc:
            timestamp = self.context.to_local_time(timestamp)
        gregorian = fields_from_timestamp(timestamp)
        try:
            local = self.calendar.to_local(gregorian.year, gregorian.month,
                                           gregorian.day)
        except CalendarRangeError:
            return None
        return CalendarFields(local.era, local.year, local.month, local.day,
                              gregorian.hours, gregorian.minutes,
                              gregorian.seconds, gregorian.milliseconds,
                              gregorian.weekday)

    def _get_era(self, utc):
        fields = self._decompose(utc)
        if fields is None:
            return None
        if self.calendar.is_era_based:
            return fields.era
        timestamp = self._timestamp
        if not utc:
            timestamp = self.context.to_local_time(timestamp)
        gregorian = fields_from_timestamp(timestamp)
        return self.context.eras.era_by_date(self.calendar_type,
                                             gregorian.year, gregorian.month,
                                             gregorian.day)

    def get_fields(self, utc=False):
        """All fields including the era, None if the date is invalid."""
        fields = self._decompose(utc)
        if fields is None:
            return None
        return fields._replace(era=self._get_era(utc))

    fields = property(lambda self: self.get_fields())
    utc_fields = property(lambda self: self.get_fields(utc=True))

    year = _field("year")
    month = _field("month")
    day = _field("day")
    hours = _field("hours")
    minutes = _field("minutes")
    seconds = _field("seconds")
    milliseconds = _field("milliseconds")
    day_of_week = _field("day_of_week")

    utc_year = _field("year", utc=True)
    utc_month = _field("month", utc=True)
    utc_day = _field("day", utc=True)
    utc_hours = _field("hours", utc=True)
    utc_minutes = _field("minutes", utc=True)
    utc_seconds = _field("seconds", utc=True)
    utc_milliseconds = _field("milliseconds", utc=True)
    utc_day_of_week = _field("day_of_week", utc=True)

    @property
    def era(self):
        return self._get_era(False)

    @property
    def utc_era(self):
        return self._get_era(True)

    def get_quarter(self, utc=False):
        """Quarter of the year, 0-3."""
        fields = self._decompose(utc)
        if fields is None:
            return None
        return fields.month // 3

    quarter = property(lambda self: self.get_quarter())
    utc_quarter = property(lambda self: self.get_quarter(utc=True))

    def get_day_period(self, utc=False):
        """0 before noon, 1 after."""
        fields = self._decompose(utc)
        if fields is None:
            return None
        return 0 if fields.hours < 12 else 1

    day_period = property(lambda self: self.get_day_period())
    utc_day_period = property(lambda self: self.get_day_period(utc=True))

    def _set(self, utc, **changes):
        fields = self._decompose(utc)
        if fields is None:
            return None
        fields = fields._replace(**{name: value for name, value
                                    in changes.items() if value is not None})
        try:
            gregorian = self.calendar.encode(fields.year, fields.month,
                                             fields.day, fields.era)
        except CalendarRangeError:
            self._timestamp = None
            return None
        timestamp = timestamp_from_fields(gregorian.year, gregorian.month,
                                          gregorian.day, fields.hours,
                                          fields.minutes, fields.seconds,
                                          fields.milliseconds)
        if not utc:
            timestamp = self.context.from_local_time(timestamp)
        self._timestamp = check_timestamp(timestamp)
        return self._timestamp

    def set_timestamp(self, timestamp):
        self._timestamp = check_timestamp(timestamp)
        return self._timestamp

    def set_year(self, year, month=None, day=None, utc=False):
        """
        Set the year, and optionally month and day.

        For era based calendars year can be a tuple (era, year).

        Returns
        -------
        int or None
            The new timestamp.
        """
        era = None
        if isinstance(year, tuple):
            era, year = year
        return self._set(utc, era=era, year=year, month=month, day=day)

    def set_month(self, month, day=None, utc=False):
        return self._set(utc, month=month, day=day)

    def set_day(self, day, utc=False):
        return self._set(utc, day=day)

    def set_hours(self, hours, minutes=None, seconds=None, milliseconds=None,
                  utc=False):
        return self._set(utc, hours=hours, minutes=minutes, seconds=seconds,
                         milliseconds=milliseconds)

    def set_minutes(self, minutes, seconds=None, milliseconds=None,
                    utc=False):
        return self._set(utc, minutes=minutes, seconds=seconds,
                         milliseconds=milliseconds)

    def set_seconds(self, seconds, milliseconds=None, utc=False):
        return self._set(utc, seconds=seconds, milliseconds=milliseconds)

    def set_milliseconds(self, milliseconds, utc=False):
        return self._set(utc, milliseconds=milliseconds)

    def set_era(self, era, utc=False):
        """
        Set the era, keeping the year within the era.

        Only era based calendars (Japanese) store the era in their dates.
        In other calendars the era follows from the year and is not set.
        """
        if not self.calendar.is_era_based:
            logger.debug(f"{self.calendar_type.value} dates do not store "
                         f"an era, set_era({era}) ignored")
            return self._timestamp
        return self._set(utc, era=era)

    def get_week(self, locale=None, numbering=None, utc=False):
        """
        Calendar week of the date.

        Parameters
        ----------
        locale : str, optional
            Defaults to the locale of the context.
        numbering : CalendarWeekNumbering, str, WeekConfig or Mapping
            Defaults to the week numbering of the context.

        Raises
        ------
        InvalidWeekConfig
            The numbering is not valid, also for an invalid date.

        Returns
        -------
        CalendarWeek or None
            None if the date is invalid.
        """
        weeks = self.context.weeks
        weeks.get_week_config(numbering, locale)
        fields = self._decompose(utc)
        if fields is None:
            return None
        return weeks.get_week_by_date(self.calendar_type, fields.year,
                                      fields.month, fields.day, locale,
                                      numbering, fields.era)

    def set_week(self, week, locale=None, numbering=None, utc=False):
        """
        Move the date to the first day of a calendar week.

        Parameters
        ----------
        week : CalendarWeek, (year, week), Mapping or int
            A week without a year is a week of the current year.

        Returns
        -------
        int or None
            The new timestamp.
        """
        weeks = self.context.weeks
        weeks.get_week_config(numbering, locale)
        fields = self._decompose(utc)
        if fields is None:
            return None
        if isinstance(week, Mapping):
            year, week = week.get("year"), week["week"]
        elif isinstance(week, tuple):
            year, week = week
        else:
            year = None
        if year is None:
            year = fields.year
        date = weeks.get_first_date_of_week(self.calendar_type, year, week,
                                            locale, numbering, fields.era)
        return self._set(utc, era=date.era, year=date.year, month=date.month,
                         day=date.day)

    def get_utc_week(self, locale=None, numbering=None):
        return self.get_week(locale, numbering, utc=True)

    def set_utc_week(self, week, locale=None, numbering=None):
        return self.set_week(week, locale, numbering, utc=True)

    def to_calendar(self, calendar_type):
        """The same instant in another calendar."""
        return self.get_instance(self, calendar_type)

    def to_datetime(self):
        """
        Aware datetime in the time zone of the context.

        Raises
        ------
        InvalidTimestamp
            The date is invalid.
        OverflowError
            The date is outside the range of datetime.
        """
        if self._timestamp is None:
            raise InvalidTimestamp("The date is invalid")
        dt = _EPOCH + timedelta(milliseconds=self._timestamp)
        return dt.astimezone(self.context.tzinfo)

    def __eq__(self, other):
        if not isinstance(other, UniversalDate):
            return NotImplemented
        return self._timestamp is not None and \
            self._timestamp == other._timestamp

    def __lt__(self, other):
        if not isinstance(other, UniversalDate):
            return NotImplemented
        if self._timestamp is None or other._timestamp is None:
            return False
        return self._timestamp < other._timestamp

    def __hash__(self):
        return hash(self._timestamp)

    def __repr__(self):
        fields = self._decompose(utc=True)
        if fields is None:
            return f"UniversalDate(invalid, {self.calendar_type.value})"
        era = "" if fields.era is None else f"{fields.era}:"
        return (f"UniversalDate({era}{fields.year}-{fields.month + 1:02d}-"
                f"{fields.day:02d}T{fields.hours:02d}:{fields.minutes:02d}:"
                f"{fields.seconds:02d}.{fields.milliseconds:03d}Z, "
                f"{self.calendar_type.value})")
