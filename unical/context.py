#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Mar 16 15:52:27 2025

@author: Marcel Hesselberth
"""

import os
import time
from threading import Lock
from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo
from loguru import logger
from unical.calendar import CalendarType, CalendarRegistry, GregorianCalendar
from unical.buddhist import BuddhistCalendar
from unical.islamic import IslamicCalendar
from unical.japanese import JapaneseCalendar
from unical.persian import PersianCalendar
from unical.era import EraResolver
from unical.week import CalendarWeekCalculator, check_week_config
from unical.localedata import LocaleData, normalize_locale

CALENDARS = (GregorianCalendar, BuddhistCalendar, IslamicCalendar,
             JapaneseCalendar, PersianCalendar)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
# Range in which datetime can apply time zone offsets (ms)
_MIN_OFFSET_TS = -62135596800000 + 86400000   # 0001-01-02
_MAX_OFFSET_TS = 253402214400000 - 86400000   # 9999-12-30


def get_tzinfo(tz):
    """A tzinfo from a tzinfo or a time zone name."""
    if isinstance(tz, tzinfo):
        return tz
    if tz is None or tz.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(tz)


class CalendarContext:
    """
    Settings, calendars and caches of the calendar functions.

    The context owns the calendar registry with all supported calendars, the
    era resolver and the week calculator. Settings that are not passed are
    read from the [settings] section of the locale data. Cached locale data
    (era tables, week configurations, Islamic customization) is dropped by
    reset(), which set_locale() and set_islamic_profile() call.

    Parameters
    ----------
    locale_data : LocaleData or path, optional
        Locale data, the bundled localedata.ini by default.
    locale : str, optional

    calendar_type : CalendarType or str, optional
        Default calendar type of dates, the preference of the locale if the
        settings do not name one.
    calendar_week_numbering : CalendarWeekNumbering, str, WeekConfig or Mapping

    tz : tzinfo or str, optional
        Time zone of the local (non-UTC) date fields.
    islamic_profile : str, optional
        Profile of the Islamic customization table.
    clock : callable, optional
        Returns the current time in seconds since 1970, time.time by default.
    """

    def __init__(self, locale_data=None, locale=None, calendar_type=None,
                 calendar_week_numbering=None, tz=None,
                 islamic_profile=None, clock=time.time):
        if locale_data is None:
            locale_data = LocaleData()
        elif isinstance(locale_data, (str, os.PathLike)):
            locale_data = LocaleData(locale_data)
        self.locale_data = locale_data
        self.clock = clock
        self.locale = normalize_locale(
            locale or locale_data.setting("locale") or "en_US")
        if calendar_type is None:
            calendar_type = locale_data.setting("calendar_type") or None
        self._calendar_type = None
        if calendar_type is not None:
            self._calendar_type = CalendarType.coerce(calendar_type)
        self.calendar_week_numbering = check_week_config(
            calendar_week_numbering
            or locale_data.setting("calendar_week_numbering")
            or "Default")
        self.tzinfo = get_tzinfo(tz or locale_data.setting("timezone"))
        self.islamic_profile = islamic_profile or \
            locale_data.setting("islamic_profile") or "A"

        self.registry = CalendarRegistry()
        for cls in CALENDARS:
            self.registry.register(cls.calendar_type, cls(self))
        self.eras = EraResolver(locale_data, clock)
        self.weeks = CalendarWeekCalculator(self)

    @property
    def calendar_type(self):
        if self._calendar_type is not None:
            return self._calendar_type
        return CalendarType.coerce(
            self.locale_data.preferred_calendar_type(self.locale))

    @calendar_type.setter
    def calendar_type(self, calendar_type):
        self._calendar_type = CalendarType.coerce(calendar_type)

    def get_calendar(self, calendar_type=None):
        """Calendar implementation, of the default calendar type if None."""
        if calendar_type is None:
            calendar_type = self.calendar_type
        return self.registry.resolve(calendar_type)

    def set_locale(self, locale):
        self.locale = normalize_locale(locale)
        self.reset()

    def set_islamic_profile(self, profile):
        self.islamic_profile = profile
        self.reset()

    def reset(self):
        """Drop everything cached from the locale data."""
        self.eras.reset()
        self.weeks.reset()
        for calendar in self.registry:
            calendar.reset()
        logger.debug(f"Calendar context reset, locale {self.locale}")

    def now(self):
        """Current timestamp in ms."""
        return int(self.clock() * 1000)

    def utc_offset(self, timestamp):
        """
        Offset (ms) of the time zone at a timestamp.

        Outside the range of datetime the offset at the nearest supported
        instant is used.
        """
        if self.tzinfo is timezone.utc:
            return 0
        timestamp = min(max(timestamp, _MIN_OFFSET_TS), _MAX_OFFSET_TS)
        utc = _EPOCH + timedelta(milliseconds=timestamp)
        offset = utc.astimezone(self.tzinfo).utcoffset()
        return int(offset.total_seconds() * 1000)

    def to_local_time(self, timestamp):
        """Shift a UTC timestamp to local wall clock time."""
        return timestamp + self.utc_offset(timestamp)

    def from_local_time(self, local_timestamp):
        """UTC timestamp of a local wall clock time."""
        timestamp = local_timestamp - self.utc_offset(local_timestamp)
        return local_timestamp - self.utc_offset(timestamp)

    def __repr__(self):
        return (f"CalendarContext(locale={self.locale!r}, "
                f"calendar_type={self.calendar_type.value!r})")


_default_context = None
_default_lock = Lock()


def default_context():
    """The process wide context, created from the settings on first use."""
    global _default_context
    context = _default_context
    if context is None:
        context = CalendarContext()
        with _default_lock:
            if _default_context is None:
                _default_context = context
            context = _default_context
    return context


def set_default_context(context):
    """Replace the process wide context, None recreates it on next use."""
    global _default_context
    with _default_lock:
        _default_context = context
