#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Mar 16 17:45:12 2025

@author: Marcel Hesselberth
"""


from datetime import timedelta, timezone
from unical.context import *
from unical.calendar import CalendarType
from unical.islamic import IslamicCalendar
from unical.week import CalendarWeekNumbering
from unical.errors import NotRegistered
from conftest import fixed_clock, NOW
import pytest


def test_defaults(context):
    assert(context.locale == "en_US")
    assert(context.calendar_type is CalendarType.Gregorian)
    assert(context.calendar_week_numbering is CalendarWeekNumbering.Default)
    assert(context.tzinfo is timezone.utc)
    assert(context.islamic_profile == "A")
    assert(context.now() == NOW * 1000)

def test_preferred_calendar_type():
    assert(CalendarContext(locale="th").calendar_type is \
           CalendarType.Buddhist)
    assert(CalendarContext(locale="fa-IR").calendar_type is \
           CalendarType.Persian)
    context = CalendarContext(locale="ar_SA")
    assert(context.calendar_type is CalendarType.Islamic)
    context.set_locale("ar_EG")
    assert(context.calendar_type is CalendarType.Gregorian)

def test_calendar_type():
    context = CalendarContext(locale="th", calendar_type="Japanese")
    assert(context.calendar_type is CalendarType.Japanese)
    context.calendar_type = CalendarType.Persian
    assert(context.get_calendar().calendar_type is CalendarType.Persian)
    assert(isinstance(context.get_calendar("Islamic"), IslamicCalendar))
    with pytest.raises(NotRegistered):
        CalendarContext(calendar_type="Hebrew")
    with pytest.raises(NotRegistered):
        context.get_calendar("Hebrew")

def test_locale_data_path(write_locale_data):
    filename = write_locale_data({"locale = en_US\n": "locale = de_DE\n"})
    context = CalendarContext(filename)
    assert(context.locale == "de_DE")
    assert(context.weeks.get_week_config() == (1, 4))

def test_get_tzinfo():
    assert(get_tzinfo(None) is timezone.utc)
    assert(get_tzinfo("utc") is timezone.utc)
    tz = timezone(timedelta(hours=2))
    assert(get_tzinfo(tz) is tz)

def test_local_time():
    context = CalendarContext(tz=timezone(timedelta(hours=-5)))
    assert(context.utc_offset(0) == -5 * 3600000)
    assert(context.to_local_time(0) == -5 * 3600000)
    assert(context.from_local_time(0) == 5 * 3600000)
    # Outside the range of datetime
    assert(context.utc_offset(-8.64e15) == -5 * 3600000)

def test_reset():
    context = CalendarContext(clock=fixed_clock)
    eras = context.eras.get_eras("Japanese")
    context.reset()
    assert(context.eras.get_eras("Japanese") is not eras)

def test_default_context():
    context = CalendarContext(locale="th")
    set_default_context(context)
    try:
        assert(default_context() is context)
    finally:
        set_default_context(None)
    assert(default_context() is not context)
    assert(default_context() is default_context())
