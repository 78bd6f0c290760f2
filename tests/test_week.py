#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Mar 16 14:31:50 2025

@author: Marcel Hesselberth
"""


from unical.week import *
from unical.dtmath import timestamp_from_fields
from unical.calendar import LocalDate
from unical.context import CalendarContext
from unical.errors import InvalidWeekConfig, InvalidTimestamp
import pytest

ISO = "ISO_8601"


@pytest.fixture
def weeks(context):
    return context.weeks

def test_check_week_config():
    assert(check_week_config("ISO_8601") is CalendarWeekNumbering.ISO_8601)
    assert(check_week_config(CalendarWeekNumbering.MiddleEastern) is \
           CalendarWeekNumbering.MiddleEastern)
    assert(check_week_config({"first_day_of_week": 1,
                              "minimal_days_in_first_week": 4}) == (1, 4))
    assert(check_week_config(WeekConfig(0, 1)) == (0, 1))
    for numbering in ("Bogus", 42, None, {"first_day_of_week": 1},
                      {"first_day_of_week": 7,
                       "minimal_days_in_first_week": 1},
                      {"first_day_of_week": "1",
                       "minimal_days_in_first_week": 1},
                      WeekConfig(1, 0), WeekConfig(1, 8)):
        with pytest.raises(InvalidWeekConfig):
            check_week_config(numbering)

def test_get_week_config(weeks):
    assert(weeks.get_week_config(ISO) == (1, 4))
    assert(weeks.get_week_config("MiddleEastern") == (6, 1))
    assert(weeks.get_week_config("WesternTraditional") == (0, 1))
    assert(weeks.get_week_config() == (0, 1))
    assert(weeks.get_week_config("Default", "de_DE") == (1, 4))
    assert(weeks.get_week_config("Default", "fa") == (6, 1))
    assert(weeks.get_week_config("Default", "xx") == (1, 1))

def test_is_split_week(weeks):
    assert(weeks.is_split_week() is True)
    assert(weeks.is_split_week("WesternTraditional", "en_US") is True)
    assert(weeks.is_split_week(ISO, "en_US") is False)
    assert(weeks.is_split_week("Default", "en_GB") is False)
    assert(weeks.is_split_week("WesternTraditional", "de") is False)

def test_first_day_of_first_week(weeks):
    first = weeks.first_day_of_first_week("Gregorian", 2015, numbering=ISO)
    assert(first == timestamp_from_fields(2014, 11, 29))
    first = weeks.first_day_of_first_week("Gregorian", 2016, numbering=ISO)
    assert(first == timestamp_from_fields(2016, 0, 4))
    first = weeks.first_day_of_first_week("Gregorian", 2022)
    assert(first == timestamp_from_fields(2021, 11, 26))
    with pytest.raises(InvalidTimestamp):
        weeks.first_day_of_first_week("Gregorian", 300000)

def test_iso_weeks(weeks):
    week = weeks.get_week_by_date("Gregorian", 2016, 0, 1, numbering=ISO)
    assert(week == CalendarWeek(2015, 52))
    assert(week.number == 53)
    assert(weeks.get_week_by_date("Gregorian", 2015, 11, 28,
                                  numbering=ISO) == (2015, 52))
    assert(weeks.get_week_by_date("Gregorian", 2016, 0, 4,
                                  numbering=ISO) == (2016, 0))
    assert(weeks.get_week_by_date("Gregorian", 2014, 11, 29,
                                  numbering=ISO) == (2015, 0))

def test_locale_weeks(weeks):
    # de: first day Monday, 4 days in the first week
    assert(weeks.get_week_by_date("Gregorian", 2021, 0, 1,
                                  locale="de") == (2020, 52))
    explicit = {"first_day_of_week": 1, "minimal_days_in_first_week": 4}
    assert(weeks.get_week_by_date("Gregorian", 2021, 0, 1,
                                  numbering=explicit) == (2020, 52))

def test_split_weeks(weeks):
    assert(weeks.get_week_by_date("Gregorian", 2023, 0, 1) == (2023, 0))
    assert(weeks.get_week_by_date("Gregorian", 2022, 11, 31) == (2022, 52))
    assert(weeks.get_week_by_date("Gregorian", 2024, 0, 1) == (2024, 0))
    assert(weeks.get_first_date_of_week("Gregorian", 2022, 0) == \
           LocalDate(2022, 0, 1))
    assert(weeks.get_first_date_of_week("Gregorian", 2022, 1) == \
           LocalDate(2022, 0, 2))

def test_get_first_date_of_week(weeks):
    assert(weeks.get_first_date_of_week("Gregorian", 2016, 0,
                                        numbering=ISO) == (2016, 0, 4, None))
    assert(weeks.get_first_date_of_week("Gregorian", 2015, 52,
                                        numbering=ISO) == (2015, 11, 28, None))
    assert(weeks.first_date_of_week_containing(
        "Gregorian", 2016, 0, 1, numbering=ISO) == (2015, 11, 28, None))

def test_first_date_of_week_inverse(weeks):
    years = {"Gregorian": range(1990, 2041), "Islamic": range(1410, 1461),
             "Persian": range(1370, 1421)}
    for numbering in CalendarWeekNumbering:
        for locale in ("en_US", "de", "en_GB"):
            for calendar_type, year_range in years.items():
                for year in year_range:
                    count = weeks.weeks_in_year(calendar_type, year, locale,
                                                numbering)
                    for week in range(count):
                        date = weeks.get_first_date_of_week(
                            calendar_type, year, week, locale, numbering)
                        found = weeks.get_week_by_date(
                            calendar_type, date.year, date.month, date.day,
                            locale, numbering)
                        assert(found == (year, week))
                        assert(0 <= found.week <= 53)

def test_weeks_in_year(weeks):
    assert(weeks.weeks_in_year("Gregorian", 2015, numbering=ISO) == 53)
    assert(weeks.weeks_in_year("Gregorian", 2016, numbering=ISO) == 52)
    assert(weeks.weeks_in_year("Gregorian", 2022) == 53)

def test_islamic_weeks(weeks):
    # 1 Muharram 1445 is Wednesday 2023-07-19
    assert(weeks.get_week_by_date("Islamic", 1445, 0, 1,
                                  numbering=ISO) == (1445, 0))
    assert(weeks.get_first_date_of_week("Islamic", 1445, 0,
                                        numbering=ISO) == (1444, 11, 28, None))

def test_japanese_weeks(weeks):
    week = weeks.get_week_by_date("Japanese", 1, 4, 1, numbering=ISO, era=236)
    assert(week == (1, 17))
    date = weeks.get_first_date_of_week("Japanese", 1, 17, numbering=ISO,
                                        era=236)
    assert(date == (31, 3, 29, 235))

def test_first_date_of_month(weeks):
    assert(weeks.first_date_of_month("Islamic", 1445, 12) == \
           (1446, 0, 1, None))
    assert(weeks.first_date_of_month("Gregorian", 2024, -1) == \
           (2023, 11, 1, None))

def test_invalid_numbering(weeks):
    with pytest.raises(InvalidWeekConfig):
        weeks.get_week_by_date("Gregorian", 2024, 0, 1, numbering="Bogus")
    with pytest.raises(InvalidWeekConfig):
        CalendarContext(calendar_week_numbering="Bogus")

def test_reset(weeks):
    config = weeks.get_week_config("Default", "de")
    weeks.reset()
    assert(weeks.get_week_config("Default", "de") == config)
