#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Mar 15 10:12:37 2025

@author: Marcel Hesselberth
"""


from unical.islamic import *
from unical.dtmath import JDg, RJDg
from unical.context import CalendarContext
import pytest

CUSTOMIZED = {"entries =\n": "entries =\n"
                             "    A 14440901 20230322\n"
                             "    B 14450101 20230718\n"}


@pytest.fixture
def cal(context):
    return context.get_calendar("Islamic")

@pytest.fixture
def custom_context(write_locale_data):
    return CalendarContext(write_locale_data(CUSTOMIZED))

def test_month_start():
    assert(month_start(1, 0) == 0)
    assert(month_start(1, 1) == 30)
    assert(month_start(1, 2) == 59)
    assert(month_start(2, 0) == 354)
    # 1444 Ramadan, JDN 2460027
    assert(month_start(1444, 8) + 1948440 == 2460027)

def test_parse_date():
    assert(parse_date("14440901") == (1444, 9, 1))

def test_epoch(cal):
    assert(cal.to_local(622, 6, 19) == (1, 0, 1, None))
    assert(cal.to_gregorian(1, 0, 1) == (622, 6, 19))
    assert(cal.to_local(622, 6, 18) == (0, 11, 29, None))
    assert(cal.to_gregorian(0, 11, 29) == (622, 6, 18))

def test_tabular(cal):
    assert(cal.to_local(2023, 6, 19) == (1445, 0, 1, None))
    assert(cal.to_gregorian(1445, 0, 1) == (2023, 6, 19))
    assert(cal.to_local(2023, 2, 23) == (1444, 8, 1, None))
    assert(cal.to_local(2023, 2, 22) == (1444, 7, 29, None))

def test_round_trip(cal):
    for year in range(1, 2000, 13):
        for month in range(12):
            for day in (1, 29):
                gregorian = cal.to_gregorian(year, month, day)
                assert(cal.to_local(*gregorian) == (year, month, day, None))

def test_before_epoch(cal):
    previous = None
    for jdn in range(JDg(0, 1, 1), JDg(622, 7, 19)):
        gy, gm, gd = RJDg(jdn)
        local = cal.to_local(gy, gm - 1, gd)
        assert(1 <= local.day <= 30)
        assert(cal.to_gregorian(*local[:3]) == (gy, gm - 1, gd))
        if previous is not None:
            assert(local[:3] > previous)
        previous = local[:3]
    assert(cal.to_local(401, 10, 25).day <= 30)

def test_no_customization(cal):
    assert(cal.customization == {})

def test_customization(custom_context):
    cal = custom_context.get_calendar("Islamic")
    assert(len(cal.customization) == 1)
    # Ramadan 1444 starts a day early, Sha'ban gets 28 days
    assert(cal.to_local(2023, 2, 22) == (1444, 8, 1, None))
    assert(cal.to_local(2023, 2, 21) == (1444, 7, 28, None))
    assert(cal.to_gregorian(1444, 8, 1) == (2023, 2, 22))
    # Shawwal is not customized, Ramadan gets 31 days
    assert(cal.to_local(2023, 3, 21) == (1444, 8, 31, None))
    assert(cal.to_local(2023, 3, 22) == (1444, 9, 1, None))

def test_profile(custom_context):
    custom_context.set_islamic_profile("B")
    cal = custom_context.get_calendar("Islamic")
    assert(cal.to_gregorian(1444, 8, 1) == (2023, 2, 23))
    assert(cal.to_gregorian(1445, 0, 1) == (2023, 6, 18))
    custom_context.set_islamic_profile("C")
    assert(cal.customization == {})
    assert(cal.to_gregorian(1445, 0, 1) == (2023, 6, 19))
