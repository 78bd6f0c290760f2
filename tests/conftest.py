#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Tue Mar 18 21:02:10 2025

@author: Marcel Hesselberth
"""

import pytest
from unical.localedata import config_filename
from unical.context import CalendarContext


NOW = 1700000000        # 2023-11-14T22:13:20Z, in the Reiwa era


def fixed_clock():
    return NOW

@pytest.fixture
def context():
    return CalendarContext(clock=fixed_clock)

@pytest.fixture
def write_locale_data(tmp_path):
    """
    Write a copy of the bundled locale data with changes.

    replace maps a line of the bundled file to its replacement.
    """
    def write(replace):
        with open(config_filename, encoding="utf-8") as f:
            text = f.read()
        for old, new in replace.items():
            assert(old in text)
            text = text.replace(old, new)
        filename = tmp_path / "localedata.ini"
        filename.write_text(text, encoding="utf-8")
        return filename
    return write
