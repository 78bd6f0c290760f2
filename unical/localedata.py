#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Mar 15 14:06:51 2025

@author: Marcel Hesselberth
"""

import os
from collections import namedtuple
from configparser import ConfigParser


path, ext = os.path.splitext(__file__)
config_filename = f"{path}.ini"

EraDescriptor = namedtuple("EraDescriptor", ["start", "end"])
IslamicCustomizing = namedtuple("IslamicCustomizing",
                                ["date_format", "islamic_month_start",
                                 "greg_date"])

ROOT = "root"


def normalize_locale(locale):
    """en-US, en_us -> en_US"""
    parts = locale.replace("-", "_").split("_")
    if len(parts) == 1:
        return parts[0].lower()
    return f"{parts[0].lower()}_{parts[1].upper()}"


class LocaleData:
    """
    Locale and calendar data from an ini file.

    Sections:
        [settings]             defaults of the calendar context
        [locale:<locale>]      week data and preferred calendar type
        [eras:<calendar type>] era boundaries, <index>.start/<index>.end
        [islamic:customizing]  entries: <profile> <YYYYMMDD> <YYYYMMDD>
    Values of a locale that does not define them are taken from its language
    (en_US -> en) and then from [locale:root].
    """

    def __init__(self, filename=config_filename):
        self.filename = filename
        self.config = ConfigParser(interpolation=None)
        if not self.config.read(filename, encoding="utf-8"):
            raise FileNotFoundError(f"{filename}")

    def setting(self, key, fallback=None):
        return self.config.get("settings", key, fallback=fallback)

    def _locale_sections(self, locale):
        locale = normalize_locale(locale)
        candidates = [locale]
        if "_" in locale:
            candidates.append(locale.split("_")[0])
        candidates.append(ROOT)
        for candidate in candidates:
            section = f"locale:{candidate}"
            if self.config.has_section(section):
                yield self.config[section]

    def _locale_value(self, locale, key):
        for section in self._locale_sections(locale):
            if key in section:
                return section
        raise KeyError(f"{key} not defined for locale {locale} "
                       f"in {self.filename}")

    def first_day_of_week(self, locale):
        """First day of the week, 0 is Sunday."""
        key = "first_day_of_week"
        return self._locale_value(locale, key).getint(key)

    def minimal_days_in_first_week(self, locale):
        key = "minimal_days_in_first_week"
        return self._locale_value(locale, key).getint(key)

    def first_day_starts_first_week(self, locale):
        """True if January 1 always lies in the first week of its year."""
        key = "first_day_starts_first_week"
        return self._locale_value(locale, key).getboolean(key)

    def preferred_calendar_type(self, locale):
        key = "calendar_type"
        return self._locale_value(locale, key).get(key)

    def locales(self):
        return [s.split(":", 1)[1] for s in self.config.sections()
                if s.startswith("locale:")]

    def get_era_dates(self, calendar_type):
        """
        Era boundaries of a calendar type.

        Returns
        -------
        list
            EraDescriptor(start, end) with "y-m-d" strings or None, indexed
            by era. Indices without data hold None.
        """
        section = f"eras:{calendar_type}"
        if not self.config.has_section(section):
            return []
        eras = {}
        for key, value in self.config[section].items():
            index, boundary = key.split(".")
            eras.setdefault(int(index), {})[boundary] = value.strip()
        if not eras:
            return []
        result = [None] * (max(eras) + 1)
        for index, era in eras.items():
            result[index] = EraDescriptor(era.get("start"), era.get("end"))
        return result

    def get_custom_islamic_calendar_data(self):
        """Month start customizations of the Islamic calendar, all profiles."""
        value = self.config.get("islamic:customizing", "entries", fallback="")
        entries = []
        for line in value.splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            date_format, islamic_month_start, greg_date = line.split()
            entries.append(IslamicCustomizing(date_format, islamic_month_start,
                                              greg_date))
        return entries
