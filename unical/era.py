#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Mar 15 16:40:12 2025

@author: Marcel Hesselberth
"""

import time
from threading import Lock
from collections import namedtuple
from loguru import logger
from unical.calendar import CalendarType
from unical.dtmath import timestamp_from_fields, fields_from_timestamp
from unical.errors import EraNotFound

EraBoundary = namedtuple("EraBoundary", ["timestamp", "year", "month", "day"])
Era = namedtuple("Era", ["start", "end"])

DEFAULT_ERA_START = "1-1-1"


def parse_date_string(date_string):
    """
    Parse an era boundary "y-m-d", "-y-m-d" for negative years.

    Returns
    -------
    EraBoundary
        UTC timestamp of the day and the date with a 0-based month.
    """
    parts = date_string.split("-")
    if parts[0] == "":
        year = -int(parts[1])
        month = int(parts[2]) - 1
        day = int(parts[3])
    else:
        year = int(parts[0])
        month = int(parts[1]) - 1
        day = int(parts[2])
    timestamp = timestamp_from_fields(year, month, day)
    # Lunisolar days past the end of a Gregorian month roll over
    year, month, day = fields_from_timestamp(timestamp)[:3]
    return EraBoundary(timestamp, year, month, day)


class EraResolver:
    """
    Era tables per calendar type and the era of a date.

    The tables are read from the locale data on first use and cached until
    reset() is called (e.g. after a locale change).
    """

    def __init__(self, locale_data, clock=time.time):
        self.locale_data = locale_data
        self.clock = clock
        self._eras = {}
        self._lock = Lock()

    def reset(self):
        with self._lock:
            self._eras = {}
        logger.debug("Era tables reset")

    def get_eras(self, calendar_type):
        """
        The era table of a calendar type.

        Returns
        -------
        tuple
            Era(start, end) records with EraBoundary or None boundaries,
            None where the table has no era for an index.
        """
        calendar_type = CalendarType.coerce(calendar_type)
        eras = self._eras.get(calendar_type)
        if eras is None:
            eras = self._load(calendar_type)
            with self._lock:
                eras = self._eras.setdefault(calendar_type, eras)
        return eras

    def _load(self, calendar_type):
        descriptors = list(self.locale_data.get_era_dates(calendar_type.value))
        if not descriptors:
            descriptors = [None]
        if descriptors[0] is None:
            descriptors[0] = (DEFAULT_ERA_START, None)
        eras = []
        for descriptor in descriptors:
            if descriptor is None:
                eras.append(None)
                continue
            start, end = descriptor
            eras.append(Era(parse_date_string(start) if start else None,
                            parse_date_string(end) if end else None))
        logger.debug(f"Loaded {len(eras)} eras for {calendar_type.value}")
        return tuple(eras)

    def era_by_date(self, calendar_type, year, month, day):
        """
        The era of a proleptic Gregorian date.

        The table is scanned from the last era to the first. The first era
        that started on or before the date, or that ends after it, is the
        era of the date.

        Parameters
        ----------
        calendar_type : CalendarType or str

        year : int

        month : int
            0-11
        day : int


        Raises
        ------
        EraNotFound
            No era contains the date.

        Returns
        -------
        int
            Index of the era.
        """
        eras = self.get_eras(calendar_type)
        timestamp = timestamp_from_fields(year, month, day)
        for i in range(len(eras) - 1, -1, -1):
            era = eras[i]
            if era is None:
                continue
            if era.start and timestamp >= era.start.timestamp:
                return i
            if era.end and timestamp < era.end.timestamp:
                return i
        raise EraNotFound(f"No {CalendarType.coerce(calendar_type).value} "
                          f"era for {year}-{month + 1}-{day}")

    def era_start_date(self, calendar_type, era):
        """
        Start of an era.

        A missing or unknown era index falls back to era 0.

        Returns
        -------
        EraBoundary or None
            None if the era has no start.
        """
        eras = self.get_eras(calendar_type)
        record = None
        if era is not None and 0 <= era < len(eras):
            record = eras[era]
        if record is None:
            record = eras[0]
        return record.start

    def current_era(self, calendar_type):
        """Era of today (UTC)."""
        now = fields_from_timestamp(int(self.clock() * 1000))
        return self.era_by_date(calendar_type, now.year, now.month, now.day)
