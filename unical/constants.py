#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Mar 10 19:50:37 2025

@author: Marcel Hesselberth
"""

import numpy as np

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR   = 60 * MS_PER_MINUTE
MS_PER_DAY    = 24 * MS_PER_HOUR
MS_PER_WEEK   = 7 * MS_PER_DAY
MAX_TIMESTAMP = 100000000 * MS_PER_DAY   # +-8.64e15 ms, the ECMAScript range

JDN_ALIGN       = 1721425      # JDN of the day before 0001-01-01 (proleptic)
UNIX_EPOCH_JDN  = 2440588      # 1970-01-01
UNIX_EPOCH_ORD  = 719163       # Gregorian ordinal of 1970-01-01
UNIX_EPOCH_WDAY = 4            # Thursday

ISLAMIC_EPOCH_JDN  = 1948440       # 622-07-19 (proleptic Gregorian)
SYNODIC_MONTH      = 29.530588853  # days

BUDDHIST_NEW_YEAR_REFORM = 1941    # from 1941 on the year starts January 1
BUDDHIST_OLD_NEW_YEAR_MONTH = 3    # April, 0-based
BUDDHIST_ERA = 1                   # era 0 is before the Buddhist era

JAPANESE_ERA_YEAR_LIMIT = 100      # smaller years count in the current era

# Jalaali years where the 33 year leap cycle is broken
JALAALI_BREAKS = np.array([-61, 9, 38, 199, 426, 686, 756, 818, 1111, 1181,
                           1210, 1635, 2060, 2097, 2192, 2262, 2324, 2394,
                           2456, 3178], dtype=np.int64)
JALAALI_MIN_YEAR = -61
JALAALI_MAX_YEAR = 3177
