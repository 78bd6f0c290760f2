#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Mar 10 20:03:52 2025

@author: Marcel Hesselberth

Thin wrapper around numba's nopython jit.

The integer calendar kernels (Gregorian ordinals, Jalaali leap cycles) are
compiled. Set the environment variable NUMBA_DISABLE_JIT=1 to run them as
plain Python, e.g. for debugging.
"""

import numba

numba_acc = not numba.config.DISABLE_JIT


def cnjit(signature_or_function=None, **options):
    """
    Compile a function in nopython mode.

    Used either bare (@cnjit) or with an explicit numba signature
    (@cnjit(signature_or_function='i8(i8, i8)')). An explicit signature
    compiles eagerly at import time.
    """
    options.setdefault("cache", False)
    return numba.njit(signature_or_function, **options)
