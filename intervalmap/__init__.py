# The MIT License (MIT)
#
# Copyright (c) 2022 Yury Gribov
#
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Ordered maps of disjoint half-open intervals."""

from intervalmap.common.error import IntervalMapError, OverlapError, InvalidIntervalError
from intervalmap.interval import Interval, overlaps, contains
from intervalmap.map import IntervalMap, Entry

__all__ = [
  'IntervalMap',
  'Entry',
  'Interval',
  'overlaps',
  'contains',
  'IntervalMapError',
  'OverlapError',
  'InvalidIntervalError',
]
