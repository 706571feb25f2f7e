# The MIT License (MIT)
#
# Copyright (c) 2022 Yury Gribov
#
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.
#
# This file contains the key type of interval maps: a half-open
# interval [start, end) which is ordered (and compared) by start only.

import functools

from intervalmap.common.error import InvalidIntervalError

@functools.total_ordering
class Interval:
  """Half-open interval [start, end).

  Equality, ordering and hash look only at start so that intervals
  can be used as keys of an ordered store keyed by start."""

  __slots__ = ('start', 'end')

  def __init__(self, start, end):
    if end < start:
      raise InvalidIntervalError(start, end)
    self.start = start
    self.end = end

  @property
  def length(self):
    return self.end - self.start

  def is_empty(self):
    return not self.start < self.end

  def overlaps(self, iv):
    return overlaps(self, iv)

  def contains(self, p):
    return contains(self, p)

  def __eq__(self, iv):
    if not isinstance(iv, Interval):
      return NotImplemented
    return self.start == iv.start

  def __lt__(self, iv):
    if not isinstance(iv, Interval):
      return NotImplemented
    return self.start < iv.start

  def __hash__(self):
    return hash(self.start)

  def __iter__(self):
    yield self.start
    yield self.end

  def __repr__(self):
    return '[%s, %s)' % (self.start, self.end)

def overlaps(a, b):
  """Checks whether two half-open intervals share a point."""
  # Earlier interval is the first one, on ties the second argument
  if a.start < b.start:
    e1, s2 = a.end, b.start
  else:
    e1, s2 = b.end, a.start
  return s2 < e1

def contains(iv, p):
  """Checks whether point belongs to half-open interval."""
  return iv.start <= p < iv.end

def to_interval(x):
  """Converts interval, (start, end) pair or range to Interval."""
  if isinstance(x, Interval):
    return x
  if isinstance(x, range):
    if x.step != 1:
      raise TypeError(f"range with step {x.step} is not an interval")
    return Interval(x.start, x.stop)
  if isinstance(x, tuple) and len(x) == 2:
    return Interval(*x)
  raise TypeError(f"cannot convert {type(x).__name__} to interval")
