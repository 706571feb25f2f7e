# The MIT License (MIT)
#
# Copyright (c) 2022 Yury Gribov
#
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Ordered map from disjoint half-open intervals to values."""

import collections
import logging

from sortedcontainers import SortedKeyList

from intervalmap.common.error import OverlapError
from intervalmap.interval import overlaps, to_interval

logger = logging.getLogger(__name__)

Entry = collections.namedtuple('Entry', ['start', 'end', 'value'])
Entry.__doc__ = "Read-only view of stored interval and its value."

def _start(item):
  return item[0].start

class IntervalMap:
  """Maps pairwise disjoint intervals [start, end) to values.

  Intervals are kept in a sorted store keyed by their starts. Because
  stored intervals never overlap, only the nearest neighbours of a point
  (or of a new interval) need to be examined so all queries are
  logarithmic.

  The map is not synchronized: concurrent readers are fine but mutators
  need exclusive access (insert is a check-then-act sequence)."""

  def __init__(self):
    # Items are (Interval, value) pairs
    self._store = SortedKeyList(key=_start)
    # Bumped on every mutation to invalidate live iterators
    self._version = 0

  def _pred_index(self, k):
    """Index of last interval which starts at or before k (or -1)."""
    return self._store.bisect_key_right(k) - 1

  def _find_containing(self, p):
    i = self._pred_index(p)
    if i < 0:
      return None
    item = self._store[i]
    return item if item[0].contains(p) else None

  def _find_conflict(self, iv):
    """Returns stored interval which prevents insertion of iv."""
    i = self._pred_index(iv.start)
    if i >= 0:
      prev, _ = self._store[i]
      # Equal starts are equal keys even for empty intervals
      if prev.start == iv.start or overlaps(prev, iv):
        return prev
    if i + 1 < len(self._store):
      succ, _ = self._store[i + 1]
      if overlaps(succ, iv):
        return succ
    return None

  def insert(self, key, value):
    """Inserts value for interval (Interval, (start, end) or range).

    Raises OverlapError and leaves map unchanged if interval overlaps
    one of stored intervals."""
    iv = to_interval(key)
    conflict = self._find_conflict(iv)
    if conflict is not None:
      logger.debug(f"insert: {iv} rejected due to {conflict}")
      raise OverlapError(iv, conflict)
    self._store.add((iv, value))
    self._version += 1
    logger.debug(f"insert: added {iv}")

  def get_entry(self, p):
    """Returns entry for interval containing p or None."""
    item = self._find_containing(p)
    if item is None:
      return None
    iv, value = item
    return Entry(iv.start, iv.end, value)

  def get(self, p, default=None):
    item = self._find_containing(p)
    return default if item is None else item[1]

  def contains_key(self, p):
    return self._find_containing(p) is not None

  def __contains__(self, p):
    return self.contains_key(p)

  def _remove_at(self, i):
    iv, value = self._store.pop(i)
    self._version += 1
    logger.debug(f"remove: removed {iv}")
    return value

  def remove_by_start(self, start):
    """Removes interval which starts exactly at start, returns its value."""
    i = self._pred_index(start)
    if i < 0 or self._store[i][0].start != start:
      return None
    return self._remove_at(i)

  def remove_containing_interval(self, p):
    """Removes interval containing p, returns its value."""
    item = self._find_containing(p)
    if item is None:
      return None
    return self.remove_by_start(item[0].start)

  def iter(self):
    """Iterates entries in order of starts.

    Iterator must not be used after map is modified."""
    return self._iter(self._version)

  def _iter(self, version):
    if version != self._version:
      raise RuntimeError("IntervalMap changed during iteration")
    for iv, value in self._store:
      yield Entry(iv.start, iv.end, value)
      if version != self._version:
        raise RuntimeError("IntervalMap changed during iteration")

  def __iter__(self):
    return self.iter()

  def intervals(self):
    return [iv for iv, _ in self._store]

  def __len__(self):
    return len(self._store)

  def check(self):
    """Crashes if intervals are not sorted or overlap."""
    prev = None
    for iv, _ in self._store:
      if prev is not None:
        if not prev.start < iv.start:
          raise RuntimeError(f"unordered intervals {prev} and {iv}")
        if overlaps(prev, iv):
          raise RuntimeError(f"overlapping intervals {prev} and {iv}")
      prev = iv

  def dump(self, p):
    p.writeln(f"IntervalMap ({len(self)} entries)")
    with p:
      for iv, value in self._store:
        p.writeln(f"{iv} -> {value}")

  def __repr__(self):
    items = ', '.join(f"{iv}: {value!r}" for iv, value in self._store)
    return f"IntervalMap({{{items}}})"
