# The MIT License (MIT)
#
# Copyright (c) 2022 Yury Gribov
#
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

import pytest
import datetime

from intervalmap import interval as I
from intervalmap.common.error import InvalidIntervalError

d1 = datetime.date(2020, 1, 1)
d2 = datetime.date(2020, 1, 2)
d3 = datetime.date(2020, 1, 3)

def test_create():
  with pytest.raises(InvalidIntervalError):
    I.Interval(2, 1)
  with pytest.raises(ValueError):
    I.Interval(d2, d1)
  iv = I.Interval(3, 3)
  assert iv.is_empty() and iv.length == 0
  assert I.Interval(d1, d3).length == datetime.timedelta(days=2)

def test_contains():
  iv = I.Interval(0, 10)
  assert iv.contains(0)
  assert iv.contains(9)
  assert not iv.contains(10)
  assert not iv.contains(-1)
  assert I.contains(I.Interval(d1, d2), d1)
  assert not I.contains(I.Interval(d1, d2), d2)

def test_contains_empty():
  assert not I.Interval(5, 5).contains(5)

def test_overlaps():
  assert I.Interval(0, 10).overlaps(I.Interval(5, 15))
  assert I.Interval(5, 15).overlaps(I.Interval(0, 10))
  assert I.Interval(0, 10).overlaps(I.Interval(2, 3))
  assert I.Interval(0, 10).overlaps(I.Interval(0, 10))
  assert not I.Interval(0, 10).overlaps(I.Interval(11, 12))
  assert not I.overlaps(I.Interval(d1, d2), I.Interval(d2, d3))

def test_overlaps_touching():
  assert not I.Interval(0, 10).overlaps(I.Interval(10, 20))
  assert not I.Interval(10, 20).overlaps(I.Interval(0, 10))

def test_overlaps_empty():
  # Empty interval strictly inside of another one
  assert I.Interval(0, 10).overlaps(I.Interval(1, 1))
  assert I.Interval(1, 1).overlaps(I.Interval(0, 10))
  # Empty interval at the end
  assert not I.Interval(0, 10).overlaps(I.Interval(10, 10))

def test_overlaps_same_start():
  # On ties second argument is considered to start first
  assert I.overlaps(I.Interval(5, 10), I.Interval(5, 5)) is False
  assert I.overlaps(I.Interval(5, 5), I.Interval(5, 10)) is True

def test_ordering():
  a = I.Interval(0, 10)
  b = I.Interval(0, 3)
  c = I.Interval(4, 5)
  assert a == b and hash(a) == hash(b)
  assert a < c and c > b and a <= b
  assert sorted([c, a]) == [a, c]
  assert a != (0, 10)

def test_to_interval():
  iv = I.to_interval((1, 4))
  assert (iv.start, iv.end) == (1, 4)
  iv = I.to_interval(range(2, 7))
  assert tuple(iv) == (2, 7)
  assert I.to_interval(iv) is iv
  with pytest.raises(TypeError):
    I.to_interval(range(0, 10, 2))
  with pytest.raises(TypeError):
    I.to_interval(5)

def test_repr():
  assert repr(I.Interval(0, 10)) == '[0, 10)'
