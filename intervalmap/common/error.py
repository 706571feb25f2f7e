# The MIT License (MIT)
#
# Copyright (c) 2018-2022 Yury Gribov
#
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Error handling APIs."""

import sys
import os.path
from typing import NoReturn

class IntervalMapError(Exception):
  """Base class for interval map errors."""
  pass

class OverlapError(IntervalMapError):
  """Raised when inserted interval overlaps an already stored one."""

  def __init__(self, interval, conflict):
    super().__init__(f"interval {interval} overlaps {conflict}")
    self.interval = interval
    self.conflict = conflict

class InvalidIntervalError(IntervalMapError, ValueError):
  """Raised for reversed intervals (end < start)."""

  def __init__(self, start, end):
    super().__init__(f"interval end {end} precedes start {start}")
    self.start = start
    self.end = end

_print_stack = False
_me = os.path.basename(sys.argv[0])

def _report(kind, args):
  if len(args) == 2:
    loc, msg = args
    if loc:
      sys.stderr.write(f"{_me}: {kind}: {loc}: {msg}\n")
      return
  else:
    msg, = args
  sys.stderr.write(f"{_me}: {kind}: {msg}\n")

def error(*args) -> NoReturn:
  """Prints pretty error message and terminates."""
  _report('error', args)
  if _print_stack:
    raise RuntimeError(args[-1])
  sys.exit(1)

def error_if(cond, *args):
  """Report error if condition is true."""
  if cond:
    error(*args)

def warn(*args):
  """Prints pretty warning message."""
  _report('warning', args)

def warn_if(cond, *args):
  """Report warning if condition is true."""
  if cond:
    warn(*args)

def set_basename(name):
  """Set program name for error reports."""
  global _me
  _me = name

def set_options(**kwargs):
  """Set other error-reporting options."""
  for k, v in kwargs.items():
    if k == 'print_stack':
      global _print_stack
      _print_stack = v
    else:
      error(f"unknown option: {k}")
