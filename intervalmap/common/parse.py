# The MIT License (MIT)
#
# Copyright (c) 2018-2022 Yury Gribov
#
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Common parsing functions."""

import datetime
import re

from intervalmap.common.error import error, error_if

class Location:
  """Location in script."""

  def __init__(self, filename=None, lineno=None):
    self.filename = filename
    self.lineno = lineno

  def __str__(self):
    if not self:
      return '?:?'
    return f'{self.filename}:{self.lineno}'

  def __bool__(self):
    return self.filename is not None

def read_int(s, loc):
  """Parse (possibly negative) integer e.g. "-10"."""
  m = re.search(r'^\s*([+-]?[0-9]+)\s*(.*)', s)
  error_if(m is None, loc, f"failed to parse integer: {s}")
  return int(m.group(1)), m.group(2)

def read_date(s, loc):
  """Parse date e.g. "2020-01-10" or "2020-01"."""
  m = re.search(r'^\s*([0-9]{4}-[0-9]{1,2})(-[0-9]{1,2})?\s*(.*)', s)
  error_if(m is None, loc, f"failed to parse date: {s}")
  # If day is omitted, consider first day
  date_str = m.group(1) + (m.group(2) or '-01')
  try:
    d = datetime.datetime.strptime(date_str, '%Y-%m-%d').date()
  except ValueError:
    error(loc, f"invalid date: {date_str}")
  return d, m.group(3)

key_readers = {
  'int': read_int,
  'date': read_date,
}

def read_key(s, kind, loc):
  """Parse single key of given kind, rejecting trailing garbage."""
  reader = key_readers.get(kind)
  error_if(reader is None, loc, f"unknown key type '{kind}'")
  k, rest = reader(s, loc)
  error_if(rest, loc, f"unexpected trailing characters in key: {s}")
  return k

class Lexeme:
  """Represents parsed lexeme."""

  def __init__(self, type, data, text, loc):
    self.type = type
    self.data = data
    self.loc = loc
    self.text = text

  def __repr__(self):
    return f'{self.loc}: {self.type}: {self.data}'

class BaseLexer:
  """Base class for line-oriented lexers."""

  def __init__(self):
    self.lexemes = []
    self.filename = self.line = self.lineno = None
    self.lines = None

  def _loc(self):
    return Location(self.filename, self.lineno)

  def loc(self):
    """Location of next lexeme."""
    if not self.lexemes:
      self.peek()
    return self._loc()

  # Override in children
  def reset(self, filename, lines):
    """Resets lexer state."""
    self.filename = filename
    self.lineno = 0
    self.line = ''
    self.lines = iter(lines)
    self.lexemes = []

  # Override in children
  def update_on_newline(self):
    """Update state on newline."""
    pass

  # Override in children
  def next_internal(self):
    return None

  def __skip_empty(self):
    while self.line == '' and self.lines is not None:
      next_line = next(self.lines, None)
      if next_line is None:
        break
      self.line = next_line
      self.lineno += 1
      self.update_on_newline()

  def peek(self):
    """Return next lexeme without advancing."""
    if not self.lexemes:
      self.__skip_empty()
      if self.line:
        self.next_internal()
    if not self.lexemes:
      return None
    return self.lexemes[0]

  def skip(self):
    """Advance to next lexeme."""
    del self.lexemes[0]

  def next(self):
    """Return current lexeme and advance to next."""
    l = self.peek()
    if l is not None:
      self.skip()
    return l

class BaseParser:
  """Base class for parsers."""

  def __init__(self, lex):
    self.lex = lex

  # Override in children
  def reset(self, filename, f):
    """Resets lexer's state."""
    self.lex.reset(filename, f)

  # Override in children
  def parse(self):
    return None
