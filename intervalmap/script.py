# The MIT License (MIT)
#
# Copyright (c) 2022 Yury Gribov
#
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Command scripts which drive an interval map.

Script contains one command per line, '#' starts a comment:
  insert 0 10 first chunk
  get 3
  remove-at 3
  list
"""

import re
import logging

from intervalmap.common.error import error, error_if, warn, \
  IntervalMapError, OverlapError
from intervalmap.common import parse as PA
from intervalmap.interval import Interval
from intervalmap.map import IntervalMap

logger = logging.getLogger(__name__)

# Command name -> number of key arguments (insert also takes a value)
_commands = {
  'insert': 2,
  'get': 1,
  'remove': 1,
  'remove-at': 1,
  'list': 0,
  'dump': 0,
  'check': 0,
}

class Command:
  """Single parsed script command."""

  def __init__(self, name, keys, value, loc):
    self.name = name
    self.keys = keys
    self.value = value
    self.loc = loc

  @property
  def key(self):
    return self.keys[0]

  def __repr__(self):
    args = ' '.join(str(k) for k in self.keys)
    if self.value is not None:
      args += ' ' + self.value
    return f'{self.loc}: {self.name} {args}'.rstrip()

class Lexer(PA.BaseLexer):
  """Splits script into per-line command lexemes."""

  def update_on_newline(self):
    self.line = re.sub(r'#.*', '', self.line).strip()

  def next_internal(self):
    words = self.line.split(None, 1)
    name = words[0]
    rest = words[1] if len(words) > 1 else ''
    self.lexemes.append(PA.Lexeme('command', (name, rest), self.line, self._loc()))
    self.line = ''

class Parser(PA.BaseParser):
  """Parses command scripts."""

  def __init__(self, keys='int'):
    super().__init__(Lexer())
    self.keys = keys

  def _parse_command(self, l):
    name, rest = l.data
    nkeys = _commands.get(name)
    error_if(nkeys is None, l.loc, f"unknown command '{name}'")

    words = rest.split(None, nkeys)
    value = None
    if name == 'insert':
      error_if(len(words) != 3, l.loc, "expecting 'insert START END VALUE'")
      value = words.pop()
    else:
      error_if(len(words) != nkeys, l.loc,
               f"command '{name}' expects {nkeys} argument(s)")

    keys = [PA.read_key(w, self.keys, l.loc) for w in words]
    if name == 'insert':
      try:
        keys = [Interval(*keys)]
      except IntervalMapError as e:
        error(l.loc, str(e))
    return Command(name, keys, value, l.loc)

  def parse(self):
    cmds = []
    while True:
      l = self.lex.next()
      if l is None:
        break
      cmds.append(self._parse_command(l))
    logger.debug(f"parse: read {len(cmds)} commands")
    return cmds

class Interpreter:
  """Executes commands against an interval map."""

  def __init__(self, p, strict=False):
    self.map = IntervalMap()
    self.p = p
    self.strict = strict

  def _report_removed(self, value):
    if value is None:
      self.p.writeln("nothing to remove")
    else:
      self.p.writeln(f"removed {value}")

  def execute(self, cmd):
    logger.debug(f"execute: {cmd}")
    if cmd.name == 'insert':
      try:
        self.map.insert(cmd.key, cmd.value)
      except OverlapError as e:
        if self.strict:
          error(cmd.loc, str(e))
        warn(cmd.loc, f"{e}, ignoring")
    elif cmd.name == 'get':
      e = self.map.get_entry(cmd.key)
      if e is None:
        self.p.writeln(f"{cmd.key}: none")
      else:
        self.p.writeln(f"{cmd.key}: [{e.start}, {e.end}) -> {e.value}")
    elif cmd.name == 'remove':
      self._report_removed(self.map.remove_by_start(cmd.key))
    elif cmd.name == 'remove-at':
      self._report_removed(self.map.remove_containing_interval(cmd.key))
    elif cmd.name == 'list':
      for e in self.map:
        self.p.writeln(f"[{e.start}, {e.end}) -> {e.value}")
    elif cmd.name == 'dump':
      self.map.dump(self.p)
    elif cmd.name == 'check':
      try:
        self.map.check()
      except RuntimeError as e:
        error(cmd.loc, str(e))
    else:
      error(cmd.loc, f"unknown command '{cmd.name}'")

  def run(self, cmds):
    for cmd in cmds:
      self.execute(cmd)
    return self.map
