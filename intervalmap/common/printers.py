# The MIT License (MIT)
#
# Copyright (c) 2018-2022 Yury Gribov
#
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Pretty-printing APIs."""

import sys

class SourcePrinter:
  """Printer with nested indentation levels (use as context manager)."""

  def __init__(self, out=None, tab='  '):
    self.out = out if out is not None else sys.stdout
    self.tab = tab
    self.depth = 0

  def __enter__(self):
    self.depth += 1
    return self

  def __exit__(self, type, value, traceback):
    assert self.depth > 0
    self.depth -= 1
    return False

  def write(self, s):
    """Print possibly multi-line text at current indentation."""
    prefix = self.tab * self.depth
    for line in str(s).splitlines():
      self.out.write(prefix + line + '\n')

  def writeln(self, s):
    s = str(s)
    self.write(s if s else '\n')
