#!/usr/bin/env python3

# The MIT License (MIT)
#
# Copyright (c) 2018-2022 Yury Gribov
#
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

"""Main driver for intervalmap scripts.

Run with --help for details.
"""

import sys
import argparse
import logging

from intervalmap.common.error import set_basename, set_options
from intervalmap.common import parse as PA
from intervalmap.common import printers as PR
from intervalmap import script

def main(argv=None):
  set_basename('intervalmap')

  class Formatter(argparse.ArgumentDefaultsHelpFormatter, argparse.RawDescriptionHelpFormatter):
    pass
  parser = argparse.ArgumentParser(
    formatter_class=Formatter,
    description="Run a script of commands against a map "
                "of disjoint half-open intervals.",
    epilog="""\

SCRIPT contains one command per line ('#' starts a comment):
  insert START END VALUE  Add [START, END) unless it overlaps existing interval.
  get POINT               Print interval containing POINT.
  remove START            Remove interval which starts at START.
  remove-at POINT         Remove interval containing POINT.
  list                    Print all intervals in order.
  dump                    Pretty-print the map.
  check                   Verify map invariants.

Examples:
  $ printf 'insert 0 10 a\\ninsert 11 12 b\\nget 3\\n' | {exe}
  $ {exe} --keys date --strict holidays.txt\
""".format(exe='python -mintervalmap'))
  parser.add_argument(
    'script',
    metavar='SCRIPT',
    help="Path to command script (stdin if omitted).",
    nargs='?')
  parser.add_argument(
    '--keys', '-k',
    help="Syntax of interval bounds.",
    choices=sorted(PA.key_readers.keys()),
    default='int')
  parser.add_argument(
    '--strict',
    help="Treat overlapping insertions as errors.",
    action='store_true')
  parser.add_argument(
    '--verbose', '-v',
    help="Print diagnostic info.",
    action='count',
    default=0)
  parser.add_argument(
    '--print-stack',
    help="Print call stack on error (INTERNAL).",
    action='store_true')

  args = parser.parse_args(argv)

  v = min(2, args.verbose)
  loglevel = logging.WARNING - 10 * v
  logging.basicConfig(level=loglevel)

  set_options(print_stack=args.print_stack)

  parser = script.Parser(args.keys)
  if args.script is None:
    parser.reset('<stdin>', sys.stdin)
    cmds = parser.parse()
  else:
    with open(args.script, 'r') as f:
      parser.reset(args.script, f)
      cmds = parser.parse()

  p = PR.SourcePrinter()
  script.Interpreter(p, args.strict).run(cmds)
  return 0

if __name__ == '__main__':
  sys.exit(main())
