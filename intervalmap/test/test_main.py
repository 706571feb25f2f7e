# The MIT License (MIT)
#
# Copyright (c) 2022 Yury Gribov
#
# Use of this source code is governed by The MIT License (MIT)
# that can be found in the LICENSE.txt file.

import pytest

from intervalmap.__main__ import main
from intervalmap.common.error import set_options

@pytest.fixture(autouse=True)
def reset_options():
  yield
  set_options(print_stack=False)

def test_main(tmp_path, capsys):
  f = tmp_path / 'plan.txt'
  f.write_text("insert 2020-01-01 2020-01-10 vacation\n"
               "get 2020-01-03\n"
               "get 2020-01-10\n")
  assert main(['--keys', 'date', str(f)]) == 0
  assert capsys.readouterr().out == "2020-01-03: [2020-01-01, 2020-01-10) -> vacation\n" \
                                    "2020-01-10: none\n"

def test_main_strict(tmp_path, capsys):
  f = tmp_path / 'plan.txt'
  f.write_text("insert 0 10 a\ninsert 9 12 b\n")
  with pytest.raises(SystemExit) as e:
    main(['--strict', str(f)])
  assert e.value.code == 1
  err = capsys.readouterr().err
  assert 'error' in err and 'plan.txt:2' in err

def test_main_print_stack(tmp_path):
  f = tmp_path / 'plan.txt'
  f.write_text("bogus\n")
  with pytest.raises(RuntimeError):
    main(['--print-stack', str(f)])
