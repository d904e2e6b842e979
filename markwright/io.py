# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'Console output helpers for the command line tool.'

from sys import stderr
from typing import Any, TextIO


def writeZ(file:TextIO, *items:Any, sep='', end='', flush=False) -> None:
  "Write `items` to file; default sep='', end=''."
  print(*items, sep=sep, end=end, file=file, flush=flush)


def errL(*items:Any, sep='', flush=False) -> None:
  "Write items to std err; sep='', end='\\n'."
  print(*items, sep=sep, end='\n', file=stderr, flush=flush)
