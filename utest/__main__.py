#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from os import walk
from os.path import isdir, join as path_join
from subprocess import run
from sys import executable
from typing import Iterator


def main() -> None:
  arg_parser = ArgumentParser(description='Find and run utest unit tests with the extension ".ut.py", defaulting to "test/".')
  arg_parser.add_argument('paths', nargs='*', default=['test'])
  args = arg_parser.parse_args()

  ok = True
  count = 0
  for path in walk_test_files(args.paths):
    print(path)
    count += 1
    if run([executable, path]).returncode != 0:
      ok = False
      print()

  if not count: exit(f'no utest files found in: {" ".join(args.paths)}')
  exit(0 if ok else 1)


def walk_test_files(paths:list[str]) -> Iterator[str]:
  'Yield `.ut.py` files found in `paths`, in sorted order.'
  for path in paths:
    if not isdir(path):
      yield path
      continue
    for dir_path, dir_names, file_names in walk(path):
      dir_names.sort()
      for name in sorted(file_names):
        if name.endswith('.ut.py'): yield path_join(dir_path, name)


if __name__ == '__main__': main()
