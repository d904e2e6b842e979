# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Render raw JSON tree documents to HTML.
See `markwright.raw` for the document format.
'''

import json
from argparse import ArgumentParser, BooleanOptionalAction
from sys import exit, stdin, stdout
from typing import TextIO

from .exceptions import MarkupError
from .io import errL, writeZ
from .raw import node_from_raw
from .render import render


def main(argv:list[str]|None=None) -> None:
  arg_parser = ArgumentParser(prog='markwright', description='Render raw JSON markup trees to HTML.')
  arg_parser.add_argument('paths', nargs='*', help='paths to JSON tree documents (defaults to stdin).')
  arg_parser.add_argument('-o', '--output', help='output path (defaults to stdout).')
  arg_parser.add_argument('--newline', action=BooleanOptionalAction, default=True,
    help='write a newline after each rendered document.')
  args = arg_parser.parse_args(argv)

  end = '\n' if args.newline else ''
  ok = True
  rendered:list[str] = []
  for path in (args.paths or ['-']):
    try: html = render_path(path)
    except (OSError, json.JSONDecodeError, MarkupError) as e:
      errL(f'{path}: error: {e}')
      ok = False
      continue
    rendered.append(html + end)

  if args.output:
    try:
      with open(args.output, 'w') as f: writeZ(f, *rendered)
    except OSError as e:
      errL(f'{args.output}: error: {e}')
      ok = False
  else:
    writeZ(stdout, *rendered, flush=True)

  exit(0 if ok else 1)


def render_path(path:str) -> str:
  'Load the raw JSON tree at `path` (or stdin for "-") and render it.'
  if path == '-': return render_file(stdin)
  with open(path) as f: return render_file(f)


def render_file(file:TextIO) -> str:
  return render(node_from_raw(json.load(file)))


if __name__ == '__main__': main()
