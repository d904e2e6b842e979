# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Decode raw (JSON-compatible) tree descriptions into nodes.

The raw format:
* a string or number is text;
* null contributes nothing;
* a list is a fragment of its items;
* `{"tag": "div", "attrs": {...}, "_": children}` is an element; omitting "_" omits the children argument;
* `{"safe": "<b>markup</b>"}` is safe text, rendered verbatim.
'''

from typing import Any

from .absent import Absent
from .build import element, fragment
from .exceptions import MarkupError, RawTreeError
from .node import Node, SafeText, Text


element_keys = frozenset({'tag', 'attrs', '_'})


def node_from_raw(raw:Any, path:str='$') -> Node|None:
  '''
  Create a node from raw data, or None for a raw null.
  `path` locates `raw` within the enclosing document, for error messages.
  '''
  if raw is None: return None
  if isinstance(raw, str): return Text(raw)
  if isinstance(raw, bool): raise RawTreeError(path, f'boolean is not a valid node: {raw!r}')
  if isinstance(raw, (int, float)): return Text(str(raw))
  if isinstance(raw, list):
    return fragment([node_from_raw(c, f'{path}[{i}]') for i, c in enumerate(raw)])
  if isinstance(raw, dict): return _node_from_raw_dict(raw, path)
  raise RawTreeError(path, f'invalid node type: {type(raw).__name__}')


def _node_from_raw_dict(raw:dict, path:str) -> Node:
  if 'safe' in raw:
    if len(raw) != 1: raise RawTreeError(path, f'safe text object has unexpected keys: {sorted(raw)!r}')
    safe = raw['safe']
    if not isinstance(safe, str): raise RawTreeError(f'{path}.safe', f'safe text must be a string; received: {safe!r}')
    return SafeText(safe)

  try: tag = raw['tag']
  except KeyError: raise RawTreeError(path, 'object must have either a "tag" or a "safe" key') from None
  if extra_keys := set(raw) - element_keys:
    raise RawTreeError(path, f'element object has unexpected keys: {sorted(extra_keys)!r}')

  attrs = raw.get('attrs')
  if attrs is not None and not isinstance(attrs, dict):
    raise RawTreeError(f'{path}.attrs', f'attrs must be an object; received: {attrs!r}')

  children:Any = Absent._
  if '_' in raw:
    raw_children = raw['_']
    if isinstance(raw_children, list):
      children = [node_from_raw(c, f'{path}._[{i}]') for i, c in enumerate(raw_children)]
    else:
      children = node_from_raw(raw_children, f'{path}._')

  try: return element(tag, attrs, children)
  except MarkupError as e: raise RawTreeError(path, str(e)) from e
