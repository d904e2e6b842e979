# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Attribute normalization and serialization.

Normalized attribute values are `str`, `bool`, or None:
* None and False omit the attribute entirely;
* True renders the bare attribute name (a presence-only attribute, e.g. `<input disabled>`);
* strings render as `name="escaped value"`.

Lax inputs are converted during normalization: numbers become strings,
and mapping values are expanded into compound attributes, e.g. `data={'user_id': 7}` becomes `data-user-id="7"`.
'''

import re
from collections.abc import Iterable, Mapping
from typing import Any, Union

from .escape import quote_attr_val
from .exceptions import InvalidAttributeName, InvalidAttributeValue
from .node import AttrVal


children_key = '_' # Reserved pseudo-attribute that carries children; never rendered.

AttrsLax = Union[Mapping[str,Any],Iterable[tuple[str,Any]],None]


def normalize_attrs(attrs:AttrsLax) -> dict[str,AttrVal]:
  '''
  Validate and convert `attrs` (a mapping, an iterable of pairs, or None) into a dict of normalized values.
  Insertion order is preserved; if a name occurs twice, the last value wins.
  The reserved children key is stripped.
  '''
  normalized:dict[str,AttrVal] = {}
  if attrs is None: return normalized
  items = attrs.items() if isinstance(attrs, Mapping) else attrs
  for k, v in items:
    if k == children_key: continue
    _put_attr(normalized, k, v)
  return normalized


def _put_attr(normalized:dict[str,AttrVal], key:Any, val:Any) -> None:
  if not isinstance(key, str) or not attr_name_re.fullmatch(key):
    raise InvalidAttributeName(key)
  if val is None or isinstance(val, (str, bool)):
    normalized[key] = val
  elif isinstance(val, (int, float)):
    normalized[key] = str(prefer_int(val))
  elif isinstance(val, Mapping):
    for sub_key, sub_val in val.items():
      if not isinstance(sub_key, str): raise InvalidAttributeName(f'{key}-{sub_key!r}')
      _put_attr(normalized, f'{key}-{sub_key.replace("_", "-")}', sub_val)
  else:
    raise InvalidAttributeValue(key, val)


def fmt_attrs(items:Iterable[tuple[str,AttrVal]]) -> str:
  'Return a string that is either empty or with a leading space, containing all of the formatted items.'
  parts:list[str] = []
  for k, v in items:
    if v is None or v is False: continue
    if v is True: parts.append(f' {k}')
    elif isinstance(v, str): parts.append(f' {k}={quote_attr_val(v)}')
    else: raise InvalidAttributeValue(k, v)
  return ''.join(parts)


def serialize_attrs(attrs:AttrsLax) -> str:
  'Normalize and format `attrs` in a single step.'
  return fmt_attrs(normalize_attrs(attrs).items())


def prefer_int(v:int|float) -> int|float:
  'Convert integral floats to int.'
  if isinstance(v, float) and v.is_integer(): return int(v)
  return v


# Attribute names exclude whitespace, controls, quotes, '>', '/', '=' and (for our purposes) '<'.
# https://html.spec.whatwg.org/multipage/syntax.html#attributes-2
attr_name_re = re.compile(r'[^\s\x00-\x1f\x7f"\'<>/=]+')
