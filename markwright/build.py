# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Node constructors.
Each constructor validates and normalizes its arguments, so that the resulting nodes satisfy the tree invariants.
'''

import re
from collections.abc import Mapping
from typing import Any

from .absent import Absent
from .attrs import AttrsLax, children_key, normalize_attrs
from .children import ChildrenInput, normalize_children
from .exceptions import ConflictingValues, InvalidTag, VoidElementContent
from .node import Element, Fragment, SafeText, Text
from .semantics import is_void_tag


def element(tag:str, attrs:AttrsLax=None, children:ChildrenInput|Absent=Absent._) -> Element:
  '''
  Create an element.
  `children` distinguishes "not supplied" (the default) from None:
  a non-void element without a children argument renders only its opening tag,
  while one with a children argument (even None or empty) also renders its closing tag.
  If `attrs` contains the reserved `_` key, its value is used as the children argument.
  '''
  if not isinstance(tag, str) or not tag_re.fullmatch(tag):
    raise InvalidTag(tag)

  if attrs is not None and not isinstance(attrs, Mapping):
    attrs = dict(attrs) # Pairs may be a one-shot iterator.

  if attrs is not None and children_key in attrs:
    if children is not Absent._:
      raise ConflictingValues(key=children_key, existing=attrs[children_key], incoming=children)
    children = attrs[children_key]

  if children is Absent._:
    nodes:tuple = ()
    closed = False
  else:
    nodes = normalize_children(children)
    closed = True

  if nodes and is_void_tag(tag):
    raise VoidElementContent(f'void element cannot have child content: {tag!r}; children: {nodes!r}')

  return Element(tag=tag, attrs=tuple(normalize_attrs(attrs).items()), children=nodes, closed=closed)


def text(value:str) -> Text:
  'Create a text node; the content is escaped when rendered.'
  if not isinstance(value, str): raise TypeError(f'text value must be `str`; received: {value!r}')
  return Text(value)


def safe_text(value:str) -> SafeText:
  'Create a safe text node; the content is rendered verbatim.'
  if not isinstance(value, str): raise TypeError(f'safe text value must be `str`; received: {value!r}')
  return SafeText(value)


def fragment(*children:Any) -> Fragment:
  '''
  Group `children` into a fragment, which renders with no markup of its own.
  A single argument can be a list of children: `fragment([a, b])` is equivalent to `fragment(a, b)`.
  '''
  return Fragment(normalize_children(children))


# ASCII letter, followed by letters, digits, '_', '-', '.', or ':' (for namespaced XML-style tags).
tag_re = re.compile(r'[A-Za-z][-.:\w]*', flags=re.ASCII)
