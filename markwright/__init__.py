# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`markwright` builds trees of markup nodes with ordinary function calls, and renders them to escaped HTML strings.

  >>> from markwright import element, render, text
  >>> render(element('div', {'class': 'c'}, [text('hi')]))
  '<div class="c">hi</div>'

The tag builders in `markwright.tags` provide a more compact call syntax:

  >>> from markwright.tags import Div, P
  >>> render(Div(P('Lorem ipsum'), cl='note'))
  '<div class="note"><p>Lorem ipsum</p></div>'
'''

from .absent import Absent
from .attrs import fmt_attrs, normalize_attrs, serialize_attrs
from .build import element, fragment, safe_text, text
from .children import normalize_children
from .escape import esc_attr_val, esc_text
from .exceptions import (ConflictingValues, InvalidAttributeName, InvalidAttributeValue, InvalidTag, MarkupError, RawTreeError,
  UnsupportedChildType, VoidElementContent)
from .node import AttrVal, Element, Fragment, Node, SafeText, Text
from .raw import node_from_raw
from .render import render, render_iter
from .semantics import is_html_tag, is_void_tag


__all__ = [
  'Absent',
  'AttrVal',
  'ConflictingValues',
  'Element',
  'Fragment',
  'InvalidAttributeName',
  'InvalidAttributeValue',
  'InvalidTag',
  'MarkupError',
  'Node',
  'RawTreeError',
  'SafeText',
  'Text',
  'UnsupportedChildType',
  'VoidElementContent',
  'element',
  'esc_attr_val',
  'esc_text',
  'fmt_attrs',
  'fragment',
  'is_html_tag',
  'is_void_tag',
  'node_from_raw',
  'normalize_attrs',
  'normalize_children',
  'render',
  'render_iter',
  'safe_text',
  'serialize_attrs',
  'text',
]
