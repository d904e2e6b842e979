# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Depth-first serialization of node trees to markup text.
Rendering never mutates the tree; the same tree always renders to the same string.
'''

from typing import Iterator

from .attrs import fmt_attrs
from .children import ChildrenInput, normalize_children
from .escape import esc_text
from .exceptions import VoidElementContent
from .node import Element, Fragment, Node, SafeText, Text


def render(root:ChildrenInput) -> str:
  '''
  Render `root` into a single string.
  `root` can be a single node, or a sequence of sibling nodes, which render with no enclosing tag.
  Any other children input is normalized first, so `render(['a', None, Br()])` is valid.
  '''
  return ''.join(render_iter(root))


def render_iter(root:ChildrenInput) -> Iterator[str]:
  'Render `root` as a stream of text fragments.'
  if isinstance(root, Node):
    yield from render_node(root)
  else:
    for node in normalize_children(root):
      yield from render_node(node)


def render_node(node:Node) -> Iterator[str]:
  'Recursive helper to `render_iter`.'
  if isinstance(node, Text):
    yield esc_text(node.content)
  elif isinstance(node, SafeText):
    yield node.content
  elif isinstance(node, Element):
    yield from render_element(node)
  elif isinstance(node, Fragment):
    for child in node.children:
      yield from render_node(child)
  else:
    raise TypeError(node) # Expected Text, SafeText, Element, or Fragment.


def render_element(el:Element) -> Iterator[str]:
  is_void = el.is_void
  if is_void and el.children: raise VoidElementContent(f'void element cannot have child content: {el.tag!r}')
  yield f'<{el.tag}{fmt_attrs(el.attrs)}>'
  if is_void or not (el.closed or el.children): return
  for child in el.children:
    yield from render_node(child)
  yield f'</{el.tag}>'
