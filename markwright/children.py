# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Children normalization: collapse an arbitrarily nested, possibly-None child argument
into the flat tuple of nodes stored on an `Element` or `Fragment`.
'''

from collections.abc import Iterable, Mapping, Set
from typing import Any, Union

from .absent import Absent
from .exceptions import UnsupportedChildType
from .node import Fragment, Node, SafeText, Text


ChildLax = Union[Node,str,int,float,None]
ChildrenInput = Union[ChildLax,Absent,Iterable[Any]]


def normalize_children(children:ChildrenInput) -> tuple[Node,...]:
  '''
  Flatten `children` depth-first into a tuple of nodes, preserving order.
  * None (and `Absent._`) contribute nothing; this is what makes `x if cond else None` children work.
  * Fragments are spliced into the result.
  * Strings and numbers become `Text` nodes.
  * Objects implementing the `__html__` protocol become `SafeText` nodes.
  * Lists, tuples, generators and other ordered iterables are flattened recursively.
  Raises UnsupportedChildType for anything else, including bools, bytes, mappings and sets.
  '''
  nodes:list[Node] = []
  _flatten_into(nodes, children)
  return tuple(nodes)


def _flatten_into(nodes:list[Node], child:Any) -> None:
  if child is None or child is Absent._: return
  if isinstance(child, Fragment):
    nodes.extend(child.children) # Fragment children are already flat.
  elif isinstance(child, Node):
    nodes.append(child)
  elif hasattr(child, '__html__') and not isinstance(child, type): # Must precede the str test, for `str` subclasses like `markupsafe.Markup`.
    nodes.append(SafeText(str(child.__html__())))
  elif isinstance(child, str):
    nodes.append(Text(child))
  elif isinstance(child, bool): # Must precede the numeric test because bool subclasses int.
    raise UnsupportedChildType(child)
  elif isinstance(child, (int, float)):
    nodes.append(Text(str(child)))
  elif isinstance(child, (bytes, bytearray, Mapping, Set)):
    raise UnsupportedChildType(child) # Not ordered sequences of children.
  elif isinstance(child, Iterable):
    for c in child:
      _flatten_into(nodes, c)
  else:
    raise UnsupportedChildType(child)
