# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`node` defines the immutable node types of a markup tree.

Trees are built bottom-up with the constructors in `markwright.build` (or the tag builders in `markwright.tags`),
which normalize attributes and children before the node is created.
Instantiating these classes directly skips normalization; the fields must then already satisfy the invariants:
* `Element.children` and `Fragment.children` contain only `Text`, `SafeText` and `Element` nodes;
* `Element.attrs` is a tuple of unique `(name, value)` pairs, where each value is a `str`, `bool`, or None.
'''

from dataclasses import dataclass
from typing import Any, Iterator, Union

from .semantics import is_void_tag


AttrVal = Union[str,bool,None]
AttrItems = tuple[tuple[str,AttrVal],...]


class Node:
  'Abstract base of all markup tree nodes.'

  __slots__ = ()

  def __html__(self) -> str:
    'Render the node; this lets nodes be embedded in template engines that honor the `__html__` protocol.'
    from .render import render
    return render(self)


@dataclass(frozen=True, slots=True)
class Text(Node):
  'Text content that is escaped when rendered.'
  content:str


@dataclass(frozen=True, slots=True)
class SafeText(Node):
  'Text content that is already markup-safe, and is rendered verbatim.'
  content:str


@dataclass(frozen=True, slots=True)
class Element(Node):
  '''
  A markup element.
  `closed` records whether a children argument was supplied when the element was constructed.
  A non-void element renders its closing tag only if it is closed; a void element never renders one.
  '''
  tag:str
  attrs:AttrItems = ()
  children:tuple[Node,...] = ()
  closed:bool = False

  def get(self, key:str, default:Any=None) -> Any:
    for k, v in self.attrs:
      if k == key: return v
    return default

  @property
  def attrs_dict(self) -> dict[str,AttrVal]:
    'A new dictionary of the attributes.'
    return dict(self.attrs)

  @property
  def is_void(self) -> bool: return is_void_tag(self.tag)

  def child_elements(self) -> Iterator['Element']:
    return (c for c in self.children if isinstance(c, Element))

  @property
  def texts(self) -> Iterator[str]:
    'Yield the unescaped text of the tree sequentially.'
    for c in self.children:
      if isinstance(c, (Text, SafeText)): yield c.content
      elif isinstance(c, (Element, Fragment)): yield from c.texts
      else: raise TypeError(c) # Expected Text, SafeText, Element, or Fragment.

  @property
  def text(self) -> str:
    'Return the text of the tree joined as a single string.'
    return ''.join(self.texts)


@dataclass(frozen=True, slots=True)
class Fragment(Node):
  'A transparent grouping of sibling nodes; renders as the concatenation of its children.'
  children:tuple[Node,...] = ()

  def __iter__(self) -> Iterator[Node]: return iter(self.children)

  def __len__(self) -> int: return len(self.children)

  @property
  def texts(self) -> Iterator[str]:
    for c in self.children:
      if isinstance(c, (Text, SafeText)): yield c.content
      elif isinstance(c, (Element, Fragment)): yield from c.texts
      else: raise TypeError(c) # Expected Text, SafeText, Element, or Fragment.
