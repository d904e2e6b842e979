# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception classes raised while building and rendering markup trees.
Each class also subclasses the builtin category that best describes it,
so that callers can catch either `MarkupError` or the conventional builtin.
'''

from typing import Any


class MarkupError(Exception):
  'Root of the markwright exception hierarchy.'


class InvalidTag(MarkupError, ValueError):
  'Raised when an element tag is empty or contains characters that are illegal in a tag name.'


class UnsupportedChildType(MarkupError, TypeError):
  'Raised when a child value has a type that the children normalizer cannot interpret.'

  def __init__(self, child:Any) -> None:
    self.child = child
    super().__init__(f'unsupported child type: {type(child).__name__}; value: {child!r}')


class InvalidAttributeName(MarkupError, ValueError):
  'Raised when an attribute name is not a nonempty string of legal attribute name characters.'


class InvalidAttributeValue(MarkupError, TypeError):
  'Raised when an attribute value has a type that the attribute serializer cannot interpret.'

  def __init__(self, key:str, val:Any) -> None:
    self.key = key
    self.val = val
    super().__init__(f'invalid value for attribute {key!r}: {type(val).__name__}; value: {val!r}')


class VoidElementContent(MarkupError, ValueError):
  'Raised when child content is supplied to a void element such as `br` or `img`.'


class ConflictingValues(MarkupError, KeyError):
  '''
  Raised when an incoming value collides with an existing value.
  For example, children passed both positionally and under the reserved `_` key.
  Since it arises from a key lookup, it subclasses KeyError.
  '''
  def __init__(self, *, key:Any, existing:Any, incoming:Any) -> None:
    self.key = key
    self.existing = existing
    self.incoming = incoming
    super().__init__(key) # Initialized like a KeyError.


class RawTreeError(MarkupError, ValueError):
  'Raised when a raw (JSON-compatible) tree description has an invalid shape.'

  def __init__(self, path:str, msg:str) -> None:
    self.path = path
    super().__init__(f'{path}: {msg}')
