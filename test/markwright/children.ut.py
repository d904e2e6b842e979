# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from markwright import Absent, Element, element, Fragment, normalize_children, SafeText, Text, UnsupportedChildType
from utest import utest, utest_exc


class Markup(str):
  'A str subclass that implements the `__html__` protocol, like `markupsafe.Markup`.'
  def __html__(self) -> str: return str(self)


class Widget:
  def __html__(self) -> str: return '<i>w</i>'


a, b, c, d, e = (Text(s) for s in 'abcde')
br = Element('br')

utest((), normalize_children, None)
utest((), normalize_children, Absent._)
utest((), normalize_children, [])
utest((), normalize_children, [None, [None, []], ()])

utest((a,), normalize_children, 'a')
utest((a,), normalize_children, a)
utest((br,), normalize_children, br)
utest((Text('1'),), normalize_children, 1)
utest((Text('1.5'),), normalize_children, 1.5)
utest((Text(''),), normalize_children, '')

# Nested sequences flatten in order, with None entries dropped.
utest((a, b, c, d, e), normalize_children, ['a', ['b', ['c', None], 'd'], None, 'e'])
utest((a, b, c, d, e), normalize_children, (a, (b, [c, None]), d, None, e))
utest((a, b, c), normalize_children, (s for s in 'abc'))
utest((Text('0'), Text('1'), Text('2')), normalize_children, range(3))

# Conditional inclusion.
show = False
utest((a, c), normalize_children, ['a', 'b' if show else None, 'c'])

# Fragments are spliced.
utest((a, b, c), normalize_children, [a, Fragment((b, c))])
utest((), normalize_children, Fragment(()))

# Safe content.
utest((SafeText('<b>x</b>'),), normalize_children, SafeText('<b>x</b>'))
utest((SafeText('<b>x</b>'),), normalize_children, Markup('<b>x</b>'))
utest((SafeText('<i>w</i>'),), normalize_children, Widget())

# Nodes keep their identity.
utest((element('p', {}, 'x'),), normalize_children, [element('p', {}, 'x')])

utest_exc(UnsupportedChildType, normalize_children, True)
utest_exc(UnsupportedChildType, normalize_children, ['a', False])
utest_exc(UnsupportedChildType, normalize_children, b'bytes')
utest_exc(UnsupportedChildType, normalize_children, {'k': 'v'})
utest_exc(UnsupportedChildType, normalize_children, {'a'})
utest_exc(UnsupportedChildType, normalize_children, [object()])
utest_exc(UnsupportedChildType, normalize_children, Text)
utest_exc(UnsupportedChildType, normalize_children, [Widget])
