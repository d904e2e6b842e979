# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from markwright import fmt_attrs, InvalidAttributeName, InvalidAttributeValue, normalize_attrs, serialize_attrs
from markwright.attrs import prefer_int
from utest import utest, utest_exc


utest({}, normalize_attrs, None)
utest({}, normalize_attrs, {})
utest({'a': 'x', 'b': True, 'c': None}, normalize_attrs, {'a': 'x', 'b': True, 'c': None})
utest({'a': 'x', 'b': 'y'}, normalize_attrs, [('a', 'x'), ('b', 'y')])
utest({'tabindex': '1', 'width': '2', 'ratio': '0.5'}, normalize_attrs, {'tabindex': 1, 'width': 2.0, 'ratio': 0.5})

# Last write wins.
utest({'a': 'y'}, normalize_attrs, [('a', 'x'), ('a', 'y')])

# The reserved children key is stripped.
utest({'id': 'x'}, normalize_attrs, {'id': 'x', '_': ['child']})

# Compound attributes.
utest({'data-user-id': '7', 'data-role': 'admin'}, normalize_attrs, {'data': {'user_id': 7, 'role': 'admin'}})
utest({'aria-hidden': 'true'}, normalize_attrs, {'aria': {'hidden': 'true'}})
utest({'data-a-b': 'x'}, normalize_attrs, {'data': {'a': {'b': 'x'}}})

utest_exc(InvalidAttributeName(''), normalize_attrs, {'': 'x'})
utest_exc(InvalidAttributeName('a b'), normalize_attrs, {'a b': 'x'})
utest_exc(InvalidAttributeName('a"'), normalize_attrs, {'a"': 'x'})
utest_exc(InvalidAttributeName('a=b'), normalize_attrs, {'a=b': 'x'})
utest_exc(InvalidAttributeName, normalize_attrs, {1: 'x'})
utest_exc(InvalidAttributeValue, normalize_attrs, {'a': ['x']})
utest_exc(InvalidAttributeValue, normalize_attrs, {'a': object()})
utest_exc(InvalidAttributeValue, normalize_attrs, {'data': {'x': b'bytes'}})


utest('', fmt_attrs, [])
utest(' a="x"', fmt_attrs, [('a', 'x')])
utest(' a="x" b="y"', fmt_attrs, [('a', 'x'), ('b', 'y')])
utest(' disabled', fmt_attrs, [('disabled', True)])
utest('', fmt_attrs, [('x', False), ('y', None)])
utest(' a="x" c', fmt_attrs, [('a', 'x'), ('b', None), ('c', True), ('d', False)])
utest(' a=""', fmt_attrs, [('a', '')])
utest_exc(InvalidAttributeValue, fmt_attrs, [('a', 1)])

# Escaping in attribute values.
utest(' title="&lt;a href=&quot;x&quot;&gt; &amp; &#x27;y&#x27;"', fmt_attrs, [('title', '<a href="x"> & \'y\'')])

utest(' class="c" hidden data-x="1"', serialize_attrs, {'class': 'c', 'hidden': True, 'disabled': False, 'data': {'x': 1}})

utest(2, prefer_int, 2.0)
utest(2.5, prefer_int, 2.5)
utest(3, prefer_int, 3)
utest(float('inf'), prefer_int, float('inf'))
