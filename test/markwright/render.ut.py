# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from markwright import (Element, element, esc_attr_val, esc_text, fragment, is_html_tag, is_void_tag, render, render_iter,
  safe_text, Text, text, VoidElementContent)
from utest import utest, utest_call, utest_exc, utest_seq, utest_val


utest('&lt;a&gt;&amp;b', esc_text, '<a>&b')
utest('"quoted" \'single\'', esc_text, '"quoted" \'single\'')
utest('&lt;a&gt;&amp;b&quot;&#x27;', esc_attr_val, '<a>&b"\'')


utest('<div class="c">hi</div>', render, element('div', {'class': 'c'}, [text('hi')]))

# Escaping is decided by node type.
utest('<p>&lt;a&gt;&amp;b</p>', render, element('p', {}, text('<a>&b')))
utest('<p><a>&b</p>', render, element('p', {}, safe_text('<a>&b')))
utest('<p>&amp;amp;</p>', render, element('p', {}, '&amp;'))
utest('&lt;a&gt;&amp;b', render, text('<a>&b'))
utest('<a>&b', render, safe_text('<a>&b'))

# Closing tag policy.
utest('<div>', render, element('div'))
utest('<div class="c">', render, element('div', {'class': 'c'}))
utest('<div></div>', render, element('div', {}, None))
utest('<div></div>', render, element('div', {}, []))
utest('<img src="a.png">', render, element('img', {'src': 'a.png'}))
utest('<img src="a.png">', render, element('img', {'src': 'a.png'}, []))
utest('<br>', render, element('br', {}, None))

# Elements created directly with children render their closing tag.
utest('<b>x</b>', render, Element('b', children=(Text('x'),)))
utest_exc(VoidElementContent, render, Element('br', children=(Text('x'),)))

# Attributes.
utest('<input type="checkbox" checked>', render, element('input', {'type': 'checkbox', 'checked': True, 'disabled': False}))
utest('<a>x</a>', render, element('a', {'href': None}, 'x'))

# Fragments and top-level sequences render with no wrapper.
utest('<br><br>', render, fragment([element('br', {}, []), element('br', {}, [])]))
utest('<p>a</p><p>b</p>', render, [element('p', {}, 'a'), None, element('p', {}, 'b')])
utest('a1', render, ['a', 1])
utest('', render, None)
utest('', render, [])
utest('', render, fragment())

utest('<ul><li>1</li><li>2</li><li>3</li></ul>', render, element('ul', {}, (element('li', {}, i) for i in range(1, 4))))

utest_seq(['<p>', 'a', '<b>', 'b', '</b>', '</p>'], render_iter, element('p', {}, ['a', element('b', {}, 'b')]))


@utest_call
def test_idempotent() -> None:
  tree = element('main', {'id': 'm'}, [
    element('h1', {}, 'Title & <subtitle>'),
    fragment(element('p', {}, 'one'), element('hr')),
    safe_text('<!-- comment -->'),
  ])
  first = render(tree)
  utest_val('<main id="m"><h1>Title &amp; &lt;subtitle&gt;</h1><p>one</p><hr><!-- comment --></main>', first, 'first')
  utest_val(first, render(tree), 'second')
  utest_val(first, ''.join(render_iter(tree)), 'render_iter')


utest(True, is_void_tag, 'br')
utest(True, is_void_tag, 'IMG')
utest(False, is_void_tag, 'div')
utest(True, is_html_tag, 'section')
utest(False, is_html_tag, 'my-widget')
