# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import json
from os.path import join as path_join
from tempfile import TemporaryDirectory

from markwright.__main__ import main
from utest import utest_call, utest_exc, utest_val


doc = {'tag': 'p', 'attrs': {'class': 'c'}, '_': ['hi & ', {'tag': 'br'}, {'safe': '<!-- x -->'}]}
doc_html = '<p class="c">hi &amp; <br><!-- x --></p>'


def read(path:str) -> str:
  with open(path) as f: return f.read()


@utest_call
def test_cli() -> None:
  with TemporaryDirectory() as dir:
    src = path_join(dir, 'doc.json')
    bad = path_join(dir, 'bad.json')
    invalid = path_join(dir, 'invalid.json')
    out = path_join(dir, 'out.html')
    with open(src, 'w') as f: json.dump(doc, f)
    with open(bad, 'w') as f: f.write('{not json')
    with open(invalid, 'w') as f: json.dump({'tag': 'img', '_': 'content'}, f)

    utest_exc(SystemExit(0), main, [src, '-o', out])
    utest_val(doc_html + '\n', read(out), 'single')

    utest_exc(SystemExit(0), main, [src, src, '--no-newline', '-o', out])
    utest_val(doc_html * 2, read(out), 'multiple, no newline')

    # Failed documents are reported and omitted; the others are still written.
    utest_exc(SystemExit(1), main, [bad, src, invalid, path_join(dir, 'missing.json'), '-o', out])
    utest_val(doc_html + '\n', read(out), 'with failures')
