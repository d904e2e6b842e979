# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Escaping for the two markup contexts: element content and double-quoted attribute values.
`SafeText` content never passes through these functions; the renderer chooses by node type.
'''

from html import escape as html_escape


def esc_text(text:str) -> str:
  'Escape `&`, `<` and `>` for inclusion as element content.'
  return html_escape(text, quote=False)


def esc_attr_val(text:str) -> str:
  'Escape `&`, `<`, `>`, `"` and `\'` for inclusion in a double-quoted attribute value.'
  return html_escape(text, quote=True)


def quote_attr_val(text:str) -> str:
  'Escape and wrap `text` in double quotes.'
  return f'"{esc_attr_val(text)}"'
