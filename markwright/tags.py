# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Call-site sugar: one builder per standard HTML tag, plus component helpers.

  >>> render(Div(P('Lorem ipsum'), Br(), cl='note'))
  '<div class="note"><p>Lorem ipsum</p><br></div>'

Keyword arguments become attributes. A trailing underscore is removed (so that `for_`, `class_` and `async_` can be written)
and any other underscores become dashes (`aria_label` becomes `aria-label`).
Use the `attrs` dictionary for names that are not Python identifiers.
'''

from typing import Any, Callable, Iterable, TypeVar

from .absent import Absent
from .build import element, fragment
from .exceptions import ConflictingValues
from .node import Element, Fragment, SafeText
from .semantics import html_tags


_T = TypeVar('_T')


class TagBuilder:
  'A callable that creates elements with a fixed tag.'

  __slots__ = ('tag',)

  def __init__(self, tag:str) -> None:
    self.tag = tag

  def __repr__(self) -> str: return f'{type(self).__name__}({self.tag!r})'

  def __call__(self, *children:Any, _:Any=Absent._, cl:str|Iterable[str]|None=None, attrs:dict[str,Any]|None=None,
   **kw_attrs:Any) -> Element:
    '''
    Children can be passed as positional arguments, or as a single value (possibly a list) with the `_` keyword.
    If neither is given, the element has no children argument; see `markwright.build.element`.
    The `cl` argument is a shorthand for the `class` attribute; it accepts a string or an iterable of strings.
    Keyword attributes take precedence over keys in `attrs`.
    '''
    if children:
      if _ is not Absent._: raise ConflictingValues(key='_', existing=children, incoming=_)
      _ = children
    return element(self.tag, merge_attrs(attrs, cl, kw_attrs), _)


def merge_attrs(attrs:dict[str,Any]|None, cl:str|Iterable[str]|None, kw_attrs:dict[str,Any]) -> dict[str,Any]:
  'Combine the explicit `attrs` dict, the `cl` shorthand, and keyword attributes into a new dict.'
  merged = dict(attrs) if attrs else {}
  for k, v in kw_attrs.items():
    merged[attr_name_for_kw(k)] = v
  if cl is not None:
    if not isinstance(cl, str): cl = ' '.join(filter(None, cl))
  if cl: # An empty class list adds no attribute.
    if cl != merged.setdefault('class', cl):
      raise ConflictingValues(key='class', existing=merged['class'], incoming=cl)
  return merged


def attr_name_for_kw(key:str) -> str:
  'Convert a Python keyword argument name into an attribute name.'
  if len(key) > 1 and key.endswith('_'): key = key[:-1]
  return key.replace('_', '-')


def component(fn:Callable[...,_T], *children:Any, _:Any=Absent._, **props:Any) -> _T:
  '''
  Call a component function using the same calling convention as a tag builder.
  The properties are passed as keyword arguments. If children are given, they are passed as the `children` keyword;
  otherwise `children` is not passed at all, so the component can declare its own default.
  '''
  if children:
    if _ is not Absent._: raise ConflictingValues(key='_', existing=children, incoming=_)
    _ = children
  if _ is not Absent._:
    if 'children' in props: raise ConflictingValues(key='children', existing=props['children'], incoming=_)
    props['children'] = _
  return fn(**props)


def script_js(code:str, attrs:dict[str,Any]|None=None, **kw_attrs:Any) -> Element:
  'Create a `script` element whose JavaScript `code` is emitted verbatim.'
  return Script(SafeText(code), attrs=attrs, **kw_attrs)


def html_document(*children:Any, lang:str='en', attrs:dict[str,Any]|None=None, **kw_attrs:Any) -> Fragment:
  'Create a complete document: the HTML5 doctype followed by an `html` element.'
  return fragment(doctype, Html(_=children, attrs=attrs, lang=lang, **kw_attrs))


doctype = SafeText('<!DOCTYPE html>')


tag_builders:dict[str,TagBuilder] = { tag: TagBuilder(tag) for tag in html_tags }


A = tag_builders['a']
Abbr = tag_builders['abbr']
Address = tag_builders['address']
Area = tag_builders['area']
Article = tag_builders['article']
Aside = tag_builders['aside']
Audio = tag_builders['audio']
B = tag_builders['b']
Base = tag_builders['base']
Bdi = tag_builders['bdi']
Bdo = tag_builders['bdo']
Blockquote = tag_builders['blockquote']
Body = tag_builders['body']
Br = tag_builders['br']
Button = tag_builders['button']
Canvas = tag_builders['canvas']
Caption = tag_builders['caption']
Cite = tag_builders['cite']
Code = tag_builders['code']
Col = tag_builders['col']
Colgroup = tag_builders['colgroup']
Data = tag_builders['data']
Datalist = tag_builders['datalist']
Dd = tag_builders['dd']
Del = tag_builders['del']
Details = tag_builders['details']
Dfn = tag_builders['dfn']
Dialog = tag_builders['dialog']
Div = tag_builders['div']
Dl = tag_builders['dl']
Dt = tag_builders['dt']
Em = tag_builders['em']
Embed = tag_builders['embed']
Fieldset = tag_builders['fieldset']
Figcaption = tag_builders['figcaption']
Figure = tag_builders['figure']
Footer = tag_builders['footer']
Form = tag_builders['form']
H1 = tag_builders['h1']
H2 = tag_builders['h2']
H3 = tag_builders['h3']
H4 = tag_builders['h4']
H5 = tag_builders['h5']
H6 = tag_builders['h6']
Head = tag_builders['head']
Header = tag_builders['header']
Hgroup = tag_builders['hgroup']
Hr = tag_builders['hr']
Html = tag_builders['html']
I = tag_builders['i']
Iframe = tag_builders['iframe']
Img = tag_builders['img']
Input = tag_builders['input']
Ins = tag_builders['ins']
Kbd = tag_builders['kbd']
Label = tag_builders['label']
Legend = tag_builders['legend']
Li = tag_builders['li']
Link = tag_builders['link']
Main = tag_builders['main']
Map = tag_builders['map']
Mark = tag_builders['mark']
Math = tag_builders['math']
Menu = tag_builders['menu']
Meta = tag_builders['meta']
Meter = tag_builders['meter']
Nav = tag_builders['nav']
Noscript = tag_builders['noscript']
Object = tag_builders['object']
Ol = tag_builders['ol']
Optgroup = tag_builders['optgroup']
Option = tag_builders['option']
Output = tag_builders['output']
P = tag_builders['p']
Param = tag_builders['param']
Picture = tag_builders['picture']
Pre = tag_builders['pre']
Progress = tag_builders['progress']
Q = tag_builders['q']
Rp = tag_builders['rp']
Rt = tag_builders['rt']
Ruby = tag_builders['ruby']
S = tag_builders['s']
Samp = tag_builders['samp']
Script = tag_builders['script']
Search = tag_builders['search']
Section = tag_builders['section']
Select = tag_builders['select']
Slot = tag_builders['slot']
Small = tag_builders['small']
Source = tag_builders['source']
Span = tag_builders['span']
Strong = tag_builders['strong']
Style = tag_builders['style']
Sub = tag_builders['sub']
Summary = tag_builders['summary']
Sup = tag_builders['sup']
Svg = tag_builders['svg']
Table = tag_builders['table']
Tbody = tag_builders['tbody']
Td = tag_builders['td']
Template = tag_builders['template']
Textarea = tag_builders['textarea']
Tfoot = tag_builders['tfoot']
Th = tag_builders['th']
Thead = tag_builders['thead']
Time = tag_builders['time']
Title = tag_builders['title']
Tr = tag_builders['tr']
Track = tag_builders['track']
U = tag_builders['u']
Ul = tag_builders['ul']
Var = tag_builders['var']
Video = tag_builders['video']
Wbr = tag_builders['wbr']
