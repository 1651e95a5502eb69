import itertools
import logging
import re

from collections import defaultdict
from functools import lru_cache
from lxml import html
from lxml.cssselect import CSSSelector, SelectorError

from tailinline.preflight import get_base_css
from tailinline.properties import Properties, Rule
from tailinline.resolvers import (
    Resolver,
    StyleSheetResolver,
    create_parser,
    is_style_rule,
)
from tailinline.utilities import UtilityResolver

__all__ = (
    'Properties',
    'Resolver',
    'Rule',
    'StyleSheetResolver',
    'UtilityResolver',
    'append_style',
    'apply_baseline',
    'from_string',
    'inline',
    'split_doctype',
)


logger = logging.getLogger(__name__)

# Anything allowed ahead of the doctype: a byte order mark, an XML
# declaration and comments.
PROLOG_RE = re.compile(
    r'^[\s\ufeff]*(?:<\?xml[^>]*\?>\s*)?((?:<!--.*?-->\s*)*)(<!doctype[^>]*>)?',
    re.IGNORECASE | re.DOTALL,
)

EMPTY_DOCUMENT = '<html><head></head><body></body></html>'

# Selectors that already target the document root; every other baseline
# selector is scoped to the body.
ROOT_SELECTORS = ('html', 'body')


def split_doctype(string):
    """
    Splits a document into its doctype declaration (``None`` if it has none)
    and the markup that follows it. A byte order mark or XML declaration in
    front of the markup is dropped, and so are comments ahead of a doctype.
    """
    match = PROLOG_RE.match(string)
    doctype = match.group(2)
    if doctype is None:
        return None, string[match.start(1):]
    return doctype, string[match.end():]


def append_style(node, css):
    """
    Appends declarations to the ``style`` attribute of ``node``, after any
    declarations it already has.
    """
    css = css.strip().strip(';').strip()
    if not css:
        return

    existing = node.attrib.get('style', '').strip().rstrip(';').rstrip()
    if existing:
        css = '%s; %s' % (existing, css)
    node.attrib['style'] = css


@lru_cache(maxsize=8)
def parse_baseline(css):
    """
    Parses a baseline stylesheet into a tuple of ``(selector, properties)``
    pairs in source order. Selectors containing a pseudo-class or
    pseudo-element are dropped since they can't be expressed inline.
    """
    rules = []
    for rule in filter(is_style_rule, create_parser().parseString(css)):
        selectors = [
            selector.selectorText for selector in rule.selectorList
            if ':' not in selector.selectorText
        ]
        if not selectors:
            continue

        properties = Properties.from_style(rule.style)
        for selector in selectors:
            if selector not in ROOT_SELECTORS:
                selector = 'body %s' % selector
            rules.append((selector, properties))
    return tuple(rules)


def apply_baseline(tree, css):
    """
    Applies the rules of the baseline stylesheet ``css`` to every matching
    element of ``tree``. Rules are combined by specificity and source order,
    and an element's own inline style takes precedence over them.
    """
    rule_id_sequence = itertools.count()

    nodes = defaultdict(list)
    for selector, properties in parse_baseline(css):
        try:
            rule = Rule(next(rule_id_sequence), selector, properties)
        except SelectorError:
            logger.warning('Skipping baseline selector %r, it cannot be matched.', selector)
            continue

        for node in rule.selector(tree):
            nodes[node].append(rule)

    for node, rules in nodes.items():
        properties = Rule.combine(rules)

        style_attr = node.attrib.get('style')
        if style_attr is not None:
            properties.update(Properties.from_string(style_attr))

        node.attrib['style'] = '%s' % properties


def inline(tree, resolver=None, inject_baseline=True, strip_unresolved=True,
           base_css=None, base_version=None):
    """
    Replaces the class attributes of all elements within ``tree`` with the
    inline styles they stand for. This modifies the tree in-place.

    Each class is first resolved by ``resolver`` (a
    :class:`~tailinline.utilities.UtilityResolver` by default.) Classes it
    doesn't recognize are looked up in the document's own stylesheets, where
    a rule with a bare ``.classname`` selector provides the declarations.

    With ``strip_unresolved`` (the default) all class attributes and style
    tags are removed afterwards. Otherwise unrecognized classes are left on
    their elements and the stylesheets are kept so they still apply.

    With ``inject_baseline`` the baseline stylesheet (``base_css``, or the
    preflight for ``base_version``) is inlined before any classes.

    To prevent a ``<style>`` tag from being used or removed, add an
    ``inline="false"`` attribute::

        <style type="text/css" inline="false">
            /* Any rules contained within this tag will be left as they are. */
        </style>

    """
    if resolver is None:
        resolver = UtilityResolver()

    # Get all stylesheets from the document.
    stylesheets = []
    for stylesheet in CSSSelector('style')(tree):
        if stylesheet.attrib.get('inline') == 'false':
            del stylesheet.attrib['inline']
            continue
        stylesheets.append(stylesheet)

    fallback = StyleSheetResolver(
        stylesheet.text for stylesheet in stylesheets if stylesheet.text
    )

    if inject_baseline:
        if base_css is None:
            base_css = get_base_css(base_version)
        apply_baseline(tree, base_css)

    for node in CSSSelector('[class]')(tree):
        class_names = node.attrib['class'].split()

        css = resolver.resolve(class_names)
        if css:
            append_style(node, css)

        unresolved = [name for name in class_names if not resolver.recognizes(name)]
        if unresolved:
            css = fallback.resolve(unresolved) if len(fallback) else None
            if css:
                append_style(node, css)
            else:
                logger.debug('No styles found for classes %r', unresolved)

        if strip_unresolved or not unresolved:
            del node.attrib['class']
        else:
            node.attrib['class'] = ' '.join(unresolved)

    if strip_unresolved:
        for stylesheet in stylesheets:
            stylesheet.getparent().remove(stylesheet)


def from_string(string, **options):
    """
    Parses an HTML document, inlines it (see :func:`inline` for ``options``)
    and returns the result as text. A doctype declaration in the input is
    carried over unchanged, and blank input is treated as an empty document.
    """
    doctype, markup = split_doctype(string)
    if not markup.strip():
        markup = EMPTY_DOCUMENT

    tree = html.document_fromstring(markup)
    inline(tree, **options)
    result = html.tostring(tree, encoding='unicode')

    if doctype is not None:
        result = '%s\n%s' % (doctype, result)
    return result
