import io
import os

import pytest
import unittest

from unittest import mock

from exam import Exam, fixture
from lxml import etree, html
from lxml.cssselect import CSSSelector

from tailinline import (
    EMPTY_DOCUMENT,
    Properties,
    Rule,
    StyleSheetResolver,
    UtilityResolver,
    from_string,
    inline,
    split_doctype,
)
from tailinline.batch import (
    list_templates,
    prepare_output,
    process_directory,
    render,
)
from tailinline.preflight import get_base_css, get_latest_version
from tailinline.properties import (
    expand_shorthand_box_property,
    split_value,
    warn_unsupported_shorthand_property,
)
from tailinline.theme import DEFAULT_THEME
from tailinline.__main__ import main

try:
    from lxml.html import soupparser
except ImportError:
    soupparser = None


class TestCase(Exam, unittest.TestCase):
    pass


def test_expand_shorthand_box_property():
    expand = expand_shorthand_box_property('margin-{}')

    assert expand('1px') == {
        'margin-top': '1px',
        'margin-right': '1px',
        'margin-bottom': '1px',
        'margin-left': '1px',
    }

    assert expand('1px 2px') == {
        'margin-top': '1px',
        'margin-right': '2px',
        'margin-bottom': '1px',
        'margin-left': '2px',
    }

    assert expand('1px 2px 3px') == {
        'margin-top': '1px',
        'margin-right': '2px',
        'margin-bottom': '3px',
        'margin-left': '2px',
    }

    assert expand('1px 2px 3px 4px') == {
        'margin-top': '1px',
        'margin-right': '2px',
        'margin-bottom': '3px',
        'margin-left': '4px',
    }

    assert expand('1px 2px 3px 4px 5px') == {'margin': '1px 2px 3px 4px 5px'}

    assert expand('0 calc(1px + 2px)') == {
        'margin-top': '0',
        'margin-right': 'calc(1px + 2px)',
        'margin-bottom': '0',
        'margin-left': 'calc(1px + 2px)',
    }

    assert expand_shorthand_box_property('border-{}-width')('1px 2px 3px 4px 5px') == {
        'border-width': '1px 2px 3px 4px 5px',
    }


def test_split_value():
    assert split_value('1px  2px') == ['1px', '2px']
    assert split_value('calc(1px + 2px) calc(100% - (4px * 2))') == [
        'calc(1px + 2px)',
        'calc(100% - (4px * 2))',
    ]
    assert split_value('') == []


def test_warn_unsupported_shorthand_property():
    assert warn_unsupported_shorthand_property('font')('10px sans-serif') == {
        'font': '10px sans-serif',
    }


def test_base_css_versions():
    assert get_latest_version() == '3.4'
    assert get_base_css() == get_base_css('3.4')
    assert '-webkit-tap-highlight-color' in get_base_css()
    assert '-webkit-tap-highlight-color' not in get_base_css('3.3')
    assert 'font-variation-settings' in get_base_css('3.3')
    assert 'font-variation-settings' not in get_base_css('3.2')
    assert 'dialog' not in get_base_css('3.0')

    with pytest.raises(ValueError):
        get_base_css('2.2')


class RuleTestCase(TestCase):
    def test_compares_by_specificity(self):
        self.assertGreater(Rule(0, '#main'), Rule(0, 'div'))
        self.assertEqual(Rule(0, 'div'), Rule(0, 'p'))
        self.assertLess(Rule(0, 'div'), Rule(0, 'div.container'))

    def test_combine_respects_specificity_rules(self):
        properties = Rule.combine((
            Rule(0, 'h1', {
                'font-weight': 'bold',
                'color': 'blue',
            }),
            Rule(0, 'h1#primary', {
                'color': 'red',
            }),
        ))

        self.assertIsInstance(properties, Properties)
        self.assertEqual(properties, {
            'font-weight': 'bold',
            'color': 'red',
        })

    def tests_combine_respects_ordering(self):
        properties = Rule.combine((
            Rule(1, 'h1', {'font-size': '10px', 'font-weight': 'bold'}),
            Rule(2, 'h1', {'font-size': '20px'})
        ))

        self.assertIsInstance(properties, Properties)
        self.assertEqual(properties, {
            'font-weight': 'bold',
            'font-size': '20px',
        })


class PropertiesTestCase(TestCase):
    def test_serializes_to_attribute_string(self):
        properties = Properties({
            'font-weight': 'bold',
            'color': 'red',
        })

        self.assertEqual('%s' % (properties,), 'font-weight: bold; color: red')

    def test_serializes_minified(self):
        properties = Properties({
            'color': 'red',
            'font-weight': 'bold ! important',
        })

        self.assertEqual(properties.minified(), 'color:red;font-weight:bold!important')

    def test_from_string(self):
        properties = Properties.from_string('color: red; font-weight: bold')
        self.assertEqual(properties, {
            'color': 'red',
            'font-weight': 'bold',
        })

        properties = Properties.from_string('padding: 0 10px')
        self.assertEqual(properties, {
            'padding-top': '0',
            'padding-right': '10px',
            'padding-bottom': '0',
            'padding-left': '10px',
        })

    def test_compresses_box_properties(self):
        properties = Properties.from_string('padding: 0 10px')
        self.assertEqual('%s' % properties, 'padding: 0 10px')

        properties = Properties.from_string('margin: 1px 2px 3px')
        self.assertEqual('%s' % properties, 'margin: 1px 2px 3px')

    def test_does_not_compress_mixed_priorities(self):
        properties = Properties({
            'margin-top': '1px ! important',
            'margin-right': '1px',
            'margin-bottom': '1px',
            'margin-left': '1px',
        })

        self.assertIn('margin-top: 1px ! important', '%s' % properties)

        properties = Properties({
            'margin-top': '1px ! important',
            'margin-right': '2px ! important',
            'margin-bottom': '1px ! important',
            'margin-left': '2px ! important',
        })

        self.assertEqual('%s' % properties, 'margin: 1px 2px ! important')


class UtilityResolverTestCase(TestCase):
    @fixture
    def resolver(self):
        return UtilityResolver()

    def assertResolves(self, class_names, expected):
        self.assertEqual(self.resolver.resolve(class_names), expected)

    def test_colors(self):
        self.assertResolves(['text-red-500'], 'color: rgb(239,68,68)')
        self.assertResolves(['bg-black/50'], 'background-color: rgba(0,0,0,0.5)')
        self.assertResolves(['bg-transparent'], 'background-color: transparent')
        self.assertResolves(['text-[#1da1f2]'], 'color: #1da1f2')
        self.assertResolves(['text-red'], None)

    def test_later_classes_win(self):
        self.assertResolves(['text-red-500', 'text-blue-500'], 'color: rgb(59,130,246)')

    def test_spacing(self):
        self.assertResolves(['p-4'], 'padding: 1rem')
        self.assertResolves(['px-4', 'py-2'], 'padding: 0.5rem 1rem')
        self.assertResolves(['-mt-4'], 'margin-top: -1rem')
        self.assertResolves(['mx-auto'], 'margin-left: auto; margin-right: auto')
        self.assertResolves(['gap-x-2'], 'column-gap: 0.5rem')
        self.assertResolves(['-p-4'], None)

    def test_sizing(self):
        self.assertResolves(['w-1/3'], 'width: 33.333333%')
        self.assertResolves(['w-full'], 'width: 100%')
        self.assertResolves(['h-screen'], 'height: 100vh')
        self.assertResolves(['w-[300px]'], 'width: 300px')
        self.assertResolves(['max-w-screen-sm'], 'max-width: 640px')
        self.assertResolves(['max-w-md'], 'max-width: 28rem')

    def test_typography(self):
        self.assertResolves(['text-lg'], 'font-size: 1.125rem; line-height: 1.75rem')
        self.assertResolves(['text-[14px]'], 'font-size: 14px')
        self.assertResolves(['font-bold', 'uppercase'], 'font-weight: 700; text-transform: uppercase')
        self.assertResolves(['text-center'], 'text-align: center')
        self.assertResolves(['leading-tight'], 'line-height: 1.25')
        self.assertResolves(['-tracking-wide'], 'letter-spacing: -0.025em')
        self.assertResolves(
            ['truncate'],
            'overflow: hidden; text-overflow: ellipsis; white-space: nowrap',
        )

    def test_borders(self):
        self.assertResolves(
            ['border', 'border-gray-200'],
            'border-color: rgb(229,231,235); border-width: 1px',
        )
        self.assertResolves(['border-t-2'], 'border-top-width: 2px')
        self.assertResolves(['border-b-red-500'], 'border-bottom-color: rgb(239,68,68)')
        self.assertResolves(['rounded-lg'], 'border-radius: 0.5rem')
        self.assertResolves(['rounded'], 'border-radius: 0.25rem')
        self.assertResolves(['border-dashed'], 'border-style: dashed')

    def test_misc(self):
        self.assertResolves(['flex', 'items-center'], 'display: flex; align-items: center')
        self.assertResolves(['hidden'], 'display: none')
        self.assertResolves(['opacity-50'], 'opacity: 0.5')
        self.assertResolves(['-z-10'], 'z-index: -10')
        self.assertResolves(['flex-1'], 'flex: 1 1 0%')
        self.assertResolves(
            ['shadow'],
            'box-shadow: 0 1px 3px 0 rgba(0,0,0,0.1), 0 1px 2px -1px rgba(0,0,0,0.1)',
        )

    def test_important(self):
        self.assertResolves(['!font-bold'], 'font-weight: 700 ! important')

    def test_unrecognized(self):
        self.assertResolves([], None)
        self.assertResolves(['foo'], None)
        self.assertResolves(['hover:text-red-500'], None)
        self.assertResolves(['md:flex'], None)
        self.assertResolves(['foo', 'italic'], 'font-style: italic')

    def test_recognizes(self):
        self.assertTrue(self.resolver.recognizes('flex'))
        self.assertTrue(self.resolver.recognizes('bg-sky-100'))
        self.assertFalse(self.resolver.recognizes('foo'))
        self.assertFalse(self.resolver.recognizes('focus:underline'))

    def test_minify(self):
        resolver = UtilityResolver(minify=True)
        self.assertEqual(
            resolver.resolve(['text-red-500', 'font-bold']),
            'color:rgb(239,68,68);font-weight:700',
        )

    def test_custom_theme(self):
        theme = dict(DEFAULT_THEME, colors={'brand': '#f00'})
        resolver = UtilityResolver(theme=theme)
        self.assertEqual(resolver.resolve(['bg-brand']), 'background-color: rgb(255,0,0)')
        self.assertIsNone(resolver.resolve(['bg-red-500']))

    def test_arbitrary_calc_merges_with_sides(self):
        self.assertResolves(['m-[calc(1px_+_2px)]'], 'margin: calc(1px + 2px)')
        self.assertResolves(
            ['m-[calc(1px_+_2px)]', 'mt-4'],
            'margin: 1rem calc(1px + 2px) calc(1px + 2px)',
        )


class StyleSheetResolverTestCase(TestCase):
    def test_first_matching_rule_wins(self):
        resolver = StyleSheetResolver([
            '.foo { color: red; }',
            '.foo { color: blue; }',
        ])
        self.assertEqual(resolver.resolve(['foo']), 'color: red')

    def test_selector_lists(self):
        resolver = StyleSheetResolver(['.a, .b { font-weight: bold; margin: 0 4px }'])
        self.assertEqual(resolver.resolve(['b']), 'font-weight: bold; margin: 0 4px')
        self.assertTrue(resolver.recognizes('a'))

    def test_ignores_compound_selectors(self):
        resolver = StyleSheetResolver([
            'div.foo { color: red } .foo:hover { color: blue } .bar .foo { color: green }',
        ])
        self.assertIsNone(resolver.resolve(['foo']))
        self.assertFalse(resolver.recognizes('foo'))

    def test_joins_multiple_classes(self):
        resolver = StyleSheetResolver(['.a { color: red } .b { font-style: italic }'])
        self.assertEqual(resolver.resolve(['a', 'missing', 'b']), 'color: red; font-style: italic')

    def test_empty(self):
        resolver = StyleSheetResolver([])
        self.assertEqual(len(resolver), 0)
        self.assertIsNone(resolver.resolve(['a']))

    def test_calc_values(self):
        resolver = StyleSheetResolver(['.foo { padding: calc(1px + 2px) calc(3px + 4px) }'])
        self.assertEqual(len(resolver), 1)
        self.assertIn('padding: calc(', resolver.resolve(['foo']))


class InlineTestCase(TestCase):
    def test_inlines_utility_and_stylesheet_classes(self):
        tree = html.document_fromstring("""
            <html>
            <head>
                <style type="text/css">.foo{font-weight:bold}</style>
            </head>
            <body>
                <div class="text-red-500 foo">x</div>
            </body>
            </html>
        """)

        inline(tree, inject_baseline=False)

        div, = tree.cssselect('div')
        self.assertEqual(div.attrib['style'], 'color: rgb(239,68,68); font-weight: bold')
        self.assertNotIn('class', div.attrib)
        self.assertEqual(len(tree.cssselect('style')), 0)

    def test_appends_to_existing_styles(self):
        tree = html.document_fromstring("""
            <html>
            <body>
                <p class="font-bold" style="color: blue;">Hello, world.</p>
            </body>
            </html>
        """)

        inline(tree, inject_baseline=False)

        paragraph, = tree.cssselect('p')
        self.assertEqual(paragraph.attrib['style'], 'color: blue; font-weight: 700')

    def test_strips_unresolved_classes(self):
        tree = html.document_fromstring("""
            <html>
            <body>
                <p class="p-4 missing">Hello, world.</p>
            </body>
            </html>
        """)

        inline(tree, inject_baseline=False)

        paragraph, = tree.cssselect('p')
        self.assertEqual(paragraph.attrib['style'], 'padding: 1rem')
        self.assertNotIn('class', paragraph.attrib)

    def test_keeps_unresolved_classes(self):
        tree = html.document_fromstring("""
            <html>
            <head>
                <style type="text/css">
                    .card { color: red; }
                </style>
            </head>
            <body>
                <div class="p-4 card missing">Hello</div>
                <div class="p-2 flex">World</div>
            </body>
            </html>
        """)

        inline(tree, inject_baseline=False, strip_unresolved=False)

        first, second = tree.cssselect('div')
        self.assertEqual(first.attrib['style'], 'padding: 1rem; color: red')
        self.assertEqual(first.attrib['class'], 'card missing')
        self.assertEqual(second.attrib['style'], 'display: flex; padding: 0.5rem')
        self.assertNotIn('class', second.attrib)
        self.assertEqual(len(tree.cssselect('style')), 1)

    def test_skips_inline_false(self):
        tree = html.document_fromstring("""
            <html>
            <head>
                <style type="text/css">
                    .heading { font-weight: bold; }
                </style>
                <style type="text/css" inline="false">
                    .muted { color: gray; }
                </style>
            </head>
            <body>
                <h1 class="heading muted">Hello, world.</h1>
            </body>
            </html>
        """)

        inline(tree, inject_baseline=False)

        heading, = tree.cssselect('h1')
        self.assertEqual(heading.attrib['style'], 'font-weight: bold')

        stylesheet, = tree.cssselect('style')
        self.assertNotIn('inline', stylesheet.attrib)

    def test_empty_class_attribute(self):
        tree = html.document_fromstring("""
            <html>
            <body>
                <p class="  ">Hello, world.</p>
            </body>
            </html>
        """)

        inline(tree, inject_baseline=False)

        paragraph, = tree.cssselect('p')
        self.assertNotIn('class', paragraph.attrib)
        self.assertNotIn('style', paragraph.attrib)

    def test_empty_styles(self):
        tree = html.document_fromstring("""
            <html>
            <head>
                <style type="text/css"></style>
            </head>
            <body>
                <h1 class="missing">Hello, world.</h1>
            </body>
            </html>
        """)

        inline(tree, inject_baseline=False)

        self.assertEqual(len(tree.cssselect('style')), 0)

    def test_skips_stylesheet_lookup_without_rules(self):
        tree = html.document_fromstring(
            '<html><body><p class="italic foo">x</p></body></html>')

        with mock.patch.object(StyleSheetResolver, 'resolve') as resolve:
            inline(tree, inject_baseline=False, strip_unresolved=False)

        self.assertFalse(resolve.called)
        paragraph, = CSSSelector('p')(tree)
        self.assertEqual(paragraph.attrib['class'], 'foo')
        self.assertEqual(paragraph.attrib['style'], 'font-style: italic')

    def test_stylesheet_calc_values(self):
        tree = html.document_fromstring("""
            <html>
            <head>
                <style>.foo{padding: calc(1px + 2px) calc(3px + 4px)}</style>
            </head>
            <body><div class="foo">x</div></body>
            </html>
        """)
        inline(tree, inject_baseline=False)

        div, = CSSSelector('div')(tree)
        self.assertIn('calc(', div.attrib['style'])

    def test_uses_custom_resolver(self):
        resolver = StyleSheetResolver(['.brand { color: #123456 }'])
        tree = html.document_fromstring('<html><body><p class="brand">Hi</p></body></html>')

        inline(tree, resolver=resolver, inject_baseline=False)

        paragraph, = tree.cssselect('p')
        self.assertEqual(paragraph.attrib['style'], 'color: #123456')


class BaselineTestCase(TestCase):
    def test_injects_baseline(self):
        tree = html.document_fromstring("""
            <html>
            <body>
                <h1 class="text-xl">Hello, world.</h1>
            </body>
            </html>
        """)

        inline(tree)

        root = tree.getroottree().getroot()
        self.assertIn('line-height: 1.5', root.attrib['style'])

        body, = tree.cssselect('body')
        self.assertIn('margin: 0', body.attrib['style'])
        self.assertIn('line-height: inherit', body.attrib['style'])

        heading, = tree.cssselect('h1')
        self.assertIn('box-sizing: border-box', heading.attrib['style'])
        self.assertIn('font-size: inherit', heading.attrib['style'])
        self.assertTrue(heading.attrib['style'].endswith(
            '; font-size: 1.25rem; line-height: 1.75rem'))

    def test_skips_pseudo_selectors(self):
        tree = html.document_fromstring("""
            <html>
            <body>
                <p>Hello</p>
                <a href="#">world</a>
            </body>
            </html>
        """)

        inline(tree, base_css="""
            p:hover { color: red; }
            p, a:focus { font-weight: bold; }
            a::before { color: blue; }
        """)

        paragraph, = tree.cssselect('p')
        self.assertEqual(paragraph.attrib['style'], 'font-weight: bold')

        link, = tree.cssselect('a')
        self.assertNotIn('style', link.attrib)

    def test_does_not_override_inlined_styles(self):
        tree = html.document_fromstring("""
            <html>
            <body>
                <p style="color: blue">Hello, world.</p>
            </body>
            </html>
        """)

        inline(tree, base_css='p { color: red; display: block; }')

        paragraph, = tree.cssselect('p')
        properties = Properties.from_string(paragraph.attrib['style'])
        self.assertEqual(properties, {
            'color': 'blue',
            'display': 'block',
        })

    def test_respects_specificity(self):
        tree = html.document_fromstring("""
            <html>
            <body>
                <p class="lead">Hello, world.</p>
            </body>
            </html>
        """)

        inline(tree, base_css='p.lead { color: blue; } p { color: red; }')

        paragraph, = tree.cssselect('p')
        self.assertEqual(paragraph.attrib['style'], 'color: blue')

    def test_base_version(self):
        tree = html.document_fromstring('<html><body><p>Hi</p></body></html>')

        inline(tree, base_version='3.3')

        root = tree.getroottree().getroot()
        self.assertNotIn('-webkit-tap-highlight-color', root.attrib['style'])


class FromStringTestCase(TestCase):
    document = """<!DOCTYPE html>
        <html>
        <head>
            <style type="text/css">.title { letter-spacing: 2px; }</style>
        </head>
        <body>
            <h1 class="title text-2xl font-semibold">Hello, world.</h1>
            <p class="mt-4 text-gray-500">Welcome</p>
        </body>
        </html>
    """

    def test_keeps_doctype(self):
        result = from_string(self.document)
        self.assertTrue(result.startswith('<!DOCTYPE html>\n<html'))

    def test_without_doctype(self):
        result = from_string('<html><body><p class="italic">Hi</p></body></html>',
                             inject_baseline=False)
        self.assertEqual(
            result,
            '<html><body><p style="font-style: italic">Hi</p></body></html>',
        )

    def test_keeps_doctype_after_byte_order_mark(self):
        result = from_string('\ufeff<!DOCTYPE html><html><body><p class="p-4">x</p></body></html>',
                             inject_baseline=False)
        self.assertEqual(
            result,
            '<!DOCTYPE html>\n<html><body><p style="padding: 1rem">x</p></body></html>',
        )

    def test_keeps_doctype_after_comment(self):
        result = from_string('<!-- generated -->\n<!DOCTYPE html>\n<html><body></body></html>',
                             inject_baseline=False)
        self.assertTrue(result.startswith('<!DOCTYPE html>\n<html'))

    def test_xml_declaration(self):
        result = from_string(
            '<?xml version="1.0" encoding="utf-8"?>\n<!DOCTYPE html>\n'
            '<html><body><p class="italic">Hi</p></body></html>',
            inject_baseline=False,
        )
        self.assertEqual(
            result,
            '<!DOCTYPE html>\n<html><body><p style="font-style: italic">Hi</p></body></html>',
        )

    def test_empty_document(self):
        self.assertEqual(from_string('', inject_baseline=False), EMPTY_DOCUMENT)
        self.assertEqual(from_string(' \n', inject_baseline=False), EMPTY_DOCUMENT)
        self.assertIn('<body', from_string(''))

    def test_authored_calc_style(self):
        result = from_string(
            '<html><body><div style="margin: 0 calc(1px + 2px) 0 calc(3px + 4px)">x</div>'
            '</body></html>'
        )
        self.assertIn('calc(1px + 2px)', result)
        self.assertIn('calc(3px + 4px)', result)

    def test_is_deterministic(self):
        self.assertEqual(from_string(self.document), from_string(self.document))

    def test_removes_classes_and_styles(self):
        result = from_string(self.document)
        self.assertNotIn('class=', result)
        self.assertNotIn('<style', result)
        self.assertIn('letter-spacing: 2px', result)


class ParserTestCase(TestCase):
    document = """
        <html>
        <head>
            <style type="text/css">
                .title { color: red; }
            </style>
        </head>
        <body>
            <h1 class="title">Hello, world.</h1>
        </body>
        </html>
    """

    def assertInlines(self, tree):
        inline(tree, inject_baseline=False)

        heading, = CSSSelector('h1')(tree)
        self.assertEqual(heading.attrib['style'], 'color: red')

    def test_etree(self):
        tree = etree.fromstring(self.document)
        self.assertInlines(tree)

    def test_html(self):
        tree = html.document_fromstring(self.document)
        self.assertInlines(tree)

    @pytest.mark.skipif(soupparser is None,
                        reason='BeautifulSoup is not installed')
    def test_beautifulsoup(self):
        tree = soupparser.fromstring(self.document)
        self.assertInlines(tree)


TEMPLATE = """<!DOCTYPE html>
<html>
  <head>
    <style>.note { font-style: italic; }</style>
  </head>
  <body>
    <!-- greeting -->
    <p class="text-red-500 note">Hello</p>
  </body>
</html>
"""


def write(path, text):
    with io.open(str(path), 'w', encoding='utf-8') as f:
        f.write(text)


def read(path):
    with io.open(str(path), 'r', encoding='utf-8') as f:
        return f.read()


def test_list_templates(tmpdir):
    write(tmpdir.join('a.html'), TEMPLATE)
    write(tmpdir.join('b.txt'), 'b')
    write(tmpdir.join('c.html'), TEMPLATE)

    assert sorted(list_templates(str(tmpdir))) == ['a.html', 'c.html']


def test_list_templates_missing_directory(tmpdir):
    with pytest.raises(OSError):
        list_templates(str(tmpdir.join('missing')))


def test_prepare_output_creates_parents(tmpdir):
    output = tmpdir.join('a', 'b')
    prepare_output(str(output))
    assert output.check(dir=True)

    # Existing directories are fine.
    prepare_output(str(output))
    assert output.check(dir=True)


def test_prepare_output_clean(tmpdir):
    output = tmpdir.join('out')
    output.ensure(dir=True)
    write(output.join('stale.html'), 'stale')

    prepare_output(str(output))
    assert output.join('stale.html').check()

    prepare_output(str(output), clean=True)
    assert output.check(dir=True)
    assert not output.join('stale.html').check()


def test_render_passthrough():
    assert render(TEMPLATE, 'raw') == TEMPLATE


def test_render_minified_keeps_doctype():
    result = render(TEMPLATE)
    assert result.startswith('<!DOCTYPE html>')
    assert 'greeting' not in result
    assert len(result) < len(TEMPLATE)


XHTML_DOCTYPE = (
    '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Transitional//EN" '
    '"http://www.w3.org/TR/xhtml1/DTD/xhtml1-transitional.dtd">'
)


def test_render_minified_keeps_doctype_case():
    text = from_string(XHTML_DOCTYPE + '\n<html><body><p class="p-4">x</p></body></html>')
    result = render(text)
    assert result.startswith(XHTML_DOCTYPE + '<')
    assert 'padding' in result


def test_split_doctype():
    assert split_doctype(TEMPLATE) == ('<!DOCTYPE html>', TEMPLATE[len('<!DOCTYPE html>'):])
    assert split_doctype('<html></html>') == (None, '<html></html>')
    assert split_doctype('\ufeff<?xml version="1.0"?>\n<!-- a --><!doctype html><html>') == (
        '<!doctype html>', '<html>')
    assert split_doctype('<?xml version="1.0"?><!-- a --><p>') == (None, '<!-- a --><p>')


def test_process_directory(tmpdir):
    source = tmpdir.join('templates')
    source.ensure(dir=True)
    write(source.join('welcome.html'), TEMPLATE)
    write(source.join('notes.txt'), 'not a template')
    output = tmpdir.join('build', 'emails')

    written = process_directory(str(source), str(output), mode='raw', inject_baseline=False)

    assert written == [os.path.join(str(output), 'welcome.html')]
    assert not output.join('notes.txt').check()

    result = read(output.join('welcome.html'))
    assert result.startswith('<!DOCTYPE html>\n')
    assert '<p style="color: rgb(239,68,68); font-style: italic">Hello</p>' in result
    assert '<style' not in result


def test_process_directory_minified(tmpdir):
    source = tmpdir.join('templates')
    source.ensure(dir=True)
    write(source.join('welcome.html'), TEMPLATE)
    output = tmpdir.join('out')

    process_directory(str(source), str(output))

    result = read(output.join('welcome.html'))
    assert result.startswith('<!DOCTYPE html>')
    assert 'class=' not in result
    assert 'greeting' not in result
    assert 'style=' in result


def test_process_directory_empty_template(tmpdir):
    source = tmpdir.join('templates')
    source.ensure(dir=True)
    write(source.join('a.html'), '')
    output = tmpdir.join('out')

    written = process_directory(str(source), str(output), mode='raw', inject_baseline=False)

    assert written == [os.path.join(str(output), 'a.html')]
    assert read(output.join('a.html')) == EMPTY_DOCUMENT


def test_process_directory_byte_order_mark(tmpdir):
    source = tmpdir.join('templates')
    source.ensure(dir=True)
    with io.open(str(source.join('welcome.html')), 'w', encoding='utf-8-sig') as f:
        f.write(TEMPLATE)
    output = tmpdir.join('out')

    process_directory(str(source), str(output))

    result = read(output.join('welcome.html'))
    assert result.startswith('<!DOCTYPE html>')


def test_process_directory_missing_input(tmpdir):
    with pytest.raises(OSError):
        process_directory(str(tmpdir.join('missing')), str(tmpdir.join('out')))


def test_main(tmpdir):
    source = tmpdir.join('templates')
    source.ensure(dir=True)
    write(source.join('welcome.html'), TEMPLATE)
    output = tmpdir.join('out')

    assert main(['-i', str(source), '-o', str(output), '-m', 'raw', '--no-baseline']) == 0

    result = read(output.join('welcome.html'))
    assert 'font-style: italic' in result
    assert 'class=' not in result


def test_main_keep_unresolved(tmpdir):
    source = tmpdir.join('templates')
    source.ensure(dir=True)
    write(source.join('welcome.html'), TEMPLATE)
    output = tmpdir.join('out')

    assert main([
        '--input', str(source),
        '--output', str(output),
        '--mode', 'raw',
        '--keep-unresolved',
        '--clean',
    ]) == 0

    result = read(output.join('welcome.html'))
    assert 'class="note"' in result
    assert '<style>' in result


def test_main_requires_directories():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2


def test_main_reports_failures(tmpdir):
    assert main(['-i', str(tmpdir.join('missing')), '-o', str(tmpdir.join('out'))]) == 1
