"""
Resolution of utility class names (``p-4``, ``text-red-500``, ...) into CSS
declarations using a theme.
"""

import logging
import re

from tailinline.properties import Properties, expand_declaration
from tailinline.resolvers import Resolver
from tailinline.theme import DEFAULT_THEME


logger = logging.getLogger(__name__)


ARBITRARY_VALUE_RE = re.compile(r'^\[(.+)\]$')
FRACTION_RE = re.compile(r'^(\d+)/(\d+)$')
COLOR_RE = re.compile(r'^([a-z]+)(?:-(\d+))?(?:/(\d+))?$')
HEX_RE = re.compile(r'^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')
NUMBER_RE = re.compile(r'^\d+$')


def display(value):
    return [('display', value)]


static_utilities = {
    'block': display('block'),
    'inline-block': display('inline-block'),
    'inline': display('inline'),
    'flex': display('flex'),
    'inline-flex': display('inline-flex'),
    'table': display('table'),
    'inline-table': display('inline-table'),
    'table-caption': display('table-caption'),
    'table-cell': display('table-cell'),
    'table-column': display('table-column'),
    'table-column-group': display('table-column-group'),
    'table-footer-group': display('table-footer-group'),
    'table-header-group': display('table-header-group'),
    'table-row-group': display('table-row-group'),
    'table-row': display('table-row'),
    'flow-root': display('flow-root'),
    'grid': display('grid'),
    'inline-grid': display('inline-grid'),
    'contents': display('contents'),
    'list-item': display('list-item'),
    'hidden': display('none'),

    'static': [('position', 'static')],
    'fixed': [('position', 'fixed')],
    'absolute': [('position', 'absolute')],
    'relative': [('position', 'relative')],
    'sticky': [('position', 'sticky')],

    'visible': [('visibility', 'visible')],
    'invisible': [('visibility', 'hidden')],

    'float-left': [('float', 'left')],
    'float-right': [('float', 'right')],
    'float-none': [('float', 'none')],

    'box-border': [('box-sizing', 'border-box')],
    'box-content': [('box-sizing', 'content-box')],

    'text-left': [('text-align', 'left')],
    'text-center': [('text-align', 'center')],
    'text-right': [('text-align', 'right')],
    'text-justify': [('text-align', 'justify')],
    'text-start': [('text-align', 'start')],
    'text-end': [('text-align', 'end')],
    'text-ellipsis': [('text-overflow', 'ellipsis')],
    'text-clip': [('text-overflow', 'clip')],

    'italic': [('font-style', 'italic')],
    'not-italic': [('font-style', 'normal')],
    'underline': [('text-decoration-line', 'underline')],
    'overline': [('text-decoration-line', 'overline')],
    'line-through': [('text-decoration-line', 'line-through')],
    'no-underline': [('text-decoration-line', 'none')],
    'uppercase': [('text-transform', 'uppercase')],
    'lowercase': [('text-transform', 'lowercase')],
    'capitalize': [('text-transform', 'capitalize')],
    'normal-case': [('text-transform', 'none')],
    'truncate': [
        ('overflow', 'hidden'),
        ('text-overflow', 'ellipsis'),
        ('white-space', 'nowrap'),
    ],

    'whitespace-normal': [('white-space', 'normal')],
    'whitespace-nowrap': [('white-space', 'nowrap')],
    'whitespace-pre': [('white-space', 'pre')],
    'whitespace-pre-line': [('white-space', 'pre-line')],
    'whitespace-pre-wrap': [('white-space', 'pre-wrap')],
    'break-normal': [('overflow-wrap', 'normal'), ('word-break', 'normal')],
    'break-words': [('overflow-wrap', 'break-word')],
    'break-all': [('word-break', 'break-all')],

    'flex-row': [('flex-direction', 'row')],
    'flex-row-reverse': [('flex-direction', 'row-reverse')],
    'flex-col': [('flex-direction', 'column')],
    'flex-col-reverse': [('flex-direction', 'column-reverse')],
    'flex-wrap': [('flex-wrap', 'wrap')],
    'flex-wrap-reverse': [('flex-wrap', 'wrap-reverse')],
    'flex-nowrap': [('flex-wrap', 'nowrap')],

    'items-start': [('align-items', 'flex-start')],
    'items-end': [('align-items', 'flex-end')],
    'items-center': [('align-items', 'center')],
    'items-baseline': [('align-items', 'baseline')],
    'items-stretch': [('align-items', 'stretch')],
    'justify-normal': [('justify-content', 'normal')],
    'justify-start': [('justify-content', 'flex-start')],
    'justify-end': [('justify-content', 'flex-end')],
    'justify-center': [('justify-content', 'center')],
    'justify-between': [('justify-content', 'space-between')],
    'justify-around': [('justify-content', 'space-around')],
    'justify-evenly': [('justify-content', 'space-evenly')],
    'content-start': [('align-content', 'flex-start')],
    'content-end': [('align-content', 'flex-end')],
    'content-center': [('align-content', 'center')],
    'content-between': [('align-content', 'space-between')],
    'content-around': [('align-content', 'space-around')],
    'self-auto': [('align-self', 'auto')],
    'self-start': [('align-self', 'flex-start')],
    'self-end': [('align-self', 'flex-end')],
    'self-center': [('align-self', 'center')],
    'self-stretch': [('align-self', 'stretch')],

    'border-solid': [('border-style', 'solid')],
    'border-dashed': [('border-style', 'dashed')],
    'border-dotted': [('border-style', 'dotted')],
    'border-double': [('border-style', 'double')],
    'border-hidden': [('border-style', 'hidden')],
    'border-none': [('border-style', 'none')],
    'border-collapse': [('border-collapse', 'collapse')],
    'border-separate': [('border-collapse', 'separate')],

    'align-baseline': [('vertical-align', 'baseline')],
    'align-top': [('vertical-align', 'top')],
    'align-middle': [('vertical-align', 'middle')],
    'align-bottom': [('vertical-align', 'bottom')],
    'align-text-top': [('vertical-align', 'text-top')],
    'align-text-bottom': [('vertical-align', 'text-bottom')],

    'list-none': [('list-style-type', 'none')],
    'list-disc': [('list-style-type', 'disc')],
    'list-decimal': [('list-style-type', 'decimal')],
    'list-inside': [('list-style-position', 'inside')],
    'list-outside': [('list-style-position', 'outside')],

    'table-auto': [('table-layout', 'auto')],
    'table-fixed': [('table-layout', 'fixed')],

    'bg-repeat': [('background-repeat', 'repeat')],
    'bg-no-repeat': [('background-repeat', 'no-repeat')],
    'bg-auto': [('background-size', 'auto')],
    'bg-cover': [('background-size', 'cover')],
    'bg-contain': [('background-size', 'contain')],
    'bg-center': [('background-position', 'center')],
    'bg-top': [('background-position', 'top')],
    'bg-bottom': [('background-position', 'bottom')],
    'bg-left': [('background-position', 'left')],
    'bg-right': [('background-position', 'right')],

    'pointer-events-none': [('pointer-events', 'none')],
    'pointer-events-auto': [('pointer-events', 'auto')],
    'grow': [('flex-grow', '1')],
    'shrink': [('flex-shrink', '1')],
}

for keyword in ('auto', 'hidden', 'clip', 'visible', 'scroll'):
    static_utilities['overflow-%s' % keyword] = [('overflow', keyword)]
    static_utilities['overflow-x-%s' % keyword] = [('overflow-x', keyword)]
    static_utilities['overflow-y-%s' % keyword] = [('overflow-y', keyword)]

for keyword in ('auto', 'default', 'pointer', 'wait', 'text', 'move', 'not-allowed'):
    static_utilities['cursor-%s' % keyword] = [('cursor', keyword)]


def arbitrary(value):
    """
    Returns the content of a bracketed arbitrary value (``[12px]``), with
    underscores standing in for spaces.
    """
    match = ARBITRARY_VALUE_RE.match(value)
    if match is None:
        return None
    return match.group(1).replace('_', ' ')


def fraction(value):
    match = FRACTION_RE.match(value)
    if match is None:
        return None
    numerator, denominator = map(int, match.groups())
    if denominator == 0:
        return None
    percentage = '%f' % (numerator * 100.0 / denominator)
    return '%s%%' % percentage.rstrip('0').rstrip('.')


def negate(value):
    if value.strip('0.px rem') == '':
        return value
    if value.startswith('-'):
        return value[1:]
    if value[0].isdigit() or value[0] == '.':
        return '-' + value
    return 'calc(%s * -1)' % value


def hex_to_rgb(value, alpha=None):
    value = value.lstrip('#')
    if len(value) == 3:
        value = ''.join(character * 2 for character in value)
    channels = [str(int(value[i:i + 2], 16)) for i in (0, 2, 4)]
    if alpha is None:
        return 'rgb(%s)' % ','.join(channels)
    return 'rgba(%s,%s)' % (','.join(channels), alpha)


def looks_like_color(value):
    return bool(HEX_RE.match(value)) or value.startswith(('rgb', 'hsl'))


class UtilityResolver(Resolver):
    """
    Resolves utility class names into CSS using a theme (see
    :mod:`tailinline.theme`.)

    Classes carrying a variant prefix (``hover:``, ``md:``) depend on state
    or media queries and can't be expressed as an inline style, so they are
    not recognized.
    """
    def __init__(self, theme=None, minify=False):
        if theme is None:
            theme = DEFAULT_THEME
        self.theme = theme
        self.minify = minify

        self.handlers = {
            'p': self.spacing('padding'),
            'px': self.spacing('padding-left', 'padding-right'),
            'py': self.spacing('padding-top', 'padding-bottom'),
            'pt': self.spacing('padding-top'),
            'pr': self.spacing('padding-right'),
            'pb': self.spacing('padding-bottom'),
            'pl': self.spacing('padding-left'),
            'm': self.spacing('margin', negative=True, auto=True),
            'mx': self.spacing('margin-left', 'margin-right', negative=True, auto=True),
            'my': self.spacing('margin-top', 'margin-bottom', negative=True, auto=True),
            'mt': self.spacing('margin-top', negative=True, auto=True),
            'mr': self.spacing('margin-right', negative=True, auto=True),
            'mb': self.spacing('margin-bottom', negative=True, auto=True),
            'ml': self.spacing('margin-left', negative=True, auto=True),
            'gap': self.spacing('gap'),
            'gap-x': self.spacing('column-gap'),
            'gap-y': self.spacing('row-gap'),
            'indent': self.spacing('text-indent', negative=True),
            'top': self.inset('top'),
            'right': self.inset('right'),
            'bottom': self.inset('bottom'),
            'left': self.inset('left'),
            'inset': self.inset('top', 'right', 'bottom', 'left'),
            'inset-x': self.inset('left', 'right'),
            'inset-y': self.inset('top', 'bottom'),
            'w': self.size('width', screen='100vw'),
            'h': self.size('height', screen='100vh'),
            'min-w': self.size('min-width', spacing=False),
            'min-h': self.size('min-height', spacing=False, screen='100vh'),
            'max-h': self.size('max-height', screen='100vh'),
            'max-w': self.max_width,
            'basis': self.size('flex-basis'),
            'text': self.text,
            'font': self.font,
            'leading': self.scale('line-height', 'lineHeight'),
            'tracking': self.scale('letter-spacing', 'letterSpacing', negative=True),
            'bg': self.color('background-color'),
            'border': self.border(('border-width',), 'border-color'),
            'border-x': self.border(
                ('border-left-width', 'border-right-width'),
                'border-left-color', 'border-right-color'),
            'border-y': self.border(
                ('border-top-width', 'border-bottom-width'),
                'border-top-color', 'border-bottom-color'),
            'border-t': self.border(('border-top-width',), 'border-top-color'),
            'border-r': self.border(('border-right-width',), 'border-right-color'),
            'border-b': self.border(('border-bottom-width',), 'border-bottom-color'),
            'border-l': self.border(('border-left-width',), 'border-left-color'),
            'rounded': self.scale('border-radius', 'borderRadius'),
            'rounded-t': self.scale(
                ('border-top-left-radius', 'border-top-right-radius'), 'borderRadius'),
            'rounded-r': self.scale(
                ('border-top-right-radius', 'border-bottom-right-radius'), 'borderRadius'),
            'rounded-b': self.scale(
                ('border-bottom-right-radius', 'border-bottom-left-radius'), 'borderRadius'),
            'rounded-l': self.scale(
                ('border-top-left-radius', 'border-bottom-left-radius'), 'borderRadius'),
            'rounded-tl': self.scale('border-top-left-radius', 'borderRadius'),
            'rounded-tr': self.scale('border-top-right-radius', 'borderRadius'),
            'rounded-br': self.scale('border-bottom-right-radius', 'borderRadius'),
            'rounded-bl': self.scale('border-bottom-left-radius', 'borderRadius'),
            'shadow': self.scale('box-shadow', 'boxShadow'),
            'opacity': self.scale('opacity', 'opacity'),
            'z': self.scale('z-index', 'zIndex', negative=True),
            'flex': self.flex,
            'grow': self.keyword('flex-grow', {'0': '0'}),
            'shrink': self.keyword('flex-shrink', {'0': '0'}),
            'order': self.order,
        }

    def spacing_value(self, value):
        if value in self.theme['spacing']:
            return self.theme['spacing'][value]
        return arbitrary(value)

    def color_value(self, value):
        """
        Returns the CSS color for a color key such as ``red-500``,
        ``black/50`` or ``[#1da1f2]``.
        """
        custom = arbitrary(value)
        if custom is not None:
            return custom

        match = COLOR_RE.match(value)
        if match is None:
            return None

        name, shade, alpha = match.groups()
        color = self.theme['colors'].get(name)
        if isinstance(color, dict):
            color = color.get(shade) if shade is not None else None
        elif shade is not None:
            return None

        if color is None:
            return None

        if alpha is not None:
            alpha = '%g' % (int(alpha) / 100.0)

        if color.startswith('#'):
            return hex_to_rgb(color, alpha)
        if alpha is not None:
            return None
        return color

    def spacing(self, *properties, **options):
        negative = options.get('negative', False)
        auto = options.get('auto', False)

        def resolve(value, negated):
            if value is None or (negated and not negative):
                return None
            if auto and value == 'auto':
                result = 'auto' if not negated else None
            else:
                result = self.spacing_value(value)
            if result is None:
                return None
            if negated:
                result = negate(result)
            return [(property, result) for property in properties]

        return resolve

    def inset(self, *properties):
        def resolve(value, negated):
            if value is None:
                return None
            result = self.spacing_value(value) or fraction(value)
            if result is None:
                result = {'auto': 'auto', 'full': '100%'}.get(value)
                if result is None or (negated and value == 'auto'):
                    return None
            if negated:
                result = negate(result)
            return [(property, result) for property in properties]

        return resolve

    def size(self, property, spacing=True, screen=None):
        keywords = {
            'auto': 'auto',
            'full': '100%',
            'min': 'min-content',
            'max': 'max-content',
            'fit': 'fit-content',
        }
        if screen is not None:
            keywords['screen'] = screen

        def resolve(value, negated):
            if value is None or negated:
                return None
            if spacing:
                result = self.spacing_value(value)
            else:
                result = {'0': '0px'}.get(value) or arbitrary(value)
            result = result or fraction(value) or keywords.get(value)
            if result is None:
                return None
            return [(property, result)]

        return resolve

    def max_width(self, value, negated):
        if value is None or negated:
            return None
        result = self.theme['maxWidth'].get(value) or arbitrary(value)
        if result is None:
            return None
        return [('max-width', result)]

    def scale(self, properties, key, negative=False):
        if not isinstance(properties, tuple):
            properties = (properties,)

        def resolve(value, negated):
            if negated and not negative:
                return None
            result = self.theme[key].get('DEFAULT' if value is None else value)
            if result is None and value is not None:
                result = arbitrary(value)
            if result is None:
                return None
            if negated:
                result = negate(result)
            return [(property, result) for property in properties]

        return resolve

    def keyword(self, property, values):
        def resolve(value, negated):
            if negated:
                return None
            result = values.get(value)
            if result is None:
                return None
            return [(property, result)]

        return resolve

    def color(self, *properties):
        def resolve(value, negated):
            if value is None or negated:
                return None
            result = self.color_value(value)
            if result is None:
                return None
            return [(property, result) for property in properties]

        return resolve

    def border(self, width_properties, *color_properties):
        color = self.color(*color_properties)

        def resolve(value, negated):
            if negated:
                return None
            key = 'DEFAULT' if value is None else value
            width = self.theme['borderWidth'].get(key)
            if width is None and value is not None:
                custom = arbitrary(value)
                if custom is not None and not looks_like_color(custom):
                    width = custom
            if width is not None:
                return [(property, width) for property in width_properties]
            return color(value, negated)

        return resolve

    def text(self, value, negated):
        if value is None or negated:
            return None
        if value in self.theme['fontSize']:
            size, line_height = self.theme['fontSize'][value]
            return [('font-size', size), ('line-height', line_height)]
        custom = arbitrary(value)
        if custom is not None and not looks_like_color(custom):
            return [('font-size', custom)]
        result = self.color_value(value)
        if result is None:
            return None
        return [('color', result)]

    def font(self, value, negated):
        if value is None or negated:
            return None
        if value in self.theme['fontWeight']:
            return [('font-weight', self.theme['fontWeight'][value])]
        if value in self.theme['fontFamily']:
            return [('font-family', self.theme['fontFamily'][value])]
        custom = arbitrary(value)
        if custom is None:
            return None
        if NUMBER_RE.match(custom):
            return [('font-weight', custom)]
        return [('font-family', custom)]

    def flex(self, value, negated):
        if value is None or negated:
            return None
        result = {
            '1': '1 1 0%',
            'auto': '1 1 auto',
            'initial': '0 1 auto',
            'none': 'none',
        }.get(value) or arbitrary(value)
        if result is None:
            return None
        return [('flex', result)]

    def order(self, value, negated):
        if value is None:
            return None
        result = {'first': '-9999', 'last': '9999', 'none': '0'}.get(value)
        if result is None and NUMBER_RE.match(value):
            result = value
        if result is None:
            return None
        if negated:
            result = negate(result)
        return [('order', result)]

    def declarations(self, class_name):
        """
        Returns the list of ``(property, value, priority)`` declarations for a
        single class name, or ``None`` if the class isn't a known utility.
        """
        priority = ''
        if class_name.startswith('!'):
            priority = 'important'
            class_name = class_name[1:]

        if not class_name or ':' in class_name.split('[', 1)[0]:
            return None

        negated = class_name.startswith('-')
        if negated:
            class_name = class_name[1:]
        elif class_name in static_utilities:
            return [(property, value, priority)
                    for property, value in static_utilities[class_name]]

        result = None
        handler = self.handlers.get(class_name)
        if handler is not None:
            result = handler(None, negated)

        # Try the longest matching root first: ``border-t-2`` is the ``border-t``
        # utility with value ``2``, not ``border`` with ``t-2``.
        position = len(class_name)
        while result is None:
            position = class_name.rfind('-', 0, position)
            if position <= 0:
                break
            handler = self.handlers.get(class_name[:position])
            if handler is not None:
                result = handler(class_name[position + 1:], negated)

        if result is None:
            return None

        return [(property, value, priority) for property, value in result]

    def recognizes(self, class_name):
        return self.declarations(class_name) is not None

    def resolve(self, class_names):
        """
        Resolves all recognized ``class_names`` into a single, merged set of
        declarations. When two classes set the same property, the later one
        wins.
        """
        properties = Properties()
        for class_name in class_names:
            declarations = self.declarations(class_name)
            if declarations is None:
                logger.debug('%r is not a recognized utility class', class_name)
                continue
            for property, value, priority in declarations:
                properties.update(expand_declaration(property, value, priority))

        if not properties:
            return None

        if self.minify:
            return properties.minified()
        return '%s' % properties
