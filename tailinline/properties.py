import logging

from lxml.cssselect import CSSSelector
from cssutils.css import CSSStyleDeclaration, Selector


logger = logging.getLogger(__name__)


def expand_box_property_names(template):
    return list(map(template.format, ('top', 'right', 'bottom', 'left')))


def split_value(value):
    """
    Splits a property value on whitespace that is not inside parentheses, so
    that ``calc(1px + 2px) 0`` has two parts.
    """
    bits = []
    current = []
    depth = 0
    for char in value:
        if char == '(':
            depth += 1
        elif char == ')':
            depth = max(depth - 1, 0)
        elif char.isspace() and depth == 0:
            if current:
                bits.append(''.join(current))
                current = []
            continue
        current.append(char)
    if current:
        bits.append(''.join(current))
    return bits


def expand_shorthand_box_property(template):
    names = expand_box_property_names(template)
    shorthand = template.replace('-{}', '')

    def expand_property(value):
        bits = split_value(value)
        size = len(bits)
        if size == 1:
            result = (bits[0],) * 4
        elif size == 2:
            result = (bits[0], bits[1],) * 2
        elif size == 3:
            result = (bits[0], bits[1], bits[2], bits[1])
        elif size == 4:
            result = tuple(bits)
        else:
            logger.warning('Keeping %r as written, expected 1 to 4 values: %r', shorthand, value)
            return {shorthand: value}

        return dict(zip(names, result))

    return expand_property


def warn_unsupported_shorthand_property(property):
    def expand_property(value):
        logger.warning(
            "CSS shorthand syntax expansion is not supported for %r. Mixing "
            "shorthand and specific property values (e.g. `font` and `font-size`) "
            "may lead to unexpected results.",
            property,
        )
        return {property: value}

    return expand_property


def compress_box_property(shorthand, template):
    names = expand_box_property_names(template)

    def compress_property(value):
        if not set(value).issuperset(set(names)):
            return value

        # Only collapse sides that share a priority.
        important = [value[name].endswith(' ! important') for name in names]
        if any(important) and not all(important):
            return value

        top, right, bottom, left = map(value.pop, names)
        suffix = ''
        if all(important):
            suffix = ' ! important'
            top, right, bottom, left = (
                side[:-len(suffix)] for side in (top, right, bottom, left)
            )

        if top == right == bottom == left:
            value[shorthand] = top + suffix
        elif top == bottom and right == left:
            value[shorthand] = '{} {}{}'.format(top, right, suffix)
        elif right == left:
            value[shorthand] = '{} {} {}{}'.format(top, right, bottom, suffix)
        else:
            value[shorthand] = '{} {} {} {}{}'.format(top, right, bottom, left, suffix)

        return value

    return compress_property


shorthand_box_properties = {
    'margin': 'margin-{}',
    'padding': 'padding-{}',
    'border-width': 'border-{}-width',
}

unsupported_shorthand_properties = (
    'animation',
    'background',
    'border',
    'border-bottom',
    'border-left',
    'border-right',
    'border-top',
    'font',
    'list-style',
    'transform',
    'transition',
)


expansion_rewrite_map = {}
property_processors = []

for property, template in shorthand_box_properties.items():
    expansion_rewrite_map[property] = expand_shorthand_box_property(template)
    property_processors.append(compress_box_property(property, template))

for property in unsupported_shorthand_properties:
    expansion_rewrite_map[property] = warn_unsupported_shorthand_property(property)


def expand_declaration(name, value, priority=''):
    """
    Expands a single declaration into a dict of longhand properties, marking
    each of them with ``priority`` when one is given.
    """
    result = expansion_rewrite_map.get(
        name,
        lambda value: {
            name: value,
        }
    )(value)

    if priority:
        for key, value in result.items():
            result[key] = "%s ! %s" % (value, priority)

    return result


def expand_property(property):
    return expand_declaration(property.name, property.value, property.priority)


class Properties(dict):
    """
    A container for CSS properties.
    """
    def __str__(self):
        """
        Renders the properties as a string suitable for inclusion as a HTML tag
        attribute.
        """
        return '; '.join(map(': '.join, self.compressed().items()))

    def minified(self):
        """
        Renders the properties without optional whitespace.
        """
        return ';'.join(
            '%s:%s' % (name, value.replace(' ! ', '!'))
            for name, value in self.compressed().items()
        )

    def compressed(self):
        value = self.copy()
        for processor in property_processors:
            value = processor(value)
        return value

    @classmethod
    def from_string(cls, value):
        values = {}
        for property in CSSStyleDeclaration(value).getProperties():
            values.update(expand_property(property))
        return cls(values)

    @classmethod
    def from_style(cls, style):
        """
        Builds properties from a :class:`cssutils.css.CSSStyleDeclaration`,
        keeping the declaration order of the source.
        """
        values = cls()
        for property in style:
            values.update(expand_property(property))
        return values


class Rule(object):
    """
    Represents a CSS rule (combination of a CSS selector and style properties.)
    """
    __slots__ = ('id', 'selector', 'properties', 'specificity')

    def __init__(self, id, selector, properties=None):
        self.id = id
        self.selector = CSSSelector(selector)
        self.properties = Properties()
        if properties is not None:
            self.properties.update(properties)

        # NOTE: This should be available by `CSSSelector`?
        self.specificity = Selector(selector).specificity

    def __repr__(self):
        return '<Rule: %s>' % self.selector.css

    def __lt__(self, other):
        return (self.specificity, self.id) < (other.specificity, other.id)

    def __eq__(self, other):
        return (self.specificity, self.id) == (other.specificity, other.id)

    def __hash__(self):
        return hash(self.specificity)

    @classmethod
    def combine(cls, rules):
        """
        Combines all of the given rules, following standard specificity rules,
        returning a :class:`Properties` object that contains the correct
        properties for this collection of rules.
        """
        properties = Properties()
        for rule in sorted(rules):
            properties.update(rule.properties)
        return properties
