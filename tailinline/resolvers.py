import logging

from cssutils import CSSParser
from cssutils.css import CSSRule

from tailinline.properties import Properties


logger = logging.getLogger(__name__)


def create_parser():
    return CSSParser(
        log=logging.getLogger('tailinline.cssutils'),
        validate=False,
    )


def is_style_rule(rule):
    """
    Returns if a :class:`cssutils.css.CSSRule` is a style rule (not a comment.)
    """
    return rule.type == CSSRule.STYLE_RULE


class Resolver(object):
    """
    Maps class names to CSS declaration text.
    """
    def resolve(self, class_names):
        """
        Returns the CSS declarations for ``class_names`` as a string suitable
        for a ``style`` attribute, or ``None`` if none of them is recognized.
        """
        raise NotImplementedError

    def recognizes(self, class_name):
        return bool(self.resolve((class_name,)))


class StyleSheetResolver(Resolver):
    """
    Resolves class names against the rules of embedded stylesheets.

    Only rules whose selector list contains the bare class selector (``.name``)
    are considered, and the first such rule in document order wins.
    """
    def __init__(self, stylesheets, parser=None):
        if parser is None:
            parser = create_parser()

        self.rules = {}
        for text in stylesheets:
            for rule in filter(is_style_rule, parser.parseString(text)):
                properties = None
                for selector in rule.selectorList:
                    if selector.selectorText in self.rules:
                        continue
                    if properties is None:
                        properties = Properties.from_style(rule.style)
                    self.rules[selector.selectorText] = properties

    def __len__(self):
        return len(self.rules)

    def lookup(self, class_name):
        return self.rules.get('.%s' % class_name)

    def resolve(self, class_names):
        declarations = []
        for class_name in class_names:
            properties = self.lookup(class_name)
            if properties:
                declarations.append('%s' % properties)
        return '; '.join(declarations) or None
