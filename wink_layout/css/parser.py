"""
CSS Parser implementation.
This module turns stylesheet source into rules of simple selectors and typed
declaration values. Tokenizing is done by tinycss2; anything outside the
supported subset is reported as an error instead of being skipped.
"""

import logging
from typing import List, Optional, Sequence, Tuple

import tinycss2
import tinycss2.color3

from ..errors import CSSSyntaxError, SelectorSyntaxError, UnitError
from .selector import SimpleSelector
from .stylesheet import Declaration, Rule, Stylesheet
from .values import Color, Keyword, Length, Unit, Value

logger = logging.getLogger(__name__)

# Tokens that never carry meaning inside a prelude or a value
IGNORED_TOKENS = {'whitespace', 'comment'}

# Function notations handed to the color parser
COLOR_FUNCTIONS = {'rgb', 'rgba', 'hsl', 'hsla'}


def _position(node) -> Tuple[Optional[int], Optional[int]]:
    return getattr(node, 'source_line', None), getattr(node, 'source_column', None)


def _strip(tokens: Sequence) -> List:
    return [token for token in tokens if token.type not in IGNORED_TOKENS]


class CSSParser:
    """
    CSS Parser for the simple-selector subset of CSS2.1.

    This class handles parsing stylesheets, selector lists and declaration values.
    """

    def __init__(self):
        """Initialize the CSS parser."""
        logger.debug("CSS Parser initialized")

    def parse(self, css_content: str) -> Stylesheet:
        """
        Parse CSS content into a stylesheet.

        Args:
            css_content: CSS content to parse

        Returns:
            Parsed stylesheet

        Raises:
            CSSSyntaxError: For tokenizer errors and malformed declarations
            SelectorSyntaxError: For a malformed selector list
            UnitError: For a length in an unsupported unit
        """
        rules = []
        for node in tinycss2.parse_stylesheet(css_content, skip_comments=True, skip_whitespace=True):
            if node.type == 'error':
                raise CSSSyntaxError(node.message, *_position(node))

            if node.type == 'at-rule':
                raise SelectorSyntaxError(
                    f"Unexpected character '@' in selector list (@{node.at_keyword})", *_position(node))

            rules.append(self.parse_rule(node))

        logger.debug(f"Parsed stylesheet with {len(rules)} rules")
        return Stylesheet(rules)

    def parse_rule(self, rule) -> Rule:
        """
        Parse a tinycss2 qualified rule: ``<selectors> { <declarations> }``.

        Args:
            rule: The qualified rule node

        Returns:
            The parsed rule
        """
        selectors = self.parse_selectors(rule.prelude)
        declarations = self.parse_declarations(rule.content)
        return Rule(selectors, declarations)

    def parse_selectors(self, prelude: Sequence) -> List[SimpleSelector]:
        """
        Parse a comma-separated list of simple selectors.

        Args:
            prelude: Component values before the ``{`` of a rule

        Returns:
            Selectors with the highest specificity first
        """
        tokens = [token for token in prelude if token.type != 'comment']
        selectors = []
        pos = self._skip_whitespace(tokens, 0)

        while True:
            selector, pos = self._parse_simple_selector(tokens, pos)
            selectors.append(selector)
            pos = self._skip_whitespace(tokens, pos)

            # End of the prelude is where the declaration block starts
            if pos >= len(tokens):
                break

            token = tokens[pos]
            if token.type == 'literal' and token.value == ',':
                pos = self._skip_whitespace(tokens, pos + 1)
                continue

            raise SelectorSyntaxError(
                f"Unexpected character {tinycss2.serialize([token])!r} in selector list",
                *_position(token))

        # Highest specificity first, for use in matching
        return sorted(selectors, key=lambda selector: selector.specificity(), reverse=True)

    def _parse_simple_selector(self, tokens: List, pos: int) -> Tuple[SimpleSelector, int]:
        selector = SimpleSelector()
        start = pos

        while pos < len(tokens):
            token = tokens[pos]
            if token.type == 'ident':
                selector.tag_name = token.value
            elif token.type == 'hash':
                selector.id = token.value
            elif token.type == 'literal' and token.value == '.':
                pos += 1
                if pos >= len(tokens) or tokens[pos].type != 'ident':
                    raise SelectorSyntaxError("Expected a class name after '.'", *_position(token))
                selector.classes.append(tokens[pos].value)
            elif token.type == 'literal' and token.value == '*':
                # Universal selector
                pass
            else:
                break
            pos += 1

        if pos == start:
            if pos < len(tokens):
                raise SelectorSyntaxError(
                    f"Unexpected character {tinycss2.serialize([tokens[pos]])!r} in selector list",
                    *_position(tokens[pos]))
            raise SelectorSyntaxError("Empty selector in selector list")

        return selector, pos

    @staticmethod
    def _skip_whitespace(tokens: List, pos: int) -> int:
        while pos < len(tokens) and tokens[pos].type == 'whitespace':
            pos += 1
        return pos

    def parse_declarations(self, content: Sequence) -> List[Declaration]:
        """
        Parse the declarations enclosed in a rule's ``{ ... }`` block.

        Args:
            content: Component values inside the block

        Returns:
            Declarations in source order
        """
        declarations = []
        for node in tinycss2.parse_declaration_list(content, skip_comments=True, skip_whitespace=True):
            if node.type == 'error':
                raise CSSSyntaxError(node.message, *_position(node))
            if node.type != 'declaration':
                raise CSSSyntaxError(f"Unexpected {node.type} in declaration block", *_position(node))
            if node.important:
                raise CSSSyntaxError(f"!important is not supported (property {node.name!r})",
                                     *_position(node))

            declarations.append(Declaration(node.name, self._parse_value_tokens(node.value, node)))

        return declarations

    def parse_value(self, value_text: str) -> Value:
        """
        Parse a single declaration value such as ``10px``, ``auto`` or ``#ff0000``.

        Args:
            value_text: The value source text

        Returns:
            The typed value
        """
        tokens = tinycss2.parse_component_value_list(value_text, skip_comments=True)
        return self._parse_value_tokens(tokens, None)

    def _parse_value_tokens(self, tokens: Sequence, owner) -> Value:
        components = _strip(tokens)
        line, column = _position(owner) if owner is not None else (None, None)

        if not components:
            raise CSSSyntaxError("Empty declaration value", line, column)
        if len(components) > 1:
            raise CSSSyntaxError(
                f"Expected a single value, got {tinycss2.serialize(tokens).strip()!r}", line, column)

        token = components[0]

        if token.type == 'dimension':
            if token.lower_unit != Unit.PX.value:
                raise UnitError(token.unit)
            return Length(token.value, Unit.PX)

        if token.type == 'number':
            # Only zero may omit its unit
            if token.value != 0:
                raise UnitError('')
            return Length(0.0, Unit.PX)

        if token.type == 'percentage':
            raise UnitError('%')

        if token.type == 'hash':
            color = self._parse_color(token)
            if color is None:
                raise CSSSyntaxError(f"Invalid color #{token.value}", *_position(token))
            return color

        if token.type == 'function' and token.lower_name in COLOR_FUNCTIONS:
            color = self._parse_color(token)
            if color is None:
                raise CSSSyntaxError(f"Invalid color {tinycss2.serialize([token])!r}", *_position(token))
            return color

        if token.type == 'ident':
            return self._parse_color(token) or Keyword(token.value)

        raise CSSSyntaxError(f"Unsupported value {tinycss2.serialize([token])!r}", *_position(token))

    @staticmethod
    def _parse_color(token) -> Optional[Color]:
        rgba = tinycss2.color3.parse_color(token)
        # None for non-colors, the string 'currentColor' for that keyword
        if rgba is None or isinstance(rgba, str):
            return None
        return Color(
            round(rgba.red * 255),
            round(rgba.green * 255),
            round(rgba.blue * 255),
            round(rgba.alpha * 255),
        )


def parse_css(css_content: str) -> Stylesheet:
    """
    Parse a whole CSS stylesheet.

    Args:
        css_content: CSS source text

    Returns:
        The parsed stylesheet
    """
    return CSSParser().parse(css_content)
