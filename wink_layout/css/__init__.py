"""
CSS implementation for the layout engine.
This package provides the value model, simple selectors and the stylesheet parser.
"""

from .values import AUTO, ZERO, Color, Keyword, Length, Unit, Value, f32, to_px
from .selector import SimpleSelector, Specificity, matches, matches_selector, specificity
from .stylesheet import Declaration, Rule, Stylesheet
from .parser import CSSParser, parse_css

__all__ = [
    'AUTO', 'ZERO', 'Color', 'Keyword', 'Length', 'Unit', 'Value', 'f32', 'to_px',
    'SimpleSelector', 'Specificity', 'matches', 'matches_selector', 'specificity',
    'Declaration', 'Rule', 'Stylesheet', 'CSSParser', 'parse_css',
]
