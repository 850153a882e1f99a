"""
Style resolution: cascade and style tree.
"""

from .cascade import PropertyMap, match_rule, matching_rules, specified_values
from .styled_node import Display, StyledNode, style_tree

__all__ = [
    'PropertyMap', 'match_rule', 'matching_rules', 'specified_values',
    'Display', 'StyledNode', 'style_tree',
]
