"""
Cascade resolution.
This module finds the rules that apply to an element and merges their
declarations into one property map, lowest specificity first.
"""

import logging
from typing import Dict, List, Optional, Tuple

from ..css.selector import Specificity, matches
from ..css.stylesheet import Rule, Stylesheet
from ..css.values import Value
from ..dom import Element

logger = logging.getLogger(__name__)

# Map from property name to its specified value
PropertyMap = Dict[str, Value]

MatchedRule = Tuple[Specificity, Rule]


def match_rule(element: Element, rule: Rule) -> Optional[MatchedRule]:
    """
    Match one rule against an element.

    Selectors are stored highest-specificity first, so the first matching
    selector is the one that counts.

    Args:
        element: The element to match
        rule: The rule to check

    Returns:
        ``(specificity, rule)`` for the first matching selector, or None
    """
    for selector in rule.selectors:
        if matches(element, selector):
            return selector.specificity(), rule
    return None


def matching_rules(element: Element, stylesheet: Stylesheet) -> List[MatchedRule]:
    """
    Find all rules that match an element, in stylesheet order.

    Args:
        element: The element to match
        stylesheet: The stylesheet to search

    Returns:
        List of ``(specificity, rule)`` pairs
    """
    matched = []
    for rule in stylesheet.rules:
        match = match_rule(element, rule)
        if match is not None:
            matched.append(match)
    return matched


def specified_values(element: Element, stylesheet: Stylesheet) -> PropertyMap:
    """
    Apply a stylesheet to a single element.

    Rules are applied from lowest to highest specificity; the sort is
    stable, so among equal specificities the later rule wins.

    Args:
        element: The element to style
        stylesheet: The stylesheet to apply

    Returns:
        The element's specified values
    """
    values: PropertyMap = {}
    rules = sorted(matching_rules(element, stylesheet), key=lambda match: match[0])

    for _, rule in rules:
        for declaration in rule.declarations:
            values[declaration.name] = declaration.value

    logger.debug(f"{element!r}: {len(rules)} matching rules, {len(values)} properties")
    return values
