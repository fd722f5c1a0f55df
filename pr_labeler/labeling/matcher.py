# AGPL-3.0 License

"""
Prefix matching of changed paths against label rules.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Union

from pr_labeler.labeling.label_rules import LabelRule, LabelRules


@dataclass(frozen=True)
class LabelMatch:
    """
    The first pattern/path pair that triggered a label.
    """
    label: str
    pattern: str
    path: str


def _as_rules(rules: Union[LabelRules, Mapping[str, Any]]) -> LabelRules:
    if isinstance(rules, LabelRules):
        return rules
    return LabelRules.from_mapping(rules)


def _first_match(rule: LabelRule, paths: list[str]) -> Optional[LabelMatch]:
    for pattern in rule.patterns:
        for path in paths:
            # Case-sensitive, no separator normalization: "*.md" only matches a path starting with "*.md"
            if path.startswith(pattern):
                return LabelMatch(label=rule.label, pattern=pattern, path=path)
    return None


def find_label_matches(
    rules: Union[LabelRules, Mapping[str, Any]],
    paths: Iterable[str]
) -> list[LabelMatch]:
    """
    Find, for every label that applies, the pattern and path that triggered it.

    Args:
        rules: Validated LabelRules, or a raw mapping which is validated first
        paths: Changed file paths

    Returns:
        One LabelMatch per matched label, sorted by label name

    Raises:
        ConfigurationError: If a raw mapping fails validation
    """
    label_rules = _as_rules(rules)
    paths = list(paths)

    matches = []
    for rule in label_rules:
        match = _first_match(rule, paths)
        if match is not None:
            matches.append(match)

    return sorted(matches, key=lambda m: m.label)


def compute_labels(
    rules: Union[LabelRules, Mapping[str, Any]],
    paths: Iterable[str]
) -> frozenset[str]:
    """
    Compute the set of labels whose patterns prefix at least one changed path.

    Args:
        rules: Validated LabelRules, or a raw mapping which is validated first
        paths: Changed file paths

    Returns:
        Frozen set of label names (empty when nothing matches)

    Raises:
        ConfigurationError: If a raw mapping fails validation
    """
    return frozenset(match.label for match in find_label_matches(rules, paths))
