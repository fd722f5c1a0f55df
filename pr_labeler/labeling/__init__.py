# AGPL-3.0 License

"""
Path-prefix labeling for pull requests.

Maps changed file paths to labels using a user-defined configuration of
label name -> list of literal path prefixes.
"""

from pr_labeler.labeling.label_rules import ConfigurationError, LabelRule, LabelRules
from pr_labeler.labeling.matcher import LabelMatch, compute_labels, find_label_matches
from pr_labeler.labeling.rules_loader import RulesLoader, load_label_rules

__all__ = [
    "ConfigurationError",
    "LabelMatch",
    "LabelRule",
    "LabelRules",
    "RulesLoader",
    "compute_labels",
    "find_label_matches",
    "load_label_rules",
]
