# AGPL-3.0 License

from pr_labeler.tools.pr_auto_labeler import LabelingOutcome, PRAutoLabeler
from pr_labeler.tools.pr_rules_validator import PRRulesValidator

__all__ = [
    "LabelingOutcome",
    "PRAutoLabeler",
    "PRRulesValidator",
]
