# AGPL-3.0 License

"""
Validation report for label configuration files.
"""

from typing import Optional

from pr_labeler.config_loader import get_settings
from pr_labeler.labeling import ConfigurationError, LabelRules, RulesLoader, find_label_matches
from pr_labeler.log import get_logger


class PRRulesValidator:
    """
    Validates a label configuration and renders a markdown report.

    When changed files are supplied, the report also previews which labels
    they would receive.
    """

    def __init__(
        self,
        config_path: Optional[str] = None,
        changed_files: Optional[list[str]] = None,
        rules_loader: Optional[RulesLoader] = None
    ):
        self.config_path = config_path or get_settings().get("labeler.config_path", ".github/labels.json")
        self.changed_files = changed_files
        self.rules_loader = rules_loader or RulesLoader()
        self.logger = get_logger()
        self.is_valid = False

    def run(self) -> str:
        """
        Validate the configuration and return the report.

        Invalid configuration is reported, not raised; check `is_valid` afterwards.
        """
        self.logger.info('Validating label configuration...')
        try:
            rules = self.rules_loader.load(self.config_path)
        except ConfigurationError as e:
            self.is_valid = False
            self.logger.error(f"Label configuration is invalid: {e}")
            return self._prepare_error_report(str(e))

        self.is_valid = True
        return self._prepare_validation_report(rules)

    def _prepare_error_report(self, error: str) -> str:
        report = "## 🔍 Label Configuration Validation\n\n"
        report += f"❌ **Configuration `{self.config_path}` is invalid**\n\n"
        report += f"```\n{error}\n```\n"
        return report

    def _prepare_validation_report(self, rules: LabelRules) -> str:
        """
        Prepare a markdown report for a valid configuration.

        Args:
            rules: Validated label rules

        Returns:
            Markdown formatted validation report
        """
        report = "## 🔍 Label Configuration Validation\n\n"
        report += f"✅ **Configuration `{self.config_path}` is valid ({len(rules)} labels)**\n\n"

        warnings = self._suffix_pattern_warnings(rules)
        if warnings:
            report += f"⚠️ **Found {len(warnings)} warning(s)**\n\n"
            for warning in warnings:
                report += f"- {warning}\n"
            report += "\n"

        if len(rules):
            report += "<details>\n<summary><strong>Label Rules</strong></summary>\n\n"
            report += "| Label | Path prefixes |\n"
            report += "|-------|---------------|\n"
            for rule in rules:
                prefixes = ", ".join(f"`{p}`" for p in rule.patterns)
                report += f"| {rule.label} | {prefixes} |\n"
            report += "\n</details>\n\n"

        if self.changed_files is not None:
            report += self._prepare_preview(rules)

        return report

    def _prepare_preview(self, rules: LabelRules) -> str:
        matches = find_label_matches(rules, self.changed_files)

        preview = f"### Preview for {len(self.changed_files)} file(s)\n\n"
        if not matches:
            preview += "No matching labels.\n"
            return preview

        preview += "| Label | Pattern | Matched path |\n"
        preview += "|-------|---------|--------------|\n"
        for match in matches:
            preview += f"| {match.label} | `{match.pattern}` | `{match.path}` |\n"
        return preview

    @staticmethod
    def _suffix_pattern_warnings(rules: LabelRules) -> list[str]:
        # Patterns are literal prefixes, so glob-looking entries only match paths that literally start with them
        warnings = []
        for rule in rules:
            for pattern in rule.patterns:
                if pattern.startswith("*"):
                    warnings.append(
                        f"Label '{rule.label}': pattern `{pattern}` is matched as a literal prefix, "
                        f"not as a glob"
                    )
        return warnings
