# AGPL-3.0 License

"""
PR Auto-Labeler tool - labels a pull request from the paths it changes.
"""

from dataclasses import dataclass, field
from typing import Optional

from pr_labeler.config_loader import get_settings
from pr_labeler.git_providers import GitProvider, get_git_provider
from pr_labeler.labeling import RulesLoader, find_label_matches
from pr_labeler.log import get_logger


@dataclass
class LabelingOutcome:
    """
    Result of one labeling run.

    Attributes:
        labels: Every label whose patterns matched, sorted
        new_labels: Matched labels that were not already on the PR, sorted
        applied: Whether labels were submitted to the provider
        message: Human-readable summary of the outcome
    """
    labels: list[str] = field(default_factory=list)
    new_labels: list[str] = field(default_factory=list)
    applied: bool = False
    message: str = ""


class PRAutoLabeler:
    """
    Loads label rules, fetches the PR's changed files and applies matching labels.
    """

    def __init__(
        self,
        repo: str,
        pr_number: int,
        config_path: Optional[str] = None,
        git_provider: Optional[GitProvider] = None,
        publish_output: Optional[bool] = None,
        rules_loader: Optional[RulesLoader] = None
    ):
        """
        Initialize the auto-labeler.

        Args:
            repo: Repository as "owner/repo"
            pr_number: Pull request number
            config_path: Label configuration file (defaults to labeler.config_path setting)
            git_provider: Provider instance (defaults to a GithubProvider for `repo`,
                which is closed when `run` finishes)
            publish_output: Submit labels when True, dry run when False
                (defaults to config.publish_output setting)
            rules_loader: Loader used to read the configuration
        """
        settings = get_settings()
        self.repo = repo
        self.pr_number = pr_number
        self.config_path = config_path or settings.get("labeler.config_path", ".github/labels.json")
        self._owns_provider = git_provider is None
        self.git_provider = git_provider or get_git_provider()(repo)
        if publish_output is None:
            publish_output = settings.config.get("publish_output", True)
        self.publish_output = publish_output
        self.rules_loader = rules_loader or RulesLoader()
        self.logger = get_logger()

    async def run(self) -> LabelingOutcome:
        """
        Execute the labeling flow.

        Returns:
            LabelingOutcome describing what was matched and applied

        Raises:
            ConfigurationError: If the label configuration is missing or invalid
            httpx.HTTPError: If a GitHub API call fails
        """
        try:
            return await self._run()
        finally:
            if self._owns_provider:
                await self.git_provider.close()

    async def _run(self) -> LabelingOutcome:
        self.logger.info(f"Labeling PR #{self.pr_number} in {self.repo}")

        # Load rules before touching the network so config errors fail fast
        rules = self.rules_loader.load(self.config_path)

        changed_files = await self.git_provider.get_pr_files(self.pr_number)
        self.logger.info(
            f"PR #{self.pr_number} changes {len(changed_files)} files",
            extra={"pr_number": self.pr_number, "changed_files_count": len(changed_files)}
        )

        matches = find_label_matches(rules, changed_files)
        for match in matches:
            self.logger.debug(f"Label '{match.label}' matched pattern '{match.pattern}' on {match.path}")

        labels = [match.label for match in matches]
        if not labels:
            message = f"No matching labels found for PR #{self.pr_number}"
            self.logger.info(message)
            return LabelingOutcome(message=message)

        new_labels = await self._find_new_labels(labels)

        if not self.publish_output:
            message = f"Dry run: would add labels: {', '.join(labels)} to PR #{self.pr_number}"
            self.logger.info(message)
            return LabelingOutcome(labels=labels, new_labels=new_labels, applied=False, message=message)

        await self.git_provider.add_labels(self.pr_number, labels)
        message = f"Added labels: {', '.join(labels)} to PR #{self.pr_number}"
        self.logger.info(message)
        return LabelingOutcome(labels=labels, new_labels=new_labels, applied=True, message=message)

    async def _find_new_labels(self, labels: list[str]) -> list[str]:
        """
        Determine which matched labels are not yet on the PR.

        Only used for reporting; adding an existing label is a no-op on GitHub.
        """
        if not get_settings().get("labeler.report_existing_labels", True):
            return list(labels)

        existing = set(await self.git_provider.get_pr_labels(self.pr_number))
        already_present = [label for label in labels if label in existing]
        if already_present:
            self.logger.info(f"Labels already present on PR #{self.pr_number}: {', '.join(already_present)}")
        return [label for label in labels if label not in existing]
