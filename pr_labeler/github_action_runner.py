# AGPL-3.0 License

"""
Entry point for running the labeler inside a GitHub Actions workflow.

Inputs follow the Actions conventions: `INPUT_TOKEN`, `INPUT_CONFIG_PATH`,
plus the runner-provided `GITHUB_REPOSITORY`, `GITHUB_EVENT_PATH` and
`GITHUB_API_URL`.
"""

import json
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from pr_labeler.config_loader import get_settings
from pr_labeler.git_providers import get_git_provider
from pr_labeler.log import get_logger
from pr_labeler.tools.pr_auto_labeler import LabelingOutcome, PRAutoLabeler


@dataclass
class ActionContext:
    repo: str
    pr_number: int
    token: str
    config_path: str
    api_url: Optional[str] = None


def _get_pr_number(event_path: Optional[str]) -> Optional[int]:
    if not event_path or not os.path.isfile(event_path):
        return None
    with open(event_path, "r", encoding="utf-8") as f:
        payload = json.load(f)

    if not isinstance(payload, dict):
        return None

    pull_request = payload.get("pull_request") or {}
    number = pull_request.get("number") or payload.get("number")
    if not number:
        return None
    try:
        return int(number)
    except (TypeError, ValueError):
        raise ValueError(f"No PR number found. Event payload has an invalid PR number: {number!r}") from None


def get_action_context(environ: Optional[Mapping[str, str]] = None) -> ActionContext:
    """
    Build the action context from environment variables.

    Raises:
        ValueError: If the token, repository or PR number is missing
    """
    env = os.environ if environ is None else environ

    token = env.get("INPUT_TOKEN") or env.get("GITHUB_TOKEN") or get_settings().get("github.user_token", "")
    config_path = env.get("INPUT_CONFIG_PATH") or get_settings().get("labeler.config_path", ".github/labels.json")

    pr_number = _get_pr_number(env.get("GITHUB_EVENT_PATH"))
    if not pr_number:
        raise ValueError("No PR number found.")

    repo = env.get("GITHUB_REPOSITORY", "")
    if not repo:
        raise ValueError("Repository is required but GITHUB_REPOSITORY is not set.")

    if not token:
        raise ValueError("Token is required but not provided.")

    return ActionContext(
        repo=repo,
        pr_number=pr_number,
        token=token,
        config_path=config_path,
        api_url=env.get("GITHUB_API_URL") or None,
    )


def write_action_output(outcome: LabelingOutcome, environ: Optional[Mapping[str, str]] = None) -> None:
    """Append `labels=<comma separated>` to $GITHUB_OUTPUT when it is set."""
    env = os.environ if environ is None else environ
    output_file = env.get("GITHUB_OUTPUT")
    if not output_file:
        get_logger().debug("GITHUB_OUTPUT is not set, skipping action outputs")
        return
    with open(output_file, "a", encoding="utf-8") as f:
        print(f"labels={','.join(outcome.labels)}", file=f)


async def run_action(environ: Optional[Mapping[str, str]] = None) -> LabelingOutcome:
    """
    Label the pull request that triggered the workflow.

    Raises:
        ValueError: If required inputs are missing
        ConfigurationError: If the label configuration is missing or invalid
        httpx.HTTPError: If a GitHub API call fails
    """
    context = get_action_context(environ)
    async with get_git_provider()(context.repo, token=context.token, base_url=context.api_url) as provider:
        labeler = PRAutoLabeler(
            repo=context.repo,
            pr_number=context.pr_number,
            config_path=context.config_path,
            git_provider=provider,
        )
        outcome = await labeler.run()

    write_action_output(outcome, environ)
    return outcome
