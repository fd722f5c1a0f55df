# AGPL-3.0 License

import argparse
import asyncio
import sys

from pr_labeler.config_loader import get_settings
from pr_labeler.git_providers import get_git_provider
from pr_labeler.github_action_runner import run_action
from pr_labeler.log import LoggingFormat, get_logger, setup_logger
from pr_labeler.tools.pr_auto_labeler import PRAutoLabeler
from pr_labeler.tools.pr_rules_validator import PRRulesValidator


def set_parser():
    parser = argparse.ArgumentParser(
        description="Apply pull request labels based on the paths a change touches.",
        usage="""\
Usage: pr-labeler <command> [<args>].
For example:
- pr-labeler label --repo owner/repo --pr 12
- pr-labeler validate --config .github/labels.json --files src/app.ts README.md
- pr-labeler action

Supported commands:
- label: fetch the PR's changed files and add every label whose path prefixes match.
- validate: check a label configuration and optionally preview labels for a list of files.
- action: run inside a GitHub Actions workflow, reading inputs from the environment.
""")
    parser.add_argument('--log-level', default=None, help="Override config.log_level")
    subparsers = parser.add_subparsers(dest='command', required=True)

    label_parser = subparsers.add_parser('label', help="Label a pull request")
    label_parser.add_argument('--repo', required=True, help="Repository as owner/repo")
    label_parser.add_argument('--pr', required=True, type=int, help="Pull request number")
    label_parser.add_argument('--config', default=None, help="Label configuration file")
    label_parser.add_argument('--token', default=None, help="GitHub token (defaults to github.user_token)")
    label_parser.add_argument('--dry-run', action='store_true', help="Compute labels without submitting them")

    validate_parser = subparsers.add_parser('validate', help="Validate a label configuration")
    validate_parser.add_argument('--config', default=None, help="Label configuration file")
    validate_parser.add_argument('--files', nargs='*', default=None, help="Changed paths to preview labels for")

    subparsers.add_parser('action', help="Run as a GitHub Action")
    return parser


async def _label(args) -> None:
    async with get_git_provider()(args.repo, token=args.token) as provider:
        labeler = PRAutoLabeler(
            repo=args.repo,
            pr_number=args.pr,
            config_path=args.config,
            git_provider=provider,
            publish_output=False if args.dry_run else None,
        )
        await labeler.run()


def run(inargs=None) -> int:
    parser = set_parser()
    args = parser.parse_args(inargs)

    settings = get_settings()
    setup_logger(
        args.log_level or settings.config.get("log_level", "INFO"),
        settings.config.get("log_format", LoggingFormat.CONSOLE),
    )

    try:
        if args.command == 'validate':
            validator = PRRulesValidator(config_path=args.config, changed_files=args.files)
            print(validator.run())
            return 0 if validator.is_valid else 1
        if args.command == 'label':
            asyncio.run(_label(args))
        else:
            asyncio.run(run_action())
    except Exception as e:
        get_logger().error(f"Failed to run {args.command}: {e}")
        return 1
    return 0


def main():
    sys.exit(run())


if __name__ == '__main__':
    main()
