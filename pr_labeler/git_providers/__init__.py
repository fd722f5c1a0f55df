# AGPL-3.0 License

from pr_labeler.git_providers.git_provider import GitProvider
from pr_labeler.git_providers.github_provider import GithubProvider

_GIT_PROVIDERS = {
    'github': GithubProvider,
}


def get_git_provider(name: str = "github"):
    try:
        return _GIT_PROVIDERS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown git provider: {name}")


__all__ = [
    'GitProvider',
    'GithubProvider',
    'get_git_provider',
]
