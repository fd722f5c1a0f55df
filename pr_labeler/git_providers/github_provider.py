# AGPL-3.0 License

"""
GitHub REST API provider for reading PR files and applying labels.
"""

from typing import Any, Optional

import httpx

from pr_labeler.config_loader import get_settings
from pr_labeler.git_providers.git_provider import GitProvider
from pr_labeler.log import get_logger


def parse_repo(repo: str) -> tuple[str, str]:
    """
    Split an "owner/repo" string.

    Raises:
        ValueError: If the value is not of the form owner/repo
    """
    parts = (repo or "").strip().split("/")
    if len(parts) != 2 or not all(parts):
        raise ValueError(f"Repository must be given as 'owner/repo', got {repo!r}")
    return parts[0], parts[1]


class GithubProvider(GitProvider):
    """
    Talks to the GitHub REST API over an httpx.AsyncClient.

    The client is created lazily; pass `client` to inject a preconfigured one
    (e.g. with a mock transport).
    """

    def __init__(
        self,
        repo: str,
        token: Optional[str] = None,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None
    ):
        """
        Initialize the provider.

        Args:
            repo: Repository as "owner/repo"
            token: Bearer token (defaults to github.user_token setting)
            base_url: API root (defaults to github.base_url setting)
            client: Optional preconfigured AsyncClient
        """
        settings = get_settings()
        self.owner, self.repo = parse_repo(repo)
        self.token = token or settings.get("github.user_token", "")
        self.base_url = (base_url or settings.get("github.base_url", "https://api.github.com")).rstrip("/")
        self.timeout = float(settings.get("github.request_timeout", 30))
        self.per_page = int(settings.get("github.per_page", 100))
        self._client = client
        self._owns_client = client is None
        self.logger = get_logger()

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def _get_paginated(self, url: str) -> list[dict[str, Any]]:
        """
        Fetch every page of a list endpoint by following `Link: rel="next"`.

        Args:
            url: Endpoint path relative to the API root

        Returns:
            Concatenated items from all pages
        """
        client = self._get_client()
        items: list[dict[str, Any]] = []
        next_url: Optional[str] = url
        params: Optional[dict[str, Any]] = {"per_page": self.per_page}
        page = 0

        while next_url:
            response = await client.get(next_url, params=params, headers=self._headers())
            response.raise_for_status()
            items.extend(response.json())
            page += 1

            # The next link already carries the query string
            next_url = response.links.get("next", {}).get("url")
            params = None

        self.logger.debug(
            f"Fetched {len(items)} items in {page} page(s)",
            extra={"url": url, "item_count": len(items), "pages": page}
        )
        return items

    async def get_pr_files(self, pr_number: int) -> list[str]:
        files = await self._get_paginated(
            f"/repos/{self.owner}/{self.repo}/pulls/{pr_number}/files"
        )
        return [f["filename"] for f in files]

    async def get_pr_labels(self, pr_number: int) -> list[str]:
        labels = await self._get_paginated(
            f"/repos/{self.owner}/{self.repo}/issues/{pr_number}/labels"
        )
        return [label["name"] for label in labels]

    async def add_labels(self, pr_number: int, labels: list[str]) -> list[str]:
        client = self._get_client()
        response = await client.post(
            f"/repos/{self.owner}/{self.repo}/issues/{pr_number}/labels",
            json={"labels": list(labels)},
            headers=self._headers(),
        )
        response.raise_for_status()
        return [label["name"] for label in response.json()]
