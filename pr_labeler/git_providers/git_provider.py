# AGPL-3.0 License

from abc import ABC, abstractmethod


class GitProvider(ABC):
    """
    Minimal contract the labeling tools need from a code-hosting service.
    """

    @abstractmethod
    async def get_pr_files(self, pr_number: int) -> list[str]:
        """Return the paths of every file changed in the pull request."""
        pass

    @abstractmethod
    async def get_pr_labels(self, pr_number: int) -> list[str]:
        """Return the names of the labels currently on the pull request."""
        pass

    @abstractmethod
    async def add_labels(self, pr_number: int, labels: list[str]) -> list[str]:
        """Add labels to the pull request and return the resulting label names."""
        pass

    async def close(self) -> None:
        pass

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()
