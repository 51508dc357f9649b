"""GitHub REST client for pull request reads and comment writes."""

from __future__ import annotations

import logging
from typing import Any

import requests

from renovate_ai.config import DEFAULT_GITHUB_API_URL, RepoRef
from renovate_ai.exceptions import FetchError, PublishError
from renovate_ai.github.models import ChangedFile, PullRequestSummary

logger = logging.getLogger(__name__)

# GitHub's page size ceiling for the pull request files endpoint.
FILES_PER_PAGE = 100


class GitHubClient:
    """Thin wrapper over the three GitHub endpoints the analyzer uses.

    Each method performs exactly one HTTP request.
    """

    def __init__(
        self,
        token: str,
        api_url: str = DEFAULT_GITHUB_API_URL,
        timeout: int = 30,
        session: requests.Session | None = None,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        })

    def get_pull_request(self, repo: RepoRef, number: int) -> PullRequestSummary:
        """Fetch the title and description of a pull request."""
        url = f"{self.api_url}/repos/{repo.owner}/{repo.name}/pulls/{number}"
        try:
            data = self._get(url)
        except requests.RequestException as e:
            raise FetchError(f"failed to get PR {repo}#{number}: {e}") from e
        return PullRequestSummary(title=data.get("title"), description=data.get("body"))

    def list_changed_files(self, repo: RepoRef, number: int) -> list[ChangedFile]:
        """Fetch the changed files of a pull request with their patches.

        Only the first page is read.
        """
        url = f"{self.api_url}/repos/{repo.owner}/{repo.name}/pulls/{number}/files"
        try:
            data = self._get(url, params={"per_page": FILES_PER_PAGE})
        except requests.RequestException as e:
            raise FetchError(f"failed to get PR files for {repo}#{number}: {e}") from e
        if len(data) >= FILES_PER_PAGE:
            logger.warning(
                "%s#%d lists at least %d changed files; only the first %d are analyzed",
                repo, number, FILES_PER_PAGE, FILES_PER_PAGE,
            )
        return [
            ChangedFile(name=item["filename"], patch=item.get("patch"))
            for item in data
        ]

    def create_comment(self, repo: RepoRef, number: int, body: str) -> int | None:
        """Create an issue comment on the pull request.

        Returns the comment id, or None when GitHub acknowledged the write
        without a readable body.
        """
        url = f"{self.api_url}/repos/{repo.owner}/{repo.name}/issues/{number}/comments"
        try:
            response = self.session.post(url, json={"body": body}, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise PublishError(f"failed to post comment to {repo}#{number}: {e}") from e
        try:
            return response.json().get("id")
        except ValueError:
            logger.warning("Comment posted to %s#%d but the response had no JSON body", repo, number)
            return None

    def close(self) -> None:
        self.session.close()

    def _get(self, url: str, params: dict[str, Any] | None = None) -> Any:
        logger.debug("GET %s", url)
        response = self.session.get(url, params=params, timeout=self.timeout)
        response.raise_for_status()
        return response.json()
