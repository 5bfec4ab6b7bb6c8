"""Thin GitHub client for the contents API and raw file downloads."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)

GITHUB_API_BASE = "https://api.github.com"
RAW_BASE = "https://raw.githubusercontent.com"
USER_AGENT = "agent-skills-browser"


class GitHubError(Exception):
    """Base class for GitHub access failures."""


class ListingError(GitHubError):
    """A directory listing call failed (network, auth or non-2xx)."""


class DescriptorFetchError(GitHubError):
    """A single descriptor file could not be downloaded."""


def raw_url(owner: str, repo: str, *parts: str, ref: str = "main") -> str:
    """Build a raw.githubusercontent.com URL, skipping empty path parts."""
    path = "/".join(p.strip("/") for p in parts if p and p.strip("/"))
    return f"{RAW_BASE}/{owner}/{repo}/{ref}/{path}"


def tree_url(owner: str, repo: str, *parts: str, ref: str = "main") -> str:
    """Build the github.com page URL for a folder."""
    path = "/".join(p.strip("/") for p in parts if p and p.strip("/"))
    return f"https://github.com/{owner}/{repo}/tree/{ref}/{path}"


class GitHubClient:
    """Synchronous GitHub access used by the catalog scanners"""

    def __init__(
        self,
        token: Optional[str] = None,
        timeout: float = 20.0,
        api_base: str = GITHUB_API_BASE,
        client: Optional[httpx.Client] = None,
    ):
        self.api_base = api_base.rstrip("/")
        self._api_headers = self._auth_headers(token)
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=timeout,
            headers={"User-Agent": USER_AGENT},
            follow_redirects=True,
        )

    @staticmethod
    def _auth_headers(token: Optional[str]) -> Dict[str, str]:
        # Only contents-API calls carry the credential; raw downloads go out bare.
        if token:
            return {"Authorization": f"token {token}"}
        return {}

    def list_contents(self, owner: str, repo: str, path: str = "") -> List[Dict[str, Any]]:
        """List a repository directory via ``/repos/{owner}/{repo}/contents/{path}``."""
        url = f"{self.api_base}/repos/{owner}/{repo}/contents"
        path = path.strip("/")
        if path:
            url = f"{url}/{path}"
        return self.list_url(url)

    def list_url(self, url: str) -> List[Dict[str, Any]]:
        """List a directory given its contents-API URL."""
        try:
            response = self._client.get(url, headers=self._api_headers)
        except httpx.HTTPError as e:
            raise ListingError(f"GitHub API request failed: {url}: {e}") from e

        if not response.is_success:
            raise ListingError(f"GitHub API error {response.status_code}: {url}")

        try:
            entries = response.json()
        except ValueError as e:
            raise ListingError(f"GitHub API returned invalid JSON: {url}") from e

        if not isinstance(entries, list):
            raise ListingError(f"GitHub API did not return a directory listing: {url}")
        return entries

    def fetch_text(self, url: str) -> Optional[str]:
        """Download a raw file.

        Returns:
            The file text, or ``None`` when the server answers 404.

        Raises:
            DescriptorFetchError: on transport errors or any other non-2xx.
        """
        try:
            response = self._client.get(url)
        except httpx.HTTPError as e:
            raise DescriptorFetchError(f"Request failed: {url}: {e}") from e

        if response.status_code == 404:
            return None
        if not response.is_success:
            raise DescriptorFetchError(f"HTTP {response.status_code}: {url}")
        return response.text

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
