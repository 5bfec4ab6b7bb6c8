from __future__ import annotations

import httpx
import pytest

from agent_skills_browser.github import (
    DescriptorFetchError,
    GitHubClient,
    ListingError,
    raw_url,
    tree_url,
)

API = "https://api.github.com"


def test_list_contents_returns_entries_and_sends_token(github_mock) -> None:
    route = github_mock.get(f"{API}/repos/obra/superpowers/contents/skills").mock(
        return_value=httpx.Response(200, json=[{"name": "brainstorming", "type": "dir", "url": "u"}])
    )

    with GitHubClient(token="secret") as client:
        entries = client.list_contents("obra", "superpowers", "skills")

    assert entries[0]["name"] == "brainstorming"
    request = route.calls.last.request
    assert request.headers["Authorization"] == "token secret"
    assert request.headers["User-Agent"] == "agent-skills-browser"


def test_list_contents_without_token_sends_no_auth_header(github_mock) -> None:
    route = github_mock.get(f"{API}/repos/o/r/contents").mock(
        return_value=httpx.Response(200, json=[])
    )

    with GitHubClient() as client:
        assert client.list_contents("o", "r") == []

    assert "Authorization" not in route.calls.last.request.headers


@pytest.mark.parametrize("status", [401, 403, 404, 500])
def test_list_contents_non_2xx_raises_listing_error(github_mock, status: int) -> None:
    github_mock.get(f"{API}/repos/o/r/contents/skills").mock(return_value=httpx.Response(status))

    with GitHubClient() as client, pytest.raises(ListingError):
        client.list_contents("o", "r", "skills")


def test_list_contents_network_error_raises_listing_error(github_mock) -> None:
    github_mock.get(f"{API}/repos/o/r/contents/skills").mock(
        side_effect=httpx.ConnectError("boom")
    )

    with GitHubClient() as client, pytest.raises(ListingError):
        client.list_contents("o", "r", "skills")


def test_list_url_rejects_non_list_payload(github_mock) -> None:
    github_mock.get(f"{API}/repos/o/r/contents/README.md").mock(
        return_value=httpx.Response(200, json={"name": "README.md", "type": "file"})
    )

    with GitHubClient() as client, pytest.raises(ListingError):
        client.list_url(f"{API}/repos/o/r/contents/README.md")


def test_fetch_text_404_means_absent(github_mock) -> None:
    url = raw_url("o", "r", "skills", "missing", "SKILL.md")
    github_mock.get(url).mock(return_value=httpx.Response(404, text="404: Not Found"))

    with GitHubClient() as client:
        assert client.fetch_text(url) is None


def test_fetch_text_other_errors_raise(github_mock) -> None:
    url = raw_url("o", "r", "skills", "broken", "SKILL.md")
    github_mock.get(url).mock(return_value=httpx.Response(502))

    with GitHubClient() as client, pytest.raises(DescriptorFetchError):
        client.fetch_text(url)


def test_fetch_text_returns_body(github_mock) -> None:
    url = raw_url("o", "r", "skills", "ok", "SKILL.md")
    github_mock.get(url).mock(return_value=httpx.Response(200, text="hello"))

    with GitHubClient() as client:
        assert client.fetch_text(url) == "hello"


def test_url_builders_skip_empty_parts() -> None:
    assert raw_url("o", "r", "", "slug", "README.md") == (
        "https://raw.githubusercontent.com/o/r/main/slug/README.md"
    )
    assert tree_url("o", "r", "skills/", "slug") == "https://github.com/o/r/tree/main/skills/slug"


def test_raw_fetch_does_not_send_token(github_mock) -> None:
    listing = github_mock.get(f"{API}/repos/o/r/contents/skills").mock(
        return_value=httpx.Response(200, json=[])
    )
    url = raw_url("o", "r", "skills", "ok", "SKILL.md")
    raw = github_mock.get(url).mock(return_value=httpx.Response(200, text="hello"))

    with GitHubClient(token="secret") as client:
        client.list_contents("o", "r", "skills")
        client.fetch_text(url)

    assert listing.calls.last.request.headers["Authorization"] == "token secret"
    raw_request = raw.calls.last.request
    assert "Authorization" not in raw_request.headers
    assert raw_request.headers["User-Agent"] == "agent-skills-browser"
