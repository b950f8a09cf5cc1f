"""Pytest configuration and fixtures."""

from io import BytesIO, StringIO

import pytest
from PIL import Image
from rich.console import Console


@pytest.fixture(autouse=True)
def no_token_env(monkeypatch):
    """Keep the developer's own tokens out of every test."""
    monkeypatch.delenv("GH_TOKEN", raising=False)
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)


@pytest.fixture
def png_bytes():
    """Factory for a solid-colour PNG."""

    def _make(color=(255, 0, 0), size=(8, 8)):
        buf = BytesIO()
        Image.new("RGB", size, color).save(buf, format="PNG")
        return buf.getvalue()

    return _make


@pytest.fixture
def graphql_page():
    """Factory for one page of the user statistics GraphQL response."""

    def _make(stars, has_next_page=False, end_cursor=None, name="The Octocat", **counts):
        return {
            "data": {
                "user": {
                    "name": name,
                    "repositories": {
                        "nodes": [{"stargazers": {"totalCount": s}} for s in stars],
                        "pageInfo": {
                            "endCursor": end_cursor,
                            "hasNextPage": has_next_page,
                        },
                    },
                    "followers": {"totalCount": counts.get("followers", 0)},
                    "following": {"totalCount": counts.get("following", 0)},
                    "contributionsCollection": {
                        "totalCommitContributions": counts.get("commits", 0),
                    },
                    "pullRequests": {"totalCount": counts.get("prs", 0)},
                    "issues": {"totalCount": counts.get("issues", 0)},
                }
            }
        }

    return _make


@pytest.fixture
def render_plain():
    """Render a rich renderable to plain text at a fixed width."""

    def _render(renderable, width=100):
        console = Console(file=StringIO(), width=width, color_system=None)
        console.print(renderable)
        return console.file.getvalue()

    return _render
