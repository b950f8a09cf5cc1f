"""GitHub data fetching via the REST and GraphQL APIs."""

import logging
from typing import Any, Optional, TypeVar

import httpx
from pydantic import BaseModel

from ghfetch.config import API_BASE_URL, GRAPHQL_URL, PAGE_SIZE, REQUEST_TIMEOUT, REST_ACCEPT
from ghfetch.errors import ConfigError, DecodeError, TransportError, UpstreamError
from ghfetch.models import (
    GraphQLUser,
    PageCursor,
    RepositoryInfo,
    RepositoryResponse,
    UserQueryResponse,
    UserStatistics,
)
from ghfetch.stats import StarTally

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

USER_STATS_QUERY = """
query($login: String!, $first: Int!, $cursor: String) {
  user(login: $login) {
    name
    repositories(
      first: $first
      after: $cursor
      ownerAffiliations: OWNER
      isFork: false
      orderBy: {direction: DESC, field: STARGAZERS}
    ) {
      nodes {
        stargazers {
          totalCount
        }
      }
      pageInfo {
        endCursor
        hasNextPage
      }
    }
    followers {
      totalCount
    }
    following {
      totalCount
    }
    contributionsCollection {
      totalCommitContributions
    }
    pullRequests {
      totalCount
    }
    issues {
      totalCount
    }
  }
}
"""

_REPO_URL_PREFIXES = (
    "https://github.com/",
    "http://github.com/",
    "github.com/",
)


def parse_repo_url(repo_url: str) -> tuple[str, str]:
    """Split ``https://github.com/<owner>/<repo>`` into ``(owner, repo)``."""
    path = repo_url.strip()
    for prefix in _REPO_URL_PREFIXES:
        if path.startswith(prefix):
            path = path[len(prefix):]
            break
    path = path.strip("/")
    if path.endswith(".git"):
        path = path[: -len(".git")]
    parts = path.split("/")
    if len(parts) != 2 or not all(parts):
        raise ConfigError(
            f"invalid repository URL {repo_url!r}, expected https://github.com/<owner>/<repo>"
        )
    return parts[0], parts[1]


class GitHubFetcher:
    """Fetches user statistics, repository metadata and avatars from GitHub."""

    def __init__(self, token: str, timeout: float = REQUEST_TIMEOUT) -> None:
        self.token = token
        self.base_url = API_BASE_URL
        self.timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None
        self._image_client: Optional[httpx.AsyncClient] = None

    # ── HTTP plumbing ─────────────────────────────────────────────────────

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Accept": REST_ACCEPT,
            "Authorization": f"Bearer {self.token}",
        }

    async def _client_instance(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers=self.headers,
                timeout=self.timeout,
            )
        return self._client

    async def _image_client_instance(self) -> httpx.AsyncClient:
        """Client for image hosts; it never carries the API token."""
        if self._image_client is None:
            self._image_client = httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
            )
        return self._image_client

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
        if self._image_client:
            await self._image_client.aclose()
            self._image_client = None

    async def _request(
        self,
        method: str,
        url: str,
        client: Optional[httpx.AsyncClient] = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """Send one request, mapping failures onto the ghfetch error types."""
        if client is None:
            client = await self._client_instance()
        logger.debug("%s %s", method, url)
        try:
            resp = await client.request(method, url, **kwargs)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"{method} {url} failed: {e}") from e
        if resp.is_success:
            return resp
        if resp.status_code == 403 and "rate limit" in resp.text.lower():
            remaining = resp.headers.get("x-ratelimit-remaining", "0")
            raise UpstreamError(
                f"GitHub API rate limit exceeded (remaining: {remaining}). "
                "Wait a few minutes and retry.",
                status_code=resp.status_code,
            )
        raise UpstreamError(
            f"GitHub API error ({resp.status_code}): {resp.reason_phrase}",
            status_code=resp.status_code,
        )

    @staticmethod
    def _decode(resp: httpx.Response, model: type[ModelT]) -> ModelT:
        try:
            return model.model_validate(resp.json())
        except ValueError as e:  # covers JSONDecodeError and ValidationError
            raise DecodeError(
                f"unexpected response from {resp.request.url}: {e}"
            ) from e

    # ── User statistics (GraphQL) ─────────────────────────────────────────

    async def _fetch_user_page(self, login: str, cursor: PageCursor) -> GraphQLUser:
        resp = await self._request(
            "POST",
            GRAPHQL_URL,
            json={
                "query": USER_STATS_QUERY,
                "variables": {
                    "login": login,
                    "first": PAGE_SIZE,
                    "cursor": cursor.end_cursor,
                },
            },
        )
        page = self._decode(resp, UserQueryResponse)
        if page.errors:
            messages = "; ".join(err.message for err in page.errors)
            raise UpstreamError(f"GraphQL error: {messages}")
        if page.data is None or page.data.user is None:
            raise UpstreamError(f"GitHub user {login!r} not found")
        return page.data.user

    async def fetch_user_statistics(self, login: str) -> UserStatistics:
        """Aggregate a user's statistics across every repository page.

        Pages are requested strictly one after another. Repository and star
        counts are summed over all pages; the remaining fields come from the
        last page. Nothing is returned until the last page is consumed.
        """
        if not login:
            raise ConfigError("username must not be empty")

        tally = StarTally()
        cursor = PageCursor()
        while True:
            user = await self._fetch_user_page(login, cursor)
            tally.add_page(user.repositories)
            cursor = user.repositories.page_info.to_cursor()
            logger.debug(
                "page %d for %s: %d repos so far, %d stars so far",
                tally.pages, login, tally.repos, tally.stars,
            )
            if not cursor.has_next_page:
                return tally.to_user_statistics(user)
            if not cursor.end_cursor:
                raise DecodeError("GraphQL reported another page without an end cursor")

    # ── Repository metadata (REST) ────────────────────────────────────────

    async def fetch_repo_info(self, repo_url: str) -> RepositoryInfo:
        """Fetch and flatten the metadata of the repository at ``repo_url``."""
        owner, repo = parse_repo_url(repo_url)
        resp = await self._request("GET", f"/repos/{owner}/{repo}")
        return self._decode(resp, RepositoryResponse).to_repository_info()

    # ── Avatars ───────────────────────────────────────────────────────────

    async def fetch_bytes(self, url: str) -> bytes:
        """Download a binary resource such as an avatar image."""
        client = await self._image_client_instance()
        resp = await self._request("GET", url, client=client)
        return resp.content
