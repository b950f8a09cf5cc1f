"""Data models for ghfetch.

Wire models mirror the JSON that GitHub returns; display records are the
flat, immutable shapes the pane composer reads. Each wire model that feeds
a display record owns the projection into it.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ── Display records ───────────────────────────────────────────────────────

class UserStatistics(BaseModel):
    """Aggregated statistics for one GitHub user."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    repos: int = 0
    followers: int = 0
    following: int = 0
    total_stars_earned: int = 0
    total_commits_this_year: int = 0
    total_prs: int = 0
    total_issues: int = 0


class RepositoryInfo(BaseModel):
    """Flattened repository metadata. Empty values mean "not shown"."""

    model_config = ConfigDict(frozen=True)

    author: str = ""
    description: str = ""
    language: str = ""
    license: str = ""
    last_updated: str = ""
    version: str = ""
    released: str = ""
    owner_avatar: str = ""
    stars: int = 0
    topics: tuple[str, ...] = ()


class PageCursor(BaseModel):
    """Where the next GraphQL page starts, and whether there is one."""

    end_cursor: Optional[str] = None
    has_next_page: bool = True


# ── GraphQL wire models ───────────────────────────────────────────────────

class _GraphQLModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class TotalCount(_GraphQLModel):
    total_count: int = Field(0, alias="totalCount")


class PageInfo(_GraphQLModel):
    end_cursor: Optional[str] = Field(None, alias="endCursor")
    has_next_page: bool = Field(False, alias="hasNextPage")

    def to_cursor(self) -> PageCursor:
        return PageCursor(end_cursor=self.end_cursor, has_next_page=self.has_next_page)


class RepositoryNode(_GraphQLModel):
    stargazers: TotalCount = Field(default_factory=TotalCount)


class RepositoryConnection(_GraphQLModel):
    nodes: list[RepositoryNode] = Field(default_factory=list)
    page_info: PageInfo = Field(default_factory=PageInfo, alias="pageInfo")


class ContributionsCollection(_GraphQLModel):
    total_commit_contributions: int = Field(0, alias="totalCommitContributions")


class GraphQLUser(_GraphQLModel):
    name: Optional[str] = None
    repositories: RepositoryConnection = Field(default_factory=RepositoryConnection)
    followers: TotalCount = Field(default_factory=TotalCount)
    following: TotalCount = Field(default_factory=TotalCount)
    contributions_collection: ContributionsCollection = Field(
        default_factory=ContributionsCollection, alias="contributionsCollection"
    )
    pull_requests: TotalCount = Field(default_factory=TotalCount, alias="pullRequests")
    issues: TotalCount = Field(default_factory=TotalCount)


class UserQueryData(_GraphQLModel):
    user: Optional[GraphQLUser] = None


class GraphQLErrorItem(_GraphQLModel):
    message: str = ""
    type: Optional[str] = None


class UserQueryResponse(_GraphQLModel):
    """One page of the user statistics query."""

    data: Optional[UserQueryData] = None
    errors: list[GraphQLErrorItem] = Field(default_factory=list)


# ── REST wire models ──────────────────────────────────────────────────────

class RepositoryOwner(BaseModel):
    login: str = ""
    avatar_url: str = ""


class RepositoryLicense(BaseModel):
    name: Optional[str] = None


class RepositoryRelease(BaseModel):
    tag_name: Optional[str] = None
    published_at: Optional[str] = None


class RepositoryResponse(BaseModel):
    """The subset of `GET /repos/{owner}/{repo}` that ghfetch displays."""

    owner: RepositoryOwner = Field(default_factory=RepositoryOwner)
    description: Optional[str] = None
    language: Optional[str] = None
    license: Optional[RepositoryLicense] = None
    updated_at: Optional[str] = None
    latest_release: Optional[RepositoryRelease] = None
    stargazers_count: int = 0
    topics: list[str] = Field(default_factory=list)

    def to_repository_info(self) -> RepositoryInfo:
        """Project the nested response into the flat display record."""
        license_ = self.license or RepositoryLicense()
        release = self.latest_release or RepositoryRelease()
        return RepositoryInfo(
            author=self.owner.login,
            description=self.description or "",
            language=self.language or "",
            license=license_.name or "",
            last_updated=self.updated_at or "",
            version=release.tag_name or "",
            released=release.published_at or "",
            owner_avatar=self.owner.avatar_url,
            stars=self.stargazers_count,
            topics=tuple(self.topics),
        )
