"""Cross-page tally for the user statistics query."""

from pydantic import BaseModel

from ghfetch.models import GraphQLUser, RepositoryConnection, UserStatistics


class StarTally(BaseModel):
    """Running totals over the repository pages consumed so far."""

    repos: int = 0
    stars: int = 0
    pages: int = 0

    def add_page(self, connection: RepositoryConnection) -> None:
        """Fold one page of repositories into the totals."""
        self.stars += sum(node.stargazers.total_count for node in connection.nodes)
        self.repos += len(connection.nodes)
        self.pages += 1

    def to_user_statistics(self, last_page: GraphQLUser) -> UserStatistics:
        """Combine the totals with the scalar fields of the final page."""
        return UserStatistics(
            name=last_page.name or "",
            repos=self.repos,
            followers=last_page.followers.total_count,
            following=last_page.following.total_count,
            total_stars_earned=self.stars,
            total_commits_this_year=last_page.contributions_collection.total_commit_contributions,
            total_prs=last_page.pull_requests.total_count,
            total_issues=last_page.issues.total_count,
        )
