"""Orchestration: fetch everything, then print the two-pane summary."""

import logging
from typing import Optional

from rich.console import Console
from rich.table import Table

from ghfetch.avatar import avatar_url_for, render_ascii
from ghfetch.config import Options
from ghfetch.errors import DecodeError
from ghfetch.fetcher import GitHubFetcher
from ghfetch.models import RepositoryInfo, UserStatistics
from ghfetch.panes import build_info_lines, compose
from ghfetch.terminal import compute_layout, get_terminal_width

logger = logging.getLogger(__name__)


class GhFetchApp:
    """Runs one ghfetch invocation for already validated options."""

    def __init__(
        self,
        options: Options,
        token: str,
        console: Optional[Console] = None,
        status_console: Optional[Console] = None,
        terminal_width: Optional[int] = None,
    ) -> None:
        self.options = options
        self.token = token
        self.console = console or Console()
        self.status_console = status_console or Console(stderr=True)
        self.terminal_width = terminal_width

    async def build(self) -> Table:
        """Fetch all data and return the composed panes.

        The spinner is stopped before this returns or raises, and nothing is
        rendered unless every fetch succeeded.
        """
        opts = self.options
        layout = compute_layout(self.terminal_width or get_terminal_width())
        logger.debug("pane layout: %s", layout)

        stats: Optional[UserStatistics] = None
        repo: Optional[RepositoryInfo] = None
        fetcher = GitHubFetcher(token=self.token)
        try:
            with self.status_console.status(
                "", spinner="growVertical", spinner_style=opts.color
            ):
                if opts.repo:
                    repo = await fetcher.fetch_repo_info(opts.repo)
                if opts.user:
                    avatar_url = avatar_url_for(opts.user)
                elif repo is not None and repo.owner_avatar:
                    avatar_url = repo.owner_avatar
                else:
                    raise DecodeError("repository response has no owner avatar")
                image = await fetcher.fetch_bytes(avatar_url)
                if opts.user:
                    stats = await fetcher.fetch_user_statistics(opts.user)
        finally:
            await fetcher.close()

        art = render_ascii(image, layout.art_width, layout.art_height, colored=opts.colored_art)
        lines = build_info_lines(
            opts.color,
            username=opts.user,
            stats=stats,
            repo_url=opts.repo,
            repo=repo,
        )
        return compose(art, lines, layout)

    async def run(self) -> None:
        self.console.print(await self.build())
