"""Two-pane composition: ASCII art on the left, labelled facts on the right."""

from typing import Optional, Union

from rich.table import Table
from rich.text import Text

from ghfetch.models import RepositoryInfo, UserStatistics
from ghfetch.terminal import PaneLayout

PALETTE_STYLES = ("default", "red", "green", "yellow", "blue", "magenta", "cyan", "white")
SWATCH = "███"


def separator(username: str, color: str) -> Text:
    """Dashed rule sized to the username."""
    return Text("  " + "-" * (6 + len(username)), style=color)


def palette() -> Text:
    """Strip of the eight basic terminal colours."""
    strip = Text()
    for style in PALETTE_STYLES:
        strip.append(SWATCH, style=style)
    return strip


def field_line(label: str, value: Union[str, int], label_style: Optional[str] = None) -> Text:
    line = Text("  ")
    line.append(label, style=label_style)
    line.append(f": {value}")
    return line


def user_lines(username: str, stats: UserStatistics, color: str) -> list[Text]:
    """Lines for the user group. Counts are always shown, the name only if set."""
    lines = [field_line("User", username, color), separator(username, color)]
    if stats.name:
        lines.append(field_line("Name", stats.name, color))
    lines += [
        field_line("Repos", stats.repos, color),
        field_line("Followers", stats.followers, color),
        field_line("Following", stats.following, color),
        field_line("Total Stars Earned", stats.total_stars_earned, color),
        field_line("Total Commits This Year", stats.total_commits_this_year, color),
        field_line("Total PRs", stats.total_prs, color),
        field_line("Total Issues", stats.total_issues, color),
    ]
    return lines


def repo_lines(repo_url: str, info: RepositoryInfo) -> list[Text]:
    """Lines for the repository group; empty text fields are left out."""
    lines = [field_line("Repo URL", repo_url)]
    optional = (
        ("Author", info.author),
        ("Description", info.description),
        ("Language", info.language),
        ("License", info.license),
        ("Last Updated", info.last_updated),
        ("Version", info.version),
        ("Released", info.released),
    )
    lines += [field_line(label, value) for label, value in optional if value]
    lines.append(field_line("Stars", info.stars))
    if info.topics:
        lines.append(field_line("Topics", ", ".join(info.topics)))
    return lines


def build_info_lines(
    color: str,
    username: str = "",
    stats: Optional[UserStatistics] = None,
    repo_url: str = "",
    repo: Optional[RepositoryInfo] = None,
) -> list[Text]:
    """Right-pane lines: user group, repo group, closing rule and palette."""
    lines: list[Text] = []
    if username and stats is not None:
        lines += user_lines(username, stats, color)
    if repo_url and repo is not None:
        if lines:
            lines.append(separator(username, color))
        lines += repo_lines(repo_url, repo)
    lines.append(separator(username, color))
    lines.append(palette())
    return lines


def compose(art: Text, info_lines: list[Text], layout: PaneLayout) -> Table:
    """Place the art and the info block side by side, centred vertically."""
    grid = Table.grid(padding=0)
    grid.add_column(width=layout.art_width, vertical="middle", no_wrap=True, overflow="crop")
    grid.add_column(width=layout.info_width, vertical="middle")
    grid.add_row(art, Text("\n").join(info_lines))
    return grid
