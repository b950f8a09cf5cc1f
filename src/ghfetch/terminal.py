"""Terminal metrics and pane sizing."""

import shutil

from pydantic import BaseModel

from ghfetch.config import ART_HEIGHT, ART_WIDTH


class PaneLayout(BaseModel):
    """Column widths for the two panes and the row count of the art."""

    info_width: int
    art_width: int
    art_height: int


def get_terminal_width() -> int:
    """Current terminal width in columns, 80 when it cannot be detected."""
    return shutil.get_terminal_size((80, 24)).columns


def compute_layout(terminal_width: int) -> PaneLayout:
    """Split the terminal in half; shrink the art to fit, never grow it."""
    info_width = terminal_width // 2
    scale = min(info_width / ART_WIDTH, 1.0)
    return PaneLayout(
        info_width=info_width,
        art_width=max(1, int(ART_WIDTH * scale)),
        art_height=max(1, int(ART_HEIGHT * scale)),
    )
