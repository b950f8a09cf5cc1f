"""Runtime configuration: constants, CLI options and token resolution."""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, field_validator

from ghfetch.errors import ConfigError

# ── Constants ─────────────────────────────────────────────────────────────

API_BASE_URL = "https://api.github.com"
GRAPHQL_URL = f"{API_BASE_URL}/graphql"
REST_ACCEPT = "application/vnd.github.v3+json"

# Fixed deadline for every outbound request, in seconds.
REQUEST_TIMEOUT = 30.0

# GraphQL caps `first:` at 100.
PAGE_SIZE = 100

ART_WIDTH = 50
ART_HEIGHT = 25
ART_CHARSET = " .-=+#@"

COLORS = ("red", "green", "yellow", "blue", "magenta", "cyan")
DEFAULT_COLOR = "blue"

TOKEN_ENV_VARS = ("GH_TOKEN", "GITHUB_TOKEN")


# ── Options ───────────────────────────────────────────────────────────────

class Options(BaseModel):
    """Parsed command-line options."""

    user: str = ""
    repo: str = ""
    color: str = DEFAULT_COLOR
    access_token: Optional[str] = None
    colored_art: bool = True

    @field_validator("color")
    @classmethod
    def _known_color(cls, value: str) -> str:
        if value not in COLORS:
            raise ValueError(f"unsupported color {value!r}, pick one of {', '.join(COLORS)}")
        return value

    def require_target(self) -> None:
        """Fail unless a user or a repository was requested."""
        if not self.user and not self.repo:
            raise ConfigError(
                "please provide a github username using the --user flag "
                "or a repository URL using the --repo flag"
            )


def resolve_token(
    explicit: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> str:
    """Return the access token: explicit flag, then GH_TOKEN, then GITHUB_TOKEN."""
    if explicit:
        return explicit
    env = os.environ if environ is None else environ
    for name in TOKEN_ENV_VARS:
        token = env.get(name)
        if token:
            return token
    raise ConfigError("access token environment variable is not set")
