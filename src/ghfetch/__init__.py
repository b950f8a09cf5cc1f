"""ghfetch: neofetch-style GitHub profile and repository summary.

Fetches a user's or repository's public metadata from the GitHub APIs,
renders the avatar as ASCII art and prints a two-pane terminal summary.
"""

__version__ = "0.1.0"
