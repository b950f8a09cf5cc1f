"""Avatar image → colored ASCII art."""

from io import BytesIO

from PIL import Image
from rich.color import Color
from rich.style import Style
from rich.text import Text

from ghfetch.config import ART_CHARSET
from ghfetch.errors import DecodeError


def avatar_url_for(login: str) -> str:
    """Public avatar URL of a GitHub account."""
    return f"https://github.com/{login}.png"


def render_ascii(
    image_bytes: bytes,
    width: int,
    height: int,
    colored: bool = True,
    charset: str = ART_CHARSET,
) -> Text:
    """Resize the image to ``width`` x ``height`` cells and draw it with ``charset``.

    Each cell's character is picked by pixel luminance, darkest first. With
    ``colored`` the cell is also painted in the pixel's own RGB colour.
    """
    try:
        img = Image.open(BytesIO(image_bytes))
        img = img.convert("RGB").resize((width, height))
    except OSError as e:  # includes UnidentifiedImageError
        raise DecodeError(f"could not decode avatar image: {e}") from e
    gray = img.convert("L")

    art = Text(no_wrap=True, overflow="crop")
    for y in range(height):
        if y:
            art.append("\n")
        for x in range(width):
            level = gray.getpixel((x, y))
            char = charset[min(level * len(charset) // 256, len(charset) - 1)]
            if colored:
                r, g, b = img.getpixel((x, y))
                art.append(char, style=Style(color=Color.from_rgb(r, g, b)))
            else:
                art.append(char)
    return art
