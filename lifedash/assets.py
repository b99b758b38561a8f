from __future__ import annotations

import base64
import logging
import mimetypes
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_css(path: PathLike) -> str:
    """Stylesheet text, or "" when the file is absent."""
    try:
        with open(path, encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        logger.info("Stylesheet not found at %s; using built-in styles only", path)
        return ""


def background_data_uri(path: PathLike) -> Optional[str]:
    """
    Inline the background image as a data URI.
    A missing image is cosmetic: log it and return None.
    """
    try:
        raw = Path(path).read_bytes()
    except FileNotFoundError:
        logger.warning("Background image not found at %s; rendering without it", path)
        return None
    except OSError as exc:
        logger.warning("Could not read background image %s: %s", path, exc)
        return None

    mime = mimetypes.guess_type(str(path))[0] or "image/jpeg"
    encoded = base64.b64encode(raw).decode("ascii")
    return f"data:{mime};base64,{encoded}"


def background_css(path: PathLike, selector: str = ".about-screen") -> str:
    """CSS rule putting the background image behind `selector`; "" without an image."""
    uri = background_data_uri(path)
    if uri is None:
        return ""
    return (
        f"{selector} {{\n"
        f"    background-image: url('{uri}');\n"
        f"    background-size: cover;\n"
        f"    background-position: center;\n"
        f"}}"
    )
