"""Tests for stylesheet and background image loading."""

from __future__ import annotations

import base64
import logging
from pathlib import Path
import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from lifedash.assets import background_css, background_data_uri, load_css
from lifedash.content import about_markdown


def test_missing_background_is_logged_not_raised(tmp_path: Path, caplog) -> None:
    missing = tmp_path / "background.jpeg"
    with caplog.at_level(logging.WARNING, logger="lifedash.assets"):
        assert background_data_uri(missing) is None
        assert background_css(missing) == ""
    assert "Background image not found" in caplog.text


def test_background_is_inlined_as_data_uri(tmp_path: Path) -> None:
    image = tmp_path / "background.jpeg"
    image.write_bytes(b"\xff\xd8\xff\xe0fake-jpeg")

    uri = background_data_uri(image)
    assert uri == "data:image/jpeg;base64," + base64.b64encode(b"\xff\xd8\xff\xe0fake-jpeg").decode()

    css = background_css(image, selector=".about")
    assert css.startswith(".about {")
    assert "background-size: cover" in css


def test_load_css(tmp_path: Path) -> None:
    sheet = tmp_path / "styles.css"
    sheet.write_text(".hero { color: red; }", encoding="utf-8")
    assert load_css(sheet) == ".hero { color: red; }"
    assert load_css(tmp_path / "missing.css") == ""


def test_about_text_lists_every_metric() -> None:
    text = about_markdown()
    assert text.startswith("This dashboard visualizes life expectancy")
    for label in (
        "Life Expectancy at Birth",
        "Life Expectancy at Age 60",
        "Healthy Life Expectancy (HALE) at Birth",
        "Healthy Life Expectancy (HALE) at Age 60",
    ):
        assert label in text
