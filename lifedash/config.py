from pathlib import Path

# --------------------------------------------------
# Page
# --------------------------------------------------
APP_TITLE = "Life Expectancy Dashboard"
PAGE_LAYOUT = "wide"

# --------------------------------------------------
# Assets (resolved against the repo root)
# --------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parents[1]
ASSETS_DIR = PROJECT_ROOT / "assets"
STYLES_CSS = ASSETS_DIR / "styles.css"
BACKGROUND_IMAGE = ASSETS_DIR / "background.jpeg"

# --------------------------------------------------
# Design System Colors
# --------------------------------------------------
COLOR_BG   = "#f4f5f6"
COLOR_TEXT = "#2c2f33"

# one colour per metric, in Metric order
METRIC_COLORS = [
    "#005ab5",  # life expectancy at birth
    "#dc3220",  # life expectancy at 60
    "#009E73",  # HALE at birth
    "#E69F00",  # HALE at 60
]

# --------------------------------------------------
# Charts
# --------------------------------------------------
CHART_TEMPLATE = "plotly_white"
CHART_HEIGHT = 560
