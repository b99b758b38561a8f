"""
Static copy for the About screen.
"""

from lifedash.dataset import Metric

ABOUT_INTRO = (
    "This dashboard visualizes life expectancy and Healthy Life Expectancy (HALE) "
    "metrics across various countries and years. The data provided helps analyze "
    "health trends and the quality of life in different regions."
)

METRIC_DESCRIPTIONS = {
    Metric.LIFE_EXPECTANCY_AT_BIRTH: (
        "The average number of years a newborn is expected to live if current "
        "mortality rates persist throughout their lifetime."
    ),
    Metric.LIFE_EXPECTANCY_AT_AGE_60: (
        "The average number of additional years a person who has reached age 60 "
        "is expected to live."
    ),
    Metric.HALE_AT_BIRTH: (
        "The number of years a newborn is expected to live in good health."
    ),
    Metric.HALE_AT_AGE_60: (
        "The number of additional years a person aged 60 is expected to live in good health."
    ),
}

# the About screen spells HALE out in full
METRIC_ABOUT_LABELS = {
    Metric.LIFE_EXPECTANCY_AT_BIRTH: "Life Expectancy at Birth",
    Metric.LIFE_EXPECTANCY_AT_AGE_60: "Life Expectancy at Age 60",
    Metric.HALE_AT_BIRTH: "Healthy Life Expectancy (HALE) at Birth",
    Metric.HALE_AT_AGE_60: "Healthy Life Expectancy (HALE) at Age 60",
}

ABOUT_OUTRO = (
    "Use the buttons and charts to explore different aspects of the life expectancy "
    "and HALE data to gain insights into health trends globally."
)


def about_markdown() -> str:
    lines = [ABOUT_INTRO, "", "**Metrics:**", ""]
    for metric, description in METRIC_DESCRIPTIONS.items():
        lines.append(f"* **{METRIC_ABOUT_LABELS[metric]}:** {description}")
    lines += ["", ABOUT_OUTRO]
    return "\n".join(lines)
