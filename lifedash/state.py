from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Union

from lifedash.charts import ChartKind, resolve_chart_kind
from lifedash.dataset import Country, Selection, resolve_country

logger = logging.getLogger(__name__)


class Screen(str, Enum):
    ABOUT = "About"
    DASHBOARD = "Dashboard"


@dataclass
class DashboardState:
    """Per-session UI state. Lives in st.session_state, one per browser session."""

    screen: Screen = Screen.ABOUT
    country: Selection = Country.AUSTRALIA
    chart: ChartKind = ChartKind.BAR
    show_dataset: bool = False

    def show_screen(self, screen: Union[Screen, str]) -> None:
        self.screen = Screen(screen)
        logger.debug("Showing %s screen", self.screen.value)

    def select_country(self, name: Selection) -> None:
        # resolve first so an unknown name leaves the state untouched
        country = resolve_country(name)
        self.country = country
        # a new country always opens on the bar chart
        self.chart = ChartKind.BAR
        logger.info("Selected country: %s", getattr(country, "value", country))

    def select_chart(self, kind: Union[ChartKind, str]) -> None:
        self.chart = resolve_chart_kind(kind)
        logger.info("Selected chart: %s", self.chart.value)

    def toggle_dataset(self) -> None:
        self.show_dataset = not self.show_dataset

    @property
    def country_label(self) -> str:
        return getattr(self.country, "value", self.country)
