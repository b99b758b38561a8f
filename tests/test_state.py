"""Tests for per-session dashboard state."""

from __future__ import annotations

from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from lifedash.charts import ChartKind
from lifedash.dataset import ALL_COUNTRIES, Country, UnknownSelectionError, dataset_frame
from lifedash.state import DashboardState, Screen


def test_defaults() -> None:
    state = DashboardState()
    assert state.screen is Screen.ABOUT
    assert state.country is Country.AUSTRALIA
    assert state.chart is ChartKind.BAR
    assert state.show_dataset is False


def test_screen_round_trip_keeps_selection_and_data() -> None:
    before = dataset_frame()
    state = DashboardState()
    state.select_country("India")
    state.select_chart(ChartKind.SCATTER)

    state.show_screen(Screen.DASHBOARD)
    state.show_screen("About")
    state.show_screen(Screen.DASHBOARD)

    assert state.screen is Screen.DASHBOARD
    assert state.country is Country.INDIA
    assert state.chart is ChartKind.SCATTER
    assert dataset_frame().equals(before)


def test_select_country_resets_to_bar_chart() -> None:
    state = DashboardState(chart=ChartKind.PIE)
    state.select_country(ALL_COUNTRIES)
    assert state.country == ALL_COUNTRIES
    assert state.country_label == "All Countries"
    assert state.chart is ChartKind.BAR


def test_unknown_country_leaves_state_untouched() -> None:
    state = DashboardState(country=Country.CHINA, chart=ChartKind.LINE)
    with pytest.raises(UnknownSelectionError):
        state.select_country("Brazil")
    assert state.country is Country.CHINA
    assert state.chart is ChartKind.LINE


def test_unknown_chart_raises() -> None:
    state = DashboardState()
    with pytest.raises(UnknownSelectionError):
        state.select_chart("Heatmap")
    assert state.chart is ChartKind.BAR


def test_unknown_screen_raises() -> None:
    with pytest.raises(ValueError):
        DashboardState().show_screen("Settings")


def test_toggle_dataset() -> None:
    state = DashboardState()
    state.toggle_dataset()
    assert state.show_dataset is True
    state.toggle_dataset()
    assert state.show_dataset is False
