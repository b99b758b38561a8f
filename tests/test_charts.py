"""Tests for chart specs and their Plotly figures."""

from __future__ import annotations

from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from lifedash.charts import ChartKind, build_chart, to_figure
from lifedash.dataset import ALL_COUNTRIES, COUNTRIES, METRICS, UnknownSelectionError


# ---------------------------------------------------------------------------
# Specs


@pytest.mark.parametrize("country", [c.value for c in COUNTRIES])
def test_pie_uses_first_year_only(country: str) -> None:
    spec = build_chart(country, ChartKind.PIE)
    assert len(spec.series) == 4
    assert all(len(s.y) == 1 for s in spec.series)
    assert all(s.x == [2010] for s in spec.series)


@pytest.mark.parametrize("kind", [ChartKind.BAR, ChartKind.LINE, ChartKind.SCATTER])
def test_other_charts_use_all_years(kind: ChartKind) -> None:
    spec = build_chart("India", kind)
    assert [s.name for s in spec.series] == [m.value for m in METRICS]
    assert all(len(s.y) == 3 for s in spec.series)
    assert spec.series[0].x == [2010, 2015, 2019]


def test_pie_values_are_2010_column() -> None:
    spec = build_chart("Australia", "Pie Chart")
    assert [s.y[0] for s in spec.series] == pytest.approx([81.9, 24.7, 70.2, 18.4])


def test_all_countries_has_series_per_metric_per_country() -> None:
    spec = build_chart(ALL_COUNTRIES, ChartKind.LINE)
    assert len(spec.series) == 16
    assert spec.series[0].name == "Australia Life Expectancy at Birth"
    assert spec.series[-1].name == "United States of America HALE at Age 60"
    assert spec.title == "Life Expectancy and HALE Trends for All Countries"


def test_all_countries_pie_keeps_first_year_policy() -> None:
    spec = build_chart(ALL_COUNTRIES, ChartKind.PIE)
    assert len(spec.series) == 16
    assert all(len(s.y) == 1 for s in spec.series)


@pytest.mark.parametrize(
    "kind, title",
    [
        (ChartKind.BAR, "Life Expectancy and HALE for China"),
        (ChartKind.LINE, "Life Expectancy and HALE Trends for China"),
        (ChartKind.PIE, "Life Expectancy and HALE Distribution for China"),
        (ChartKind.SCATTER, "Life Expectancy and HALE Scatter Plot for China"),
    ],
)
def test_titles(kind: ChartKind, title: str) -> None:
    assert build_chart("China", kind).title == title


def test_unknown_selection_raises() -> None:
    with pytest.raises(UnknownSelectionError):
        build_chart("Brazil", ChartKind.BAR)
    with pytest.raises(UnknownSelectionError):
        build_chart("Australia", "Heatmap")


# ---------------------------------------------------------------------------
# Figures


def test_bar_figure_has_one_trace_per_series() -> None:
    fig = to_figure(build_chart("Australia", ChartKind.BAR))
    assert len(fig.data) == 4
    assert all(trace.type == "bar" for trace in fig.data)
    assert list(fig.data[0].x) == ["2010", "2015", "2019"]
    assert fig.layout.title.text == "Life Expectancy and HALE for Australia"


def test_scatter_figure_is_markers_only() -> None:
    fig = to_figure(build_chart("India", ChartKind.SCATTER))
    assert all(trace.mode == "markers" for trace in fig.data)


def test_pie_figure_is_single_trace() -> None:
    fig = to_figure(build_chart("United States of America", ChartKind.PIE))
    assert len(fig.data) == 1
    assert fig.data[0].type == "pie"
    assert list(fig.data[0].values) == pytest.approx([78.6, 23.0, 66.7, 16.5])
