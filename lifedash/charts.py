from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

import plotly.graph_objects as go

from lifedash.config import CHART_HEIGHT, CHART_TEMPLATE, METRIC_COLORS
from lifedash.dataset import (
    ALL_COUNTRIES,
    COUNTRIES,
    METRICS,
    YEARS,
    Country,
    Selection,
    UnknownSelectionError,
    get_country_series,
    resolve_country,
)


class ChartKind(str, Enum):
    BAR = "Bar Chart"
    LINE = "Line Chart"
    PIE = "Pie Chart"
    SCATTER = "Scatter Plot"


CHART_KINDS: List[ChartKind] = list(ChartKind)

# title prefix per chart kind; the country (or "All Countries") is appended
CHART_TITLES = {
    ChartKind.BAR: "Life Expectancy and HALE for",
    ChartKind.LINE: "Life Expectancy and HALE Trends for",
    ChartKind.PIE: "Life Expectancy and HALE Distribution for",
    ChartKind.SCATTER: "Life Expectancy and HALE Scatter Plot for",
}


@dataclass(frozen=True)
class Series:
    name: str
    x: List[int]
    y: List[float]


@dataclass(frozen=True)
class ChartSpec:
    kind: ChartKind
    title: str
    x_title: str = "Year"
    y_title: str = "Value"
    series: List[Series] = field(default_factory=list)


def resolve_chart_kind(kind: Union[ChartKind, str]) -> ChartKind:
    try:
        return ChartKind(kind)
    except ValueError:
        raise UnknownSelectionError(f"Unknown chart type '{kind}'.") from None


# ============================================================
# Chart specs
# ============================================================

def _country_series(country: Country, kind: ChartKind, prefix: str = "") -> List[Series]:
    values = get_country_series(country)
    out = []
    for metric in METRICS:
        # pie slices only ever use the first sample year, the aggregate view included
        # (the desktop version plotted every year there; 16 slices here, not 48)
        if kind is ChartKind.PIE:
            x, y = YEARS[:1], values[metric][:1]
        else:
            x, y = list(YEARS), values[metric]
        out.append(Series(name=f"{prefix}{metric.value}", x=x, y=y))
    return out


def build_chart(selection: Selection, kind: Union[ChartKind, str]) -> ChartSpec:
    """
    Build the chart spec for one country or for ALL_COUNTRIES.

    Single country -> one series per metric.
    All countries  -> one series per (country, metric), named "<country> <metric>".
    Pie charts use 2010 only; bar/line/scatter use every year.
    """
    kind = resolve_chart_kind(kind)
    selection = resolve_country(selection)

    if selection == ALL_COUNTRIES:
        label = ALL_COUNTRIES
        series = []
        for country in COUNTRIES:
            series.extend(_country_series(country, kind, prefix=f"{country.value} "))
    else:
        label = selection.value
        series = _country_series(selection, kind)

    return ChartSpec(kind=kind, title=f"{CHART_TITLES[kind]} {label}", series=series)


# ============================================================
# Plotly figures
# ============================================================

def _color(i: int, n_series: int) -> Optional[str]:
    # aggregate charts fall back to the template palette
    if n_series != len(METRIC_COLORS):
        return None
    return METRIC_COLORS[i]


def to_figure(spec: ChartSpec) -> go.Figure:
    fig = go.Figure()

    if spec.kind is ChartKind.PIE:
        fig.add_trace(go.Pie(
            labels=[s.name for s in spec.series],
            values=[s.y[0] for s in spec.series],
            sort=False,
            hovertemplate="<b>%{label}</b><br>%{value:.1f} years<extra></extra>",
        ))
    else:
        for i, s in enumerate(spec.series):
            hover = "<b>%{fullData.name}</b><br>Year: %{x}<br>Value: %{y:.1f}<extra></extra>"
            if spec.kind is ChartKind.BAR:
                trace = go.Bar(x=[str(x) for x in s.x], y=s.y, name=s.name,
                               marker_color=_color(i, len(spec.series)), hovertemplate=hover)
            elif spec.kind is ChartKind.LINE:
                trace = go.Scatter(x=s.x, y=s.y, mode="lines+markers", name=s.name,
                                   line=dict(color=_color(i, len(spec.series))), hovertemplate=hover)
            else:
                trace = go.Scatter(x=s.x, y=s.y, mode="markers", name=s.name,
                                   marker=dict(color=_color(i, len(spec.series)), size=10), hovertemplate=hover)
            fig.add_trace(trace)

        fig.update_layout(
            xaxis_title=spec.x_title,
            yaxis_title=spec.y_title,
            barmode="group",
        )
        fig.update_yaxes(showgrid=True)
        if spec.kind is not ChartKind.BAR:
            fig.update_xaxes(tickmode="array", tickvals=YEARS)

    fig.update_layout(
        title=spec.title,
        template=CHART_TEMPLATE,
        height=CHART_HEIGHT,
        showlegend=True,
        legend=dict(title=""),
    )
    return fig
