from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, Union

import numpy as np
import pandas as pd
import pycountry


class UnknownSelectionError(KeyError):
    """Raised when a country, metric, year or chart key is not in the dataset."""


# ============================================================
# Keys
# ============================================================

class Country(str, Enum):
    AUSTRALIA = "Australia"
    CHINA = "China"
    INDIA = "India"
    USA = "United States of America"


class Metric(str, Enum):
    LIFE_EXPECTANCY_AT_BIRTH = "Life Expectancy at Birth"
    LIFE_EXPECTANCY_AT_AGE_60 = "Life Expectancy at Age 60"
    HALE_AT_BIRTH = "HALE at Birth"
    HALE_AT_AGE_60 = "HALE at Age 60"


# "All Countries" aggregate view; not a Country
ALL_COUNTRIES = "All Countries"

COUNTRIES: List[Country] = list(Country)
METRICS: List[Metric] = list(Metric)
YEARS: List[int] = [2010, 2015, 2019]

Selection = Union[Country, str]


# ============================================================
# Values (country x metric x year), years in the order of YEARS
# ============================================================

_VALUES = np.array(
    [
        # Australia
        [
            [81.9, 80.4, 79.8],
            [24.7, 23.3, 26.1],
            [70.2, 69.2, 71.2],
            [18.4, 17.5, 19.3],
        ],
        # China
        [
            [74.9, 73.9, 72.3],
            [19.6, 17.9, 21.5],
            [66.7, 65.3, 68.2],
            [14.9, 14.0, 15.9],
        ],
        # India
        [
            [67.2, 65.7, 68.9],
            [18.0, 16.9, 19.0],
            [57.3, 57.0, 57.6],
            [12.6, 12.1, 13.0],
        ],
        # United States of America
        [
            [78.6, 76.3, 80.8],
            [23.0, 21.5, 24.2],
            [66.7, 65.7, 67.7],
            [16.5, 15.6, 17.2],
        ],
    ],
    dtype=float,
)
_VALUES.setflags(write=False)


# ============================================================
# Key resolution
# ============================================================

def resolve_country(name: Selection) -> Selection:
    """
    Map a selector label to a Country, or pass the ALL_COUNTRIES sentinel through.
    Raises UnknownSelectionError for anything else.
    """
    if isinstance(name, Country):
        return name
    if name == ALL_COUNTRIES:
        return ALL_COUNTRIES
    try:
        return Country(name)
    except ValueError:
        raise UnknownSelectionError(f"Unknown country '{name}'.") from None


def _country(name: Selection) -> Country:
    country = resolve_country(name)
    if country == ALL_COUNTRIES:
        raise UnknownSelectionError(
            f"'{ALL_COUNTRIES}' is an aggregate view, not a single country."
        )
    return country


def _metric(metric: Union[Metric, str]) -> Metric:
    try:
        return Metric(metric)
    except ValueError:
        raise UnknownSelectionError(f"Unknown metric '{metric}'.") from None


def _year_index(year: Union[int, str]) -> int:
    # exact match only: 2010.9 or None must not land on a sample year
    if isinstance(year, str) and year.strip().isdigit():
        year = int(year)
    if isinstance(year, bool) or not isinstance(year, (int, np.integer)) or year not in YEARS:
        raise UnknownSelectionError(f"No data for year {year!r}. Known years: {YEARS}.")
    return YEARS.index(int(year))


def country_to_iso3(name: str) -> Optional[str]:
    try:
        return pycountry.countries.lookup(name).alpha_3
    except LookupError:
        return None


# ============================================================
# Accessors
# ============================================================

def get_value(country: Selection, metric: Union[Metric, str], year: int) -> float:
    c = COUNTRIES.index(_country(country))
    m = METRICS.index(_metric(metric))
    return float(_VALUES[c, m, _year_index(year)])


def get_country_year(country: Selection, year: int) -> Dict[Metric, float]:
    """The four metric values for one (country, year) pair."""
    c = COUNTRIES.index(_country(country))
    y = _year_index(year)
    return {metric: float(_VALUES[c, m, y]) for m, metric in enumerate(METRICS)}


def get_country_series(country: Selection) -> Dict[Metric, List[float]]:
    """All years for all four metrics of one country, ordered as YEARS."""
    c = COUNTRIES.index(_country(country))
    return {metric: _VALUES[c, m].tolist() for m, metric in enumerate(METRICS)}


# ============================================================
# Frames (tabular view / export)
# ============================================================

def dataset_frame() -> pd.DataFrame:
    """
    Wide table: one row per (country, year).
    Columns: Country, ISO3, Year, then one column per metric label.
    """
    rows = []
    for c, country in enumerate(COUNTRIES):
        iso3 = country_to_iso3(country.value)
        for y, year in enumerate(YEARS):
            row = {"Country": country.value, "ISO3": iso3, "Year": year}
            for m, metric in enumerate(METRICS):
                row[metric.value] = float(_VALUES[c, m, y])
            rows.append(row)
    return pd.DataFrame(rows)


def long_frame() -> pd.DataFrame:
    """Tidy table with columns country, metric, year, value."""
    index = pd.MultiIndex.from_product(
        [[c.value for c in COUNTRIES], [m.value for m in METRICS], YEARS],
        names=["country", "metric", "year"],
    )
    return pd.DataFrame({"value": _VALUES.reshape(-1).copy()}, index=index).reset_index()
