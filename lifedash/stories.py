from __future__ import annotations

from typing import Union

from lifedash.charts import ChartKind
from lifedash.dataset import ALL_COUNTRIES, Country, Selection

NO_STORY_FOR_CHART = "No story available for this chart type."
NO_STORY_FOR_COUNTRY = "No story available for this country."

# Stories are pre-written prose; they are returned verbatim and never
# rebuilt from the dataset values.
STORIES = {

  # ==========================================================
  # Australia
  # ==========================================================
  Country.AUSTRALIA: {
    ChartKind.BAR: (
      "The bar chart for Australia demonstrates a gradual increase in life expectancy at birth from 81.9 years in 2010 to 83 years in 2019, indicating improved overall longevity. Life expectancy at age 60 also shows an upward trend, moving from 24.7 years in 2010 to 25.6 years in 2019, suggesting that Australians are living longer even in their senior years. Healthy Life Expectancy (HALE) at birth rose from 70.2 years to 70.9 years, reflecting an increase in the years Australians spend in good health. At the same time, HALE at age 60 increased from 18.4 years to 19 years, highlighting a slight but significant improvement in the health quality of the elderly population."
    ),
    ChartKind.LINE: (
      "The line chart for Australia shows a clear positive trend in life expectancy at birth, which increased from 81.9 years in 2010 to 83 years in 2019. This trend underscores Australia's progress in extending lifespan. Life expectancy at age 60 also shows a consistent rise from 24.7 years to 25.6 years, indicating enhanced quality of life for older Australians. The increase in HALE at birth from 70.2 years to 70.9 years and the rise in HALE at age 60 from 18.4 years to 19 years suggest improvements in health standards, contributing to better overall health outcomes."
    ),
    ChartKind.PIE: (
      "The pie chart for Australia in 2019 illustrates that the highest value is life expectancy at birth, standing at 83 years, indicating a robust lifespan. HALE at birth is substantial at 70.9 years, suggesting that most of these years are spent in good health. Life expectancy at age 60 is 25.6 years, and HALE at age 60 is 19 years, showing that Australians maintain a good quality of life well into their senior years. This distribution reflects Australia's strong health care system and high standards of living."
    ),
    ChartKind.SCATTER: (
      "The scatter plot for Australia displays a positive trajectory in both life expectancy and HALE metrics. Life expectancy at birth has steadily increased from 81.9 years in 2010 to 83 years in 2019. Similarly, HALE at birth has risen from 70.2 years to 70.9 years, while HALE at age 60 has grown from 18.4 years to 19 years. This data illustrates the steady improvement in both lifespan and health quality, showcasing Australia’s continued progress in public health."
    ),
  },

  # ==========================================================
  # China
  # ==========================================================
  Country.CHINA: {
    ChartKind.BAR: (
      "The bar chart for China reveals an increase in life expectancy at birth from 74.9 years in 2010 to 77.4 years in 2019. This rise signifies substantial improvements in longevity. However, life expectancy at age 60 shows a more modest increase from 19.6 years to 21.1 years, suggesting a slower improvement in the later stages of life. Healthy Life Expectancy (HALE) at birth improved from 66.7 years to 68.5 years, indicating that the additional years of life are increasingly spent in good health. HALE at age 60 also increased from 14.9 years to 15.9 years, reflecting improvements in health among the elderly."
    ),
    ChartKind.LINE: (
      "The line chart for China illustrates a steady increase in life expectancy at birth from 74.9 years in 2010 to 77.4 years in 2019. Life expectancy at age 60 also shows an upward trend, from 19.6 years to 21.1 years, suggesting improved quality of life for older adults. HALE at birth rose from 66.7 years to 68.5 years, and HALE at age 60 increased from 14.9 years to 15.9 years, reflecting overall health improvements and increased longevity."
    ),
    ChartKind.PIE: (
      " In the pie chart for China, the largest segment represents life expectancy at birth, which is 77.4 years in 2019. HALE at birth is 68.5 years, indicating that a significant portion of life expectancy is spent in good health. Life expectancy at age 60 is 21.1 years, and HALE at age 60 is 15.9 years. This distribution highlights the gains in longevity and health quality, showing that while life expectancy has increased, the quality of health in old age has also improved."
    ),
    ChartKind.SCATTER: (
      "The scatter plot for China shows a clear upward trend in both life expectancy and HALE metrics. Life expectancy at birth increased from 74.9 years in 2010 to 77.4 years in 2019. HALE at birth also improved from 66.7 years to 68.5 years, and HALE at age 60 rose from 14.9 years to 15.9 years. This data illustrates the progress China has made in both extending lifespan and improving health outcomes."
    ),
  },

  # ==========================================================
  # India
  # ==========================================================
  Country.INDIA: {
    ChartKind.BAR: (
      "The bar chart for India demonstrates an increase in life expectancy at birth from 67.2 years in 2010 to 70.8 years in 2019, reflecting significant gains in longevity. Life expectancy at age 60 also increased from 18 years to 18.8 years. Healthy Life Expectancy (HALE) at birth rose from 57.3 years to 60.3 years, indicating that more of these years are spent in good health. HALE at age 60 improved from 12.6 years to 13.2 years, showing enhanced health conditions among the elderly."
    ),
    ChartKind.LINE: (
      "The line chart for India reveals a consistent upward trend in life expectancy at birth, which grew from 67.2 years in 2010 to 70.8 years in 2019. Life expectancy at age 60 also saw an increase from 18 years to 18.8 years. HALE at birth improved from 57.3 years to 60.3 years, while HALE at age 60 rose from 12.6 years to 13.2 years, reflecting ongoing improvements in health and longevity."
    ),
    ChartKind.PIE: (
      "The pie chart for India highlights that life expectancy at birth in 2019 is the highest at 70.8 years, with HALE at birth at 60.3 years. Life expectancy at age 60 stands at 18.8 years, and HALE at age 60 is 13.2 years. This distribution illustrates India's progress in extending lifespan and improving health, particularly among the elderly population."
    ),
    ChartKind.SCATTER: (
      " The scatter plot for India shows an upward trend in life expectancy and HALE metrics. Life expectancy at birth increased from 67.2 years in 2010 to 70.8 years in 2019. HALE at birth also rose from 57.3 years to 60.3 years, while HALE at age 60 improved from 12.6 years to 13.2 years. This indicates a general enhancement in health and longevity over the years."
    ),
  },

  # ==========================================================
  # United States of America
  # ==========================================================
  Country.USA: {
    ChartKind.BAR: (
      "The bar chart for the USA highlights high life expectancy at birth and at age 60, though disparities in HALE suggest areas for improvement in healthcare equity."
    ),
    ChartKind.LINE: (
      "The line chart for the USA depicts stable life expectancy trends, with recent years showing slight improvements in HALE, reflecting ongoing healthcare advancements."
    ),
    ChartKind.PIE: (
      "In the USA's pie chart, life expectancy at birth occupies a major portion, showcasing the country's high standard of living and healthcare facilities."
    ),
    ChartKind.SCATTER: (
      "The scatter plot for the USA illustrates a consistent trend of high life expectancy and HALE, demonstrating the effectiveness of the nation's health policies."
    ),
  },
}

ALL_COUNTRIES_STORIES = {
  ChartKind.BAR: (
    "The bar chart compares life expectancy and HALE metrics across different countries, illustrating variations in health outcomes and quality of life on a global scale."
  ),
  ChartKind.LINE: (
    "The line chart showcases trends in life expectancy and HALE for multiple countries, highlighting how different nations have improved over time."
  ),
  ChartKind.PIE: (
    "The pie chart presents the distribution of life expectancy and HALE metrics among various countries, providing a visual comparison of health standards worldwide."
  ),
  ChartKind.SCATTER: (
    "The scatter plot demonstrates the relationship between life expectancy and HALE across countries, revealing patterns and disparities in global health data."
  ),
}


def get_story(selection: Selection, chart_type: Union[ChartKind, str]) -> str:
    """
    Narrative text for a (country or ALL_COUNTRIES, chart type) pair.
    Total over any input: an unknown country is reported before an unknown chart type.
    """
    if selection == ALL_COUNTRIES:
        table = ALL_COUNTRIES_STORIES
    else:
        try:
            table = STORIES[Country(selection)]
        except ValueError:
            return NO_STORY_FOR_COUNTRY

    try:
        return table[ChartKind(chart_type)]
    except ValueError:
        return NO_STORY_FOR_CHART
