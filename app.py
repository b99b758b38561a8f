import logging

import streamlit as st
from st_aggrid import AgGrid

from lifedash.assets import background_css, load_css
from lifedash.charts import CHART_KINDS, build_chart, to_figure
from lifedash.config import (
    APP_TITLE,
    BACKGROUND_IMAGE,
    COLOR_BG,
    COLOR_TEXT,
    PAGE_LAYOUT,
    STYLES_CSS,
)
from lifedash.content import about_markdown
from lifedash.dataset import ALL_COUNTRIES, COUNTRIES, UnknownSelectionError, dataset_frame
from lifedash.state import DashboardState, Screen
from lifedash.stories import get_story

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("lifedash.app")

# --------------------------------------------------
# Page Config
# --------------------------------------------------
st.set_page_config(
    page_title=APP_TITLE,
    layout=PAGE_LAYOUT,
    initial_sidebar_state="collapsed"
)

# --------------------------------------------------
# Session State
# --------------------------------------------------
if "dashboard" not in st.session_state:
    st.session_state.dashboard = DashboardState()

state: DashboardState = st.session_state.dashboard

COUNTRY_OPTIONS = [c.value for c in COUNTRIES] + [ALL_COUNTRIES]

# --------------------------------------------------
# CSS
# --------------------------------------------------
ABOUT_MARKER = "about-screen-marker"

@st.cache_data
def build_css() -> str:
    base = f"""
    .{ABOUT_MARKER} {{ display:none; }}
    .section-card-marker {{ display:none; }}

    div[data-testid="stVerticalBlock"]:has(.section-card-marker) {{
        background: #ffffff;
        padding: 26px;
        border-radius: 6px;
        border: 1px solid #e1e4e8;
        margin-bottom: 22px;
    }}

    div[data-testid="stVerticalBlock"]:has(.{ABOUT_MARKER}) {{
        background-color: {COLOR_BG};
        padding: 32px;
        border-radius: 6px;
    }}

    .story {{
        font-family: system-ui, -apple-system, Segoe UI, Roboto, Helvetica, Arial;
        font-size: 1.05rem;
        line-height: 1.65;
        color: {COLOR_TEXT};
        padding: 6px 0;
    }}
    """
    background = background_css(
        BACKGROUND_IMAGE,
        selector=f'div[data-testid="stVerticalBlock"]:has(.{ABOUT_MARKER})',
    )
    return "\n".join([load_css(STYLES_CSS), base, background])

st.markdown(f"<style>{build_css()}</style>", unsafe_allow_html=True)

# --------------------------------------------------
# Callbacks
# --------------------------------------------------
def on_country_change():
    try:
        state.select_country(st.session_state.country_select)
    except UnknownSelectionError as exc:
        logger.error("Rejected country selection: %s", exc)

def on_show(screen: Screen):
    state.show_screen(screen)

def on_chart(kind):
    state.select_chart(kind)

# --------------------------------------------------
# About Screen
# --------------------------------------------------
def render_about():
    with st.container():
        st.markdown(f'<span class="{ABOUT_MARKER}"></span>', unsafe_allow_html=True)
        st.markdown(f"# {APP_TITLE}")
        st.markdown(about_markdown())
        st.button(
            "View Dashboard",
            on_click=on_show,
            args=(Screen.DASHBOARD,),
            type="primary",
            use_container_width=True,
        )

# --------------------------------------------------
# Dashboard Screen
# --------------------------------------------------
def render_controls():
    cols = st.columns([2, 1, 1, 1, 1, 1, 1])

    with cols[0]:
        st.selectbox(
            "Country",
            options=COUNTRY_OPTIONS,
            index=COUNTRY_OPTIONS.index(state.country_label),
            key="country_select",
            on_change=on_country_change,
            label_visibility="collapsed",
        )

    for col, kind in zip(cols[1:5], CHART_KINDS):
        with col:
            st.button(
                kind.value,
                on_click=on_chart,
                args=(kind,),
                type="primary" if state.chart is kind else "secondary",
                use_container_width=True,
            )

    with cols[5]:
        st.button(
            "Hide Dataset" if state.show_dataset else "View Dataset",
            on_click=state.toggle_dataset,
            use_container_width=True,
        )

    with cols[6]:
        st.button("About", on_click=on_show, args=(Screen.ABOUT,), use_container_width=True)


def render_visualization():
    try:
        spec = build_chart(state.country, state.chart)
    except UnknownSelectionError as exc:
        st.error(f"Unknown selection: {exc}")
        return

    col_chart, col_story = st.columns([2.2, 1])
    with col_chart:
        st.plotly_chart(to_figure(spec), use_container_width=True)
    with col_story:
        st.markdown(
            f'<div class="story">{get_story(state.country, state.chart)}</div>',
            unsafe_allow_html=True,
        )


def render_dataset():
    with st.container():
        st.markdown('<span class="section-card-marker"></span>', unsafe_allow_html=True)

        col_title, col_export = st.columns([3, 1])
        with col_title:
            st.markdown("### Life Expectancy Dataset")

        df = dataset_frame()
        with col_export:
            st.download_button(
                label="Download Dataset (CSV)",
                data=df.to_csv(index=False).encode("utf-8"),
                file_name="life_expectancy_dataset.csv",
                mime="text/csv",
                use_container_width=True
            )

        AgGrid(df, fit_columns_on_grid_load=True)


def render_dashboard():
    render_controls()
    render_visualization()
    if state.show_dataset:
        render_dataset()

# --------------------------------------------------
# Screen switch
# --------------------------------------------------
if state.screen is Screen.DASHBOARD:
    render_dashboard()
else:
    render_about()
