"""Armreif — Streamlit app converting bracelet sundial readings to true clock time."""

import datetime
import html
import os

import streamlit as st
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from armreif.bracelet import position_to_read_time  # noqa: E402
from armreif.compute import ReadingError, convert_with_config, correction_curve  # noqa: E402
from armreif.config import ConfigError, configure_logging, load_config  # noqa: E402
from armreif.i18n import t  # noqa: E402
from armreif.renderers.plotly_chart import (  # noqa: E402
    render_bracelet_strip,
    render_correction_curve,
)

configure_logging()

# --- Language detection (browser-first via streamlit-js-eval) ---
# On the first run the JS call returns None; the rerun triggered by
# streamlit_js_eval fills it in.
if "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = "de" if _browser_lang.lower().startswith("de") else "en"

_lang: str = st.session_state.get("lang", "de")

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="◐",
    layout="centered",
    initial_sidebar_state="collapsed",
)


@st.cache_resource
def _config():
    return load_config()


try:
    config = _config()
except ConfigError as e:
    st.error(str(e))
    st.stop()

# --- Session state initialization ---
if "screen" not in st.session_state:
    st.session_state.screen = "greeting"  # "greeting" | "converter"
if "knob" not in st.session_state:
    st.session_state.knob = 50.0
if "target_date" not in st.session_state:
    st.session_state.target_date = datetime.date.today()

_GREETING_NAME = os.environ.get("ARMREIF_GREETING_NAME", "Theresa")

# --- Neumorphic light theme CSS (static) ---
st.markdown(
    """
    <style>
    /* Hide streamlit_js_eval invisible iframe */
    iframe[src*="streamlit_js_eval"] { display: none !important; }
    html, body, [data-testid="stAppViewContainer"], [data-testid="stMain"] {
        background-color: #eef0f4 !important;
    }
    [data-testid="stHeader"], [data-testid="stToolbar"] {
        display: none !important;
    }
    .card {
        background: #eef0f4;
        border-radius: 18px;
        box-shadow: 8px 8px 16px #c8cbd2, -8px -8px 16px #ffffff;
        padding: 1.2rem 1.6rem;
        margin-bottom: 1rem;
        color: #2c3140;
    }
    .section-label {
        color: #7a8194;
        font-size: 0.8rem;
        letter-spacing: 0.08em;
        text-transform: uppercase;
        margin-bottom: 0.4rem;
    }
    .result-row { display: flex; justify-content: space-between; padding: 0.35rem 0; }
    .result-value { font-size: 1.4rem; font-weight: 600; }
    .positive { color: #3c8d5a; }
    .negative { color: #b4533c; }
    .muted { color: #9aa0ae; text-align: center; padding: 1rem 0; }
    .greeting-title { font-size: 2.6rem; font-weight: 300; text-align: center; margin-top: 18vh; }
    .greeting-sub { color: #7a8194; text-align: center; }
    </style>
    """,
    unsafe_allow_html=True,
)


def _format_date(d: datetime.date) -> str:
    return d.strftime("%d.%m.%Y") if _lang == "de" else d.isoformat()


# --- Greeting screen ---
if st.session_state.screen == "greeting":
    st.markdown(
        f"<div class='greeting-title'>"
        f"{html.escape(t('greeting_title', _lang).format(name=_GREETING_NAME))}</div>"
        f"<p class='greeting-sub'>"
        f"{t('greeting_date', _lang).format(date=_format_date(datetime.date.today()))}</p>",
        unsafe_allow_html=True,
    )
    _, col, _ = st.columns([1, 2, 1])
    with col:
        if st.button(t("btn_start", _lang), key="start_btn", use_container_width=True):
            st.session_state.screen = "converter"
            st.rerun()
    st.markdown(
        f"<p class='greeting-sub'>{t('greeting_hint', _lang)}</p>",
        unsafe_allow_html=True,
    )
    st.stop()

# --- Converter screen ---
head_col, back_col = st.columns([4, 1])
with head_col:
    st.subheader(t("page_title", _lang))
with back_col:
    if st.button(t("btn_back", _lang), key="back_btn"):
        st.session_state.screen = "greeting"
        st.rerun()

# Bracelet slider
st.markdown(
    f"<div class='section-label'>{t('label_bracelet', _lang)}</div>",
    unsafe_allow_html=True,
)
knob = st.slider(
    t("label_bracelet", _lang),
    min_value=0.0,
    max_value=100.0,
    step=0.1,
    key="knob",
    label_visibility="collapsed",
)
st.plotly_chart(
    render_bracelet_strip(config.anchors, config.image_width, knob),
    use_container_width=True,
    config={"displayModeBar": False, "staticPlot": True},
)
read_time = position_to_read_time(knob, config.anchors, config.image_width)
if read_time is None:
    st.caption(t("bracelet_hint", _lang))

# Date picker
target_date = st.date_input(t("label_date", _lang), key="target_date")

# --- Result ---
result = None
error_msg = None
if read_time is not None and target_date is not None:
    try:
        result = convert_with_config(read_time, target_date, config)
    except ReadingError as e:
        error_msg = t("error_input", _lang).format(error=html.escape(str(e)))

if error_msg:
    st.error(error_msg)
elif read_time is None:
    st.markdown(
        f"<div class='card muted'>{t('result_empty', _lang)}</div>",
        unsafe_allow_html=True,
    )
elif not result:
    st.markdown(
        f"<div class='card muted'>{t('result_none', _lang)}</div>",
        unsafe_allow_html=True,
    )
else:
    sign_class = "positive" if result.correction_minutes >= 0 else "negative"
    st.markdown(
        f"""
        <div class='card'>
          <div class='result-row'><span>{t('label_read', _lang)}</span>
            <span class='result-value'>{read_time}</span></div>
          <hr/>
          <div class='result-row'><span>{t('label_true', _lang)}</span>
            <span class='result-value'>{result.true_time_str}</span></div>
          <hr/>
          <div class='result-row'><span>{t('label_correction', _lang)}</span>
            <span class='result-value {sign_class}'>{result.correction_str}</span></div>
        </div>
        """,
        unsafe_allow_html=True,
    )

# --- Year curve ---
if read_time is not None and target_date is not None:
    with st.expander(t("label_year_curve", _lang)):
        points = correction_curve(read_time, target_date.year, config)
        st.plotly_chart(
            render_correction_curve(
                points,
                read_time,
                x_title=t("axis_day", _lang),
                y_title=t("axis_correction", _lang),
            ),
            use_container_width=True,
            config={"displayModeBar": False},
        )

# --- Info panel ---
with st.expander(t("label_info", _lang)):
    loc = config.location
    st.markdown(t("info_body", _lang))
    st.caption(
        t("info_reference", _lang).format(date=_format_date(config.reference_date))
        + "  \n"
        + t("info_location", _lang).format(
            lat=f"{abs(loc.latitude):.2f}°{'N' if loc.latitude >= 0 else 'S'}",
            lon=f"{abs(loc.longitude):.2f}°{'E' if loc.longitude >= 0 else 'W'}",
        )
    )
