from __future__ import annotations

import logging
from typing import Any

import streamlit as st

from noisegrid.appconfig import AppConfig, load_app_config
from noisegrid.capabilities import kind_spec
from noisegrid.config import (
    DIMENSIONS,
    MAX_RESOLUTION,
    NOISE_KINDS,
    NoiseConfig,
    Settings,
    Viewport,
)
from noisegrid.logging_setup import setup_logging
from noisegrid.render import NoiseView
from noisegrid.settings import (
    FLOAT,
    INT,
    MAX_POSITIVE,
    MIN_POSITIVE,
    SELECT,
    SLIDER,
    TILE_LINKED,
    TOGGLE,
    FieldSpec,
    applicable_fields,
    field_spec,
    get_value,
    is_default,
)
from ui.styles import inject_global_styles
from viz.export import frame_to_image, image_to_png_bytes, tiles_preview, unsupported_overlay
from viz.figures import value_histogram

st.set_page_config(
    page_title="Noise Functions Demo",
    page_icon="~",
    layout="wide",
)

inject_global_styles()

logger = logging.getLogger("streamlit_app")


@st.cache_resource
def _app_config() -> AppConfig:
    config = load_app_config()
    setup_logging(config.debug)
    logger.info("starting noise demo %s (workers=%d)", config.version_label, config.workers)
    return config


APP_CONFIG = _app_config()


def _qp_get(name: str, default: str) -> str:
    try:
        raw = st.query_params.get(name)
    except Exception:
        raw = None

    if raw is None:
        return default
    if isinstance(raw, list):
        return str(raw[0]) if raw else default
    return str(raw)


def _qp_int(name: str, default: int, *, min_value: int, max_value: int) -> int:
    try:
        v = int(float(_qp_get(name, str(default))))
    except ValueError:
        v = default
    return max(min_value, min(max_value, v))


def _qp_float(name: str, default: float, *, min_value: float, max_value: float) -> float:
    try:
        v = float(_qp_get(name, str(default)))
    except ValueError:
        v = default
    return max(min_value, min(max_value, v))


def _initial_settings() -> Settings:
    """Defaults, overridden by shareable query parameters."""

    defaults = NoiseConfig()
    kind = _qp_get("type", defaults.kind)
    if kind not in NOISE_KINDS:
        kind = defaults.kind
    dimension = _qp_int("dim", 2, min_value=2, max_value=4)
    frequency = _qp_float(
        "frequency", defaults.frequency, min_value=MIN_POSITIVE, max_value=MAX_POSITIVE
    )

    return Settings(
        config=NoiseConfig(
            kind=kind,
            seed=_qp_int("seed", 0, min_value=-(2**31), max_value=2**31 - 1),
            frequency=frequency,
            tile_width=1.0 / frequency,
            tile_height=1.0 / frequency,
        ),
        viewport=Viewport(
            dimension=dimension if dimension in DIMENSIONS else 2,
            resolution=_qp_int("size", Viewport().resolution, min_value=0, max_value=MAX_RESOLUTION),
        ),
    )


def _view() -> NoiseView:
    if "noise_view" not in st.session_state:
        st.session_state["noise_view"] = NoiseView(_initial_settings(), app_config=APP_CONFIG)
        st.session_state["field_gen"] = {}
    return st.session_state["noise_view"]


def _widget_key(name: str) -> str:
    gen = int(st.session_state["field_gen"].get(name, 0))
    return f"field:{name}:{gen}"


def _refresh_widgets(*names: str) -> None:
    # A new key makes the widget pick up the value stored in the settings.
    gens = st.session_state["field_gen"]
    for name in names:
        gens[name] = int(gens.get(name, 0)) + 1


def _widget(spec: FieldSpec, current: Any) -> Any:
    key = _widget_key(spec.name)
    if spec.widget == SELECT:
        options = list(spec.options or {})
        return st.selectbox(
            spec.label,
            options,
            index=options.index(current),
            format_func=lambda k: (spec.options or {})[k],
            key=key,
            label_visibility="collapsed",
        )
    if spec.widget == TOGGLE:
        return st.checkbox(spec.label, value=bool(current), key=key, label_visibility="collapsed")
    if spec.widget == SLIDER:
        return st.slider(
            spec.label,
            min_value=float(spec.min_value or 0.0),
            max_value=float(spec.max_value or 1.0),
            value=float(current),
            step=float(spec.step or 0.01),
            key=key,
            label_visibility="collapsed",
        )
    if spec.widget == INT:
        return st.number_input(
            spec.label,
            min_value=None if spec.min_value is None else int(spec.min_value),
            max_value=None if spec.max_value is None else int(spec.max_value),
            value=int(current),
            step=int(spec.step or 1),
            key=key,
            label_visibility="collapsed",
        )
    if spec.widget == FLOAT:
        return st.number_input(
            spec.label,
            min_value=None if spec.min_value is None else float(spec.min_value),
            max_value=None if spec.max_value is None else float(spec.max_value),
            value=float(current),
            step=float(spec.step or 0.01),
            format="%.3f",
            key=key,
            label_visibility="collapsed",
        )
    raise ValueError(f"unknown widget kind: {spec.widget}")


def _linked(name: str) -> tuple[str, ...]:
    if name in TILE_LINKED or name == "link_tile_size_to_frequency":
        return TILE_LINKED
    return (name,)


def _setting_row(view: NoiseView, spec: FieldSpec) -> None:
    label_col, reset_col, widget_col = st.columns([4, 1, 6], vertical_alignment="center")
    label_col.markdown(spec.label)

    clicked = reset_col.button(
        "⟲",
        key=f"reset:{spec.name}",
        disabled=is_default(view.settings, spec.name),
        help="Reset to default",
    )
    if clicked and view.reset(spec.name):
        _refresh_widgets(*_linked(spec.name))
        st.rerun()

    with widget_col:
        value = _widget(spec, get_value(view.settings, spec))
    if view.set(spec.name, value):
        if view.settings.link_tile_size_to_frequency:
            _refresh_widgets(*[n for n in _linked(spec.name) if n != spec.name])
        st.rerun()


# Group breaks mirror the form sections: noise, fractal, sampling, view.
_SECTION_STARTS = {"fractal", "frequency", "resolution"}

view = _view()

with st.sidebar:
    st.header("Noise Functions Demo")
    for spec in applicable_fields(view.settings):
        if spec.name in _SECTION_STARTS:
            st.divider()
        _setting_row(view, spec)

frame = view.render()

with st.sidebar:
    st.divider()
    st.markdown(
        f'<div class="nf-elapsed">elapsed: {frame.elapsed * 1000.0:.2f} ms</div>',
        unsafe_allow_html=True,
    )

if frame.size == 0:
    st.info("Texture size is 0: nothing to sample.")
else:
    image = frame_to_image(frame.rgb)
    tiles_on = view.settings.show_tiles and field_spec("show_tiles").applicable(view.settings)
    if not frame.sample_success:
        image = unsupported_overlay(image, frame.message or "")
    elif tiles_on:
        image = tiles_preview(image)
    st.image(image, width=image.size[0])

    st.download_button(
        "Download PNG",
        data=image_to_png_bytes(image),
        file_name=f"{view.settings.config.kind}_{view.settings.config.seed}.png",
        mime="image/png",
    )

    with st.expander("Diagnostics"):
        spec = kind_spec(view.settings.config.kind)
        st.caption(
            f"family={spec.family}  dims={sorted(spec.dims)}  "
            f"precisions={sorted(spec.precisions)}  normalization={spec.policy}"
        )
        if frame.sample_success:
            st.plotly_chart(value_histogram(frame.values), use_container_width=True)

st.markdown(
    f'<div class="nf-version">{APP_CONFIG.version_label}</div>',
    unsafe_allow_html=True,
)
