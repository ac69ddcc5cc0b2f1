from __future__ import annotations

import streamlit as st

APP_CSS = r"""
@import url('https://fonts.googleapis.com/css2?family=IBM+Plex+Sans:wght@400;500;600&family=IBM+Plex+Mono:wght@400;500&display=swap');

html, body, [class*="st-"] {
  font-family: "IBM Plex Sans", ui-sans-serif, system-ui, -apple-system,
    BlinkMacSystemFont, "Segoe UI", sans-serif;
}

/* Settings panel: fixed width, dense rows */
[data-testid="stSidebar"] {
  min-width: 325px;
  max-width: 325px;
  border-right: 1px solid rgba(17, 24, 39, 0.08);
}

[data-testid="stSidebar"] [data-testid="stVerticalBlock"] {
  gap: 0.35rem;
}

/* Reset buttons sit beside their widget */
[data-testid="stSidebar"] [data-testid="stButton"] button {
  padding: 0.1rem 0.45rem !important;
  min-height: 0 !important;
}

/* Nearest-neighbour scaling keeps noise pixels crisp */
[data-testid="stImage"] img {
  image-rendering: pixelated;
}

.nf-elapsed, .nf-version {
  font-family: "IBM Plex Mono", ui-monospace, monospace;
  font-size: 0.8rem;
  opacity: 0.75;
}

.nf-version {
  position: fixed;
  right: 8px;
  bottom: 6px;
}
"""


def inject_global_styles() -> None:
    st.markdown(f"<style>{APP_CSS}</style>", unsafe_allow_html=True)
