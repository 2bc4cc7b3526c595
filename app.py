import logging

import streamlit as st

from app_pages.calculator import calculator_main
from app_pages.guide import guide_main
from config.settings import APP_TITLE
from logging_config import setup_logging

# =========================
# CONFIG
# =========================
st.set_page_config(page_title=APP_TITLE, page_icon="🧮", layout="centered")
setup_logging(level=logging.INFO)

PAGES = {
    "Calculator": calculator_main,
    "Guide": guide_main,
}

# =========================
# UI
# =========================
page = st.sidebar.radio("Page", list(PAGES.keys()), index=0)
PAGES[page]()
