from __future__ import annotations

import logging

import plotly.graph_objects as go
import streamlit as st

from config.instruments import Mode
from config.settings import APP_TITLE, APP_VERSION, STORAGE_PATH
from data.history import HistoryStore, history_frame
from data.storage import JsonFileStorage
from engine import CalculatorSession

logger = logging.getLogger(__name__)

SESSION_KEY = "calc_session"
CONFIRM_KEY = "confirm_clear"


def get_session() -> CalculatorSession:
    if SESSION_KEY not in st.session_state:
        store = HistoryStore(JsonFileStorage(STORAGE_PATH))
        st.session_state[SESSION_KEY] = CalculatorSession(store)
        logger.info("New calculator session (storage: %s)", STORAGE_PATH)
    return st.session_state[SESSION_KEY]


def _history_chart(sess: CalculatorSession) -> go.Figure:
    recs = list(reversed(sess.history))  # oldest -> newest, left to right
    fig = go.Figure(data=[go.Bar(
        x=[f"{r.created_at.astimezone():%H:%M:%S}" for r in recs],
        y=[r.result for r in recs],
        marker_color=["#4f46e5" if r.mode is Mode.SP1 else "#10b981" for r in recs],
        text=[r.mode.label for r in recs],
        hovertemplate="%{text}<br>%{y:.1f}<extra></extra>",
    )])
    fig.update_layout(height=220, margin=dict(l=10, r=10, t=10, b=10), showlegend=False)
    return fig


def _render_history(sess: CalculatorSession):
    if not sess.history:
        return

    c1, c2 = st.columns([3, 1])
    with c1:
        st.markdown("#### 🕘 Recent Activity")
    with c2:
        if st.button("Clear All", key="clear_all"):
            st.session_state[CONFIRM_KEY] = True

    if st.session_state.get(CONFIRM_KEY):
        st.warning("Clear all recent activity?")
        y, n = st.columns(2)
        if y.button("Yes, clear", type="primary"):
            sess.clear_history()
            st.session_state[CONFIRM_KEY] = False
            st.rerun()
        if n.button("Cancel"):
            st.session_state[CONFIRM_KEY] = False
            st.rerun()

    st.dataframe(history_frame(sess.history), width="stretch", hide_index=True)
    st.plotly_chart(_history_chart(sess), width="stretch")


def calculator_main():
    sess = get_session()

    st.title(APP_TITLE.upper())

    labels = [m.label for m in Mode]
    picked = st.radio("Mode", labels, index=labels.index(sess.mode.label), horizontal=True)
    if picked != sess.mode.label:
        sess.select_mode(Mode.from_label(picked))

    with st.form("calc_form", clear_on_submit=False):
        point_text = st.text_input("Point Input", value=sess.point_text, placeholder="0.00", help="PTS")
        submitted = st.form_submit_button("Calculate Result", width="stretch")

    if submitted:
        sess.set_point_text(point_text.strip())
        if sess.can_calculate and sess.calculate() is None:
            st.warning("Enter a non-zero number of points.")

    if sess.display_result is not None:
        st.subheader("Result")
        st.metric("Calculated Value", sess.display_result)
        if st.button("Copy to Clipboard"):
            text = sess.copy_last_result()
            # st.code renders its own copy-to-clipboard button
            st.code(text, language=None)
            st.toast("Copied!", icon="✅")
        else:
            sess.dismiss_copied()

    _render_history(sess)

    st.divider()
    st.caption(f"Trading System V{APP_VERSION}")
