from __future__ import annotations

import streamlit as st
from components.blueprint_section import render_blueprint_section
from components.matrix_section import render_matrix_section, render_task_form
from components.state import init_session

from common.config import yaml_config

st.set_page_config(page_title=yaml_config.app.title, layout="wide")

st.markdown(
    """
    <style>
    .big-title { font-size:2rem; font-weight:700; margin-bottom:1rem; }
    </style>
    """,
    unsafe_allow_html=True,
)

st.markdown(
    "<p class='big-title'>Task flow + AI blueprinting in one command center</p>",
    unsafe_allow_html=True,
)
st.caption("Agent Alignment Board | Local & Private")

# --- Ready gate: nothing renders until persisted state is loaded ---
with st.spinner("Loading your workspace…"):
    init_session()

# --- Sidebar ---
st.sidebar.title("Workspace")
st.sidebar.metric("Focus Zones", 4)
st.sidebar.metric("Blueprint Slots", 2)
st.sidebar.metric("Local Save", "Auto")
st.sidebar.divider()
st.sidebar.caption(f"Default chunk size: {yaml_config.blueprint.chunk_size}")

# --- Tabs ---
tab_matrix, tab_blueprint = st.tabs(["🗂 Priority Matrix", "🧬 Blueprint"])

with tab_matrix:
    render_task_form()
    render_matrix_section()

with tab_blueprint:
    render_blueprint_section()
