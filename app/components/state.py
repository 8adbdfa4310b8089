from __future__ import annotations

import streamlit as st

from blueprint.workspace import BlueprintWorkspace, blueprint_state
from common.settings import settings
from persistence.local_store import JsonFileStore, PersistentState
from tasks.board import TaskBoard, tasks_state


def init_session() -> None:
    """Load persisted tasks and blueprint once per browser session."""
    if st.session_state.get("ready"):
        return
    store = JsonFileStore(settings.state_dir)
    bp_state = blueprint_state(store)
    st.session_state.blueprint_state = bp_state
    st.session_state.workspace = BlueprintWorkspace(bp_state.load())
    st.session_state.board = TaskBoard(tasks_state(store))
    st.session_state.ready = True


def workspace() -> BlueprintWorkspace:
    return st.session_state.workspace


def board() -> TaskBoard:
    return st.session_state.board


def save_blueprint() -> None:
    state: PersistentState = st.session_state.blueprint_state
    state.save(workspace().blueprint)
