from __future__ import annotations

import streamlit as st
from components.state import board

from tasks.matrix import QUADRANTS, format_due, group_by_quadrant, resolve_signals
from tasks.models import new_task


_FORM_DEFAULTS = {
    "task_title": "",
    "task_notes": "",
    "task_due": None,
    "task_urgent": "inferred",
    "task_important": "inferred",
}


def _add_task():
    s = st.session_state
    title = s.task_title
    if not title.strip():
        s.task_error = "A task needs a title."
        return
    signals = resolve_signals(f"{title}\n{s.task_notes}", s.task_urgent, s.task_important)
    board().add(
        new_task(
            title,
            notes=s.task_notes,
            due_date=s.task_due.isoformat() if s.task_due else None,
            urgent=signals.urgent,
            important=signals.important,
        )
    )
    # widget values may only be reset from a callback
    for key, value in _FORM_DEFAULTS.items():
        s[key] = value
    s.task_error = None


def render_task_form():
    st.subheader("Add a Task")
    st.caption("Urgency and importance are inferred from the text; adjust if needed.")

    title = st.text_input("Task title", key="task_title", placeholder="Summarize the task")
    notes = st.text_area(
        "Notes", key="task_notes", placeholder="Add context, expectations, or desired outcomes"
    )
    st.date_input("Due date", value=None, key="task_due")
    col_u, col_i = st.columns(2)
    urgent = col_u.selectbox("Urgent", ["inferred", "yes", "no"], key="task_urgent")
    important = col_i.selectbox("Important", ["inferred", "yes", "no"], key="task_important")

    if title or notes:
        signals = resolve_signals(f"{title}\n{notes}", urgent, important)
        st.caption(
            f"Priority: {'urgent' if signals.urgent else 'not urgent'} · "
            f"{'important' if signals.important else 'not important'}"
        )

    st.button("Add to Matrix", type="primary", on_click=_add_task, disabled=not title.strip())
    if st.session_state.get("task_error"):
        st.warning(st.session_state.task_error)


def render_matrix_section():
    st.subheader("Eisenhower Matrix")
    st.caption("Prioritize by urgency and importance to keep the main thing the main thing.")

    buckets = group_by_quadrant(board().tasks)
    keys = list(QUADRANTS)
    for row in (keys[:2], keys[2:]):
        for col, key in zip(st.columns(2), row):
            quadrant = QUADRANTS[key]
            tasks = buckets[key]
            with col.container(border=True):
                st.markdown(f"**{quadrant.title}** ({len(tasks)})")
                st.caption(quadrant.description)
                if not tasks:
                    st.caption("No tasks yet")
                for t in tasks:
                    _render_task(t)


def _render_task(task):
    done = task.status == "complete"
    st.markdown(f"~~{task.title}~~" if done else f"**{task.title}**")
    if task.notes:
        st.caption(task.notes)
    due = format_due(task.due_date)
    flags = f"{'Urgent' if task.urgent else 'Not urgent'} · {'Important' if task.important else 'Not important'}"
    st.caption(f"{flags} · Due {due}" if due else flags)

    b1, b2, b3, b4 = st.columns(4)
    if b1.button("Completed" if done else "Complete", key=f"done-{task.id}"):
        board().toggle_complete(task.id)
        st.rerun()
    if b2.button("Urgent ⇄", key=f"urg-{task.id}"):
        board().toggle_urgent(task.id)
        st.rerun()
    if b3.button("Important ⇄", key=f"imp-{task.id}"):
        board().toggle_important(task.id)
        st.rerun()
    if b4.button("✕", key=f"rm-{task.id}"):
        board().remove(task.id)
        st.rerun()
