from __future__ import annotations

from datetime import datetime

import streamlit as st
from components.state import save_blueprint, workspace

from blueprint.loaders import UPLOAD_TYPES, decode_upload
from common.config import yaml_config


def _on_ir_change():
    workspace().update_ir(st.session_state.ir_raw)
    save_blueprint()


def _on_kcs_change():
    workspace().update_kcs(st.session_state.kcs_raw)
    save_blueprint()


def _on_chunk_size_change():
    workspace().set_chunk_size(st.session_state.chunk_size)
    save_blueprint()


def _on_format_change():
    workspace().set_format(st.session_state.kcs_format)
    save_blueprint()


def render_blueprint_section():
    ws = workspace()
    bp = ws.blueprint
    cfg = yaml_config.blueprint

    st.subheader("Gemini / Custom GPT Blueprint")
    st.caption("Capture persona and knowledge in structured formats ready for deployable AI agents.")

    # --- Instructional Ruleset ---
    st.text_area(
        "Instructional Ruleset (IR) · auto-converted to Markdown",
        value=bp.ir_raw,
        key="ir_raw",
        height=220,
        on_change=_on_ir_change,
        placeholder="Define the model persona, communication patterns, guardrails, and decision loops.",
    )
    with st.expander("Markdown preview", expanded=bool(bp.ir_markdown)):
        st.code(bp.ir_markdown or "", language="markdown")

    # --- Knowledge Compendium ---
    st.text_area(
        "Knowledge Compendium Synthesis (KCS) · chunked with metadata",
        value=bp.kcs_raw,
        key="kcs_raw",
        height=220,
        on_change=_on_kcs_change,
        placeholder="Paste research, system facts, domain briefs, or structured notes.",
    )
    c1, c2 = st.columns(2)
    c1.number_input(
        "Chunk size",
        min_value=cfg.min_chunk_size,
        max_value=cfg.max_chunk_size,
        step=cfg.chunk_size_step,
        value=ws.coerce_chunk_size(bp.chunk_size),
        key="chunk_size",
        on_change=_on_chunk_size_change,
    )
    c2.selectbox(
        "Export as",
        ["json", "jsonl"],
        index=["json", "jsonl"].index(bp.kcs_format),
        key="kcs_format",
        on_change=_on_format_change,
    )

    chunks = ws.chunks
    st.caption(f"{len(chunks)} chunks · avg {ws.average_tokens()} tokens")
    st.code(ws.chunk_summary() or "", language="text")

    # --- Actions ---
    a1, a2, a3 = st.columns(3)
    if a1.button("Snapshot Blueprint", type="primary"):
        ws.snapshot()
        save_blueprint()
        st.rerun()

    ir_artifact = ws.export_ir()
    a2.download_button(
        "Export IR Markdown",
        data=ir_artifact.to_bytes() if ir_artifact else b"",
        file_name=ir_artifact.filename if ir_artifact else cfg.ir_filename,
        mime=ir_artifact.media_type if ir_artifact else "text/markdown",
        disabled=ir_artifact is None,
    )
    kcs_artifact = ws.export_kcs()
    a3.download_button(
        f"Export KCS {bp.kcs_format.upper()}",
        data=kcs_artifact.to_bytes() if kcs_artifact else b"",
        file_name=kcs_artifact.filename if kcs_artifact else f"{cfg.kcs_basename}.{bp.kcs_format}",
        mime="application/json",
        disabled=kcs_artifact is None,
    )

    # --- Upload ---
    target = st.radio("Upload to", ["ir", "kcs"], horizontal=True, format_func=str.upper)
    uploaded = st.file_uploader("Upload file", type=[ext.lstrip(".") for ext in UPLOAD_TYPES])
    upload_id = (uploaded.name, uploaded.size) if uploaded is not None else None
    if upload_id is not None and st.session_state.get("last_upload") != upload_id:
        st.session_state.last_upload = upload_id
        text = decode_upload(uploaded.name, uploaded.getvalue())
        if text is None:
            st.error(f"Unsupported file: {uploaded.name}")
        else:
            ws.append_upload(target, text)
            save_blueprint()
            st.session_state.pop("ir_raw" if target == "ir" else "kcs_raw", None)
            st.rerun()

    if bp.last_updated:
        stamp = datetime.fromisoformat(bp.last_updated.replace("Z", "+00:00"))
        st.caption(f"Last snapshot {stamp.astimezone():%Y-%m-%d %H:%M:%S}")
