from __future__ import annotations

import re
from typing import List

from blueprint.cleaners import normalize_text

_SECTION_BREAK = re.compile(r"\n{2,}")
_LEADING_HASHES = re.compile(r"^#+\s*")


def _lines(section: str) -> List[str]:
    return [line.strip() for line in section.split("\n") if line.strip()]


def _render_opening(lines: List[str]) -> str:
    # Persona / preamble: H1 title, narrative as blockquote
    heading = _LEADING_HASHES.sub("", lines[0])
    if len(lines) == 1:
        return f"# {heading}"
    quote = "\n".join(f"> {line}" for line in lines[1:])
    return f"# {heading}\n{quote}"


def _render_rule(lines: List[str]) -> str:
    if len(lines) == 1:
        return f"## {lines[0]}"
    bullets = "\n".join(f"- {line}" for line in lines[1:])
    return f"## {lines[0]}\n{bullets}"


def convert_ir_to_markdown(raw: str) -> str:
    """
    Structure an instructional ruleset as Markdown.

    Blank-line separated blocks become sections. The first block is the
    persona preamble (H1 plus blockquote); every later block is a rule
    (H2, plus bullets when it has more than one line).
    """
    trimmed = normalize_text(raw)
    if not trimmed:
        return ""

    rendered: List[str] = []
    for i, section in enumerate(_SECTION_BREAK.split(trimmed)):
        lines = _lines(section)
        if not lines:
            continue
        rendered.append(_render_opening(lines) if i == 0 else _render_rule(lines))
    return "\n\n".join(rendered)
