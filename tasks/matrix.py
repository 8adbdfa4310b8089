from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Dict, Iterable, List, NamedTuple, Optional

from tasks.models import Task

URGENCY_KEYWORDS = ("today", "now", "asap", "urgent", "immediately", "soon", "deadline")
IMPORTANCE_KEYWORDS = ("strategy", "critical", "important", "impact", "key", "goal", "milestone")
_IMPORTANT_WORDS = re.compile(r"\b(okr|roadmap|research|customer)\b")


@dataclass(frozen=True)
class Quadrant:
    key: str
    title: str
    description: str
    urgent: bool
    important: bool


QUADRANTS: Dict[str, Quadrant] = {
    q.key: q
    for q in (
        Quadrant("do-now", "Do Now", "Critical and urgent. Ship or unblock immediately.", True, True),
        Quadrant("schedule", "Schedule", "Important but not urgent. Plan and protect time.", False, True),
        Quadrant("delegate", "Delegate", "Urgent but less impactful. Assign or automate.", True, False),
        Quadrant("eliminate", "Eliminate", "Neither urgent nor important. Drop or archive.", False, False),
    )
}


class Signals(NamedTuple):
    urgent: bool
    important: bool


def compute_quadrant(task: Task) -> str:
    if task.urgent and task.important:
        return "do-now"
    if task.important:
        return "schedule"
    if task.urgent:
        return "delegate"
    return "eliminate"


def group_by_quadrant(tasks: Iterable[Task]) -> Dict[str, List[Task]]:
    """Bucket tasks by quadrant; every quadrant is present, task order is kept."""
    buckets: Dict[str, List[Task]] = {key: [] for key in QUADRANTS}
    for t in tasks:
        buckets[compute_quadrant(t)].append(t)
    return buckets


def infer_signals(text: str) -> Signals:
    """
    Guess urgency/importance from free text by keyword substrings
    ("now" also matches "know").
    """
    normalized = text.lower()
    urgent = any(k in normalized for k in URGENCY_KEYWORDS)
    important = any(k in normalized for k in IMPORTANCE_KEYWORDS)
    return Signals(urgent, important or bool(_IMPORTANT_WORDS.search(normalized)))


def resolve_signals(text: str, urgent: str = "inferred", important: str = "inferred") -> Signals:
    """Apply manual "yes"/"no" overrides on top of the inferred signals."""
    inferred = infer_signals(text)
    return Signals(
        inferred.urgent if urgent == "inferred" else urgent == "yes",
        inferred.important if important == "inferred" else important == "yes",
    )


def format_due(due_date: Optional[str]) -> Optional[str]:
    """'2025-03-07' -> 'Mar 7'; unparseable dates yield None."""
    if not due_date:
        return None
    try:
        d = date.fromisoformat(due_date[:10])
    except ValueError:
        return None
    return f"{d:%b} {d.day}"
