from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Literal, Optional, Tuple

from blueprint.hash_utils import random_id

TaskStatus = Literal["pending", "in-progress", "complete"]
TASK_STATUSES: Tuple[str, ...] = ("pending", "in-progress", "complete")


@dataclass(frozen=True)
class Task:
    id: str
    title: str
    urgent: bool
    important: bool
    created_at: str  # ISO-8601
    status: TaskStatus = "pending"
    notes: Optional[str] = None
    due_date: Optional[str] = None  # YYYY-MM-DD

    def to_record(self) -> Dict[str, Any]:
        record: Dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "urgent": self.urgent,
            "important": self.important,
            "createdAt": self.created_at,
            "status": self.status,
        }
        if self.notes is not None:
            record["notes"] = self.notes
        if self.due_date is not None:
            record["dueDate"] = self.due_date
        return record

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Task":
        status = record.get("status", "pending")
        if status not in TASK_STATUSES:
            raise ValueError(f"Unknown task status: {status!r}")
        return cls(
            id=str(record["id"]),
            title=str(record["title"]),
            urgent=bool(record.get("urgent", False)),
            important=bool(record.get("important", False)),
            created_at=str(record["createdAt"]),
            status=status,
            notes=record.get("notes"),
            due_date=record.get("dueDate"),
        )


def new_task(
    title: str,
    *,
    notes: Optional[str] = None,
    due_date: Optional[str] = None,
    urgent: bool = False,
    important: bool = False,
) -> Task:
    """Create a pending task with a fresh id. Blank notes/due dates are dropped."""
    return Task(
        id=random_id(),
        title=title.strip(),
        urgent=urgent,
        important=important,
        created_at=datetime.now(timezone.utc).isoformat(),
        notes=(notes or "").strip() or None,
        due_date=due_date or None,
    )
