from __future__ import annotations

from dataclasses import replace
from typing import List, Optional

from common.config import yaml_config
from common.logger import get_logger
from persistence.local_store import KeyValueStore, PersistentState
from tasks.models import Task

log = get_logger(__name__)


def tasks_state(store: KeyValueStore, key: Optional[str] = None) -> PersistentState[List[Task]]:
    return PersistentState(
        store,
        key or yaml_config.storage.tasks_key,
        default=list,
        serializer=lambda tasks: [t.to_record() for t in tasks],
        deserializer=lambda raw: [Task.from_record(r) for r in raw],
    )


class TaskBoard:
    def __init__(self, state: Optional[PersistentState[List[Task]]] = None):
        """
        Task list backing the priority matrix. With a `state`, tasks are
        loaded once on construction and saved after every change.
        """
        self.state = state
        self._tasks: List[Task] = state.load() if state else []

    @property
    def tasks(self) -> List[Task]:
        return list(self._tasks)

    def _commit(self, tasks: List[Task]) -> None:
        self._tasks = tasks
        if self.state is not None:
            self.state.save(tasks)

    def get(self, task_id: str) -> Optional[Task]:
        return next((t for t in self._tasks if t.id == task_id), None)

    def add(self, task: Task) -> None:
        self._commit([task, *self._tasks])
        log.info("Added task %s", task.id)

    def update(self, updated: Task) -> None:
        self._commit([updated if t.id == updated.id else t for t in self._tasks])

    def remove(self, task_id: str) -> None:
        self._commit([t for t in self._tasks if t.id != task_id])
        log.info("Removed task %s", task_id)

    def toggle_complete(self, task_id: str) -> None:
        task = self.get(task_id)
        if task is None:
            return
        status = "pending" if task.status == "complete" else "complete"
        self.update(replace(task, status=status))

    def toggle_urgent(self, task_id: str) -> None:
        task = self.get(task_id)
        if task is not None:
            self.update(replace(task, urgent=not task.urgent))

    def toggle_important(self, task_id: str) -> None:
        task = self.get(task_id)
        if task is not None:
            self.update(replace(task, important=not task.important))
