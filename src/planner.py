"""Planner: holds the task list and the child's birthdate, applies mutations.

Every mutation is written through to storage immediately. Storage failures
are logged and otherwise ignored so the in-memory state stays authoritative
for the session. The display language is plain instance state; task titles
and descriptions are always re-derived from the canonical task key.
"""
from __future__ import annotations
import logging
from datetime import date
from typing import Callable, Dict, List, Optional, Set

from catalog import CATALOG, create_initial_tasks, entry_for, tasks_in_category
from errors import DecodeFailure, InvalidDateError, TaskNotFoundError
from models import Category, Language, Task, TaskStatus
from storage import Storage
from translations import resolve

DEFAULT_AGE = 12

logger = logging.getLogger(__name__)


def years_before(day: date, years: int) -> date:
    """Same calendar day ``years`` earlier (Feb 29 falls back to Feb 28)."""
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        return day.replace(year=day.year - years, day=28)


def age_on(birthdate: date, today: date) -> int:
    """Full calendar years between ``birthdate`` and ``today`` (never negative)."""
    years = today.year - birthdate.year
    if (today.month, today.day) < (birthdate.month, birthdate.day):
        years -= 1
    return max(years, 0)


class Planner:
    def __init__(self, storage: Storage, language: Language = Language.ENGLISH,
                 today: Callable[[], date] = date.today):
        self.storage = storage
        self._today = today
        self._language: Language = language
        self._tasks: List[Task] = create_initial_tasks(language)
        self._birthdate: date = years_before(today(), DEFAULT_AGE)

    # -------------------- loading --------------------
    def initialize(self) -> None:
        """Load saved state, falling back to catalog defaults."""
        saved: Optional[List[Task]] = None
        try:
            saved = self.storage.load_tasks()
        except (DecodeFailure, OSError) as exc:
            logger.warning("Saved tasks unreadable (%s); reseeding from catalog", exc)
        if saved is None:
            self._tasks = create_initial_tasks(self._language)
            logger.info("Seeded %d tasks from catalog", len(self._tasks))
        else:
            self._tasks = self._reconcile(saved)
            logger.info("Loaded %d saved tasks", len(self._tasks))

        birthdate: Optional[date] = None
        try:
            birthdate = self.storage.load_birthdate()
        except (DecodeFailure, OSError) as exc:
            logger.warning("Saved birthday unreadable (%s); using default", exc)
        self._birthdate = birthdate or years_before(self._today(), DEFAULT_AGE)
        self.update_task_statuses()

    def _reconcile(self, saved: List[Task]) -> List[Task]:
        """One task per catalog entry, in catalog order.

        Saved text and user state are kept as they are; category and age
        interval always come from the catalog.
        """
        by_key: Dict[str, Task] = {}
        seen_ids: Set[str] = set()
        for task in saved:
            entry = entry_for(task.key)
            if entry is None:
                logger.warning("Dropping saved task with unknown key %r", task.key)
                continue
            if task.key in by_key or task.id in seen_ids:
                logger.warning("Dropping duplicate saved task %r", task.key)
                continue
            task.category = entry.category
            task.start_age = entry.start_age
            task.end_age = entry.end_age
            by_key[task.key] = task
            seen_ids.add(task.id)
        fresh = {t.key: t for t in create_initial_tasks(self._language)}
        missing = [e.key for e in CATALOG if e.key not in by_key]
        if missing:
            logger.info("Adding %d catalog tasks missing from saved data", len(missing))
        return [by_key.get(e.key) or fresh[e.key] for e in CATALOG]

    # -------------------- persistence --------------------
    def _save_tasks(self) -> None:
        try:
            self.storage.save_tasks(self._tasks)
        except OSError as exc:
            logger.warning("Could not save tasks: %s", exc)

    def _save_birthdate(self) -> None:
        try:
            self.storage.save_birthdate(self._birthdate)
        except OSError as exc:
            logger.warning("Could not save birthday: %s", exc)

    # -------------------- queries --------------------
    @property
    def tasks(self) -> List[Task]:
        return list(self._tasks)

    @property
    def language(self) -> Language:
        return self._language

    @property
    def birthdate(self) -> date:
        return self._birthdate

    @property
    def current_age(self) -> int:
        return age_on(self._birthdate, self._today())

    def get(self, task_id: str) -> Task:
        for task in self._tasks:
            if task.id == task_id:
                return task
        raise TaskNotFoundError(task_id)

    def tasks_in_category(self, category: Category) -> List[Task]:
        return tasks_in_category(self._tasks, category)

    def is_applicable(self, task: Task) -> bool:
        return task.start_age <= self.current_age <= task.end_age

    def age_window(self, task: Task) -> str:
        """'upcoming', 'current' or 'past' relative to the child's age."""
        age = self.current_age
        if age < task.start_age:
            return 'upcoming'
        if age > task.end_age:
            return 'past'
        return 'current'

    def progress(self) -> Dict[TaskStatus, int]:
        counts = {s: 0 for s in TaskStatus}
        for task in self._tasks:
            counts[task.status] += 1
        return counts

    # -------------------- settings --------------------
    def set_birthdate(self, value: date) -> None:
        if value > self._today():
            raise InvalidDateError(f'Birthday {value.isoformat()} is in the future.')
        self._birthdate = value
        logger.debug("Birthday set to %s (age %d)", value.isoformat(), self.current_age)
        self.update_task_statuses()
        self._save_birthdate()

    def set_language(self, language: Language) -> None:
        self._language = language
        for task in self._tasks:
            task.title, task.description = resolve(task.key, language, task.description)
        logger.debug("Language set to %s", language.value)
        self._save_tasks()

    # -------------------- task operations --------------------
    def update_status(self, task_id: str, new_status: TaskStatus) -> None:
        task = self.get(task_id)
        task.status = TaskStatus(new_status)
        logger.debug("Task %s status -> %s", task.key, task.status.value)
        self._save_tasks()

    def update_notes(self, task_id: str, notes: str) -> None:
        task = self.get(task_id)
        task.notes = notes
        self._save_tasks()

    def set_work_in_progress(self, task_id: str, value: Optional[bool] = None) -> None:
        """Set the flag, or toggle it when ``value`` is None."""
        task = self.get(task_id)
        task.is_work_in_progress = (not task.is_work_in_progress) if value is None else bool(value)
        logger.debug("Task %s work-in-progress -> %s", task.key, task.is_work_in_progress)
        self._save_tasks()

    def reset_to_default(self) -> None:
        """Reseed from the catalog and drop saved task state (birthday is kept)."""
        self._tasks = create_initial_tasks(self._language)
        try:
            self.storage.clear_tasks()
        except OSError as exc:
            logger.warning("Could not clear saved tasks: %s", exc)
        logger.info("Tasks reset to defaults")

    def update_task_statuses(self) -> None:
        """Re-assert Not Started for tasks the child is too young for.

        Only tasks already Not Started are touched, so this never downgrades
        In Progress or Completed work.
        """
        age = self.current_age
        for task in self._tasks:
            if age < task.start_age and task.status == TaskStatus.NOT_STARTED:
                task.status = TaskStatus.NOT_STARTED

    def __str__(self) -> str:
        counts = self.progress()
        return (f'Not Started: {counts[TaskStatus.NOT_STARTED]} tasks, '
                f'In Progress: {counts[TaskStatus.IN_PROGRESS]} tasks, '
                f'Completed: {counts[TaskStatus.COMPLETED]} tasks')
