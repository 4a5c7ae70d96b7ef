"""Persistence helpers (encode/decode/load/save) for planner state.

Two named entries live in the key-value store:

- ``SavedTasks``: JSON array of task records (camelCase field names).
- ``SavedBirthday``: JSON string holding an ISO date.

Older saves may lack fields added later (``key``, ``notes``,
``isWorkInProgress``); those default sensibly. Saves written by the mobile
app encode the birthday as seconds since 2001-01-01 UTC; that is still read.
"""
from __future__ import annotations
import json
import logging
from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, List, Mapping, Optional

from catalog import entry_for
from errors import DecodeFailure
from kvstore import KeyValueStore
from models import Category, Task, TaskStatus, new_task_id
from translations import find_key

TASKS_KEY = 'SavedTasks'
BIRTHDAY_KEY = 'SavedBirthday'

# 2001-01-01T00:00:00Z, the reference date of the mobile app's timestamps
REFERENCE_EPOCH = datetime(2001, 1, 1, tzinfo=timezone.utc)

# legacy / alternate spellings seen in saved data
STATUS_ALIASES: Dict[str, TaskStatus] = {
    'notStarted': TaskStatus.NOT_STARTED,
    'inProgress': TaskStatus.IN_PROGRESS,
    'completed': TaskStatus.COMPLETED,
}

TaskRecord = Dict[str, Any]

logger = logging.getLogger(__name__)


def task_to_record(task: Task) -> TaskRecord:
    return {
        'id': task.id,
        'key': task.key,
        'title': task.title,
        'description': task.description,
        'category': task.category.value,
        'startAge': task.start_age,
        'endAge': task.end_age,
        'status': task.status.value,
        'isWorkInProgress': task.is_work_in_progress,
        'notes': task.notes,
    }


def _parse_status(raw: Any) -> TaskStatus:
    if raw is None:
        return TaskStatus.NOT_STARTED
    if isinstance(raw, str) and raw in STATUS_ALIASES:
        return STATUS_ALIASES[raw]
    try:
        return TaskStatus(raw)
    except (TypeError, ValueError):
        raise DecodeFailure(f'Unknown status: {raw!r}') from None


def task_from_record(raw: Mapping[str, Any]) -> Task:
    """Build a Task from a saved record, filling in missing optional fields."""
    if not isinstance(raw, Mapping):
        raise DecodeFailure(f'Task record must be an object, got {type(raw).__name__}')
    title = raw.get('title')
    key = raw.get('key') or find_key(str(title or ''))
    if key and not isinstance(key, str):
        raise DecodeFailure(f'Task key must be a string, got {key!r}')
    if not key:
        raise DecodeFailure(f'Task record has no recognizable key or title: {title!r}')
    if 'key' not in raw:
        logger.debug("Migrated record without key: %r -> %s", title, key)
    entry = entry_for(key)

    raw_category = raw.get('category')
    try:
        category = Category(raw_category)
    except (TypeError, ValueError):
        if entry is None:
            raise DecodeFailure(f'Unknown category: {raw_category!r}') from None
        category = entry.category

    try:
        start_age = int(raw['startAge']) if 'startAge' in raw else entry.start_age  # type: ignore[union-attr]
        end_age = int(raw['endAge']) if 'endAge' in raw else entry.end_age  # type: ignore[union-attr]
    except (TypeError, ValueError, OverflowError, AttributeError):
        raise DecodeFailure(f'Bad age range in record for {key!r}') from None

    return Task(
        id=str(raw.get('id') or new_task_id()),
        key=str(key),
        title=str(title if title is not None else (entry.title if entry else key)),
        description=str(raw.get('description') or ''),
        category=category,
        start_age=start_age,
        end_age=end_age,
        status=_parse_status(raw.get('status')),
        # only a real JSON boolean counts; "false" or 1 read as False
        is_work_in_progress=raw.get('isWorkInProgress') is True,
        notes=str(raw.get('notes') or ''),
    )


def encode_tasks(tasks: List[Task]) -> bytes:
    return json.dumps([task_to_record(t) for t in tasks], indent=2, ensure_ascii=False).encode('utf-8')


def decode_tasks(data: bytes) -> List[Task]:
    try:
        records = json.loads(data.decode('utf-8'))
    except (UnicodeDecodeError, ValueError) as exc:
        raise DecodeFailure(f'{TASKS_KEY} is not valid JSON: {exc}') from exc
    if not isinstance(records, list):
        raise DecodeFailure(f'{TASKS_KEY} must be a JSON array')
    return [task_from_record(r) for r in records]


def encode_birthdate(value: date) -> bytes:
    return json.dumps(value.isoformat()).encode('utf-8')


def decode_birthdate(data: bytes) -> date:
    try:
        raw = json.loads(data.decode('utf-8'))
    except (UnicodeDecodeError, ValueError) as exc:
        raise DecodeFailure(f'{BIRTHDAY_KEY} is not valid JSON: {exc}') from exc
    if isinstance(raw, bool):
        raise DecodeFailure(f'{BIRTHDAY_KEY} must be a date, got {raw!r}')
    if isinstance(raw, (int, float)):
        try:
            return (REFERENCE_EPOCH + timedelta(seconds=raw)).date()
        except (OverflowError, ValueError):
            raise DecodeFailure(f'{BIRTHDAY_KEY} timestamp out of range: {raw!r}') from None
    if isinstance(raw, str):
        try:
            return datetime.fromisoformat(raw).date()
        except ValueError:
            raise DecodeFailure(f'{BIRTHDAY_KEY} is not an ISO date: {raw!r}') from None
    raise DecodeFailure(f'{BIRTHDAY_KEY} must be a date, got {raw!r}')


class Storage:
    """Reads and writes planner state through a key-value store."""

    def __init__(self, kv: KeyValueStore):
        self.kv = kv

    def load_tasks(self) -> Optional[List[Task]]:
        """Return saved tasks, or None if nothing was saved.

        Raises DecodeFailure if the saved bytes are malformed.
        """
        data = self.kv.get(TASKS_KEY)
        if data is None:
            return None
        return decode_tasks(data)

    def save_tasks(self, tasks: List[Task]) -> None:
        self.kv.set(TASKS_KEY, encode_tasks(tasks))

    def clear_tasks(self) -> None:
        self.kv.delete(TASKS_KEY)

    def load_birthdate(self) -> Optional[date]:
        data = self.kv.get(BIRTHDAY_KEY)
        if data is None:
            return None
        return decode_birthdate(data)

    def save_birthdate(self, value: date) -> None:
        self.kv.set(BIRTHDAY_KEY, encode_birthdate(value))
