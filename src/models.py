"""Data models for the transition planner.

Persisted enum values are the human-readable names ("Not Started",
"Adult Life") so saved files stay readable and match older saves. The
canonical task ``key`` is the language-independent identity; ``title`` and
``description`` only hold whatever text is currently displayed.
"""
from __future__ import annotations
import uuid
from dataclasses import dataclass, field
from enum import Enum


class Category(str, Enum):
    TRANSITION_PLANNING = "Transition Planning"
    EDUCATION_TRAINING = "Education and Training"
    ADULT_LIFE = "Adult Life"
    SELF_ADVOCACY = "Self-Advocacy"
    WORK_PREPARATION = "Work Preparation"

    @property
    def color(self) -> str:
        return CATEGORY_COLORS[self]

    @property
    def icon(self) -> str:
        return CATEGORY_ICONS[self]


CATEGORY_COLORS = {
    Category.TRANSITION_PLANNING: '#34C759',  # green
    Category.EDUCATION_TRAINING: '#007AFF',  # blue
    Category.ADULT_LIFE: '#FF2D55',  # pink
    Category.SELF_ADVOCACY: '#FF9500',  # orange
    Category.WORK_PREPARATION: '#5856D6',  # indigo
}

CATEGORY_ICONS = {
    Category.TRANSITION_PLANNING: '⚙',  # gear
    Category.EDUCATION_TRAINING: '✎',  # pencil
    Category.ADULT_LIFE: '♥',
    Category.SELF_ADVOCACY: '⚑',  # flag
    Category.WORK_PREPARATION: '⚒',  # hammer and pick
}


class TaskStatus(str, Enum):
    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"

    @property
    def icon(self) -> str:
        return {
            TaskStatus.NOT_STARTED: '○',
            TaskStatus.IN_PROGRESS: '↻',
            TaskStatus.COMPLETED: '●',
        }[self]


class Language(str, Enum):
    ENGLISH = "en"
    SPANISH = "es"
    VIETNAMESE = "vi"

    @classmethod
    def parse(cls, raw: str) -> "Language":
        """Accept a code ("es") or a name ("spanish", "Español")."""
        token = (raw or '').strip().lower()
        for lang in cls:
            if token == lang.value or token in LANGUAGE_ALIASES[lang]:
                return lang
        raise ValueError(f'Unknown language: {raw!r}')


LANGUAGE_ALIASES = {
    Language.ENGLISH: {'english', 'eng'},
    Language.SPANISH: {'spanish', 'español', 'espanol', 'spa'},
    Language.VIETNAMESE: {'vietnamese', 'tiếng việt', 'tieng viet', 'vie'},
}


def new_task_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class CatalogEntry:
    """One fixed milestone definition (English text)."""
    key: str
    title: str
    description: str
    category: Category
    start_age: int
    end_age: int


@dataclass
class Task:
    """A catalog milestone combined with the user's state for it.

    Fields:
        id: Opaque unique id, generated once and kept across edits.
        key: Canonical catalog key, never shown to the user.
        title: Currently displayed (localized) title.
        description: Currently displayed (localized) description.
        category: Fixed category from the catalog.
        start_age: First age the milestone applies to (inclusive).
        end_age: Last age the milestone applies to (inclusive).
        status: Not Started / In Progress / Completed.
        is_work_in_progress: Secondary highlight, independent of status.
        notes: Free-form user text.
    """
    key: str
    title: str
    description: str
    category: Category
    start_age: int
    end_age: int
    status: TaskStatus = TaskStatus.NOT_STARTED
    is_work_in_progress: bool = False
    notes: str = ''
    id: str = field(default_factory=new_task_id)

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Task(id={self.id}, key={self.key}, status={self.status.value})"
