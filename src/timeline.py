"""Timeline rendering: age bands, bar spans, and the task detail view.

The grid has five fixed age bands. A task's bar runs from the first to the
last band whose closed age range overlaps the task's closed interval, so a
task starting at a band boundary also touches the band before it (12-16
covers "Under 12" through "16 - 18"). Tasks are numbered 1..N in catalog
order; the CLI uses the same numbers.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple

from models import Category, Task, TaskStatus
from planner import Planner
from theme import (BOLD, CATEGORY_COLOR, HEADER_COLOR, MUTED_COLOR, STATUS_COLOR, UNDERLINE,
                   bar_style, color)
from translations import category_name, label, status_name

MIN_BAND_WIDTH = 8
NUMBER_WIDTH = 4  # "24. "
WIP_MARK = '⏱'


@dataclass(frozen=True)
class AgeBand:
    lower: int
    upper: int
    label_id: str

    def overlaps(self, start_age: int, end_age: int) -> bool:
        return start_age <= self.upper and end_age >= self.lower


AGE_BANDS: Tuple[AgeBand, ...] = (
    AgeBand(0, 12, 'band_under_12'),
    AgeBand(12, 16, 'band_12_16'),
    AgeBand(16, 18, 'band_16_18'),
    AgeBand(18, 22, 'band_18_22'),
    AgeBand(22, 99, 'band_22_plus'),
)


def band_span(task: Task) -> Tuple[int, int]:
    """Index of the first and last overlapping age band (0, 0 if none)."""
    hits = [i for i, band in enumerate(AGE_BANDS) if band.overlaps(task.start_age, task.end_age)]
    if not hits:
        return 0, 0
    return hits[0], hits[-1]


def band_for_age(age: int) -> int:
    for i, band in enumerate(AGE_BANDS):
        if age < band.upper:
            return i
    return len(AGE_BANDS) - 1


def _fit(text: str, width: int) -> str:
    if width <= 0:
        return ''
    if len(text) <= width:
        return text
    if width == 1:
        return text[:1]
    return text[:width - 1] + '…'


def render_bar(task: Task, width: int) -> str:
    """Bar text for one task; shape shows status, WIP_MARK flags work in progress."""
    title = (WIP_MARK + ' ' if task.is_work_in_progress else '') + task.title
    if task.status == TaskStatus.IN_PROGRESS and width >= 4:
        inner = _fit(title, width - 4).center(width - 4)
        body = '◀ ' + inner + ' ▶'
    elif task.status == TaskStatus.COMPLETED and width >= 3:
        body = ' ' + _fit('✓ ' + title, width - 2).ljust(width - 2) + ' '
    else:
        body = ' ' + _fit(title, width - 2).ljust(width - 2) + ' ' if width >= 2 else _fit(title, width)
    return color(body, bar_style(task.category, task.status))


def render_timeline(planner: Planner, width: int = 100) -> List[str]:
    lang = planner.language
    band_width = max(MIN_BAND_WIDTH, (width - NUMBER_WIDTH) // len(AGE_BANDS))
    lines: List[str] = []

    age = planner.current_age
    title = label('app_title', lang)
    age_text = label('years_old', lang, age=age)
    lines.append(color(title, BOLD) + f"  {label('birthday', lang)}: {planner.birthdate.isoformat()} ({age_text})")

    header = ' ' * NUMBER_WIDTH
    current_band = band_for_age(age)
    for i, band in enumerate(AGE_BANDS):
        cell = _fit(label(band.label_id, lang), band_width - 1).center(band_width - 1) + '|'
        header += color(cell, HEADER_COLOR + UNDERLINE) if i == current_band else color(cell, HEADER_COLOR)
    lines.append(header)

    numbers = {t.id: n for n, t in enumerate(planner.tasks, start=1)}
    for category in Category:
        lines.append(color(f"{category.icon} {category_name(category, lang)}", CATEGORY_COLOR[category], BOLD))
        for task in planner.tasks_in_category(category):
            number = numbers[task.id]
            first, last = band_span(task)
            start_col = first * band_width
            bar_width = (last - first + 1) * band_width - 1
            num = f"{number:>2}. "
            num = color(num, BOLD) if planner.is_applicable(task) else color(num, MUTED_COLOR)
            lines.append(num + ' ' * start_col + render_bar(task, bar_width))
    return lines


def render_task_detail(planner: Planner, task: Task) -> List[str]:
    lang = planner.language
    status_text = color(f"{task.status.icon} {status_name(task.status, lang)}", STATUS_COLOR[task.status])
    wip = label('yes', lang) if task.is_work_in_progress else label('no', lang)
    lines = [
        color(label('task_details', lang), BOLD),
        color(f"{task.category.icon} {category_name(task.category, lang)}", CATEGORY_COLOR[task.category]),
        color(task.title, BOLD),
        task.description,
        label('age_range', lang, start=task.start_age, end=task.end_age),
        f"{label('status', lang)}: {status_text}",
        f"{label('work_in_progress', lang)}: {wip}",
        '',
        color(label('notes', lang), BOLD),
        task.notes if task.notes else color('-', MUTED_COLOR),
    ]
    return lines
