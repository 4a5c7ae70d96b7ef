# tests/test_timeline.py

from __future__ import annotations

import re
from typing import List

import pytest

from catalog import CATALOG
from models import Language, TaskStatus
from planner import Planner
from timeline import AGE_BANDS, band_for_age, band_span, render_bar, render_task_detail, render_timeline

ANSI_RE = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")


def _plain(lines: List[str]) -> str:
    return ANSI_RE.sub('', '\n'.join(lines))


def _task(planner: Planner, key: str):
    return next(t for t in planner.tasks if t.key == key)


@pytest.mark.parametrize("key, expected", [
    ('iep_participation', (0, 4)),  # 8-22
    ('self_care_routines', (0, 1)),  # 8-14
    ('high_school_planning', (0, 2)),  # 12-16
    ('career_planning', (1, 3)),  # 16-18
    ('legal_documents', (2, 4)),  # 18-22
])
def test_band_span_uses_closed_overlap(planner: Planner, key: str, expected) -> None:
    assert band_span(_task(planner, key)) == expected


def test_band_for_age() -> None:
    assert [band_for_age(a) for a in (0, 11, 12, 15, 16, 18, 21, 22, 40)] == [0, 0, 1, 1, 2, 3, 3, 4, 4]
    assert len(AGE_BANDS) == 5


def test_timeline_lists_every_task(planner: Planner) -> None:
    text = _plain(render_timeline(planner, width=200))
    for entry in CATALOG:
        assert entry.title in text
    assert 'Under 12' in text
    assert '12 years old' in text
    assert ' 1. ' in text and '24. ' in text


def test_timeline_follows_language(planner: Planner) -> None:
    planner.set_language(Language.SPANISH)
    text = _plain(render_timeline(planner, width=200))
    assert 'Planificación de Transición' in text
    assert 'Participación en el IEP' in text
    assert '< 12' in text


def test_bar_shapes_reflect_status(planner: Planner) -> None:
    task = planner.tasks[0]
    assert ANSI_RE.sub('', render_bar(task, 40)).strip() == 'IEP Participation'

    planner.update_status(task.id, TaskStatus.IN_PROGRESS)
    bar = ANSI_RE.sub('', render_bar(planner.get(task.id), 40))
    assert bar.startswith('◀') and bar.endswith('▶')
    assert len(bar) == 40

    planner.update_status(task.id, TaskStatus.COMPLETED)
    planner.set_work_in_progress(task.id, True)
    bar = ANSI_RE.sub('', render_bar(planner.get(task.id), 40))
    assert '✓ ⏱ IEP Participation' in bar
    assert len(bar) == 40


def test_bar_truncates_long_titles(planner: Planner) -> None:
    bar = ANSI_RE.sub('', render_bar(planner.tasks[0], 8))
    assert len(bar) == 8
    assert bar.strip().endswith('…')


def test_task_detail_is_localized(planner: Planner) -> None:
    task = _task(planner, 'high_school_planning')
    planner.update_notes(task.id, 'Ask about diploma pathway')
    planner.set_language(Language.SPANISH)
    text = _plain(render_task_detail(planner, planner.get(task.id)))
    assert 'Detalles de la Tarea' in text
    assert 'Rango de Edad: 12-16' in text
    assert 'No Iniciado' in text
    assert 'Ask about diploma pathway' in text
