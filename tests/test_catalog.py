# tests/test_catalog.py

from __future__ import annotations

from catalog import CATALOG, create_initial_tasks, entry_for, tasks_in_category
from models import Category, Language, TaskStatus


def test_catalog_entries_are_well_formed() -> None:
    assert len(CATALOG) == 24
    keys = [e.key for e in CATALOG]
    assert len(set(keys)) == len(keys)
    for entry in CATALOG:
        assert 0 <= entry.start_age <= entry.end_age <= 99
        assert isinstance(entry.category, Category)
        assert entry.title and entry.description


def test_catalog_is_grouped_by_category_and_sorted_by_start_age() -> None:
    order = [e.category for e in CATALOG]
    # each category forms one contiguous block, in enum order
    blocks = [c for i, c in enumerate(order) if i == 0 or order[i - 1] != c]
    assert blocks == list(Category)
    for category in Category:
        starts = [e.start_age for e in CATALOG if e.category == category]
        assert starts == sorted(starts)


def test_create_initial_tasks_defaults() -> None:
    tasks = create_initial_tasks()
    assert len(tasks) == len(CATALOG)
    assert len({t.id for t in tasks}) == len(tasks)
    for task, entry in zip(tasks, CATALOG):
        assert task.key == entry.key
        assert task.title == entry.title
        assert task.description == entry.description
        assert (task.category, task.start_age, task.end_age) == (entry.category, entry.start_age, entry.end_age)
        assert task.status == TaskStatus.NOT_STARTED
        assert task.is_work_in_progress is False
        assert task.notes == ''


def test_create_initial_tasks_localized() -> None:
    tasks = create_initial_tasks(Language.SPANISH)
    first = tasks[0]
    assert first.key == 'iep_participation'
    assert first.title == 'Participación en el IEP'


def test_fresh_ids_each_time() -> None:
    a = {t.id for t in create_initial_tasks()}
    b = {t.id for t in create_initial_tasks()}
    assert not a & b


def test_entry_for_and_category_filter() -> None:
    assert entry_for('legal_documents').start_age == 18
    assert entry_for('nope') is None
    tasks = create_initial_tasks()
    work = tasks_in_category(tasks, Category.WORK_PREPARATION)
    assert [t.key for t in work] == ['work_programs', 'career_planning', 'work_experience', 'employment_services']
