# tests/test_cli.py

from __future__ import annotations

from datetime import date
from typing import Iterable, List

import pytest

import cli as cli_module
from cli import CLI, HELP_COMMANDS, help_lines
from models import Language, TaskStatus
from planner import Planner


def _scripted(lines: Iterable[str]):
    """input() replacement feeding fixed lines, then EOF."""
    it = iter(lines)
    prompts: List[str] = []

    def fake_input(prompt: str) -> str:
        prompts.append(prompt)
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    fake_input.prompts = prompts  # type: ignore[attr-defined]
    return fake_input


@pytest.fixture()
def repl(planner: Planner) -> CLI:
    return CLI(planner, alt_screen=False, input_fn=_scripted([]))


def test_status_commands(repl: CLI, planner: Planner) -> None:
    first = planner.tasks[0]
    assert repl.handle_command('status 1 c') is None
    assert planner.get(first.id).status == TaskStatus.COMPLETED
    assert repl.handle_command('status 1 ip') is None
    assert planner.get(first.id).status == TaskStatus.IN_PROGRESS
    assert repl.handle_command('status 1 paused') == 'Invalid status.'
    assert repl.handle_command('status 99 c') == 'No task #99.'
    assert repl.handle_command('status 1').startswith('Usage:')


def test_done_and_start_toggle(repl: CLI, planner: Planner) -> None:
    task = planner.tasks[4]
    repl.handle_command('done 5')
    assert planner.get(task.id).status == TaskStatus.COMPLETED
    repl.handle_command('done 5')
    assert planner.get(task.id).status == TaskStatus.NOT_STARTED
    repl.handle_command('start 5')
    assert planner.get(task.id).status == TaskStatus.IN_PROGRESS
    repl.handle_command('start 5.')
    assert planner.get(task.id).status == TaskStatus.NOT_STARTED


def test_wip_command(repl: CLI, planner: Planner) -> None:
    task = planner.tasks[1]
    repl.handle_command('wip 2')
    assert planner.get(task.id).is_work_in_progress is True
    repl.handle_command('wip 2 off')
    assert planner.get(task.id).is_work_in_progress is False
    repl.handle_command('wip 2 on')
    assert planner.get(task.id).is_work_in_progress is True
    assert repl.handle_command('wip 2 maybe').startswith('Usage:')


def test_note_keeps_spacing_and_can_clear(repl: CLI, planner: Planner) -> None:
    task = planner.tasks[2]
    repl.handle_command('note 3 call the   school, ask for Ms. Tran')
    assert planner.get(task.id).notes == 'call the   school, ask for Ms. Tran'
    repl.handle_command('note 3')
    assert planner.get(task.id).notes == ''


def test_birthday_command(repl: CLI, planner: Planner) -> None:
    assert repl.handle_command('birthday 2012-03-15') == "Child's Birth Date: 2012-03-15  Current Age: 14 years old"
    assert planner.birthdate == date(2012, 3, 15)
    assert repl.handle_command('birthday 2099-01-01') == 'The birth date cannot be in the future.'
    assert planner.birthdate == date(2012, 3, 15)
    assert repl.handle_command('birthday 15/03/2012') == 'Invalid date; use YYYY-MM-DD.'


def test_lang_command(repl: CLI, planner: Planner) -> None:
    repl.handle_command('lang es')
    assert planner.language is Language.SPANISH
    repl.handle_command('lang Tiếng Việt')
    assert planner.language is Language.VIETNAMESE
    assert repl.handle_command('birthday 2012-03-15').endswith('Tuổi Hiện Tại: 14 tuổi')
    assert repl.handle_command('lang fr') == 'Ngôn ngữ không xác định: fr. Dùng en, es hoặc vi.'


def test_reset_asks_first(repl: CLI, planner: Planner, monkeypatch: pytest.MonkeyPatch) -> None:
    task = planner.tasks[0]
    repl.handle_command('done 1')

    monkeypatch.setattr(cli_module.click, 'confirm', lambda *a, **k: False)
    assert repl.handle_command('reset') == 'Cancel'
    assert planner.get(task.id).status == TaskStatus.COMPLETED

    monkeypatch.setattr(cli_module.click, 'confirm', lambda *a, **k: True)
    assert repl.handle_command('reset') == 'Reset to Default Tasks'
    assert all(t.status == TaskStatus.NOT_STARTED for t in planner.tasks)


def test_unknown_command(repl: CLI) -> None:
    assert repl.handle_command('fly 1') == "Unknown command. Type 'help' for instructions."
    assert repl.handle_command('   ') is None


def test_run_loop(planner: Planner, capsys: pytest.CaptureFixture[str]) -> None:
    fake_input = _scripted(['status 1 c', 'show 1', '', 'help', '', 'bogus', 'exit'])
    CLI(planner, alt_screen=False, input_fn=fake_input).run()
    out = capsys.readouterr().out
    assert planner.tasks[0].status == TaskStatus.COMPLETED
    assert 'Task Details' in out
    assert 'Commands:' in out
    assert "Unknown command" in out
    assert out.rstrip().endswith('Goodbye.')


def test_run_loop_handles_eof(planner: Planner, capsys: pytest.CaptureFixture[str]) -> None:
    CLI(planner, alt_screen=False, input_fn=_scripted(['wip 1'])).run()
    assert planner.tasks[0].is_work_in_progress is True
    assert 'Interrupted. Goodbye.' in capsys.readouterr().out


def test_messages_follow_language(repl: CLI, planner: Planner) -> None:
    assert repl.handle_command('lang es') == 'Idioma: Español'
    assert repl.handle_command('status 99 c') == 'No existe la tarea #99.'
    assert repl.handle_command('status 1 paused') == 'Estado no válido.'
    assert repl.handle_command('done') == 'Uso: done <n>'
    assert repl.handle_command('birthday mañana') == 'Fecha no válida; use AAAA-MM-DD.'
    assert repl.handle_command('fly') == "Comando desconocido. Escriba 'help' para ver las instrucciones."
    assert repl.handle_command('lang vi') == 'Ngôn Ngữ: Tiếng Việt'


def test_help_lines_are_localized() -> None:
    english = help_lines(Language.ENGLISH)
    spanish = help_lines(Language.SPANISH)
    assert english[0] == 'Commands:'
    assert spanish[0] == 'Comandos:'
    assert len(english) == len(spanish) == len(HELP_COMMANDS) + 1
    assert any(line.strip().startswith('reset') and 'pregunta antes' in line for line in spanish)
