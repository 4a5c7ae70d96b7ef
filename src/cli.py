"""Command-line interface loop for the planner.

Tasks are addressed by the number shown on the timeline. The planner writes
every change through to storage itself, so the loop never saves explicitly.
"""
from __future__ import annotations
import shutil
from datetime import date
from typing import Callable, Dict, List, Optional

import click

from errors import InvalidDateError, PlannerError
from models import Language, Task, TaskStatus
from planner import Planner
from timeline import render_task_detail, render_timeline
from translations import label


def _clear_screen() -> None:
    # ESC[3J (scrollback), ESC[H (home), ESC[2J (screen), ESC[H (home)
    print("\033[3J\033[H\033[2J\033[H", end="", flush=True)


def _enter_alt_screen() -> None:
    print("\033[?1049h", end="", flush=True)


def _leave_alt_screen() -> None:
    print("\033[?1049l", end="", flush=True)


STATUS_ALIASES: Dict[str, TaskStatus] = {
    'ns': TaskStatus.NOT_STARTED,
    'not-started': TaskStatus.NOT_STARTED,
    'todo': TaskStatus.NOT_STARTED,
    'ip': TaskStatus.IN_PROGRESS,
    'in-progress': TaskStatus.IN_PROGRESS,
    'c': TaskStatus.COMPLETED,
    'd': TaskStatus.COMPLETED,
    'done': TaskStatus.COMPLETED,
    'completed': TaskStatus.COMPLETED,
}

FLAG_VALUES = {'on': True, 'yes': True, '1': True, 'off': False, 'no': False, '0': False}

HELP_COMMANDS = [
    ("show <n>", 'help_show'),
    ("status <n> <s>", 'help_status'),
    ("done <n>", 'help_done'),
    ("start <n>", 'help_start'),
    ("wip <n> [on|off]", 'help_wip'),
    ("note <n> <text...>", 'help_note'),
    ("birthday YYYY-MM-DD", 'help_birthday'),
    ("lang en|es|vi", 'help_lang'),
    ("reset", 'help_reset'),
    ("help", 'help_help'),
    ("exit", 'help_exit'),
]


def help_lines(language: Language) -> List[str]:
    lines = [label('help_title', language)]
    lines.extend(f"  {syntax:<20} {label(label_id, language)}" for syntax, label_id in HELP_COMMANDS)
    return lines


class CLI:
    def __init__(self, planner: Planner, alt_screen: bool = True,
                 input_fn: Callable[[str], str] = input):
        self.planner: Planner = planner
        self.alt_screen: bool = alt_screen
        self.input = input_fn
        self.message: Optional[str] = None

    def _t(self, label_id: str, **params: object) -> str:
        return label(label_id, self.planner.language, **params)

    def run(self) -> None:
        """Main REPL loop; the timeline is cleared and redrawn each cycle."""
        exit_message: Optional[str] = None
        if self.alt_screen:
            _enter_alt_screen()
        try:
            while True:
                self._redraw()
                line = self.input("\n: ").strip()
                if not line:
                    continue
                lower = line.lower()
                if lower == 'help':
                    _clear_screen()
                    print('\n'.join(help_lines(self.planner.language)))
                    self.input(f"\n[{self._t('done')}] ")
                    continue
                if lower in ('exit', 'quit'):
                    exit_message = self._t('goodbye')
                    break
                self.message = self.handle_command(line)
        except (KeyboardInterrupt, EOFError):
            exit_message = self._t('interrupted')
        finally:
            if self.alt_screen:
                _leave_alt_screen()
            if exit_message:
                print(exit_message)

    def _redraw(self) -> None:
        _clear_screen()
        width = shutil.get_terminal_size((100, 30)).columns
        print('\n'.join(render_timeline(self.planner, width)))
        if self.message:
            print(f"\n{self.message}")
            self.message = None

    # -------------------- command dispatch --------------------
    def handle_command(self, line: str) -> Optional[str]:
        """Run one command; returns a message to show, or None."""
        tokens = line.split()
        if not tokens:
            return None
        cmd = tokens[0].lower()
        handler = {
            'show': self._cmd_show,
            'status': self._cmd_status,
            'mv': self._cmd_status,
            'done': self._cmd_done,
            'start': self._cmd_start,
            'wip': self._cmd_wip,
            'note': self._cmd_note,
            'notes': self._cmd_note,
            'birthday': self._cmd_birthday,
            'lang': self._cmd_lang,
            'reset': self._cmd_reset,
        }.get(cmd)
        if handler is None:
            return self._t('unknown_command')
        try:
            return handler(tokens, line)
        except PlannerError as exc:
            return str(exc)

    def _task_at(self, raw: str) -> Optional[Task]:
        raw = raw.rstrip('.')
        if not raw.isdigit():
            return None
        idx = int(raw) - 1
        tasks = self.planner.tasks
        if idx < 0 or idx >= len(tasks):
            return None
        return tasks[idx]

    def _usage(self, usage: str) -> str:
        return self._t('usage', usage=usage)

    def _no_task(self, raw: str) -> str:
        return self._t('no_task', number=raw)

    # ---- individual command helpers ----
    def _cmd_show(self, tokens: List[str], line: str) -> Optional[str]:
        if len(tokens) != 2:
            return self._usage("show <n>")
        task = self._task_at(tokens[1])
        if task is None:
            return self._no_task(tokens[1])
        _clear_screen()
        print('\n'.join(render_task_detail(self.planner, task)))
        self.input(f"\n[{self._t('done')}] ")
        return None

    def _cmd_status(self, tokens: List[str], line: str) -> Optional[str]:
        if len(tokens) != 3:
            return self._usage("status <n> <status>; statuses: ns/ip/c")
        task = self._task_at(tokens[1])
        if task is None:
            return self._no_task(tokens[1])
        new_status = STATUS_ALIASES.get(tokens[2].lower())
        if new_status is None:
            return self._t('invalid_status')
        self.planner.update_status(task.id, new_status)
        return None

    def _toggle_status(self, tokens: List[str], target: TaskStatus, usage: str) -> Optional[str]:
        if len(tokens) != 2:
            return self._usage(usage)
        task = self._task_at(tokens[1])
        if task is None:
            return self._no_task(tokens[1])
        new_status = TaskStatus.NOT_STARTED if task.status == target else target
        self.planner.update_status(task.id, new_status)
        return None

    def _cmd_done(self, tokens: List[str], line: str) -> Optional[str]:
        return self._toggle_status(tokens, TaskStatus.COMPLETED, "done <n>")

    def _cmd_start(self, tokens: List[str], line: str) -> Optional[str]:
        return self._toggle_status(tokens, TaskStatus.IN_PROGRESS, "start <n>")

    def _cmd_wip(self, tokens: List[str], line: str) -> Optional[str]:
        if len(tokens) not in (2, 3):
            return self._usage("wip <n> [on|off]")
        task = self._task_at(tokens[1])
        if task is None:
            return self._no_task(tokens[1])
        value: Optional[bool] = None
        if len(tokens) == 3:
            if tokens[2].lower() not in FLAG_VALUES:
                return self._usage("wip <n> [on|off]")
            value = FLAG_VALUES[tokens[2].lower()]
        self.planner.set_work_in_progress(task.id, value)
        return None

    def _cmd_note(self, tokens: List[str], line: str) -> Optional[str]:
        if len(tokens) < 2:
            return self._usage("note <n> <text...>")
        task = self._task_at(tokens[1])
        if task is None:
            return self._no_task(tokens[1])
        # keep the user's spacing: text is everything after the task number
        text = line.split(None, 2)[2] if len(tokens) > 2 else ''
        self.planner.update_notes(task.id, text)
        return None

    def _cmd_birthday(self, tokens: List[str], line: str) -> Optional[str]:
        if len(tokens) != 2:
            return self._usage("birthday YYYY-MM-DD")
        try:
            value = date.fromisoformat(tokens[1])
        except ValueError:
            return self._t('invalid_date')
        try:
            self.planner.set_birthdate(value)
        except InvalidDateError:
            return self._t('future_birthdate')
        birth = f"{self._t('child_birth_date')}: {value.isoformat()}"
        age = f"{self._t('current_age')}: {self._t('years_old', age=self.planner.current_age)}"
        return f"{birth}  {age}"

    def _cmd_lang(self, tokens: List[str], line: str) -> Optional[str]:
        if len(tokens) < 2:
            return self._usage("lang en|es|vi")
        name = ' '.join(tokens[1:])
        try:
            language = Language.parse(name)
        except ValueError:
            return self._t('unknown_language', name=name)
        self.planner.set_language(language)
        return f"{self._t('language')}: {self._t('language_' + language.value)}"

    def _cmd_reset(self, tokens: List[str], line: str) -> Optional[str]:
        prompt = f"{self._t('reset_tasks')}: {self._t('reset_confirmation')}"
        if not click.confirm(prompt, default=False):
            return self._t('cancel')
        self.planner.reset_to_default()
        return self._t('reset_to_default')
