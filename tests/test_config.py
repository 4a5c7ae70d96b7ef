# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

import main as main_module
from config import Settings, color_env_name
from models import Category, Language

ENV_NAMES = ["PLANNER_DATA_FILE", "PLANNER_LANGUAGE", "PLANNER_LOG_LEVEL", "PLANNER_LOG_DIR",
             "PLANNER_ALT_SCREEN"] + [color_env_name(c) for c in Category]


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    s = Settings.from_env()
    assert s.language is Language.ENGLISH
    assert s.log_level == "WARNING"
    assert s.alt_screen is True
    assert s.data_file.name == "planner.json"
    assert s.category_colors == {}


def test_env_overrides(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    clean_env.setenv("PLANNER_DATA_FILE", str(tmp_path / "state.json"))
    clean_env.setenv("PLANNER_LANGUAGE", "Español")
    clean_env.setenv("PLANNER_LOG_LEVEL", "debug")
    clean_env.setenv("PLANNER_ALT_SCREEN", "off")
    clean_env.setenv("PLANNER_COLOR_ADULT_LIFE", "aa00ff")
    clean_env.setenv("PLANNER_COLOR_SELF_ADVOCACY", "not-a-color")

    s = Settings.from_env()
    assert s.data_file == tmp_path / "state.json"
    assert s.language is Language.SPANISH
    assert s.log_level == "DEBUG"
    assert s.alt_screen is False
    assert s.category_colors == {Category.ADULT_LIFE: "#aa00ff"}


def test_bad_language_falls_back(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("PLANNER_LANGUAGE", "klingon")
    assert Settings.from_env().language is Language.ENGLISH


def test_main_runs_and_persists(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    data_file = tmp_path / "planner.json"
    clean_env.setenv("PLANNER_LOG_DIR", str(tmp_path / "logs"))
    clean_env.setenv("PLANNER_ALT_SCREEN", "0")
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    try:
        result = CliRunner().invoke(
            main_module.main,
            ["--data-file", str(data_file), "--lang", "vi"],
            input="done 1\nexit\n",
        )
    finally:
        for h in list(root.handlers):
            if h not in saved_handlers:
                root.removeHandler(h)
                h.close()
        for h in saved_handlers:
            if h not in root.handlers:
                root.addHandler(h)

    assert result.exit_code == 0, result.output
    assert "Tạm biệt." in result.output
    assert "Tham Gia IEP" in result.output
    assert (tmp_path / "logs" / "planner.log").exists()

    planner = main_module.build_planner(data_file, Language.ENGLISH)
    assert planner.tasks[0].status.value == "Completed"
    assert planner.tasks[0].title == "IEP Participation"


def test_main_rejects_unknown_language(tmp_path: Path) -> None:
    result = CliRunner().invoke(main_module.main, ["--data-file", str(tmp_path / "p.json"), "--lang", "xx"])
    assert result.exit_code == 2
    assert "Unknown language" in result.output
