"""Main entry point for the transition planner."""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

import click

from cli import CLI
from config import get_settings
from kvstore import JsonFileStore
from logging_setup import setup_logging
from models import Language
from planner import Planner
from storage import Storage

logger = logging.getLogger(__name__)


def _language_option(ctx: click.Context, param: click.Parameter, value: Optional[str]) -> Optional[Language]:
    if value is None:
        return None
    try:
        return Language.parse(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from None


def build_planner(data_file: Path, language: Language) -> Planner:
    planner = Planner(Storage(JsonFileStore(data_file)), language=language)
    planner.initialize()
    # saved titles may be in another language; re-derive for this session
    planner.set_language(language)
    return planner


@click.command()
@click.option('--data-file', type=click.Path(dir_okay=False, path_type=Path),
              help='JSON file holding saved tasks and birthday.')
@click.option('--lang', 'language', callback=_language_option,
              help='Display language: en, es or vi.')
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Console log level.')
def main(data_file: Optional[Path], language: Optional[Language], log_level: Optional[str]) -> None:
    """Track a child's transition-to-adulthood milestones."""
    settings = get_settings()
    level_name = (log_level or settings.log_level).upper()
    setup_logging(log_dir=settings.log_dir, console_level=getattr(logging, level_name, logging.WARNING))

    planner = build_planner(data_file or settings.data_file, language or settings.language)
    logger.info("Planner ready: %s", planner)
    CLI(planner, alt_screen=settings.alt_screen).run()


if __name__ == "__main__":
    main()
