from __future__ import annotations

from pathlib import Path

from loguru import logger

from app.console import ConsoleDisplay, ConsolePrompter
from app.session import SessionController
from core.errors import ConfigurationError
from infrastructure.delete_service import DeleteService
from infrastructure.logging import find_latest_log_file, init_logging
from infrastructure.settings import AppConfig, JsonSettings


BASE_DIR = Path(__file__).parent


def _load_config(settings_path: Path) -> AppConfig:
    settings = JsonSettings(settings_path) if settings_path.exists() else None
    return AppConfig.from_settings(settings)


def main() -> int:
    display = ConsoleDisplay()
    try:
        config = _load_config(BASE_DIR / "settings.json")
    except ConfigurationError as ex:
        display.show_message(f"Configuration error: {ex}")
        return 2

    log_dir = init_logging(config.log_dir, config.log_level)
    logger.info("Starting session (page_size={})", config.page_size)

    deleter = DeleteService(audit_log=config.audit_log, log_dir=config.delete_log_dir)
    session = SessionController(
        prompter=ConsolePrompter(),
        display=display,
        deleter=deleter,
        page_size=config.page_size,
        confirm_delete=config.confirm_delete,
    )
    try:
        session.run()
    except (EOFError, KeyboardInterrupt):
        logger.info("Input closed in state {}", session.state.value)
        display.show_message("\nInput closed, exiting.")
    except Exception as ex:  # pylint: disable=broad-exception-caught
        logger.exception("Unexpected error: {}", ex)
        logger.complete()
        display.show_message(f"Unexpected error: {ex}")
        latest = find_latest_log_file(str(log_dir))
        if latest:
            display.show_message(f"Details in {latest}")
        return 1
    finally:
        logger.complete()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
