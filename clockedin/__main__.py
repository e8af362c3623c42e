"""Main entry point for clocked-in."""

import sys

from loguru import logger

from clockedin.app import ClockedInApp
from clockedin.config import DEFAULT_CONFIG_PATH, Settings
from clockedin.errors import InvalidTimeError
from clockedin.logger import DEFAULT_LOG_PATH, setup_logger
from clockedin.models import CalendarMode, WeekMode
from clockedin.presenter import StatusPresenter
from clockedin.time_of_day import TimeOfDay


def _ask(prompt: str, current: str) -> str:
    answer = input(f"{prompt} [{current}]: ").strip()
    return answer or current


def _ask_yes_no(prompt: str, current: bool) -> bool:
    default = "Y/n" if current else "y/N"
    answer = input(f"{prompt} [{default}]: ").strip().lower()
    if not answer:
        return current
    return answer.startswith("y")


def configure() -> None:
    """Interactive configuration setup."""
    sys.stdout.write("Clocked In Configuration\n")
    sys.stdout.write("=" * 40 + "\n")
    settings = Settings.load()

    while True:
        try:
            settings.set_day_start(
                TimeOfDay.parse(_ask("Day starts at", str(settings.day_start)))
            )
            settings.set_day_end(
                TimeOfDay.parse(_ask("Day ends at", str(settings.day_end)))
            )
            break
        except InvalidTimeError as e:
            sys.stdout.write(f"{e}\n")

    working_week = _ask_yes_no(
        "Count only Mon-Fri for the week?", settings.week_mode == WeekMode.WORKING_DAYS
    )
    settings.week_mode = WeekMode.WORKING_DAYS if working_week else WeekMode.FULL_WEEK

    working_calendar = _ask_yes_no(
        "Count only working days for month and year?",
        settings.calendar_mode == CalendarMode.WORKING_DAYS,
    )
    settings.calendar_mode = (
        CalendarMode.WORKING_DAYS if working_calendar else CalendarMode.ALL_DAYS
    )

    settings.save()
    sys.stdout.write("\n✓ Configuration saved successfully!\n")
    sys.stdout.write(f"Work day: {settings.day_start} - {settings.day_end}\n")
    sys.stdout.write(f"Config file: {DEFAULT_CONFIG_PATH}\n")


def status() -> None:
    """Print the current label once, for status-bar scripts."""
    presenter = StatusPresenter(Settings.from_env(Settings.load()))
    presenter.refresh()
    sys.stdout.write(f"{presenter.label or ''}\n")


def main() -> None:
    """Main entry point."""
    command = sys.argv[1] if len(sys.argv) > 1 else None

    if command == "config":
        setup_logger()
        configure()
        return

    if command == "status":
        setup_logger()
        status()
        return

    if command is not None:
        sys.stderr.write(f"Unknown command {command!r}, expected 'config' or 'status'\n")
        sys.exit(2)

    setup_logger(level="INFO", log_file=DEFAULT_LOG_PATH)
    settings = Settings.from_env(Settings.load())
    logger.info(f"Starting with work day {settings.day_start} - {settings.day_end}")

    # Run the TUI
    app = ClockedInApp(settings)
    app.run()


if __name__ == "__main__":
    main()
