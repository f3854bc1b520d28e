"""Daily Hub CLI - Notes, Tasks and Calendar."""

import logging
import sys
import time
from typing import Callable

import click

from .config import load_config
from .core.router import Tab, Transition
from .core.screens import format_tab_bar, render_screen
from .core.session import Session
from .core.tasks import TaskNotFoundError

logger = logging.getLogger(__name__)

SHELL_HELP = """Commands:
  notes | tasks | calendar   Switch tab
  tab <name>                 Switch tab by name
  add <text>                 Add a note or task on the current tab
  toggle <id>                Check/uncheck a task
  back                       Go back to the start tab (exits from there)
  list                       Redraw the current screen
  help                       Show this help
  quit | exit                Leave the shell"""


class ShellPresenter:
    """
    Plays tab transitions in the terminal.

    With animations on, the new screen is redrawn dimmed for each fade
    frame below full opacity, then the shell draws it normally.
    """

    def __init__(
        self,
        session: Session,
        animate: bool = True,
        steps: int = 4,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.session = session
        self.animate = animate
        self.steps = steps
        self.sleep = sleep

    def __call__(self, transition: Transition) -> None:
        if not self.animate or transition.duration_ms <= 0:
            return

        frame_delay = transition.duration_ms / self.steps / 1000
        screen = render_screen(self.session)
        for opacity in transition.frames(self.steps):
            if opacity >= 1.0:
                break
            click.clear()
            click.echo(click.style(screen, dim=True))
            self.sleep(frame_delay)


def draw(session: Session) -> None:
    """Draw the current screen with the tab bar underneath."""
    click.echo(render_screen(session))
    click.echo()
    click.echo(format_tab_bar(session.current_tab))


def execute(session: Session, line: str) -> bool:
    """
    Run one shell command against the session.

    Returns False when the shell should stop.
    """
    command, _, arg = line.strip().partition(" ")
    command = command.lower()
    arg = arg.strip()

    if not command:
        return True

    if command in ("quit", "exit"):
        return False

    if command == "help":
        click.echo(SHELL_HELP)
        return True

    if command in ("notes", "tasks", "calendar", "tab"):
        name = arg if command == "tab" else command
        try:
            tab = Tab.parse(name)
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            return True
        session.router.select_tab(tab)
        draw(session)
        return True

    if command == "back":
        if session.router.back() is None:
            return False
        draw(session)
        return True

    if command == "list":
        draw(session)
        return True

    if command == "add":
        _add(session, arg)
        return True

    if command == "toggle":
        _toggle(session, arg)
        return True

    click.echo(f"Unknown command '{command}'. Type 'help' for commands.")
    return True


def _add(session: Session, text: str) -> None:
    tab = session.current_tab
    if tab is Tab.CALENDAR:
        click.echo("Nothing to add on the Calendar tab.")
        return

    if tab is Tab.NOTES:
        item = session.notes.add_note(text)
    else:
        item = session.tasks.add_task(text)

    if item is None:
        click.echo("Nothing to add.")
        return
    draw(session)


def _toggle(session: Session, arg: str) -> None:
    try:
        task_id = int(arg)
    except ValueError:
        click.echo("Usage: toggle <id>", err=True)
        return

    try:
        task = session.tasks.toggle_task(task_id)
    except TaskNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        return

    if task is None:
        click.echo(f"No task #{task_id}.")
        return
    if session.current_tab is Tab.TASKS:
        draw(session)
    else:
        click.echo(f"Task #{task.id} is now {task.status_label}.")


@click.group()
@click.version_option(package_name="dailyhub")
def main():
    """Daily Hub - Notes, Tasks and Calendar."""
    pass


@main.command()
@click.option(
    "--tab",
    "initial_tab",
    type=click.Choice([t.value for t in Tab], case_sensitive=False),
    default=None,
    help="Tab to start on (overrides INITIAL_TAB)",
)
@click.option("--no-animate", is_flag=True, help="Disable fade transitions")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def shell(initial_tab: str | None, no_animate: bool, verbose: bool):
    """Start an interactive session."""
    if verbose:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    config = load_config()
    if initial_tab:
        config.initial_tab = initial_tab.lower()

    session = Session.from_config(config)
    presenter = ShellPresenter(session, animate=config.animations and not no_animate)
    session.router.add_listener(presenter)

    draw(session)
    click.echo("Type 'help' for commands.")

    while True:
        try:
            line = click.prompt(">", default="", show_default=False, prompt_suffix=" ")
        except click.Abort:
            # EOF / Ctrl-C
            click.echo()
            break
        if not execute(session, line):
            break

    click.echo("Bye.")


@main.command()
def bot():
    """Run the Telegram bot."""
    from .telegram_bot import run_bot

    try:
        run_bot()
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
