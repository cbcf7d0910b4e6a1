"""ttyask CLI entry point: Click group with subcommands."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from ttyask import __version__
from ttyask.config import PromptConfig
from ttyask.errors import ConfigurationError
from ttyask.inquirer import Inquirer
from ttyask.model.question import QuestionType
from ttyask.terminal.console import ConsoleTerminal

CAKE_OPTIONS = ["Chocolate", "Ice-cream", "Cheesecake", "Red velvet"]


def build_demo(inquirer: Inquirer) -> Inquirer:
    """Populate *inquirer* with the cake-order example questionnaire."""
    inquirer.add("query", "What do you want to do?")
    inquirer.add("birthday", "Is this for a birthday?", QuestionType.YES_NO)
    inquirer.add("candles", "How many candles do you want?", QuestionType.INTEGER)
    inquirer.add("type", "What kind of a cake would you like?", CAKE_OPTIONS)
    inquirer.add("delivery", "Is this for delivery?", QuestionType.CONFIRM)
    inquirer.add("number", "Enter your contact details", r"\d{9}")
    inquirer.add("password", "Enter your password", QuestionType.PASSWORD)
    return inquirer


def _make_terminal(config: PromptConfig) -> ConsoleTerminal:
    try:
        return ConsoleTerminal(keymap=config.key_table())
    except ConfigurationError as exc:
        raise click.ClickException(str(exc)) from exc


@click.group()
@click.version_option(version=__version__, prog_name="ttyask")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
def cli(verbose: bool) -> None:
    """ttyask - interactive terminal questionnaires."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )


@cli.command()
@click.option("--no-color", is_flag=True, help="Disable colour output")
def demo(no_color: bool) -> None:
    """Run the cake-order example questionnaire."""
    config = PromptConfig(color=not no_color)
    inquirer = build_demo(Inquirer("ttyask example", terminal=_make_terminal(config), config=config))
    inquirer.ask()
    click.echo("------------")
    inquirer.print_questions()
    inquirer.print_answers()


@cli.command()
@click.argument("questionnaire", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print answers as a JSON object")
@click.option(
    "--keymap",
    type=click.Choice(["auto", "posix", "windows"]),
    default="auto",
    help="Raw key table for arrow keys and Backspace",
)
@click.option("--no-color", is_flag=True, help="Disable colour output")
def run(questionnaire: str, as_json: bool, keymap: str, no_color: bool) -> None:
    """Ask the questions in a JSON QUESTIONNAIRE file and print the answers."""
    from ttyask.loader import load_inquirer

    config = PromptConfig(keymap=keymap, color=not no_color)
    try:
        inquirer = load_inquirer(
            Path(questionnaire), terminal=_make_terminal(config), config=config
        )
    except ConfigurationError as exc:
        raise click.ClickException(str(exc)) from exc

    inquirer.ask()
    if as_json:
        click.echo(json.dumps(inquirer.answers(), indent=2))
    else:
        inquirer.print_answers()
