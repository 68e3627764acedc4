# connects command line input to the pure functions and prints the results.

from __future__ import annotations
import json
import logging
import sys
from pathlib import Path
from typing import Any, NoReturn, Optional
import click
from .config import load_settings
from .errors import QuizStatsError
from .service import even_numbers, family_statistics, letter_frequency, parse_families, squared_multiples

logger = logging.getLogger(__name__)

def _fail(exc: object) -> NoReturn:
    click.echo(f"Error: {exc}", err=True)
    sys.exit(1)

def _echo_json(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2))

@click.group()
@click.version_option(package_name="quizstats")
@click.pass_context
def main(ctx: click.Context):
    """Quizstats - number, family and letter statistics."""
    try:
        settings = load_settings()
    except QuizStatsError as e:
        _fail(e)
    logging.basicConfig(level=settings.log_level, format="%(asctime)s - %(levelname)s - %(name)s - %(message)s")
    ctx.obj = settings

@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("limit", type=int, required=False)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def evens(settings, limit: Optional[int], as_json: bool):
    """List the even numbers below LIMIT."""
    limit = settings.upper_limit if limit is None else limit
    logger.debug("even_numbers(%d)", limit)
    try:
        numbers = even_numbers(limit)
    except QuizStatsError as e:
        _fail(e)

    if as_json:
        _echo_json(numbers)
    else:
        for n in numbers:
            click.echo(n)

@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("limit", type=int, required=False)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def squares(settings, limit: Optional[int], as_json: bool):
    """List the squares of the multiples of 7 below LIMIT, largest first."""
    limit = settings.upper_limit if limit is None else limit
    logger.debug("squared_multiples(%d)", limit)
    try:
        numbers = squared_multiples(limit)
    except QuizStatsError as e:
        _fail(e)

    if as_json:
        _echo_json(numbers)
    else:
        for n in numbers:
            click.echo(n)

@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def families(path: Path, as_json: bool):
    """Summarize the families stored in the JSON file at PATH."""
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except ValueError as e:
        _fail(f"Invalid JSON in {path}: {e}")

    try:
        summaries = family_statistics(parse_families(payload))
    except QuizStatsError as e:
        _fail(e)
    logger.debug("summarized %d families from %s", len(summaries), path)

    if as_json:
        # averages stay exact as strings, floats would round them
        _echo_json(
            [
                {
                    "family_id": s.family_id,
                    "number_of_family_members": s.number_of_family_members,
                    "average_age": str(s.average_age),
                }
                for s in summaries
            ]
        )
    else:
        for s in summaries:
            click.echo(
                f"Family {s.family_id}: {s.number_of_family_members} members, average age {s.average_age}"
            )

@main.command()
@click.argument("text")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def letters(text: str, as_json: bool):
    """Count the letters A-Z in TEXT, ignoring case."""
    counts = letter_frequency(text)

    if as_json:
        _echo_json({c.letter: c.count for c in counts})
    else:
        for c in counts:
            click.echo(f"{c.letter}: {c.count}")

if __name__ == "__main__":
    main()
