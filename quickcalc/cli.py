"""
Command-line shell for quickcalc.

Evaluates the expression given as arguments, or reads expressions one
per line in an interactive loop. The shell only formats what the
evaluate() facade returns.
"""

import logging
import sys
from typing import Tuple

import click

from . import __version__
from .calculator import Calculator
from .config import AngleMode, CalculatorConfig
from .display import describe_error, format_answer
from .evaluator import CONSTANTS, FUNCTIONS

logger = logging.getLogger(__name__)

PROMPT = "calc"


def _print_result(result, places: int) -> bool:
    """Print a result to stdout or its error to stderr; return success."""
    if result.ok:
        click.echo(format_answer(result.value, places))
        return True
    click.echo(f"Error: {describe_error(result.error)}", err=True)
    return False


def _print_help() -> None:
    click.echo("constants: " + ", ".join(CONSTANTS))
    click.echo("functions:")
    for function in FUNCTIONS.values():
        click.echo(f"  {function.name + '(x)':<10} {function.description}")
    click.echo("commands: :deg, :rad, :angle (switch), :help, :quit")


def _repl(config: CalculatorConfig, places: int) -> None:
    calculator = Calculator(config)
    click.echo(f"quickcalc {__version__} ({config.angle_mode}) - :help for commands")

    while True:
        try:
            line = click.prompt(PROMPT, prompt_suffix="> ", default="", show_default=False)
        except (EOFError, click.Abort):
            click.echo()
            break

        line = line.strip()
        if not line:
            continue
        if line in (":quit", ":q", "quit", "exit"):
            break
        if line in (":help", ":h"):
            _print_help()
            continue
        if line in (":deg", ":rad", ":angle"):
            mode = {
                ":deg": AngleMode.DEGREES,
                ":rad": AngleMode.RADIANS,
                ":angle": calculator.config.angle_mode.toggled(),
            }[line]
            calculator = Calculator(calculator.config.with_options(angle_mode=mode))
            click.echo(f"angle mode: {mode}")
            continue

        _print_result(calculator.evaluate(line), places)


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("expression", nargs=-1, type=click.UNPROCESSED)
@click.option("--degrees/--radians", default=False,
              help="Angle unit for trigonometric functions.")
@click.option("--tight-negation", is_flag=True,
              help="Make unary minus bind tighter than '^' (-2^2 = 4).")
@click.option("--no-implicit-multiplication", is_flag=True,
              help="Reject juxtaposition such as 2pi or 3(4).")
@click.option("--finite-only", is_flag=True,
              help="Report infinite results as domain errors.")
@click.option("--places", type=click.IntRange(0, 15), default=7, show_default=True,
              help="Decimal places shown in answers.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.version_option(__version__, prog_name="quickcalc")
def main(expression: Tuple[str, ...], degrees: bool, tight_negation: bool,
         no_implicit_multiplication: bool, finite_only: bool, places: int,
         verbose: bool) -> None:
    """
    Evaluate EXPRESSION, or start an interactive session if none is given.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config = CalculatorConfig(
        angle_mode=AngleMode.DEGREES if degrees else AngleMode.RADIANS,
        negation_binds_tighter=tight_negation,
        implicit_multiplication=not no_implicit_multiplication,
        allow_infinity=not finite_only,
    )
    logger.debug("using %s", config)

    if not expression:
        _repl(config, places)
        return

    result = Calculator(config).evaluate(" ".join(expression))
    if not _print_result(result, places):
        sys.exit(1)


if __name__ == "__main__":
    main()
