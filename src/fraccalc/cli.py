"""
Command-line interface for fraccalc.

Provides commands for:
- Running the interactive prompt loop (default)
- Evaluating a single expression
"""

from typing import Optional

import structlog
import typer
from rich.console import Console

from fraccalc.calculator import try_evaluate
from fraccalc.config import Settings, configure_logging, settings
from fraccalc.formatter import format_decimal
from fraccalc.models import EvaluationOutcome

app = typer.Typer(
    name="fraccalc",
    help="Fraction/Decimal Calculator",
    add_completion=False,
)

console = Console()
logger = structlog.get_logger()


# =============================================================================
# Commands
# =============================================================================

@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(None, "--log-level", "-L", help="Log level (default from FRACCALC_LOG_LEVEL)"),
):
    """Evaluate decimal and fraction expressions. Starts the prompt loop when no command is given."""
    configure_logging(log_level)
    
    if ctx.invoked_subcommand is None:
        run_loop(settings)


@app.command()
def repl(
    strict: bool = typer.Option(False, "--strict", "-s", help="Reject unknown characters"),
):
    """Start the interactive prompt loop."""
    run_loop(_settings_for(strict))


@app.command("eval")
def eval_command(
    expression: str = typer.Argument(..., help="Expression to evaluate"),
    strict: bool = typer.Option(False, "--strict", "-s", help="Reject unknown characters"),
):
    """Evaluate a single expression and print the result."""
    outcome = try_evaluate(expression, _settings_for(strict))
    print_outcome(outcome)
    
    if not outcome.ok:
        raise typer.Exit(1)


# =============================================================================
# Prompt Loop
# =============================================================================

def run_loop(active: Settings) -> None:
    """Read, evaluate and print lines until exit or end of input."""
    console.print(active.app_name, highlight=False)
    console.print(f"Type '{active.exit_command}' to quit.\n", highlight=False)
    
    while True:
        try:
            line = console.input(active.prompt)
        except (EOFError, KeyboardInterrupt):
            console.print()
            logger.debug("Input closed")
            break
        
        if line.strip().lower() == active.exit_command.lower():
            break
        
        print_outcome(try_evaluate(line, active))


# =============================================================================
# Helpers
# =============================================================================

def print_outcome(outcome: EvaluationOutcome) -> None:
    """Print a result or error followed by a blank line."""
    if outcome.ok:
        result = outcome.result
        value = format_decimal(result.value)
        if result.is_percent:
            text = f"= {value}%"
        else:
            text = f"= {result.fraction_text} (≈ {value})"
        console.print(text, markup=False, highlight=False, soft_wrap=True)
    else:
        console.print(f"Error: {outcome.error}", markup=False, highlight=False, soft_wrap=True)
    
    console.print()


def _settings_for(strict: bool) -> Settings:
    """Apply command-line overrides to the global settings."""
    if strict and not settings.strict_tokens:
        return settings.model_copy(update={"strict_tokens": True})
    return settings


if __name__ == "__main__":
    app()
