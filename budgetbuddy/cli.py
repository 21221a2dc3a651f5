"""CLI entry point for budgetbuddy."""

import typer

from budgetbuddy.commands.admin import init_command
from budgetbuddy.commands.create import create_command
from budgetbuddy.commands.report import report_command
from budgetbuddy.log import setup_logging

app = typer.Typer(
    name="budgetbuddy",
    help="Budget Buddy - build and review a personal monthly budget",
    add_completion=False,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Budget Buddy - build and review a personal monthly budget."""
    setup_logging("DEBUG" if verbose else "WARNING")


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Write the default configuration file."""
    init_command(force)


@app.command()
def create(
    name: str,
    directory: str = typer.Option(None, "--directory", "-d", help="Directory for budget files (default: current)"),
    minimum_wage: float = typer.Option(None, "--minimum-wage", help="The legal minimum rate of pay for wages"),
    overtime_threshold: float = typer.Option(
        None, "--overtime-threshold", help="Weekly hours worked before overtime pay applies"
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing budget"),
) -> None:
    """Create a budget by answering questions about your income and expenses."""
    create_command(name, directory, minimum_wage, overtime_threshold, force)


@app.command()
def report(
    name: str,
    directory: str = typer.Option(None, "--directory", "-d", help="Directory for budget files (default: current)"),
    net_pay_fraction: float = typer.Option(
        None, "--net-pay-fraction", help="Fraction of gross pay kept as take-home pay (e.g. 0.75)"
    ),
    overtime_threshold: float = typer.Option(
        None, "--overtime-threshold", help="Weekly hours worked before overtime pay applies"
    ),
    sort_by: str = typer.Option("alpha", help="Sort by 'alpha' or 'value'"),
) -> None:
    """Show the income, expenses, and remainder of a budget."""
    report_command(name, directory, net_pay_fraction, overtime_threshold, sort_by)


if __name__ == "__main__":
    app()
