"""Report command for reviewing a saved budget."""

import sys

from rich.console import Console
from rich.table import Table

from budgetbuddy.config import get_budget_dir, load_config, settings_from_config
from budgetbuddy.domain.errors import BudgetFormatError, ConfigError, StorageError
from budgetbuddy.domain.quantity import Money
from budgetbuddy.domain.report import SORT_ORDERS, ListReport, SummaryReport, create_budget_report
from budgetbuddy.store import get_budget_path, load_budget

console = Console()


def format_amount_with_color(amount: Money) -> str:
    """Format an amount, red when negative or unknown."""
    if amount.is_nan() or amount < 0:
        return f"[red]{amount}[/red]"
    return f"{amount}"


def render_list_table(report: ListReport) -> Table:
    """Build the table for an income or expense list.

    Args:
        report: ListReport to render.

    Returns:
        Table with one row per line and the total as footer.
    """
    show_kind = any(line.kind for line in report.lines)

    table = Table(title=report.title, show_footer=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", footer="Total", style="white", min_width=20)
    if show_kind:
        table.add_column("Type", style="magenta")
    table.add_column("Amount", footer=format_amount_with_color(report.total), justify="right")

    for line in report.lines:
        cells = [str(line.index), line.name]
        if show_kind:
            cells.append(line.kind or "")
        cells.append(format_amount_with_color(line.amount))
        table.add_row(*cells)

    return table


def render_summary_table(summary: SummaryReport) -> Table:
    table = Table(title="Summary")
    table.add_column("Income", justify="right", style="green")
    table.add_column("Expenses", justify="right")
    table.add_column("Remaining", justify="right")

    remaining = summary.remaining
    remaining_display = f"[green]{remaining}[/green]" if remaining >= 0 else f"[red]{remaining}[/red]"
    table.add_row(f"{summary.income}", f"{summary.expenses}", remaining_display)

    return table


def report_command(
    name: str,
    directory: str | None = None,
    net_pay_fraction: float | None = None,
    overtime_threshold: float | None = None,
    sort_by: str = "alpha",
) -> None:
    """Load a budget and print its income, expenses, and summary."""
    if sort_by not in SORT_ORDERS:
        console.print(f"[red]Invalid sort order '{sort_by}'. Use one of: {', '.join(SORT_ORDERS)}[/red]")
        sys.exit(1)

    try:
        config = load_config()
        settings = settings_from_config(
            config,
            net_pay_fraction=net_pay_fraction,
            overtime_threshold=overtime_threshold,
        )
        budget_dir = get_budget_dir(config, directory)
    except ConfigError as e:
        console.print(f"[red]Configuration error: {e}[/red]", style="bold")
        sys.exit(1)

    try:
        budget = load_budget(name, budget_dir)
    except (StorageError, BudgetFormatError) as e:
        path = get_budget_path(name, budget_dir)
        console.print(f'[red]Could not load budget "{path.name}"[/red]', style="bold")
        console.print(f"[dim]{e}[/dim]")
        sys.exit(1)

    report = create_budget_report(budget, settings, sort_by)

    console.print(render_list_table(report.income))
    console.print()
    console.print(render_list_table(report.expenses))
    console.print()
    console.print(render_summary_table(report.summary))
