"""Create command: interactively survey income and expenses into a new budget."""

import sys
from collections.abc import Collection
from typing import Any

import typer
from rich.console import Console

from budgetbuddy.config import get_budget_dir, load_config, settings_from_config
from budgetbuddy.domain.budget import Budget, create_budget
from budgetbuddy.domain.errors import ConfigError, StorageError, ValidationError
from budgetbuddy.domain.expense import ExpenseList
from budgetbuddy.domain.income import INCOME_KINDS, Income, IncomeField, IncomeKind, IncomeList
from budgetbuddy.domain.models import BudgetSettings, ExpenseName, IncomeName
from budgetbuddy.domain.quantity import Integer, Money, Number, Percentage, Quantity
from budgetbuddy.domain.validators import Validator, quantity_validator, required
from budgetbuddy.store import get_budget_path, save_budget

console = Console()

UNIT_HINTS: dict[type[Quantity], str] = {
    Money: "($)",
    Number: "(#)",
    Integer: "(@)",
    Percentage: "(%)",
}

MINIMUM_EXPENSE = 0.01


def prompt_quantity(label: str, kind: type[Quantity], validator: Validator) -> Quantity:
    """Prompt until the answer passes validation, then parse it.

    Args:
        label: Prompt text, without the unit hint.
        kind: Quantity kind to parse the answer as.
        validator: Validator the raw answer must pass.

    Returns:
        Parsed quantity.
    """

    def process(answer: str) -> Quantity:
        try:
            validator(answer)
        except ValidationError as e:
            raise typer.BadParameter(str(e)) from e
        return kind.new(answer)

    result: Quantity = typer.prompt(f"{label} {UNIT_HINTS[kind]}", value_proc=process)
    return result


def prompt_name(label: str, taken: Collection[str]) -> str:
    """Prompt for a non-empty name that is not already taken.

    Args:
        label: Prompt text.
        taken: Names already used in the same list.

    Returns:
        Name with surrounding whitespace removed.
    """

    def process(answer: str) -> str:
        name = answer.strip()
        try:
            required(name)
        except ValidationError as e:
            raise typer.BadParameter(str(e)) from e
        if name in taken:
            raise typer.BadParameter(f"{name} is already in this budget.")
        return name

    result: str = typer.prompt(label, value_proc=process)
    return result


def prompt_income_kind() -> IncomeKind:
    """Display the income types and prompt for one, by number or by name."""
    names = sorted(INCOME_KINDS)

    console.print("[cyan]Types of income:[/cyan]")
    for idx, name in enumerate(names, 1):
        console.print(f"  {idx}. {name}")

    def process(answer: str) -> IncomeKind:
        choice = answer.strip()
        if choice.isdigit() and 1 <= int(choice) <= len(names):
            return INCOME_KINDS[names[int(choice) - 1]]
        for name in names:
            if name.lower() == choice.lower():
                return INCOME_KINDS[name]
        raise typer.BadParameter(f"Choose 1-{len(names)} or the name of a type.")

    result: IncomeKind = typer.prompt(f"Type of income (1-{len(names)})", value_proc=process)
    return result


def ask_income_field(income_field: IncomeField, settings: BudgetSettings) -> Any:
    """Ask for one income field, looping over items for repeated fields."""
    validator = quantity_validator(income_field.kind, income_field.lower_bound(settings))

    if not income_field.repeated:
        return prompt_quantity(income_field.label, income_field.kind, validator)

    console.print(f"[green]?[/green] Please enter each {income_field.label.lower()} that made commissions:")
    items: list[Quantity] = []
    done = False
    while not done:
        items.append(prompt_quantity(f"    {income_field.label} #{len(items) + 1}", income_field.kind, validator))
        done = typer.confirm("    Are you finished entering all items?", default=False)
    return items


def ask_income(kind: IncomeKind, settings: BudgetSettings) -> Income:
    answers = {income_field.name: ask_income_field(income_field, settings) for income_field in kind.fields}
    return kind.build(answers)


def ask_income_list(income: IncomeList, settings: BudgetSettings) -> None:
    """Ask for sources of income until the user is finished."""
    console.print("[underline]Income[/underline]")
    done = False
    while not done:
        title = f"{Integer.make(len(income) + 1).ordinal()} Source Of Income"
        console.print(f"[italic]{title}[/italic]")

        name = prompt_name("Name of income", income)
        kind = prompt_income_kind()
        income[IncomeName(name)] = ask_income(kind, settings)

        done = typer.confirm("Are you finished entering all of your sources of income?", default=False)
        console.print()


def ask_expense_list(expenses: ExpenseList) -> None:
    """Ask for expenses until the user is finished."""
    validator = quantity_validator(Money, MINIMUM_EXPENSE)

    console.print("[underline]Expenses[/underline]")
    done = False
    while not done:
        title = f"{Integer.make(len(expenses) + 1).ordinal()} Expense"
        console.print(f"[italic]{title}[/italic]")

        name = prompt_name("Name of expense", expenses)
        amount = prompt_quantity("Cost of expense", Money, validator)
        expenses[ExpenseName(name)] = Money.new(amount)

        done = typer.confirm("Are you finished entering all of your expenses?", default=False)
        console.print()


def ask_budget(budget: Budget, settings: BudgetSettings) -> None:
    """Survey income, then expenses, into the budget."""
    ask_income_list(budget.income, settings)
    ask_expense_list(budget.expenses)


def create_command(
    name: str,
    directory: str | None = None,
    minimum_wage: float | None = None,
    overtime_threshold: float | None = None,
    force: bool = False,
) -> None:
    """Interactively create a budget and save it."""
    try:
        config = load_config()
        settings = settings_from_config(config, minimum_wage=minimum_wage, overtime_threshold=overtime_threshold)
        budget_dir = get_budget_dir(config, directory)
    except ConfigError as e:
        console.print(f"[red]Configuration error: {e}[/red]", style="bold")
        sys.exit(1)

    path = get_budget_path(name, budget_dir)
    if path.exists() and not force:
        console.print(f"[red]Budget already exists: {path}[/red]", style="bold")
        console.print(f"\n[yellow]Use 'budgetbuddy create {name} --force' to overwrite[/yellow]")
        sys.exit(1)

    budget = create_budget(name)
    try:
        ask_budget(budget, settings)
    except typer.Abort:
        console.print("\n[red]Aborted budget creation[/red]")
        sys.exit(0)

    try:
        saved_path = save_budget(budget, budget_dir)
    except StorageError as e:
        console.print(f"[red]Could not save budget: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] Budget saved to: {saved_path}")
