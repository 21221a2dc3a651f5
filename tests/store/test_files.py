"""Tests for budgetbuddy.store.files."""

import json
import math
from pathlib import Path

import pytest

from budgetbuddy.domain.budget import create_budget
from budgetbuddy.domain.errors import BudgetFormatError, IncomeDecodeError, StorageError
from budgetbuddy.domain.income import Commissions, Salary, Wages
from budgetbuddy.domain.models import ExpenseName, IncomeName
from budgetbuddy.domain.quantity import Money, Number, Percentage
from budgetbuddy.store import budget_exists, get_budget_path, load_budget, save_budget


class TestGetBudgetPath:
    """Tests for get_budget_path."""

    def test_appends_suffix(self, tmp_path: Path) -> None:
        """Should name the file after the budget."""
        assert get_budget_path("household", tmp_path) == tmp_path / "household.budget"

    def test_defaults_to_current_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should use the working directory when none is given."""
        monkeypatch.chdir(tmp_path)

        assert get_budget_path("household") == tmp_path / "household.budget"


class TestSaveAndLoad:
    """Tests for save_budget and load_budget."""

    def test_round_trip(self, tmp_path: Path) -> None:
        """Should load exactly what was saved."""
        budget = create_budget("household")
        budget.income[IncomeName("Shop")] = Wages(rate=Money(10.0), hours=Number(50.0))
        budget.income[IncomeName("Realty")] = Commissions(rate=Percentage(0.06), volume=(Money(25000.0),))
        budget.expenses[ExpenseName("Rent")] = Money(1200.0)

        path = save_budget(budget, tmp_path)
        loaded = load_budget("household", tmp_path)

        assert path == tmp_path / "household.budget"
        assert loaded == budget
        assert budget_exists("household", tmp_path)

    def test_writes_plain_json(self, tmp_path: Path) -> None:
        """Should store income fields and plain expense numbers."""
        budget = create_budget("household")
        budget.income[IncomeName("Office")] = Salary(salary=Money(48000.0))
        budget.expenses[ExpenseName("Rent")] = Money(1200.0)

        path = save_budget(budget, tmp_path)

        assert json.loads(path.read_text()) == {
            "income": {"Office": {"salary": 48000.0}},
            "expenses": {"Rent": 1200.0},
        }

    def test_overwrites_previous_save(self, tmp_path: Path) -> None:
        """Should fully replace the stored budget."""
        budget = create_budget("household")
        budget.expenses[ExpenseName("Rent")] = Money(1200.0)
        save_budget(budget, tmp_path)

        replacement = create_budget("household")
        replacement.expenses[ExpenseName("Food")] = Money(300.0)
        save_budget(replacement, tmp_path)

        assert load_budget("household", tmp_path).expenses == {"Food": Money(300.0)}

    def test_leaves_no_temporary_files(self, tmp_path: Path) -> None:
        """Should only leave the budget file behind."""
        save_budget(create_budget("household"), tmp_path)

        assert [p.name for p in tmp_path.iterdir()] == ["household.budget"]

    def test_creates_missing_directory(self, tmp_path: Path) -> None:
        """Should create the budget directory if needed."""
        budget_dir = tmp_path / "budgets" / "2026"

        save_budget(create_budget("household"), budget_dir)

        assert (budget_dir / "household.budget").exists()

    def test_keeps_special_values(self, tmp_path: Path) -> None:
        """Should store and load NaN amounts."""
        budget = create_budget("household")
        budget.expenses[ExpenseName("Unknown")] = Money(math.nan)
        save_budget(budget, tmp_path)

        assert load_budget("household", tmp_path).expenses["Unknown"].is_nan()

    def test_save_failure(self, tmp_path: Path) -> None:
        """Should raise StorageError when the directory cannot be used."""
        blocker = tmp_path / "not-a-directory"
        blocker.write_text("")

        with pytest.raises(StorageError):
            save_budget(create_budget("household"), blocker)


class TestLoadBudgetErrors:
    """Tests for load_budget failures."""

    def test_missing_file(self, tmp_path: Path) -> None:
        """Should raise StorageError for a missing budget."""
        with pytest.raises(StorageError):
            load_budget("ghost", tmp_path)

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Should raise BudgetFormatError for broken JSON."""
        (tmp_path / "broken.budget").write_text("{not json")

        with pytest.raises(BudgetFormatError):
            load_budget("broken", tmp_path)

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        """Should raise BudgetFormatError for bytes that are not UTF-8."""
        (tmp_path / "garbled.budget").write_bytes(b'{"income": {"\xff": {"money": 1}}, "expenses": {}}')

        with pytest.raises(BudgetFormatError):
            load_budget("garbled", tmp_path)

    def test_unrecognized_income(self, tmp_path: Path) -> None:
        """Should raise BudgetFormatError caused by the income decode failure."""
        (tmp_path / "odd.budget").write_text(json.dumps({"income": {"Job": {"hourly": 10}}, "expenses": {}}))

        with pytest.raises(BudgetFormatError) as exc_info:
            load_budget("odd", tmp_path)

        assert isinstance(exc_info.value.__cause__, IncomeDecodeError)

    def test_reads_tab_indented_files(self, tmp_path: Path) -> None:
        """Should read budgets written by earlier versions."""
        (tmp_path / "legacy.budget").write_text(
            '{\n\t"income": {\n\t\t"Job": {\n\t\t\t"rate": 9,\n\t\t\t"hours": 50\n\t\t}\n\t},\n'
            '\t"expenses": {\n\t\t"Rent": 800\n\t}\n}\n'
        )

        budget = load_budget("legacy", tmp_path)

        assert budget.income == {"Job": Wages(rate=Money(9.0), hours=Number(50.0))}
        assert budget.expenses == {"Rent": Money(800.0)}
