"""Budget files: one JSON document per budget, named ``<name>.budget``."""

import json
import os
import tempfile
from pathlib import Path

from loguru import logger

from budgetbuddy.domain.budget import Budget, budget_from_record, budget_to_record
from budgetbuddy.domain.errors import BudgetFormatError, DecodeError, StorageError

BUDGET_SUFFIX = ".budget"


def get_budget_path(name: str, budget_dir: Path | None = None) -> Path:
    """Get the file path for a budget.

    Args:
        name: Budget name.
        budget_dir: Directory holding budget files. If None, uses the current directory.

    Returns:
        Path to the budget file.
    """
    if budget_dir is None:
        budget_dir = Path.cwd()
    return budget_dir / f"{name}{BUDGET_SUFFIX}"


def budget_exists(name: str, budget_dir: Path | None = None) -> bool:
    return get_budget_path(name, budget_dir).exists()


def load_budget(name: str, budget_dir: Path | None = None) -> Budget:
    """Load a budget from disk.

    Args:
        name: Budget name.
        budget_dir: Directory holding budget files. If None, uses the current directory.

    Returns:
        The stored budget.

    Raises:
        StorageError: If the file is missing or unreadable.
        BudgetFormatError: If the file is not a valid budget.
    """
    path = get_budget_path(name, budget_dir)
    logger.debug("Loading budget from {}", path)

    try:
        with open(path, encoding="utf-8") as f:
            record = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning("Budget file {} is not valid JSON: {}", path, e)
        raise BudgetFormatError(f"{path} is not valid JSON: {e}") from e
    except OSError as e:
        raise StorageError(f"Could not read {path}: {e.strerror or e}") from e

    try:
        return budget_from_record(name, record)
    except DecodeError as e:
        logger.warning("Budget file {} could not be decoded: {}", path, e)
        raise BudgetFormatError(f"{path} is not a valid budget: {e}") from e


def save_budget(budget: Budget, budget_dir: Path | None = None) -> Path:
    """Save a budget to disk, replacing any previous version.

    The record is written to a temporary file next to the target and then
    moved into place, so a failed save never leaves a truncated budget.

    Args:
        budget: Budget to save.
        budget_dir: Directory holding budget files. If None, uses the current directory.

    Returns:
        Path the budget was written to.

    Raises:
        StorageError: If the file cannot be written.
    """
    path = get_budget_path(budget.name, budget_dir)
    logger.debug("Saving budget to {}", path)

    record = budget_to_record(budget)
    temp_path: Path | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=path.parent, prefix=f".{path.name}.", delete=False
        ) as f:
            temp_path = Path(f.name)
            json.dump(record, f, indent="\t")
            f.write("\n")
        os.replace(temp_path, path)
    except OSError as e:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        raise StorageError(f"Could not write {path}: {e.strerror or e}") from e

    return path
