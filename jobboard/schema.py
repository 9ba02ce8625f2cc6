import re
from typing import Any, Dict, List

NEW_JOB_REQUIRED_FIELDS = ["title", "companyHandle"]
UPDATE_JOB_FIELDS = ["title", "salary", "equity"]
NEW_JOB_FIELDS = NEW_JOB_REQUIRED_FIELDS + ["salary", "equity"]

EQUITY_PATTERN = re.compile(r"^(0|0?\.[0-9]+|1(\.0+)?)$")


def _is_non_empty_str(v: Any) -> bool:
    return isinstance(v, str) and v.strip() != ""


def _check_optional_fields(data: Dict[str, Any], errors: List[str]) -> None:
    if "title" in data and not _is_non_empty_str(data["title"]):
        errors.append("Field 'title' must be a non-empty string")

    salary = data.get("salary")
    if salary is not None:
        if isinstance(salary, bool) or not isinstance(salary, int):
            errors.append("Field 'salary' must be an integer if provided")
        elif salary < 0:
            errors.append("Field 'salary' must not be negative")

    equity = data.get("equity")
    if equity is not None:
        if not isinstance(equity, str) or not EQUITY_PATTERN.match(equity):
            errors.append("Field 'equity' must be a numeric string between 0 and 1")


def validate_job_new(data: Dict[str, Any]) -> List[str]:
    """
    Returns a list of validation error messages for a new job.
    Empty list means valid.
    """
    errors: List[str] = []

    for f in NEW_JOB_REQUIRED_FIELDS:
        if f not in data:
            errors.append(f"Missing required field: {f}")
        elif not _is_non_empty_str(data[f]):
            errors.append(f"Field '{f}' must be a non-empty string")

    _check_optional_fields(data, errors)

    for f in sorted(set(data) - set(NEW_JOB_FIELDS)):
        errors.append(f"Unknown field: {f}")

    return errors


def validate_job_update(data: Dict[str, Any]) -> List[str]:
    """
    Returns a list of validation error messages for a job update.
    Only title, salary and equity may change.
    """
    errors: List[str] = []

    if not data:
        errors.append("No fields to update")

    for f in sorted(set(data) - set(UPDATE_JOB_FIELDS)):
        errors.append(f"Field '{f}' cannot be updated")

    _check_optional_fields(data, errors)

    return errors
