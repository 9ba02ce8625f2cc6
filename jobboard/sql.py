"""
Helpers for building parameterized SQL fragments.

Placeholders are numbered (`:p1`, `:p2`, ...) so that fragments can be
concatenated and the positional values list turned into bind parameters
with `bind_params`.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from .errors import BadRequestError


def placeholder(index: int) -> str:
    """Return the bind placeholder for the 1-based position `index`."""
    return f":p{index}"


def bind_params(values: Sequence[Any]) -> Dict[str, Any]:
    """Map positional values onto the names used by `placeholder`."""
    return {f"p{i}": v for i, v in enumerate(values, start=1)}


def column_assignments(
    data: Mapping[str, Any],
    js_to_sql: Optional[Mapping[str, str]] = None,
) -> List[Tuple[str, str, Any]]:
    """
    Translate a mapping of fields into (column, placeholder, value) triples.

    Args:
        data: Field names and their new values, in the order to emit them
        js_to_sql: Field name to column name, for fields whose column differs
            (e.g. {"companyHandle": "company_handle"})

    Returns:
        One triple per field, placeholders numbered from 1
    """
    js_to_sql = js_to_sql or {}
    return [
        (js_to_sql.get(key, key), placeholder(idx), value)
        for idx, (key, value) in enumerate(data.items(), start=1)
    ]


def sql_for_partial_update(
    data: Mapping[str, Any],
    js_to_sql: Optional[Mapping[str, str]] = None,
) -> Tuple[str, List[Any]]:
    """
    Build the SET portion of an UPDATE for the fields present in `data`.

    Example:
        sql_for_partial_update({"title": "Dev", "salary": 10})
        -> ('"title"=:p1, "salary"=:p2', ["Dev", 10])

    Raises:
        BadRequestError: If `data` is empty
    """
    if not data:
        raise BadRequestError("No data")

    triples = column_assignments(data, js_to_sql)
    set_cols = ", ".join(f'"{col}"={ph}' for col, ph, _ in triples)
    return set_cols, [value for _, _, value in triples]
