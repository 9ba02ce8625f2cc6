"""
Jobs Repository.

Responsibilities:
- CRUD operations for the jobs table.
- Mapping rows to plain job records.
- Committing writes.

Non-Responsibilities:
- No payload validation beyond which columns may change.
- No retries or wrapping of driver errors.

Invariant:
Every statement is parameterized; values never reach the SQL text.
"""

from typing import Any, Dict, List, Mapping, Optional, Tuple

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..errors import AppError, BadRequestError, NotFoundError
from ..logger import get_logger
from ..sql import bind_params, placeholder, sql_for_partial_update

JOB_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'
UPDATABLE_FIELDS = ("title", "salary", "equity")


def _equity_param(equity: Any) -> Optional[str]:
    # Bound as text so Decimal inputs reach the driver. Postgres NUMERIC keeps the
    # exact digits; SQLite stores a float, so "0.10" comes back as "0.1".
    return None if equity is None else str(equity)


def _record_error(error: AppError) -> AppError:
    logger = get_logger()
    logger.record_error(type(error).__name__)
    logger.warning(error.message, status=error.status)
    return error


def _to_record(row: Mapping[str, Any]) -> Dict[str, Any]:
    job = dict(row)
    if job.get("equity") is not None:
        job["equity"] = str(job["equity"])
    return job


class JobRepository:
    """Data access for jobs, bound to a caller-owned session."""

    def __init__(self, session: Session):
        self.session = session

    def _execute(self, operation: str, sql: str, values: List[Any]):
        get_logger().record_query(operation)
        return self.session.execute(text(sql), bind_params(values))

    def create(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Create a job from `data` and return the new record.

        data should be { title, salary, equity, companyHandle };
        salary and equity may be omitted.

        Returns { id, title, salary, equity, companyHandle }

        Raises:
            BadRequestError: If companyHandle does not name a company

        Driver errors from the insert roll the session back and propagate.
        """
        company_handle = data.get("companyHandle")
        company = self._execute(
            "create",
            """SELECT handle
               FROM companies
               WHERE handle = :p1""",
            [company_handle],
        ).first()
        if company is None:
            raise _record_error(BadRequestError(f"Company does not exist: {company_handle}"))

        try:
            row = self._execute(
                "create",
                f"""INSERT INTO jobs
                        (title, salary, equity, company_handle)
                    VALUES (:p1, :p2, :p3, :p4)
                    RETURNING {JOB_COLUMNS}""",
                [
                    data.get("title"),
                    data.get("salary"),
                    _equity_param(data.get("equity")),
                    company_handle,
                ],
            ).mappings().first()
        except SQLAlchemyError:
            self.session.rollback()
            raise

        job = _to_record(row)
        self.session.commit()

        get_logger().info("Created job", id=job["id"], company_handle=company_handle)
        return job

    def find_all(self) -> List[Dict[str, Any]]:
        """Return every job, ordered by title."""
        rows = self._execute(
            "find_all",
            f"""SELECT {JOB_COLUMNS}
                FROM jobs
                ORDER BY title""",
            [],
        ).mappings().all()
        return [_to_record(row) for row in rows]

    def get(self, job_id: int) -> Dict[str, Any]:
        """
        Return the job with `job_id`.

        Raises:
            NotFoundError: If there is no such job
        """
        row = self._execute(
            "get",
            f"""SELECT {JOB_COLUMNS}
                FROM jobs
                WHERE id = :p1""",
            [job_id],
        ).mappings().first()

        if row is None:
            raise _record_error(NotFoundError(f"No job: {job_id}"))

        return _to_record(row)

    def update(self, job_id: int, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Partially update a job; only the fields present in `data` change.

        Data can include: { title, salary, equity }

        Returns { id, title, salary, equity, companyHandle }

        Raises:
            BadRequestError: If `data` is empty or names another field
            NotFoundError: If there is no such job
        """
        disallowed = sorted(set(data) - set(UPDATABLE_FIELDS))
        if disallowed:
            raise _record_error(BadRequestError(f"Cannot update fields: {', '.join(disallowed)}"))

        changes = dict(data)
        if "equity" in changes:
            changes["equity"] = _equity_param(changes["equity"])

        try:
            set_cols, values = sql_for_partial_update(changes)
        except BadRequestError as e:
            raise _record_error(e)
        id_placeholder = placeholder(len(values) + 1)

        row = self._execute(
            "update",
            f"""UPDATE jobs
                SET {set_cols}
                WHERE id = {id_placeholder}
                RETURNING {JOB_COLUMNS}""",
            [*values, job_id],
        ).mappings().first()

        if row is None:
            self.session.rollback()
            raise _record_error(NotFoundError(f"No job: {job_id}"))

        job = _to_record(row)
        self.session.commit()

        get_logger().info("Updated job", id=job_id, fields=list(changes))
        return job

    def remove(self, job_id: int) -> bool:
        """
        Delete the job with `job_id`. Returns True once deleted.

        Raises:
            NotFoundError: If there is no such job
        """
        row = self._execute(
            "remove",
            """DELETE
               FROM jobs
               WHERE id = :p1
               RETURNING id""",
            [job_id],
        ).first()

        if row is None:
            self.session.rollback()
            raise _record_error(NotFoundError(f"No job: {job_id}"))

        self.session.commit()

        get_logger().info("Removed job", id=job_id)
        return True

    @staticmethod
    def _sql_for_partial_filter(filters: Optional[Mapping[str, Any]] = None) -> Tuple[str, List[Any]]:
        """
        Translate company-style filters into a WHERE clause.

        Takes in:
            filters: mapping that may contain minEmployees, maxEmployees, name

        Returns:
            where_clause: "WHERE ..." joining the recognized filters with AND,
                          or "" when none is present
            values: values for the clause's placeholders, in order

        Example:
            {"minEmployees": 4, "name": "net"}
            -> ("WHERE num_employees >= :p1 AND name ILIKE :p2", [4, "%net%"])

        Raises:
            BadRequestError: If minEmployees is larger than maxEmployees
        """
        filters = filters or {}
        min_employees = filters.get("minEmployees")
        max_employees = filters.get("maxEmployees")
        name = filters.get("name")

        if min_employees is not None and max_employees is not None:
            try:
                inverted = float(min_employees) > float(max_employees)
            except (TypeError, ValueError):
                raise _record_error(BadRequestError(
                    f"Employee bounds must be numeric: {min_employees}, {max_employees}"
                ))
            if inverted:
                raise _record_error(BadRequestError(
                    f"Min employees: {min_employees} cannot be larger than "
                    f"max employees: {max_employees}"
                ))

        where_clauses = []
        values = []

        if min_employees is not None:
            values.append(min_employees)
            where_clauses.append(f"num_employees >= {placeholder(len(values))}")

        if max_employees is not None:
            values.append(max_employees)
            where_clauses.append(f"num_employees <= {placeholder(len(values))}")

        if name is not None:
            values.append(f"%{name}%")
            where_clauses.append(f"name ILIKE {placeholder(len(values))}")

        if not where_clauses:
            return "", []

        return "WHERE " + " AND ".join(where_clauses), values
