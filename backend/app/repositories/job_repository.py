"""
Job Repository - job data access over parameterized SQL
"""
from enum import Enum
from typing import Any, Dict, List, Mapping, NamedTuple, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncConnection

from app.core.errors import BadRequestError, NotFoundError
from app.core.logging import logger
from app.schemas.job import JobResponse
from app.utils.sql import build_set_fragment


class JobField(str, Enum):
    """Updatable job fields by their API name"""
    TITLE = "title"
    SALARY = "salary"
    EQUITY = "equity"
    COMPANY_HANDLE = "companyHandle"


# API name -> column, only where they differ
JOB_COLUMNS: Dict[JobField, str] = {
    JobField.COMPANY_HANDLE: "company_handle",
}


class JobFilterKey(str, Enum):
    """Recognized job listing filters"""
    TITLE = "title"
    MIN_SALARY = "minSalary"
    HAS_EQUITY = "hasEquity"


class FilterClause(NamedTuple):
    where_clause: str
    values: List[Any]


JOB_COLUMNS_SQL = 'id, title, salary, equity, company_handle AS "companyHandle"'


def _parse_enum_keys(data: Mapping[str, Any], enum_cls, label: str) -> Dict[Any, Any]:
    parsed = {}
    for key, value in data.items():
        try:
            parsed[enum_cls(key)] = value
        except ValueError:
            raise BadRequestError(f"Unrecognized {label}: {key}") from None
    return parsed


def build_filter_clause(query: Mapping[str, Any]) -> FilterClause:
    """
    Build the WHERE predicates for a job listing.

    - title: case-insensitive substring match
    - minSalary: salary >= minSalary
    - hasEquity: only when true, equity > 0 (false means no equity filter)

    Predicates are joined with AND; placeholders follow the order of `query`.
    `where_clause` is empty when no key contributes a predicate, in which case
    the caller must run the unfiltered query instead.
    """
    if not query:
        raise ValueError("build_filter_clause requires at least one filter")

    filters = _parse_enum_keys(query, JobFilterKey, "filter")

    predicates = []
    values = []
    for key, value in filters.items():
        if key is JobFilterKey.TITLE:
            values.append(value)
            predicates.append(f"\"title\" ILIKE '%' || ${len(values)} || '%'")
        elif key is JobFilterKey.MIN_SALARY:
            values.append(value)
            predicates.append(f'"salary" >= ${len(values)}')
        elif key is JobFilterKey.HAS_EQUITY and value is True:
            values.append(0)
            predicates.append(f'"equity" > ${len(values)}')

    return FilterClause(" AND ".join(predicates), values)


class JobRepository:
    """Job data access layer"""

    def __init__(self, db: AsyncConnection):
        self.db = db

    async def _fetch(self, sql: str, values: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        result = await self.db.exec_driver_sql(sql, tuple(values))
        return [dict(row) for row in result.mappings().all()]

    async def find_all(self, filters: Optional[Mapping[str, Any]] = None) -> List[JobResponse]:
        """
        Find all jobs, optionally filtered by title, minSalary and hasEquity.

        Returns [JobResponse, ...] in storage order.
        """
        sql = f"SELECT {JOB_COLUMNS_SQL} FROM jobs"
        values: List[Any] = []

        if filters:
            where_clause, values = build_filter_clause(filters)
            if where_clause:
                sql = f"{sql} WHERE {where_clause}"

        rows = await self._fetch(sql, values)
        logger.debug(f"Found {len(rows)} jobs (filters={dict(filters or {})})")
        return [JobResponse.model_validate(row) for row in rows]

    async def create(
        self,
        title: str,
        company_handle: str,
        salary: Optional[int] = None,
        equity: Any = None,
    ) -> JobResponse:
        """
        Create a job and return it with its generated id.

        A missing company surfaces as the driver's foreign key error.
        """
        rows = await self._fetch(
            f"""INSERT INTO jobs (title, salary, equity, company_handle)
                VALUES ($1, $2, $3, $4)
                RETURNING {JOB_COLUMNS_SQL}""",
            [title, salary, equity, company_handle],
        )
        job = JobResponse.model_validate(rows[0])
        logger.info(f"Created job {job.id} for company {job.company_handle}")
        return job

    async def get(self, job_id: int) -> JobResponse:
        """Get a job by id; raises NotFoundError"""
        rows = await self._fetch(
            f"SELECT {JOB_COLUMNS_SQL} FROM jobs WHERE id = $1",
            [job_id],
        )
        if not rows:
            raise NotFoundError(f"No job: {job_id}")
        return JobResponse.model_validate(rows[0])

    async def update(self, job_id: int, data: Mapping[str, Any]) -> JobResponse:
        """
        Partially update a job: only the fields present in `data` change.

        Data can include: {title, salary, equity}. Raises BadRequestError when
        `data` is empty and NotFoundError when the job does not exist.
        """
        fields = _parse_enum_keys(data, JobField, "field")
        set_clause, values = build_set_fragment(fields, JOB_COLUMNS)
        id_index = len(values) + 1

        rows = await self._fetch(
            f"""UPDATE jobs SET {set_clause}
                WHERE id = ${id_index}
                RETURNING {JOB_COLUMNS_SQL}""",
            [*values, job_id],
        )
        if not rows:
            raise NotFoundError(f"No job: {job_id}")

        logger.info(f"Updated job {job_id}: {', '.join(f.value for f in fields)}")
        return JobResponse.model_validate(rows[0])

    async def remove(self, job_id: int) -> None:
        """Delete a job; raises NotFoundError"""
        rows = await self._fetch(
            "DELETE FROM jobs WHERE id = $1 RETURNING id",
            [job_id],
        )
        if not rows:
            raise NotFoundError(f"No job: {job_id}")
        logger.info(f"Deleted job {job_id}")
