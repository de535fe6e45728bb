"""
SQLite-backed store for job application records.

One table, `applications`. Dates are stored as ISO strings and interview
dates as a JSON list.
"""

import json
import logging
import sqlite3
import uuid
from contextlib import contextmanager
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union

from shared.schemas.application import (
    ApplicationCreate,
    ApplicationRecord,
    ApplicationStats,
    ApplicationUpdate,
    STATUS_LABELS,
    status_label,
)

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = "data/applications.db"

_DATE_FIELDS = ("date_applied", "follow_up_date")
_REQUIRED_FIELDS = ("company_name", "position", "status", "date_applied")


class ApplicationNotFoundError(LookupError):
    """No application exists with the requested id."""

    def __init__(self, application_id: str):
        self.application_id = application_id
        super().__init__(f"Application not found: {application_id}")


def _to_row(values: Dict[str, Any]) -> Dict[str, Any]:
    row = dict(values)
    for field in _DATE_FIELDS:
        if isinstance(row.get(field), date):
            row[field] = row[field].isoformat()
    if "interview_dates" in row:
        row["interview_dates"] = json.dumps([d.isoformat() for d in row["interview_dates"] or []])
    return row


def _from_row(row: sqlite3.Row) -> ApplicationRecord:
    data = dict(row)
    data["interview_dates"] = json.loads(data["interview_dates"]) if data["interview_dates"] else []
    return ApplicationRecord.model_validate(data)


class ApplicationStore:
    """CRUD operations over the applications table."""

    def __init__(self, db_path: Union[str, Path] = DEFAULT_DB_PATH):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.init_database()

    @contextmanager
    def get_connection(self) -> Iterator[sqlite3.Connection]:
        """Connection with dict-like rows; commits on success and always closes."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        try:
            with conn:
                yield conn
        finally:
            conn.close()

    def init_database(self) -> None:
        with self.get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS applications (
                    id TEXT PRIMARY KEY,
                    company_name TEXT NOT NULL,
                    position TEXT NOT NULL,
                    status TEXT NOT NULL DEFAULT 'applied',
                    date_applied TEXT NOT NULL,
                    salary TEXT,
                    notes TEXT,
                    career_page_url TEXT,
                    follow_up_date TEXT,
                    contact_person TEXT,
                    interview_dates TEXT,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)
            conn.execute("CREATE INDEX IF NOT EXISTS idx_applications_status ON applications(status)")
        logger.debug(f"Application tracker ready at {self.db_path}")

    def list_applications(self, status: Optional[str] = None) -> List[ApplicationRecord]:
        """All applications, most recently applied first."""
        query = "SELECT * FROM applications"
        params: List[Any] = []
        if status:
            query += " WHERE status = ?"
            params.append(status)
        query += " ORDER BY date_applied DESC, created_at DESC"

        with self.get_connection() as conn:
            return [_from_row(row) for row in conn.execute(query, params).fetchall()]

    def get_application(self, application_id: str) -> ApplicationRecord:
        with self.get_connection() as conn:
            row = conn.execute("SELECT * FROM applications WHERE id = ?", (application_id,)).fetchone()
        if row is None:
            raise ApplicationNotFoundError(application_id)
        return _from_row(row)

    def create_application(self, application: ApplicationCreate) -> ApplicationRecord:
        now = datetime.now().isoformat()
        row = _to_row(application.model_dump())
        row.update(id=str(uuid.uuid4()), created_at=now, updated_at=now)

        columns = ", ".join(row)
        placeholders = ", ".join("?" for _ in row)
        with self.get_connection() as conn:
            conn.execute(f"INSERT INTO applications ({columns}) VALUES ({placeholders})", list(row.values()))

        logger.info(f"Tracked application {row['id']}: {application.position} at {application.company_name}")
        return self.get_application(row["id"])

    def update_application(self, application_id: str, update: ApplicationUpdate) -> ApplicationRecord:
        """Write only the fields set on `update` and bump updated_at."""
        changes = {
            key: value
            for key, value in _to_row(update.model_dump(exclude_unset=True)).items()
            if value is not None or key not in _REQUIRED_FIELDS
        }
        changes["updated_at"] = datetime.now().isoformat()

        assignments = ", ".join(f"{column} = ?" for column in changes)
        with self.get_connection() as conn:
            cursor = conn.execute(
                f"UPDATE applications SET {assignments} WHERE id = ?",
                [*changes.values(), application_id],
            )
            if cursor.rowcount == 0:
                raise ApplicationNotFoundError(application_id)

        logger.info(f"Updated application {application_id}: {sorted(k for k in changes if k != 'updated_at')}")
        return self.get_application(application_id)

    def delete_application(self, application_id: str) -> None:
        with self.get_connection() as conn:
            cursor = conn.execute("DELETE FROM applications WHERE id = ?", (application_id,))
            if cursor.rowcount == 0:
                raise ApplicationNotFoundError(application_id)
        logger.info(f"Deleted application {application_id}")

    def get_stats(self) -> ApplicationStats:
        """Total count plus one count per status."""
        with self.get_connection() as conn:
            rows = conn.execute("SELECT status, COUNT(*) AS count FROM applications GROUP BY status").fetchall()

        counts = {status: 0 for status in STATUS_LABELS}
        for row in rows:
            counts[row["status"]] = row["count"]
        return ApplicationStats(
            total=sum(counts.values()),
            labels={status: status_label(status) for status in counts},
            **counts,
        )
