"""SQLite persistence helpers for solved equations."""

from __future__ import annotations

import json
import sqlite3
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Mapping

from molbalance.errors import NotAuthorizedError, RecordNotFoundError
from molbalance.service import SolvedEquation

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS solved_equation (
  id INTEGER PRIMARY KEY,
  user_id TEXT NOT NULL,
  input_equation TEXT NOT NULL,
  balanced_equation TEXT NOT NULL,
  molecules JSON NOT NULL,
  molecule_data JSON NOT NULL,
  created_utc TEXT
);
CREATE INDEX IF NOT EXISTS solved_equation_user ON solved_equation (user_id, created_utc);
"""


@dataclass(frozen=True)
class StoredEquation:
    id: int
    user_id: str
    input_equation: str
    balanced_equation: str
    molecules: List[str]
    molecule_data: Dict[str, Any]
    created_utc: str

    def as_payload(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "inputEquation": self.input_equation,
            "balancedEquation": self.balanced_equation,
            "molecules": self.molecules,
            "moleculeData": self.molecule_data,
            "createdAt": self.created_utc,
        }


def connect(db_file: str | Path) -> sqlite3.Connection:
    """Open (and create) a history database."""
    path = Path(db_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    connection = sqlite3.connect(path)
    connection.row_factory = sqlite3.Row
    return connection


def ensure_schema(connection: sqlite3.Connection) -> None:
    connection.executescript(SCHEMA_SQL)
    connection.commit()


def save_solved_equation(
    connection: sqlite3.Connection,
    user_id: str,
    solved: SolvedEquation,
    created_utc: str | None = None,
) -> int:
    """Persist a solved equation owned by ``user_id`` and return its ID."""
    created_utc = created_utc or _utc_now()
    payload = solved.as_payload()
    cursor = connection.execute(
        "INSERT INTO solved_equation"
        " (user_id, input_equation, balanced_equation, molecules, molecule_data, created_utc)"
        " VALUES (?, ?, ?, ?, ?, ?)",
        (
            user_id,
            solved.input_equation,
            solved.balanced.equation,
            json.dumps(payload["molecules"], ensure_ascii=False),
            _json_dumps(payload["moleculeData"]),
            created_utc,
        ),
    )
    connection.commit()
    return int(cursor.lastrowid)


def list_history(connection: sqlite3.Connection, user_id: str) -> List[StoredEquation]:
    """Return every equation owned by ``user_id``, newest first."""
    rows = connection.execute(
        "SELECT * FROM solved_equation WHERE user_id = ? ORDER BY created_utc DESC, id DESC",
        (user_id,),
    ).fetchall()
    return [_from_row(row) for row in rows]


def get_solved_equation(connection: sqlite3.Connection, record_id: int, user_id: str) -> StoredEquation:
    """Fetch one record, checking that ``user_id`` owns it.

    Raises:
        RecordNotFoundError: no record has this ID.
        NotAuthorizedError: the record belongs to another user.
    """
    row = connection.execute("SELECT * FROM solved_equation WHERE id = ?", (record_id,)).fetchone()
    if row is None:
        raise RecordNotFoundError(f"Equation {record_id} not found")
    if row["user_id"] != user_id:
        raise NotAuthorizedError(f"User not authorized to access equation {record_id}")
    return _from_row(row)


def delete_solved_equation(connection: sqlite3.Connection, record_id: int, user_id: str) -> None:
    """Delete one record after the same ownership check as :func:`get_solved_equation`."""
    get_solved_equation(connection, record_id, user_id)
    connection.execute("DELETE FROM solved_equation WHERE id = ?", (record_id,))
    connection.commit()


def _from_row(row: sqlite3.Row) -> StoredEquation:
    return StoredEquation(
        id=int(row["id"]),
        user_id=row["user_id"],
        input_equation=row["input_equation"],
        balanced_equation=row["balanced_equation"],
        molecules=json.loads(row["molecules"]),
        molecule_data=json.loads(row["molecule_data"]),
        created_utc=row["created_utc"],
    )


def _json_dumps(payload: Mapping[str, object]) -> str:
    return json.dumps(payload, ensure_ascii=False, sort_keys=True)


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()
