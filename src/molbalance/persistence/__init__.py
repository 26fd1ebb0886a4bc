"""Persistence helpers for MolBalance."""

from molbalance.persistence.sqlite_store import (
    StoredEquation,
    connect,
    delete_solved_equation,
    ensure_schema,
    get_solved_equation,
    list_history,
    save_solved_equation,
)

__all__ = [
    "StoredEquation",
    "connect",
    "delete_solved_equation",
    "ensure_schema",
    "get_solved_equation",
    "list_history",
    "save_solved_equation",
]
