"""Command-line entrypoints for MolBalance."""

from __future__ import annotations

import json
from contextlib import closing
from pathlib import Path
from typing import Annotated, Any, NoReturn, Optional

import typer

from molbalance.config import configure_logging, load_settings
from molbalance.errors import BalanceFailure, BalancerError, StoreError
from molbalance.formula import parse_formula
from molbalance.persistence import sqlite_store
from molbalance.render import save_geometry_figure
from molbalance.service import molecule_geometry, solve_equation
from molbalance.structures import PubChemSource, StructureSource

app = typer.Typer(add_completion=False)

OnlineOption = Annotated[
    Optional[bool],
    typer.Option("--online/--offline", help="Ask PubChem for 3D structures before sketching."),
]
StoreOption = Annotated[Optional[Path], typer.Option(help="History database file.")]
UserOption = Annotated[str, typer.Option(help="Owner of stored equations.")]


@app.callback()
def main() -> None:
    """Balance chemical equations and sketch their molecules."""
    configure_logging(load_settings().log_level)


def _source(online: Optional[bool]) -> Optional[StructureSource]:
    settings = load_settings()
    if online is None:
        online = settings.online
    if not online:
        return None
    return PubChemSource(base_url=settings.pubchem_url, timeout=settings.pubchem_timeout)


def _store_path(store: Optional[Path]) -> Path:
    return store if store is not None else load_settings().db_path


def _emit(payload: Any, output: Optional[Path]) -> None:
    json_output = json.dumps(payload, indent=2)
    typer.echo(json_output)
    if output:
        with open(output, "w") as f:
            f.write(json_output)


def _fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


@app.command()
def balance(
    equation: Annotated[str, typer.Argument(help='Reaction such as "H2 + O2 -> H2O".')],
    geometry: Annotated[bool, typer.Option(help="Include 3D data for every molecule.")] = False,
    online: OnlineOption = None,
    save: Annotated[bool, typer.Option(help="Record the result in the history database.")] = False,
    store: StoreOption = None,
    user: UserOption = "local",
    output: Annotated[Optional[Path], typer.Option(help="Path to save output JSON.")] = None,
) -> None:
    """Balance a chemical equation."""
    try:
        solved = solve_equation(equation, _source(online) if geometry or save else None)
    except BalanceFailure as error:
        _fail(error.message)

    payload = solved.as_payload() if geometry else {"inputEquation": equation, **solved.balanced.as_payload()}
    if save:
        with closing(sqlite_store.connect(_store_path(store))) as connection:
            sqlite_store.ensure_schema(connection)
            payload["id"] = sqlite_store.save_solved_equation(connection, user, solved)
    _emit(payload, output)


@app.command()
def parse(formula: Annotated[str, typer.Argument(help="Formula such as Al2(SO4)3.")]) -> None:
    """Print element counts for a formula."""
    try:
        counts = parse_formula(formula)
    except BalancerError as error:
        _fail(str(error))
    _emit(counts, None)


@app.command()
def geometry(
    formula: Annotated[str, typer.Argument(help="Formula to sketch.")],
    online: OnlineOption = None,
    output: Annotated[Optional[Path], typer.Option(help="Path to save output JSON.")] = None,
) -> None:
    """Print atoms and bonds for a molecule."""
    result = molecule_geometry(formula, _source(online))
    _emit({"formula": formula, "source": result.source, **result.as_payload()}, output)


@app.command()
def render(
    formula: Annotated[str, typer.Argument(help="Formula to draw.")],
    output: Annotated[Path, typer.Option(help="Image file to write (format from suffix).")],
    online: OnlineOption = None,
) -> None:
    """Draw a molecule to an image file."""
    path = save_geometry_figure(molecule_geometry(formula, _source(online)), output)
    typer.echo(str(path))


@app.command()
def history(store: StoreOption = None, user: UserOption = "local") -> None:
    """List stored equations, newest first."""
    with closing(sqlite_store.connect(_store_path(store))) as connection:
        sqlite_store.ensure_schema(connection)
        records = sqlite_store.list_history(connection, user)
    _emit([record.as_payload() for record in records], None)


@app.command()
def show(
    record_id: Annotated[int, typer.Argument(help="Stored equation ID.")],
    store: StoreOption = None,
    user: UserOption = "local",
) -> None:
    """Show one stored equation."""
    with closing(sqlite_store.connect(_store_path(store))) as connection:
        sqlite_store.ensure_schema(connection)
        try:
            record = sqlite_store.get_solved_equation(connection, record_id, user)
        except StoreError as error:
            _fail(str(error))
    _emit(record.as_payload(), None)


@app.command()
def delete(
    record_id: Annotated[int, typer.Argument(help="Stored equation ID.")],
    store: StoreOption = None,
    user: UserOption = "local",
) -> None:
    """Delete one stored equation."""
    with closing(sqlite_store.connect(_store_path(store))) as connection:
        sqlite_store.ensure_schema(connection)
        try:
            sqlite_store.delete_solved_equation(connection, record_id, user)
        except StoreError as error:
            _fail(str(error))
    _emit({"message": "Equation removed", "id": record_id}, None)
