"""Matplotlib rendering of molecule geometries."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from matplotlib.figure import Figure

from molbalance.models import BondOrder, MoleculeGeometry

BOND_WIDTHS = {BondOrder.SINGLE: 2.0, BondOrder.DOUBLE: 3.5, BondOrder.TRIPLE: 5.0}
ATOM_SCALE = 600.0  # scatter marker area per Å of display radius


def plot_geometry(axes, geometry: MoleculeGeometry) -> None:
    """Draw ``geometry`` on a 3D ``axes`` (projection="3d")."""
    axes.clear()
    axes.set_title(geometry.formula)
    if not geometry.atoms:
        return

    positions = np.array([atom.position for atom in geometry.atoms])
    for bond in geometry.bonds:
        segment = positions[[bond.start, bond.end]]
        axes.plot(
            segment[:, 0],
            segment[:, 1],
            segment[:, 2],
            color="#505050",
            linewidth=BOND_WIDTHS[bond.order],
        )

    axes.scatter(
        positions[:, 0],
        positions[:, 1],
        positions[:, 2],
        s=[atom.radius * ATOM_SCALE for atom in geometry.atoms],
        c=[atom.color for atom in geometry.atoms],
        edgecolors="black",
        depthshade=False,
    )
    for atom, position in zip(geometry.atoms, positions):
        axes.text(*position, atom.element, ha="center", va="center")

    # Equal extents so bond lengths are not distorted.
    centre = positions.mean(axis=0)
    half_span = max(float(np.abs(positions - centre).max()), 1.0)
    axes.set_xlim(centre[0] - half_span, centre[0] + half_span)
    axes.set_ylim(centre[1] - half_span, centre[1] + half_span)
    axes.set_zlim(centre[2] - half_span, centre[2] + half_span)
    axes.set_xlabel("x (Å)")
    axes.set_ylabel("y (Å)")
    axes.set_zlabel("z (Å)")


def save_geometry_figure(geometry: MoleculeGeometry, path: str | Path) -> Path:
    figure = Figure(figsize=(5, 5), tight_layout=True)
    axes = figure.add_subplot(1, 1, 1, projection="3d")
    plot_geometry(axes, geometry)
    path = Path(path)
    figure.savefig(path)
    return path
