import unittest

import numpy as np

from molbalance.constants import FALLBACK_COLOR, FALLBACK_RADIUS
from molbalance.elements import bond_length
from molbalance.geometry import generate_geometry
from molbalance.models import BondOrder, ExternalBond, ExternalStructure, MoleculeGeometry


def endpoint_distance(geometry, bond):
    start = np.array(geometry.atoms[bond.start].position)
    end = np.array(geometry.atoms[bond.end].position)
    return float(np.linalg.norm(end - start))


class TestTemplates(unittest.TestCase):
    def test_hydrogen(self):
        geometry = generate_geometry("H2")
        self.assertEqual(geometry.source, "template")
        self.assertEqual([atom.element for atom in geometry.atoms], ["H", "H"])
        self.assertEqual(len(geometry.bonds), 1)
        self.assertAlmostEqual(geometry.bonds[0].distance, 0.74)
        self.assertEqual(geometry.bonds[0].order, BondOrder.SINGLE)

    def test_oxygen_double_bond(self):
        geometry = generate_geometry("O2")
        self.assertEqual(geometry.bonds[0].order, BondOrder.DOUBLE)
        self.assertAlmostEqual(geometry.bonds[0].distance, 1.48)

    def test_water_is_bent(self):
        geometry = generate_geometry("H2O")
        self.assertEqual([atom.element for atom in geometry.atoms], ["O", "H", "H"])
        self.assertEqual(geometry.atoms[0].position, (0.0, 0.0, 0.0))

        first = np.array(geometry.atoms[1].position)
        second = np.array(geometry.atoms[2].position)
        cosine = first @ second / (np.linalg.norm(first) * np.linalg.norm(second))
        self.assertAlmostEqual(np.degrees(np.arccos(cosine)), 104.5, places=6)
        for bond in geometry.bonds:
            self.assertAlmostEqual(bond.distance, 0.96)


class TestHeuristic(unittest.TestCase):
    def test_methane_star(self):
        geometry = generate_geometry("CH4")
        self.assertEqual(geometry.source, "heuristic")
        self.assertEqual([atom.element for atom in geometry.atoms], ["C", "H", "H", "H", "H"])
        self.assertEqual(geometry.atoms[0].position, (0.0, 0.0, 0.0))
        self.assertEqual([(bond.start, bond.end) for bond in geometry.bonds], [(0, 1), (0, 2), (0, 3), (0, 4)])
        for bond in geometry.bonds:
            self.assertEqual(bond.order, BondOrder.SINGLE)
            self.assertAlmostEqual(bond.distance, 1.09)

    def test_central_is_first_non_hydrogen(self):
        self.assertEqual(generate_geometry("H3N").atoms[0].element, "N")
        self.assertEqual(generate_geometry("H3").atoms[0].element, "H")
        self.assertEqual(len(generate_geometry("H3").atoms), 3)

    def test_leftover_central_atoms_are_placed(self):
        geometry = generate_geometry("C2H6")
        self.assertEqual(len(geometry.atoms), 8)
        self.assertEqual(geometry.atoms[1].element, "C")
        self.assertAlmostEqual(geometry.bonds[0].distance, 1.54)

    def test_rings_advance_every_eight_atoms(self):
        geometry = generate_geometry("CH12")
        length = bond_length("C", "H")
        self.assertAlmostEqual(geometry.atoms[1].position[2], length * np.cos(np.radians(15)))
        self.assertAlmostEqual(geometry.atoms[8].position[2], length * np.cos(np.radians(15)))
        self.assertAlmostEqual(geometry.atoms[9].position[2], length * np.cos(np.radians(45)))
        self.assertAlmostEqual(geometry.atoms[9].position[1], 0.0)

    def test_unknown_element_fallbacks(self):
        geometry = generate_geometry("XeF4")
        self.assertEqual(geometry.atoms[0].color, FALLBACK_COLOR)
        self.assertEqual(geometry.atoms[0].radius, FALLBACK_RADIUS)
        self.assertAlmostEqual(geometry.bonds[0].distance, 1.0 + 0.57)

    def test_unparsable_formula_gives_empty_geometry(self):
        geometry = generate_geometry("Ca(OH")
        self.assertEqual(geometry.atoms, ())
        self.assertEqual(geometry.bonds, ())
        self.assertEqual(generate_geometry("").atoms, ())
        self.assertEqual(generate_geometry("(" * 2000 + "H").atoms, ())

    def test_hostile_formulas_still_return(self):
        deep = "(" * 2000 + "H" + ")" * 2000
        for formula in ("CH₄", "H₂O²", deep, "(" * 2000 + "H", ")))"):
            with self.subTest(formula=formula[:20]):
                self.assertIsInstance(generate_geometry(formula), MoleculeGeometry)
        self.assertEqual(len(generate_geometry("CH₄").atoms), 2)
        self.assertEqual([atom.element for atom in generate_geometry(deep).atoms], ["H"])

    def test_deterministic(self):
        for formula in ("CH4", "Fe2O3", "Al2(SO4)3", "H2O"):
            with self.subTest(formula=formula):
                self.assertEqual(generate_geometry(formula), generate_geometry(formula))

    def test_bond_distance_matches_positions(self):
        for formula in ("H2", "O2", "H2O", "CH4", "CO2", "C6H12O6", "NaCl", "XeF4"):
            geometry = generate_geometry(formula)
            for bond in geometry.bonds:
                with self.subTest(formula=formula, bond=bond):
                    self.assertAlmostEqual(bond.distance, endpoint_distance(geometry, bond), places=12)


class TestExternalData(unittest.TestCase):
    def setUp(self):
        self.structure = ExternalStructure(
            atomic_numbers=(8, 1, 1),
            coordinates=((0.0, 0.0, 0.0), (0.96, 0.0, 0.0), (0.0, 0.96, 0.0)),
            bonds=(ExternalBond(0, 1, 1), ExternalBond(0, 2, 2, distance=1.0)),
        )

    def test_external_data_is_used(self):
        geometry = generate_geometry("H2O", self.structure)
        self.assertEqual(geometry.source, "external")
        self.assertEqual([atom.element for atom in geometry.atoms], ["O", "H", "H"])
        self.assertEqual(geometry.atoms[1].position, (0.96, 0.0, 0.0))
        self.assertAlmostEqual(geometry.bonds[0].distance, 0.96)
        self.assertEqual(geometry.bonds[1].order, BondOrder.DOUBLE)
        self.assertEqual(geometry.bonds[1].distance, 1.0)

    def test_unknown_atomic_number(self):
        structure = ExternalStructure(atomic_numbers=(26,), coordinates=((0.0, 0.0, 0.0),))
        geometry = generate_geometry("Fe", structure)
        self.assertEqual(geometry.atoms[0].element, "X")
        self.assertEqual(geometry.atoms[0].color, FALLBACK_COLOR)

    def test_empty_external_data_falls_back(self):
        empty = ExternalStructure(atomic_numbers=(), coordinates=())
        self.assertEqual(generate_geometry("CH4", empty), generate_geometry("CH4"))

    def test_malformed_external_data_falls_back(self):
        broken = ExternalStructure(
            atomic_numbers=(6, 8, 8),
            coordinates=((0.0, 0.0, 0.0), (1.16, 0.0, 0.0), (-1.16, 0.0, 0.0)),
            bonds=(ExternalBond(0, 5, 2),),
        )
        with self.assertLogs("molbalance.geometry", level="WARNING"):
            geometry = generate_geometry("CO2", broken)
        self.assertEqual(geometry.source, "heuristic")

        mismatched = ExternalStructure(atomic_numbers=(6, 8), coordinates=((0.0, 0.0, 0.0),))
        self.assertEqual(generate_geometry("CO", mismatched).source, "heuristic")


class TestPayload(unittest.TestCase):
    def test_payload_shape(self):
        payload = generate_geometry("H2").as_payload()
        self.assertEqual(payload["atoms"][1]["position"], {"x": 0.0, "y": 0.0, "z": 0.74})
        self.assertEqual(payload["atoms"][0]["color"], "#FFFFFF")
        self.assertEqual(payload["bonds"][0]["from"], 0)
        self.assertEqual(payload["bonds"][0]["to"], 1)
        self.assertEqual(payload["bonds"][0]["bondType"], "single")


if __name__ == '__main__':
    unittest.main()
