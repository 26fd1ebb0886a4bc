import unittest

import numpy as np

from molbalance.formula import parse_formula
from molbalance.models import Molecule
from molbalance.stoichiometry import build_matrix


def molecules(*formulas):
    return [Molecule(formula, parse_formula(formula)) for formula in formulas]


class TestBuildMatrix(unittest.TestCase):
    def test_signs_and_layout(self):
        matrix = build_matrix(molecules("H2", "O2"), molecules("H2O"))

        self.assertEqual(matrix.elements, ("H", "O"))
        self.assertEqual([m.formula for m in matrix.molecules], ["H2", "O2", "H2O"])
        self.assertEqual(matrix.n_reactants, 2)
        self.assertEqual((matrix.n_elements, matrix.n_molecules), (2, 3))
        self.assertTrue(np.allclose(matrix.values, [[2, 0, -2], [0, 2, -1]]))

    def test_element_rows_follow_first_seen_order(self):
        matrix = build_matrix(molecules("CH4", "O2"), molecules("CO2", "H2O"))

        self.assertEqual(matrix.elements, ("C", "H", "O"))
        self.assertTrue(
            np.allclose(
                matrix.values,
                [
                    [1, 0, -1, 0],
                    [4, 0, 0, -2],
                    [0, 2, -2, -1],
                ],
            )
        )

    def test_molecule_equality_is_by_formula_text(self):
        self.assertEqual(Molecule("H2O", {"H": 2, "O": 1}), Molecule("H2O", {}))
        self.assertNotEqual(Molecule("H2O", {"H": 2, "O": 1}), Molecule("OH2", {"H": 2, "O": 1}))


if __name__ == '__main__':
    unittest.main()
