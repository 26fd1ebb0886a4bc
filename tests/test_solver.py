import unittest
from fractions import Fraction

import numpy as np

from molbalance.errors import NoSolutionError
from molbalance.normalizer import normalize, rationalize
from molbalance.solver import row_reduce, solve


class TestSolve(unittest.TestCase):
    def test_water_formation(self):
        # H2 + O2 -> H2O
        solution = solve(np.array([[2.0, 0.0, -2.0], [0.0, 2.0, -1.0]]))
        self.assertTrue(np.allclose(solution, [1.0, 0.5, 1.0]))

    def test_free_column_is_one(self):
        # Fe + O2 -> Fe2O3
        solution = solve(np.array([[1.0, 0.0, -2.0], [0.0, 2.0, -3.0]]))
        self.assertEqual(solution[-1], 1.0)
        self.assertTrue(np.allclose(solution, [2.0, 1.5, 1.0]))

    def test_partial_pivoting_swaps_rows(self):
        reduced, pivots = row_reduce(np.array([[0.0, 2.0, -1.0], [2.0, 0.0, -2.0]]))
        self.assertEqual(pivots, [0, 1])
        self.assertTrue(np.allclose(reduced[:, :3], [[1.0, 0.0, -1.0], [0.0, 1.0, -0.5]]))

    def test_redundant_rows_keep_rank(self):
        # O row duplicated with a different scale
        matrix = np.array([[2.0, 0.0, -2.0], [0.0, 2.0, -1.0], [0.0, 4.0, -2.0]])
        reduced, pivots = row_reduce(matrix)
        self.assertEqual(pivots, [0, 1])
        self.assertTrue(np.allclose(reduced[2], 0.0))
        self.assertTrue(np.allclose(solve(matrix), [1.0, 0.5, 1.0]))

    def test_trivial_solution_only(self):
        # A -> B
        with self.assertRaises(NoSolutionError):
            solve(np.array([[1.0, 0.0], [0.0, -1.0]]))

    def test_no_constraints(self):
        with self.assertRaises(NoSolutionError):
            solve(np.zeros((0, 2)))

    def test_several_free_variables_all_set_to_one(self):
        # H2 + O2 -> H2 + O2 has two independent balances
        matrix = np.array([[2.0, 0.0, -2.0, 0.0], [0.0, 2.0, 0.0, -2.0]])
        with self.assertLogs("molbalance.solver", level="WARNING"):
            solution = solve(matrix)
        self.assertTrue(np.allclose(solution, [1.0, 1.0, 1.0, 1.0]))


class TestNormalize(unittest.TestCase):
    def test_scales_by_denominator_lcm(self):
        self.assertEqual(normalize([1.0, 0.5, 1.0]), (2, 1, 2))
        self.assertEqual(normalize([2.0, 1.5, 1.0]), (4, 3, 2))
        self.assertEqual(normalize([1 / 3, 0.5, 1.0]), (2, 3, 6))

    def test_reduces_to_lowest_terms(self):
        self.assertEqual(normalize([2.0, 4.0, 6.0]), (1, 2, 3))

    def test_absorbs_float_noise(self):
        self.assertEqual(normalize([0.1 + 0.2, 0.6]), (1, 2))
        self.assertEqual(rationalize(0.1 + 0.2), Fraction(3, 10))

    def test_non_positive_entries_are_shifted(self):
        # [-1, 1] -> add |-1| + 1 to every entry
        self.assertEqual(normalize([-1.0, 1.0]), (1, 3))
        self.assertEqual(normalize([0.0, 2.0]), (1, 3))

    def test_all_zero_vector(self):
        with self.assertRaises(NoSolutionError):
            normalize([0.0, -0.0, 0.0])

    def test_outputs_python_ints(self):
        result = normalize(np.array([1.0, 0.5]))
        self.assertTrue(all(type(value) is int for value in result))


if __name__ == '__main__':
    unittest.main()
