"""
Tests for solve() and rref().

Tests the complete pipeline: Design construction, backend selection,
and solution properties.
"""

import numpy as np
import pytest

from pyrref import solve, rref
from pyrref.core.precision import select_tolerance
from pyrref.core.protocols import Backend
from pyrref.linsys import SystemDesign, SolutionKind, Classification
from pyrref.linsys.backends import CPUGaussJordanBackend
from pyrref.linsys.solution import LinearSystemSolution


# ═══════════════════════════════════════════════════════════════════════
# Reference scenarios
# ═══════════════════════════════════════════════════════════════════════


class TestScenarios:

    def test_unique(self, unique_system):
        result = solve(unique_system)
        assert isinstance(result, LinearSystemSolution)
        assert result.kind is SolutionKind.UNIQUE
        np.testing.assert_array_equal(result.solution, [2.0, 3.0, -1.0])

    def test_inconsistent(self, inconsistent_system):
        result = solve(inconsistent_system)
        assert result.classification == Classification.none()
        assert result.pivot_columns == (0, 2)
        assert result.solution is None

    def test_underdetermined(self, underdetermined_system):
        result = solve(underdetermined_system)
        assert result.kind is SolutionKind.MANY
        assert result.pivot_columns == (0,)
        assert result.free_columns == (1,)

    def test_already_reduced(self, reduced_system):
        result = solve(reduced_system)
        np.testing.assert_array_equal(result.reduced_matrix, reduced_system)
        assert result.classification == Classification.unique([5.0, 7.0])


# ═══════════════════════════════════════════════════════════════════════
# Input forms
# ═══════════════════════════════════════════════════════════════════════


class TestInputs:

    def test_from_arrays(self):
        result = solve([[2, 1, -1], [-3, -1, 2], [-2, 1, 2]], [8, -11, -3])
        np.testing.assert_array_equal(result.unknowns, [2.0, 3.0, -1.0])

    def test_from_design(self, unique_system):
        design = SystemDesign.from_augmented(unique_system)
        first = solve(design)
        second = solve(design)
        assert first.classification == second.classification
        np.testing.assert_array_equal(first.reduced_matrix, second.reduced_matrix)

    def test_design_with_rhs_rejected(self, unique_system):
        design = SystemDesign.from_augmented(unique_system)
        with pytest.raises(ValueError, match="b must not be given"):
            solve(design, [1, 2, 3])

    def test_caller_data_untouched(self, unique_system):
        data = np.array(unique_system, dtype=np.float32)
        before = data.copy()
        solve(data)
        np.testing.assert_array_equal(data, before)

    def test_unknown_backend(self, unique_system):
        with pytest.raises(ValueError, match="Unknown backend"):
            solve(unique_system, backend="gpu")

    @pytest.mark.parametrize("backend", ["auto", "cpu", "cpu_gauss_jordan"])
    def test_backend_choices(self, unique_system, backend):
        assert solve(unique_system, backend=backend).backend_name == "cpu_gauss_jordan"

    def test_random_square_matches_reference(self, random_square_system):
        A, b, _ = random_square_system
        A32, b32 = A.astype(np.float32), b.astype(np.float32)
        result = solve(A32, b32)
        expected = np.linalg.solve(A32.astype(np.float64), b32.astype(np.float64))
        assert result.kind is SolutionKind.UNIQUE
        tol = select_tolerance()
        np.testing.assert_allclose(result.unknowns, expected, rtol=tol.rtol, atol=tol.atol)


# ═══════════════════════════════════════════════════════════════════════
# Solution accessors and metadata
# ═══════════════════════════════════════════════════════════════════════


class TestSolutionProperties:

    def test_unknowns_drop_trailing_rows(self):
        result = solve([[1, 0, 2], [0, 1, 3], [1, 1, 5]])
        np.testing.assert_array_equal(result.solution, [2.0, 3.0, 0.0])
        np.testing.assert_array_equal(result.unknowns, [2.0, 3.0])

    def test_unknowns_none_unless_unique(self, underdetermined_system):
        assert solve(underdetermined_system).unknowns is None

    def test_rank(self, unique_system, underdetermined_system, inconsistent_system):
        assert solve(unique_system).rank == 3
        assert solve(underdetermined_system).rank == 1
        assert solve(inconsistent_system).rank == 2

    def test_free_columns_empty_when_unique(self, unique_system):
        assert solve(unique_system).free_columns == ()

    def test_reduced_matrix_read_only(self, unique_system):
        result = solve(unique_system)
        assert result.reduced_matrix.dtype == np.float32
        with pytest.raises(ValueError):
            result.reduced_matrix[0, 0] = 5.0

    def test_info(self, unique_system):
        info = solve(unique_system).info
        assert info["method"] == "gauss_jordan"
        assert info["shape"] == (3, 4)
        assert info["rank"] == 3
        assert info["pivot_columns"] == (0, 1, 2)
        assert info["kind"] == "unique"

    def test_timing(self, unique_system):
        timing = solve(unique_system).timing
        assert timing["total_seconds"] >= 0.0
        assert "elimination" in timing
        assert "classification" in timing

    def test_warnings_carried_to_result(self):
        with pytest.warns(UserWarning):
            result = solve([[0.1, 0.2]])
        assert any("representable" in w for w in result.warnings)

    def test_no_warnings_for_exact_input(self, unique_system):
        assert solve(unique_system).warnings == ()

    def test_repr(self, unique_system):
        text = repr(solve(unique_system))
        assert text == (
            "LinearSystemSolution(shape=(3, 4), rank=3, "
            "classification=Unique([2.0, 3.0, -1.0]))"
        )

    def test_summary_unique(self, unique_system):
        text = solve(unique_system).summary()
        assert "Classification: UNIQUE" in text
        assert "x[1] = 3" in text
        assert "Backend: cpu_gauss_jordan" in text

    def test_summary_many(self, underdetermined_system):
        text = solve(underdetermined_system).summary()
        assert "Classification: MANY" in text
        assert "Free columns: [1]" in text

    def test_summary_none(self, inconsistent_system):
        text = solve(inconsistent_system).summary()
        assert "Classification: NONE" in text
        assert "Inconsistent" in text


# ═══════════════════════════════════════════════════════════════════════
# rref() and backend
# ═══════════════════════════════════════════════════════════════════════


class TestRref:

    def test_returns_matrix_and_pivots(self, unique_system):
        reduced, pivots = rref(unique_system)
        np.testing.assert_array_equal(reduced, [[1, 0, 0, 2], [0, 1, 0, 3], [0, 0, 1, -1]])
        assert pivots == (0, 1, 2)

    def test_returned_matrix_writable(self, underdetermined_system):
        reduced, _ = rref(underdetermined_system)
        reduced[0, 0] = 3.0

    def test_idempotent(self, rng):
        once, pivots = rref(rng.standard_normal((3, 5)).astype(np.float32))
        twice, pivots_again = rref(once)
        np.testing.assert_array_equal(once, twice)
        assert pivots == pivots_again


class TestBackend:

    def test_satisfies_protocol(self):
        assert isinstance(CPUGaussJordanBackend(), Backend)

    def test_direct_solve(self, reduced_system):
        result = CPUGaussJordanBackend().solve(SystemDesign.from_augmented(reduced_system))
        assert result.backend_name == "cpu_gauss_jordan"
        assert result.params.pivot_columns == (0, 1)
        assert result.params.classification == Classification.unique([5.0, 7.0])
