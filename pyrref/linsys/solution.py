"""
Linear system solution types.

Contains the classification variant, the parameter payload, and the
user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyrref.core.precision import MATRIX_DTYPE
from pyrref.core.result import Result

if TYPE_CHECKING:
    from pyrref.linsys.design import SystemDesign


class SolutionKind(Enum):
    """How many solutions the system has."""
    UNIQUE = 'unique'
    NONE = 'none'
    MANY = 'many'


@dataclass(frozen=True, eq=False)
class Classification:
    """
    Solution classification: Unique(vector), None, or Many.

    Attributes:
        kind: Which of the three cases applies
        solution: For UNIQUE, the augmented column of the reduced matrix
            (one value per row, row order, read-only float32). None otherwise.
    """
    kind: SolutionKind
    solution: NDArray[np.float32] | None = None

    def __post_init__(self):
        if (self.kind is SolutionKind.UNIQUE) != (self.solution is not None):
            raise ValueError(
                f"solution vector must be given exactly for UNIQUE, "
                f"got kind={self.kind.name} with solution={self.solution!r}"
            )

    @classmethod
    def unique(cls, solution: ArrayLike) -> Classification:
        vector = np.array(solution, dtype=MATRIX_DTYPE)
        vector.setflags(write=False)
        return cls(SolutionKind.UNIQUE, vector)

    @classmethod
    def none(cls) -> Classification:
        return cls(SolutionKind.NONE)

    @classmethod
    def many(cls) -> Classification:
        return cls(SolutionKind.MANY)

    @property
    def is_unique(self) -> bool:
        return self.kind is SolutionKind.UNIQUE

    @property
    def is_consistent(self) -> bool:
        """True unless the system has no solution."""
        return self.kind is not SolutionKind.NONE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Classification):
            return NotImplemented
        if self.kind is not other.kind:
            return False
        if self.solution is None:
            return other.solution is None
        return bool(np.array_equal(self.solution, other.solution))

    def __hash__(self) -> int:
        if self.solution is None:
            return hash(self.kind)
        return hash((self.kind, self.solution.tobytes()))

    def __repr__(self) -> str:
        if self.solution is None:
            return f"{self.kind.name.capitalize()}"
        return f"Unique({self.solution.tolist()!r})"


@dataclass(frozen=True)
class ReductionParams:
    """
    Parameter payload for a Gauss-Jordan reduction.

    This is the immutable data computed by backends.
    """
    reduced_matrix: NDArray[np.float32]
    pivot_columns: tuple[int, ...]
    classification: Classification


@dataclass
class LinearSystemSolution:
    """
    User-facing linear system results.

    Wraps the backend Result and provides convenient accessors for the
    classification, the reduced matrix, and the pivot structure.
    """
    _result: Result[ReductionParams]
    _design: 'SystemDesign'

    @property
    def classification(self) -> Classification:
        return self._result.params.classification

    @property
    def kind(self) -> SolutionKind:
        return self.classification.kind

    @property
    def solution(self) -> NDArray[np.float32] | None:
        """Augmented column of the reduced matrix (UNIQUE only), one value per row."""
        return self.classification.solution

    @property
    def unknowns(self) -> NDArray[np.float32] | None:
        """
        Values of the unknowns x_0 .. x_{C-2} (UNIQUE only).

        For an overdetermined consistent system the solution vector has
        more rows than unknowns; the trailing entries are zero and are
        dropped here.
        """
        if self.solution is None:
            return None
        return self.solution[:self._design.n_unknowns]

    @property
    def reduced_matrix(self) -> NDArray[np.float32]:
        return self._result.params.reduced_matrix

    @property
    def pivot_columns(self) -> tuple[int, ...]:
        return self._result.params.pivot_columns

    @property
    def rank(self) -> int:
        """Number of pivot columns found (the augmented column included)."""
        return len(self.pivot_columns)

    @property
    def free_columns(self) -> tuple[int, ...]:
        """Coefficient columns without a pivot (free variables)."""
        pivots = set(self.pivot_columns)
        return tuple(c for c in range(self._design.n_unknowns) if c not in pivots)

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Human-readable report of the reduction and classification."""
        lines = [
            "Linear System Reduction",
            "=" * 60,
            f"Equations: {self._design.n_equations}",
            f"Unknowns: {self._design.n_unknowns}",
            f"Pivot columns: {list(self.pivot_columns)}",
            f"Classification: {self.kind.name}",
            "",
            "Reduced row-echelon form:",
            "-" * 60,
        ]

        for row in self.reduced_matrix:
            coefs = " ".join(f"{v:10.4f}" for v in row[:-1])
            lines.append(f"  [{coefs} | {row[-1]:10.4f}]")

        lines.append("-" * 60)

        if self.unknowns is not None:
            lines.append("Solution:")
            for i, value in enumerate(self.unknowns):
                lines.append(f"  x[{i}] = {value:.6g}")
        elif self.kind is SolutionKind.MANY:
            lines.append(f"Free columns: {list(self.free_columns)}")
        else:
            lines.append("Inconsistent: a row reduces to 0 = 1")

        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.6f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinearSystemSolution(shape={self._design.shape}, "
            f"rank={self.rank}, classification={self.classification!r})"
        )
