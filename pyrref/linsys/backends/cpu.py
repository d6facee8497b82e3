"""
CPU reference backend for linear system reduction.

Gauss-Jordan elimination on a float32 MatrixStore, followed by
classification of the reduced system.
"""

from typing import Any

from pyrref.core.result import Result
from pyrref.core.timing import Timer
from pyrref.linsys.design import SystemDesign
from pyrref.linsys.solution import ReductionParams
from pyrref.linsys._gauss_jordan import gauss_jordan
from pyrref.linsys._classify import classify


class CPUGaussJordanBackend:
    """
    CPU backend using Gauss-Jordan elimination.

    Implements the Backend protocol for SystemDesign -> ReductionParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_gauss_jordan'

    def solve(self, design: SystemDesign) -> Result[ReductionParams]:
        """
        Reduce and classify.

        Algorithm:
            1. Copy the augmented matrix into a fresh MatrixStore
            2. Reduce it to RREF, collecting pivot columns
            3. Classify from the reduced matrix and pivot columns

        Args:
            design: Validated system design

        Returns:
            Result containing ReductionParams
        """
        timer = Timer()
        timer.start()

        store = design.to_store()

        with timer.section('elimination'):
            pivot_columns = gauss_jordan(store)

        with timer.section('classification'):
            classification = classify(store, pivot_columns)

        timer.stop()

        reduced = store.to_array()
        reduced.setflags(write=False)

        params = ReductionParams(
            reduced_matrix=reduced,
            pivot_columns=pivot_columns,
            classification=classification,
        )

        info: dict[str, Any] = {
            'method': 'gauss_jordan',
            'shape': design.shape,
            'rank': len(pivot_columns),
            'pivot_columns': pivot_columns,
            'kind': classification.kind.value,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=design.warnings,
        )
