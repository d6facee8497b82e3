"""
PyRREF: Gauss-Jordan reduction and solution classification for linear systems.

Submodules:
    core: MatrixStore, exceptions, validation, result envelope
    linsys: Reduction to RREF and classification (unique / none / many)
"""

__version__ = "0.1.0"

from pyrref import core
from pyrref import linsys
from pyrref.core.matrix import MatrixStore
from pyrref.linsys import solve, rref, SolutionKind, Classification

__all__ = [
    "__version__",
    "core",
    "linsys",
    "MatrixStore",
    "solve",
    "rref",
    "SolutionKind",
    "Classification",
]
