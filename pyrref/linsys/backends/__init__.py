"""
Linear system backends.

Available backends:
    CPUGaussJordanBackend: CPU reference implementation (Gauss-Jordan, float32)
"""

from pyrref.linsys.backends.cpu import CPUGaussJordanBackend

__all__ = [
    "CPUGaussJordanBackend",
]
