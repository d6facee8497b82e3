"""
Core protocols for PyRREF.

Structural interfaces that backends must satisfy. Protocol (structural
typing) is used rather than ABC so backends need not inherit anything.
"""

from typing import Protocol, TypeVar, runtime_checkable

from pyrref.core.result import Result

D = TypeVar('D', contravariant=True)  # Design type
P = TypeVar('P', covariant=True)      # Parameter payload type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    A backend takes a domain design and produces a Result envelope.
    Backends are stateless; everything they need comes in with the design.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_gauss_jordan'.
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Execute the computation.

        Args:
            design: Validated domain design

        Returns:
            Result envelope containing parameter payload and metadata
        """
        ...
