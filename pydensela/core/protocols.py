"""
Core protocols for pydensela.

These define structural interfaces that algorithm implementations and
callers must satisfy. We use Protocol (structural typing) rather than ABC
(nominal typing) so that plain functions and lambdas qualify.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Type-safe: use generics to preserve type information through pipelines
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class InnerProduct(Protocol):
    """
    Elementwise kernel of a bilinear (or sesquilinear) form.

    An inner product over vectors is computed as sum_i f(x_i, y_i). The
    standard real product is f(x, y) = x * y; the complex Hermitian
    product is f(x, y) = conj(x) * y.

    Kernels must be linear in their second argument so that projections
    and QR reconstruction hold.
    """

    def __call__(self, x: Any, y: Any) -> Any:
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a validated design and produce a
    parameter payload wrapped in a Result.

    Backends are stateless apart from construction-time configuration.
    This makes them easy to test and swap.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_no_pivot', 'cpu_partial_pivot', 'cpu_complete_pivot'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Args:
            design: Validated input container

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            NumericalError: If numerical issues prevent solution (singularity, etc.)
            ValidationError: If design is invalid for this backend
        """
        ...
