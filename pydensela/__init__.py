"""
pydensela: a small dense linear-algebra kernel for Python.

Generic dense Matrix/Vector types plus two classical numerical algorithms
built on them: Gaussian elimination (no, partial and complete pivoting)
for square linear systems, and Gram-Schmidt orthonormalization leading to
QR decomposition.

Submodules:
    dense: Matrix and Vector types, transpose, products, basis <-> matrix
    elimination: Gaussian elimination and back-substitution
    orthogonalization: Inner products, projections, Gram-Schmidt
    decomposition: QR decomposition
"""

__version__ = "0.1.0"

from pydensela import dense
from pydensela import elimination
from pydensela import orthogonalization
from pydensela import decomposition

from pydensela.dense import Matrix, Vector, transpose, from_column_vectors, from_row_vectors
from pydensela.elimination import (
    solve,
    back_substitution,
    gaussian_elimination_no_pivot,
    gaussian_elimination_partial_pivot,
    gaussian_elimination_complete_pivot,
)
from pydensela.orthogonalization import (
    inner_product,
    project,
    orthonormalize,
    check_orthonormality,
)
from pydensela.decomposition import qr_decomposition, qr_solve

__all__ = [
    "__version__",
    "dense",
    "elimination",
    "orthogonalization",
    "decomposition",
    "Matrix",
    "Vector",
    "transpose",
    "from_column_vectors",
    "from_row_vectors",
    "solve",
    "back_substitution",
    "gaussian_elimination_no_pivot",
    "gaussian_elimination_partial_pivot",
    "gaussian_elimination_complete_pivot",
    "inner_product",
    "project",
    "orthonormalize",
    "check_orthonormality",
    "qr_decomposition",
    "qr_solve",
]
