"""
Vector helpers built on top of the core tensor operations.

A vector is an ordinary rank-1 `Tensor`; this module only adds a constructor
that coerces every element to a `Scalar` and the Euclidean norm.
"""

from .errors import MissingArgumentError
from .tensor import Scalar, Tensor, _MISSING, _operand


def vector(elements=_MISSING) -> Tensor:
    """Rank-1 tensor whose elements are each coerced to a Scalar (non-numbers become 0)."""
    if elements is _MISSING:
        raise MissingArgumentError("no arguments received")
    return Tensor._trusted(Scalar(element) for element in elements)


def norm(v) -> Scalar:
    v = _operand(v)
    return v.inner(v).power(0.5)


__all__ = [
    "vector",
    "norm",
]
