"""
Defines the Tensor and Scalar objects for tensoralg.

A value is either a `Scalar` (rank 0, one real number) or a `Tensor` (rank N,
an ordered tuple of rank N-1 components that all share one dimension). Both
derive from `TensorBase` and every operation recurses through `Tensor`
components until it reaches a `Scalar`.

Values are immutable: every operation returns a new instance.
"""

import abc
import logging
import math
import numbers
from collections.abc import Iterable
from typing import Tuple, Union

import numpy as np

from .errors import (
    ContractionMismatchError,
    DimensionMismatchError,
    MissingArgumentError,
)

logger = logging.getLogger(__name__)

Dimension = Tuple[int, ...]

_MISSING = object()


# --- Coercion helpers ---

def _is_atomic(value) -> bool:
    if isinstance(value, np.ndarray):
        return value.ndim == 0
    return isinstance(value, (str, bytes)) or not isinstance(value, Iterable)


def _coerce_number(value) -> Union[int, float]:
    """Return `value` as a real number. Anything non-numeric (or NaN) becomes 0."""
    if isinstance(value, Scalar):
        return value.value
    if isinstance(value, numbers.Integral):
        value = int(value)
        try:
            float(value)
        except OverflowError:
            # Beyond float range.
            return math.inf if value > 0 else -math.inf
        return value
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    return 0 if math.isnan(number) else number


def _operand(value, strict: bool = False) -> "TensorBase":
    """Normalize the right-hand side of a binary operation."""
    if isinstance(value, TensorBase):
        return value
    if strict and _is_atomic(value) and not isinstance(value, numbers.Real):
        try:
            float(value)
        except (TypeError, ValueError) as e:
            logger.debug("Rejecting non-numeric contraction operand %r", value)
            raise ContractionMismatchError(
                f"cannot use {value!r} as a scalar operand"
            ) from e
    return make(value)


def _ratio(ratio) -> Union[int, float]:
    ratio = _operand(ratio)
    if not isinstance(ratio, Scalar):
        raise TypeError(
            f"scale ratio must be rank 0, got dimension {ratio.dimension}"
        )
    return ratio.value


# --- Value types ---

class TensorBase(abc.ABC):
    """
    Common interface of `Scalar` and `Tensor`.

    Only those two subclasses exist. Binary operations accept another
    `TensorBase` or anything `make()` understands (numbers, nested sequences,
    numpy arrays).
    """

    __slots__ = ()

    # numpy must defer to our reflected operators instead of broadcasting.
    __array_ufunc__ = None

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    @abc.abstractmethod
    def dimension(self) -> Dimension:
        """Per-axis lengths, outermost rank first."""

    @property
    def shape(self) -> Dimension:
        return self.dimension

    @property
    def rank(self) -> int:
        return len(self.dimension)

    @abc.abstractmethod
    def tolist(self):
        """Nested Python lists (a bare number for a Scalar)."""

    def numpy(self) -> np.ndarray:
        return np.array(self.tolist())

    # --- Arithmetic ---

    def plus(self, other) -> "TensorBase":
        other = _operand(other)
        if not dimension_equal(self, other):
            logger.debug(
                "Cannot plus %s with %s", self.dimension, other.dimension
            )
            raise DimensionMismatchError(
                "cannot plus tensors with unequal dimensions"
            )
        return self._plus(other)

    def scale(self, ratio) -> "TensorBase":
        return self._scale(_ratio(ratio))

    @abc.abstractmethod
    def outer(self, other) -> "TensorBase":
        """Tensor product; the result's dimension is self's followed by other's."""

    @abc.abstractmethod
    def inner(self, other) -> "TensorBase":
        """Contract all of other's ranks against the leading ranks of self."""

    def dot(self, other) -> "TensorBase":
        return self.inner(other)

    @abc.abstractmethod
    def _plus(self, other: "TensorBase") -> "TensorBase":
        ...

    @abc.abstractmethod
    def _scale(self, ratio) -> "TensorBase":
        ...

    # --- Operators ---

    def __add__(self, other):
        return self.plus(other)

    def __radd__(self, other):
        return make(other).plus(self)

    def __sub__(self, other):
        return self.plus(_operand(other)._scale(-1))

    def __rsub__(self, other):
        return make(other).plus(self._scale(-1))

    def __neg__(self):
        return self._scale(-1)

    def __mul__(self, other):
        other = _operand(other)
        if isinstance(other, Scalar):
            return self._scale(other.value)
        if isinstance(self, Scalar):
            return other._scale(self.value)
        raise TypeError("'*' needs a scalar operand; use outer() or inner() for tensors")

    __rmul__ = __mul__

    def __matmul__(self, other):
        return self.inner(other)

    def __rmatmul__(self, other):
        return make(other).inner(self)


class Scalar(TensorBase):
    """Rank-0 tensor wrapping a single real number."""

    __slots__ = ("value",)

    def __init__(self, value):
        object.__setattr__(self, "value", _coerce_number(value))

    @staticmethod
    def zero() -> "Scalar":
        return Scalar(0)

    @property
    def dimension(self) -> Dimension:
        return ()

    def tolist(self):
        return self.value

    def outer(self, other) -> TensorBase:
        return _operand(other)._scale(self.value)

    def inner(self, other) -> "Scalar":
        other = _operand(other, strict=True)
        if not isinstance(other, Scalar):
            logger.debug("Cannot contract a scalar with %s", other.dimension)
            raise ContractionMismatchError(
                "dotter does not dimensionally contain dottee"
            )
        return Scalar(self.value * other.value)

    def power(self, index) -> "Scalar":
        index = _ratio(index)
        try:
            return Scalar(self.value ** index)
        except (ZeroDivisionError, OverflowError):
            # IEEE pow: an odd integer index keeps the base's sign.
            odd = index % 2 == 1
            return Scalar(math.copysign(math.inf, self.value) if odd else math.inf)

    def absolute(self) -> "Scalar":
        return Scalar(abs(self.value))

    def _plus(self, other: "Scalar") -> "Scalar":
        return Scalar(self.value + other.value)

    def _scale(self, ratio) -> "Scalar":
        return Scalar(self.value * ratio)

    def __pow__(self, index):
        return self.power(index)

    def __abs__(self):
        return self.absolute()

    def __float__(self):
        return float(self.value)

    def __int__(self):
        return int(self.value)

    def __bool__(self):
        return bool(self.value)

    def __eq__(self, other):
        if isinstance(other, Scalar):
            return self.value == other.value
        if isinstance(other, numbers.Real):
            return self.value == other
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __reduce__(self):
        return (Scalar, (self.value,))

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return f"Scalar({self.value!r})"


class Tensor(TensorBase):
    """
    Rank-N tensor (N >= 1): an ordered tuple of components of equal dimension.

    ``Tensor(components)`` builds each component with `make()` and checks that
    they all share the first component's dimension. Use `Tensor.make()` when
    the input may be a bare number.
    """

    __slots__ = ("_components",)

    def __init__(self, components=_MISSING):
        if components is _MISSING:
            raise MissingArgumentError("no arguments received")
        if isinstance(components, np.ndarray):
            components = components.tolist()
        if _is_atomic(components):
            raise TypeError(
                f"Tensor components must be a sequence, got {type(components).__name__}"
            )
        built = tuple(make(component) for component in components)
        if built:
            first = built[0].dimension
            if any(component.dimension != first for component in built[1:]):
                logger.debug(
                    "Unequal component dimensions: %s",
                    [component.dimension for component in built],
                )
                raise DimensionMismatchError(
                    "tensor components have unequal dimensions"
                )
        object.__setattr__(self, "_components", built)

    @classmethod
    def _trusted(cls, components) -> "Tensor":
        # Components produced by our own operations already share a dimension.
        instance = object.__new__(cls)
        object.__setattr__(instance, "_components", tuple(components))
        return instance

    @staticmethod
    def make(components=_MISSING) -> TensorBase:
        return make(components)

    @staticmethod
    def zero(dimensions) -> TensorBase:
        return zero(dimensions)

    @property
    def dimension(self) -> Dimension:
        if not self._components:
            return (0,)
        return (len(self._components),) + self._components[0].dimension

    def tolist(self):
        return [component.tolist() for component in self._components]

    def outer(self, other) -> TensorBase:
        other = _operand(other)
        if isinstance(other, Scalar):
            return self._scale(other.value)
        return Tensor._trusted(component.outer(other) for component in self._components)

    def inner(self, other) -> TensorBase:
        other = _operand(other, strict=True)
        if isinstance(other, Scalar):
            return self._scale(other.value)
        if not dimensionally_contains(self, other):
            logger.debug(
                "Cannot contract %s with %s", self.dimension, other.dimension
            )
            raise ContractionMismatchError(
                "dotter does not dimensionally contain dottee"
            )
        total = zero(self.dimension[other.rank:])
        for mine, theirs in zip(self._components, other._components):
            total = total._plus(mine.inner(theirs))
        return total

    def _plus(self, other: "Tensor") -> "Tensor":
        return Tensor._trusted(
            mine._plus(theirs)
            for mine, theirs in zip(self._components, other._components)
        )

    def _scale(self, ratio) -> "Tensor":
        return Tensor._trusted(component._scale(ratio) for component in self._components)

    def __len__(self):
        return len(self._components)

    def __iter__(self):
        return iter(self._components)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Tensor._trusted(self._components[index])
        return self._components[index]

    def __eq__(self, other):
        if isinstance(other, Tensor):
            return self._components == other._components
        return NotImplemented

    def __hash__(self):
        return hash(self._components)

    def __reduce__(self):
        return (Tensor, (self._components,))

    def __str__(self):
        return "[" + ",".join(str(component) for component in self._components) + "]"

    def __repr__(self):
        return f"Tensor({self})"


# --- Construction ---

def make(components=_MISSING) -> TensorBase:
    """
    Build a Tensor or Scalar from a number or a nested sequence.

    Sequences (lists, tuples, numpy arrays, existing tensors) become a
    `Tensor` of recursively built components; anything else becomes a
    `Scalar`, with non-numeric values coerced to 0.

    Raises:
        MissingArgumentError: if called without an argument.
        DimensionMismatchError: if sibling components differ in dimension.
    """
    if components is _MISSING:
        raise MissingArgumentError("no arguments received")
    if isinstance(components, TensorBase):
        return components
    if isinstance(components, np.ndarray):
        components = components.tolist()
    if _is_atomic(components):
        return Scalar(components)
    return Tensor(components)


def zero(dimensions) -> TensorBase:
    """Zero-filled tensor of the given dimension; ``zero(())`` is ``Scalar(0)``."""
    dimensions = tuple(dimensions)
    if not dimensions:
        return Scalar(0)
    length, rest = dimensions[0], dimensions[1:]
    if not isinstance(length, numbers.Integral) or length < 0:
        raise ValueError(f"dimensions must be non-negative integers, got {length!r}")
    return Tensor._trusted(zero(rest) for _ in range(int(length)))


def zeros(*dimensions: int) -> TensorBase:
    return zero(dimensions)


tensor = make


# --- Dimension model ---

def dimension(x) -> Dimension:
    return make(x).dimension


def dimension_equal(a, b) -> bool:
    return dimension(a) == dimension(b)


def dimensionally_contains(a, b) -> bool:
    """True if b's whole dimension matches the leading ranks of a's dimension."""
    outer_dimension, inner_dimension = dimension(a), dimension(b)
    return (
        len(inner_dimension) <= len(outer_dimension)
        and outer_dimension[:len(inner_dimension)] == inner_dimension
    )


# --- Functional forms ---

def plus(a, b) -> TensorBase:
    return make(a).plus(b)


def scale(a, ratio) -> TensorBase:
    return make(a).scale(ratio)


def outer(a, b) -> TensorBase:
    return make(a).outer(b)


def inner(a, b) -> TensorBase:
    return make(a).inner(b)


dot = inner


__all__ = [
    "TensorBase",
    "Scalar",
    "Tensor",
    "Dimension",
    "make",
    "tensor",
    "zero",
    "zeros",
    "dimension",
    "dimension_equal",
    "dimensionally_contains",
    "plus",
    "scale",
    "outer",
    "inner",
    "dot",
]
