"""
Exceptions raised by tensoralg.

Every error derives from `TensorAlgebraError` and also from the builtin
exception a caller would expect (`TypeError` or `ValueError`), so both
``except TensorAlgebraError`` and ``except ValueError`` work.
"""


class TensorAlgebraError(Exception):
    """Base class for all tensoralg errors."""


class MissingArgumentError(TensorAlgebraError, TypeError):
    """A constructor was called without any input."""


class DimensionMismatchError(TensorAlgebraError, ValueError):
    """Operands or components do not share the same dimension."""


class ContractionMismatchError(TensorAlgebraError, ValueError):
    """The right operand of an inner product is not contained by the left one."""


class ParseError(TensorAlgebraError, ValueError):
    """Textual tensor input could not be parsed."""


__all__ = [
    "TensorAlgebraError",
    "MissingArgumentError",
    "DimensionMismatchError",
    "ContractionMismatchError",
    "ParseError",
]
