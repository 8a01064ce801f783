"""
tensoralg - arbitrary-rank tensor algebra over nested numeric arrays.

This package provides immutable Tensor and Scalar objects built from nested
sequences, together with element-wise addition, scaling, outer products and
inner (contracted) products.
"""

import logging

from .errors import (
    ContractionMismatchError,
    DimensionMismatchError,
    MissingArgumentError,
    ParseError,
    TensorAlgebraError,
)
from .tensor import (
    Scalar,
    Tensor,
    TensorBase,
    dimension,
    dimension_equal,
    dimensionally_contains,
    dot,
    inner,
    make,
    outer,
    plus,
    scale,
    tensor,
    zero,
    zeros,
)
from .vector import norm, vector
from .config import Configuration, configure
from .log import setup_logging
from . import utils

# --- Version Information ---
try:
    from importlib.metadata import PackageNotFoundError, version
    __version__ = version("tensoralg")
except PackageNotFoundError:
    # Not installed; should match setup.py
    __version__ = "0.1.0"

# Library code never configures handlers on import; see tensoralg.configure.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core
    "Tensor",
    "Scalar",
    "TensorBase",
    "__version__",
    # Creation Ops
    "make",
    "tensor",
    "zero",
    "zeros",
    "vector",
    # Queries
    "dimension",
    "dimension_equal",
    "dimensionally_contains",
    # Arithmetic
    "plus",
    "scale",
    "outer",
    "inner",
    "dot",
    "norm",
    # Errors
    "TensorAlgebraError",
    "MissingArgumentError",
    "DimensionMismatchError",
    "ContractionMismatchError",
    "ParseError",
    # Logging and configuration
    "Configuration",
    "configure",
    "setup_logging",
    # Submodules
    "utils",
]
