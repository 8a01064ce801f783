"""
tensoralg Utilities Submodule (`tensoralg.utils`)

Provides the parser for the bracketed text form produced by ``str(tensor)``
and `.npy` serialization helpers.
"""

import logging
import re
from typing import Iterator, NamedTuple

import numpy as np

from ..errors import ParseError
from ..tensor import TensorBase, make

logger = logging.getLogger(__name__)

TOKEN_SPEC = [
    ("WS",     r"\s+"),
    ("NUMBER", r"[+-]?(?:inf|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"),
    ("LBRACK", r"\["),
    ("RBRACK", r"\]"),
    ("COMMA",  r","),
]

MASTER = re.compile("|".join(f"(?P<{name}>{pat})" for name, pat in TOKEN_SPEC))


class Tok(NamedTuple):
    kind: str
    text: str
    pos: int


def lex(src: str) -> Iterator[Tok]:
    pos = 0
    while pos < len(src):
        m = MASTER.match(src, pos)
        if not m:
            raise ParseError(f"Unexpected character at position {pos}: {src[pos]!r}")
        if m.lastgroup != "WS":
            yield Tok(m.lastgroup, m.group(), pos)
        pos = m.end()


class Parser:
    def __init__(self, src: str):
        self.toks = list(lex(src))
        self.i = 0

    def peek(self):
        if self.i < len(self.toks):
            return self.toks[self.i]
        return None

    def eat(self, kind: str) -> Tok:
        t = self.peek()
        if not t or t.kind != kind:
            raise ParseError(f"Expected {kind}, got {t.kind if t else 'EOF'} at token index {self.i}")
        self.i += 1
        return t

    def accept(self, kind: str):
        t = self.peek()
        if t and t.kind == kind:
            self.i += 1
            return t
        return None

    def parse(self):
        value = self.parse_value()
        if self.peek() is not None:
            raise ParseError(f"Trailing input at token index {self.i}")
        return value

    def parse_value(self):
        if self.accept("LBRACK"):
            items = []
            if not self.accept("RBRACK"):
                items.append(self.parse_value())
                while self.accept("COMMA"):
                    items.append(self.parse_value())
                self.eat("RBRACK")
            return items
        text = self.eat("NUMBER").text
        try:
            return int(text)
        except ValueError:
            return float(text)


def parse(text: str) -> TensorBase:
    """Parse ``"[[1,2],[3,4]]"`` style text back into a Tensor (or ``"5"`` into a Scalar)."""
    return make(Parser(text).parse())


def save(t, path) -> None:
    """Write `t` to `path` in numpy's `.npy` format."""
    t = make(t)
    logger.debug("Saving tensor of dimension %s to %s", t.dimension, path)
    np.save(path, t.numpy(), allow_pickle=False)


def load(path) -> TensorBase:
    """Read a tensor written by `save`."""
    array = np.load(path, allow_pickle=False)
    logger.debug("Loaded array of shape %s from %s", array.shape, path)
    return make(array)


__all__ = [
    "parse",
    "save",
    "load",
]
