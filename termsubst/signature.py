"""Signatures for first-order terms.

A signature Σ = (F, C) consists of:
  F: a set of function symbols, each with a fixed arity
  C: a set of constant names

Terms do not need a signature to exist; one is only consulted by the
diagnostic checks in ``termsubst.check``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from .errors import InvalidArgument
from .terms import Symbol


@dataclass(frozen=True)
class Signature:
    """A first-order signature.

    symbols: function symbols, keyed by name
    constants: declared constant names; empty means "any constant is fine"

    Invariant: every key in ``symbols`` equals the symbol's own name.
    """

    symbols: Mapping[str, Symbol]
    constants: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        for name, symbol in self.symbols.items():
            if not isinstance(symbol, Symbol):
                raise InvalidArgument(
                    f"Signature entry '{name}' must be a Symbol, got {type(symbol).__name__}"
                )
            if symbol.name != name:
                raise InvalidArgument(
                    f"Signature key '{name}' does not match symbol name '{symbol.name}'"
                )

    def get_symbol(self, name: str) -> Symbol | None:
        return self.symbols.get(name)

    @property
    def symbol_names(self) -> frozenset[str]:
        return frozenset(self.symbols.keys())

    @property
    def declares_constants(self) -> bool:
        return bool(self.constants)
