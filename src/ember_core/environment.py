"""Variable/function binding store and scope management."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Mapping

from .errors import UndefinedIdentifier
from .values import Value, VStr


@dataclass
class Environment:
    """Bindings of one scope.

    A function call gets a fresh child scope holding only its parameters;
    there is no link back to the defining or calling scope.
    """

    bindings: dict[str, Value] = field(default_factory=dict)

    # -- Bindings -------------------------------------------------------

    def define(self, name: str, value: Value) -> None:
        self.bindings[name] = value

    def lookup(self, name: str) -> Value:
        try:
            return self.bindings[name]
        except KeyError:
            raise UndefinedIdentifier(name) from None

    def get(self, name: str) -> Value | None:
        return self.bindings.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self.bindings

    def __iter__(self) -> Iterator[str]:
        return iter(self.bindings)

    def __len__(self) -> int:
        return len(self.bindings)

    def items(self):
        return self.bindings.items()

    # -- Scopes ---------------------------------------------------------

    def child_scope(self, bindings: Mapping[str, Value]) -> Environment:
        """Return a new Environment seeded with exactly *bindings*."""
        return Environment(bindings=dict(bindings))

    # -- Diagnostics ----------------------------------------------------

    def dump(self) -> str:
        """One ``name : value`` line per binding."""
        if not self.bindings:
            return "  (no variables defined)"
        width = max(len(k) for k in self.bindings)
        return "\n".join(
            f"  {name:<{width}} : {_fmt_inline(value)}"
            for name, value in self.bindings.items()
        )


def _fmt_inline(value: Value) -> str:
    if isinstance(value, VStr):
        return f'"{value.value}"'
    return str(value)
