"""Document: accumulated state of a program run against one root Environment."""

from __future__ import annotations

from dataclasses import dataclass, field
from collections.abc import Iterable

from .config import EvalConfig
from .environment import Environment
from .evaluator import evaluate
from .nodes import Expr
from .values import Value


@dataclass
class Document:
    """Holds the root Environment and every top-level result evaluated into it."""

    environment: Environment = field(default_factory=Environment)
    config: EvalConfig = field(default_factory=EvalConfig)
    results: list[Value] = field(default_factory=list)

    def __post_init__(self) -> None:
        # Not a dataclass field; last result from the most recent merge()
        self._last_result: Value | None = None

    # -- Convenience accessors ------------------------------------------

    @property
    def variables(self) -> dict[str, Value]:
        return self.environment.bindings

    @property
    def last_result(self) -> Value | None:
        """The last value produced by the most recent merge()."""
        return self._last_result

    # -- Incremental evaluation -----------------------------------------

    def merge(self, program: Expr | Iterable[Expr]) -> Value | None:
        """Evaluate one node, or a sequence of top-level nodes, in order.

        - Bindings land in the root environment and persist across merges
        - Each top-level value is appended to ``results``
        - ``last_result`` is the final value of this merge, or ``None``

        An evaluation error aborts the merge; values already produced stay
        in ``results``.
        """
        nodes = list(program) if isinstance(program, Iterable) else [program]
        self._last_result = None
        for node in nodes:
            value = evaluate(node, self.environment, self.config)
            self.results.append(value)
            self._last_result = value
        return self._last_result

    def reset(self) -> None:
        """Clear all accumulated state (bindings and results)."""
        self.environment = Environment()
        self.results = []
        self._last_result = None


def run(
    program: Expr | Iterable[Expr],
    env: Environment | None = None,
    config: EvalConfig | None = None,
) -> Document:
    """Evaluate *program* into a fresh Document and return it."""
    doc = Document(
        environment=env if env is not None else Environment(),
        config=config or EvalConfig(),
    )
    doc.merge(program)
    return doc
