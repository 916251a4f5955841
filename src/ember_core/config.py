"""Evaluation settings."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import IO


DEFAULT_MAX_ITERATIONS = 1_000_000


@dataclass
class EvalConfig:
    """Knobs shared by every evaluation call of one run.

    ``out`` receives ``print`` output and loop diagnostics; ``None`` means
    whatever ``sys.stdout`` is at the time of writing.
    """

    max_iterations: int = DEFAULT_MAX_ITERATIONS
    out: IO[str] | None = None

    def __post_init__(self) -> None:
        if self.max_iterations < 1:
            raise ValueError(
                f"max_iterations must be positive, got {self.max_iterations}"
            )

    @property
    def stream(self) -> IO[str]:
        return self.out if self.out is not None else sys.stdout
