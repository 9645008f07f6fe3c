# TODO: Remove this when we migrate to Python 3.14+.
from __future__ import annotations

from typing import ClassVar, Literal

from pydantic import PositiveInt

from energetics.constants import DECAY_STEP, INTERNAL_COMBUSTION_EFFICIENCY
from energetics.types import Energy

from .base import BaseProvider


class InternalCombustion(BaseProvider):
    """Internal combustion engine.

    Output is the fuel energy reduced by mechanical losses. Engines can
    optionally wear with use: if ``decay`` is set, the efficiency drops by
    ``DECAY_STEP`` for every ``decay`` runs. Since providers are immutable,
    wear is modelled by :meth:`after_runs`, which returns the engine as it is
    after a given number of runs."""

    provider_type: Literal['internal_combustion'] = 'internal_combustion'

    decay: PositiveInt | None = None
    """Number of runs after which the efficiency drops by one step. No wear
    if not set."""

    EFFICIENCY_KEY: ClassVar[str] = 'internal_combustion'
    DEFAULT_EFFICIENCY: ClassVar[float] = INTERNAL_COMBUSTION_EFFICIENCY

    def after_runs(self, runs: int) -> InternalCombustion:
        """The engine after ``runs`` runs, with efficiency reduced by wear.

        The reduced efficiency never goes below zero."""
        if self.decay is None or runs < self.decay:
            return self
        steps = runs // self.decay
        efficiency = max(self.effective_efficiency - steps * DECAY_STEP, 0.0)
        return self.model_copy(update={'efficiency': efficiency})

    def output(self) -> Energy:
        return self.delivered_energy()
