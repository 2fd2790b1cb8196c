# MIT License (see LICENSE)
"""
Process-wide simulation parameters: per-family colors and properties.

Built once at startup and then only read. The interaction engine receives
the instance explicitly; nothing looks it up globally.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field

import numpy as np

from ..constants import FAST_MODE, MAX_INTERACTION_DIST
from ..types import Color
from .family import FamilyProperties

logger = logging.getLogger(__name__)


@dataclass
class SimulationParameters:
    """
    Colors and properties for every family.

    Attributes:
        colors: Display color per family.
        families: FamilyProperties per family.
    """
    colors: list[Color] = field(default_factory=list)
    families: list[FamilyProperties] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.colors) != len(self.families):
            raise ValueError(
                f"Got {len(self.colors)} colors for {len(self.families)} families"
            )

    @property
    def family_count(self) -> int:
        return len(self.families)

    @classmethod
    def random(
        cls,
        count: int,
        rng: np.random.Generator,
        *,
        fast_mode: bool = FAST_MODE,
        interaction_radius: float = MAX_INTERACTION_DIST,
    ) -> SimulationParameters:
        """
        Generate colors and original families for `count` families.

        Deterministic for a given generator state: all colors are drawn
        first, then the families in index order.
        """
        colors: list[Color] = [
            (float(rng.uniform(0.0, 1.0)), float(rng.uniform(0.0, 1.0)), float(rng.uniform(0.0, 1.0)))
            for _ in range(count)
        ]
        families = [
            FamilyProperties.random(
                idx, count, rng, fast_mode=fast_mode, interaction_radius=interaction_radius
            )
            for idx in range(count)
        ]
        logger.debug("Generated parameters for %d families (fast_mode=%s)", count, fast_mode)
        return cls(colors=colors, families=families)
