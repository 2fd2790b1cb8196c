# MIT License (see LICENSE)
"""
Per-family interaction properties.

A family is described by two things:
  - ancestry: a weight vector over all families. An original family is
    one-hot; a blended family produced by combine() is a convex mix of
    its parents' ancestries.
  - curves: one list of force curves per target family. curves[j] is
    what this family applies when reacting to a particle of family j.

attraction() lets a blended family be perceived as a weighted mixture of
its ancestors: the reacting family samples its curves for each ancestor
of the neighbour and weights the result by that ancestor's share.
"""
from __future__ import annotations
from dataclasses import dataclass, field

import numpy as np

from ..constants import MAX_INTERACTION_DIST
from .curves import Curve, random_curve, sample_curve, scale_curve


@dataclass
class FamilyProperties:
    """
    Ancestry vector and force-curve matrix of one family.

    Attributes:
        ancestry: Weight per family, summing to 1 with entries in [0, 1].
            Kept true by construction; not re-checked.
        curves: curves[j] is the list of curves applied against family j.
    """
    ancestry: list[float] = field(default_factory=list)
    curves: list[list[Curve]] = field(default_factory=list)

    @property
    def family_count(self) -> int:
        return len(self.ancestry)

    @classmethod
    def random(
        cls,
        family_idx: int,
        family_count: int,
        rng: np.random.Generator,
        *,
        fast_mode: bool = False,
        interaction_radius: float = MAX_INTERACTION_DIST,
    ) -> FamilyProperties:
        """
        Generate an original family.

        Args:
            family_idx: Index of this family. Its ancestry is 1.0 here and
                0.0 everywhere else.
            family_count: Total number of families.
            rng: Random source.
            fast_mode: Generate Activation curves only.
            interaction_radius: Bounds ActivationProps.end.
        """
        return cls(
            ancestry=[1.0 if idx == family_idx else 0.0 for idx in range(family_count)],
            curves=[
                [random_curve(rng, fast_mode=fast_mode, interaction_radius=interaction_radius)]
                for _ in range(family_count)
            ],
        )

    def combine(self, other: FamilyProperties, weights: tuple[float, float]) -> FamilyProperties:
        """
        Blend two families into a new one.

        The ancestry is the weighted sum of both ancestries. For every target
        family the curve list is this family's curves scaled by weights[0]
        followed by the other's curves scaled by weights[1].

        Raises:
            ValueError: If the two families cover a different number of families.
        """
        if self.family_count != other.family_count or len(self.curves) != len(other.curves):
            raise ValueError(
                f"Cannot combine families over {self.family_count} and "
                f"{other.family_count} families"
            )
        wa, wb = weights
        return FamilyProperties(
            ancestry=[a * wa + b * wb for a, b in zip(self.ancestry, other.ancestry)],
            curves=[
                [scale_curve(c, wa) for c in mine] + [scale_curve(c, wb) for c in other.curves[idx]]
                for idx, mine in enumerate(self.curves)
            ],
        )

    def attraction(self, other: FamilyProperties, distance: float) -> float:
        """
        Force this family feels toward a particle of family `other`.

        Args:
            other: Properties of the neighbour's family.
            distance: Normalized distance to the neighbour.

        Returns:
            Σ_i other.ancestry[i] * Σ sample(self.curves[i], distance),
            skipping indices whose ancestry weight is zero.
        """
        total = 0.0
        for curves, weight in zip(self.curves, other.ancestry):
            if weight == 0.0:
                continue
            total += weight * sum(sample_curve(c, distance) for c in curves)
        return total
