"""
Migration Module

A migrator exchanges individuals between populations, periodically mixing
genetic material that evolved in isolation.

Classes:
    Migrator: Abstract cross-population exchange policy
    MigRing:  Swaps random individuals between neighbouring populations
"""

from abc    import ABC, abstractmethod
from typing import TYPE_CHECKING

import numpy as np

from evopool.errors import ValidationError

if TYPE_CHECKING:
    from evopool.pool.population import Population

class Migrator(ABC):
    """
    Abstract base class for migration policies.

    A migrator is called by the orchestrator alone, while no population is
    being evolved, so it can freely move individuals around. It must preserve
    the total number of individuals across all populations, and it must move
    individuals rather than share them: after migration an individual belongs
    to exactly one population.
    """

    @abstractmethod
    def apply(self, populations: list['Population'], rng: np.random.Generator) -> None:
        """
        Exchange individuals between populations, in place.

        Parameters:
            populations: all the populations of the GA
            rng:         random generator owned by the orchestrator
        """
        pass

    def validate(self) -> None:
        """
        Check the parameters of the migrator.

        Raises:
            ValidationError: if a parameter is out of range
        """
        pass

class MigRing(Migrator):
    """
    Populations are arranged in a ring; each one swaps 'n_migrants' randomly
    chosen individuals with the next one. With two populations there is a
    single pair. Every population keeps its size.

    Public Attributes:
        n_migrants: Number of individuals swapped between neighbours
    """

    def __init__(self, n_migrants: int = 1):
        self.n_migrants: int = n_migrants

    def validate(self):
        if self.n_migrants < 1:
            raise ValidationError("'n_migrants' should be higher or equal to 1")

    def apply(self, populations, rng):
        n_pairs = len(populations) if len(populations) > 2 else len(populations) - 1
        for i in range(n_pairs):
            left  = populations[i].individuals
            right = populations[(i + 1) % len(populations)].individuals
            k     = min(self.n_migrants, len(left), len(right))
            for a, b in zip(rng.choice(len(left), size=k, replace=False),
                            rng.choice(len(right), size=k, replace=False)):
                left[a], right[b] = right[b], left[a]
