"""
Speciation Module

A speciator decides how the individuals of a population are clustered into
species before the evolution model is applied to each species separately.

Classes:
    Speciator:          Abstract partitioning policy
    SpecFitnessInterval: Splits a sorted population into contiguous fitness bands
"""

from abc    import ABC, abstractmethod
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from evopool.phenotype import Individual

class Speciator(ABC):
    """
    Abstract base class for speciation policies.

    Any implementation must return a total partition: every individual ends up
    in exactly one group and exactly 'n_species' groups are returned. Groups
    are allowed to be empty.
    """

    @abstractmethod
    def apply(self, individuals: list['Individual'], n_species: int,
              rng: np.random.Generator) -> list[list['Individual']]:
        """
        Partition a list of individuals.

        Parameters:
            individuals: The individuals to cluster
            n_species:   The number of groups to return
            rng:         Random generator owned by the calling population

        Returns:
            A list of 'n_species' lists of individuals
        """
        pass

class SpecFitnessInterval(Speciator):
    """
    Split the individuals into 'n_species' contiguous slices of near-equal size.

    Populations are kept sorted by ascending fitness, so each slice holds
    individuals of comparable fitness: the first species gets the best ones,
    the last species the worst ones.
    """

    def apply(self, individuals, n_species, rng):
        bounds = np.linspace(0, len(individuals), n_species + 1).astype(int)
        return [individuals[lo:hi] for lo, hi in zip(bounds[:-1], bounds[1:])]
