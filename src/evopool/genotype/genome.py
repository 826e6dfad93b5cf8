"""
Genome Module

This module defines the abstract Genome class, the capability set that every
user-supplied candidate solution must provide so that it can be evolved by
the engine.

The engine never looks inside a genome. It only asks a genome to evaluate
itself, to mutate, to recombine with another genome and to clone itself.
Fitness follows the "lower is better" convention throughout the package.

Classes:
    Genome: Abstract base class for candidate solutions

Type Aliases:
    GenomeMaker: Factory building a new random genome from a random generator
"""

from abc    import ABC, abstractmethod
from typing import Callable

import numpy as np

class Genome(ABC):
    """
    Abstract base class for a candidate solution.

    Subclasses must implement:
    - evaluate():              Compute the fitness (lower is better)
    - mutate(rng):             Modify the genome in place
    - crossover(other, rng):   Produce two offspring from two parents
    - clone():                 Return an independent deep copy

    All randomness must be drawn from the generator that is passed in.
    Each population owns its own generator, so a genome that draws from a
    global random state would break the reproducibility of seeded runs.
    """

    @abstractmethod
    def evaluate(self) -> float:
        """
        Evaluate and return the fitness of this genome.

        Returns:
            float: Fitness score, lower values indicate better solutions
        """
        pass

    @abstractmethod
    def mutate(self, rng: np.random.Generator) -> None:
        """
        Mutate this genome in place.

        Parameters:
            rng: Random generator owned by the calling population
        """
        pass

    @abstractmethod
    def crossover(self, other: 'Genome', rng: np.random.Generator) -> tuple['Genome', 'Genome']:
        """
        Recombine this genome with another one.

        Neither parent is modified.

        Parameters:
            other: The genome to mate with
            rng:   Random generator owned by the calling population

        Returns:
            Two new offspring genomes
        """
        pass

    @abstractmethod
    def clone(self) -> 'Genome':
        """
        Return an independent deep copy of this genome.
        """
        pass

GenomeMaker = Callable[[np.random.Generator], Genome]
