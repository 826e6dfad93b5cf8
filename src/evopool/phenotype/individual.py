"""
Individual Module

This module implements the Individual class, the unit of selection handled
by populations, species, models and migrators.

Classes:
    Individual: A genome together with its cached fitness
"""

import math
import uuid
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from evopool.genotype import Genome, GenomeMaker

class Individual:
    """
    An individual in an evolving population.

    You can regard an individual as a thin wrapper around a genome, to which it
    adds a unique ID and a cached fitness. The fitness is only meaningful once
    the individual has been evaluated; before that it holds the sentinel value
    'math.inf', which compares as worse than any real fitness.

    Public Attributes:
        ID:        Identifier for this individual, unique across processes
        genome:    The candidate solution
        fitness:   Cached fitness score ('math.inf' until evaluated)
        evaluated: Whether 'fitness' reflects the current genome

    Public Methods:
        random(make_genome, rng): Build an individual from a genome factory
        evaluate():               Recompute and cache the fitness
        mutate(rng):              Mutate the genome in place
        crossover(other, rng):    Produce two offspring
        clone():                  Create an independent copy, fitness included
    """

    def __init__(self, genome: 'Genome', fitness: float = math.inf):
        """
        Parameters:
            genome:  The candidate solution carried by this individual
            fitness: Initial fitness; the default marks the individual as "infinitely bad"
        """
        # individuals are also created inside process-backend workers
        self.ID       : str      = uuid.uuid4().hex
        self.genome   : 'Genome' = genome
        self.fitness  : float    = fitness
        self.evaluated: bool     = False

    @classmethod
    def random(cls, make_genome: 'GenomeMaker', rng: np.random.Generator) -> 'Individual':
        """
        Create an unevaluated individual from a genome factory.
        """
        return cls(make_genome(rng))

    def evaluate(self) -> float:
        """
        Unconditionally recompute the fitness of the genome and cache it.

        Returns:
            The new fitness
        """
        self.fitness   = self.genome.evaluate()
        self.evaluated = True
        return self.fitness

    def mutate(self, rng: np.random.Generator) -> None:
        """
        Mutate the genome in place; the cached fitness becomes stale.
        """
        self.genome.mutate(rng)
        self.evaluated = False

    def crossover(self, other: 'Individual', rng: np.random.Generator) -> tuple['Individual', 'Individual']:
        """
        Create two unevaluated offspring by recombining the genomes of two individuals.

        Parameters:
            other: the Individual with whom this Individual is mating
            rng:   random generator owned by the calling population

        Returns:
            The two offspring resulting from the crossover
        """
        genome1, genome2 = self.genome.crossover(other.genome, rng)
        return Individual(genome1), Individual(genome2)

    def clone(self) -> 'Individual':
        """
        Create a copy of this individual that shares no state with it.
        The copy keeps the fitness but receives a new ID.
        """
        twin           = Individual(self.genome.clone(), self.fitness)
        twin.evaluated = self.evaluated
        return twin

    def __str__(self):
        return f"ID={self.ID}, fitness={self.fitness:.4f}\n{self.genome}"
