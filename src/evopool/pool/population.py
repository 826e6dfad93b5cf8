"""
Population Module

This module implements the Population class, the unit of parallelism of the
engine. Each population is evolved by its own worker during a generation and
owns an independent random generator, so no state is shared between workers.

Classes:
    Population: An ordered collection of individuals plus its bookkeeping
"""

import logging
from typing import TYPE_CHECKING

import numpy as np

from evopool.phenotype    import Individual
from evopool.pool.species import Species, speciate, merge

if TYPE_CHECKING:
    from evopool.genotype        import GenomeMaker
    from evopool.pool.speciation import Speciator

logger = logging.getLogger(__name__)

class Population:
    """
    A population of evolving individuals.

    Once evaluated, the individuals of a population are kept sorted by
    ascending fitness, so that the best individual is always the first one.
    Every method that relies on positions (best tracking, fitness interval
    speciation) assumes this ordering; the orchestrator restores it right
    after each evaluation.

    Public Attributes:
        id:          Index of the population inside the GA
        individuals: The members of the population, best first once sorted
        rng:         Random generator owned by this population
        age:         Accumulated wall-clock time spent evolving, in seconds
        generations: Number of generations this population has gone through

    Public Methods:
        generate(pop_id, n_individuals, make_genome, rng): Create a random population
        evaluate():                                       Evaluate every individual
        sort():                                           Sort by ascending fitness
        speciate(n_species, speciator):                   Split into species
        merge(species):                                   Replace individuals with merged species
        fitness_stats():                                  Summary statistics of the fitness values
        log(logger):                                      Report statistics, never raising
    """

    def __init__(self, pop_id: int, individuals: list[Individual], rng: np.random.Generator):
        """
        Parameters:
            pop_id:      index of the population inside the GA
            individuals: the initial members of the population
            rng:         random generator owned by this population
        """
        self.id         : int                 = pop_id
        self.individuals: list[Individual]    = individuals
        self.rng        : np.random.Generator = rng
        self.age        : float               = 0.0
        self.generations: int                 = 0

    @classmethod
    def generate(cls, pop_id: int, n_individuals: int, make_genome: 'GenomeMaker',
                 rng: np.random.Generator) -> 'Population':
        """
        Create a population of unevaluated individuals.

        Parameters:
            pop_id:        index of the population inside the GA
            n_individuals: number of individuals to create
            make_genome:   genome factory, called once per individual
            rng:           random generator owned by the new population; it seeds every genome
        """
        individuals = [Individual.random(make_genome, rng) for _ in range(n_individuals)]
        return cls(pop_id, individuals, rng)

    @property
    def best(self) -> Individual:
        """
        The first individual, which is the best one as long as the population is sorted.
        """
        return self.individuals[0]

    def evaluate(self) -> None:
        """
        Evaluate every individual, discarding previously cached fitness values.
        """
        for individual in self.individuals:
            individual.evaluate()

    def sort(self) -> None:
        """
        Sort the individuals by ascending fitness (stable).
        """
        self.individuals.sort(key=lambda ind: ind.fitness)

    def speciate(self, n_species: int, speciator: 'Speciator | None' = None) -> list[Species]:
        """
        Split the individuals into 'n_species' species.
        The population itself is left unchanged until 'merge' is called.
        """
        return speciate(self, n_species, speciator)

    def merge(self, species: list[Species]) -> None:
        """
        Replace the individuals with the concatenation of the given species.
        """
        self.individuals = merge(species)

    def fitness_stats(self) -> dict[str, float]:
        """
        Return the minimum, maximum, mean and standard deviation of the fitness values.
        """
        fitness = np.array([ind.fitness for ind in self.individuals], dtype=float)
        return {'min' : float(fitness.min()),
                'max' : float(fitness.max()),
                'mean': float(fitness.mean()),
                'std' : float(fitness.std())}

    def log(self, sink: logging.Logger) -> None:
        """
        Report the current state of the population to a logger.

        Logging is fire-and-forget: a failure while building or emitting the
        record is reported as a warning and never reaches the caller.

        Parameters:
            sink: the logger receiving one INFO record
        """
        try:
            stats = self.fitness_stats()
            sink.info("population=%d generations=%d age=%.3fs min=%g max=%g mean=%g std=%g",
                      self.id, self.generations, self.age,
                      stats['min'], stats['max'], stats['mean'], stats['std'])
        except Exception:
            logger.warning("could not log population %d", self.id, exc_info=True)

    def __len__(self):
        return len(self.individuals)

    def __str__(self):
        return '\n'.join(str(individual) for individual in self.individuals)
