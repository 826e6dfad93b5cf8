"""
Model Module

A model applies one generation's worth of evolutionary operators (selection,
crossover, mutation) to a population or to a species. The engine only depends
on the abstract Model class; two ready-made models are provided, both relying
exclusively on the Genome capability set.

Classes:
    Model:           Abstract evolution policy
    ModGenerational: Elitism plus tournament selection, crossover and mutation
    ModMutationOnly: Replaces randomly chosen individuals with mutated clones
"""

from abc    import ABC, abstractmethod
from typing import Any

import numpy as np

from evopool.errors    import ValidationError
from evopool.phenotype import Individual

class Model(ABC):
    """
    Abstract base class for evolution models.

    A model receives any object exposing an 'individuals' list (a Population
    or a Species) and rewrites that list in place. It may change the number of
    individuals but must leave a valid list of Individual objects behind. The
    fitness of the resulting individuals does not need to be up to date: the
    engine re-evaluates and re-sorts every population after the model ran.
    """

    @abstractmethod
    def apply(self, pool: Any, rng: np.random.Generator) -> None:
        """
        Evolve the individuals of a population or species for one generation.

        Parameters:
            pool: object with an 'individuals' list, modified in place
            rng:  random generator owned by the population being evolved
        """
        pass

    def validate(self) -> None:
        """
        Check the parameters of the model.

        Raises:
            ValidationError: if a parameter is out of range
        """
        pass

def _tournament(individuals: list[Individual], size: int, rng: np.random.Generator) -> Individual:
    """
    Pick 'size' distinct contestants at random and return the fittest one.
    """
    size    = min(size, len(individuals))
    indexes = rng.choice(len(individuals), size=size, replace=False)
    return min((individuals[i] for i in indexes), key=lambda ind: ind.fitness)

class ModGenerational(Model):
    """
    Replace the whole group with a new generation of the same size.

    The 'elitism' best individuals are carried over unchanged. The remaining
    slots are filled with offspring of parents chosen by tournament selection;
    each child is mutated with probability 'mutation_rate'. Groups with fewer
    than two members cannot mate, so their members are only mutated.

    Public Attributes:
        tournament_size: Number of contestants per tournament
        mutation_rate:   Probability of mutating each child
        elitism:         Number of best individuals preserved as-is
    """

    def __init__(self, tournament_size: int = 3, mutation_rate: float = 0.5, elitism: int = 1):
        self.tournament_size: int   = tournament_size
        self.mutation_rate  : float = mutation_rate
        self.elitism        : int   = elitism

    def validate(self):
        if self.tournament_size < 1:
            raise ValidationError("'tournament_size' should be higher or equal to 1")
        if not 0.0 <= self.mutation_rate <= 1.0:
            raise ValidationError("'mutation_rate' should be between 0 and 1")
        if self.elitism < 0:
            raise ValidationError("'elitism' should be higher or equal to 0")

    def apply(self, pool, rng):
        individuals = pool.individuals
        size        = len(individuals)

        if size < 2:
            for individual in individuals:
                if rng.random() < self.mutation_rate:
                    individual.mutate(rng)
            return

        ranked    = sorted(individuals, key=lambda ind: ind.fitness)
        offspring = [individual.clone() for individual in ranked[:min(self.elitism, size)]]

        while len(offspring) < size:
            parent1 = _tournament(individuals, self.tournament_size, rng)
            parent2 = _tournament(individuals, self.tournament_size, rng)
            for child in parent1.crossover(parent2, rng):
                if len(offspring) == size:
                    break
                if rng.random() < self.mutation_rate:
                    child.mutate(rng)
                offspring.append(child)

        pool.individuals = offspring

class ModMutationOnly(Model):
    """
    Mutate clones of 'n_chosen' randomly picked individuals.

    When 'strict' is False a mutant always replaces its parent. When 'strict'
    is True the mutant is evaluated right away and replaces its parent only if
    its fitness is strictly lower.

    Public Attributes:
        n_chosen: Number of individuals mutated per generation
        strict:   Whether mutants must improve on their parent to be kept
    """

    def __init__(self, n_chosen: int = 1, strict: bool = False):
        self.n_chosen: int  = n_chosen
        self.strict  : bool = strict

    def validate(self):
        if self.n_chosen < 1:
            raise ValidationError("'n_chosen' should be higher or equal to 1")

    def apply(self, pool, rng):
        individuals = pool.individuals
        if not individuals:
            return

        chosen = rng.choice(len(individuals), size=min(self.n_chosen, len(individuals)), replace=False)
        for i in chosen:
            mutant = individuals[i].clone()
            mutant.mutate(rng)
            if self.strict:
                mutant.evaluate()
                if mutant.fitness >= individuals[i].fitness:
                    continue
            individuals[i] = mutant
