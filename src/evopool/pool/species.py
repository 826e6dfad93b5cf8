"""
Species Module

This module implements the Species class. A species is a transient cluster
of the individuals of one population: the population is split into species,
the evolution model is applied to each species independently, and the
species are merged back into the population.

Classes:
    Species: A temporary group of individuals taken from one population

Functions:
    speciate(population, n_species, speciator): Split a population into species
    merge(species):                             Concatenate species back into one list
"""

from typing import TYPE_CHECKING

from evopool.pool.speciation import Speciator, SpecFitnessInterval

if TYPE_CHECKING:
    from evopool.phenotype       import Individual
    from evopool.pool.population import Population

class Species:
    """
    A group of individuals evolved in isolation for one generation.

    For the purpose of applying a Model a species behaves like a population:
    the model only reads and writes its 'individuals' attribute.

    Public Attributes:
        id:          Index of the species inside its population
        individuals: The members of this species
    """

    def __init__(self, species_id: int, individuals: list['Individual']):
        """
        Parameters:
            species_id:  index of the species inside its population
            individuals: the members of this species
        """
        self.id         : int                = species_id
        self.individuals: list['Individual'] = list(individuals)

    def __len__(self):
        return len(self.individuals)

def speciate(population: 'Population', n_species: int,
             speciator: Speciator | None = None) -> list[Species]:
    """
    Split the individuals of a population into species.

    Parameters:
        population: The population to split; it is not modified
        n_species:  The number of species to create
        speciator:  The partitioning policy (defaults to SpecFitnessInterval)

    Returns:
        A list of 'n_species' species covering every individual exactly once
    """
    speciator = speciator or SpecFitnessInterval()
    groups    = speciator.apply(population.individuals, n_species, population.rng)
    return [Species(i, group) for i, group in enumerate(groups)]

def merge(species: list[Species]) -> list['Individual']:
    """
    Concatenate the members of each species, in species order.

    The result is not sorted by fitness; callers re-sort after evaluating.
    """
    return [individual for spec in species for individual in spec.individuals]
