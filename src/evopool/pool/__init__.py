"""
Pool Package

This package contains the data model evolved by the engine and the pluggable
policies that act on it.

Modules:
    population: Population of individuals and its bookkeeping
    species:    Transient split of a population, and the merge back
    speciation: Policies deciding how a population is split into species
    model:      Policies evolving a population or species for one generation
    migration:  Policies exchanging individuals between populations

Exported Classes:
    Population:          Ordered collection of individuals, best first
    Species:             Temporary group of individuals from one population
    Speciator:           Abstract speciation policy
    SpecFitnessInterval: Splits a sorted population into fitness bands
    Model:               Abstract evolution policy
    ModGenerational:     Elitism, tournament selection, crossover and mutation
    ModMutationOnly:     Mutation of randomly chosen individuals
    Migrator:            Abstract migration policy
    MigRing:             Ring exchange between neighbouring populations
"""

from evopool.pool.speciation import Speciator, SpecFitnessInterval
from evopool.pool.species    import Species, speciate, merge
from evopool.pool.population import Population
from evopool.pool.model      import Model, ModGenerational, ModMutationOnly
from evopool.pool.migration  import Migrator, MigRing

__all__ = [
    'Population',
    'Species',
    'speciate',
    'merge',
    'Speciator',
    'SpecFitnessInterval',
    'Model',
    'ModGenerational',
    'ModMutationOnly',
    'Migrator',
    'MigRing',
]
