"""
evopool - a generic evolutionary-computation engine.

Given a user-supplied way to create and evaluate candidate solutions
("genomes"), evopool evolves a collection of independent populations over
successive generations, optionally splitting each population into species
and periodically migrating individuals between populations, while tracking
the best solution found. Fitness is minimised.

Main components:
- genotype:  The Genome capability set implemented by user code
- phenotype: Individuals (a genome plus its fitness)
- pool:      Populations, species, and the model/migrator/speciator policies
- run:       Topology, configuration, the GA orchestrator, trials and experiments

Example:
    >>> from evopool import GA, Topology, ModGenerational
    >>> ga = GA(make_genome, Topology(n_populations=4, n_species=0, n_individuals=30),
    ...         ModGenerational())
    >>> ga.validate()
    >>> ga.initialize()
    >>> for _ in range(100):
    ...     ga.enhance()
    >>> print(ga.best.fitness)
"""

__version__ = "0.1.0"

from evopool.errors    import ValidationError
from evopool.genotype  import Genome, GenomeMaker
from evopool.phenotype import Individual
from evopool.pool      import (Population, Species, Speciator, SpecFitnessInterval,
                               Model, ModGenerational, ModMutationOnly, Migrator, MigRing)
from evopool.run       import Topology, Config, GA, Trial, Experiment

__all__ = [
    "ValidationError",
    "Genome",
    "GenomeMaker",
    "Individual",
    "Population",
    "Species",
    "Speciator",
    "SpecFitnessInterval",
    "Model",
    "ModGenerational",
    "ModMutationOnly",
    "Migrator",
    "MigRing",
    "Topology",
    "Config",
    "GA",
    "Trial",
    "Experiment",
]
