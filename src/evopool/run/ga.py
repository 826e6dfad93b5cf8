"""
GA Module

This module implements the GA class, the orchestrator of the engine. A GA
evolves several populations side by side. Per-population work (generation,
evaluation, evolution, sorting) runs in parallel with joblib, one task per
population; the cross-population work (migration, best tracking) runs in the
orchestrator alone, between two parallel phases.

Classes:
    GA: Owns the populations and drives 'initialize' and 'enhance'
"""

import logging
import time
from joblib import Parallel, delayed
from typing import TYPE_CHECKING

import numpy as np

from evopool.errors          import ValidationError
from evopool.phenotype       import Individual
from evopool.pool.migration  import Migrator, MigRing
from evopool.pool.model      import Model, ModGenerational, ModMutationOnly
from evopool.pool.population import Population
from evopool.run.topology    import Topology

if TYPE_CHECKING:
    from evopool.genotype        import GenomeMaker
    from evopool.pool.speciation import Speciator
    from evopool.run.config      import Config

logger = logging.getLogger(__name__)

def _initialize_population(pop_id: int, n_individuals: int, make_genome: 'GenomeMaker',
                           seed: np.random.SeedSequence) -> Population:
    """
    Worker creating, evaluating and sorting one population.
    The population gets a generator built from its own seed, never a shared one.
    """
    population = Population.generate(pop_id, n_individuals, make_genome, np.random.default_rng(seed))
    population.evaluate()
    population.sort()
    return population

def _enhance_population(population: Population, model: Model, n_species: int,
                        speciator: 'Speciator | None', start: float) -> Population:
    """
    Worker evolving one population for one generation.

    The steps always run in this order: evolution, evaluation, sort, bookkeeping.
    The worker is the only one touching 'population' until it returns it.
    """
    if n_species > 0:
        species = population.speciate(n_species, speciator)
        for spec in species:
            model.apply(spec, population.rng)
        population.merge(species)
    else:
        model.apply(population, population.rng)

    # The model may have modified any genome, so every fitness is recomputed
    population.evaluate()
    population.sort()

    population.age         += time.time() - start
    population.generations += 1
    return population

class GA:
    """
    A genetic algorithm evolving several populations of individuals.

    The user provides a genome factory, a Topology and a Model, and optionally
    a Migrator (with its frequency), a Speciator and a logger. Calling
    'initialize' creates the populations; each call to 'enhance' then runs one
    generation.

    Public Attributes:
        make_genome:         Factory creating random genomes
        topology:            Number of populations, species and individuals
        model:               Evolution policy applied to populations or species
        migrator:            Migration policy, or None to keep populations isolated
        migration_frequency: Migration takes place every 'migration_frequency' generations
        speciator:           Speciation policy, or None for the default one
        logger:              Receives population statistics after every generation, or None
        num_jobs:            Number of parallel jobs (1 = serial, -1 = all cores)
        backend:             The joblib backend running the population workers
        populations:         The evolving populations, each sorted best first
        best:                Copy of the best individual found so far
        age:                 Accumulated wall-clock time spent in 'enhance', in seconds
        generations:         Number of calls to 'enhance' since 'initialize'

    Public Methods:
        from_config(config, make_genome): Build a GA from a Config
        validate():                       Check the settings before running
        initialize():                     Create (or reset) all the populations
        enhance():                        Run one generation
        find_best():                      Update 'best' from the heads of the populations
    """

    def __init__(self,
                 make_genome        : 'GenomeMaker',
                 topology           : Topology,
                 model              : Model,
                 migrator           : Migrator | None = None,
                 migration_frequency: int = 0,
                 speciator          : 'Speciator | None' = None,
                 logger             : logging.Logger | None = None,
                 num_jobs           : int = 1,
                 backend            : str = 'threading',
                 seed               : int | None = None):
        """
        Parameters:
            make_genome:         factory creating a random genome from a random generator
            topology:            number of populations, species and individuals
            model:               evolution policy
            migrator:            migration policy (None disables migration)
            migration_frequency: number of generations between two migrations
            speciator:           speciation policy (None uses fitness intervals)
            logger:              receives population statistics (None disables it)
            num_jobs:            number of parallel jobs for the population workers
            backend:             joblib backend ('threading', 'loky', ...)
            seed:                seed from which every random generator derives
        """
        self.make_genome         = make_genome
        self.topology            = topology
        self.model               = model
        self.migrator            = migrator
        self.migration_frequency = migration_frequency
        self.speciator           = speciator
        self.logger              = logger
        self.num_jobs            = num_jobs
        self.backend             = backend

        self.populations: list[Population] = []
        self.best       : Individual | None = None
        self.age        : float = 0.0
        self.generations: int   = 0

        self._seed_sequence = np.random.SeedSequence(seed)
        self._rng           = np.random.default_rng(self._seed_sequence)

    @classmethod
    def from_config(cls, config: 'Config', make_genome: 'GenomeMaker',
                    logger: logging.Logger | None = None,
                    speciator: 'Speciator | None' = None) -> 'GA':
        """
        Build a GA whose topology, model and migrator are described by a Config.

        Parameters:
            config:      configuration parameters
            make_genome: factory creating a random genome from a random generator
            logger:      receives population statistics (None disables it)
            speciator:   speciation policy (None uses fitness intervals)
        """
        if config.model == 'generational':
            model = ModGenerational(config.tournament_size, config.mutation_rate, config.elitism)
        elif config.model == 'mutation-only':
            model = ModMutationOnly(config.n_chosen, config.strict)
        else:
            raise ValueError(f"bad 'model' in configuration: '{config.model}'")

        if config.migrator == 'ring':
            migrator = MigRing(config.n_migrants)
        elif config.migrator in ('none', None):
            migrator = None
        else:
            raise ValueError(f"bad 'migrator' in configuration: '{config.migrator}'")

        return cls(make_genome, config.topology, model,
                   migrator            = migrator,
                   migration_frequency = config.migration_frequency,
                   speciator           = speciator,
                   logger              = logger,
                   num_jobs            = config.num_jobs,
                   backend             = config.backend,
                   seed                = config.seed)

    def validate(self) -> None:
        """
        Validate the settings of the GA to ensure it will run correctly; some
        settings or combination of settings may be incoherent during runtime.
        Checks run in a fixed order and stop at the first violation.

        Raises:
            ValidationError: describing the first violation found
        """
        if self.make_genome is None:
            raise ValidationError("'make_genome' cannot be None")
        self.topology.validate()
        if self.model is None:
            raise ValidationError("'model' cannot be None")
        self.model.validate()
        if self.migrator is not None:
            if self.migration_frequency < 1:
                raise ValidationError("'migration_frequency' should be strictly higher than 0")
            self.migrator.validate()

    def find_best(self) -> None:
        """
        Compare the first individual of each population to the current best
        individual, keeping a copy of any strictly better one. This supposes
        that the populations are sorted by ascending fitness, so that checking
        the first individual of each population is sufficient.
        """
        for population in self.populations:
            candidate = population.best
            if candidate.fitness < self.best.fitness:
                self.best = candidate.clone()

    def initialize(self) -> None:
        """
        Create every population and assign a fitness to each individual.

        Running 'initialize' after running 'enhance' resets the GA entirely.
        The settings are not validated here; call 'validate' first.
        """
        n_populations = self.topology.n_populations
        seeds         = self._seed_sequence.spawn(n_populations + 2)
        self._rng     = np.random.default_rng(seeds[n_populations])

        self.populations = Parallel(n_jobs=self.num_jobs, backend=self.backend)(
            delayed(_initialize_population)(j, self.topology.n_individuals, self.make_genome, seeds[j])
            for j in range(n_populations)
        )
        self.generations = 0
        self.age         = 0.0
        self._log_populations()

        # Unevaluated placeholder; its infinite fitness loses against any real one
        self.best = Individual.random(self.make_genome, np.random.default_rng(seeds[n_populations + 1]))
        self.find_best()

    def enhance(self) -> None:
        """
        Run one generation.

        Migration (if due) runs first in the orchestrator; then each population
        is evolved, evaluated and sorted by its own worker; finally the best
        individual is updated. Exceptions raised by the genomes, the model or
        the migrator propagate to the caller and abort the generation.
        """
        if not self.populations:
            raise RuntimeError("'initialize' must be called before 'enhance'")

        start = time.time()
        self.generations += 1

        # Migrate the individuals between the populations if there are enough
        # populations, there is a migrator and the migration frequency divides
        # the generation count
        if self._migration_due():
            logger.debug("migrating individuals at generation %d", self.generations)
            self.migrator.apply(self.populations, self._rng)
            # Migrants keep their fitness; restore the position invariant
            for population in self.populations:
                population.sort()

        self.populations = Parallel(n_jobs=self.num_jobs, backend=self.backend)(
            delayed(_enhance_population)(population, self.model, self.topology.n_species,
                                         self.speciator, start)
            for population in self.populations
        )
        self._log_populations()

        self.find_best()
        self.age += time.time() - start

    def _migration_due(self) -> bool:
        return (self.topology.n_populations > 1
                and self.migrator is not None
                and self.generations % self.migration_frequency == 0)

    def _log_populations(self) -> None:
        if self.logger is None:
            return
        for population in self.populations:
            population.log(self.logger)
