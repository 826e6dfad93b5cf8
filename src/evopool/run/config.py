import configparser
import os

from evopool.run.topology import Topology

class Config:

    MODELS    = ('generational', 'mutation-only')
    MIGRATORS = ('none', 'ring')

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a Config with defaults.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a default Config for manual attribute setting.
        """

        # Default config for testing/manual setup
        if config_file is None:
            self.n_populations = 2
            self.n_species     = 0
            self.n_individuals = 50

            self.model           = 'generational'
            self.tournament_size = 3
            self.mutation_rate   = 0.5
            self.elitism         = 1
            self.n_chosen        = 1
            self.strict          = False

            self.migrator            = 'none'
            self.migration_frequency = 0
            self.n_migrants          = 1

            self.num_jobs = 1
            self.backend  = 'threading'
            self.seed     = None

            self.max_number_generations    = 100
            self.fitness_termination_check = False
            self.fitness_threshold         = 0.0

            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                if default is not _NO_DEFAULT:
                    return default
                raise

        # [TOPOLOGY]

        # The number of populations, evolved independently (and in parallel).
        self.n_populations = get_value('TOPOLOGY', 'n_populations', int)

        # The number of species each population is split into at every generation.
        # Use 0 to apply the model to whole populations.
        self.n_species = get_value('TOPOLOGY', 'n_species', int)

        # The number of individuals initially created in each population.
        self.n_individuals = get_value('TOPOLOGY', 'n_individuals', int)

        # [MODEL]

        # The evolution model applied to each population (or species).
        # Allowed values:
        #   "generational"  - elitism plus tournament selection, crossover and mutation
        #   "mutation-only" - replace randomly chosen individuals with mutated clones
        self.model = get_value('MODEL', 'model', str, default='generational')
        if self.model not in self.MODELS:
            raise ValueError(f"Invalid model '{self.model}', expected one of {self.MODELS}")

        # The number of contestants in each selection tournament ("generational" only).
        self.tournament_size = get_value('MODEL', 'tournament_size', int, default=3)

        # The probability that a child is mutated ("generational" only).
        self.mutation_rate = get_value('MODEL', 'mutation_rate', float, default=0.5)

        # The number of best individuals carried over unchanged ("generational" only).
        self.elitism = get_value('MODEL', 'elitism', int, default=1)

        # The number of individuals mutated per generation ("mutation-only" only).
        self.n_chosen = get_value('MODEL', 'n_chosen', int, default=1)

        # Whether a mutant must beat its parent to replace it ("mutation-only" only).
        self.strict = get_value('MODEL', 'strict', bool, default=False)

        # [MIGRATION] (optional section)

        # The migration policy.
        # Allowed values:
        #   "none" - populations never exchange individuals
        #   "ring" - each population swaps individuals with the next one
        self.migrator = get_value('MIGRATION', 'migrator', str, default='none') or 'none'
        if self.migrator not in self.MIGRATORS:
            raise ValueError(f"Invalid migrator '{self.migrator}', expected one of {self.MIGRATORS}")

        # Migration takes place every 'migration_frequency' generations.
        self.migration_frequency = get_value('MIGRATION', 'migration_frequency', int, default=0)

        # The number of individuals swapped between neighbouring populations.
        self.n_migrants = get_value('MIGRATION', 'n_migrants', int, default=1)

        # [RUN] (optional section)

        # Number of parallel jobs evolving populations.
        #   1  = serial (no parallelization)
        #  -1  = use all available CPU cores
        #  >1  = use specified number of jobs
        self.num_jobs = get_value('RUN', 'num_jobs', int, default=1)

        # The joblib backend running the population workers ("threading", "loky", ...).
        # Process based backends require picklable genomes, models and genome factories.
        self.backend = get_value('RUN', 'backend', str, default='threading')

        # Seed of the random number generators; "None" draws fresh entropy.
        self.seed = get_value('RUN', 'seed', int, default=None)

        # [TERMINATION]

        # The number of generations after which to stop the run.
        self.max_number_generations = get_value('TERMINATION', 'max_number_generations', int)

        # Whether to stop the run as soon as the best fitness reaches 'fitness_threshold'.
        self.fitness_termination_check = get_value('TERMINATION', 'fitness_termination_check', bool, default=False)

        # The fitness value which when met or undercut causes the run to end.
        # Only applicable if 'fitness_termination_check' is 'True'.
        self.fitness_threshold = get_value('TERMINATION', 'fitness_threshold', float, default=0.0)

    @property
    def topology(self) -> Topology:
        """
        The Topology described by the [TOPOLOGY] section.
        """
        return Topology(self.n_populations, self.n_species, self.n_individuals)
