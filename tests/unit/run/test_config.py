"""
Unit tests for Config class.
"""

import pytest
import textwrap

from evopool.run.config import Config
from evopool.run.ga import GA
from evopool.run.topology import Topology


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def write_config(tmp_path):
    """Write an INI file and return its path."""
    def writer(*parts):
        path = tmp_path / 'config.ini'
        path.write_text("".join(textwrap.dedent(part) for part in parts))
        return str(path)
    return writer


MINIMAL = """
    [TOPOLOGY]
    n_populations = 3
    n_species     = 2
    n_individuals = 25

    [TERMINATION]
    max_number_generations = 50
"""


# ============================================================================
# Test Config Initialization
# ============================================================================

class TestConfigInit:
    """Test Config initialization."""

    def test_init_without_file_creates_default_config(self):
        config = Config()

        assert config.topology == Topology(2, 0, 50)
        assert config.model == 'generational'
        assert config.migrator == 'none'
        assert config.num_jobs == 1
        assert config.seed is None

    def test_init_with_nonexistent_file_raises_error(self):
        with pytest.raises(FileNotFoundError, match="Configuration file .* not found"):
            Config('nonexistent_file.ini')

    def test_init_with_minimal_config(self, write_config):
        config = Config(write_config(MINIMAL))

        assert config.topology == Topology(3, 2, 25)
        assert config.max_number_generations == 50

    def test_minimal_config_uses_defaults(self, write_config):
        config = Config(write_config(MINIMAL))

        assert config.model == 'generational'
        assert config.tournament_size == 3
        assert config.mutation_rate == 0.5
        assert config.elitism == 1
        assert config.migrator == 'none'
        assert config.migration_frequency == 0
        assert config.backend == 'threading'
        assert config.fitness_termination_check is False

    def test_missing_required_option_raises(self, write_config):
        import configparser
        with pytest.raises(configparser.NoOptionError):
            Config(write_config("""
                [TOPOLOGY]
                n_populations = 3
                n_species     = 2

                [TERMINATION]
                max_number_generations = 50
            """))


# ============================================================================
# Test Config Sections
# ============================================================================

class TestConfigSections:
    """Test parsing of the optional sections."""

    def test_full_config(self, write_config):
        config = Config(write_config(MINIMAL, """
            [MODEL]
            model    = mutation-only
            n_chosen = 4
            strict   = True

            [MIGRATION]
            migrator            = ring
            migration_frequency = 5
            n_migrants          = 2

            [RUN]
            num_jobs = -1
            backend  = loky
            seed     = 7
        """))

        assert config.model == 'mutation-only'
        assert config.n_chosen == 4
        assert config.strict is True
        assert config.migrator == 'ring'
        assert config.migration_frequency == 5
        assert config.n_migrants == 2
        assert config.num_jobs == -1
        assert config.backend == 'loky'
        assert config.seed == 7

    def test_none_value_maps_to_none(self, write_config):
        config = Config(write_config(MINIMAL, """
            [RUN]
            seed = None
        """))

        assert config.seed is None

    def test_explicit_none_migrator_builds_ga_without_migration(self, write_config, make_genome):
        config = Config(write_config(MINIMAL, """
            [MIGRATION]
            migrator = none
        """))

        assert config.migrator == 'none'

        ga = GA.from_config(config, make_genome)
        assert ga.migrator is None

    def test_termination_threshold(self, write_config):
        config = Config(write_config("""
            [TOPOLOGY]
            n_populations = 1
            n_species     = 0
            n_individuals = 10

            [TERMINATION]
            max_number_generations    = 20
            fitness_termination_check = yes
            fitness_threshold         = 0.001
        """))

        assert config.fitness_termination_check is True
        assert config.fitness_threshold == pytest.approx(0.001)

    def test_invalid_model_raises(self, write_config):
        with pytest.raises(ValueError, match="Invalid model"):
            Config(write_config(MINIMAL, """
                [MODEL]
                model = steady-state
            """))

    def test_invalid_migrator_raises(self, write_config):
        with pytest.raises(ValueError, match="Invalid migrator"):
            Config(write_config(MINIMAL, """
                [MIGRATION]
                migrator = star
            """))
