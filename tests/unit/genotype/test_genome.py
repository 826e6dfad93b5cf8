"""
Unit tests for evopool.genotype.genome module.
"""

import pytest

from evopool.genotype import Genome


class TestGenomeAbstract:
    """Test the abstract capability set."""

    def test_cannot_instantiate_base_class(self):
        """Test that Genome itself cannot be instantiated."""
        with pytest.raises(TypeError):
            Genome()

    def test_subclass_missing_methods_cannot_be_instantiated(self):
        """Test that a subclass must implement every capability."""
        class Incomplete(Genome):
            def evaluate(self):
                return 0.0

        with pytest.raises(TypeError):
            Incomplete()

    def test_complete_subclass_is_instantiable(self, genome_class):
        """Test that a subclass implementing every capability works."""
        genome = genome_class(3.0)

        assert isinstance(genome, Genome)
        assert genome.evaluate() == 3.0
