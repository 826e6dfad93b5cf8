"""
Unit tests for evopool.phenotype.individual module.
"""

import math
import pytest
from unittest.mock import Mock

from evopool.phenotype import Individual


class TestIndividualInit:
    """Test Individual.__init__ method."""

    def test_fitness_defaults_to_infinity(self, genome_class):
        """Test that an unevaluated individual is infinitely bad."""
        individual = Individual(genome_class(1.0))

        assert individual.fitness == math.inf
        assert individual.evaluated is False

    def test_ids_are_unique(self, genome_class):
        """Test that each individual receives a new ID."""
        individuals = [Individual(genome_class(1.0)) for _ in range(100)]

        assert len({ind.ID for ind in individuals}) == 100

    def test_random_uses_factory_with_generator(self, genome_class, rng):
        """Test that Individual.random passes the generator to the factory."""
        factory = Mock(return_value=genome_class(5.0))

        individual = Individual.random(factory, rng)

        factory.assert_called_once_with(rng)
        assert individual.genome.value == 5.0
        assert individual.evaluated is False


class TestIndividualEvaluate:
    """Test Individual.evaluate method."""

    def test_evaluate_caches_fitness(self, genome_class):
        individual = Individual(genome_class(7.0))

        fitness = individual.evaluate()

        assert fitness == 7.0
        assert individual.fitness == 7.0
        assert individual.evaluated is True

    def test_evaluate_is_unconditional(self, genome_class):
        """Test that evaluating again picks up changes to the genome."""
        individual = Individual(genome_class(7.0))
        individual.evaluate()
        individual.genome.value = 2.0

        individual.evaluate()

        assert individual.fitness == 2.0


class TestIndividualMutate:
    """Test Individual.mutate method."""

    def test_mutate_changes_genome_and_marks_stale(self, genome_class, rng):
        individual = Individual(genome_class(7.0))
        individual.evaluate()

        individual.mutate(rng)

        assert individual.genome.value == 6.0
        assert individual.evaluated is False
        # The cached fitness is left untouched until the next evaluation
        assert individual.fitness == 7.0


class TestIndividualCrossover:
    """Test Individual.crossover method."""

    def test_crossover_returns_two_new_unevaluated_individuals(self, genome_class, rng):
        parent1 = Individual(genome_class(1.0))
        parent2 = Individual(genome_class(2.0))
        parent1.evaluate()
        parent2.evaluate()

        child1, child2 = parent1.crossover(parent2, rng)

        assert {child1.genome.value, child2.genome.value} == {1.0, 2.0}
        assert child1.evaluated is False and child2.evaluated is False
        assert child1.ID not in (parent1.ID, parent2.ID)
        assert child1.genome is not parent1.genome


class TestIndividualClone:
    """Test Individual.clone method."""

    def test_clone_keeps_fitness(self, genome_class):
        individual = Individual(genome_class(4.0))
        individual.evaluate()

        twin = individual.clone()

        assert twin.fitness == 4.0
        assert twin.evaluated is True
        assert twin.ID != individual.ID

    def test_clone_shares_no_genome(self, genome_class):
        """Test that changing the original does not affect the clone."""
        individual = Individual(genome_class(4.0))
        twin = individual.clone()

        individual.genome.value = 100.0

        assert twin.genome is not individual.genome
        assert twin.genome.value == 4.0
