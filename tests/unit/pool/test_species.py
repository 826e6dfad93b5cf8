"""
Unit tests for evopool.pool.species and evopool.pool.speciation modules.
"""

import pytest

from evopool.pool.population import Population
from evopool.pool.species import Species, speciate, merge
from evopool.pool.speciation import SpecFitnessInterval


class TestSpecies:
    """Test the Species class."""

    def test_init_copies_member_list(self, make_individuals):
        members = make_individuals([1.0, 2.0])

        species = Species(1, members)
        members.append(None)

        assert species.id == 1
        assert len(species) == 2


class TestSpecFitnessInterval:
    """Test the default speciation policy."""

    @pytest.mark.parametrize("n_individuals, n_species, sizes", [
        (10, 3, [3, 3, 4]),
        (6, 2, [3, 3]),
        (5, 1, [5]),
        (2, 3, [0, 1, 1]),
        (1, 1, [1]),
    ])
    def test_group_sizes(self, make_individuals, rng, n_individuals, n_species, sizes):
        individuals = make_individuals(range(n_individuals))

        groups = SpecFitnessInterval().apply(individuals, n_species, rng)

        assert [len(group) for group in groups] == sizes

    def test_partition_is_total_and_disjoint(self, make_individuals, rng):
        individuals = make_individuals(range(17))

        groups = SpecFitnessInterval().apply(individuals, 4, rng)

        ids = [ind.ID for group in groups for ind in group]
        assert sorted(ids) == sorted(ind.ID for ind in individuals)
        assert len(ids) == len(set(ids))

    def test_groups_are_contiguous_fitness_bands(self, make_individuals, rng):
        individuals = make_individuals(range(9))

        groups = SpecFitnessInterval().apply(individuals, 3, rng)

        assert [[ind.fitness for ind in group] for group in groups] == \
            [[0.0, 1.0, 2.0], [3.0, 4.0, 5.0], [6.0, 7.0, 8.0]]


class TestSpeciateMerge:
    """Test the speciate and merge functions."""

    def test_speciate_numbers_species(self, make_individuals, rng):
        population = Population(0, make_individuals(range(8)), rng)

        species = speciate(population, 4)

        assert [spec.id for spec in species] == [0, 1, 2, 3]
        assert sum(len(spec) for spec in species) == 8

    def test_merge_concatenates_in_species_order(self, make_individuals):
        first = Species(0, make_individuals([5.0, 6.0]))
        second = Species(1, make_individuals([1.0]))

        merged = merge([first, second])

        assert [ind.fitness for ind in merged] == [5.0, 6.0, 1.0]

    def test_round_trip_preserves_count_after_model(self, make_individuals, rng, decrement_model):
        population = Population(0, make_individuals(range(10)), rng)

        species = population.speciate(3)
        for spec in species:
            decrement_model.apply(spec, rng)
        population.merge(species)

        assert len(population) == 10
        assert len(decrement_model.calls) == 3
