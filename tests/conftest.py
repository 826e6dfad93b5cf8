"""Pytest configuration and shared fixtures."""

import pytest
import sys
from pathlib import Path

import numpy as np

# Add the source directory to the Python path
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir / 'src'))

from evopool.genotype import Genome
from evopool.phenotype import Individual
from evopool.pool.model import Model


class ScalarGenome(Genome):
    """
    A genome holding a single number; its fitness is the number itself.

    Mutation adds 'step' to the value (a negative step improves the fitness).
    Crossover returns copies of both parents, swapped.
    """

    def __init__(self, value, step=-1.0):
        self.value = value
        self.step = step

    def evaluate(self):
        return float(self.value)

    def mutate(self, rng):
        self.value += self.step

    def crossover(self, other, rng):
        return ScalarGenome(other.value, self.step), ScalarGenome(self.value, self.step)

    def clone(self):
        return ScalarGenome(self.value, self.step)

    def __str__(self):
        return f"ScalarGenome({self.value})"


class DecrementModel(Model):
    """Model decreasing the value of every genome by exactly 1, in place."""

    def __init__(self):
        self.calls = []

    def apply(self, pool, rng):
        self.calls.append(pool)
        for individual in pool.individuals:
            individual.genome.value -= 1


@pytest.fixture
def genome_class():
    """The ScalarGenome class, for tests building genomes by hand."""
    return ScalarGenome


@pytest.fixture
def make_genome():
    """Genome factory drawing an integer value in [0, 100) from the given generator."""
    def factory(rng):
        return ScalarGenome(float(rng.integers(0, 100)))
    return factory


@pytest.fixture
def decrement_model():
    """A fresh DecrementModel."""
    return DecrementModel()


@pytest.fixture
def rng():
    """A seeded random generator."""
    return np.random.default_rng(42)


@pytest.fixture
def make_individuals(genome_class):
    """Build evaluated individuals from a list of values."""
    def builder(values):
        individuals = [Individual(genome_class(v)) for v in values]
        for individual in individuals:
            individual.evaluate()
        return individuals
    return builder
