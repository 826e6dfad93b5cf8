"""
Sphere Function Minimisation

This module implements the sphere function as a benchmark for the engine.
The sphere function is the sum of the squares of the coordinates of a point:

    f(x) = Σ x_i²

It has a single global minimum, f(0, ..., 0) = 0, and no local minima, which
makes it a good smoke test: any working genetic algorithm must drive the
best fitness towards zero.

Classes:
    VectorGenome:      A point in R^n evolved with gaussian mutation and uniform crossover
    Trial_Sphere:      Trial printing a short progress line per generation
    Experiment_Sphere: Multi-trial experiment on the sphere function

Usage:
    Single Trial:
        config = Config("examples/configs/config_sphere.ini")
        trial  = Trial_Sphere(config, make_vector_genome)
        trial.run()

    Experiment (Multiple Trials):
        experiment = Experiment_Sphere(num_trials=20, config=config, make_genome=make_vector_genome)
        experiment.run(num_jobs=-1)
"""

import numpy as np

from evopool.genotype import Genome
from evopool.run      import Experiment, Trial

class VectorGenome(Genome):
    """
    A point in R^n.

    Mutation adds gaussian noise to one random coordinate; crossover swaps
    each coordinate between the two parents with probability 0.5.
    """

    DIMENSIONS = 5
    BOUND      = 10.0
    SIGMA      = 0.5

    def __init__(self, values: np.ndarray):
        self.values = values

    def evaluate(self) -> float:
        return float(np.sum(self.values ** 2))

    def mutate(self, rng):
        k = rng.integers(len(self.values))
        self.values[k] += rng.normal(0.0, self.SIGMA)

    def crossover(self, other, rng):
        mask   = rng.random(len(self.values)) < 0.5
        child1 = np.where(mask, self.values, other.values)
        child2 = np.where(mask, other.values, self.values)
        return VectorGenome(child1), VectorGenome(child2)

    def clone(self):
        return VectorGenome(self.values.copy())

    def __str__(self):
        return np.array2string(self.values, precision=4)

def make_vector_genome(rng: np.random.Generator) -> VectorGenome:
    """
    Genome factory: a point drawn uniformly in [-BOUND, BOUND]^DIMENSIONS.
    """
    return VectorGenome(rng.uniform(-VectorGenome.BOUND, VectorGenome.BOUND, VectorGenome.DIMENSIONS))

class Trial_Sphere(Trial):
    """
    Trial on the sphere function, printing one line every ten generations.
    """

    def _report_progress(self):
        if self.ga.generations % 10 == 0:
            print(f"generation {self.ga.generations:4d}  best fitness {self.ga.best.fitness:.6f}")

    def _final_report(self):
        status = "SUCCESS" if not self.failed else "FAILURE"
        print(f"\n{status} after {self.ga.generations} generations ({self.ga.age:.2f}s)")
        print(f"best individual: {self.ga.best}")

class Experiment_Sphere(Experiment):
    """
    Many independent trials on the sphere function.
    """

    def _final_report(self):
        generations = [r["generations"] for r in self.results if r["success"]]
        print(f"success rate: {100 * self.success_rate:.1f}% over {len(self.results)} trials")
        if generations:
            print(f"generations to solution: mean {np.mean(generations):.1f}, "
                  f"min {np.min(generations)}, max {np.max(generations)}")
