"""
Topology Module

Classes:
    Topology: The size of a GA (populations, species and individuals)
"""

from dataclasses import dataclass

from evopool.errors import ValidationError

@dataclass(frozen=True)
class Topology:
    """
    Holds all the information relative to the size of a GA.

    Public Attributes:
        n_populations: Number of populations, evolved independently
        n_species:     Number of species each population is split into (0 disables speciation)
        n_individuals: Initial number of individuals in each population
    """

    n_populations: int
    n_species    : int
    n_individuals: int

    def validate(self) -> None:
        """
        Check the properties of the topology.

        Raises:
            ValidationError: on the first property out of range
        """
        if self.n_populations < 1:
            raise ValidationError("'n_populations' should be higher or equal to 1")
        if self.n_species < 0:
            raise ValidationError("'n_species' should be higher or equal to 0")
        if self.n_individuals < 1:
            raise ValidationError("'n_individuals' should be higher or equal to 1")
