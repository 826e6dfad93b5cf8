"""
Genotype Package

This package defines the genetic representation consumed by the engine. The
concrete representation is supplied by the user; the engine only relies on
the abstract capability set defined here.

Modules:
    genome: Genome abstract base class and the GenomeMaker factory alias

Exported Classes:
    Genome:      Abstract candidate solution
    GenomeMaker: Callable building a random genome from a random generator
"""

from evopool.genotype.genome import Genome, GenomeMaker

__all__ = ['Genome', 'GenomeMaker']
