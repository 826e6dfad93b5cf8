"""
Phenotype Package

This package contains the Individual class, which pairs a genome with the
fitness obtained by evaluating it.

Exported Classes:
    Individual: A genome plus its cached fitness score
"""

from evopool.phenotype.individual import Individual

__all__ = ['Individual']
