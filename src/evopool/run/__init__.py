"""
Run Package

This package configures and drives the genetic algorithm.

Modules:
    topology:   Size of a GA (populations, species, individuals)
    config:     Configuration management from INI files
    ga:         The orchestrator evolving several populations in parallel
    trial:      One complete run until termination
    experiment: Many independent trials, aggregated

Exported Classes:
    Topology:   Validated size of a GA
    Config:     Configuration parameters
    GA:         The orchestrator
    Trial:      One complete run
    Experiment: Multi-trial statistics
"""

from evopool.run.topology   import Topology
from evopool.run.config     import Config
from evopool.run.ga         import GA
from evopool.run.trial      import Trial
from evopool.run.experiment import Experiment

__all__ = ['Topology', 'Config', 'GA', 'Trial', 'Experiment']
