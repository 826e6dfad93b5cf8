"""
Trial Module

A trial represents one independent run of the engine: a GA is built from a
configuration, initialized, and enhanced generation after generation until a
solution is found or the maximum number of generations is reached.
"""

import logging
from typing import TYPE_CHECKING

from evopool.run.config import Config
from evopool.run.ga     import GA

if TYPE_CHECKING:
    from evopool.genotype import GenomeMaker

logger = logging.getLogger(__name__)

class Trial:
    """
    One independent run of the genetic algorithm.

    Subclasses can override:
    - _report_progress(): Report after initialization and after each generation
    - _final_report():    Report once the trial is over
    - _terminate():       Custom termination logic (default: max generations + fitness threshold)

    Public Attributes:
        ga:     The GA driven by this trial (None until 'run' is called)
        failed: Whether the trial ended without reaching the fitness threshold.
                Stays True when 'fitness_termination_check' is off, since no
                threshold is then checked and every run ends on the generation cap.

    Public Methods:
        run(): Execute a complete trial
    """

    def __init__(self, config: Config, make_genome: 'GenomeMaker', suppress_output: bool = False,
                 population_logger: logging.Logger | None = None):
        """
        Parameters:
            config:            configuration parameters
            make_genome:       factory creating a random genome from a random generator
            suppress_output:   If True, suppress progress and final reports
                               (useful when running multiple trials in experiments)
            population_logger: receives per-population statistics after every generation
        """
        self._config           : Config                = config
        self._make_genome      : 'GenomeMaker'         = make_genome
        self._suppress_output  : bool                  = suppress_output
        self._population_logger: logging.Logger | None = population_logger
        self.ga                : GA | None             = None
        self.failed            : bool                  = True

    def run(self):
        """
        Run the trial.

        Builds and validates a fresh GA, then evolves it until the
        terminate condition is met.

        Raises:
            ValidationError: if the configuration is not coherent
        """
        self.failed = True
        self.ga     = GA.from_config(self._config, self._make_genome, logger=self._population_logger)
        self.ga.validate()

        # Create and evaluate the initial populations
        self.ga.initialize()
        if not self._suppress_output:
            self._report_progress()

        # Evolution loop
        while not self._terminate():
            self.ga.enhance()
            if not self._suppress_output:
                self._report_progress()

        if not self._suppress_output:
            self._final_report()

    def _report_progress(self):
        """
        Report trial progress after initialization and after each generation.
        """
        logger.info("generation %d: best fitness %g (%.2fs)",
                    self.ga.generations, self.ga.best.fitness, self.ga.age)

    def _final_report(self):
        """
        Produce final report at the end of the trial.
        """
        outcome = "failed" if self.failed else "succeeded"
        logger.info("trial %s after %d generations, best fitness %g",
                    outcome, self.ga.generations, self.ga.best.fitness)

    def _terminate(self) -> bool:
        """
        Determine whether the trial should terminate.

        This default implementation stops the trial after a maximum number of
        generations and (optionally) also stops it as soon as the best fitness
        found so far is lower or equal to a given threshold.

        Returns:
            bool: True if the trial should stop, False otherwise
        """
        terminate = self.ga.generations >= self._config.max_number_generations

        if self._config.fitness_termination_check:
            success   = self.ga.best.fitness <= self._config.fitness_threshold
            terminate = terminate or success
            if terminate:
                self.failed = not success

        return terminate
