"""
Experiment Module

An experiment represents a collection of independent trials, used to gather
statistical data about how well the engine performs on a problem. Trials can
run serially or in parallel using joblib.
"""

import copy
import logging
from joblib     import Parallel, delayed
from statistics import mean
from typing     import TYPE_CHECKING

from evopool.run.config import Config
from evopool.run.trial  import Trial

if TYPE_CHECKING:
    from evopool.genotype import GenomeMaker

logger = logging.getLogger(__name__)

class Experiment:
    """
    Runs the same configuration several times and aggregates the outcomes.

    When the configuration carries a seed, trial 'n' runs with seed
    'seed + n', so that trials differ from each other but a whole experiment
    is reproducible.

    Subclasses can override:
    - _final_report(): Produce the aggregated report

    Public Attributes:
        results: One dict per trial with keys 'trial_number', 'generations',
                 'best_fitness' and 'success'

    Public Methods:
        run(num_jobs=1): Execute the complete experiment
    """

    def __init__(self, num_trials: int, config: Config, make_genome: 'GenomeMaker'):
        """
        Parameters:
            num_trials:  number of trials in this experiment
            config:      configuration parameters shared by all trials
            make_genome: factory creating a random genome from a random generator
        """
        self._num_trials : int           = num_trials
        self._config     : Config        = config
        self._make_genome: 'GenomeMaker' = make_genome
        self.results     : list[dict]    = []

    def run(self, num_jobs: int = 1):
        """
        Run the experiment.

        Parameters:
            num_jobs: Number of parallel processes for running trials
                       1 = serial trial execution (default)
                      -1 = use all available CPU cores for trials
                      >1 = use specified number of processes for trials
        """
        trial_numbers = range(1, self._num_trials + 1)
        if num_jobs == 1:
            self.results = [self._run_trial(n) for n in trial_numbers]
        else:
            self.results = Parallel(num_jobs)(delayed(self._run_trial)(n) for n in trial_numbers)
        self._final_report()

    def _run_trial(self, trial_number: int) -> dict:
        """
        Run one trial and return the relevant data it generated.

        Parameters:
            trial_number: The trial number (1-indexed)
        """
        config = copy.copy(self._config)
        if config.seed is not None:
            config.seed += trial_number

        trial = Trial(config, self._make_genome, suppress_output=True)
        trial.run()

        return {"trial_number": trial_number,
                "generations" : trial.ga.generations,
                "best_fitness": trial.ga.best.fitness,
                "success"     : not trial.failed}

    @property
    def success_rate(self) -> float:
        """
        Fraction of trials that reached the fitness threshold.
        """
        if not self.results:
            return 0.0
        return sum(r["success"] for r in self.results) / len(self.results)

    def _final_report(self):
        """
        Produce the final report, aggregating the data obtained from each trial.
        """
        if not self.results:
            logger.info("no trials were run")
            return

        logger.info("%d trials, success rate %.1f%%, mean best fitness %g, mean generations %.1f",
                    len(self.results), 100 * self.success_rate,
                    mean(r["best_fitness"] for r in self.results),
                    mean(r["generations"] for r in self.results))
