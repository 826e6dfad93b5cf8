#!/usr/bin/env python3
"""
Utility script to run the examples easily.

Usage:
    python scripts/run_example.py sphere
    python scripts/run_example.py sphere --mode experiment --num-trials 20
"""

import sys
import argparse
import logging
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from evopool import Config
from examples.trial_sphere import Trial_Sphere, Experiment_Sphere, make_vector_genome


EXAMPLES = {
    'sphere': {
        'trial': Trial_Sphere,
        'experiment': Experiment_Sphere,
        'make_genome': make_vector_genome,
        'config': 'examples/configs/config_sphere.ini',
        'description': 'Sphere function minimisation'
    },
}


def main():
    parser = argparse.ArgumentParser(description='Run evopool examples')
    parser.add_argument('example', choices=EXAMPLES.keys(),
                        help='Example to run')
    parser.add_argument('--mode', choices=['trial', 'experiment'], default='trial',
                        help='Run single trial or full experiment')
    parser.add_argument('--num-trials', type=int, default=20,
                        help='Number of trials for experiment mode')
    parser.add_argument('--num-jobs', type=int, default=1,
                        help='Number of parallel jobs for experiment mode')
    parser.add_argument('--log-populations', action='store_true',
                        help='Log per-population statistics after every generation')

    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO, format='%(asctime)s %(name)s %(message)s')

    example = EXAMPLES[args.example]
    print(f"Running {example['description']}...")
    print(f"Mode: {args.mode}")

    config = Config(example['config'])

    if args.mode == 'trial':
        population_logger = logging.getLogger('evopool.populations') if args.log_populations else None
        trial = example['trial'](config, example['make_genome'], population_logger=population_logger)
        trial.run()
    else:
        experiment = example['experiment'](args.num_trials, config, example['make_genome'])
        experiment.run(num_jobs=args.num_jobs)


if __name__ == '__main__':
    main()
