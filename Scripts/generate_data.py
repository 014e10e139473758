# Scripts/generate_data.py
# -*- coding: utf-8 -*-

"""
Entry point for generating the testing set of knapsack instances.
It uses the configuration from 'configs/config.yaml' and the core functions
from 'knapsack/utils/generator.py'.
"""

import os
import argparse
import logging
from tqdm import tqdm

from knapsack.utils.config_loader import load_config
from knapsack.utils.logger import setup_logger
import knapsack.utils.generator as gen

def create_dataset(
    dataset_name: str,
    output_dir: str,
    instance_params: dict,
    n_range: tuple = None,
    n_fixed: int = None,
    num_instances: int = 1
):
    """
    A generic function to create a dataset of knapsack instances.

    Args:
        dataset_name (str): A name for the generation task (e.g., 'Final-Testing-Set').
        output_dir (str): The directory to save the instance files.
        instance_params (dict): Parameters for the instance generator.
        n_range (tuple): A tuple for varied sizes (start, stop, step), stop inclusive.
        n_fixed (int): A fixed size for all instances.
        num_instances (int): The number of instances to generate for each size 'n'.

    Returns:
        List[str]: The paths of the written instance files.
    """
    logger = logging.getLogger(__name__)
    logger.info(f"--- Starting dataset generation: '{dataset_name}' ---")
    os.makedirs(output_dir, exist_ok=True)

    if n_range:
        range_of_n = range(n_range[0], n_range[1] + 1, n_range[2])
        total_tasks = len(range_of_n) * num_instances
    elif n_fixed:
        range_of_n = [n_fixed]
        total_tasks = num_instances
    else:
        raise ValueError("Either n_range or n_fixed must be provided.")

    # Each instance gets its own seed so reruns reproduce the same files
    base_seed = instance_params.get('seed')
    written = []

    with tqdm(total=total_tasks, desc=f"Generating {dataset_name}") as pbar:
        for n in range_of_n:
            for i in range(num_instances):
                seed = None if base_seed is None else base_seed + n * 100003 + i
                items, capacity = gen.generate_knapsack_instance(
                    n=n,
                    correlation=instance_params['correlation'],
                    max_weight=instance_params['max_weight'],
                    max_value=instance_params['max_value'],
                    capacity_ratio=instance_params['capacity_ratio'],
                    max_count=instance_params.get('max_count', 1),
                    seed=seed
                )

                filename = os.path.join(output_dir, f"instance_n{n}_{instance_params['correlation']}_{i+1}.csv")
                gen.save_instance_to_file(items, capacity, filename)
                written.append(filename)
                pbar.update(1)

    logger.info(f"--- Dataset generation '{dataset_name}' complete. Files saved in '{output_dir}'. ---")
    return written

def main():
    parser = argparse.ArgumentParser(description="Generate knapsack instances for solver evaluation.")
    parser.add_argument('--config', type=str, default='configs/config.yaml',
                        help='Path to the YAML config, relative to the project root.')
    parser.add_argument('--n-fixed', type=int, default=None,
                        help='Generate instances of one fixed size instead of the configured n_range.')
    args = parser.parse_args()

    cfg = load_config(args.config)
    setup_logger(run_name="data_generation", log_dir=cfg.paths.logs)

    shared_instance_params = {
        'correlation': cfg.data_gen.correlation_type,
        'max_weight': cfg.data_gen.max_weight,
        'max_value': cfg.data_gen.max_value,
        'max_count': cfg.data_gen.max_count,
        'capacity_ratio': cfg.data_gen.capacity_ratio,
        'seed': cfg.data_gen.seed,
    }

    create_dataset(
        dataset_name="Final-Testing-Set",
        output_dir=cfg.paths.data_testing,
        instance_params=shared_instance_params,
        n_range=None if args.n_fixed else tuple(cfg.data_gen.n_range),
        n_fixed=args.n_fixed,
        num_instances=cfg.data_gen.num_instances
    )

if __name__ == '__main__':
    main()
