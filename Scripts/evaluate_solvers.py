# Scripts/evaluate_solvers.py
import logging
import os
import sys
import argparse
from tqdm import tqdm

from knapsack.utils.config_loader import load_config, ALGORITHM_REGISTRY
from knapsack.utils.logger import setup_logger
from knapsack.evaluation.plotting import plot_evaluation_times, plot_model_values
from knapsack.evaluation.reporting import summarize_results, find_mismatches, save_results_to_csv
from knapsack.utils.run_utils import create_run_name

def _instance_size(instance_file: str) -> int:
    return int(os.path.basename(instance_file).split('_n')[1].split('_')[0])

def main():
    """
    This script runs every configured solver on the testing set, checks each
    solver against the baseline of its model, and writes reports and plots.
    """
    # --- Setup Argument Parser ---
    parser = argparse.ArgumentParser(description="Evaluate knapsack problem solvers.")
    parser.add_argument('--config', type=str, default='configs/config.yaml',
                        help='Path to the YAML config, relative to the project root.')
    parser.add_argument('--limit', type=int, default=None,
                        help='Limit the number of test instances to run (for quick testing).')
    args = parser.parse_args()

    cfg = load_config(args.config)

    # --- 1. Create a unique name and directory for this evaluation run ---
    run_name = create_run_name(cfg)
    run_dir = os.path.join(cfg.paths.artifacts, "runs", "evaluation", run_name)
    os.makedirs(run_dir, exist_ok=True)

    setup_logger(run_name="evaluation_session", log_dir=run_dir)
    logger = logging.getLogger(__name__)

    logger.info(f"--- Starting New Evaluation Run: {run_name} ---")

    # --- 2. Setup Solvers ---
    solvers_to_evaluate = cfg.solvers.algorithms_to_test
    if not solvers_to_evaluate:
        logger.critical("No solvers are listed in solvers.algorithms_to_test. Exiting.")
        sys.exit(1)
    logger.info(f"Solvers to be evaluated: {list(solvers_to_evaluate.keys())}")

    # Map each model to the registry name of its baseline solver
    baselines = {}
    for model, baseline_class in cfg.solvers.baselines.items():
        for name, solver_class in ALGORITHM_REGISTRY.items():
            if solver_class == baseline_class:
                baselines[model] = name
                break

    # --- 3. Data Loading ---
    test_data_dir = cfg.paths.data_testing
    if not os.path.exists(test_data_dir) or not os.listdir(test_data_dir):
        logger.error(f"Test data directory is empty or does not exist: {test_data_dir}")
        logger.error("Please run 'generate_data.py' to create test instances first.")
        return
    instance_files = [os.path.join(test_data_dir, f) for f in os.listdir(test_data_dir) if f.endswith('.csv')]
    # Smallest instances first
    instance_files.sort(key=_instance_size)

    if args.limit is not None and args.limit > 0:
        logger.info(f"--- Running in limited mode. Processing only the first {args.limit} instances. ---")
        instance_files = instance_files[:args.limit]

    raw_results = []

    # --- 4. Run Evaluation Loop ---
    for name, SolverClass in solvers_to_evaluate.items():
        logger.info(f"--- Evaluating Solver: {name} ---")
        solver_instance = SolverClass(config={})
        try:
            for instance_file in tqdm(instance_files, desc=f"Solving with {name}"):
                result = solver_instance.solve(instance_file)
                raw_results.append({
                    "solver": name,
                    "model": SolverClass.model,
                    "instance": os.path.basename(instance_file),
                    "n": _instance_size(instance_file),
                    "value": result["value"],
                    "time_seconds": result["time"],
                })
        except Exception as e:
            logger.error(f"Solver '{name}' failed during evaluation. Error: {e}", exc_info=True)

    # --- 5. Process Results ---
    if not raw_results:
        logger.critical("CRITICAL: No results were generated from any solver. Exiting.")
        sys.exit(1)

    agg_df = summarize_results(raw_results)
    mismatches_df = find_mismatches(raw_results, baselines)

    if mismatches_df.empty:
        logger.info("All solvers agree with the baseline of their model on every instance.")
    else:
        logger.error(f"{len(mismatches_df)} results disagree with their baseline:")
        for row in mismatches_df.itertuples():
            logger.error(f"  {row.solver} on {row.instance}: {row.value} != {row.baseline_value}")

    # --- 6. Save Reports and Generate Plots ---
    logger.info("--- Finalizing Results and Plots ---")

    save_results_to_csv(agg_df, os.path.join(run_dir, "evaluation_full_summary.csv"))
    if not mismatches_df.empty:
        save_results_to_csv(mismatches_df, os.path.join(run_dir, "evaluation_mismatches.csv"))

    plot_evaluation_times(agg_df, os.path.join(run_dir, "evaluation_times_vs_n.png"))
    plot_model_values(agg_df, os.path.join(run_dir, "evaluation_values_vs_n.png"))

    logger.info("--- Evaluation script finished successfully! ---")

if __name__ == '__main__':
    main()
