# knapsack/evaluation/reporting.py
import os
import logging
from typing import Dict, List

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

RESULT_COLUMNS = ['solver', 'model', 'instance', 'n', 'value', 'time_seconds']


def summarize_results(raw_results: List[Dict]) -> pd.DataFrame:
    """
    Aggregates raw per-instance results into one row per (solver, n).

    Args:
        raw_results (List[Dict]): Records with the keys in RESULT_COLUMNS.

    Returns:
        pd.DataFrame: Columns solver, model, n, avg_value, avg_time_ms, num_instances.
    """
    results_df = pd.DataFrame(raw_results, columns=RESULT_COLUMNS)

    agg_df = results_df.groupby(['solver', 'model', 'n']).agg(
        avg_value=('value', 'mean'),
        avg_time_ms=('time_seconds', lambda x: x.mean() * 1000),
        num_instances=('instance', 'count'),
    ).reset_index()

    return agg_df


def find_mismatches(raw_results: List[Dict], baselines: Dict[str, str]) -> pd.DataFrame:
    """
    Compares every solver with the baseline solver of its model on each instance.
    All solvers here are exact, so any returned row points at a bug.

    Args:
        raw_results (List[Dict]): Records with the keys in RESULT_COLUMNS.
        baselines (Dict[str, str]): Model name -> baseline solver name.

    Returns:
        pd.DataFrame: Columns solver, model, instance, n, value, baseline_value, absolute_error.
    """
    results_df = pd.DataFrame(raw_results, columns=RESULT_COLUMNS)
    columns = ['solver', 'model', 'instance', 'n', 'value', 'baseline_value', 'absolute_error']
    frames = []

    for model, baseline_name in baselines.items():
        model_df = results_df[results_df['model'] == model]
        baseline_df = model_df[model_df['solver'] == baseline_name][['instance', 'value']]
        if baseline_df.empty:
            logger.warning(f"No results for baseline '{baseline_name}' of model '{model}'.")
            continue

        merged = model_df[model_df['solver'] != baseline_name].merge(
            baseline_df.rename(columns={'value': 'baseline_value'}), on='instance', how='inner'
        )
        merged['absolute_error'] = (merged['baseline_value'] - merged['value']).abs()
        frames.append(merged[~np.isclose(merged['value'], merged['baseline_value'])])

    if not frames:
        return pd.DataFrame(columns=columns)
    return pd.concat(frames, ignore_index=True)[columns]


def save_results_to_csv(df: pd.DataFrame, csv_path: str):
    """Writes a results DataFrame to csv, creating the directory if needed."""
    directory = os.path.dirname(csv_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    df.to_csv(csv_path, index=False)
    logger.info(f"Results saved to {csv_path}")
