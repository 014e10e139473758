# knapsack/evaluation/plotting.py
import pandas as pd
import seaborn as sns
import matplotlib.pyplot as plt
import logging

logger = logging.getLogger(__name__)

def plot_evaluation_times(results_df: pd.DataFrame, save_path: str):
    """Plots a comparison of solve times for all solvers."""
    logger.info("Generating evaluation time comparison plot...")
    plt.style.use('seaborn-v0_8-whitegrid')
    plt.figure(figsize=(12, 7))

    sns.lineplot(data=results_df, x='n', y='avg_time_ms', hue='solver', style='solver', markers=True, dashes=False)

    plt.title('Solver Performance: Time vs. Problem Size (n)', fontsize=16)
    plt.xlabel('Number of Items (n)', fontsize=12)
    plt.ylabel('Average Time per Instance (ms)', fontsize=12)
    plt.yscale('log') # Naive multiple DP is orders of magnitude slower
    plt.legend(title='Solver')
    plt.grid(True, which="both", ls="--")
    plt.tight_layout()
    try:
        plt.savefig(save_path, dpi=300)
        logger.info(f"Time comparison plot saved to {save_path}")
    except Exception as e:
        logger.error(f"Failed to save time plot: {e}")
    finally:
        plt.close()

def plot_model_values(results_df: pd.DataFrame, save_path: str):
    """
    Plots the average optimal value per item-availability model against n.
    Unbounded should never fall below multiple, and multiple never below 0-1.
    """
    logger.info("Generating value comparison plot...")
    plt.style.use('seaborn-v0_8-whitegrid')
    plt.figure(figsize=(12, 7))

    # Every solver of a model returns the same value, so one line per model is enough
    model_df = results_df.groupby(['model', 'n'], as_index=False)['avg_value'].mean()
    sns.lineplot(data=model_df, x='n', y='avg_value', hue='model', style='model', markers=True, dashes=False)

    plt.title('Optimal Value vs. Problem Size (n)', fontsize=16)
    plt.xlabel('Number of Items (n)', fontsize=12)
    plt.ylabel('Average Optimal Value', fontsize=12)
    plt.legend(title='Model')
    plt.grid(True)
    plt.tight_layout()
    try:
        plt.savefig(save_path, dpi=300)
        logger.info(f"Value comparison plot saved to {save_path}")
    except Exception as e:
        logger.error(f"Failed to save value plot: {e}")
    finally:
        plt.close()
