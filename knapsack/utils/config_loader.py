# knapsack/utils/config_loader.py
import yaml
import os
from types import SimpleNamespace
from typing import Dict, Any

# --- Import solver CLASSes here ---
from knapsack.solvers.classic.dp_solver import (
    DPSolver2D,
    DPSolver1D,
    UnboundedSolver2D,
    UnboundedSolver1D,
    MultipleNaiveSolver,
    MultipleBinarySolver,
)

# The registry maps a name to a Solver Class.
ALGORITHM_REGISTRY = {
    "0-1 DP (2D)": DPSolver2D,
    "0-1 DP (1D)": DPSolver1D,
    "Unbounded DP (2D)": UnboundedSolver2D,
    "Unbounded DP (1D)": UnboundedSolver1D,
    "Multiple DP (Naive)": MultipleNaiveSolver,
    "Multiple DP (Binary Split)": MultipleBinarySolver,
}

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))


def _post_process_config(config_dict: Dict[str, Any], project_root: str) -> Dict[str, Any]:
    """
    Processes the raw config dict to add absolute paths and solver classes.
    This function contains all logic that cannot be represented in a static YAML file.
    """
    # --- 1. Build absolute paths for all entries in the 'paths' section ---
    for key, rel_path in config_dict['paths'].items():
        config_dict['paths'][key] = os.path.join(project_root, rel_path)
    config_dict['paths']['root'] = project_root

    # --- 2. Map Algorithm Names to Classes ---
    solvers_cfg = config_dict['solvers']
    try:
        solvers_cfg['algorithms_to_test'] = {
            name: ALGORITHM_REGISTRY[name] for name in solvers_cfg['algorithms_to_test']
        }
        solvers_cfg['baselines'] = {
            model: ALGORITHM_REGISTRY[name] for model, name in solvers_cfg.get('baselines', {}).items()
        }
    except KeyError as e:
        raise ValueError(f"Algorithm '{e.args[0]}' is defined in config.yaml but not found in ALGORITHM_REGISTRY in config_loader.py.") from e

    for model, solver_class in solvers_cfg['baselines'].items():
        if solver_class.model != model:
            raise ValueError(f"Baseline '{solver_class.__name__}' solves the '{solver_class.model}' model, not '{model}'.")

    return config_dict


def load_config(config_path: str = 'configs/config.yaml', project_root: str = PROJECT_ROOT) -> SimpleNamespace:
    """
    Loads, processes, and returns the project configuration from a YAML file
    as a SimpleNamespace object for dot notation access.
    Relative paths (the config path and the 'paths' section) are resolved against `project_root`.
    """
    full_config_path = os.path.join(project_root, config_path)

    try:
        with open(full_config_path, 'r') as f:
            config_dict = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file not found at: {full_config_path}")

    processed_config = _post_process_config(config_dict, project_root)

    # Dicts keyed by plain identifiers become namespaces; others (e.g. the
    # name -> class maps) stay dicts.
    def dict_to_namespace(d: Dict) -> Any:
        for k, v in d.items():
            if isinstance(v, dict):
                d[k] = dict_to_namespace(v)
        if d and all(isinstance(k, str) and k.isidentifier() for k in d):
            return SimpleNamespace(**d)
        return d

    return dict_to_namespace(processed_config)
