from setuptools import setup, find_packages

setup(
    name="knapsack-dp",
    version="0.1.0",
    packages=find_packages(include=["knapsack", "knapsack.*", "Scripts"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "pandas",
        "matplotlib",
        "seaborn",
        "PyYAML",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'generate = Scripts.generate_data:main',
            'evaluate = Scripts.evaluate_solvers:main',
        ],
    }
)
