"""
Tables, machine-readable reports and plots for suite results
"""

from .reporters import (ComparisonReporter, TableReporter, JSONReporter,
                        CSVReporter, Reporter)
from .plots import plot_runtime_vs_qubits

__all__ = [
    'ComparisonReporter', 'TableReporter', 'JSONReporter', 'CSVReporter',
    'Reporter', 'plot_runtime_vs_qubits',
]
