"""
Run time vs qubit count plot
"""

from typing import Optional
from pathlib import Path
import logging
import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend
import matplotlib.pyplot as plt

from ..core.datatypes import ResultSet

logger = logging.getLogger(__name__)


def plot_runtime_vs_qubits(results: ResultSet,
                           output_path: Optional[Path] = None,
                           candidate_label: str = "Candidate",
                           reference_label: str = "Reference"):
    """
    Plot candidate and reference durations against qubit count

    Parameters
    ----------
    results : ResultSet
        Records, already sorted by qubit count
    output_path : Path, optional
        Where to save the figure
    candidate_label, reference_label : str
        Legend labels for the two series

    Returns
    -------
    matplotlib.figure.Figure
    """
    qubits = [r.qubit_count for r in results]

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(qubits, [r.candidate_time for r in results],
            marker='o', label=candidate_label)
    ax.plot(qubits, [r.reference_time for r in results],
            marker='s', label=reference_label)
    ax.set_xlabel('Number of Qubits')
    ax.set_ylabel('Run Time (seconds)')
    ax.set_title('Run Time vs Number of Qubits')
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()

    if output_path:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path, dpi=150)
        logger.info(f"Saved plot to {output_path}")

    return fig
