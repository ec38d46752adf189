"""
Simulator adapters for the reference and candidate engines
"""

from .base import SimulatorAdapter
from .reference import ReferenceSimulator
from .candidate import CandidateSimulator, load_engine, qiskit_statevector

__all__ = [
    'SimulatorAdapter',
    'ReferenceSimulator',
    'CandidateSimulator', 'load_engine', 'qiskit_statevector',
]
