"""
Timing, equivalence checking and the case/suite runners
"""

from .timing import Timer
from .comparator import Comparator, equivalent, compare_state_vectors
from .runner import CaseRunner, SuiteRunner, discover_circuits

__all__ = [
    'Timer',
    'Comparator', 'equivalent', 'compare_state_vectors',
    'CaseRunner', 'SuiteRunner', 'discover_circuits',
]
