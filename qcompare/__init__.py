"""
qcompare: Quantum Simulator Comparison Harness
==============================================

Runs a directory of OpenQASM circuits through a reference and a candidate
state-vector simulator, times both, checks that their final states agree,
and reports the results as a table and a run time plot.

Key Features:
- One adapter contract for every engine
- Median timing over repeated runs
- Element-wise amplitude comparison with absolute/relative tolerance
- Fail-fast suite execution with an optional keep-going mode
"""

__version__ = "1.0.0"

# Import main modules
from . import core
from . import engines
from . import comparison
from . import reporting

# Convenience imports for common usage
from .core import (HarnessConfig, ResultSet, ComparisonRecord,
                   HarnessError, EngineError, LengthMismatchError, DiscoveryError)
from .engines import SimulatorAdapter, ReferenceSimulator, CandidateSimulator
from .comparison import CaseRunner, SuiteRunner, Timer, Comparator, equivalent
from .reporting import Reporter

__all__ = [
    'core', 'engines', 'comparison', 'reporting',
    'HarnessConfig', 'ResultSet', 'ComparisonRecord',
    'HarnessError', 'EngineError', 'LengthMismatchError', 'DiscoveryError',
    'SimulatorAdapter', 'ReferenceSimulator', 'CandidateSimulator',
    'CaseRunner', 'SuiteRunner', 'Timer', 'Comparator', 'equivalent',
    'Reporter',
]
