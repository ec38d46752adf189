"""
Core data model, configuration and errors
"""

from .errors import (HarnessError, EngineError, LengthMismatchError,
                     InvalidStateVectorError, DiscoveryError, CaseTimeoutError)
from .datatypes import (ComparisonRecord, CaseFailure, ResultSet,
                        as_state_vector, qubit_count, shared_qubit_count)
from .config import HarnessConfig

__all__ = [
    'HarnessError', 'EngineError', 'LengthMismatchError',
    'InvalidStateVectorError', 'DiscoveryError', 'CaseTimeoutError',
    'ComparisonRecord', 'CaseFailure', 'ResultSet',
    'as_state_vector', 'qubit_count', 'shared_qubit_count',
    'HarnessConfig',
]
