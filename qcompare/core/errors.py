"""
Exception hierarchy for the comparison harness
"""

from typing import Optional


class HarnessError(Exception):
    """Base class for all harness failures"""

    def __init__(self, message: str, circuit: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.circuit = circuit

    def __str__(self):
        if self.circuit:
            return f"{self.circuit}: {self.message}"
        return self.message


class EngineError(HarnessError):
    """A simulator failed to load or execute a circuit"""

    def __init__(self, message: str, circuit: Optional[str] = None,
                 engine: Optional[str] = None):
        super().__init__(message, circuit)
        self.engine = engine


class LengthMismatchError(HarnessError, ValueError):
    """Two engines disagree on the Hilbert-space dimension of a circuit"""


class InvalidStateVectorError(HarnessError, ValueError):
    """An engine produced an empty, non-finite or non-power-of-two vector"""


class DiscoveryError(HarnessError):
    """The circuit directory is unusable or holds no circuit files"""


class CaseTimeoutError(HarnessError, TimeoutError):
    """A timed repetition exceeded its configured budget"""
