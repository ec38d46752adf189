"""
Simulator adapter contract

Every engine is wrapped in a ``SimulatorAdapter`` so the case runner can
time and compare engines without knowing how each one is invoked.
"""

from typing import Any
from abc import ABC, abstractmethod
from pathlib import Path
import numpy as np

from ..core.datatypes import as_state_vector
from ..core.errors import EngineError


class SimulatorAdapter(ABC):
    """
    Base class for simulator adapters

    Subclasses implement ``_run``; ``simulate`` wraps engine failures in
    ``EngineError`` and normalises the output to a complex128 vector.
    """

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def _run(self, circuit_path: Path) -> Any:
        """
        Execute the circuit on the wrapped engine

        Parameters
        ----------
        circuit_path : Path
            Circuit description file

        Returns
        -------
        array_like
            Final state amplitudes
        """
        pass

    def simulate(self, circuit_path: Path) -> np.ndarray:
        """
        Simulate a circuit and return its final state vector

        Parameters
        ----------
        circuit_path : Path
            Readable circuit description file

        Returns
        -------
        ndarray
            Complex128 state vector of length 2**n

        Raises
        ------
        EngineError
            If the engine cannot parse or execute the circuit
        """
        circuit_path = Path(circuit_path)
        try:
            amplitudes = self._run(circuit_path)
        except EngineError:
            raise
        except Exception as exc:
            raise EngineError(
                f"{self.name} failed: {type(exc).__name__}: {exc}",
                circuit=circuit_path.name,
                engine=self.name,
            ) from exc
        return as_state_vector(amplitudes)

    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r})"
