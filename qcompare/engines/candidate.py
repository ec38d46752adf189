"""
Candidate engine: the implementation under test

Any callable taking a circuit path and returning amplitudes can be
benchmarked. ``load_engine`` resolves a ``"package.module:function"``
spec; without one, Qiskit's state-vector simulation is used.
"""

from typing import Any, Callable, Optional, Union
from pathlib import Path
import importlib
import logging
import numpy as np

from .base import SimulatorAdapter

logger = logging.getLogger(__name__)

EngineCallable = Callable[[Path], Any]

DEFAULT_ENGINE = 'qcompare.engines.candidate:qiskit_statevector'


def qiskit_statevector(circuit_path: Path) -> np.ndarray:
    """
    Simulate an OpenQASM 2 file with Qiskit

    Final measurements are dropped so the pure state is returned. Qiskit
    orders basis states little-endian, so the qubit order is reversed to
    match the reference engine.
    """
    from qiskit import QuantumCircuit
    from qiskit.quantum_info import Statevector

    circuit = QuantumCircuit.from_qasm_file(str(circuit_path))
    circuit.remove_final_measurements(inplace=True)
    state = Statevector.from_instruction(circuit).reverse_qargs()
    return np.asarray(state.data)


def load_engine(spec: str) -> EngineCallable:
    """
    Resolve an engine callable from ``"package.module:function"``

    Raises
    ------
    ValueError
        If the spec is malformed or does not name a callable
    """
    module_name, sep, attr = spec.partition(':')
    if not sep or not module_name or not attr:
        raise ValueError(f"engine spec must look like 'package.module:function', got {spec!r}")

    module = importlib.import_module(module_name)
    try:
        engine = getattr(module, attr)
    except AttributeError:
        raise ValueError(f"module {module_name!r} has no attribute {attr!r}") from None
    if not callable(engine):
        raise ValueError(f"{spec!r} is not callable")
    return engine


class CandidateSimulator(SimulatorAdapter):
    """Adapter around the simulator under test; the engine receives the path"""

    def __init__(self,
                 engine: Optional[Union[EngineCallable, str]] = None,
                 name: Optional[str] = None):
        if engine is None:
            engine = DEFAULT_ENGINE
        if isinstance(engine, str):
            spec = engine
            engine = load_engine(spec)
            logger.debug(f"Loaded candidate engine {spec}")
        super().__init__(name or getattr(engine, '__name__', 'candidate'))
        self._engine = engine

    def _run(self, circuit_path: Path) -> Any:
        return self._engine(circuit_path)
