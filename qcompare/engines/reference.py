"""
Reference engine backed by Cirq
"""

from typing import List
from pathlib import Path
import numpy as np

from .base import SimulatorAdapter


class ReferenceSimulator(SimulatorAdapter):
    """
    Trusted baseline: Cirq's OpenQASM importer and state-vector simulator

    The engine is handed the file's text. Terminal measurements are
    dropped, and amplitudes are computed in complex128 over every declared
    register qubit in declaration order, so qubits that no gate touches
    still count towards the dimension.
    """

    def __init__(self, name: str = "cirq"):
        super().__init__(name)
        import cirq
        # circuit_from_qasm hides the register table, the parser keeps it
        from cirq.contrib.qasm_import._parser import QasmParser

        self._cirq = cirq
        self._parser_cls = QasmParser
        self._simulator = cirq.Simulator(dtype=np.complex128)

    def _qubit_order(self, qregs) -> List:
        return [self._cirq.NamedQubit(f"{reg}_{i}")
                for reg, size in qregs.items()
                for i in range(size)]

    def _run(self, circuit_path: Path) -> np.ndarray:
        qasm_text = circuit_path.read_text()
        parsed = self._parser_cls().parse(qasm_text)
        circuit = self._cirq.drop_terminal_measurements(parsed.circuit)
        result = self._simulator.simulate(
            circuit,
            qubit_order=self._qubit_order(parsed.qregs),
        )
        return result.final_state_vector
