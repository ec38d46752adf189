"""
Tests for the simulator adapters

Cirq and Qiskit backed tests are skipped when the engines are missing.
"""

import pytest
import numpy as np
from pathlib import Path

from qcompare.engines.candidate import CandidateSimulator, load_engine
from qcompare.core.errors import EngineError, InvalidStateVectorError
from tests.fakes import FakeSimulator

BELL_QASM = """OPENQASM 2.0;
include "qelib1.inc";
qreg q[2];
creg c[2];
h q[0];
cx q[0],q[1];
measure q -> c;
"""

# q[0] flipped only: big-endian index 0b100
X_FIRST_QASM = """OPENQASM 2.0;
include "qelib1.inc";
qreg q[3];
x q[0];
"""

IDLE_QUBIT_QASM = """OPENQASM 2.0;
include "qelib1.inc";
qreg q[3];
h q[0];
"""

ROTATIONS_QASM = """OPENQASM 2.0;
include "qelib1.inc";
qreg q[2];
u3(0.3,0.2,0.1) q[0];
u1(0.7) q[1];
h q[1];
rz(0.4) q[0];
cx q[0],q[1];
"""

# registers are concatenated in declaration order: a[0], b[0], b[1]
TWO_REGISTER_QASM = """OPENQASM 2.0;
include "qelib1.inc";
qreg a[1];
qreg b[2];
x b[1];
"""


def constant_engine(path):
    return [0, 1]


@pytest.fixture
def qasm_dir(tmp_path):
    for name, text in [("bell.qasm", BELL_QASM), ("x_first.qasm", X_FIRST_QASM),
                       ("idle.qasm", IDLE_QUBIT_QASM), ("rotations.qasm", ROTATIONS_QASM),
                       ("two_registers.qasm", TWO_REGISTER_QASM)]:
        (tmp_path / name).write_text(text)
    (tmp_path / "broken.qasm").write_text("OPENQASM 2.0;\nqreg q[1];\nnotagate q[0];\n")
    return tmp_path


class TestAdapterBase:

    def test_normalises_output(self, tmp_path):
        vector = FakeSimulator(default=(1, 0, 0, 0)).simulate(tmp_path / "a.qasm")
        assert vector.dtype == np.complex128
        assert vector.shape == (4,)

    def test_matrix_output_rejected(self, tmp_path):
        with pytest.raises(InvalidStateVectorError):
            FakeSimulator(default=[[1, 0], [0, 0]]).simulate(tmp_path / "a.qasm")

    def test_accepts_string_paths(self, tmp_path):
        adapter = FakeSimulator(outputs={"a.qasm": [1]})
        assert adapter.simulate(str(tmp_path / "a.qasm"))[0] == 1

    def test_wraps_engine_exceptions(self, tmp_path):
        adapter = FakeSimulator(name="mysim", default=ValueError("bad qasm"))
        with pytest.raises(EngineError) as excinfo:
            adapter.simulate(tmp_path / "a.qasm")

        assert excinfo.value.engine == "mysim"
        assert excinfo.value.circuit == "a.qasm"
        assert "bad qasm" in str(excinfo.value)

    def test_invalid_output_not_wrapped(self, tmp_path):
        with pytest.raises(InvalidStateVectorError):
            FakeSimulator(default=[1, 0, 0]).simulate(tmp_path / "a.qasm")

    def test_repeatable(self, tmp_path):
        adapter = FakeSimulator(default=[1, 0])
        first = adapter.simulate(tmp_path / "a.qasm")
        second = adapter.simulate(tmp_path / "a.qasm")
        np.testing.assert_array_equal(first, second)


class TestLoadEngine:

    def test_resolves_callable(self):
        engine = load_engine("tests.test_engines:constant_engine")
        assert engine is constant_engine

    @pytest.mark.parametrize("spec", ["nocolon", ":func", "module:"])
    def test_malformed_spec(self, spec):
        with pytest.raises(ValueError):
            load_engine(spec)

    def test_missing_attribute(self):
        with pytest.raises(ValueError, match="no attribute"):
            load_engine("tests.test_engines:does_not_exist")

    def test_not_callable(self):
        with pytest.raises(ValueError, match="not callable"):
            load_engine("tests.test_engines:BELL_QASM")

    def test_missing_module(self):
        with pytest.raises(ImportError):
            load_engine("no_such_module_qcompare:run")


class TestCandidateSimulator:

    def test_callable_engine_receives_path(self, tmp_path):
        seen = []

        def engine(path):
            seen.append(path)
            return [1, 0]

        adapter = CandidateSimulator(engine)
        adapter.simulate(tmp_path / "a.qasm")

        assert adapter.name == "engine"
        assert seen == [tmp_path / "a.qasm"]
        assert isinstance(seen[0], Path)

    def test_engine_from_spec(self, tmp_path):
        adapter = CandidateSimulator("tests.test_engines:constant_engine", name="const")
        assert adapter.name == "const"
        np.testing.assert_array_equal(adapter.simulate(tmp_path / "a.qasm"), [0, 1])


class TestReferenceSimulator:

    @pytest.fixture
    def reference(self):
        pytest.importorskip("cirq")
        from qcompare.engines.reference import ReferenceSimulator
        return ReferenceSimulator()

    def test_bell_state(self, reference, qasm_dir):
        vector = reference.simulate(qasm_dir / "bell.qasm")
        expected = np.array([1, 0, 0, 1]) / np.sqrt(2)
        np.testing.assert_allclose(vector, expected, atol=1e-12)

    def test_big_endian_order(self, reference, qasm_dir):
        vector = reference.simulate(qasm_dir / "x_first.qasm")
        assert np.argmax(np.abs(vector)) == 0b100

    def test_idle_qubits_kept(self, reference, qasm_dir):
        assert len(reference.simulate(qasm_dir / "idle.qasm")) == 8

    def test_registers_in_declaration_order(self, reference, qasm_dir):
        vector = reference.simulate(qasm_dir / "two_registers.qasm")
        assert len(vector) == 8
        assert np.argmax(np.abs(vector)) == 0b001

    def test_parameterised_gates(self, reference, qasm_dir):
        vector = reference.simulate(qasm_dir / "rotations.qasm")
        assert len(vector) == 4
        assert np.linalg.norm(vector) == pytest.approx(1.0)

    def test_parse_failure(self, reference, qasm_dir):
        with pytest.raises(EngineError):
            reference.simulate(qasm_dir / "broken.qasm")


class TestQiskitCandidate:

    @pytest.fixture
    def candidate(self):
        pytest.importorskip("qiskit")
        return CandidateSimulator()

    def test_default_engine_is_qiskit(self, candidate):
        assert candidate.name == "qiskit_statevector"

    def test_bell_state(self, candidate, qasm_dir):
        vector = candidate.simulate(qasm_dir / "bell.qasm")
        expected = np.array([1, 0, 0, 1]) / np.sqrt(2)
        np.testing.assert_allclose(vector, expected, atol=1e-12)

    def test_matches_reference_ordering(self, candidate, qasm_dir):
        vector = candidate.simulate(qasm_dir / "x_first.qasm")
        assert np.argmax(np.abs(vector)) == 0b100

    def test_parse_failure(self, candidate, qasm_dir):
        with pytest.raises(EngineError):
            candidate.simulate(qasm_dir / "broken.qasm")


def test_engines_agree(qasm_dir):
    pytest.importorskip("cirq")
    pytest.importorskip("qiskit")
    from qcompare.comparison import equivalent
    from qcompare.engines.reference import ReferenceSimulator

    reference = ReferenceSimulator()
    candidate = CandidateSimulator()
    for name in ("bell.qasm", "x_first.qasm", "idle.qasm",
                 "rotations.qasm", "two_registers.qasm"):
        assert equivalent(candidate.simulate(qasm_dir / name),
                          reference.simulate(qasm_dir / name)), name
