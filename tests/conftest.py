"""
Shared fixtures for the harness tests
"""

import matplotlib
matplotlib.use('Agg')

import pytest
import numpy as np

from tests.fakes import FakeSimulator


@pytest.fixture
def circuit_dir(tmp_path):
    """Directory with three dummy circuits and one unrelated file"""
    directory = tmp_path / "circuits"
    directory.mkdir()
    for name in ("a.qasm", "b.qasm", "c.qasm"):
        (directory / name).write_text("OPENQASM 2.0;\n")
    (directory / "notes.txt").write_text("not a circuit")
    return directory


@pytest.fixture
def single_circuit_dir(tmp_path):
    """Directory holding one circuit"""
    directory = tmp_path / "single"
    directory.mkdir()
    (directory / "zero.qasm").write_text("OPENQASM 2.0;\n")
    return directory


@pytest.fixture
def zero_state_engines():
    """Reference and candidate that both return |00>"""
    reference = FakeSimulator(name="reference", default=[1, 0, 0, 0])
    candidate = FakeSimulator(name="candidate", default=[1, 0, 0, 0])
    return reference, candidate


@pytest.fixture
def bell_state():
    return np.array([1, 0, 0, 1], dtype=np.complex128) / np.sqrt(2)
