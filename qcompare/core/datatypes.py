"""
Data structures shared by the runners and reporters
"""

from typing import Any, Dict, Iterator, List, Optional, Sequence
from dataclasses import dataclass, asdict
from pathlib import Path
import numpy as np
import pandas as pd

from .errors import InvalidStateVectorError, LengthMismatchError


def as_state_vector(amplitudes: Any) -> np.ndarray:
    """
    Convert engine output to a flat complex128 state vector

    Parameters
    ----------
    amplitudes : array_like
        Amplitudes as returned by a simulator

    Returns
    -------
    ndarray
        One-dimensional complex128 array

    Raises
    ------
    InvalidStateVectorError
        If the amplitudes are multi-dimensional, empty, non-finite or not
        a power of two long
    """
    try:
        vector = np.asarray(amplitudes, dtype=np.complex128)
    except (TypeError, ValueError) as exc:
        raise InvalidStateVectorError(f"amplitudes are not complex numbers: {exc}") from exc

    # a density matrix or batch of states is not a state vector
    if vector.ndim > 1:
        raise InvalidStateVectorError(
            f"expected a one-dimensional state vector, got shape {vector.shape}"
        )
    vector = vector.reshape(-1)

    if not np.all(np.isfinite(vector)):
        raise InvalidStateVectorError("state vector contains non-finite amplitudes")
    qubit_count(len(vector))
    return vector


def qubit_count(length: int) -> int:
    """
    Number of qubits spanned by a state vector of the given length

    Only exact powers of two are accepted; nothing is rounded.
    """
    if length < 1 or length & (length - 1):
        raise InvalidStateVectorError(
            f"state vector length {length} is not a positive power of two"
        )
    return length.bit_length() - 1


def shared_qubit_count(reference: Sequence, candidate: Sequence) -> int:
    """Qubit count of two vectors that must describe the same Hilbert space"""
    if len(reference) != len(candidate):
        raise LengthMismatchError(
            f"reference produced {len(reference)} amplitudes, "
            f"candidate produced {len(candidate)}"
        )
    return qubit_count(len(candidate))


@dataclass(frozen=True)
class ComparisonRecord:
    """One row of a suite result"""
    circuit: str
    path: Path
    qubit_count: int
    reference_time: float  # seconds
    candidate_time: float  # seconds
    equivalent: bool
    max_abs_error: float = 0.0

    @property
    def speedup(self) -> float:
        """Reference time over candidate time"""
        if self.candidate_time <= 0:
            return 0.0
        return self.reference_time / self.candidate_time

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['path'] = str(self.path)
        data['speedup'] = self.speedup
        return data


@dataclass(frozen=True)
class CaseFailure:
    """A circuit that raised a harness error while running with fail_fast off"""
    circuit: str
    path: Path
    error_type: str
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'circuit': self.circuit,
            'path': str(self.path),
            'error_type': self.error_type,
            'message': self.message,
        }


class ResultSet:
    """
    Ordered collection of comparison records

    Records are appended while a suite runs. ``sort`` orders them by
    qubit count once and freezes the set for reporting.
    """

    COLUMNS = ['circuit', 'qubit_count', 'candidate_time',
               'reference_time', 'equivalent', 'max_abs_error']

    def __init__(self, records: Optional[List[ComparisonRecord]] = None):
        self._records: List[ComparisonRecord] = list(records or [])
        self.failures: List[CaseFailure] = []
        self._frozen = False

    def append(self, record: ComparisonRecord):
        if self._frozen:
            raise RuntimeError("ResultSet is frozen after sorting")
        self._records.append(record)

    def add_failure(self, failure: CaseFailure):
        if self._frozen:
            raise RuntimeError("ResultSet is frozen after sorting")
        self.failures.append(failure)

    def sort(self) -> 'ResultSet':
        """Stable sort by qubit count, then freeze"""
        if not self._frozen:
            self._records.sort(key=lambda record: record.qubit_count)
            self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def records(self) -> List[ComparisonRecord]:
        return list(self._records)

    @property
    def all_equivalent(self) -> bool:
        return not self.failures and all(r.equivalent for r in self._records)

    def to_dataframe(self) -> pd.DataFrame:
        """Records in their current order as a DataFrame"""
        rows = [{col: getattr(r, col) for col in self.COLUMNS} for r in self._records]
        return pd.DataFrame(rows, columns=self.COLUMNS)

    def __len__(self):
        return len(self._records)

    def __iter__(self) -> Iterator[ComparisonRecord]:
        return iter(self._records)

    def __getitem__(self, index):
        return self._records[index]
