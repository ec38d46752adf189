"""
Numerical equivalence of state vectors
"""

from typing import Any, Dict, Sequence
import numpy as np

from ..core.config import DEFAULT_ATOL, DEFAULT_RTOL
from ..core.errors import LengthMismatchError


def _as_pair(a: Sequence, b: Sequence):
    if len(a) != len(b):
        raise LengthMismatchError(
            f"cannot compare state vectors of length {len(a)} and {len(b)}"
        )
    return (np.asarray(a, dtype=np.complex128).ravel(),
            np.asarray(b, dtype=np.complex128).ravel())


def equivalent(a: Sequence, b: Sequence,
               atol: float = DEFAULT_ATOL,
               rtol: float = DEFAULT_RTOL) -> bool:
    """
    Element-wise approximate equality of two state vectors

    Every amplitude must satisfy ``|a_i - b_i| <= atol + rtol * |b_i|``.

    Raises
    ------
    LengthMismatchError
        If the vectors have different lengths
    """
    a, b = _as_pair(a, b)
    return bool(np.all(np.abs(a - b) <= atol + rtol * np.abs(b)))


def compare_state_vectors(a: Sequence, b: Sequence,
                          atol: float = DEFAULT_ATOL,
                          rtol: float = DEFAULT_RTOL) -> Dict[str, Any]:
    """
    Verdict plus error metrics for two state vectors

    Parameters
    ----------
    a : array_like
        Candidate amplitudes
    b : array_like
        Reference amplitudes
    atol, rtol : float
        Absolute and relative tolerance

    Returns
    -------
    dict
        ``equivalent``, ``max_absolute_error``, ``mean_absolute_error``,
        ``max_relative_error``, ``mismatched_amplitudes`` and ``fidelity``
    """
    a, b = _as_pair(a, b)
    abs_error = np.abs(a - b)
    bound = atol + rtol * np.abs(b)

    with np.errstate(divide='ignore', invalid='ignore'):
        rel_error = np.where(np.abs(b) > 1e-12, abs_error / np.abs(b), 0.0)

    norm = np.vdot(a, a).real * np.vdot(b, b).real
    fidelity = float(abs(np.vdot(a, b)) ** 2 / norm) if norm > 0 else 0.0

    return {
        'equivalent': bool(np.all(abs_error <= bound)),
        'max_absolute_error': float(np.max(abs_error)) if len(a) else 0.0,
        'mean_absolute_error': float(np.mean(abs_error)) if len(a) else 0.0,
        'max_relative_error': float(np.max(rel_error)) if len(a) else 0.0,
        'mismatched_amplitudes': int(np.count_nonzero(abs_error > bound)),
        'fidelity': fidelity,
    }


class Comparator:
    """Tolerance policy applied by the case runner"""

    def __init__(self, atol: float = DEFAULT_ATOL, rtol: float = DEFAULT_RTOL):
        if atol < 0 or rtol < 0:
            raise ValueError("tolerances must be non-negative")
        self.atol = atol
        self.rtol = rtol

    def equivalent(self, a: Sequence, b: Sequence) -> bool:
        return equivalent(a, b, self.atol, self.rtol)

    def compare(self, a: Sequence, b: Sequence) -> Dict[str, Any]:
        return compare_state_vectors(a, b, self.atol, self.rtol)
