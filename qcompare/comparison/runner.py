"""
Case and suite runners

A case runs one circuit through both engines; a suite discovers the
circuits in a directory and runs every case in turn.
"""

from typing import Callable, List, Optional
from pathlib import Path
import logging

from ..core.config import DEFAULT_EXTENSION, DEFAULT_REPETITIONS
from ..core.datatypes import CaseFailure, ComparisonRecord, ResultSet, shared_qubit_count
from ..core.errors import DiscoveryError, HarnessError
from ..engines.base import SimulatorAdapter
from .comparator import Comparator
from .timing import Timer

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, Path], None]


def discover_circuits(directory: Path, extension: str = DEFAULT_EXTENSION) -> List[Path]:
    """
    Circuit files in ``directory`` carrying ``extension``

    Matching is case-insensitive and only regular files are returned,
    sorted by name.

    Raises
    ------
    DiscoveryError
        If the directory is missing, unreadable or has no matching files
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise DiscoveryError(f"circuit directory {directory} does not exist or is not a directory")

    suffix = extension.lower()
    try:
        circuits = sorted(
            (p for p in directory.iterdir() if p.is_file() and p.suffix.lower() == suffix),
            key=lambda p: p.name,
        )
    except OSError as exc:
        raise DiscoveryError(f"cannot read circuit directory {directory}: {exc}") from exc

    if not circuits:
        raise DiscoveryError(f"no '{extension}' files found in {directory}")

    logger.info(f"Discovered {len(circuits)} circuit(s) in {directory}")
    return circuits


class CaseRunner:
    """Times and compares both engines on a single circuit"""

    def __init__(self,
                 reference: SimulatorAdapter,
                 candidate: SimulatorAdapter,
                 timer: Optional[Timer] = None,
                 comparator: Optional[Comparator] = None):
        self.reference = reference
        self.candidate = candidate
        self.timer = timer or Timer()
        self.comparator = comparator or Comparator()

    def run(self, circuit_path: Path, repetitions: int = DEFAULT_REPETITIONS) -> ComparisonRecord:
        """
        Produce the comparison record for one circuit

        Timing and correctness sampling are separate: the vectors compared
        come from one extra call to each engine, outside the timed samples but
        still under the timer's timeout. Engine errors are not caught here.

        Parameters
        ----------
        circuit_path : Path
            Circuit description file
        repetitions : int
            Timed calls per engine

        Returns
        -------
        ComparisonRecord
        """
        circuit_path = Path(circuit_path)
        logger.info(f"Benchmarking circuit {circuit_path.name}")

        candidate_time = self.timer.measure(
            lambda: self.candidate.simulate(circuit_path), repetitions)
        reference_time = self.timer.measure(
            lambda: self.reference.simulate(circuit_path), repetitions)

        candidate_vector = self.timer.call(
            lambda: self.candidate.simulate(circuit_path), "candidate sampling call")
        reference_vector = self.timer.call(
            lambda: self.reference.simulate(circuit_path), "reference sampling call")

        n_qubits = shared_qubit_count(reference_vector, candidate_vector)
        metrics = self.comparator.compare(candidate_vector, reference_vector)

        record = ComparisonRecord(
            circuit=circuit_path.name,
            path=circuit_path,
            qubit_count=n_qubits,
            reference_time=reference_time,
            candidate_time=candidate_time,
            equivalent=metrics['equivalent'],
            max_abs_error=metrics['max_absolute_error'],
        )

        verdict = "PASS" if record.equivalent else "FAIL"
        logger.info(
            f"  {record.circuit}: {n_qubits} qubits, amplitude comparison {verdict} "
            f"(candidate {candidate_time:.6f}s, reference {reference_time:.6f}s)"
        )
        if not record.equivalent:
            logger.warning(
                f"  {record.circuit}: {metrics['mismatched_amplitudes']} amplitude(s) outside "
                f"tolerance, max error {metrics['max_absolute_error']:.2e}"
            )
        return record


class SuiteRunner:
    """
    Runs every circuit in a directory and collects the records

    With ``fail_fast`` (the default) the first harness error aborts the
    suite, tagged with the failing circuit. Otherwise each failure is
    recorded in the result set and the suite continues.
    """

    def __init__(self,
                 case_runner: CaseRunner,
                 extension: str = DEFAULT_EXTENSION,
                 fail_fast: bool = True,
                 progress: Optional[ProgressCallback] = None):
        self.case_runner = case_runner
        self.extension = extension
        self.fail_fast = fail_fast
        self.progress = progress

    def run(self, directory: Path, repetitions: int = DEFAULT_REPETITIONS) -> ResultSet:
        """
        Run all cases found in ``directory``

        Returns
        -------
        ResultSet
            Records in discovery order, not yet sorted
        """
        if repetitions < 1:
            raise ValueError(f"repetitions must be >= 1, got {repetitions}")

        circuits = discover_circuits(directory, self.extension)
        results = ResultSet()

        for index, path in enumerate(circuits):
            if self.progress is not None:
                self.progress(index, len(circuits), path)
            try:
                record = self.case_runner.run(path, repetitions)
            except HarnessError as exc:
                if exc.circuit is None:
                    exc.circuit = path.name
                if self.fail_fast:
                    raise
                logger.error(f"{exc} ({type(exc).__name__}); continuing")
                results.add_failure(CaseFailure(
                    circuit=path.name,
                    path=path,
                    error_type=type(exc).__name__,
                    message=exc.message,
                ))
                continue
            results.append(record)

        return results
