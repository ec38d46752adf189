"""
Command-line entry point

Usage:
    qcompare circuits/                         # 10 repetitions per engine
    qcompare circuits/ -n 1 --plot out.png     # single timing sample
    qcompare circuits/ --candidate mysim.api:simulate --keep-going
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import matplotlib.pyplot as plt

from ..comparison import CaseRunner, Comparator, SuiteRunner, Timer
from ..core.config import (DEFAULT_ATOL, DEFAULT_EXTENSION, DEFAULT_REPETITIONS,
                           DEFAULT_RTOL, HarnessConfig)
from ..core.errors import HarnessError
from ..engines import CandidateSimulator, ReferenceSimulator
from ..reporting import CSVReporter, JSONReporter, Reporter

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_EQUIVALENT = 1
EXIT_HARNESS_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='qcompare',
        description='Compare a candidate quantum simulator against a reference engine')
    parser.add_argument('directory', type=Path,
                        help='Directory containing circuit files')
    parser.add_argument('--repetitions', '-n', type=int, default=DEFAULT_REPETITIONS,
                        help='Timed runs per engine and circuit')
    parser.add_argument('--warmup', type=int, default=0,
                        help='Untimed runs before timing')
    parser.add_argument('--atol', type=float, default=DEFAULT_ATOL,
                        help='Absolute tolerance for amplitude comparison')
    parser.add_argument('--rtol', type=float, default=DEFAULT_RTOL,
                        help='Relative tolerance for amplitude comparison')
    parser.add_argument('--extension', '-e', default=DEFAULT_EXTENSION,
                        help='Circuit file extension')
    parser.add_argument('--candidate', '-c', default=None,
                        help="Candidate engine as 'package.module:function' (default: Qiskit)")
    parser.add_argument('--timeout', type=float, default=None,
                        help='Per-call timeout in seconds, checked when each engine call returns')
    parser.add_argument('--keep-going', action='store_true',
                        help='Record failing circuits and continue instead of aborting')
    parser.add_argument('--plot', type=Path, default=Path('runtime_vs_qubits.png'),
                        help='Output path for the run time plot')
    parser.add_argument('--no-plot', action='store_true',
                        help='Do not save the plot')
    parser.add_argument('--json', type=Path, default=None,
                        help='Write a JSON report to this path')
    parser.add_argument('--csv', type=Path, default=None,
                        help='Write the records as CSV to this path')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable verbose logging')
    return parser


def run(config: HarnessConfig,
        reference=None,
        candidate=None) -> int:
    """
    Run a suite and emit its reports

    Engines default to Cirq (reference) and the configured candidate.

    Returns
    -------
    int
        Process exit status
    """
    try:
        reference = reference or ReferenceSimulator()
        candidate = candidate or CandidateSimulator(config.candidate_engine)
    except (ImportError, ValueError) as exc:
        logger.error(f"Could not set up engines: {exc}")
        return EXIT_HARNESS_ERROR

    case_runner = CaseRunner(
        reference=reference,
        candidate=candidate,
        timer=Timer(warmup=config.warmup, timeout=config.timeout),
        comparator=Comparator(atol=config.atol, rtol=config.rtol),
    )
    suite = SuiteRunner(
        case_runner,
        extension=config.extension,
        fail_fast=config.fail_fast,
        progress=lambda i, total, path: logger.info(f"[{i + 1}/{total}] {path}"),
    )

    print(f"\n{'='*60}")
    print("Simulator Runtime Comparison")
    print(f"{'='*60}")
    print(f"Circuits:    {config.directory}")
    print(f"Reference:   {reference.name}")
    print(f"Candidate:   {candidate.name}")
    print(f"Repetitions: {config.repetitions}")
    print(f"Tolerance:   atol={config.atol:g}, rtol={config.rtol:g}")
    print(f"{'='*60}\n")

    try:
        results = suite.run(config.directory, config.repetitions)
    except HarnessError as exc:
        logger.error(f"Suite aborted: {exc}")
        return EXIT_HARNESS_ERROR

    reporter = Reporter(candidate_label=candidate.name, reference_label=reference.name)
    table, figure = reporter.render(results, plot_path=config.plot_path)
    plt.close(figure)

    print("\nRuntime Comparison Table:")
    print(table)

    if config.json_path:
        JSONReporter().generate_report(results, config.json_path)
        print(f"\nJSON report: {config.json_path}")
    if config.csv_path:
        CSVReporter().generate_report(results, config.csv_path)
        print(f"CSV report: {config.csv_path}")
    if config.plot_path:
        print(f"Plot: {config.plot_path}")

    passed = sum(1 for r in results if r.equivalent)
    total = len(results) + len(results.failures)
    print(f"\n{'='*60}")
    print(f"Summary: {passed}/{total} circuits equivalent")
    print(f"{'='*60}\n")

    return EXIT_OK if results.all_equivalent else EXIT_NOT_EQUIVALENT


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        config = HarnessConfig.from_args(args)
    except ValueError as exc:
        logger.error(f"Invalid arguments: {exc}")
        return EXIT_HARNESS_ERROR

    return run(config)


if __name__ == '__main__':
    sys.exit(main())
