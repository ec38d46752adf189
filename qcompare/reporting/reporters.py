"""
Result reporters

Provides the console table, JSON and CSV outputs for a suite run.
"""

import json
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple
from pathlib import Path
from abc import ABC, abstractmethod

from ..core.datatypes import ComparisonRecord, ResultSet
from .plots import plot_runtime_vs_qubits


class ComparisonReporter(ABC):
    """Base class for result reporters"""

    @abstractmethod
    def generate_report(self,
                        results: ResultSet,
                        output_path: Optional[Path] = None) -> str:
        """Generate report from a result set"""
        pass


class TableReporter(ComparisonReporter):
    """Plain-text table, one left-aligned row per circuit"""

    HEADERS = ['Circuit', 'Qubits', 'Candidate Time (s)',
               'Reference Time (s)', 'Equivalent']

    def __init__(self, precision: int = 6):
        self.precision = precision

    def _row(self, record: ComparisonRecord) -> List[str]:
        return [
            record.circuit,
            str(record.qubit_count),
            f"{record.candidate_time:.{self.precision}f}",
            f"{record.reference_time:.{self.precision}f}",
            "true" if record.equivalent else "false",
        ]

    def generate_report(self,
                        results: ResultSet,
                        output_path: Optional[Path] = None) -> str:
        rows = [self._row(r) for r in results]
        widths = [max(len(cell) for cell in column)
                  for column in zip(self.HEADERS, *rows)]

        def fmt(cells):
            return "  ".join(f"{cell:<{w}}" for cell, w in zip(cells, widths)).rstrip()

        lines = [fmt(self.HEADERS), "  ".join("-" * w for w in widths)]
        lines.extend(fmt(row) for row in rows)

        if results.failures:
            lines.append("")
            lines.append("Failed circuits:")
            for failure in results.failures:
                lines.append(f"  {failure.circuit}: {failure.error_type}: {failure.message}")

        report = "\n".join(lines)

        if output_path:
            Path(output_path).write_text(report + "\n")

        return report


class JSONReporter(ComparisonReporter):
    """Generate JSON format reports"""

    def generate_report(self,
                        results: ResultSet,
                        output_path: Optional[Path] = None) -> str:
        """
        Generate JSON report

        Parameters
        ----------
        results : ResultSet
            Suite results
        output_path : Path, optional
            Output file path

        Returns
        -------
        str
            JSON report string
        """
        report = {
            'timestamp': datetime.now().isoformat(),
            'summary': self._generate_summary(results),
            'records': [r.to_dict() for r in results],
            'failures': [f.to_dict() for f in results.failures],
        }

        json_str = json.dumps(report, indent=2, default=str)

        if output_path:
            Path(output_path).write_text(json_str)

        return json_str

    def _generate_summary(self, results: ResultSet) -> Dict[str, Any]:
        """Generate summary statistics"""
        passed = sum(1 for r in results if r.equivalent)
        speedups = [r.speedup for r in results if r.speedup > 0]

        return {
            'circuits_tested': len(results) + len(results.failures),
            'equivalent': passed,
            'not_equivalent': len(results) - passed,
            'errors': len(results.failures),
            'avg_speedup': sum(speedups) / len(speedups) if speedups else 0,
            'min_speedup': min(speedups) if speedups else 0,
            'max_speedup': max(speedups) if speedups else 0,
        }


class CSVReporter(ComparisonReporter):
    """Records as CSV via pandas"""

    def generate_report(self,
                        results: ResultSet,
                        output_path: Optional[Path] = None) -> str:
        csv_str = results.to_dataframe().to_csv(index=False, float_format='%.6f')

        if output_path:
            Path(output_path).write_text(csv_str)

        return csv_str


class Reporter:
    """Sorts a result set and renders its table and plot"""

    def __init__(self,
                 table_reporter: Optional[TableReporter] = None,
                 candidate_label: str = "Candidate",
                 reference_label: str = "Reference"):
        self.table_reporter = table_reporter or TableReporter()
        self.candidate_label = candidate_label
        self.reference_label = reference_label

    def render(self,
               results: ResultSet,
               plot_path: Optional[Path] = None) -> Tuple[str, Any]:
        """
        Render the sorted result set

        Parameters
        ----------
        results : ResultSet
            Suite results; sorted and frozen in place
        plot_path : Path, optional
            Where to save the plot

        Returns
        -------
        tuple
            (table string, matplotlib figure)
        """
        results.sort()
        table = self.table_reporter.generate_report(results)
        figure = plot_runtime_vs_qubits(
            results, plot_path,
            candidate_label=self.candidate_label,
            reference_label=self.reference_label,
        )
        return table, figure
