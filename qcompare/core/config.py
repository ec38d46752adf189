"""
Run configuration for the comparison harness
"""

from typing import Optional
from dataclasses import dataclass
from pathlib import Path

DEFAULT_REPETITIONS = 10
DEFAULT_ATOL = 1e-8
DEFAULT_RTOL = 1e-5
DEFAULT_EXTENSION = '.qasm'


@dataclass
class HarnessConfig:
    """Settings for one suite run"""
    directory: Path
    repetitions: int = DEFAULT_REPETITIONS
    warmup: int = 0
    atol: float = DEFAULT_ATOL
    rtol: float = DEFAULT_RTOL
    extension: str = DEFAULT_EXTENSION
    candidate_engine: Optional[str] = None  # "package.module:function"
    timeout: Optional[float] = None  # seconds per engine call, checked on return
    fail_fast: bool = True
    plot_path: Optional[Path] = Path('runtime_vs_qubits.png')
    json_path: Optional[Path] = None
    csv_path: Optional[Path] = None

    def __post_init__(self):
        self.directory = Path(self.directory)
        if self.repetitions < 1:
            raise ValueError(f"repetitions must be >= 1, got {self.repetitions}")
        if self.warmup < 0:
            raise ValueError(f"warmup must be >= 0, got {self.warmup}")
        if self.atol < 0 or self.rtol < 0:
            raise ValueError("tolerances must be non-negative")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        if not self.extension.startswith('.'):
            self.extension = '.' + self.extension

    @classmethod
    def from_args(cls, args) -> 'HarnessConfig':
        """Build a config from parsed command-line arguments"""
        return cls(
            directory=args.directory,
            repetitions=args.repetitions,
            warmup=args.warmup,
            atol=args.atol,
            rtol=args.rtol,
            extension=args.extension,
            candidate_engine=args.candidate,
            timeout=args.timeout,
            fail_fast=not args.keep_going,
            plot_path=None if args.no_plot else args.plot,
            json_path=args.json,
            csv_path=args.csv,
        )
