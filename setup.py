"""
qcompare: Quantum Simulator Comparison Harness
==============================================

Benchmarks a candidate quantum state-vector simulator against a reference
engine over a directory of OpenQASM circuits, checking that both produce
the same final state.
"""

from setuptools import setup, find_packages

setup(
    name="qcompare",
    version="1.0.0",
    description="Runtime and correctness comparison harness for quantum circuit simulators",
    long_description=__doc__,
    long_description_content_type="text/plain",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering :: Physics",
    ],
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20.0",
        "matplotlib>=3.5.0",
        "pandas>=1.4.0",
        "cirq-core>=1.0.0",
        "ply>=3.11",
        "qiskit>=1.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "qcompare=qcompare.tools.cli:main",
        ],
    },
)
