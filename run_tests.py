#!/usr/bin/env python3
"""
Run the Vinifera test suite.

    python run_tests.py                 # all tests with coverage
    python run_tests.py --no-cov        # quick run
    python run_tests.py -k fermentation # pass-through pytest args
"""

import argparse
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).parent

# Make the src/ package importable without an editable install
sys.path.insert(0, str(ROOT / "src"))


def build_pytest_args(options: argparse.Namespace, extra: list) -> list:
    args = [str(ROOT / "tests"), "--tb=short"]
    if not options.quiet:
        args.append("-v")
    if not options.no_cov:
        args += ["--cov=vinifera", "--cov-report=term-missing"]
        if options.html:
            args.append("--cov-report=html")
    return args + extra


def main() -> int:
    parser = argparse.ArgumentParser(description="Run Vinifera tests")
    parser.add_argument("--no-cov", action="store_true", help="Skip coverage collection")
    parser.add_argument("--html", action="store_true", help="Also write an HTML coverage report")
    parser.add_argument("-q", "--quiet", action="store_true", help="Less verbose output")
    options, extra = parser.parse_known_args()

    return pytest.main(build_pytest_args(options, extra))


if __name__ == "__main__":
    sys.exit(main())
