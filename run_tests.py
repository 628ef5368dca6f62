#!/usr/bin/env python3
"""
Test runner script for the storefront application.
Provides convenient commands to run different groups of tests.
"""

import sys
import subprocess
import argparse
from pathlib import Path

TEST_GROUPS = {
    "slug": ["tests/test_slug.py"],
    "validation": ["tests/test_validation.py"],
    "repositories": ["tests/test_repositories.py"],
    "services": ["tests/test_services.py"],
    "routes": ["tests/test_routes.py"],
    "utils": ["tests/test_utils.py"],
}
TEST_GROUPS["unit"] = (
    TEST_GROUPS["slug"] + TEST_GROUPS["validation"] + TEST_GROUPS["utils"]
)


def run_command(cmd: list[str], description: str) -> int:
    """Run a command and return the exit code."""
    print(f"\n{'='*60}")
    print(f"Running: {description}")
    print(f"Command: {' '.join(cmd)}")
    print(f"{'='*60}")

    result = subprocess.run(cmd, cwd=Path(__file__).parent)
    return result.returncode


def main():
    parser = argparse.ArgumentParser(description="Run tests for the storefront application")
    parser.add_argument(
        "test_type",
        choices=["all", "coverage", *TEST_GROUPS],
        help="Type of tests to run"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Run tests in verbose mode")
    parser.add_argument("--html-coverage", action="store_true", help="Generate HTML coverage report")

    args = parser.parse_args()

    cmd = [sys.executable, "-m", "pytest"]
    if args.verbose:
        cmd.append("-v")

    if args.test_type in ("all", "coverage"):
        cmd.append("tests/")
    else:
        cmd.extend(TEST_GROUPS[args.test_type])

    if args.test_type == "coverage" or args.html_coverage:
        cmd.extend(["--cov=storefront", "--cov-report=term-missing"])
        if args.html_coverage:
            cmd.append("--cov-report=html:htmlcov")

    description = f"{args.test_type.title()} tests"
    exit_code = run_command(cmd, description)

    if exit_code == 0:
        print(f"\n{description} completed successfully!")
    else:
        print(f"\n{description} failed with exit code {exit_code}")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
