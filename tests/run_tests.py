#!/usr/bin/env python3
"""
Test runner for metaprops

Discovers every test module under tests/ and prints a summary.
"""

import argparse
import sys
import time
import unittest
from pathlib import Path

import colorama
from colorama import Fore, Style

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

TEST_PATTERN = "test_*.py"

REQUIRED_MODULES = [
    "PIL",
    "PyPDF2",
    "mutagen",
    "metaprops.core.models",
    "metaprops.core.processor",
    "metaprops.stores",
    "metaprops.containers.isom",
    "metaprops.reporters",
]


class ColoredTextTestResult(unittest.TextTestResult):
    """Test result that marks each test with a colored status."""

    def _mark(self, test, color, label):
        if self.verbosity > 1:
            self.stream.write(f"{color}{label}{Style.RESET_ALL} {test._testMethodName}\n")

    def addSuccess(self, test):
        super().addSuccess(test)
        self._mark(test, Fore.GREEN, "ok")

    def addError(self, test, err):
        super().addError(test, err)
        self._mark(test, Fore.RED, "ERROR")

    def addFailure(self, test, err):
        super().addFailure(test, err)
        self._mark(test, Fore.RED, "FAIL")

    def addSkip(self, test, reason):
        super().addSkip(test, reason)
        self._mark(test, Fore.YELLOW, f"SKIP ({reason})")


def discover_tests():
    loader = unittest.TestLoader()
    return loader.discover(
        start_dir=str(Path(__file__).parent),
        pattern=TEST_PATTERN,
        top_level_dir=str(project_root)
    )


def run_tests(verbosity=1):
    """Run all tests and return True when none failed."""
    runner = unittest.TextTestRunner(stream=sys.stdout, verbosity=verbosity,
                                     resultclass=ColoredTextTestResult)

    print("=" * 70)
    print("metaprops Test Suite")
    print("=" * 70)

    start_time = time.time()
    result = runner.run(discover_tests())
    duration = time.time() - start_time

    failures = len(result.failures)
    errors = len(result.errors)
    skipped = len(result.skipped)

    print("\n" + "=" * 70)
    print(f"Total Tests:     {result.testsRun}")
    print(f"Successful:      {result.testsRun - failures - errors - skipped}")
    print(f"Failures:        {failures}")
    print(f"Errors:          {errors}")
    print(f"Skipped:         {skipped}")
    print(f"Duration:        {duration:.2f} seconds")

    return failures == 0 and errors == 0


def check_dependencies():
    """Check that the package and its libraries import."""
    print("Checking dependencies...")
    missing = []
    for module in REQUIRED_MODULES:
        try:
            __import__(module)
            print(f"{Fore.GREEN}ok{Style.RESET_ALL} {module}")
        except ImportError as e:
            print(f"{Fore.RED}missing{Style.RESET_ALL} {module}: {e}")
            missing.append(module)

    if missing:
        print(f"\nMissing modules: {missing}")
        return False
    return True


def main():
    parser = argparse.ArgumentParser(description="metaprops Test Runner")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument("--quiet", "-q", action="store_true", help="Quiet output")
    parser.add_argument("--check-deps", action="store_true", help="Check dependencies and exit")
    args = parser.parse_args()

    colorama.just_fix_windows_console()

    if args.quiet:
        verbosity = 0
    elif args.verbose:
        verbosity = 2
    else:
        verbosity = 1

    if not check_dependencies():
        sys.exit(1)
    if args.check_deps:
        sys.exit(0)

    sys.exit(0 if run_tests(verbosity) else 1)


if __name__ == "__main__":
    main()
