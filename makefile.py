#!/usr/bin/env python3
"""
makefile.py - Task runner for the parking lot project.

Usage:
    python makefile.py <target>

Requires: pip install -e .[dev]   (pytest, pytest-cov, colorama)
"""

import shutil
import subprocess
import sys
from pathlib import Path

from colorama import Fore, Style
from colorama import init as _colorama_init

_colorama_init(autoreset=True)

ROOT = Path(__file__).parent.absolute()


def print_header(title):
    bar = Fore.CYAN + Style.BRIGHT + "=" * 52 + Style.RESET_ALL
    label = Fore.CYAN + Style.BRIGHT + f"  {title}" + Style.RESET_ALL
    print(f"\n{bar}\n{label}\n{bar}")


def print_step(msg):
    print(f"{Fore.YELLOW}-->{Style.RESET_ALL} {msg}")


def print_success(msg):
    print(f"{Fore.GREEN}[OK]{Style.RESET_ALL} {msg}")


def run_cmd(args, allow_failure=False):
    """
    Run a command as a subprocess, streaming output directly to the terminal.
    Exits with the subprocess exit code on failure unless allow_failure=True.
    """
    try:
        result = subprocess.run(args, cwd=ROOT)
    except FileNotFoundError:
        print(f"{Fore.RED}[ERROR]{Style.RESET_ALL} Command not found: '{args[0]}'")
        print(f"        Ensure '{args[0]}' is installed and on your PATH.")
        if not allow_failure:
            sys.exit(127)
        return 127
    if result.returncode != 0 and not allow_failure:
        sys.exit(result.returncode)
    return result.returncode


def target_test():
    print_header("Running All Tests")
    run_cmd([sys.executable, "-m", "pytest", "-v"])


def target_test_allocation():
    print_header("Running Allocation Tests")
    run_cmd([sys.executable, "-m", "pytest", "tests/test_allocation", "-v"])


def target_test_coverage():
    print_header("Running Tests with Coverage")
    run_cmd([sys.executable, "-m", "pytest",
             "--cov=parkinglot", "--cov-report=term-missing"])


def target_coverage_html():
    print_header("Generating HTML Coverage Report")
    run_cmd([sys.executable, "-m", "pytest",
             "--cov=parkinglot", "--cov-report=html"])
    print_success("Coverage report written to htmlcov/index.html")


def target_install():
    print_header("Installing Parking Lot (editable, dev extras)")
    run_cmd([sys.executable, "-m", "pip", "install", "-e", ".[dev]"])
    print_success("Installed")


def target_run():
    print_header("Running Parking Lot Console")
    run_cmd([sys.executable, "-m", "parkinglot.main"] + sys.argv[2:])


def target_clean():
    print_header("Cleaning Caches")
    patterns = [".pytest_cache", "htmlcov", ".coverage"]
    for name in patterns:
        path = ROOT / name
        if path.is_dir():
            shutil.rmtree(path)
            print_step(f"Removed {name}")
        elif path.exists():
            path.unlink()
            print_step(f"Removed {name}")

    for cache_dir in ROOT.rglob("__pycache__"):
        shutil.rmtree(cache_dir, ignore_errors=True)
    print_success("Clean")


def target_check():
    print_header("Full Check: tests + coverage")
    target_test_coverage()


TARGETS = {
    "test": (target_test, "Run all tests", "Testing"),
    "test-allocation": (target_test_allocation, "Run allocator tests only", "Testing"),
    "test-coverage": (target_test_coverage, "Run tests with coverage", "Testing"),
    "coverage-html": (target_coverage_html, "Generate htmlcov/ report", "Testing"),
    "install": (target_install, "pip install -e .[dev]", "Tools"),
    "clean": (target_clean, "Remove test and coverage caches", "Tools"),
    "check": (target_check, "tests + coverage", "Build"),
    "run": (target_run, "Run the interactive console (extra args passed on)", "Run"),
    "help": (None, "Show this help message", "Meta"),
}


def target_help():
    from collections import defaultdict

    title = (
        Fore.CYAN
        + Style.BRIGHT
        + "Parking Lot - Available Commands"
        + Style.RESET_ALL
    )
    print(f"\n{title}\n")
    groups = defaultdict(list)
    for name, (_, desc, group) in TARGETS.items():
        groups[group].append((name, desc))
    group_order = ["Testing", "Build", "Run", "Tools", "Meta"]
    for group in group_order:
        if group not in groups:
            continue
        header = Fore.YELLOW + Style.BRIGHT + f"{group}:" + Style.RESET_ALL
        print(header)
        for name, desc in groups[group]:
            padded = name.ljust(24)
            print(f"  {Fore.GREEN}{padded}{Style.RESET_ALL}  {desc}")
        print()


TARGETS["help"] = (target_help, "Show this help message", "Meta")


def main():
    if len(sys.argv) < 2:
        target_help()
        sys.exit(0)

    name = sys.argv[1]

    if name not in TARGETS:
        print(f"{Fore.RED}[ERROR]{Style.RESET_ALL} Unknown target: '{name}'")
        print("  Run:  python makefile.py help  to list all available targets.")
        sys.exit(1)

    func, _, _ = TARGETS[name]
    func()


if __name__ == "__main__":
    main()
