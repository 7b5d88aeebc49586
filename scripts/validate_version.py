#!/usr/bin/env python3
"""Validate that the errorchain version is consistent and releasable.

pyproject.toml is the single source of truth. The installed package must
report the same __version__, and the version itself must be a real
MAJOR.MINOR.PATCH release number.

CHECKS PERFORMED:
    CRITICAL (fail build):
    1. Package __version__ matches pyproject.toml
    2. Version follows semantic versioning (MAJOR.MINOR.PATCH)
    3. Version is not a development placeholder

    INFORMATIONAL (warn only):
    4. README.md mentions the current version

Exit Codes:
    0: All checks passed (warnings allowed)
    1: Critical version mismatch or invalid version

Python 3.13+. No external dependencies.
"""

from __future__ import annotations

import os
import re
import sys
import tomllib
from pathlib import Path
from typing import NamedTuple

# ==============================================================================
# CONFIGURATION
# ==============================================================================

NO_COLOR = os.environ.get("NO_COLOR", "") == "1"

SEMVER_PATTERN = re.compile(
    r"^\d+\.\d+\.\d+"  # MAJOR.MINOR.PATCH (required)
    r"(?:-[a-zA-Z0-9.]+)?"  # -PRERELEASE (optional)
    r"(?:\+[a-zA-Z0-9.]+)?$"  # +BUILD (optional)
)

PLACEHOLDER_VERSIONS = frozenset({"0.0.0+dev", "0.0.0+unknown", "0.0.0.dev0", "unknown", "dev"})


class Colors:
    """ANSI color codes for terminal output."""
    RED = "" if NO_COLOR else "\033[31m"
    GREEN = "" if NO_COLOR else "\033[32m"
    YELLOW = "" if NO_COLOR else "\033[33m"
    CYAN = "" if NO_COLOR else "\033[36m"
    BOLD = "" if NO_COLOR else "\033[1m"
    RESET = "" if NO_COLOR else "\033[0m"


class CheckResult(NamedTuple):
    """Result of a single validation check."""
    name: str
    passed: bool
    message: str
    is_critical: bool = True


# ==============================================================================
# VERSION EXTRACTION
# ==============================================================================

def get_pyproject_version(root: Path) -> str | None:
    """Extract version from pyproject.toml, or None if unreadable."""
    pyproject_path = root / "pyproject.toml"
    if not pyproject_path.exists():
        return None
    with pyproject_path.open("rb") as f:
        data = tomllib.load(f)
    return data.get("project", {}).get("version")


def get_runtime_version() -> str | None:
    """Get version by importing the package, or None if not installed."""
    try:
        import errorchain  # noqa: PLC0415
    except ImportError:
        return None
    return errorchain.__version__


# ==============================================================================
# VALIDATION CHECKS
# ==============================================================================

def check_version_matches_pyproject(version: str) -> CheckResult:
    """CRITICAL: __version__ must match pyproject.toml."""
    runtime_version = get_runtime_version()
    if runtime_version is None:
        return CheckResult(
            name="version_matches_pyproject",
            passed=False,
            message=(
                f"Package not installed or import failed.\n"
                f"  pyproject.toml: {version}\n"
                f"  Resolution: Run 'pip install -e .'"
            ),
        )
    if runtime_version != version:
        return CheckResult(
            name="version_matches_pyproject",
            passed=False,
            message=(
                f"Version mismatch detected!\n"
                f"  pyproject.toml: {version}\n"
                f"  __version__:    {runtime_version}\n"
                f"  Resolution: Run 'pip install -e .' to refresh metadata"
            ),
        )
    return CheckResult(
        name="version_matches_pyproject",
        passed=True,
        message=f"Version {version} synchronized",
    )


def check_valid_semver(version: str) -> CheckResult:
    """Version must follow semantic versioning."""
    if not SEMVER_PATTERN.match(version):
        return CheckResult(
            name="valid_semver",
            passed=False,
            message=(
                f"Invalid version format: {version!r}\n"
                f"  Expected: MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]"
            ),
        )
    return CheckResult(name="valid_semver", passed=True, message=f"{version} is valid semver")


def check_not_placeholder(version: str) -> CheckResult:
    """Version must not be a development placeholder."""
    if version in PLACEHOLDER_VERSIONS:
        return CheckResult(
            name="not_placeholder",
            passed=False,
            message=f"Development placeholder detected: {version!r}",
        )
    return CheckResult(name="not_placeholder", passed=True, message="Not a placeholder")


def check_readme_mentions_version(root: Path, version: str) -> CheckResult:
    """README.md should mention the current version (warn only)."""
    readme = root / "README.md"
    if readme.exists() and version in readme.read_text(encoding="utf-8"):
        return CheckResult(
            name="readme_mentions_version",
            passed=True,
            message="README.md is current",
            is_critical=False,
        )
    return CheckResult(
        name="readme_mentions_version",
        passed=False,
        message=f"README.md does not mention {version}",
        is_critical=False,
    )


# ==============================================================================
# MAIN EXECUTION
# ==============================================================================

def main() -> int:
    """Run all version checks and return the exit code."""
    root = Path(__file__).parent.parent
    version = get_pyproject_version(root)

    print(f"{Colors.BOLD}{Colors.CYAN}=== Version Consistency Check ==={Colors.RESET}")
    if version is None:
        print(f"{Colors.RED}[FAIL]{Colors.RESET} Cannot read version from pyproject.toml")
        return 1
    print(f"Canonical version (pyproject.toml): {Colors.BOLD}{version}{Colors.RESET}\n")

    checks = [
        check_version_matches_pyproject(version),
        check_valid_semver(version),
        check_not_placeholder(version),
        check_readme_mentions_version(root, version),
    ]

    for result in checks:
        if result.passed:
            status = f"{Colors.GREEN}[PASS]{Colors.RESET}"
        elif result.is_critical:
            status = f"{Colors.RED}[FAIL]{Colors.RESET}"
        else:
            status = f"{Colors.YELLOW}[WARN]{Colors.RESET}"
        print(f"  {status} {result.name}")
        if not result.passed:
            for line in result.message.split("\n"):
                print(f"         {line}")

    print()
    failures = [r for r in checks if not r.passed and r.is_critical]
    passed_count = sum(r.passed for r in checks)
    if failures:
        print(f"{Colors.RED}{Colors.BOLD}[FAIL]{Colors.RESET} "
              f"{len(failures)} critical failure(s), {passed_count}/{len(checks)} checks passed")
        return 1

    print(f"{Colors.GREEN}{Colors.BOLD}[OK]{Colors.RESET} "
          f"{passed_count}/{len(checks)} version checks passed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
