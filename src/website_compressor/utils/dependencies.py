"""Shared utilities for checking the minifier libraries and their versions."""

import importlib.util
import re
from importlib import metadata


class MissingDependencyError(RuntimeError):
    """A minifier library is not installed or has an unsupported version."""


# distribution name -> (import name, minimum version, maximum version exclusive)
MINIFIER_PACKAGES = {
    "csscompressor": ("csscompressor", (0, 9, 5), (1,)),
    "htmlmin": ("htmlmin", (0, 1, 12), (0, 2)),
    "rjsmin": ("rjsmin", (1, 2), (2,)),
    "calmjs.parse": ("calmjs.parse", (1, 3), (2,)),
    "lxml": ("lxml", (4, 9), (7,)),
}


def parse_version_tuple(version_str: str) -> tuple[int, ...]:
    """Parse the numeric release part of a version like '1.2.1' or '6.0.0b1' into a tuple of ints."""
    match = re.match(r"\d+(?:\.\d+)*", version_str)
    if not match:
        raise ValueError(f"Could not parse version: {version_str!r}")
    return tuple(int(x) for x in match.group(0).split("."))


def check_package(
    distribution: str,
    module: str,
    min_version: tuple[int, ...],
    max_version_exclusive: tuple[int, ...],
) -> str:
    """Verify a package is importable and within the required version range.

    Returns:
        The detected version string.

    Raises:
        MissingDependencyError: If the package is not found or version is out of range.
    """
    try:
        spec = importlib.util.find_spec(module)
        version_str = metadata.version(distribution)
    except (ImportError, metadata.PackageNotFoundError):
        spec = None
    if spec is None:
        raise MissingDependencyError(
            f"Required package not found: {distribution}. Install it with: pip install {distribution}"
        )

    version = parse_version_tuple(version_str)
    if version < min_version or version >= max_version_exclusive:
        raise MissingDependencyError(
            f"{distribution} version {version_str} is not supported. "
            f"Required: >= {'.'.join(map(str, min_version))} and < {'.'.join(map(str, max_version_exclusive))}"
        )

    return version_str


def check_dependencies() -> dict[str, str]:
    """Check every minifier library, returning the detected versions by distribution name."""
    return {
        distribution: check_package(distribution, module, min_version, max_version)
        for distribution, (module, min_version, max_version) in MINIFIER_PACKAGES.items()
    }
