"""Helpers for checking installed packages."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/md2jira/utils/packages.py
from __future__ import annotations

from importlib import metadata

from packaging import version
from packaging.specifiers import InvalidSpecifier, SpecifierSet


def get_package_version(package_name: str) -> str | None:
    """Get the installed version of a distribution.

    Parameters
    ----------
    package_name : str
        Distribution name as used by pip (not the import name)

    Returns
    -------
    str or None
        Version string if the package is installed, None otherwise

    """
    try:
        return metadata.version(package_name)
    except metadata.PackageNotFoundError:
        return None


def check_version_requirement(package_name: str, version_spec: str) -> tuple[bool, str | None]:
    """Check if an installed package meets a version requirement.

    Parameters
    ----------
    package_name : str
        Name of the package
    version_spec : str
        Version specification (e.g., ">=3.0.0")

    Returns
    -------
    tuple
        (meets_requirement, installed_version)

    Raises
    ------
    ValueError
        If ``version_spec`` is not a valid specifier

    """
    installed_version = get_package_version(package_name)
    if not installed_version:
        return False, None

    try:
        spec = SpecifierSet(version_spec)
    except InvalidSpecifier as e:
        raise ValueError(f"Invalid version specifier for {package_name}: {version_spec!r}") from e

    return version.parse(installed_version) in spec, installed_version
