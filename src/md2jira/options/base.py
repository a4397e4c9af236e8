"""Base classes for parser and renderer options.

This module defines the foundation classes for the option records used by
the md2jira conversion pipeline.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    @classmethod
    def field_names(cls) -> list[str]:
        """Return the names of all option fields in declaration order."""
        return [f.name for f in fields(cls)]  # type: ignore[arg-type]


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Notes
    -----
    Subclasses define format-specific rendering options as frozen dataclass
    fields. Field ``metadata`` carries a ``help`` string and an ``importance``
    tag used when building command line help.

    """

    def __post_init__(self) -> None:
        """Hook for subclasses to validate field values."""
        pass


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Notes
    -----
    Subclasses define format-specific parsing options as frozen dataclass
    fields.

    """

    def __post_init__(self) -> None:
        """Hook for subclasses to validate field values."""
        pass
