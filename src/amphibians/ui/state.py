"""UI state for the amphibian screen.

Exactly one variant is current at a time::

    Loading  ->  Success(amphibians) | Error
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from collections.abc import Iterable

    from amphibians.schemas import Amphibian


@dataclass(frozen=True)
class Loading:
    """A fetch is in flight."""


@dataclass(frozen=True)
class Success:
    """The list was fetched; order matches the server response."""

    amphibians: tuple[Amphibian, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, amphibians: Iterable[Amphibian]) -> Success:
        return cls(tuple(amphibians))


@dataclass(frozen=True)
class Error:
    """The last fetch failed. The cause is logged, not kept."""


AmphibianUiState = Union[Loading, Success, Error]
