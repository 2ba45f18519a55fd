"""Catalog of every distinct shape the game can hand out.

The catalog is built once from a handful of authored base patterns.  Each
pattern is expanded into its rotations and any mask already present in the
catalog is skipped, so the result holds every playable orientation exactly
once.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple, overload

from .shape import Shape, ShapePatternError


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class PatternSpec:
    """Authored base pattern: declared size plus row-major ``#``/``.`` text."""

    width: int
    height: int
    pattern: str
    name: str = ""


DEFAULT_PATTERNS: Tuple[PatternSpec, ...] = (
    PatternSpec(2, 2, "####", "square 2x2"),
    PatternSpec(4, 1, "####", "line 4"),
    PatternSpec(3, 1, "###", "line 3"),
    PatternSpec(2, 2, "##.#", "V"),
    PatternSpec(3, 2, "###..#", "L"),
    PatternSpec(1, 1, "#", "dot"),
    PatternSpec(1, 2, "##", "line 2"),
    PatternSpec(3, 3, "#########", "square 3x3"),
    PatternSpec(2, 3, "######", "rectangle 3x2"),
    PatternSpec(3, 2, "###.#.", "T"),
    PatternSpec(3, 2, "##..##", "S"),
)


class CatalogError(ValueError):
    """Raised when a base pattern in the catalog is malformed."""

    def __init__(self, index: int, spec: PatternSpec, reason: str) -> None:
        label = f" ({spec.name})" if spec.name else ""
        super().__init__(f"Pattern {index}{label} {spec.pattern!r}: {reason}")
        self.index = index
        self.spec = spec
        self.reason = reason


class ShapeCatalog(Sequence[Shape]):
    """Read-only ordered collection of distinct shapes."""

    def __init__(self, shapes: Iterable[Shape]) -> None:
        self._shapes: Tuple[Shape, ...] = tuple(shapes)

    @overload
    def __getitem__(self, index: int) -> Shape: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Shape]: ...

    def __getitem__(self, index):
        return self._shapes[index]

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._shapes)

    def __repr__(self) -> str:
        return f"ShapeCatalog({len(self._shapes)} shapes)"


def build_catalog(patterns: Iterable[PatternSpec]) -> ShapeCatalog:
    """Expand ``patterns`` into a deduplicated :class:`ShapeCatalog`.

    Raises:
        CatalogError: If any pattern is malformed.  The error names the
            offending pattern's index and the parse failure.
    """

    shapes: List[Shape] = []
    for index, spec in enumerate(patterns):
        try:
            base = Shape.from_pattern(spec.width, spec.height, spec.pattern)
        except ShapePatternError as exc:
            raise CatalogError(index, spec, str(exc)) from exc

        added = 0
        for variant in base.equivalents():
            if any(variant.same_mask(existing) for existing in shapes):
                continue
            shapes.append(variant)
            added += 1
        LOGGER.debug("Pattern %d (%s) contributed %d shape(s)", index, spec.name or spec.pattern, added)

    LOGGER.info("Built shape catalog with %d shapes", len(shapes))
    return ShapeCatalog(shapes)


@functools.lru_cache(maxsize=None)
def default_catalog() -> ShapeCatalog:
    """Return the process-wide catalog built from :data:`DEFAULT_PATTERNS`."""

    return build_catalog(DEFAULT_PATTERNS)
