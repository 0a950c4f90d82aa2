"""Decompose dotted Go symbols into import-path qualifiers.

A symbol looks like ``github.com/org/project/pkg.(*Type).Method`` or
``runtime.gopark``. Only the import path matters for locating the file, so the
trailing function, receiver and method names are dropped.
"""

from __future__ import annotations

from dataclasses import dataclass

# hosting service / organization / project
REPOSITORY_QUALIFIERS = 3


def split_qualifiers(symbol: str) -> list[str]:
    return symbol.split("/")


def strip_member_suffix(part: str) -> str:
    """Drop everything from the first ``.`` of the final qualifier."""
    head, _, _ = part.partition(".")
    return head


@dataclass(frozen=True)
class ParsedSymbol:
    qualifiers: tuple[str, ...]

    @property
    def is_standard_library(self) -> bool:
        # Hosted import paths start with a domain, e.g. "github.com".
        return "." not in self.qualifiers[0]

    @property
    def repository_parts(self) -> tuple[str, ...]:
        if len(self.qualifiers) < REPOSITORY_QUALIFIERS:
            return ()
        return self.qualifiers[:REPOSITORY_QUALIFIERS]

    @property
    def package_parts(self) -> tuple[str, ...]:
        if len(self.qualifiers) < REPOSITORY_QUALIFIERS:
            return self.qualifiers
        return self.qualifiers[REPOSITORY_QUALIFIERS:]

    @property
    def repository(self) -> str:
        return "/".join(self.repository_parts)


def parse_symbol(symbol: str) -> ParsedSymbol:
    """Parse *symbol* into its ordered qualifiers.

    The first qualifier keeps its dots (``sigs.k8s.io``); only the last one is
    cut at its first dot.
    """
    parts = split_qualifiers(symbol)
    parts[-1] = strip_member_suffix(parts[-1])
    return ParsedSymbol(qualifiers=tuple(parts))
