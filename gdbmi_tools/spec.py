"""Tool descriptors: name, category and the profiles that expose them."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass


class Profile(enum.IntFlag):
    """Profiles a tool may be exposed in."""

    FULL = 0b01
    CORE = 0b10


FULL_ONLY = Profile.FULL
FULL_CORE = Profile.FULL | Profile.CORE


@dataclass(frozen=True)
class ToolSpec:
    """Static description of one tool."""

    name: str
    category: str
    profiles: Profile

    def in_core(self) -> bool:
        """Whether the tool belongs to the core profile."""
        return self.profiles & FULL_CORE == FULL_CORE


def make_specs(
    category: str, profiles: Profile, names: Iterable[str]
) -> tuple[ToolSpec, ...]:
    """Build specs sharing one category and profile set, in name order."""
    return tuple(ToolSpec(name, category, Profile(profiles)) for name in names)