"""Relationship between a discovered package and the walk's root package."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class DepType(IntEnum):
    """Why a package is installed. Higher values win when merging."""

    DEV = 0
    PROD = 1
    ROOT = 2


class DepRequireState(IntEnum):
    OPTIONAL = 0
    REQUIRED = 1


@dataclass(frozen=True)
class DepRelationship:
    """How, and how strongly, a physical package is reached from the root."""

    type: DepType
    required: DepRequireState

    def __str__(self) -> str:
        return f"{self.type.name}_{self.required.name}"


def dep_type_greater(new_type: DepType, existing: DepType) -> bool:
    return new_type > existing


def dep_require_state_greater(new_state: DepRequireState, existing: DepRequireState) -> bool:
    return new_state > existing


def dep_relationship_greater(new: DepRelationship, existing: DepRelationship) -> bool:
    """Return True if ``new`` should replace ``existing`` on a revisited module.

    Type decides first (ROOT > PROD > DEV); the required state only breaks
    ties between equal types. Identical relationships are never greater.
    """
    return dep_type_greater(new.type, existing.type) or (
        new.type == existing.type and dep_require_state_greater(new.required, existing.required)
    )


def child_required(parent: DepRequireState, child: DepRequireState) -> DepRequireState:
    """Everything below an optional package is optional too."""
    if parent == DepRequireState.OPTIONAL:
        return DepRequireState.OPTIONAL
    return child


def child_dep_type(parent: DepType) -> DepType:
    # Only the root can introduce DEV edges; below it DEV stays DEV.
    if parent == DepType.DEV:
        return DepType.DEV
    return DepType.PROD
