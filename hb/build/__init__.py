"""Static build descriptor (SDK levels, placeholders, dependencies)."""

from .descriptor import (
    DEPENDENCIES,
    BuildDescriptor,
    Dependency,
    DependencyIssue,
    parse_coordinate,
    validate_dependencies,
)

__all__ = [
    "DEPENDENCIES",
    "BuildDescriptor",
    "Dependency",
    "DependencyIssue",
    "parse_coordinate",
    "validate_dependencies",
]
