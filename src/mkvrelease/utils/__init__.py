"""Utility functions for mkvrelease."""

from .deps import (
    SYSTEM_TOOLS,
    check_system_dependencies,
    missing_system_dependencies,
    print_dependency_status,
)
from .episode import EPISODE_PATTERN, extract_episode, find_episode
from .links import LINK_PATTERN, is_supported_link, parse_file_code

__all__ = [
    # Dependency checking
    "SYSTEM_TOOLS",
    "check_system_dependencies",
    "missing_system_dependencies",
    "print_dependency_status",
    # Episode parsing
    "EPISODE_PATTERN",
    "extract_episode",
    "find_episode",
    # Link parsing
    "LINK_PATTERN",
    "is_supported_link",
    "parse_file_code",
]
