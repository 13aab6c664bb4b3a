"""Dependency checking utilities."""

from __future__ import annotations

import shutil

# mkvmerge reads container metadata, mkvpropedit rewrites the title tag
SYSTEM_TOOLS = ["mkvmerge", "mkvpropedit"]


def check_system_dependencies(tools: list[str] | None = None) -> dict[str, bool]:
    """Check availability of system dependencies (binaries).

    Args:
        tools: Binaries to look for, all of SYSTEM_TOOLS by default

    Returns:
        Dict mapping tool names to availability status.
    """
    return {tool: shutil.which(tool) is not None for tool in tools or SYSTEM_TOOLS}


def missing_system_dependencies(tools: list[str] | None = None) -> list[str]:
    """Return the names of required binaries not found on PATH."""
    return [tool for tool, available in check_system_dependencies(tools).items() if not available]


def print_dependency_status() -> None:
    """Print dependency status to stdout."""
    deps = check_system_dependencies()

    print("System binaries:")
    for name, available in sorted(deps.items()):
        icon = "✓" if available else "✗"
        print(f"  {icon} {name}")

    if not all(deps.values()):
        print("\n⚠️  mkvtoolnix is required. Install: apt install mkvtoolnix (or brew install mkvtoolnix)")
