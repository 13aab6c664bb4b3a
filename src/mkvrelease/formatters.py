"""Output formatters for dry runs."""

from __future__ import annotations

import json
from typing import Any

from mkvrelease.models import ContainerProfile


def format_profile(path: str, name: str, profile: ContainerProfile) -> str:
    """Format a classified file and its release name.

    Shows:
    - The release name that would be used
    - Resolution and codecs read from the container
    """
    lines = []

    lines.append("=" * 70)
    lines.append(f"File: {path}")
    lines.append("=" * 70)

    lines.append("")
    lines.append("## RELEASE")
    lines.append(f"  Name:         {name}")

    lines.append("")
    lines.append("## CONTAINER")
    lines.append(f"  Resolution:   {profile.resolution.value or 'N/A'}")
    lines.append(f"  Audio:        {', '.join(profile.audio_codecs)}")
    lines.append(f"  Video:        {', '.join(profile.video_codecs)}")

    return "\n".join(lines)


def to_dict(path: str, name: str, profile: ContainerProfile) -> dict[str, Any]:
    """Convert a dry-run result to a dictionary."""
    return {
        "path": path,
        "name": name,
        "profile": profile.model_dump(mode="json"),
    }


def format_json_list(entries: list[dict[str, Any]], indent: int = 2) -> str:
    """Format dry-run results as a JSON array.

    Args:
        entries: Dictionaries built by to_dict
        indent: JSON indentation level

    Returns:
        JSON array formatted string
    """
    return json.dumps(entries, indent=indent, ensure_ascii=False, default=str)
