"""Controlled vocabularies for language and source labels."""

from __future__ import annotations

from enum import Enum


class LangToken(str, Enum):
    """Audio/subtitle language label of a release."""

    MULTI = "MULTi"
    VOSTFR = "VOSTFR"
    VFF = "VFF"
    NONE = ""

    def __str__(self) -> str:
        return self.value


class SourceToken(str, Enum):
    """Distribution origin (rip type) of a release.

    Members are ordered by declaration, from the lowest quality source to
    the highest, with NONE last.
    """

    PPV = "PPV"
    TS = "TC"
    CAM = "CAM"
    HDCAM = "HDCAM"
    SCR = "SCR"
    DVDSCR = "DVDScr"
    TVRIP = "TVRip"
    HDLIGHT = "HDLight"
    HDRIP = "HDRip"
    VODRIP = "VODRip"
    WEBRIP = "WEBRip"
    WEBDL = "WEBDL"
    MINIHD = "MiniHD"
    BLURAY = "BluRay"
    UHDBLURAY = "UHDBluRay"
    REMUX = "Remux"
    NONE = ""

    @property
    def rank(self) -> int:
        """Position of the member in declaration order."""
        return _SOURCE_RANKS[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SourceToken):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SourceToken):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SourceToken):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SourceToken):
            return NotImplemented
        return self.rank >= other.rank

    def __str__(self) -> str:
        return self.value


_SOURCE_RANKS: dict[SourceToken, int] = {token: rank for rank, token in enumerate(SourceToken)}
