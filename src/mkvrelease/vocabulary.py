"""Language and source vocabulary mappers.

User hints are free text ("vostfr", "web-dl br"). Each whitespace separated
token is mapped through a fixed alias table; unknown tokens map to the NONE
variant and disappear from the output.
"""

from __future__ import annotations

from mkvrelease.models import LangToken, SourceToken

LANGUAGE_ALIASES: dict[str, LangToken] = {
    "multi": LangToken.MULTI,
    "vost": LangToken.VOSTFR,
    "vostfr": LangToken.VOSTFR,
    "vff": LangToken.VFF,
}

SOURCE_ALIASES: dict[str, SourceToken] = {
    "ppv": SourceToken.PPV,
    "ts": SourceToken.TS,
    "cam": SourceToken.CAM,
    "hdcam": SourceToken.HDCAM,
    "scr": SourceToken.SCR,
    "dvdscr": SourceToken.DVDSCR,
    "dvd": SourceToken.DVDSCR,
    "tvrip": SourceToken.TVRIP,
    "tv": SourceToken.TVRIP,
    "hdlight": SourceToken.HDLIGHT,
    "hdrip": SourceToken.HDRIP,
    "vodrip": SourceToken.VODRIP,
    "vod": SourceToken.VODRIP,
    "webrip": SourceToken.WEBRIP,
    "webdl": SourceToken.WEBDL,
    "web-dl": SourceToken.WEBDL,
    "web": SourceToken.WEBDL,
    "minihd": SourceToken.MINIHD,
    "microhd": SourceToken.MINIHD,
    "br": SourceToken.BLURAY,
    "brrip": SourceToken.BLURAY,
    "blu-ray": SourceToken.BLURAY,
    "bluray": SourceToken.BLURAY,
    "uhdbr": SourceToken.UHDBLURAY,
    "uhdblu-ray": SourceToken.UHDBLURAY,
    "uhdbluray": SourceToken.UHDBLURAY,
    "bruhd": SourceToken.UHDBLURAY,
    "blu-rayuhd": SourceToken.UHDBLURAY,
    "blurayuhd": SourceToken.UHDBLURAY,
    "remux": SourceToken.REMUX,
}


def map_language(token: str) -> LangToken:
    """Map one language hint, case-insensitively."""
    return LANGUAGE_ALIASES.get(token.strip().lower(), LangToken.NONE)


def map_source(token: str) -> SourceToken:
    """Map one source hint, case-insensitively."""
    return SOURCE_ALIASES.get(token.strip().lower(), SourceToken.NONE)


def map_languages(text: str) -> list[LangToken]:
    """Map a space separated language hint, keeping input order.

    Repeated hints are kept once, so "multi multi" gives a single MULTI.
    Unknown hints are dropped.
    """
    tokens = (map_language(token) for token in text.split())
    return list(dict.fromkeys(t for t in tokens if t is not LangToken.NONE))


def map_sources(text: str) -> list[SourceToken]:
    """Map a space separated source hint, sorted by source order.

    Repeated and unknown hints are dropped. The rank order is for callers
    comparing sources; release names use format_sources, which orders the
    labels by their text instead.
    """
    tokens = {map_source(token) for token in text.split()}
    tokens.discard(SourceToken.NONE)
    return sorted(tokens)


def format_languages(text: str) -> str:
    """Render a language hint as a release name segment."""
    return ".".join(token.value for token in map_languages(text))


def format_sources(text: str) -> str:
    """Render a source hint as a release name segment.

    Labels are joined in lexical order of their display text, so
    "webdl br" renders as "BluRay.WEBDL" however the hint was written.
    """
    return ".".join(sorted(token.value for token in map_sources(text)))
