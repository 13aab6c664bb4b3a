"""Tests for the container metadata classifier."""

import pytest

from conftest import track
from mkvrelease.classifier import (
    classify,
    normalize_audio_codec,
    normalize_video_codec,
    parse_tracks,
)
from mkvrelease.errors import (
    MetadataParseError,
    NoAudioCodecError,
    NoVideoCodecError,
    NoVideoTrackError,
)
from mkvrelease.models import ContainerProfile, Dimension, TrackKind


class TestParseTracks:
    """Test parsing of mkvmerge -J output."""

    def test_parses_kinds_and_resolution(self, hd_json):
        """Test tracks keep their kind and video resolution."""
        tracks = parse_tracks(hd_json)

        assert [t.kind for t in tracks] == [
            TrackKind.VIDEO,
            TrackKind.AUDIO,
            TrackKind.AUDIO,
            TrackKind.SUBTITLES,
        ]
        assert tracks[0].resolution == Dimension.P1080
        assert tracks[1].resolution == Dimension.UNKNOWN

    def test_invalid_json(self):
        """Test malformed text raises MetadataParseError."""
        with pytest.raises(MetadataParseError):
            parse_tracks("not json at all")

    def test_missing_tracks(self):
        """Test JSON without a tracks list raises MetadataParseError."""
        with pytest.raises(MetadataParseError):
            parse_tracks('{"container": {}}')

    def test_unknown_track_kind(self, mkv_json):
        """Test an unknown track type raises MetadataParseError."""
        with pytest.raises(MetadataParseError):
            parse_tracks(mkv_json(track("buttons", "VobButtons")))

    def test_tracks_are_immutable(self, hd_json):
        """Test parsed tracks cannot be modified."""
        tracks = parse_tracks(hd_json)
        with pytest.raises(Exception):
            tracks[0].codec = "other"


class TestNormalization:
    """Test codec normalization rules."""

    def test_audio_vendor_spellings(self):
        """Test E-AC-3 and AC-3 are rewritten."""
        assert normalize_audio_codec("E-AC-3") == "EAC3"
        assert normalize_audio_codec("AC-3") == "AC3"

    def test_audio_passthrough(self):
        """Test other audio codecs are unchanged."""
        assert normalize_audio_codec("DTS-HD Master Audio") == "DTS-HD Master Audio"
        assert normalize_audio_codec("AAC") == "AAC"

    @pytest.mark.parametrize(
        "piece,label",
        [
            ("AVC", "h264"),
            ("H.264", "h264"),
            ("HEVC", "h265"),
            ("h.265 / something", "h265"),
            ("x264", "x264"),
            ("x.265", "x265"),
            ("VP9", "VP9"),
            ("AV1", "AV1"),
        ],
    )
    def test_video_prefix_rules(self, piece, label):
        """Test video pieces map by prefix."""
        assert normalize_video_codec(piece) == label

    def test_video_unmatched_piece(self):
        """Test unmatched pieces map to None."""
        assert normalize_video_codec("MPEG-4p10") is None
        assert normalize_video_codec("MPEG-H") is None


class TestClassify:
    """Test full classification."""

    def test_typical_release(self, hd_json):
        """Test a typical release classifies fully."""
        profile = classify(hd_json)

        assert profile == ContainerProfile(
            audio_codecs=("EAC3", "AC3"),
            video_codecs=("h264",),
            resolution=Dimension.P1080,
        )

    def test_audio_dedup_preserves_order(self, mkv_json):
        """Test repeated audio aliases appear once, in first-seen order."""
        raw = mkv_json(
            track("video", "HEVC/H.265/MPEG-H", "3840x2160"),
            track("audio", "AC-3"),
            track("audio", "DTS"),
            track("audio", "AC-3"),
            track("audio", "DTS"),
        )
        profile = classify(raw)

        assert profile.audio_codecs == ("AC3", "DTS")
        assert profile.video_codecs == ("h265",)
        assert profile.resolution == Dimension.P2160

    def test_video_pieces_split_and_dedup(self, mkv_json):
        """Test a multi-name codec field yields each family once."""
        raw = mkv_json(
            track("video", "AVC/H.264/MPEG-4p10", "1280x720"),
            track("audio", "AAC"),
        )
        assert classify(raw).video_codecs == ("h264",)

    def test_subtitles_ignored(self, mkv_json):
        """Test subtitle tracks never reach the profile."""
        raw = mkv_json(
            track("subtitles", "HEVC"),
            track("video", "VP9", "1920x800"),
            track("audio", "Opus"),
        )
        profile = classify(raw)

        assert profile.audio_codecs == ("Opus",)
        assert profile.video_codecs == ("VP9",)

    def test_resolution_from_first_video_track(self, mkv_json):
        """Test only the first video track sets the resolution."""
        raw = mkv_json(
            track("video", "AVC", "1280x720"),
            track("video", "HEVC", "3840x2160"),
            track("audio", "AAC"),
        )
        profile = classify(raw)

        assert profile.resolution == Dimension.P720
        assert profile.video_codecs == ("h264", "h265")

    def test_missing_dimensions(self, mkv_json):
        """Test a video track without dimensions gives UNKNOWN."""
        raw = mkv_json(track("video", "AV1"), track("audio", "Opus"))
        assert classify(raw).resolution == Dimension.UNKNOWN

    def test_no_video_track(self, mkv_json):
        """Test audio-only containers raise NoVideoTrackError."""
        with pytest.raises(NoVideoTrackError):
            classify(mkv_json(track("audio", "FLAC")))

    def test_no_audio_codec(self, mkv_json):
        """Test containers without audio raise NoAudioCodecError."""
        with pytest.raises(NoAudioCodecError):
            classify(mkv_json(track("video", "AVC", "1920x1080")))

    def test_no_recognized_video_codec(self, mkv_json):
        """Test unrecognized video codecs raise NoVideoCodecError."""
        raw = mkv_json(track("video", "MPEG-1/2", "720x576"), track("audio", "MP2"))
        with pytest.raises(NoVideoCodecError):
            classify(raw)
