"""Tests for the release pipeline."""

import functools

import pytest

from conftest import track
from mkvrelease import mkvtoolnix
from mkvrelease.errors import (
    EpisodeNotFoundError,
    NotMatroskaError,
    NoVideoTrackError,
    ReleaseError,
    RemoteServiceError,
)
from mkvrelease.models import RemoteLink
from mkvrelease.pipeline import (
    ReleaseRequest,
    backup_link,
    ensure_matroska,
    generate_name,
    local_file_name,
    run_batch,
    upload_file,
)
from mkvrelease.title import ContentKind


@pytest.fixture
def tools(monkeypatch, hd_json):
    """Replace mkvtoolnix calls with in-memory fakes."""
    calls = {"identify": [], "set_title": []}

    def fake_identify(path):
        calls["identify"].append(path)
        return hd_json

    def fake_set_title(path, title, tag_suffix=True):
        calls["set_title"].append((path, title))
        return title

    monkeypatch.setattr(mkvtoolnix, "identify", fake_identify)
    monkeypatch.setattr(mkvtoolnix, "set_title", fake_set_title)
    return calls


@pytest.fixture
def film_request():
    return ReleaseRequest(kind=ContentKind.FILM, title="The Movie", languages="multi", sources="br")


@pytest.fixture
def show_request():
    return ReleaseRequest(kind=ContentKind.SHOW, title="The Show", languages="vostfr", sources="web")


def test_ensure_matroska():
    """Test only .mkv names are accepted."""
    ensure_matroska("movie.mkv")
    with pytest.raises(NotMatroskaError):
        ensure_matroska("movie.mp4")


class TestGenerateName:
    """Test name generation from a local file."""

    def test_film(self, tools, film_request):
        """Test a film name from container metadata."""
        name = generate_name("/data/movie.mkv", "movie.mkv", film_request)
        assert name == "The.Movie.MULTi.1080p.BluRay.EAC3.AC3.h264.mkv"
        assert tools["identify"] == ["/data/movie.mkv"]

    def test_show(self, tools, show_request):
        """Test the episode is read from the filename."""
        name = generate_name("/data/x.mkv", "the.show.S01E02.mkv", show_request)
        assert name == "The.Show.S01E02.VOSTFR.1080p.WEBDL.EAC3.AC3.h264.mkv"

    def test_show_without_episode(self, tools, show_request):
        """Test show naming fails before probing when no episode is found."""
        with pytest.raises(EpisodeNotFoundError):
            generate_name("/data/x.mkv", "the.show.mkv", show_request)
        assert tools["identify"] == []


class TestUploadFile:
    """Test the local upload flow."""

    def test_upload_and_move(self, tools, film_request, memory_store):
        """Test the file is retitled, uploaded, found and moved."""
        memory_store.add_file("The.Movie.MULTi.1080p.BluRay.EAC3.AC3.h264.mkv", "2020-01-01 00:00:00")

        result = upload_file(memory_store, "/data/movie.mkv", film_request, "//Films")

        assert result.name == "The.Movie.MULTi.1080p.BluRay.EAC3.AC3.h264.mkv"
        assert result.folder_id == 42
        assert tools["set_title"] == [("/data/movie.mkv", result.name)]
        assert memory_store.uploads == [("/data/movie.mkv", result.name)]
        # The fresh upload is newer than the old file with the same name
        assert memory_store.moves == [([result.code], 42)]
        assert result.code == memory_store.files[-1].code

    def test_not_matroska(self, tools, film_request, memory_store):
        """Test non-mkv files are rejected before any work."""
        with pytest.raises(NotMatroskaError):
            upload_file(memory_store, "/data/movie.avi", film_request, "//Films")
        assert tools["identify"] == []
        assert memory_store.uploads == []

    def test_missing_destination(self, tools, film_request, memory_store):
        """Test a missing destination folder aborts after upload without cleanup."""
        with pytest.raises(RemoteServiceError):
            upload_file(memory_store, "/data/movie.mkv", film_request, "//Missing")
        assert len(memory_store.uploads) == 1
        assert memory_store.moves == []


class TestBackupLink:
    """Test the backup flow."""

    def test_backup_show(self, tools, show_request, memory_store, tmp_path):
        """Test a shared file is downloaded, renamed and moved."""
        memory_store.links["abcdef123456"] = RemoteLink(code="abcdef123456", name="show.s01e03.mkv")

        result = backup_link(
            memory_store,
            "https://uptobox.com/abcdef123456",
            show_request,
            str(tmp_path / "downloads"),
            "//Films",
        )

        downloaded = tmp_path / "downloads" / "show.s01e03.mkv"
        assert downloaded.exists()
        assert result.name == "The.Show.s01e03.VOSTFR.1080p.WEBDL.EAC3.AC3.h264.mkv"
        assert memory_store.moves == [([result.code], 42)]

    def test_backup_show_checks_episode_first(self, tools, show_request, memory_store, tmp_path):
        """Test nothing is downloaded when the remote name has no episode."""
        memory_store.links["abcdef123456"] = RemoteLink(code="abcdef123456", name="show.mkv")

        with pytest.raises(EpisodeNotFoundError):
            backup_link(
                memory_store,
                "https://uptobox.com/abcdef123456",
                show_request,
                str(tmp_path),
                "//Films",
            )
        assert memory_store.downloads == []


class TestRunBatch:
    """Test batch processing."""

    def test_failure_does_not_stop_batch(self, tools, film_request, memory_store):
        """Test a failing file is reported and the next one still runs."""
        action = functools.partial(
            upload_file, memory_store, request=film_request, destination="//Films"
        )

        report = run_batch(["/data/bad.mp4", " /data/good.mkv "], action)

        assert not report.ok
        assert isinstance(report.failures["/data/bad.mp4"], NotMatroskaError)
        assert [r.folder_id for r in report.results] == [42]

    def test_classification_failure(self, monkeypatch, mkv_json, film_request, memory_store):
        """Test classification errors are collected per file."""
        monkeypatch.setattr(mkvtoolnix, "identify", lambda path: mkv_json(track("audio", "AAC")))
        action = functools.partial(
            upload_file, memory_store, request=film_request, destination="//Films"
        )

        report = run_batch(["/data/a.mkv"], action)

        assert isinstance(report.failures["/data/a.mkv"], NoVideoTrackError)
        assert memory_store.uploads == []


class TestLocalFileName:
    """Test remote names are kept inside the download directory."""

    @pytest.mark.parametrize("name", ["../x.mkv", "sub/x.mkv", "/tmp/x.mkv", "..\\x.mkv", ".."])
    def test_rejects_paths(self, name):
        """Test names with a path component are refused."""
        with pytest.raises(ReleaseError):
            local_file_name(name)

    def test_plain_name(self):
        """Test a bare file name is kept as is."""
        assert local_file_name("Show.S01E01.mkv") == "Show.S01E01.mkv"

    def test_backup_outside_local_dir(self, tools, film_request, memory_store, tmp_path):
        """Test nothing is written outside the local directory."""
        memory_store.links["abcdef123456"] = RemoteLink(code="abcdef123456", name="../x.mkv")
        local_dir = tmp_path / "dl"

        with pytest.raises(ReleaseError):
            backup_link(
                memory_store,
                "https://uptobox.com/abcdef123456",
                film_request,
                str(local_dir),
                "//Films",
            )
        assert memory_store.downloads == []
        assert not (tmp_path / "x.mkv").exists()
