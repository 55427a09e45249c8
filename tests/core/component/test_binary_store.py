"""Tests for binary download and removal."""

import os
from pathlib import Path

import httpx
import pytest

from dingocli.core.component.binary_store import FakeBinaryStore, RealBinaryStore
from dingocli.core.component.errors import FetchError
from tests.test_utils.catalogs import MIRROR

URL = f"{MIRROR}/dingo-mds/tags/v1.0.0"


def _store(handler) -> RealBinaryStore:
    return RealBinaryStore(timeout=1.0, transport=httpx.MockTransport(handler))


def test_download_writes_executable(tmp_path: Path) -> None:
    """Test that a downloaded binary is written and marked executable."""
    destination = tmp_path / "dingo-mds" / "v1.0.0" / "dingo-mds"
    store = _store(lambda request: httpx.Response(200, content=b"\x7fELF binary"))

    store.download(URL, destination)

    assert destination.read_bytes() == b"\x7fELF binary"
    assert os.access(destination, os.X_OK)
    assert not destination.with_name("dingo-mds.part").exists()


def test_download_overwrites_existing(tmp_path: Path) -> None:
    """Test that a download replaces an existing binary."""
    destination = tmp_path / "dingo-mds"
    destination.write_bytes(b"old")
    store = _store(lambda request: httpx.Response(200, content=b"new"))

    store.download(URL, destination)

    assert destination.read_bytes() == b"new"


def test_download_failure_leaves_nothing(tmp_path: Path) -> None:
    """Test that a failed download leaves no partial file."""
    destination = tmp_path / "v1.0.0" / "dingo-mds"
    store = _store(lambda request: httpx.Response(404))

    with pytest.raises(FetchError) as exc_info:
        store.download(URL, destination)

    assert exc_info.value.status_code == 404
    assert list(destination.parent.iterdir()) == []


def test_download_transport_error(tmp_path: Path) -> None:
    """Test that a timeout becomes FetchError and cleans up."""
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(FetchError, match="timed out"):
        _store(handler).download(URL, tmp_path / "dingo-mds")

    assert not (tmp_path / "dingo-mds.part").exists()


def test_remove_file_drops_empty_version_dir(tmp_path: Path) -> None:
    """Test that removing the last file drops its version directory."""
    version_dir = tmp_path / "dingo-mds" / "v1.0.0"
    version_dir.mkdir(parents=True)
    binary = version_dir / "dingo-mds"
    binary.write_bytes(b"bin")

    RealBinaryStore().remove(binary)

    assert not version_dir.exists()
    assert (tmp_path / "dingo-mds").exists()


def test_remove_keeps_non_empty_dir(tmp_path: Path) -> None:
    """Test that a directory with other files is kept."""
    binary = tmp_path / "dingo-mds"
    binary.write_bytes(b"bin")
    (tmp_path / "notes.txt").write_text("keep", encoding="utf-8")

    RealBinaryStore().remove(binary)

    assert not binary.exists()
    assert (tmp_path / "notes.txt").exists()


def test_remove_directory(tmp_path: Path) -> None:
    """Test that a directory target is removed recursively."""
    target = tmp_path / "v1.0.0" / "bundle"
    target.mkdir(parents=True)
    (target / "lib.so").write_bytes(b"so")

    RealBinaryStore().remove(target)

    assert not target.exists()


def test_remove_missing_is_noop(tmp_path: Path) -> None:
    """Test that removing a missing path does nothing."""
    RealBinaryStore().remove(tmp_path / "nonexistent")

    assert tmp_path.exists()


def test_fake_store_records_calls() -> None:
    """Test that the fake records downloads and removals."""
    store = FakeBinaryStore()

    store.download(URL, Path("/test/dingo-mds"))
    store.remove(Path("/test/dingo-mds"))

    assert store.downloads == [(URL, Path("/test/dingo-mds"))]
    assert store.removed_paths == [Path("/test/dingo-mds")]


def test_fake_store_failing_url() -> None:
    """Test that the fake fails configured URLs without recording them."""
    store = FakeBinaryStore(failing_urls={URL})

    with pytest.raises(FetchError):
        store.download(URL, Path("/test/dingo-mds"))

    assert store.downloads == []
