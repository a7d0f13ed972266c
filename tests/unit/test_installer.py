"""Tests for copying the artifact into the install directory."""

import pytest

from binstall.builder import BuildArtifact
from binstall.exceptions import CopyFailure, DirectoryCreationFailure
from binstall.installer import InstallTarget, copy_artifact, ensure_directory, install_artifact


@pytest.fixture
def artifact(temp_dir):
    """A built artifact on disk."""
    path = temp_dir / "target" / "release" / "repman"
    path.parent.mkdir(parents=True)
    path.write_bytes(b"\x7fELF-new")
    return BuildArtifact(path=path)


class TestEnsureDirectory:
    """Tests for ensure_directory()."""

    def test_creates_missing_parents(self, temp_dir):
        target = temp_dir / "a" / "b" / "bin"
        ensure_directory(target)
        assert target.is_dir()

    def test_idempotent(self, temp_dir):
        target = temp_dir / "bin"
        ensure_directory(target)
        ensure_directory(target)
        assert target.is_dir()

    def test_path_blocked_by_file(self, temp_dir):
        """A regular file where the directory should be is a creation failure."""
        blocker = temp_dir / "bin"
        blocker.write_text("not a directory")

        with pytest.raises(DirectoryCreationFailure, match="Cannot create directory"):
            ensure_directory(blocker)


class TestCopyArtifact:
    """Tests for copy_artifact()."""

    def test_copies_bytes(self, temp_dir, artifact):
        target = InstallTarget(directory=temp_dir / "bin", filename="repman")
        target.directory.mkdir()

        assert copy_artifact(artifact, target) == temp_dir / "bin" / "repman"
        assert target.path.read_bytes() == b"\x7fELF-new"

    def test_overwrites_existing_file(self, temp_dir, artifact):
        target = InstallTarget(directory=temp_dir / "bin", filename="repman")
        target.directory.mkdir()
        target.path.write_bytes(b"old version with more bytes")

        copy_artifact(artifact, target)

        assert target.path.read_bytes() == b"\x7fELF-new"

    def test_missing_artifact(self, temp_dir):
        """A name mismatch between build output and resolved name surfaces here."""
        missing = BuildArtifact(path=temp_dir / "target" / "release" / "repman.exe")
        target = InstallTarget(directory=temp_dir, filename="repman.exe")

        with pytest.raises(CopyFailure, match="Build artifact not found"):
            copy_artifact(missing, target)
        assert not target.path.exists()

    def test_unwritable_destination(self, temp_dir, artifact):
        blocker = temp_dir / "bin"
        blocker.write_text("file, not a directory")
        target = InstallTarget(directory=blocker, filename="repman")

        with pytest.raises(CopyFailure, match="Cannot copy"):
            copy_artifact(artifact, target)


class TestInstallArtifact:
    """Tests for install_artifact()."""

    def test_creates_directory_and_copies(self, temp_dir, artifact):
        target = InstallTarget(directory=temp_dir / "home" / "bin", filename="repman")

        install_artifact(artifact, target)

        assert target.directory.is_dir()
        assert target.path.read_bytes() == artifact.path.read_bytes()
