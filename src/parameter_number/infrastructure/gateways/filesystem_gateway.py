"""Filesystem Gateway - Infrastructure implementation of FileSystemProtocol."""

from pathlib import Path

from parameter_number.domain.protocols import FileSystemProtocol


class FileSystemGateway(FileSystemProtocol):
    """Infrastructure implementation of FileSystemProtocol using pathlib."""

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def is_directory(self, path: str) -> bool:
        """Check if path is a directory."""
        return Path(path).is_dir()

    def glob_python_files(self, path: str) -> list[str]:
        """Python files under path, sorted (recursive if directory)."""
        path_obj = Path(path)
        if path_obj.is_dir():
            return sorted(str(p) for p in path_obj.glob("**/*.py") if p.is_file())
        return [str(path_obj)] if path_obj.suffix == ".py" else []
