from pathlib import Path


class SnapshotAppError(Exception):
    """Base user-facing application error."""


class SnapshotFileError(SnapshotAppError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class RootNotFoundError(SnapshotFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Directory not found")


class OutputOpenError(SnapshotFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Unable to open output file ({detail})")


class FileReadError(SnapshotFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Failed to read file ({detail})")


class InvalidYamlFormatError(SnapshotFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid YAML format ({detail})")


class InvalidConfigSchemaError(SnapshotFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config schema ({detail})")
