from pathlib import Path
from typing import Any


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


def compact_home_path(path: str | Path) -> str:
    text = str(path)
    home = str(Path.home())
    if text == home:
        return "~"
    home_prefix = f"{home}/"
    if text.startswith(home_prefix):
        return f"~/{text[len(home_prefix):]}"
    return text


def read_bytes(path: Path) -> bytes:
    with path.open("rb") as handle:
        return handle.read()
