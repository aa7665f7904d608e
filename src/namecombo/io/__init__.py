"""Extension based registry for name record files.

Readers are registered for ``.yml``/``.yaml`` (PyYAML) and ``.json`` and return
the raw mapping stored in the file.  :func:`load_names` validates that mapping
into a :class:`~namecombo.names.record.Names` record; :func:`dump_names`
produces the mapping again with absent parts left out.

``UnsupportedFormatError`` is raised when reading a file whose extension has
no registered handler.  Documents the parser rejects raise ``IOFormatError``.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable

import yaml

from ..names.record import Names
from ..utils.errors import IOFormatError, UnsupportedFormatError

ReaderFunc = Callable[[str | os.PathLike[str]], Any]

_READERS: dict[str, Callable[..., Any]] = {}


def register_reader(ext: str, func: Callable[..., Any]) -> None:
    """Register a reader for files ending with ``ext``.

    Parameters
    ----------
    ext:
        File extension including the dot (e.g. ``".yml"``).  Matching is
        case-insensitive.
    func:
        Callable that reads a file and returns the decoded document.
    """

    _READERS[ext.lower()] = func


def get_extension(path: str | os.PathLike[str]) -> str:
    """Return the lower-cased file extension of ``path`` (including the dot).

    Returns an empty string when the path has no extension.
    """

    suffix = Path(path).suffix
    return suffix.lower() if suffix else ""


def read_file(path: str | os.PathLike[str], **kwargs: Any) -> Any:
    """Read ``path`` using the registered reader for its extension.

    Raises
    ------
    UnsupportedFormatError
        If no reader is registered for the file extension.
    """

    ext = get_extension(path)
    reader = _READERS.get(ext)
    if reader is None:
        raise UnsupportedFormatError(f"Unsupported file extension: '{ext}'") from None
    return reader(path, **kwargs)


def read_yaml(path: str | os.PathLike[str], *, encoding: str = "utf-8") -> Any:
    with Path(path).open("r", encoding=encoding) as fh:
        try:
            return yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            raise IOFormatError(f"{path}: malformed YAML document") from exc


def read_json(path: str | os.PathLike[str], *, encoding: str = "utf-8") -> Any:
    with Path(path).open("r", encoding=encoding) as fh:
        try:
            return json.load(fh)
        except json.JSONDecodeError as exc:
            raise IOFormatError(f"{path}: malformed JSON document: {exc.msg}") from exc


def load_names(path: str | os.PathLike[str], **kwargs: Any) -> Names:
    """Read a name record from ``path``.

    Raises
    ------
    UnsupportedFormatError
        If the extension has no reader.
    IOFormatError
        If the document cannot be parsed or is not a mapping.
    pydantic.ValidationError
        If the mapping does not describe a valid record.
    """

    data = read_file(path, **kwargs)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise IOFormatError(f"{path}: expected a mapping of name parts")
    return Names.model_validate(data)


def dump_names(names: Names) -> dict[str, Any]:
    """Return ``names`` as a plain mapping without absent parts."""

    data = names.model_dump(mode="json", exclude_none=True)
    if not data.get("forenames"):
        data.pop("forenames", None)
    return data


register_reader(".yml", read_yaml)
register_reader(".yaml", read_yaml)
register_reader(".json", read_json)

__all__ = [
    "ReaderFunc",
    "register_reader",
    "get_extension",
    "read_file",
    "read_yaml",
    "read_json",
    "load_names",
    "dump_names",
]
