"""Structured-text decoders keyed by file extension.

Shared by the language loader and the configuration helper so that both
read documents the same way.
"""

import json
import tomllib
from pathlib import Path
from typing import Any, Callable, Dict

import yaml

from lingua.errors import ParseFailureError

Decoder = Callable[[str], Any]


def decode_json(text: str) -> Any:
    return json.loads(text)


def decode_yaml(text: str) -> Any:
    return yaml.safe_load(text)


def decode_toml(text: str) -> Any:
    return tomllib.loads(text)


DECODERS: Dict[str, Decoder] = {
    ".json": decode_json,
    ".yaml": decode_yaml,
    ".yml": decode_yaml,
    ".toml": decode_toml,
}

# YAML also accepts JSON documents and plain "key: value" files
FALLBACK_DECODER: Decoder = decode_yaml


def decoder_for(path: Path, strict: bool = True) -> Decoder:
    """Return the decoder registered for a file's extension.

    Args:
        path: File path.
        strict: If False, unknown extensions get the fallback decoder.

    Raises:
        ValueError: If ``strict`` and the extension is not registered.
    """
    decoder = DECODERS.get(path.suffix.lower())
    if decoder is not None:
        return decoder
    if strict:
        raise ValueError(f"No decoder registered for '{path.suffix}'")
    return FALLBACK_DECODER


def decode_file(path: Path, strict: bool = True) -> Any:
    """Read and decode a document.

    Args:
        path: File to read.
        strict: Passed to ``decoder_for``.

    Returns:
        The decoded document.

    Raises:
        ParseFailureError: If the file cannot be read as UTF-8 or decoded.
    """
    decoder = decoder_for(path, strict=strict)
    try:
        text = path.read_text(encoding="utf-8-sig")
        return decoder(text)
    except (
        OSError,
        UnicodeDecodeError,
        json.JSONDecodeError,
        yaml.YAMLError,
        tomllib.TOMLDecodeError,
    ) as e:
        raise ParseFailureError(path, e) from e
