"""Read a language code from an application configuration file."""

from pathlib import Path
from typing import Any, Union

from lingua.decoders import decode_file
from lingua.errors import (
    ConfigFileNotFoundError,
    ConfigValueNotFoundError,
    MalformedKeyError,
)
from lingua.logging import get_module_logger
from lingua.models import TranslationKey

logger = get_module_logger()


def _lookup(document: Any, key: str) -> Any:
    # Exact top-level match first so keys containing dots still work
    if isinstance(document, dict) and key in document:
        return document[key]

    node = document
    for segment in TranslationKey.from_string(key).segments:
        if not isinstance(node, dict) or segment not in node:
            return None
        node = node[segment]
    return node


def load_lang_from_config(path: Union[str, Path], key: str) -> str:
    """Load a language code from a configuration file.

    The file is decoded with the decoder for its extension (JSON, YAML or
    TOML); unknown extensions are read as YAML, which also covers JSON and
    simple ``key: value`` files. ``key`` may be dotted to reach nested values.

    The returned code is not checked against loaded languages; pass it to
    ``set_language`` to select it.

    Args:
        path: Configuration file.
        key: Field holding the language code (e.g. "language", "ui.lang").

    Returns:
        The language code, stripped of surrounding whitespace.

    Raises:
        ConfigFileNotFoundError: If ``path`` is not an existing file.
        ParseFailureError: If the file cannot be decoded.
        ConfigValueNotFoundError: If the key is missing, malformed, or its
            value is not a non-empty string.

    Example:
        code = load_lang_from_config("config.yaml", "language")
        store.set_language(code)
    """
    config_path = Path(path)
    if not config_path.is_file():
        logger.warning("config_file_not_found", path=str(config_path))
        raise ConfigFileNotFoundError(config_path)

    document = decode_file(config_path, strict=False)

    try:
        value = _lookup(document, key)
    except MalformedKeyError:
        value = None

    if not isinstance(value, str) or not value.strip():
        logger.warning("config_value_not_found", path=str(config_path), key=key)
        raise ConfigValueNotFoundError(key, config_path)

    code = value.strip()
    logger.info("loaded_language_from_config", path=str(config_path), key=key, code=code)
    return code
