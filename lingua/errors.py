"""Exceptions for the translation library.

Every failure is raised as a subclass of ``LinguaError`` carrying an
``ErrorKind`` and the context fields of the failure, so callers can branch
on the kind instead of the message text.
"""

from enum import Enum
from pathlib import Path
from typing import Optional, Union


class ErrorKind(str, Enum):
    """Machine-readable failure kinds."""

    DIRECTORY_NOT_FOUND = "directory_not_found"
    PARSE_FAILURE = "parse_failure"
    DUPLICATE_LANGUAGE = "duplicate_language"
    MALFORMED_KEY = "malformed_key"
    KEY_NOT_FOUND = "key_not_found"
    LANGUAGE_NOT_AVAILABLE = "language_not_available"
    NOT_INITIALIZED = "not_initialized"
    CONFIG_FILE_NOT_FOUND = "config_file_not_found"
    CONFIG_VALUE_NOT_FOUND = "config_value_not_found"


class LinguaError(Exception):
    """Base exception for all translation library errors.

    Example:
        try:
            store.translate("menu.file.save")
        except LinguaError as e:
            logger.error("translation_failed", kind=e.kind.value, error=str(e))
    """

    kind: ErrorKind


class DirectoryNotFoundError(LinguaError):
    """Raised when the language directory is missing or is not a directory."""

    kind = ErrorKind.DIRECTORY_NOT_FOUND

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)
        super().__init__(f"Language directory not found: {self.directory}")


class ParseFailureError(LinguaError):
    """Raised when a language or configuration file cannot be decoded.

    Example:
        >>> DirectoryTranslationLoader().load("languages")
        Traceback (most recent call last):
        ...
        ParseFailureError: Failed to parse languages/en.json: Expecting value
    """

    kind = ErrorKind.PARSE_FAILURE

    def __init__(self, file: Union[str, Path], cause: Union[Exception, str]):
        self.file = Path(file)
        self.cause = cause
        super().__init__(f"Failed to parse {self.file}: {cause}")


class DuplicateLanguageError(LinguaError):
    """Raised when two files in one directory map to the same language code."""

    kind = ErrorKind.DUPLICATE_LANGUAGE

    def __init__(self, code: str, files: Optional[list] = None):
        self.code = code
        self.files = list(files or [])
        super().__init__(f"Language '{code}' is defined by more than one file")


class ResolveError(LinguaError):
    """Base for failures to resolve a key inside a single resource tree."""

    def __init__(self, key: str, message: str):
        self.key = key
        super().__init__(message)


class MalformedKeyError(ResolveError):
    """Raised for an empty key or a key with an empty segment ("a..b", ".a")."""

    kind = ErrorKind.MALFORMED_KEY

    def __init__(self, key: str):
        super().__init__(key, f"Malformed translation key: '{key}'")


class KeyNotFoundError(ResolveError):
    """Raised when a key does not name a text leaf of the tree.

    Covers missing segments as well as keys that stop at a branch.
    """

    kind = ErrorKind.KEY_NOT_FOUND

    def __init__(self, key: str):
        super().__init__(key, f"Translation key '{key}' not found")


class TranslationNotFoundError(LinguaError):
    """Raised by a store when the current language cannot resolve a key.

    Attributes:
        key: The requested key.
        language: The language that was searched.
        reason: The underlying ``ResolveError``.
        kind: Kind of ``reason`` (KEY_NOT_FOUND or MALFORMED_KEY).
    """

    def __init__(self, key: str, language: str, reason: ResolveError):
        self.key = key
        self.language = language
        self.reason = reason
        self.kind = reason.kind
        super().__init__(f"No translation for '{key}' in '{language}': {reason}")


class LanguageNotAvailableError(LinguaError):
    """Raised when selecting a language that was not loaded."""

    kind = ErrorKind.LANGUAGE_NOT_AVAILABLE

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Language '{code}' is not available")


class NotInitializedError(LinguaError):
    """Raised when translating before a language has been selected."""

    kind = ErrorKind.NOT_INITIALIZED

    def __init__(self, message: str = "Lingua has not been initialized"):
        super().__init__(message)


class ConfigFileNotFoundError(LinguaError):
    """Raised when a configuration file does not exist."""

    kind = ErrorKind.CONFIG_FILE_NOT_FOUND

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"Config file not found: {self.path}")


class ConfigValueNotFoundError(LinguaError):
    """Raised when a configuration file has no string value for a key."""

    kind = ErrorKind.CONFIG_VALUE_NOT_FOUND

    def __init__(self, key: str, path: Union[str, Path]):
        self.key = key
        self.path = Path(path)
        super().__init__(f"Could not find value for key '{key}' in {self.path}")
