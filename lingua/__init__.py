"""lingua - translation lookup from per-language resource files.

Loads one JSON or YAML file per language, resolves dotted keys such as
"menu.file.save" to strings, substitutes ``{{name}}`` placeholders and
tracks the current language.

Main components:
- models: ResourceTree, TextNode, BranchNode, TranslationKey
- loader: TranslationLoader and DirectoryTranslationLoader
- resolver: resolve() and has_key() over a single tree
- interpolation: substitute() for ``{{name}}`` placeholders
- store: LanguageStore, the thread-safe owner of languages and selection
- facade: Lingua builder and the process-wide default store
- config: load_lang_from_config() for configuration-driven selection
"""

from lingua.config import load_lang_from_config
from lingua.errors import (
    ConfigFileNotFoundError,
    ConfigValueNotFoundError,
    DirectoryNotFoundError,
    DuplicateLanguageError,
    ErrorKind,
    KeyNotFoundError,
    LanguageNotAvailableError,
    LinguaError,
    MalformedKeyError,
    NotInitializedError,
    ParseFailureError,
    ResolveError,
    TranslationNotFoundError,
)
from lingua.facade import (
    Lingua,
    LinguaBuilder,
    get_language,
    get_languages,
    get_store,
    init,
    set_language,
    t,
    teardown,
    translate,
)
from lingua.interpolation import substitute
from lingua.loader import DirectoryTranslationLoader, TranslationLoader
from lingua.models import BranchNode, ResourceTree, TextNode, TranslationKey
from lingua.resolver import resolve
from lingua.store import LanguageStore

__all__ = [
    # Facade
    "Lingua",
    "LinguaBuilder",
    "get_store",
    "init",
    "teardown",
    "translate",
    "t",
    "set_language",
    "get_languages",
    "get_language",
    "load_lang_from_config",
    # Core
    "LanguageStore",
    "TranslationLoader",
    "DirectoryTranslationLoader",
    "ResourceTree",
    "TextNode",
    "BranchNode",
    "TranslationKey",
    "resolve",
    "substitute",
    # Errors
    "ErrorKind",
    "LinguaError",
    "DirectoryNotFoundError",
    "ParseFailureError",
    "DuplicateLanguageError",
    "ResolveError",
    "MalformedKeyError",
    "KeyNotFoundError",
    "TranslationNotFoundError",
    "LanguageNotAvailableError",
    "NotInitializedError",
    "ConfigFileNotFoundError",
    "ConfigValueNotFoundError",
]
