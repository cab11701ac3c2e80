"""Public entry points.

Two ways to use the library:

    # Independent store, built explicitly
    store = Lingua.new("languages").init()
    store.translate("welcome")

    # Process-wide default store
    import lingua
    lingua.init("languages")
    lingua.translate("greeting", [("name", "World")])
    lingua.teardown()
"""

import threading
from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Union

from lingua.config import load_lang_from_config
from lingua.interpolation import Params
from lingua.loader import TranslationLoader
from lingua.logging import get_module_logger
from lingua.resolver import KeyLike
from lingua.store import LanguageStore

logger = get_module_logger()

_store_lock = threading.RLock()


class LinguaBuilder:
    """Collects options for a new LanguageStore."""

    def __init__(self, language_dir: Union[str, Path]):
        self.language_dir = Path(language_dir)
        self._default_language: Optional[str] = None
        self._loader: Optional[TranslationLoader] = None

    def default_language(self, code: str) -> "LinguaBuilder":
        """Prefer ``code`` as the initial language when it is loaded."""
        self._default_language = code
        return self

    def loader(self, loader: TranslationLoader) -> "LinguaBuilder":
        self._loader = loader
        return self

    def build(self) -> LanguageStore:
        """Create the store without loading anything."""
        return LanguageStore(
            directory=self.language_dir,
            loader=self._loader,
            default_language=self._default_language,
        )

    def init(self) -> LanguageStore:
        """Create the store and load its languages.

        Raises:
            LinguaError: If loading fails.
        """
        return self.build().init()


class Lingua:
    """Namespace for building stores and reading configured languages."""

    @staticmethod
    def new(language_dir: Union[str, Path]) -> LinguaBuilder:
        return LinguaBuilder(language_dir)

    load_lang_from_config = staticmethod(load_lang_from_config)


@lru_cache
def _default_store() -> LanguageStore:
    return LanguageStore()


def get_store() -> LanguageStore:
    """Get the process-wide default store.

    Created on first use and uninitialized until ``init`` is called.

    Returns:
        LanguageStore: Cached store instance.
    """
    with _store_lock:
        return _default_store()


def init(
    directory: Union[str, Path, None] = None,
    default_language: Optional[str] = None,
) -> LanguageStore:
    """Initialize (or fully re-initialize) the default store.

    Args:
        directory: Language directory (default: settings.LANGUAGE_DIR).
        default_language: Preferred initial language
            (default: settings.DEFAULT_LANGUAGE).

    Returns:
        The default store.
    """
    store = get_store()
    # Loading happens outside _store_lock; the store swaps its state atomically
    return store.init(directory, default_language=default_language)


def teardown() -> None:
    """Reset the default store and drop it; the next use creates a new one."""
    with _store_lock:
        get_store().reset()
        _default_store.cache_clear()
    logger.info("default_store_torn_down")


def translate(key: KeyLike, params: Params = ()) -> str:
    """Translate with the default store (see ``LanguageStore.translate``)."""
    return get_store().translate(key, params)


def t(key: KeyLike, params: Params = ()) -> str:
    """Shorthand for ``translate``."""
    return get_store().translate(key, params)


def set_language(code: str) -> bool:
    return get_store().set_language(code)


def get_languages() -> List[str]:
    """Loaded codes in sorted file-name order."""
    return get_store().get_languages()


def get_language() -> str:
    return get_store().get_language()
