"""Language store: loaded languages plus the current selection.

The loaded trees and the current language code are kept together in one
immutable snapshot. Writers build a new snapshot and swap it in under a
lock; readers take the snapshot once and work on it, so a reader never
sees a current language without its tree.
"""

import threading
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import List, Mapping, Optional, Union

from lingua import interpolation, resolver
from lingua.errors import (
    LanguageNotAvailableError,
    NotInitializedError,
    ResolveError,
    TranslationNotFoundError,
)
from lingua.interpolation import Params
from lingua.loader import DirectoryTranslationLoader, TranslationLoader
from lingua.logging import get_module_logger
from lingua.models import ResourceTree
from lingua.resolver import KeyLike
from lingua.settings import get_settings

logger = get_module_logger()


@dataclass(frozen=True)
class StoreState:
    """Consistent view of a store.

    Attributes:
        languages: Read-only mapping of language code to tree, in load order.
        current: Selected language code, or None when nothing is selected.
        directory: Directory the languages were loaded from.
        initialized: Whether ``init`` has completed.
    """

    languages: Mapping[str, ResourceTree] = field(
        default_factory=lambda: MappingProxyType({})
    )
    current: Optional[str] = None
    directory: Optional[Path] = None
    initialized: bool = False


EMPTY_STATE = StoreState()


def choose_initial_language(
    codes: List[str], preferred: Optional[str]
) -> Optional[str]:
    """Pick the language selected right after loading.

    The preferred code wins when it was loaded; otherwise the first code in
    load order is used. Returns None when nothing was loaded.
    """
    if preferred and preferred in codes:
        return preferred
    return codes[0] if codes else None


class LanguageStore:
    """Owner of all loaded resource trees and the current language.

    Safe to share between threads. ``init`` may be called again: the new
    languages fully replace the old ones, and a failed load keeps the old
    state.

    Usage:
        store = LanguageStore()
        store.init("languages")
        store.translate("greeting", [("name", "World")])
    """

    def __init__(
        self,
        directory: Union[str, Path, None] = None,
        loader: Optional[TranslationLoader] = None,
        default_language: Optional[str] = None,
    ):
        """Initialize an empty store.

        Args:
            directory: Language directory used by ``init`` when called without
                one (default: settings.LANGUAGE_DIR).
            loader: Loader to use (default: DirectoryTranslationLoader).
            default_language: Preferred initial language
                (default: settings.DEFAULT_LANGUAGE).
        """
        self.directory = Path(directory) if directory is not None else None
        self.loader = loader or DirectoryTranslationLoader()
        self.default_language = default_language
        self._lock = threading.RLock()
        self._state = EMPTY_STATE

    def _snapshot(self) -> StoreState:
        with self._lock:
            return self._state

    def init(
        self,
        directory: Union[str, Path, None] = None,
        default_language: Optional[str] = None,
    ) -> "LanguageStore":
        """Load all languages from a directory and select the initial one.

        Args:
            directory: Language directory. Falls back to the directory given at
                construction, then to settings.LANGUAGE_DIR.
            default_language: Preferred initial language. Falls back to the
                value given at construction, then to settings.DEFAULT_LANGUAGE.

        Returns:
            The store itself.

        Raises:
            DirectoryNotFoundError, ParseFailureError, DuplicateLanguageError:
                Propagated from the loader; the previous state is kept.
        """
        settings = get_settings()
        if directory is not None:
            target = Path(directory)
        elif self.directory is not None:
            target = self.directory
        else:
            target = Path(settings.LANGUAGE_DIR)
        preferred = default_language or self.default_language or settings.DEFAULT_LANGUAGE

        languages = self.loader.load(target)
        codes = list(languages)
        current = choose_initial_language(codes, preferred)

        new_state = StoreState(
            languages=MappingProxyType(dict(languages)),
            current=current,
            directory=target,
            initialized=True,
        )
        with self._lock:
            replaced = self._state.initialized
            self._state = new_state

        if current is None:
            logger.warning("no_languages_loaded", directory=str(target))
        logger.info(
            "store_initialized",
            directory=str(target),
            languages=codes,
            current=current,
            replaced=replaced,
        )
        return self

    def reset(self) -> None:
        """Drop all languages and return to the uninitialized state."""
        with self._lock:
            self._state = EMPTY_STATE
        logger.info("store_reset")

    @property
    def is_initialized(self) -> bool:
        return self._snapshot().initialized

    def translate(self, key: KeyLike, params: Params = ()) -> str:
        """Translate a key in the current language.

        Args:
            key: Dotted translation key.
            params: ``(name, value)`` pairs (or a mapping) for ``{{name}}``
                placeholders.

        Returns:
            Translated string with placeholders substituted.

        Raises:
            NotInitializedError: If no language is selected.
            TranslationNotFoundError: If the key is malformed or does not name
                a text leaf; ``reason`` holds the resolver error.
        """
        state = self._snapshot()
        if state.current is None:
            raise NotInitializedError()

        tree = state.languages[state.current]
        try:
            template = resolver.resolve(tree, key)
        except ResolveError as e:
            logger.warning(
                "translation_not_found",
                key=str(key),
                language=state.current,
                reason=e.kind.value,
            )
            raise TranslationNotFoundError(str(key), state.current, e) from e

        return interpolation.substitute(template, params)

    def t(self, key: KeyLike, params: Params = ()) -> str:
        """Shorthand for ``translate``."""
        return self.translate(key, params)

    def set_language(self, code: str) -> bool:
        """Select the current language.

        Returns:
            True once the language is selected.

        Raises:
            LanguageNotAvailableError: If ``code`` was not loaded. The current
                language is left unchanged.
        """
        with self._lock:
            state = self._state
            if code not in state.languages:
                logger.warning(
                    "language_not_available",
                    code=code,
                    available=list(state.languages),
                )
                raise LanguageNotAvailableError(code)
            previous = state.current
            self._state = StoreState(
                languages=state.languages,
                current=code,
                directory=state.directory,
                initialized=state.initialized,
            )
        logger.info("language_changed", previous=previous, current=code)
        return True

    def get_languages(self) -> List[str]:
        """Return loaded language codes in load order.

        Load order is sorted file-name order, not directory listing order,
        so a directory holding ``en.json`` and ``de.json`` gives
        ``["de", "en"]``.
        """
        return list(self._snapshot().languages)

    def get_language(self) -> str:
        """Return the current language code.

        Raises:
            NotInitializedError: If no language is selected.
        """
        current = self._snapshot().current
        if current is None:
            raise NotInitializedError()
        return current

    def has_language(self, code: str) -> bool:
        return code in self._snapshot().languages

    def get_tree(self, code: str) -> ResourceTree:
        """Return the resource tree of a loaded language.

        Raises:
            LanguageNotAvailableError: If ``code`` was not loaded.
        """
        tree = self._snapshot().languages.get(code)
        if tree is None:
            raise LanguageNotAvailableError(code)
        return tree
