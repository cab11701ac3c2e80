"""Translation loading interface and implementations.

Defines the contract for loading translations and provides a loader that
reads one file per language from a directory.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from lingua.decoders import DECODERS, decode_file
from lingua.errors import (
    DirectoryNotFoundError,
    DuplicateLanguageError,
    ParseFailureError,
)
from lingua.logging import get_module_logger
from lingua.models import ResourceTree

logger = get_module_logger()


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations decide where translations come from; the store only
    needs the resulting mapping of language code to tree.
    """

    @abstractmethod
    def load(self, directory: Union[str, Path]) -> Dict[str, ResourceTree]:
        """Load every language found in ``directory``.

        Args:
            directory: Location of the language files.

        Returns:
            Dict mapping language code to ResourceTree, in load order.

        Raises:
            LinguaError: If loading fails. No partial result is returned.
        """
        pass


class DirectoryTranslationLoader(TranslationLoader):
    """Loader for ``<code>.<ext>`` files in a single directory.

    Files are read in sorted file-name order, and the language code is the
    file name without its extension. Sub-directories and files with
    unrecognized extensions are ignored.

    Attributes:
        extensions: Lower-case suffixes (with dot) this loader reads.
    """

    def __init__(self, extensions: Optional[Iterable[str]] = None):
        """Initialize the loader.

        Args:
            extensions: Suffixes to read (default: every registered decoder).

        Raises:
            ValueError: If an extension has no registered decoder.
        """
        selected = list(extensions) if extensions is not None else list(DECODERS)
        normalized = []
        for extension in selected:
            extension = extension.lower()
            if not extension.startswith("."):
                extension = f".{extension}"
            if extension not in DECODERS:
                raise ValueError(f"No decoder registered for '{extension}'")
            normalized.append(extension)
        self.extensions = tuple(normalized)

    def discover(self, directory: Union[str, Path]) -> List[Path]:
        """List language files in ``directory`` in load order.

        Raises:
            DirectoryNotFoundError: If ``directory`` is missing or not a directory.
        """
        path = Path(directory)
        if not path.is_dir():
            logger.error("language_directory_not_found", directory=str(path))
            raise DirectoryNotFoundError(path)

        return sorted(
            (
                entry
                for entry in path.iterdir()
                if entry.is_file() and entry.suffix.lower() in self.extensions
            ),
            key=lambda entry: entry.name,
        )

    def load(self, directory: Union[str, Path]) -> Dict[str, ResourceTree]:
        """Decode every language file in ``directory``.

        One bad file aborts the whole load.

        Raises:
            DirectoryNotFoundError: If ``directory`` is missing or not a directory.
            ParseFailureError: If a file cannot be decoded or its root is
                not a mapping.
            DuplicateLanguageError: If two files share a language code.
        """
        files = self.discover(directory)
        trees: Dict[str, ResourceTree] = {}
        sources: Dict[str, Path] = {}

        for file in files:
            code = file.stem
            if code in trees:
                logger.error(
                    "duplicate_language",
                    code=code,
                    files=[str(sources[code]), str(file)],
                )
                raise DuplicateLanguageError(code, [sources[code], file])

            try:
                data = decode_file(file)
                tree = ResourceTree.from_data(code, data, source=file)
            except ParseFailureError as e:
                logger.error("language_parse_error", file=str(file), error=str(e.cause))
                raise
            except ValueError as e:
                logger.error("language_parse_error", file=str(file), error=str(e))
                raise ParseFailureError(file, e) from e

            trees[code] = tree
            sources[code] = file
            logger.info("loaded_language", code=code, file=str(file))

        logger.info(
            "loaded_languages",
            directory=str(directory),
            languages=list(trees),
        )
        return trees
