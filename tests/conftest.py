"""Shared fixtures for translation tests."""

import pytest

import lingua
from lingua.settings import get_settings
from tests.factories import make_messages, write_language_file


@pytest.fixture(autouse=True)
def isolated_defaults(monkeypatch):
    """Keep the default store and cached settings from leaking between tests."""
    monkeypatch.delenv("LINGUA_LANGUAGE_DIR", raising=False)
    monkeypatch.delenv("LINGUA_DEFAULT_LANGUAGE", raising=False)
    get_settings.cache_clear()
    yield
    lingua.teardown()
    get_settings.cache_clear()


@pytest.fixture
def languages_dir(tmp_path):
    """Create a directory with English and German translations.

    Returns a directory containing:
    - en.json
    - de.json
    """
    directory = tmp_path / "languages"
    directory.mkdir()

    write_language_file(directory, "en", make_messages())
    write_language_file(
        directory,
        "de",
        {
            "welcome": "Hallo",
            "greeting": "Hallo, {{name}}!",
            "menu": {
                "file": {
                    "open": "Öffnen",
                    "save": "Speichern",
                },
                "edit": {
                    "copy": "Kopieren",
                },
            },
            "items_count": "{{count}} Einträge",
        },
    )
    return directory


@pytest.fixture
def empty_dir(tmp_path):
    """Create an empty language directory."""
    directory = tmp_path / "empty"
    directory.mkdir()
    return directory
