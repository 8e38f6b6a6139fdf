"""
Pytest configuration: ensure project root is on sys.path for imports.

The tests import the local `wordforms` package directly. When running tests
from certain IDEs or subdirectories, the repository root might not be on the
Python module search path. This hook prepends the repo root so imports work
consistently (e.g., `from wordforms.inflector import ...`).
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _add_repo_root_to_sys_path() -> None:
    # tests/ -> repo root
    root = Path(__file__).resolve().parents[1]
    root_str = str(root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)


_add_repo_root_to_sys_path()


@pytest.fixture(scope="session")
def inflector():
    from wordforms.inflector import Inflector

    return Inflector()


@pytest.fixture(scope="session")
def lemmatizer(inflector):
    from wordforms.lemmatizer import Lemmatizer
    from wordforms.storage import load_default_lexicon

    return Lemmatizer(load_default_lexicon(), inflector)


@pytest.fixture(scope="session")
def expander(inflector, lemmatizer):
    from wordforms.expander import AlternatesExpander

    return AlternatesExpander(inflector, lemmatizer)
