import os
import sys

import pytest

# Ensure Python path includes project root for `import app`
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# Тестовое окружение: in-memory хранилище выбора
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SELECTIONS_STORE", "memory")

from app.core.selections import reset_selection_store  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_selection_store():
    """Каждый тест получает пустое in-memory хранилище."""
    reset_selection_store()
    yield
    reset_selection_store()
