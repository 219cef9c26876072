# tests/conftest.py
import pytest

from models import Person


@pytest.fixture
def numbers():
    """Unsorted integers used throughout the sort/filter examples."""
    return [5, 2, 7, 3, 1, 8, 6, 4]


@pytest.fixture
def people():
    """Records for the multi-key sort example, in their original order."""
    return [
        Person("Jackson", "Michael"),
        Person("Jackson", "Janet"),
        Person("Reeves", "Keanu"),
        Person("King", "Reverend"),
        Person("Austen", "Jane"),
    ]
