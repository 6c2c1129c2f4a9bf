# tests/conftest.py
import pytest
from typing import List
from journal.models import Student
from journal.roster import Roster

@pytest.fixture
def sample_students() -> List[Student]:
    """Фикстура, предоставляющая тестовый набор студентов."""
    return [
        Student("Иванов Иван", [5, 4, 5]),
        Student("Петров Петр", [2, 2, 1]),
        Student("Сидорова Анна", [3, 4]),
    ]

@pytest.fixture
def roster(sample_students) -> Roster:
    """Журнал, заполненный студентами из sample_students."""
    r = Roster()
    for s in sample_students:
        r.add_student(s.name, s.grades)
    return r

@pytest.fixture
def feed_input(monkeypatch):
    """Подменяет builtins.input последовательностью строк.

    Когда строки заканчиваются, input ведёт себя как при конце ввода (EOF).
    """
    def _feed(lines):
        sequence = iter(lines)

        def mock_input(prompt=""):
            try:
                return next(sequence)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr('builtins.input', mock_input)

    return _feed
