# tests/test_models.py
import pytest
from journal.models import Student
from journal.errors import DataValidationError, EmptyGradesError

def test_student_creation():
    s = Student("Тестов Тест", [4, 5])
    assert s.name == "Тестов Тест"
    assert s.grades == [4, 5]

def test_student_average():
    s = Student("С оценками", [5, 4, 5])
    assert s.average == pytest.approx(14 / 3)
    assert f"{s.average:.2f}" == "4.67"

    # Пустой список недостижим через конструктор, но average остаётся определённым
    s.grades = []
    assert s.average == 0.0

def test_student_status_marker():
    assert Student("Отличник", [5, 4, 5]).status_marker == "✓"
    assert Student("Ровно порог", [3]).passed
    assert Student("Двоечник", [2, 2, 1]).status_marker == "⚠"

def test_student_str_representation(capsys):
    s = Student("Анна Котова", [5, 4])
    print(s)
    captured = capsys.readouterr()
    assert captured.out.strip() == "✓ Анна Котова: оценки [5 4] (средний: 4.50)"

@pytest.mark.parametrize("grades", [[0], [6], [3, 7], [True], ["5"]])
def test_student_rejects_bad_grades(grades):
    with pytest.raises(DataValidationError):
        Student("Кто-то", grades)

def test_student_rejects_empty_grades():
    with pytest.raises(EmptyGradesError):
        Student("Кто-то", [])

@pytest.mark.parametrize("name", ["", "   "])
def test_student_rejects_empty_name(name):
    with pytest.raises(DataValidationError):
        Student(name, [5])
