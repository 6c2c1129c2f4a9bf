# journal/roster.py
"""Модуль для обработки данных журнала: добавление, удаление, фильтрация, статистика."""
import logging
from typing import Any, Dict, Iterable, List, Optional

from . import config
from .models import Student
from .errors import DuplicateStudentError, StudentNotFoundError

logger = logging.getLogger(__name__)


def sort_by_average(students: Iterable[Student]) -> List[Student]:
    """Сортирует студентов по убыванию среднего балла, затем по ФИО для стабильности."""
    return sorted(students, key=lambda s: (-s.average, s.name))


def histogram_percentage(count: int, total_students: int) -> float:
    """Примерная доля оценки: count / (студентов * 5) * 100.

    Это не точная доля среди всех поставленных оценок, знаменатель
    предполагает ровно ASSUMED_GRADES_PER_STUDENT оценок у каждого студента.
    """
    if total_students <= 0:
        return 0.0
    return count / (total_students * config.ASSUMED_GRADES_PER_STUDENT) * 100


class Roster:
    """Журнал: отображение ФИО -> Student."""

    def __init__(self):
        self._students: Dict[str, Student] = {}

    def __len__(self) -> int:
        return len(self._students)

    def __contains__(self, name: str) -> bool:
        return name in self._students

    def get(self, name: str) -> Optional[Student]:
        return self._students.get(name)

    def get_or_raise(self, name: str) -> Student:
        student = self._students.get(name)
        if student is None:
            raise StudentNotFoundError(f"Студент '{name}' не найден")
        return student

    def add_student(self, name: str, grades: Iterable[int]) -> Student:
        """Добавляет нового студента, проверяя уникальность ФИО.

        Если ФИО занято или оценки некорректны, журнал не меняется.
        """
        if name in self._students:
            logger.info("Rejected duplicate student %r", name)
            raise DuplicateStudentError(f"Студент '{name}' уже существует!")

        # Здесь вызовется __init__ класса Student и проверит оценки
        new_student = Student(name, list(grades))
        self._students[name] = new_student
        logger.info("Added student %r with %d grades", name, len(new_student.grades))
        return new_student

    def remove_student(self, name: str) -> bool:
        """Удаляет студента по ФИО. Возвращает False, если такого нет."""
        if name not in self._students:
            logger.info("Student %r not found for removal", name)
            return False
        del self._students[name]
        logger.info("Removed student %r", name)
        return True

    def list_all(self) -> List[Student]:
        return sort_by_average(self._students.values())

    def list_by_threshold(self, threshold: float, below: bool) -> List[Student]:
        """Студенты со средним < threshold (below=True) или >= threshold (below=False)."""
        if below:
            selected = [s for s in self._students.values() if s.average < threshold]
        else:
            selected = [s for s in self._students.values() if s.average >= threshold]
        return sort_by_average(selected)

    def statistics(self) -> Optional[Dict[str, Any]]:
        """Рассчитывает статистику по группе. None, если журнал пуст."""
        if not self._students:
            return None

        total_students = len(self._students)
        total_average = 0.0
        # Начальные значения экстремумов: min от максимальной оценки, max от нуля
        min_average = float(config.MAX_GRADE)
        max_average = 0.0
        histogram = {grade: 0 for grade in range(config.MIN_GRADE, config.MAX_GRADE + 1)}

        for student in self._students.values():
            avg = student.average
            total_average += avg
            if avg < min_average:
                min_average = avg
            if avg > max_average:
                max_average = avg
            for grade in student.grades:
                histogram[grade] += 1

        return {
            "count": total_students,
            "group_average": total_average / total_students,
            "max_average": max_average,
            "min_average": min_average,
            "grade_histogram": histogram,
        }
