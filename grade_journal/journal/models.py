# journal/models.py
"""Модуль, определяющий основную модель данных журнала: Student."""
from typing import Iterable, List

from . import config
from .errors import DataValidationError, EmptyGradesError

class Student:
    """Представляет студента с его ФИО и списком оценок."""
    def __init__(self, name: str, grades: Iterable[int]):
        if not isinstance(name, str) or not name.strip():
            raise DataValidationError("ФИО не может быть пустым!")

        # Оценки не фильтруются, а проверяются. Если хоть одна плохая - ошибка.
        checked: List[int] = []
        for grade in grades:
            if isinstance(grade, bool) or not isinstance(grade, int):
                raise DataValidationError(f"Оценка '{grade}' должна быть целым числом.")
            if grade < config.MIN_GRADE or grade > config.MAX_GRADE:
                raise DataValidationError(
                    f"Оценка {grade} недопустима! "
                    f"Допустимы оценки от {config.MIN_GRADE} до {config.MAX_GRADE}."
                )
            checked.append(grade)

        if not checked:
            raise EmptyGradesError("Необходимо ввести хотя бы одну оценку!")

        self.name = name
        self.grades = checked

    @property
    def average(self) -> float:
        """Средний балл студента. Возвращает 0.0, если оценок нет."""
        if not self.grades:
            return 0.0
        return sum(self.grades) / len(self.grades)

    @property
    def passed(self) -> bool:
        return self.average >= config.PASS_THRESHOLD

    @property
    def status_marker(self) -> str:
        return config.PASS_MARKER if self.passed else config.FAIL_MARKER

    def grades_display(self) -> str:
        return "[" + " ".join(map(str, self.grades)) + "]"

    def __repr__(self) -> str:
        """Возвращает строковое представление объекта для отладки."""
        return f"Student(name='{self.name}', grades={self.grades!r}, average={self.average:.2f})"

    def __str__(self) -> str:
        """Возвращает удобное для пользователя строковое представление объекта."""
        return f"{self.status_marker} {self.name}: оценки {self.grades_display()} (средний: {self.average:.2f})"
