# journal/input_utils.py
"""Модуль для разбора пользовательского ввода: ФИО, оценки, пороговый балл."""
import math
import re
from typing import List

from . import config
from .errors import DataValidationError, EmptyGradesError, InvalidThresholdError

_INT_TOKEN = re.compile(r"[+-]?[0-9]+")


def parse_name(raw: str) -> str:
    """Обрезает пробелы вокруг ФИО и проверяет, что оно не пустое."""
    name = raw.strip()
    if not name:
        raise DataValidationError("ФИО не может быть пустым!")
    return name


def parse_grades(raw: str) -> List[int]:
    """Разбирает оценки, разделённые пробелами.

    На первой некорректной оценке весь ввод отклоняется, частичный
    список не возвращается.
    """
    grades = []
    for token in raw.split():
        if not _INT_TOKEN.fullmatch(token):
            raise DataValidationError(_bad_grade_message(token))
        grade = int(token)
        if grade < config.MIN_GRADE or grade > config.MAX_GRADE:
            raise DataValidationError(_bad_grade_message(token))
        grades.append(grade)

    if not grades:
        raise EmptyGradesError("Необходимо ввести хотя бы одну оценку!")
    return grades


def parse_threshold(raw: str) -> float:
    """Разбирает пороговый средний балл: число от MIN_GRADE до MAX_GRADE."""
    message = f"Введите число от {config.MIN_GRADE} до {config.MAX_GRADE}!"
    try:
        threshold = float(raw.strip())
    except ValueError:
        raise InvalidThresholdError(message)

    if not math.isfinite(threshold) or threshold < config.MIN_GRADE or threshold > config.MAX_GRADE:
        raise InvalidThresholdError(message)
    return threshold


def _bad_grade_message(token: str) -> str:
    return (
        f"Оценка '{token}' недопустима! "
        f"Допустимы оценки от {config.MIN_GRADE} до {config.MAX_GRADE}."
    )
