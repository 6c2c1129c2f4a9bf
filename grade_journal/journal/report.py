# journal/report.py
"""Форматирование списков студентов и статистики для вывода в консоль."""
from typing import Any, Dict, List

from . import config
from .models import Student
from .roster import histogram_percentage


def format_student_list(title: str, students: List[Student]) -> str:
    """Заголовок с количеством и нумерованный (с 1) список студентов."""
    lines = [f"\n=== {title} ({len(students)}) ==="]
    for i, student in enumerate(students, start=1):
        lines.append(f"{i}. {student}")
    return "\n".join(lines)


def threshold_title(threshold: float, below: bool) -> str:
    condition = "ниже" if below else "выше или равно"
    return f"СТУДЕНТЫ СО СРЕДНИМ БАЛЛОМ {condition} {threshold:.2f}"


def threshold_not_found(threshold: float, below: bool) -> str:
    condition = "ниже" if below else "выше"
    return f"Студентов со средним баллом {condition} {threshold:.2f} не найдено"


def format_statistics(stats: Dict[str, Any]) -> str:
    """Сводка по группе и распределение оценок от 5 до 1."""
    lines = [
        "\n=== СТАТИСТИКА ===",
        f"Всего студентов: {stats['count']}",
        f"Средний балл по группе: {stats['group_average']:.2f}",
        f"Лучший средний балл: {stats['max_average']:.2f}",
        f"Худший средний балл: {stats['min_average']:.2f}",
        "",
        "Распределение оценок:",
    ]
    histogram = stats["grade_histogram"]
    for grade in range(config.MAX_GRADE, config.MIN_GRADE - 1, -1):
        count = histogram.get(grade, 0)
        percentage = histogram_percentage(count, stats["count"])  # примерное распределение
        lines.append(f"  {grade}: {count} оценок ({percentage:.1f}%)")
    return "\n".join(lines)
