# journal/config.py
"""Настройки журнала успеваемости."""
import logging

# --- КОНФИГУРАЦИЯ ---
MIN_GRADE = 1
MAX_GRADE = 5

# Средний балл, начиная с которого студент считается успевающим
PASS_THRESHOLD = 3.0

# Знаменатель гистограммы: примерное распределение из расчёта 5 оценок на студента
ASSUMED_GRADES_PER_STUDENT = 5

PASS_MARKER = "✓"
FAIL_MARKER = "⚠"

# Логи идут в stderr, чтобы не мешать интерактивному выводу
LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
