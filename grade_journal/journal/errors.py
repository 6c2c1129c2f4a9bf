# journal/errors.py
"""Модуль для определения пользовательских исключений журнала."""

class JournalError(Exception):
    """Базовый класс для всех исключений в этом приложении."""
    pass

class DataValidationError(JournalError):
    """Исключение, связанное с некорректными данными ввода."""
    pass

class EmptyGradesError(DataValidationError):
    """Исключение, когда у студента не указано ни одной оценки."""
    pass

class InvalidThresholdError(DataValidationError):
    """Исключение при некорректном пороговом среднем балле."""
    pass

class StudentNotFoundError(JournalError):
    """Исключение, когда студент с заданным ФИО не найден."""
    pass

class DuplicateStudentError(JournalError):
    """Исключение при попытке добавить студента с уже существующим ФИО."""
    pass
