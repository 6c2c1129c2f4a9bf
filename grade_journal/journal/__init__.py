# journal/__init__.py
"""Консольный журнал успеваемости студентов."""
