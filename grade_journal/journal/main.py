# journal/main.py
"""Главный модуль, реализующий консольный интерфейс (CLI) журнала успеваемости."""
import logging
from enum import Enum
from typing import Callable, Dict, Optional

from . import config, errors, input_utils, report
from .roster import Roster

logger = logging.getLogger(__name__)


class MenuChoice(Enum):
    """Пункты меню; значение совпадает с тем, что вводит пользователь."""
    ADD = "1"
    REMOVE = "2"
    LIST_ALL = "3"
    LIST_BELOW = "4"
    LIST_AT_OR_ABOVE = "5"
    STATISTICS = "6"
    EXIT = "7"

    @classmethod
    def parse(cls, raw: str) -> Optional["MenuChoice"]:
        try:
            return cls(raw.strip())
        except ValueError:
            return None


def print_menu():
    """Выводит на экран главное меню."""
    print("\n1. Добавить студента")
    print("2. Удалить студента")
    print("3. Показать всех студентов")
    print("4. Студенты с низким средним баллом (< порога)")
    print("5. Студенты с высоким средним баллом (>= порога)")
    print("6. Статистика успеваемости")
    print("7. Выход")


def handle_add(roster: Roster) -> bool:
    name = input_utils.parse_name(input("Введите ФИО студента: "))
    # Уникальность проверяется до ввода оценок
    if name in roster:
        raise errors.DuplicateStudentError(f"Студент '{name}' уже существует!")

    grades = input_utils.parse_grades(input("Введите оценки через пробел (1-5): "))
    student = roster.add_student(name, grades)
    print(f"✅ Студент '{student.name}' успешно добавлен с оценками: {student.grades_display()}")
    return True


def handle_remove(roster: Roster) -> bool:
    name = input("Введите ФИО студента для удаления: ").strip()
    if roster.remove_student(name):
        print(f"✅ Студент '{name}' удален")
    else:
        print(f"❌ Студент '{name}' не найден")
    return True


def handle_list_all(roster: Roster) -> bool:
    students = roster.list_all()
    if not students:
        print("ℹ️ В журнале нет студентов")
    else:
        print(report.format_student_list("ВСЕ СТУДЕНТЫ", students))
    return True


def _handle_threshold(roster: Roster, below: bool) -> bool:
    threshold = input_utils.parse_threshold(input("Введите пороговый средний балл: "))
    students = roster.list_by_threshold(threshold, below)
    if not students:
        print(f"ℹ️ {report.threshold_not_found(threshold, below)}")
    else:
        print(report.format_student_list(report.threshold_title(threshold, below), students))
    return True


def handle_list_below(roster: Roster) -> bool:
    return _handle_threshold(roster, below=True)


def handle_list_at_or_above(roster: Roster) -> bool:
    return _handle_threshold(roster, below=False)


def handle_statistics(roster: Roster) -> bool:
    stats = roster.statistics()
    if not stats:
        print("ℹ️ Нет данных для статистики")
    else:
        print(report.format_statistics(stats))
    return True


def handle_exit(roster: Roster) -> bool:
    print("👋 До свидания!")
    return False


HANDLERS: Dict[MenuChoice, Callable[[Roster], bool]] = {
    MenuChoice.ADD: handle_add,
    MenuChoice.REMOVE: handle_remove,
    MenuChoice.LIST_ALL: handle_list_all,
    MenuChoice.LIST_BELOW: handle_list_below,
    MenuChoice.LIST_AT_OR_ABOVE: handle_list_at_or_above,
    MenuChoice.STATISTICS: handle_statistics,
    MenuChoice.EXIT: handle_exit,
}


def main_cli(roster: Optional[Roster] = None) -> Roster:
    """Основной цикл консольного приложения. Возвращает журнал после выхода."""
    if roster is None:
        roster = Roster()

    print("=== ЖУРНАЛ УСПЕВАЕМОСТИ СТУДЕНТОВ ===")

    while True:
        print_menu()
        try:
            raw_choice = input("Выберите действие: ")
        except EOFError:
            print("\n👋 До свидания!")
            break

        choice = MenuChoice.parse(raw_choice)
        if choice is None:
            print(f"❌ Неверный выбор! Пожалуйста, выберите от {MenuChoice.ADD.value} до {MenuChoice.EXIT.value}")
            continue

        logger.debug("Dispatching %s", choice.name)
        try:
            keep_running = HANDLERS[choice](roster)
        except EOFError:
            print("\n👋 До свидания!")
            break
        except errors.JournalError as e:
            print(f"❌ Ошибка: {e}")
            continue
        except Exception as e:
            logger.exception("Unexpected error while handling %s", choice.name)
            print(f"❌ Произошла непредвиденная ошибка: {e}")
            continue

        if not keep_running:
            break

    return roster


def main() -> int:
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    try:
        main_cli()
    except KeyboardInterrupt:
        print("\nПрограмма принудительно остановлена.")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
