# journal/__main__.py
"""Запуск через python -m journal."""
from .main import main

raise SystemExit(main())
