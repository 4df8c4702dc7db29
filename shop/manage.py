#!/usr/bin/env python
"""Утилита командной строки Django для проекта SHOP."""

import os
import sys


def main():
    """Запуск административных задач."""
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "shop.settings")
    from django.core.management import execute_from_command_line

    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
