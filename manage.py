#!/usr/bin/env python
"""
Django's command-line utility for administrative tasks.
Taskboard - quadro de tarefas em tempo real
"""
import os
import sys


def main():
    """Run administrative tasks."""
    # Configuração padrão para desenvolvimento
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.development')

    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc

    # Atalho: `python manage.py` sem argumentos sobe o board
    if len(sys.argv) == 1:
        sys.argv.append('runboard')

    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
