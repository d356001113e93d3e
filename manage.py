#!/usr/bin/env python
"""
Command-line entry point of the doctor portal.  Defaults the settings
module to ``doctorportal.settings`` and hands over to Django's
management utility (``runserver``, ``populate_data``, ``refresh_caches``...).
"""
import os
import sys


def main() -> None:
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'doctorportal.settings')
    try:
        from django.core.management import execute_from_command_line  # type: ignore
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Is it installed in the active environment?"
        ) from exc
    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
