# tests/test_commands.py

from io import StringIO
from unittest import mock

from django.core.management import call_command


def test_runboard_prints_banner_and_starts_runserver():
    out = StringIO()

    with mock.patch('apps.board.management.commands.runboard.call_command') as runserver:
        call_command('runboard', '--host', '127.0.0.1', '--port', '4000', stdout=out)

    assert 'Real-Time Collaboration Board server running at http://127.0.0.1:4000' in out.getvalue()
    runserver.assert_called_once_with('runserver', '127.0.0.1:4000', use_reloader=False)


def test_runboard_defaults_come_from_settings(settings):
    settings.TASKBOARD_HOST = '0.0.0.0'
    settings.TASKBOARD_PORT = 3000

    with mock.patch('apps.board.management.commands.runboard.call_command') as runserver:
        call_command('runboard', stdout=StringIO())

    runserver.assert_called_once_with('runserver', '0.0.0.0:3000', use_reloader=False)
