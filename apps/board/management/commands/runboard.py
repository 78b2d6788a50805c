# apps/board/management/commands/runboard.py

from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand


class Command(BaseCommand):
    help = 'Sobe o servidor do board (HTTP + WebSocket) no HOST/PORT configurados'

    def add_arguments(self, parser):
        parser.add_argument(
            '--host',
            default=settings.TASKBOARD_HOST,
            help='Endereço de escuta (padrão: env HOST ou 0.0.0.0)'
        )
        parser.add_argument(
            '--port',
            type=int,
            default=settings.TASKBOARD_PORT,
            help='Porta de escuta (padrão: env PORT ou 3000)'
        )
        parser.add_argument(
            '--reload',
            action='store_true',
            help='Reinicia o servidor quando o código muda'
        )

    def handle(self, *args, **options):
        """
        Mostra o banner e delega para o runserver do daphne
        """
        host = options['host']
        port = options['port']

        self.stdout.write(
            self.style.SUCCESS(f'\nReal-Time Collaboration Board server running at http://{host}:{port}')
        )
        self.stdout.write(f'Open your browser to http://localhost:{port}')

        call_command(
            'runserver',
            f'{host}:{port}',
            use_reloader=options['reload'],
        )
