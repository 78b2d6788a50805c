# apps/board/apps.py

import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class BoardConfig(AppConfig):
    """Configuração da app Board"""

    name = 'apps.board'
    verbose_name = 'Board - Tarefas em tempo real'

    engine = None

    def ready(self):
        """
        Inicialização da app
        Cria o engine do board (estado em memória do processo)
        """
        from .engine import BoardEngine

        self.engine = BoardEngine(
            id_length=getattr(settings, 'TASKBOARD_ID_LENGTH', 8),
            list_anonymous=getattr(settings, 'TASKBOARD_LIST_ANONYMOUS', False),
        )

        logger.info("🔌 Board App inicializada - WebSockets habilitados")
