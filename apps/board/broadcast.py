# apps/board/broadcast.py

import logging
from typing import Dict, Optional

from .protocol import encode

logger = logging.getLogger(__name__)


class BroadcastRouter:
    """
    Fan-out de mensagens para as conexões abertas

    Mantém o mapa explícito connection id -> handle. O handle é
    qualquer objeto com `is_open` e `async send_text(text)`
    (em produção, o BoardConsumer).

    Envio para conexão fechada ou com erro é pulado, sem retry;
    a limpeza acontece no disconnect da própria conexão.
    """

    def __init__(self):
        self._handles: Dict[str, object] = {}

    def __len__(self):
        return len(self._handles)

    def __contains__(self, connection_id):
        return connection_id in self._handles

    def attach(self, connection_id: str, handle):
        self._handles[connection_id] = handle

    def detach(self, connection_id: str):
        return self._handles.pop(connection_id, None)

    def clear(self):
        self._handles.clear()

    async def _deliver(self, connection_id, handle, text) -> bool:
        if not getattr(handle, 'is_open', False):
            return False
        try:
            await handle.send_text(text)
        except Exception as e:
            logger.warning(f"⚠️  Falha ao enviar para conexão {connection_id}: {e}")
            return False
        return True

    async def send_to(self, connection_id: str, message: Dict) -> bool:
        """
        Envia mensagem para uma única conexão
        """
        handle = self._handles.get(connection_id)
        if handle is None:
            return False
        return await self._deliver(connection_id, handle, encode(message))

    async def broadcast(self, message: Dict, exclude: Optional[str] = None) -> int:
        """
        Envia mensagem para todas as conexões abertas

        Serializa uma vez só. `exclude` é o connection id a pular.
        Retorna quantas entregas deram certo.
        """
        text = encode(message)
        delivered = 0

        # Cópia: um handle pode ser removido enquanto aguardamos o envio
        for connection_id, handle in list(self._handles.items()):
            if connection_id == exclude:
                continue
            if await self._deliver(connection_id, handle, text):
                delivered += 1

        return delivered
