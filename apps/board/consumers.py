# apps/board/consumers.py

import logging

from channels.generic.websocket import AsyncWebsocketConsumer

logger = logging.getLogger(__name__)


class BoardConsumer(AsyncWebsocketConsumer):
    """
    Consumer WebSocket do board compartilhado

    Uma instância por conexão. Só traduz eventos do transporte
    para o BoardEngine; estado e regras ficam no engine.

    Também é o handle usado pelo BroadcastRouter (`is_open`,
    `send_text`).
    """

    def __init__(self, *args, engine=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.engine = engine
        self.connection_id = None
        self.is_open = False

    async def connect(self):
        """
        Aceita a conexão e registra no engine (ainda anônima)
        """
        await self.accept()
        self.is_open = True
        self.connection_id = await self.engine.connect(self)

    async def disconnect(self, close_code):
        """
        Remove a conexão do engine (uma única vez)
        """
        self.is_open = False

        if self.connection_id is None:
            return

        connection_id, self.connection_id = self.connection_id, None
        await self.engine.disconnect(connection_id)
        logger.debug(f"WebSocket {connection_id} encerrado (código {close_code})")

    async def receive(self, text_data=None, bytes_data=None):
        """
        Repassa o payload bruto (texto ou binário) ao engine
        """
        raw = text_data if text_data is not None else bytes_data
        if raw is None or self.connection_id is None:
            return

        try:
            await self.engine.receive(self.connection_id, raw)
        except Exception:
            logger.exception(f"❌ Erro processando mensagem de {self.connection_id}")

    async def send_text(self, text):
        await self.send(text_data=text)
