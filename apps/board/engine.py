# apps/board/engine.py

import asyncio
import logging

from .broadcast import BroadcastRouter
from .dispatcher import MessageDispatcher
from .presence import ConnectionRegistry
from .store import DEFAULT_ID_LENGTH, TaskStore, generate_id

logger = logging.getLogger(__name__)


class BoardEngine:
    """
    Motor de sincronização do board

    Dono único do TaskStore, do ConnectionRegistry e do router.
    Criado uma vez por processo (BoardConfig.ready) e injetado
    nos consumers e views.

    Toda entrada (conexão, mensagem, desconexão) passa pelo mesmo
    lock: a mutação e todos os envios que ela gera terminam antes
    da próxima entrada começar.
    """

    def __init__(self, id_length: int = DEFAULT_ID_LENGTH, list_anonymous: bool = False):
        self.id_length = id_length
        self.tasks = TaskStore(id_length=id_length)
        self.registry = ConnectionRegistry()
        self.router = BroadcastRouter()
        self.dispatcher = MessageDispatcher(
            self.tasks,
            self.registry,
            self.router,
            list_anonymous=list_anonymous,
        )
        self._lock = None

    @property
    def lock(self):
        # Criado sob demanda para ficar no event loop que atende as conexões
        if self._lock is None:
            self._lock = asyncio.Lock()
        return self._lock

    def new_connection_id(self) -> str:
        connection_id = generate_id(self.id_length)
        while connection_id in self.registry or connection_id in self.router:
            connection_id = generate_id(self.id_length)
        return connection_id

    async def connect(self, handle) -> str:
        """
        Registra uma conexão recém aceita e retorna o id atribuído
        """
        async with self.lock:
            connection_id = self.new_connection_id()
            await self.dispatcher.open_connection(connection_id, handle)

        logger.info(f"🔌 Conexão aberta: {connection_id} ({len(self.router)} online)")
        return connection_id

    async def receive(self, connection_id: str, raw):
        async with self.lock:
            await self.dispatcher.dispatch(connection_id, raw)

    async def disconnect(self, connection_id: str):
        async with self.lock:
            await self.dispatcher.close_connection(connection_id)

        logger.info(f"🔌 Conexão fechada: {connection_id} ({len(self.router)} online)")

    async def snapshot(self):
        """
        Estado atual (somente leitura) para as views HTTP

        Lido dentro do lock: nunca enxerga uma mensagem pela metade.
        """
        async with self.lock:
            return {
                'tasks': [task.to_dict() for task in self.tasks.list()],
                'users': self.dispatcher.users(),
            }

    async def stats(self):
        async with self.lock:
            return {
                'connections': len(self.router),
                'tasks': len(self.tasks),
            }

    def shutdown(self):
        """
        Descarta todo o estado em memória (fim do processo)
        """
        self.tasks.clear()
        self.registry.clear()
        self.router.clear()
        self._lock = None
