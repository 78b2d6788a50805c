# apps/board/dispatcher.py

import logging

from . import activity
from .protocol import (
    AddTask,
    DeleteTask,
    EditTask,
    Join,
    MalformedMessage,
    MoveTask,
    build_activity,
    build_add_task,
    build_delete_task,
    build_init_state,
    build_move_task,
    build_update_task,
    build_users_update,
    parse_message,
)

logger = logging.getLogger(__name__)

UNKNOWN_USER = 'Unknown'


class MessageDispatcher:
    """
    Máquina de protocolo do board

    Recebe o payload bruto de uma conexão, valida, altera o
    TaskStore / ConnectionRegistry e dispara os broadcasts.

    Nada aqui responde erro ao cliente: mensagem inválida é
    simplesmente ignorada (o cliente não vê nada acontecer).
    Quem chama garante que uma mensagem termina antes da próxima.
    """

    def __init__(self, tasks, registry, router, list_anonymous=False):
        self.tasks = tasks
        self.registry = registry
        self.router = router
        self.list_anonymous = list_anonymous

        self._handlers = {
            Join: self.handle_join,
            AddTask: self.handle_add_task,
            MoveTask: self.handle_move_task,
            EditTask: self.handle_edit_task,
            DeleteTask: self.handle_delete_task,
        }

    def users(self):
        return self.registry.list_users(include_anonymous=self.list_anonymous)

    def sender_name(self, connection_id):
        return self.registry.get_name(connection_id) or UNKNOWN_USER

    async def broadcast_activity(self, message, exclude=None):
        await self.router.broadcast(build_activity(message), exclude=exclude)

    # === Ciclo de vida da conexão ===

    async def open_connection(self, connection_id, handle):
        """
        Conexão aberta: entra no router e no registro, ainda anônima
        """
        self.router.attach(connection_id, handle)
        self.registry.register(connection_id)

    async def close_connection(self, connection_id):
        """
        Conexão fechada: remove handle e presença

        Só avisa os outros se a conexão tinha feito 'join'.
        """
        self.router.detach(connection_id)
        name = self.registry.remove(connection_id)
        if name is None:
            return

        await self.router.broadcast(build_users_update(self.users()))
        await self.broadcast_activity(activity.left(name))

    # === Mensagens ===

    async def dispatch(self, connection_id, raw):
        """
        Processa um payload recebido de `connection_id`
        """
        try:
            message = parse_message(raw)
        except MalformedMessage as e:
            logger.debug(f"Mensagem descartada de {connection_id}: {e}")
            return

        handler = self._handlers.get(type(message))
        if handler is None:
            logger.debug(f"Sem handler para {type(message).__name__}")
            return

        await handler(connection_id, message)

    async def handle_join(self, connection_id, message):
        if connection_id not in self.registry:
            return

        name = (message.username or '').strip() or f'User-{connection_id[:4]}'
        self.registry.set_name(connection_id, name)
        users = self.users()

        # Estado completo só para quem entrou
        await self.router.send_to(connection_id, build_init_state(
            connection_id,
            name,
            [task.to_dict() for task in self.tasks.list()],
            users,
        ))
        await self.router.broadcast(build_users_update(users), exclude=connection_id)
        await self.broadcast_activity(activity.joined(name))

        logger.info(f"👋 {name} entrou no board (conexão {connection_id})")

    async def handle_add_task(self, connection_id, message):
        username = self.sender_name(connection_id)
        task = self.tasks.create(
            message.title,
            created_by=username,
            description=message.description or '',
            status=message.status,
            assigned_to=message.assigned_to,
        )
        if task is None:
            return

        await self.router.broadcast(build_add_task(task.to_dict()))
        await self.broadcast_activity(activity.task_created(username, task))

    async def handle_move_task(self, connection_id, message):
        previous = self.tasks.set_status(message.task_id, message.to)
        if previous is None:
            return

        username = self.sender_name(connection_id)
        await self.router.broadcast(build_move_task(message.task_id, previous, message.to, username))
        await self.broadcast_activity(activity.task_moved(username, message.task_id, previous, message.to))

    async def handle_edit_task(self, connection_id, message):
        task = self.tasks.update(
            message.task_id,
            title=message.title,
            description=message.description,
            assigned_to=message.assigned_to,
        )
        if task is None:
            return

        username = self.sender_name(connection_id)
        await self.router.broadcast(build_update_task(task.to_dict()))
        await self.broadcast_activity(activity.task_edited(username, task.id))

    async def handle_delete_task(self, connection_id, message):
        if not self.tasks.delete(message.task_id):
            return

        username = self.sender_name(connection_id)
        await self.router.broadcast(build_delete_task(message.task_id))
        await self.broadcast_activity(activity.task_deleted(username, message.task_id))
