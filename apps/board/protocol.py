# apps/board/protocol.py

"""
Protocolo WebSocket do board

Mensagens do cliente viram dataclasses (uma por tipo).
Mensagens do servidor são montadas pelas funções build_*.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from .store import UNSET


class MessageTypes:
    """Tipos de mensagem (campo 'type')"""

    # Cliente -> servidor
    JOIN = 'join'
    ADD_TASK = 'add_task'
    MOVE_TASK = 'move_task'
    EDIT_TASK = 'edit_task'
    DELETE_TASK = 'delete_task'

    # Servidor -> cliente
    INIT_STATE = 'init_state'
    USERS_UPDATE = 'users_update'
    ACTIVITY = 'activity'
    UPDATE_TASK = 'update_task'


class MalformedMessage(ValueError):
    """Payload que não é um objeto JSON com tipo conhecido"""


@dataclass
class Join:
    username: Optional[str] = None


@dataclass
class AddTask:
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    assigned_to: Optional[str] = None


@dataclass
class MoveTask:
    task_id: Optional[str] = None
    to: Optional[str] = None


@dataclass
class EditTask:
    task_id: Optional[str] = None
    title: Any = UNSET
    description: Any = UNSET
    assigned_to: Any = UNSET


@dataclass
class DeleteTask:
    task_id: Optional[str] = None


ClientMessage = Union[Join, AddTask, MoveTask, EditTask, DeleteTask]


def _text(data: Dict, key: str) -> Optional[str]:
    """Campo string; qualquer outro tipo conta como ausente"""
    value = data.get(key)
    return value if isinstance(value, str) else None


def _scalar_text(data: Dict, key: str) -> Optional[str]:
    """
    Campo de texto livre: números e booleanos viram string
    (o cliente às vezes manda um título numérico, ex. 123)
    """
    value = data.get(key)
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return value if isinstance(value, str) else None


def _optional_field(data: Dict, key: str, nullable: bool = False):
    """
    Campo opcional de edição parcial

    Retorna UNSET se o campo não veio (ou veio com tipo errado).
    """
    if key not in data:
        return UNSET
    value = data[key]
    if isinstance(value, str) or (nullable and value is None):
        return value
    return UNSET


def _parse_join(data):
    return Join(username=_scalar_text(data, 'username'))


def _parse_add_task(data):
    return AddTask(
        title=_scalar_text(data, 'title'),
        description=_scalar_text(data, 'description'),
        status=_text(data, 'status'),
        assigned_to=_text(data, 'assignedTo'),
    )


def _parse_move_task(data):
    return MoveTask(task_id=_text(data, 'taskId'), to=_text(data, 'to'))


def _parse_edit_task(data):
    return EditTask(
        task_id=_text(data, 'taskId'),
        title=_optional_field(data, 'title'),
        description=_optional_field(data, 'description'),
        assigned_to=_optional_field(data, 'assignedTo', nullable=True),
    )


def _parse_delete_task(data):
    return DeleteTask(task_id=_text(data, 'taskId'))


PARSERS = {
    MessageTypes.JOIN: _parse_join,
    MessageTypes.ADD_TASK: _parse_add_task,
    MessageTypes.MOVE_TASK: _parse_move_task,
    MessageTypes.EDIT_TASK: _parse_edit_task,
    MessageTypes.DELETE_TASK: _parse_delete_task,
}


def parse_message(raw: Union[str, bytes]) -> ClientMessage:
    """
    Converte o payload recebido numa mensagem tipada

    Levanta MalformedMessage para JSON inválido, payload que não
    é objeto, bytes que não são UTF-8 ou tipo desconhecido.
    """
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode('utf-8')
        except UnicodeDecodeError as exc:
            raise MalformedMessage('payload binário não é UTF-8') from exc

    try:
        data = json.loads(raw)
    except (TypeError, json.JSONDecodeError) as exc:
        raise MalformedMessage('JSON inválido') from exc

    if not isinstance(data, dict):
        raise MalformedMessage('payload não é um objeto JSON')

    message_type = data.get('type')
    parser = PARSERS.get(message_type) if isinstance(message_type, str) else None
    if parser is None:
        raise MalformedMessage(f'tipo desconhecido: {message_type!r}')

    return parser(data)


# === Mensagens do servidor ===

def build_init_state(connection_id: str, username: str, tasks: List[Dict], users: List[Dict]) -> Dict:
    return {
        'type': MessageTypes.INIT_STATE,
        'yourId': connection_id,
        'username': username,
        'tasks': tasks,
        'users': users,
    }


def build_users_update(users: List[Dict]) -> Dict:
    return {'type': MessageTypes.USERS_UPDATE, 'users': users}


def build_activity(message: str) -> Dict:
    return {'type': MessageTypes.ACTIVITY, 'message': message}


def build_add_task(task: Dict) -> Dict:
    return {'type': MessageTypes.ADD_TASK, 'task': task}


def build_update_task(task: Dict) -> Dict:
    return {'type': MessageTypes.UPDATE_TASK, 'task': task}


def build_delete_task(task_id: str) -> Dict:
    return {'type': MessageTypes.DELETE_TASK, 'taskId': task_id}


def build_move_task(task_id: str, from_status: str, to_status: str, moved_by: str) -> Dict:
    return {
        'type': MessageTypes.MOVE_TASK,
        'taskId': task_id,
        'from': from_status,
        'to': to_status,
        'movedBy': moved_by,
    }


def encode(message: Dict) -> str:
    return json.dumps(message, ensure_ascii=False)
