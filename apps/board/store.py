# apps/board/store.py

import secrets
import string
import time
from dataclasses import dataclass
from typing import Dict, List, Optional

# Colunas do board, na ordem em que aparecem
STATUS_TODO = 'todo'
STATUS_IN_PROGRESS = 'in_progress'
STATUS_DONE = 'done'

VALID_STATUSES = (STATUS_TODO, STATUS_IN_PROGRESS, STATUS_DONE)

ID_ALPHABET = string.ascii_lowercase + string.digits
DEFAULT_ID_LENGTH = 8

# Marca campos não enviados numa edição parcial (None é valor válido para assignedTo)
UNSET = object()


def generate_id(length: int = DEFAULT_ID_LENGTH) -> str:
    """
    Gera identificador alfanumérico aleatório (base 36)
    Usado para tarefas e conexões
    """
    return ''.join(secrets.choice(ID_ALPHABET) for _ in range(length))


def now_ms() -> int:
    return int(time.time() * 1000)


@dataclass
class Task:
    """
    Tarefa do board

    id, created_by e created_at nunca mudam depois da criação.
    """

    id: str
    title: str
    description: str
    status: str
    created_by: str
    assigned_to: Optional[str]
    created_at: int

    def to_dict(self) -> Dict:
        """
        Representação enviada aos clientes (chaves em camelCase)
        """
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'status': self.status,
            'createdBy': self.created_by,
            'assignedTo': self.assigned_to,
            'createdAt': self.created_at,
        }


class TaskStore:
    """
    Armazenamento em memória das tarefas (id -> Task)

    CRUD puro, sem conhecimento de rede. Operações inválidas
    são no-ops silenciosos; quem chama decide se houve evento.
    """

    def __init__(self, id_length: int = DEFAULT_ID_LENGTH):
        self.id_length = id_length
        self._tasks: Dict[str, Task] = {}

    def __len__(self):
        return len(self._tasks)

    def __contains__(self, task_id):
        return task_id in self._tasks

    def _new_id(self) -> str:
        task_id = generate_id(self.id_length)
        while task_id in self._tasks:
            task_id = generate_id(self.id_length)
        return task_id

    def create(self, title, created_by: str, description='', status=None,
               assigned_to=None) -> Optional[Task]:
        """
        Cria tarefa com id novo

        Retorna None (sem criar nada) se o título ficar vazio após trim.
        Status ausente ou inválido vira 'todo'.
        """
        title = title.strip() if isinstance(title, str) else ''
        if not title:
            return None

        if status not in VALID_STATUSES:
            status = STATUS_TODO

        task = Task(
            id=self._new_id(),
            title=title,
            description=description if isinstance(description, str) else '',
            status=status,
            created_by=created_by,
            assigned_to=assigned_to if isinstance(assigned_to, str) and assigned_to else None,
            created_at=now_ms(),
        )
        self._tasks[task.id] = task
        return task

    def get(self, task_id) -> Optional[Task]:
        if not isinstance(task_id, str):
            return None
        return self._tasks.get(task_id)

    def update(self, task_id, title=UNSET, description=UNSET, assigned_to=UNSET) -> Optional[Task]:
        """
        Aplica apenas os campos informados

        - title: ignorado se ficar vazio após trim
        - assigned_to: aceita string ou None (remove responsável)
        """
        task = self.get(task_id)
        if task is None:
            return None

        if isinstance(title, str) and title.strip():
            task.title = title.strip()
        if isinstance(description, str):
            task.description = description
        if assigned_to is None or isinstance(assigned_to, str):
            task.assigned_to = assigned_to

        return task

    def set_status(self, task_id, new_status) -> Optional[str]:
        """
        Move tarefa para outra coluna

        Retorna o status anterior, ou None quando nada mudou
        (id desconhecido, status inválido ou mesma coluna).
        """
        task = self.get(task_id)
        if task is None or new_status not in VALID_STATUSES:
            return None

        previous = task.status
        if previous == new_status:
            return None

        task.status = new_status
        return previous

    def delete(self, task_id) -> bool:
        if not isinstance(task_id, str):
            return False
        return self._tasks.pop(task_id, None) is not None

    def list(self) -> List[Task]:
        return list(self._tasks.values())

    def clear(self):
        self._tasks.clear()
