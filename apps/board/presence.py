# apps/board/presence.py

from typing import Dict, List, Optional


class ConnectionRegistry:
    """
    Presença: connection id -> nome de exibição

    A conexão entra anônima (nome None) e só ganha nome no 'join'.
    É a única fonte da lista de usuários online.
    Operações com id desconhecido são no-ops.
    """

    def __init__(self):
        self._names: Dict[str, Optional[str]] = {}

    def __len__(self):
        return len(self._names)

    def __contains__(self, connection_id):
        return connection_id in self._names

    def register(self, connection_id: str):
        self._names.setdefault(connection_id, None)

    def set_name(self, connection_id: str, name: str):
        if connection_id in self._names:
            self._names[connection_id] = name

    def get_name(self, connection_id: str) -> Optional[str]:
        return self._names.get(connection_id)

    def remove(self, connection_id: str) -> Optional[str]:
        """
        Remove a conexão e retorna o nome que ela tinha (se tinha)
        """
        return self._names.pop(connection_id, None)

    def list_users(self, include_anonymous: bool = False) -> List[Dict]:
        """
        Lista de usuários na ordem de conexão
        """
        return [
            {'id': connection_id, 'username': name}
            for connection_id, name in self._names.items()
            if name is not None or include_anonymous
        ]

    def clear(self):
        self._names.clear()
