# apps/board/__init__.py

"""
Board - Quadro de tarefas compartilhado em tempo real

Funcionalidades:
- Tarefas em memória organizadas em colunas (todo / in_progress / done)
- Presença de usuários conectados
- WebSockets com broadcast de cada alteração para todos os clientes
- Feed de atividades (apenas transmitido, nunca armazenado)
"""
