# apps/__init__.py

"""
Taskboard - Aplicações Django

Este pacote contém as aplicações do sistema:
- board: motor de sincronização do quadro de tarefas e WebSockets
"""

__version__ = '0.1.0'
