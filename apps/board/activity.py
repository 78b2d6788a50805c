# apps/board/activity.py

"""
Textos do feed de atividades

Não são guardados em lugar nenhum, apenas enviados aos clientes.
"""


def joined(username):
    return f'{username} joined'


def left(username):
    return f'{username} left'


def task_created(username, task):
    return f'{username} created Task #{task.id}: {task.title}'


def task_moved(username, task_id, from_status, to_status):
    return f'{username} moved Task #{task_id} {from_status} → {to_status}'


def task_edited(username, task_id):
    return f'{username} edited Task #{task_id}'


def task_deleted(username, task_id):
    return f'{username} deleted Task #{task_id}'
