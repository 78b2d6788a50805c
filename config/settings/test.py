# config/settings/test.py

from .base import *

# === TESTES ===

DEBUG = False

ALLOWED_HOSTS = ['testserver', 'localhost']

# Desabilitar logs em testes (dict próprio, sem alterar o de base.py)
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'null': {'class': 'logging.NullHandler'},
    },
    'root': {
        'handlers': ['null'],
        'level': 'INFO',
    },
}

TASKBOARD_ID_LENGTH = 8
TASKBOARD_LIST_ANONYMOUS = False
