# config/settings/development.py

from .base import *

# === DESENVOLVIMENTO ===

DEBUG = True

# runboard escuta em 0.0.0.0: para aceitar colegas pelo IP da rede,
# informe ALLOWED_HOSTS=localhost,192.168.0.10 (ou '*') no .env
ALLOWED_HOSTS = env.list('ALLOWED_HOSTS', default=['localhost', '127.0.0.1', '0.0.0.0'])

# === LOGGING MAIS VERBOSO ===

LOGGING['handlers']['console']['level'] = 'DEBUG'
LOGGING['root']['level'] = 'DEBUG'
LOGGING['loggers']['apps']['level'] = 'DEBUG'

# Daphne é barulhento em DEBUG
LOGGING['loggers']['daphne'] = {
    'handlers': ['console'],
    'level': 'INFO',
    'propagate': False,
}

# Configurações mais relaxadas para desenvolvimento
SESSION_COOKIE_SECURE = False
CSRF_COOKIE_SECURE = False
