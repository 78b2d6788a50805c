# config/settings/base.py

import os
import environ
from pathlib import Path

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# Configuração do django-environ
env = environ.Env(
    DEBUG=(bool, False),
    ALLOWED_HOSTS=(list, []),
)

# Lê o arquivo .env se existir
if (BASE_DIR / '.env').exists():
    environ.Env.read_env(BASE_DIR / '.env')

# === CONFIGURAÇÕES BÁSICAS ===

SECRET_KEY = env('SECRET_KEY', default='django-insecure-CHANGE-ME-IN-PRODUCTION')

DEBUG = env('DEBUG', default=False)

ALLOWED_HOSTS = env('ALLOWED_HOSTS', default=[])

# === APLICAÇÕES ===

DJANGO_APPS = [
    'django.contrib.staticfiles',
]

THIRD_PARTY_APPS = [
    # Servidor ASGI (runserver com WebSocket)
    'daphne',

    # Async/WebSocket
    'channels',
]

LOCAL_APPS = [
    'apps.board',
]

# daphne precisa vir antes de staticfiles para assumir o runserver
INSTALLED_APPS = THIRD_PARTY_APPS + DJANGO_APPS + LOCAL_APPS

# === MIDDLEWARE ===

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'config.urls'

# === ASGI ===

ASGI_APPLICATION = 'config.asgi.application'

# === BANCO DE DADOS ===

# Estado do board vive só na memória do processo
DATABASES = {}

# === CHANNELS (WebSocket) ===

# Sem channel layer: o fan-out é feito pelo BroadcastRouter do próprio processo
CHANNEL_LAYERS = {}

# === INTERNACIONALIZAÇÃO ===

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = False
USE_TZ = True

# === ARQUIVOS ESTÁTICOS ===

STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

# === LOGGING ===

LOG_DIR = Path(env('LOG_DIR', default=str(BASE_DIR / 'logs')))

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {process:d} {thread:d} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'file': {
            'level': 'INFO',
            'class': 'logging.FileHandler',
            'filename': LOG_DIR / 'taskboard.log',
            'formatter': 'verbose',
        },
        'console': {
            'level': 'INFO',
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console', 'file'],
        'level': 'INFO',
    },
    'loggers': {
        'django': {
            'handlers': ['file'],
            'level': 'INFO',
            'propagate': False,
        },
        'apps': {
            'handlers': ['console', 'file'],
            'level': 'INFO',
            'propagate': False,
        },
    },
}

# Criar pasta de logs se não existir
os.makedirs(LOG_DIR, exist_ok=True)

# === CONFIGURAÇÕES DO TASKBOARD ===

# Endereço usado pelo comando runboard
TASKBOARD_HOST = env('HOST', default='0.0.0.0')
TASKBOARD_PORT = env.int('PORT', default=3000)

# Tamanho dos ids gerados (tarefas e conexões)
TASKBOARD_ID_LENGTH = env.int('TASKBOARD_ID_LENGTH', default=8)

# Incluir conexões anônimas (sem 'join') nas listas de usuários
TASKBOARD_LIST_ANONYMOUS = env.bool('TASKBOARD_LIST_ANONYMOUS', default=False)
