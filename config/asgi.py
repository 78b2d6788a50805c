# config/asgi.py

import os
from django.core.asgi import get_asgi_application
from channels.routing import ProtocolTypeRouter, URLRouter
from channels.security.websocket import AllowedHostsOriginValidator

# Configurar Django settings
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.development')

# Carregar apps antes de importar rotas WebSocket
django_asgi_app = get_asgi_application()

from django.apps import apps as django_apps  # noqa: E402
from apps.board.routing import build_websocket_urlpatterns  # noqa: E402

# Engine único do processo, criado no ready() da app board
board_engine = django_apps.get_app_config('board').engine

# Configuração ASGI
application = ProtocolTypeRouter({
    # HTTP tradicional
    "http": django_asgi_app,

    # WebSocket do board (sem autenticação)
    "websocket": AllowedHostsOriginValidator(
        URLRouter(build_websocket_urlpatterns(board_engine))
    ),
})
