# apps/board/routing.py

from django.urls import re_path

from . import consumers


def build_websocket_urlpatterns(engine):
    """
    Rotas WebSocket do board ligadas a um engine

    O cliente do navegador abre o WebSocket na raiz do host;
    /ws/board/ fica como caminho explícito.
    """
    consumer = consumers.BoardConsumer.as_asgi(engine=engine)

    return [
        re_path(r'^$', consumer),
        re_path(r'^ws/board/$', consumer),
    ]
