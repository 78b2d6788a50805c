# tests/conftest.py

import pytest
from channels.routing import URLRouter
from channels.testing import WebsocketCommunicator

from apps.board.engine import BoardEngine
from apps.board.routing import build_websocket_urlpatterns

from .fakes import FakeConnection, send_message


@pytest.fixture()
def engine():
    """
    Engine novo por teste (nada compartilhado com o da app)
    """
    board = BoardEngine()
    yield board
    board.shutdown()


@pytest.fixture()
def application(engine):
    return URLRouter(build_websocket_urlpatterns(engine))


@pytest.fixture()
def connect_fake(engine):
    """
    Abre uma conexão fake no engine; opcionalmente já faz 'join'.
    Retorna (connection_id, handle) com o handle limpo.
    """

    async def _connect(username=None):
        handle = FakeConnection()
        connection_id = await engine.connect(handle)
        if username is not None:
            await send_message(engine, connection_id, type='join', username=username)
        handle.clear()
        return connection_id, handle

    return _connect


@pytest.fixture()
def open_socket(application):
    """
    Abre um WebSocket de verdade contra as rotas do board.
    O teste é responsável por desconectar.
    """

    async def _open(path='/'):
        communicator = WebsocketCommunicator(application, path)
        connected, _ = await communicator.connect()
        assert connected
        return communicator

    return _open
