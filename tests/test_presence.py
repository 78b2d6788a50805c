# tests/test_presence.py

from apps.board.presence import ConnectionRegistry


def test_register_is_anonymous_until_named():
    registry = ConnectionRegistry()
    registry.register('c1')

    assert 'c1' in registry
    assert registry.get_name('c1') is None
    assert registry.list_users() == []
    assert registry.list_users(include_anonymous=True) == [{'id': 'c1', 'username': None}]


def test_set_name_overwrites_and_keeps_order():
    registry = ConnectionRegistry()
    registry.register('c1')
    registry.register('c2')
    registry.set_name('c2', 'Bob')
    registry.set_name('c1', 'Alice')
    registry.set_name('c1', 'Alicia')

    assert registry.list_users() == [
        {'id': 'c1', 'username': 'Alicia'},
        {'id': 'c2', 'username': 'Bob'},
    ]


def test_unknown_ids_are_noops():
    registry = ConnectionRegistry()

    registry.set_name('ghost', 'Nobody')
    assert registry.remove('ghost') is None
    assert len(registry) == 0


def test_remove_returns_name_once():
    registry = ConnectionRegistry()
    registry.register('c1')
    registry.set_name('c1', 'Alice')

    assert registry.remove('c1') == 'Alice'
    assert registry.remove('c1') is None
    assert 'c1' not in registry


def test_register_twice_keeps_name():
    registry = ConnectionRegistry()
    registry.register('c1')
    registry.set_name('c1', 'Alice')
    registry.register('c1')

    assert registry.get_name('c1') == 'Alice'
