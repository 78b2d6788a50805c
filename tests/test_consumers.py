# tests/test_consumers.py

import pytest
from channels.testing import WebsocketCommunicator


async def join(communicator, username):
    await communicator.send_json_to({'type': 'join', 'username': username})
    init = await communicator.receive_json_from()
    assert init['type'] == 'init_state'
    joined = await communicator.receive_json_from()
    assert joined == {'type': 'activity', 'message': f'{init["username"]} joined'}
    return init


@pytest.mark.asyncio
async def test_alice_and_bob_scenario(open_socket):
    alice = await open_socket()
    bob = await open_socket()

    alice_init = await join(alice, 'Alice')
    assert alice_init['tasks'] == []
    assert [u['username'] for u in alice_init['users']] == ['Alice']
    # Bob ainda está anônimo, mas já recebe presença e atividade
    update = await bob.receive_json_from()
    assert update == {'type': 'users_update', 'users': alice_init['users']}
    assert await bob.receive_json_from() == {'type': 'activity', 'message': 'Alice joined'}

    bob_init = await join(bob, 'Bob')
    assert [u['username'] for u in bob_init['users']] == ['Alice', 'Bob']

    update = await alice.receive_json_from()
    assert update['type'] == 'users_update'
    assert [u['username'] for u in update['users']] == ['Alice', 'Bob']
    assert await alice.receive_json_from() == {'type': 'activity', 'message': 'Bob joined'}

    # Alice cria tarefa
    await alice.send_json_to({'type': 'add_task', 'title': 'Write docs', 'status': 'todo'})
    for communicator in (alice, bob):
        added = await communicator.receive_json_from()
        assert added['type'] == 'add_task'
        assert added['task']['createdBy'] == 'Alice'
        assert added['task']['status'] == 'todo'
        assert added['task']['title'] == 'Write docs'
        created = await communicator.receive_json_from()
        assert created['message'] == f'Alice created Task #{added["task"]["id"]}: Write docs'
    task_id = added['task']['id']

    # Bob move para done
    await bob.send_json_to({'type': 'move_task', 'taskId': task_id, 'to': 'done'})
    for communicator in (alice, bob):
        assert await communicator.receive_json_from() == {
            'type': 'move_task',
            'taskId': task_id,
            'from': 'todo',
            'to': 'done',
            'movedBy': 'Bob',
        }
        assert (await communicator.receive_json_from())['type'] == 'activity'

    # Alice sai
    await alice.disconnect()
    update = await bob.receive_json_from()
    assert update == {'type': 'users_update', 'users': [{'id': bob_init['yourId'], 'username': 'Bob'}]}
    assert await bob.receive_json_from() == {'type': 'activity', 'message': 'Alice left'}

    await bob.disconnect()


@pytest.mark.asyncio
async def test_invalid_messages_produce_nothing(open_socket):
    alice = await open_socket()
    await join(alice, 'Alice')

    await alice.send_to(text_data='not json at all')
    await alice.send_json_to({'type': 'unknown'})
    await alice.send_json_to({'type': 'add_task', 'title': '   '})
    await alice.send_json_to({'type': 'move_task', 'taskId': 'missing', 'to': 'done'})
    await alice.send_json_to({'type': 'delete_task', 'taskId': 'missing'})

    assert await alice.receive_nothing()

    # a conexão continua funcionando
    await alice.send_json_to({'type': 'add_task', 'title': 'Still here'})
    assert (await alice.receive_json_from())['type'] == 'add_task'

    await alice.disconnect()


@pytest.mark.asyncio
async def test_binary_frames_are_accepted(open_socket):
    alice = await open_socket()

    await alice.send_to(bytes_data=b'{"type": "join", "username": "Alice"}')

    assert (await alice.receive_json_from())['type'] == 'init_state'

    await alice.disconnect()


@pytest.mark.asyncio
async def test_ws_board_path_is_routed(open_socket, engine):
    alice = await open_socket('/ws/board/')
    init = await join(alice, 'Alice')

    assert engine.registry.get_name(init['yourId']) == 'Alice'

    await alice.disconnect()
    assert len(engine.registry) == 0
    assert len(engine.router) == 0


@pytest.mark.asyncio
async def test_anonymous_disconnect_is_silent(open_socket):
    alice = await open_socket()
    await join(alice, 'Alice')
    anon = await open_socket()

    await anon.disconnect()

    assert await alice.receive_nothing()
    await alice.disconnect()


@pytest.mark.asyncio
async def test_project_asgi_application_accepts_board_socket():
    from config.asgi import application

    communicator = WebsocketCommunicator(application, '/', headers=[(b'origin', b'http://localhost')])
    connected, _ = await communicator.connect()
    assert connected

    await communicator.send_json_to({'type': 'join', 'username': 'Probe'})
    assert (await communicator.receive_json_from())['type'] == 'init_state'

    await communicator.disconnect()
