from cryptoquiz import get_session_controller
from cryptoquiz.models import Phase


def _events(sio_client, name):
    return [pkt['args'] for pkt in sio_client.get_received() if pkt['name'] == name]


def _names(received):
    return [pkt['name'] for pkt in received]


def _join_two(sio_factory):
    alice = sio_factory()
    bob = sio_factory()
    alice.emit('joinGame', 'Alice')
    bob.emit('joinGame', 'Bob')
    alice.get_received()
    bob.get_received()
    return alice, bob


def test_join_broadcasts_lobby(sio_factory):
    alice = sio_factory()
    bob = sio_factory()
    alice.emit('joinGame', 'Alice')
    bob.emit('joinGame', 'Bob')

    lobby = _events(alice, 'lobbyUpdate')
    assert len(lobby) == 2
    [players] = lobby[-1]
    assert [p['name'] for p in players] == ['Alice', 'Bob']
    assert all(p['crypto'] == 0 for p in players)
    assert _events(bob, 'lobbyUpdate')[-1] == [players]


def test_start_requires_two_players(flask_app, sio_factory):
    alice = sio_factory()
    alice.emit('joinGame', 'Alice')
    alice.get_received()
    alice.emit('startGame')
    assert _events(alice, 'errorMsg') == [['Need at least 2 players to start.']]
    assert get_session_controller(flask_app).phase == Phase.LOBBY


def test_start_sends_question_to_everyone(sio_factory):
    alice, bob = _join_two(sio_factory)
    alice.emit('startGame')
    for sio_client in (alice, bob):
        received = sio_client.get_received()
        assert _names(received) == ['gameStarted', 'newQuestion']
        payload = received[1]['args'][0]
        assert payload['index'] == 1
        assert payload['total'] == 2
        assert payload['prompt'] == 'What is 0.6 × 0.2?'


def test_late_join_is_told_game_started(sio_factory):
    alice, bob = _join_two(sio_factory)
    alice.emit('startGame')
    late = sio_factory()
    late.emit('joinGame', 'Cara')
    assert _names(late.get_received()) == ['gameAlreadyStarted']


def test_answers_are_private_and_leaderboard_follows(sio_factory):
    alice, bob = _join_two(sio_factory)
    alice.emit('startGame')
    alice.get_received()
    bob.get_received()

    alice.emit('submitAnswer', '0.12')
    assert _events(alice, 'answerResult') == [[True]]
    assert bob.get_received() == []

    bob.emit('submitAnswer', '0.08')
    bob_received = bob.get_received()
    assert [pkt['args'] for pkt in bob_received if pkt['name'] == 'answerResult'] == [[False]]
    board = [pkt['args'][0] for pkt in bob_received if pkt['name'] == 'leaderboardUpdate']
    assert board == [[{'name': 'Alice', 'crypto': 10}, {'name': 'Bob', 'crypto': 0}]]
    assert _events(alice, 'leaderboardUpdate') == [[board[0]]]


def test_full_game_ends_and_resets(flask_app, sio_factory):
    alice, bob = _join_two(sio_factory)
    alice.emit('startGame')
    for _ in range(2):
        alice.emit('nextQuestionReady')
        bob.emit('nextQuestionReady')
    ended = _events(bob, 'gameEnded')
    assert ended == [[[{'name': 'Alice', 'crypto': 0}, {'name': 'Bob', 'crypto': 0}]]]
    controller = get_session_controller(flask_app)
    assert controller.phase == Phase.LOBBY
    assert controller.snapshot() == []


def test_hack_over_socket(flask_app, sio_factory):
    alice, bob = _join_two(sio_factory)
    alice.emit('startGame')
    controller = get_session_controller(flask_app)
    alice_id, bob_id = controller.state.join_order
    controller.state.players[alice_id].crypto = 100
    controller.state.players[bob_id].crypto = 10
    alice.get_received()
    bob.get_received()

    alice.emit('hackPlayer', bob_id)
    alice_received = alice.get_received()
    bob_received = bob.get_received()
    assert [pkt['args'] for pkt in alice_received if pkt['name'] == 'hackResult'] == [[8, 'Bob']]
    assert [pkt['args'] for pkt in bob_received if pkt['name'] == 'hackedBy'] == [['Alice', 8]]
    assert 'leaderboardUpdate' in _names(alice_received)
    assert 'leaderboardUpdate' in _names(bob_received)

    alice.emit('hackPlayer', bob_id)
    assert _events(alice, 'errorMsg') == [['You already hacked this round.']]


def test_malformed_hack_target_is_ignored(flask_app, sio_factory):
    alice, bob = _join_two(sio_factory)
    controller = get_session_controller(flask_app)
    controller.state.players[controller.state.join_order[0]].crypto = 50
    alice.emit('hackPlayer', 42)
    assert alice.get_received() == []

    alice.emit('startGame')
    alice.get_received()
    bob.get_received()
    alice.emit('hackPlayer', {'id': 'nope'})
    alice.emit('hackPlayer', 42)
    assert alice.get_received() == []
    assert bob.get_received() == []


def test_disconnect_updates_lobby_and_last_one_resets(flask_app, sio_factory):
    alice, bob = _join_two(sio_factory)
    alice.emit('startGame')
    bob.get_received()

    alice.disconnect()
    lobby = _events(bob, 'lobbyUpdate')
    assert [[p['name'] for p in args[0]] for args in lobby] == [['Bob']]

    bob.disconnect()
    controller = get_session_controller(flask_app)
    assert controller.phase == Phase.LOBBY
    assert controller.state.join_order == []
