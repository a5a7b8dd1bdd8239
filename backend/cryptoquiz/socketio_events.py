from flask import current_app, request

from cryptoquiz import get_session_controller, socketio
from cryptoquiz.services.session import Transition


def _get_sid() -> str:
    # request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _as_text(value) -> str:
    if value is None:
        return ''
    return value if isinstance(value, str) else str(value)


def _deliver(transition: Transition) -> None:
    """Send a transition's effects, private ones to their sid and the rest to everyone."""
    namespace = getattr(request, 'namespace', None) or '/'
    for effect in transition.effects:
        if not effect.args:
            data = ()
        elif len(effect.args) == 1:
            data = (effect.args[0],)
        else:
            # A tuple is sent as separate event arguments
            data = (effect.args,)
        socketio.emit(effect.event, *data, to=effect.to, namespace=namespace)


def _apply(transition_name: str, *args) -> None:
    """Run one controller transition and deliver its effects under the session lock."""
    controller = get_session_controller(current_app)
    with controller.exclusive():
        _deliver(getattr(controller, transition_name)(*args))


def handle_connect(auth=None):
    current_app.logger.info(f"[connect] sid={_get_sid()}")


def handle_disconnect(reason=None):
    current_app.logger.info(f"[disconnect] sid={_get_sid()} reason={reason}")
    _apply('leave', _get_sid())


def handle_join_game(name=None):
    _apply('join', _get_sid(), _as_text(name).strip())


def handle_start_game(*_):
    _apply('start', _get_sid())


def handle_submit_answer(choice=None):
    _apply('submit_answer', _get_sid(), _as_text(choice))


def handle_hack_player(target_id=None):
    # Anything but a string id can never name a player
    if not isinstance(target_id, str):
        target_id = ''
    _apply('hack_player', _get_sid(), target_id)


def handle_next_question_ready(*_):
    _apply('request_next', _get_sid())


def register_socketio_handlers(namespace: str = '/') -> None:
    """Register Socket.IO event handlers on the given namespace."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('joinGame', handle_join_game, namespace=namespace)
    socketio.on_event('startGame', handle_start_game, namespace=namespace)
    socketio.on_event('submitAnswer', handle_submit_answer, namespace=namespace)
    socketio.on_event('hackPlayer', handle_hack_player, namespace=namespace)
    socketio.on_event('nextQuestionReady', handle_next_question_ready, namespace=namespace)
