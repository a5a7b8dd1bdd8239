from typing import Dict, List, Union

from cryptoquiz.models import Phase, Player, SessionState
from .effects import Rejection, Transition, broadcast, rejected, send_to


def snapshot(state: SessionState) -> List[Dict[str, Union[str, int]]]:
    return [p.to_dict() for p in state.ordered_players()]


def join(state: SessionState, sid: str, name: str) -> Transition:
    if state.phase != Phase.LOBBY:
        return rejected(Rejection.ALREADY_STARTED, send_to(sid, 'gameAlreadyStarted'))

    existing = state.players.get(sid)
    if existing:
        # Same connection joining twice only renames it
        existing.name = name
    else:
        state.players[sid] = Player(id=sid, name=name)
        state.join_order.append(sid)
    return Transition(effects=[broadcast('lobbyUpdate', snapshot(state))])


def leave(state: SessionState, sid: str) -> Transition:
    """Drop a player. Unknown ids are a no-op.

    The caller is responsible for the full reset when this empties the roster.
    """
    if sid not in state.players:
        return rejected(Rejection.UNKNOWN_PLAYER)
    del state.players[sid]
    state.join_order.remove(sid)
    return Transition(effects=[broadcast('lobbyUpdate', snapshot(state))])
