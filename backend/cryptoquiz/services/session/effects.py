from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class Rejection(str, Enum):
    ALREADY_STARTED = 'already_started'
    NEED_MORE_PLAYERS = 'need_more_players'
    NOT_PLAYING = 'not_playing'
    UNKNOWN_PLAYER = 'unknown_player'
    INSUFFICIENT_FUNDS = 'insufficient_funds'
    ALREADY_ACTED = 'already_acted'


@dataclass(frozen=True)
class Effect:
    """One outbound Socket.IO event.

    `to` is a connection id for a private message, or None to broadcast to
    every participant. `args` are sent as separate event arguments.
    """

    event: str
    args: Tuple = ()
    to: Optional[str] = None

    @property
    def is_broadcast(self) -> bool:
        return self.to is None


def broadcast(event: str, *args) -> Effect:
    return Effect(event=event, args=args)


def send_to(sid: str, event: str, *args) -> Effect:
    return Effect(event=event, args=args, to=sid)


@dataclass
class Transition:
    """Result of applying one inbound event to the session.

    - `rejection`: why the event changed nothing, or None when it was applied.
    - `effects`: notifications to deliver, in order.
    """

    rejection: Optional[Rejection] = None
    effects: List[Effect] = field(default_factory=list)

    @property
    def applied(self) -> bool:
        return self.rejection is None

    def events(self, name: str) -> List[Effect]:
        return [e for e in self.effects if e.event == name]


def rejected(reason: Rejection, *effects: Effect) -> Transition:
    return Transition(rejection=reason, effects=list(effects))
