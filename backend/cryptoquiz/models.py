from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List


class Phase(str, Enum):
    LOBBY = 'lobby'
    IN_PROGRESS = 'in_progress'
    ENDED = 'ended'


@dataclass
class RoundFlags:
    """Per-round actions taken by a player. Cleared at the start of every round."""

    answered: bool = False
    hacked: bool = False
    ready: bool = False

    def clear(self) -> None:
        self.answered = False
        self.hacked = False
        self.ready = False


@dataclass
class Player:
    id: str
    name: str
    crypto: int = 0
    round: RoundFlags = field(default_factory=RoundFlags)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'crypto': self.crypto,
        }


@dataclass(frozen=True)
class QuestionItem:
    prompt: str
    choices: tuple
    correct_choice: str

    def __post_init__(self):
        if len(self.choices) < 2:
            raise ValueError(f"question {self.prompt!r} needs at least 2 choices")
        if self.correct_choice not in self.choices:
            raise ValueError(f"answer {self.correct_choice!r} is not one of the choices for {self.prompt!r}")

    def is_correct(self, choice) -> bool:
        return choice == self.correct_choice


@dataclass
class SessionState:
    """The one game a server process hosts.

    `join_order` always holds exactly the keys of `players`; iteration over
    players goes through it so broadcasts and tie-breaks are deterministic.
    """

    phase: Phase = Phase.LOBBY
    current_question_index: int = 0
    players: Dict[str, Player] = field(default_factory=dict)
    join_order: List[str] = field(default_factory=list)

    def ordered_players(self) -> List[Player]:
        return [self.players[pid] for pid in self.join_order]

    def reset(self) -> None:
        self.phase = Phase.LOBBY
        self.current_question_index = 0
        self.players.clear()
        self.join_order.clear()
