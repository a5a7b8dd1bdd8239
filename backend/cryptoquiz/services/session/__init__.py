"""Quiz session domain: roster, rounds, hacking and leaderboard.

Everything here is transport agnostic. Transitions mutate a SessionState and
return the notifications to send; the Socket.IO layer delivers them.
"""

from .controller import SessionController
from .effects import Effect, Rejection, Transition
from .rules import GameRules

__all__ = ['SessionController', 'Effect', 'Rejection', 'Transition', 'GameRules']
