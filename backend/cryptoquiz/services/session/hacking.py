from random import Random

from cryptoquiz.models import Phase, SessionState
from . import leaderboard
from .effects import Rejection, Transition, broadcast, rejected, send_to
from .rules import GameRules


def hack(state: SessionState, rng: Random, actor_id: str, target_id: str,
         rules: GameRules) -> Transition:
    """Spend crypto to steal a random amount from a target player.

    Checks run in a fixed order and the first failing one wins: not playing,
    unknown actor or target, insufficient funds, already hacked this round.
    """
    if state.phase != Phase.IN_PROGRESS:
        return rejected(Rejection.NOT_PLAYING)
    actor = state.players.get(actor_id)
    target = state.players.get(target_id)
    if not actor or not target:
        return rejected(Rejection.UNKNOWN_PLAYER)
    if actor.crypto < rules.hack_cost:
        return rejected(
            Rejection.INSUFFICIENT_FUNDS,
            send_to(actor_id, 'errorMsg', f'You need at least {rules.hack_cost} crypto to hack.'),
        )
    if actor.round.hacked:
        return rejected(Rejection.ALREADY_ACTED, send_to(actor_id, 'errorMsg', 'You already hacked this round.'))

    actor.crypto -= rules.hack_cost
    actor.round.hacked = True
    stolen = min(target.crypto, rng.randint(rules.steal_min, rules.steal_max))
    target.crypto -= stolen
    actor.crypto += stolen

    return Transition(effects=[
        send_to(target.id, 'hackedBy', actor.name, stolen),
        send_to(actor.id, 'hackResult', stolen, target.name),
        broadcast('leaderboardUpdate', leaderboard.project(state)),
    ])
