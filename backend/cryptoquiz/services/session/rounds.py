from typing import Sequence

from cryptoquiz.models import Phase, QuestionItem, SessionState
from . import leaderboard
from .effects import Effect, Rejection, Transition, broadcast, rejected, send_to
from .rules import GameRules


def clear_round_flags(state: SessionState) -> None:
    for player in state.ordered_players():
        player.round.clear()


def round_complete(state: SessionState) -> bool:
    """Every joined player has either answered or spent their hack."""
    return all(p.round.answered or p.round.hacked for p in state.ordered_players())


def all_ready(state: SessionState) -> bool:
    players = state.ordered_players()
    return bool(players) and all(p.round.ready for p in players)


def start_round(state: SessionState, bank: Sequence[QuestionItem], index: int) -> Effect:
    if state.phase != Phase.IN_PROGRESS:
        raise ValueError(f"cannot start a round while {state.phase.value}")
    if not 0 <= index < len(bank):
        raise IndexError(f"question index {index} out of range for {len(bank)} questions")
    state.current_question_index = index
    clear_round_flags(state)
    question = bank[index]
    return broadcast('newQuestion', {
        'index': index + 1,
        'total': len(bank),
        'prompt': question.prompt,
        'choices': list(question.choices),
        'leaderboard': leaderboard.project(state),
    })


def submit_answer(state: SessionState, bank: Sequence[QuestionItem], sid: str, choice,
                  rules: GameRules) -> Transition:
    if state.phase != Phase.IN_PROGRESS:
        return rejected(Rejection.NOT_PLAYING)
    player = state.players.get(sid)
    if not player:
        return rejected(Rejection.UNKNOWN_PLAYER)
    # At most one scored answer per round
    if player.round.answered:
        return rejected(Rejection.ALREADY_ACTED)

    player.round.answered = True
    correct = bank[state.current_question_index].is_correct(choice)
    if correct:
        player.crypto += rules.correct_reward
    result = Transition(effects=[send_to(sid, 'answerResult', correct)])

    if round_complete(state):
        result.effects.append(broadcast('leaderboardUpdate', leaderboard.project(state)))
    return result


def advance_if_ready(state: SessionState, bank: Sequence[QuestionItem]) -> Transition:
    """Move to the next question once every joined player is ready.

    Past the last question the game ends: the final leaderboard is broadcast
    and the state is reset to an empty lobby.
    """
    result = Transition()
    if state.phase != Phase.IN_PROGRESS or not all_ready(state):
        return result

    next_index = state.current_question_index + 1
    if next_index < len(bank):
        result.effects.append(start_round(state, bank, next_index))
        return result

    state.phase = Phase.ENDED
    result.effects.append(broadcast('gameEnded', leaderboard.project(state)))
    state.reset()
    return result


def request_next(state: SessionState, bank: Sequence[QuestionItem], sid: str) -> Transition:
    player = state.players.get(sid)
    if not player:
        return rejected(Rejection.UNKNOWN_PLAYER)
    if state.phase != Phase.IN_PROGRESS:
        return rejected(Rejection.NOT_PLAYING)
    player.round.ready = True
    return advance_if_ready(state, bank)
