import logging
import threading
from contextlib import contextmanager
from random import Random
from typing import Optional, Sequence

from cryptoquiz.models import Phase, QuestionItem, SessionState
from . import hacking, leaderboard, roster, rounds
from .effects import Rejection, Transition, broadcast, rejected, send_to
from .rules import GameRules


class SessionController:
    """Owns the session state and applies participant events to it, one at a time.

    Every public transition takes the lock, mutates the state and returns a
    Transition describing what to send. Callers that deliver the effects
    should do it inside `exclusive()` so that outbound order matches the order
    events were applied.
    """

    def __init__(self, bank: Sequence[QuestionItem], rng: Optional[Random] = None,
                 rules: Optional[GameRules] = None, logger: Optional[logging.Logger] = None):
        if not bank:
            raise ValueError('question bank is empty')
        self.bank = tuple(bank)
        self.rng = rng or Random()
        self.rules = rules or GameRules()
        self.logger = logger or logging.getLogger(__name__)
        self.state = SessionState()
        self._lock = threading.RLock()

    @contextmanager
    def exclusive(self):
        with self._lock:
            yield self

    @property
    def phase(self) -> Phase:
        return self.state.phase

    def snapshot(self):
        with self._lock:
            return roster.snapshot(self.state)

    def leaderboard(self):
        with self._lock:
            return leaderboard.project(self.state)

    # ---- transitions ----

    def join(self, sid: str, name: str) -> Transition:
        with self._lock:
            result = roster.join(self.state, sid, name)
            if result.applied:
                self.logger.info(f"[join] sid={sid} name={name!r} players={len(self.state.join_order)}")
            else:
                self.logger.info(f"[join-reject] sid={sid} phase={self.state.phase.value}")
            return result

    def start(self, sid: str) -> Transition:
        with self._lock:
            if self.state.phase != Phase.LOBBY:
                return rejected(Rejection.ALREADY_STARTED)
            if len(self.state.join_order) < self.rules.min_players:
                return rejected(
                    Rejection.NEED_MORE_PLAYERS,
                    send_to(sid, 'errorMsg', f'Need at least {self.rules.min_players} players to start.'),
                )
            self.state.phase = Phase.IN_PROGRESS
            result = Transition(effects=[
                broadcast('gameStarted'),
                rounds.start_round(self.state, self.bank, 0),
            ])
            self.logger.info(
                f"[start] by={sid} players={len(self.state.join_order)} questions={len(self.bank)}"
            )
            return result

    def submit_answer(self, sid: str, choice) -> Transition:
        with self._lock:
            result = rounds.submit_answer(self.state, self.bank, sid, choice, self.rules)
            if result.applied:
                correct = result.events('answerResult')[0].args[0]
                self.logger.info(
                    f"[answer] sid={sid} question={self.state.current_question_index + 1} correct={correct}"
                )
            return result

    def hack_player(self, actor_id: str, target_id: str) -> Transition:
        with self._lock:
            result = hacking.hack(self.state, self.rng, actor_id, target_id, self.rules)
            if result.applied:
                stolen = result.events('hackResult')[0].args[0]
                self.logger.info(f"[hack] actor={actor_id} target={target_id} stolen={stolen}")
            elif result.rejection != Rejection.NOT_PLAYING:
                self.logger.info(f"[hack-reject] actor={actor_id} target={target_id} reason={result.rejection.value}")
            return result

    def request_next(self, sid: str) -> Transition:
        with self._lock:
            prev_index = self.state.current_question_index
            result = rounds.request_next(self.state, self.bank, sid)
            self._log_advance(prev_index, result)
            return result

    def leave(self, sid: str) -> Transition:
        """Remove a disconnected player.

        An empty roster resets the session from any phase. Otherwise the
        remaining players may now all be ready, so advancement is re-checked.
        """
        with self._lock:
            result = roster.leave(self.state, sid)
            if not result.applied:
                return result
            self.logger.info(f"[leave] sid={sid} remaining={len(self.state.join_order)}")
            if not self.state.join_order:
                self.reset()
                return result
            prev_index = self.state.current_question_index
            advanced = rounds.advance_if_ready(self.state, self.bank)
            self._log_advance(prev_index, advanced)
            result.effects.extend(advanced.effects)
            return result

    def reset(self) -> None:
        with self._lock:
            self.state.reset()
            self.logger.info('[reset] session back to empty lobby')

    def _log_advance(self, prev_index: int, result: Transition) -> None:
        if result.events('gameEnded'):
            self.logger.info(f"[finish] game ended after question={prev_index + 1}")
        elif result.events('newQuestion'):
            self.logger.info(
                f"[next_round] advance question {prev_index + 1} -> {self.state.current_question_index + 1}"
            )
