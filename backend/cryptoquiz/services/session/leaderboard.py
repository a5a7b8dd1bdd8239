from typing import Dict, List, Union

from cryptoquiz.models import SessionState


def project(state: SessionState) -> List[Dict[str, Union[str, int]]]:
    """Rank players by crypto, highest first.

    sorted() is stable and players are visited in join order, so ties keep
    the order in which players joined.
    """
    ranked = sorted(state.ordered_players(), key=lambda p: p.crypto, reverse=True)
    return [{'name': p.name, 'crypto': p.crypto} for p in ranked]
