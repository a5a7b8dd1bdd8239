from dataclasses import dataclass


@dataclass(frozen=True)
class GameRules:
    min_players: int = 2
    correct_reward: int = 10
    hack_cost: int = 20
    # Inclusive bounds of the random hack roll
    steal_min: int = 5
    steal_max: int = 15

    @classmethod
    def from_config(cls, config) -> 'GameRules':
        return cls(
            min_players=int(config.get('MIN_PLAYERS', cls.min_players)),
            correct_reward=int(config.get('CORRECT_REWARD', cls.correct_reward)),
            hack_cost=int(config.get('HACK_COST', cls.hack_cost)),
            steal_min=int(config.get('HACK_STEAL_MIN', cls.steal_min)),
            steal_max=int(config.get('HACK_STEAL_MAX', cls.steal_max)),
        )
