import random
from typing import Optional
from faker import Faker

from mini_ipl.errors import ConfigurationError
from mini_ipl.models.player import Player, PlayerRole


class PlayerGenerator:
    """Generates fictional players for tournament squads"""

    # Squad composition for the default 5-player roster
    SQUAD_ROLES = [
        PlayerRole.BATSMAN,
        PlayerRole.BATSMAN,
        PlayerRole.ALL_ROUNDER,
        PlayerRole.BOWLER,
        PlayerRole.BOWLER,
    ]

    # Smaller squads still need two batting and two bowling options
    SMALL_SQUAD_ROLES = {
        2: [PlayerRole.ALL_ROUNDER, PlayerRole.ALL_ROUNDER],
        3: [PlayerRole.BATSMAN, PlayerRole.ALL_ROUNDER, PlayerRole.BOWLER],
        4: [PlayerRole.BATSMAN, PlayerRole.BATSMAN, PlayerRole.BOWLER, PlayerRole.BOWLER],
    }

    MIN_AGE = 18
    MAX_AGE = 38

    def __init__(self, seed: Optional[int] = None, locale: str = "en_IN"):
        self._rng = random.Random(seed)
        self._fake = Faker(locale)
        if seed is not None:
            self._fake.seed_instance(seed)

    def _unique_name(self) -> str:
        # Single-word names keep interactive selection simple
        return self._fake.unique.first_name_male()

    def generate_player(self, role: Optional[PlayerRole] = None) -> Player:
        if role is None:
            role = self._rng.choice(list(PlayerRole))
        return Player(
            name=self._unique_name(),
            age=self._rng.randint(self.MIN_AGE, self.MAX_AGE),
            role=role,
        )

    def generate_squad(self, size: Optional[int] = None) -> list[Player]:
        """
        Build a squad that always passes lineup validation.
        Extra slots beyond the standard five are filled with all-rounders.
        """
        if size is None:
            size = len(self.SQUAD_ROLES)
        if size < 2:
            raise ConfigurationError(f"A squad needs at least 2 players, got {size}")
        if size in self.SMALL_SQUAD_ROLES:
            roles = list(self.SMALL_SQUAD_ROLES[size])
        else:
            roles = self.SQUAD_ROLES + [PlayerRole.ALL_ROUNDER] * (size - len(self.SQUAD_ROLES))
        return [self.generate_player(role) for role in roles]
