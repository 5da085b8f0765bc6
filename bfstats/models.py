# bfstats/models.py

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, NamedTuple, Optional, Union

Number = Union[int, float]


class RawStatToken(NamedTuple):
    """One labeled stat widget as read from the page."""

    label: str
    value: Optional[str]


class ClassPlaytime(NamedTuple):
    class_name: Optional[str]
    minutes: int


def compute_kill_death(kills: Number, deaths: Number) -> Number:
    """
    Kill/death ratio rounded to 2 decimals.

    Rounds half-up on the exact value of the quotient, so 1/8 gives 0.13.
    With no deaths the ratio is the kill count itself.
    """
    if deaths > 0:
        ratio = Decimal(kills / deaths).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
        return float(ratio)
    return kills


@dataclass(frozen=True)
class StatisticsRecord:
    """Normalized player statistics extracted from one profile page."""

    kills: Number = 0
    deaths: Number = 0
    wins: Number = 0
    losses: Number = 0
    hs_percent: Number = 0
    assists: Number = 0
    revives: Number = 0
    objectives_captured: Number = 0
    objectives_destroyed: Number = 0
    kill_death: Number = 0
    best_class: Optional[str] = None
    time_played: str = "0h"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the camelCase keys API consumers expect."""
        return {
            'kills': self.kills,
            'deaths': self.deaths,
            'wins': self.wins,
            'losses': self.losses,
            'hsPercent': self.hs_percent,
            'assists': self.assists,
            'revives': self.revives,
            'killDeath': self.kill_death,
            'objectivesCaptured': self.objectives_captured,
            'objectivesDestroyed': self.objectives_destroyed,
            'bestClass': self.best_class,
            'timePlayed': self.time_played,
        }
