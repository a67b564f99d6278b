"""Hash map drills: fruit baskets and a football scores table."""

from __future__ import annotations

import enum
import re
from collections.abc import MutableMapping
from dataclasses import dataclass

_GOALS = re.compile(r"\+?[0-9]+")
_U8_MAX = 255
_NEW_FRUIT_AMOUNT = 5


class Fruit(enum.Enum):
    """Kinds of fruit that can go in a basket."""

    APPLE = enum.auto()
    BANANA = enum.auto()
    MANGO = enum.auto()
    LYCHEE = enum.auto()
    PINEAPPLE = enum.auto()


def default_fruit_basket() -> dict[str, int]:
    """A basket of at least three kinds and at least five pieces of fruit."""
    return {"apple": 3, "mango": 1, "banana": 2}


def fill_fruit_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add five of every kind of fruit missing from the basket, in place.

    Fruit already in the basket is left untouched.
    """
    for fruit in Fruit:
        basket.setdefault(fruit, _NEW_FRUIT_AMOUNT)


@dataclass
class Team:
    """Goals a team has scored and conceded."""

    goals_scored: int = 0
    goals_conceded: int = 0

    def _record(self, scored: int, conceded: int) -> None:
        scored_total = self.goals_scored + scored
        conceded_total = self.goals_conceded + conceded
        if scored_total > _U8_MAX or conceded_total > _U8_MAX:
            raise OverflowError("goal count does not fit in 8 bits")
        self.goals_scored = scored_total
        self.goals_conceded = conceded_total


def _parse_goals(text: str) -> int:
    if not _GOALS.fullmatch(text):
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError(f"goal count too large: {text!r}")
    return value


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of teams from lines "team1,team2,goals1,goals2".

    Fields after the fourth are ignored; a line with fewer fields or a bad
    goal count raises ValueError.
    """
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"expected 4 fields in line {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_goals(fields[2])
        team_2_score = _parse_goals(fields[3])
        scores.setdefault(team_1_name, Team())._record(team_1_score, team_2_score)
        scores.setdefault(team_2_name, Team())._record(team_2_score, team_1_score)
    return scores