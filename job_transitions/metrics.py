"""
The five relatedness metrics combined into a transition distance.
"""

from __future__ import annotations

from enum import Enum


class Metric(str, Enum):
    """Fixed metric identifiers, in the order they are stacked and combined."""

    SKILLS = "skills"
    ABILITY = "ability"
    AGE = "age"
    INCOME = "income"
    GENDER = "gender"

    @property
    def table_name(self) -> str:
        """File stem of the relatedness table holding this metric."""
        return TABLE_NAMES[self]


TABLE_NAMES = {
    Metric.SKILLS: "Relatedness skills",
    Metric.ABILITY: "Relatedness ability",
    Metric.AGE: "Relatedness average age",
    Metric.INCOME: "Relatedness income",
    Metric.GENDER: "Relatedness gender",
}

METRICS = tuple(Metric)
