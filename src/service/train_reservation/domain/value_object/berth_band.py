"""
Berth Band Value Object

Each coach is split in two halves. The lower half is kept for senior
passengers (age above SENIOR_AGE_THRESHOLD), the upper half for everybody else.
"""

from enum import StrEnum


SENIOR_AGE_THRESHOLD = 45


class BerthBand(StrEnum):
    SENIOR = 'senior'
    GENERAL = 'general'

    @classmethod
    def for_age(cls, age: int) -> 'BerthBand':
        return cls.SENIOR if age > SENIOR_AGE_THRESHOLD else cls.GENERAL

    def seat_range(self, seats_per_coach: int) -> range:
        """1-based seat numbers of this band within one coach"""
        split = seats_per_coach // 2
        if self is BerthBand.SENIOR:
            return range(1, split + 1)
        return range(split + 1, seats_per_coach + 1)
