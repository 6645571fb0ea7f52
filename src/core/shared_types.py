"""
Type definitions used across layers
"""

from enum import StrEnum


class CourtStatus(StrEnum):
    ALLOCATING = "allocating"
    PLAYING = "playing"


class MatchResult(StrEnum):
    TEAM_A = "teamA"
    TEAM_B = "teamB"


class Gender(StrEnum):
    MALE = "M"
    FEMALE = "F"


class Hall(StrEnum):
    """Multi-hall venues label their courts by hall."""

    A = "A"
    B = "B"
