"""Enumerations shared by catalog entities."""

from enum import Enum


class Difficulty(str, Enum):
    """Training difficulty level."""

    BEGINNER = "BEGINNER"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"


class Category(str, Enum):
    """Training category for exercises and workouts."""

    STRENGTH = "STRENGTH"
    CARDIO = "CARDIO"
    FLEXIBILITY = "FLEXIBILITY"
    BALANCE = "BALANCE"
    HIIT = "HIIT"
    MOBILITY = "MOBILITY"


class EquipmentCategory(str, Enum):
    MACHINE = "MACHINE"
    FREE_WEIGHT = "FREE_WEIGHT"
    CARDIO = "CARDIO"
    ACCESSORY = "ACCESSORY"
    BODYWEIGHT = "BODYWEIGHT"


class EquipmentStatus(str, Enum):
    AVAILABLE = "AVAILABLE"
    IN_MAINTENANCE = "IN_MAINTENANCE"
    OUT_OF_ORDER = "OUT_OF_ORDER"
