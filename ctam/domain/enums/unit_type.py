"""Kinds of assessed organisational units."""

from enum import Enum


class UnitType(str, Enum):
    HOSPITAL = "hospital"
    HEALTH_OFFICE = "health_office"

    def __str__(self) -> str:
        return self.value
