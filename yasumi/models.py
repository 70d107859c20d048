"""Data models for resolved holidays."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class HolidayKind(str, Enum):
    """How a holiday came about."""

    NATIONAL = "national"
    SUBSTITUTE = "substitute"
    CITIZENS = "citizens"


@dataclass(frozen=True)
class Holiday:
    """A holiday resolved to a concrete date."""

    date: date
    name: str
    name_en: str
    kind: HolidayKind = HolidayKind.NATIONAL

    def label(self, language: str = "ja") -> str:
        """Name of the holiday in the given language ("ja" or "en")."""
        return self.name_en if language == "en" else self.name

    def as_tuple(self, language: str = "ja") -> tuple[date, str]:
        return (self.date, self.label(language))
