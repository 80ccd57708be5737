"""Pydantic schemas for static sun-sign profiles."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

ZodiacSign = Literal[
    "Aries",
    "Taurus",
    "Gemini",
    "Cancer",
    "Leo",
    "Virgo",
    "Libra",
    "Scorpio",
    "Sagittarius",
    "Capricorn",
    "Aquarius",
    "Pisces",
]
Element = Literal["Fire", "Earth", "Air", "Water"]
Modality = Literal["Cardinal", "Fixed", "Mutable"]
Sensitivity = Literal["High", "Medium", "Low"]


class DateRange(BaseModel):
    """Inclusive month-day range, ``MM-DD`` on both ends."""

    model_config = ConfigDict(frozen=True)

    start: str
    end: str

    @field_validator("start", "end")
    @classmethod
    def validate_month_day(cls, value: str) -> str:
        parts = value.split("-")
        if len(parts) != 2 or not all(len(p) == 2 and p.isdigit() for p in parts):
            raise ValueError(f"Expected zero-padded MM-DD, got '{value}'")
        month, day = int(parts[0]), int(parts[1])
        if not (1 <= month <= 12 and 1 <= day <= 31):
            raise ValueError(f"Month-day out of range: '{value}'")
        return value

    @property
    def wraps_year(self) -> bool:
        return self.start > self.end

    def contains(self, month_day: str) -> bool:
        if self.wraps_year:
            return month_day >= self.start or month_day <= self.end
        return self.start <= month_day <= self.end


class ZodiacTraits(BaseModel):
    model_config = ConfigDict(frozen=True)

    test_taking_style: list[str] = Field(default_factory=list)
    strengths: list[str] = Field(default_factory=list)
    challenges: list[str] = Field(default_factory=list)
    mercury_rx_sensitivity: Sensitivity
    optimal_moon_phases: list[str] = Field(default_factory=list)
    beneficial_planets: list[str] = Field(default_factory=list)
    challenging_planets: list[str] = Field(default_factory=list)


class PersonalizedAdvice(BaseModel):
    model_config = ConfigDict(frozen=True)

    preparation: list[str] = Field(default_factory=list)
    test_day: list[str] = Field(default_factory=list)
    recovery: list[str] = Field(default_factory=list)


class ZodiacProfile(BaseModel):
    """Static test-taking profile for one sun sign."""

    model_config = ConfigDict(frozen=True)

    sign: ZodiacSign
    element: Element
    modality: Modality
    date_range: DateRange
    traits: ZodiacTraits
    personalized_advice: PersonalizedAdvice


class ZodiacProfileFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    profiles: dict[str, ZodiacProfile]
