from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class SpecialistQuery(BaseModel):
    specialty: Optional[str] = Field(
        default=None,
        description="Exact, case-sensitive specialty label (e.g., 'Legal').",
    )
    text: Optional[str] = Field(
        default=None,
        description="Case-insensitive text matched against name or city (e.g., 'york').",
    )

    @field_validator("specialty", "text")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        # Blank form fields mean "don't filter".
        if v is None or not v.strip():
            return None
        return v.strip()


class SpecialistOut(BaseModel):
    id: int
    name: str
    specialty: str
    city: str


class SpecialistFilterOptions(BaseModel):
    specialties: List[str] = Field(default_factory=list)
    cities: List[str] = Field(default_factory=list)
