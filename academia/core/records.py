"""
Value bundles describing people and their academic performance.

These are pydantic models so that mapping-shaped input (``{"first_name":
..., "birth_day": ...}``) is coerced and checked once, at construction.
"""

from datetime import date
from typing import Any, Dict, Mapping, Union

from pydantic import BaseModel, ConfigDict


DEFAULT_EMAIL = "info@university.com"
DEFAULT_PHONE = "+380955555555"


class ContactInfo(BaseModel):
    email: str = DEFAULT_EMAIL
    phone: str = DEFAULT_PHONE


class PersonInfo(BaseModel):
    """Identity fields merged with contact details.

    Contact details fall back to the university-wide defaults when omitted.
    """
    model_config = ConfigDict(frozen=True)

    first_name: str
    last_name: str
    birth_day: date
    gender: str
    email: str = DEFAULT_EMAIL
    phone: str = DEFAULT_PHONE

    @property
    def contact(self) -> ContactInfo:
        return ContactInfo(email=self.email, phone=self.phone)

    @classmethod
    def coerce(cls, info: Union["PersonInfo", Mapping[str, Any]]) -> "PersonInfo":
        """Accept either a ready ``PersonInfo`` or a mapping of its fields."""
        if isinstance(info, cls):
            return info
        return cls.model_validate(dict(info))


class AcademicPerformance(BaseModel):
    """Credit accumulator and externally maintained grade point average.

    Credits are summed as given by the courses; nothing checks their sign.
    """
    total_credits: Union[int, float] = 0
    gpa: float = 0.0

    def snapshot(self) -> Dict[str, Any]:
        return self.model_dump()
