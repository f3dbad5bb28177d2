"""Resume snapshot model shared by the form layer and the scoring engine.

Field names follow the form layer's camelCase JSON keys through aliases;
Python code uses the snake_case attribute names.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


def is_present(value: Optional[str]) -> bool:
    """Return True when *value* holds something other than whitespace."""
    return bool(value and value.strip())


class _FormModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # The form layer sends null for fields the user never touched.
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class PersonalInfo(_FormModel):
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    linkedin: str = ""
    github: str = ""
    address: str = ""


class Education(_FormModel):
    university: str = ""
    degree: str = ""
    field: str = ""
    start_date: str = ""
    end_date: str = ""
    city: str = ""


class Experience(_FormModel):
    company: str = ""
    title: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    bullet_points: Tuple[str, ...] = ()


class Project(_FormModel):
    name: str = ""
    technologies: Tuple[str, ...] = ()
    bullet_points: Tuple[str, ...] = ()
    link: Optional[str] = None


class Leadership(_FormModel):
    title: str = ""
    organization: str = ""
    start_date: str = ""
    end_date: str = ""
    bullet_points: Tuple[str, ...] = ()


class ResumeSnapshot(_FormModel):
    """Complete, read-only view of the resume at the moment it is scored."""

    personal_info: PersonalInfo = PersonalInfo()
    summary: str = ""
    education: Tuple[Education, ...] = ()
    experience: Tuple[Experience, ...] = ()
    projects: Tuple[Project, ...] = ()
    skills: Tuple[str, ...] = ()
    leadership: Tuple[Leadership, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResumeSnapshot":
        """Validate a camelCase mapping as produced by the form layer.

        Raises :class:`pydantic.ValidationError` when the shape is wrong.
        """
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """Dump back to the camelCase JSON shape."""
        return self.model_dump(mode="json", by_alias=True)
