"""Pydantic DTOs for the InternshipDomain feature.

Domain names and student ids stay strings: domains are matched by
case-insensitive name and student ids are alphanumeric identifiers.
"""

from pydantic import Field

from .common import CamelModel, RequiredScalar


class InternshipDomainCreate(CamelModel):
    """Schema for creating an internship domain."""

    internship_domain: str = Field(..., min_length=1, examples=["Data Science"])
    student_ids: list[str] = Field(..., examples=[["STU2024001", "STU2024002"]])
    pdf_file: RequiredScalar = Field(..., examples=["data-science-brief.pdf"])


class DomainStudentAssign(CamelModel):
    """Schema for attaching a student to an existing domain."""

    internship_domain: str = Field(..., min_length=1)
    student_id: str = Field(..., min_length=1)
