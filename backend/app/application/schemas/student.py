"""Pydantic DTOs for the student id registry and student status features."""

from pydantic import Field

from .common import CamelModel


class StudentIdRequest(CamelModel):
    """Body of add-student and delete-student requests.

    Format is checked by the service so that the alphanumeric rule lives
    in one place.
    """

    student_id: str = Field(..., examples=["STU2024001"])


class StudentIdsResponse(CamelModel):
    """The full registry document."""

    valid_student_ids: list[str]


class StudentStatusUpdate(CamelModel):
    """Body of update-student-status; status must be ``complete`` or ``incomplete``."""

    student_id: str = Field(..., min_length=1, examples=["STU2024001"])
    status: str = Field(..., examples=["complete"])
