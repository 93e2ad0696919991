"""Domain entity for a student's internship completion status."""

from enum import Enum


class StudentStatusValue(str, Enum):
    """Allowed values of a student's internship status."""

    COMPLETE = "complete"
    INCOMPLETE = "incomplete"
