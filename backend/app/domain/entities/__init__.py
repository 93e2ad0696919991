from .collection import (
    CollectionSpec,
    Mutation,
    STUDENT_IDS,
    CERTIFICATES,
    INTERNSHIP_DOMAINS,
    TASKS,
    STUDENT_STATUS,
    COMPLETED_INTERNSHIPS,
)
from .student_status import StudentStatusValue

__all__ = [
    "CollectionSpec",
    "Mutation",
    "STUDENT_IDS",
    "CERTIFICATES",
    "INTERNSHIP_DOMAINS",
    "TASKS",
    "STUDENT_STATUS",
    "COMPLETED_INTERNSHIPS",
    "StudentStatusValue",
]
