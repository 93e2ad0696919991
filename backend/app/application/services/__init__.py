from .record_collection import RecordCollection
from .student_id_service import StudentIdService
from .certificate_service import CertificateService
from .completed_internship_service import CompletedInternshipService
from .internship_domain_service import InternshipDomainService
from .task_service import TaskService
from .student_status_service import StudentStatusService

__all__ = [
    "RecordCollection",
    "StudentIdService",
    "CertificateService",
    "CompletedInternshipService",
    "InternshipDomainService",
    "TaskService",
    "StudentStatusService",
]
