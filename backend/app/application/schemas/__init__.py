from .common import CamelModel, MessageResponse, OperationResponse, RequiredScalar, Scalar
from .student import (
    StudentIdRequest,
    StudentIdsResponse,
    StudentStatusUpdate,
)
from .certificate import (
    CertificateCreate,
    CertificateNumberRename,
    CertificateDelete,
    CompletedInternshipCreate,
)
from .internship_domain import InternshipDomainCreate, DomainStudentAssign
from .task import TaskCreate, TaskUpdate, TaskDelete

__all__ = [
    "CamelModel",
    "MessageResponse",
    "OperationResponse",
    "RequiredScalar",
    "Scalar",
    "StudentIdRequest",
    "StudentIdsResponse",
    "StudentStatusUpdate",
    "CertificateCreate",
    "CertificateNumberRename",
    "CertificateDelete",
    "CompletedInternshipCreate",
    "InternshipDomainCreate",
    "DomainStudentAssign",
    "TaskCreate",
    "TaskUpdate",
    "TaskDelete",
]
