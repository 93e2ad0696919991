"""Pydantic DTOs for certificates and saved (completed-internship) certificate numbers."""

from pydantic import Field

from .common import CamelModel, RequiredScalar


class CertificateCreate(CamelModel):
    """Schema for issuing a certificate; every field is required."""

    certificate_number: RequiredScalar = Field(..., examples=["CERT-0001"])
    name: RequiredScalar = Field(..., examples=["Asha Verma"])
    course: RequiredScalar = Field(..., examples=["Web Development"])
    duration: RequiredScalar = Field(..., examples=["3 months", 3])
    college: RequiredScalar = Field(..., examples=["City Engineering College"])
    issued_date: RequiredScalar = Field(..., examples=["2024-01-01"])
    student_id: RequiredScalar = Field(..., examples=["STU2024001"])


class CertificateNumberRename(CamelModel):
    old_certificate_number: RequiredScalar
    new_certificate_number: RequiredScalar


class CertificateDelete(CamelModel):
    certificate_number: RequiredScalar


class CompletedInternshipCreate(CamelModel):
    """Schema for saving the certificate number of a completed internship."""

    student_id: RequiredScalar = Field(..., examples=["STU2024001"])
    certificate_number: RequiredScalar = Field(..., examples=["CERT-0001"])
