"""HTTP-level tests for the collection endpoints, backed by a temporary data directory."""

import pytest
from httpx import ASGITransport, AsyncClient

from app.infrastructure.dependencies import get_collection_store
from app.infrastructure.storage.atomic_collection_store import AtomicCollectionStore
from app.infrastructure.storage.json_codec import JsonCollectionCodec
from app.infrastructure.storage.local_file_storage import LocalFileBackingStore
from app.main import app

CERTIFICATE = {
    "certificateNumber": "C1",
    "name": "A",
    "course": "X",
    "duration": "3mo",
    "college": "Y",
    "issuedDate": "2024-01-01",
    "studentId": "S1",
}


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / "data"


@pytest.fixture(autouse=True)
def isolated_store(data_dir):
    store = AtomicCollectionStore(LocalFileBackingStore(str(data_dir)), JsonCollectionCodec())
    app.dependency_overrides[get_collection_store] = lambda: store
    yield store
    app.dependency_overrides.clear()


def _client() -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


# ── Student IDs ──────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_add_and_list_student_ids():
    async with _client() as client:
        first = await client.post("/add-student", json={"studentId": "STU001"})
        again = await client.post("/add-student", json={"studentId": "STU001"})
        listing = await client.get("/api/student-ids")

    assert first.status_code == 200
    assert first.json() == {"message": "Student ID STU001 added successfully!"}
    assert again.status_code == 200
    assert again.json() == {"message": "Student ID STU001 already exists."}
    assert listing.json() == {"validStudentIds": ["STU001"]}


@pytest.mark.asyncio
async def test_add_student_rejects_invalid_id():
    async with _client() as client:
        response = await client.post("/add-student", json={"studentId": "STU-001"})

    assert response.status_code == 400
    assert response.json()["success"] is False


@pytest.mark.asyncio
async def test_delete_student():
    async with _client() as client:
        await client.post("/add-student", json={"studentId": "STU001"})
        deleted = await client.request("DELETE", "/delete-student", json={"studentId": "STU001"})
        missing = await client.request("DELETE", "/delete-student", json={"studentId": "STU001"})

    assert deleted.status_code == 200
    assert deleted.json()["success"] is True
    assert missing.status_code == 404
    assert missing.json()["success"] is False


# ── Certificates ─────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_certificate_lifecycle():
    async with _client() as client:
        added = await client.post("/add-certificate", json=CERTIFICATE)
        listing = await client.get("/api/certificate-numbers")
        missing = await client.request(
            "DELETE", "/delete-certificate", json={"certificateNumber": "C2"}
        )
        renamed = await client.put(
            "/edit-certificate-number",
            json={"oldCertificateNumber": "C1", "newCertificateNumber": "C5"},
        )
        deleted = await client.request(
            "DELETE", "/delete-certificate", json={"certificateNumber": "C5"}
        )

    assert added.json() == {"message": "Certificate for A added successfully!"}
    assert listing.json() == [CERTIFICATE]
    assert missing.status_code == 404
    assert renamed.json() == {"success": True, "message": "Certificate number updated successfully"}
    assert deleted.status_code == 200


@pytest.mark.asyncio
async def test_add_certificate_requires_every_field():
    incomplete = {k: v for k, v in CERTIFICATE.items() if k != "college"}
    async with _client() as client:
        response = await client.post("/add-certificate", json=incomplete)
        empty = await client.post("/add-certificate", json={**CERTIFICATE, "name": ""})

    assert response.status_code == 400
    assert "college" in response.json()["message"]
    assert empty.status_code == 400


@pytest.mark.asyncio
async def test_edit_unknown_certificate_number_is_404():
    async with _client() as client:
        response = await client.put(
            "/edit-certificate-number",
            json={"oldCertificateNumber": "C1", "newCertificateNumber": "C2"},
        )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_save_certificate_number_twice_reports_duplicate():
    body = {"studentId": "S1", "certificateNumber": "C1"}
    async with _client() as client:
        first = await client.post("/save-certificate-number", json=body)
        second = await client.post("/save-certificate-number", json=body)
        listing = await client.get("/api/completed-internships")

    assert first.json()["success"] is True
    assert second.status_code == 200
    assert second.json()["success"] is False
    assert listing.json() == [body]


# ── Internship Domains ───────────────────────────────────────────────

@pytest.mark.asyncio
async def test_internship_domain_lookup():
    async with _client() as client:
        added = await client.post(
            "/api/add-internship-domain",
            json={"internshipDomain": "Web", "studentIds": ["S1"], "pdfFile": "web.pdf"},
        )
        by_name = await client.get("/api/internship-domain", params={"domain": "WEB"})
        by_student = await client.get("/api/internship-domain", params={"studentId": "S1"})
        unknown_student = await client.get("/api/internship-domain", params={"studentId": "S9"})
        no_params = await client.get("/api/internship-domain")
        listing = await client.get("/api/internship-domains")

    assert added.json() == {"success": True, "message": "Internship domain added successfully!"}
    assert by_name.json()["internshipDomain"] == "Web"
    assert [d["internshipDomain"] for d in by_student.json()] == ["Web"]
    assert unknown_student.status_code == 404
    assert no_params.status_code == 400
    assert len(listing.json()) == 1


@pytest.mark.asyncio
async def test_add_internship_domain_requires_every_field():
    async with _client() as client:
        response = await client.post(
            "/api/add-internship-domain", json={"internshipDomain": "Web", "studentIds": []}
        )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_add_student_to_domain():
    async with _client() as client:
        await client.post(
            "/api/add-internship-domain",
            json={"internshipDomain": "Web", "studentIds": ["S1"], "pdfFile": "web.pdf"},
        )
        added = await client.post(
            "/api/add-student-to-domain", json={"internshipDomain": "Web", "studentId": "S2"}
        )
        repeated = await client.post(
            "/api/add-student-to-domain", json={"internshipDomain": "Web", "studentId": "S2"}
        )
        unknown = await client.post(
            "/api/add-student-to-domain", json={"internshipDomain": "ML", "studentId": "S2"}
        )

    assert added.json()["success"] is True
    assert repeated.status_code == 200
    assert repeated.json()["success"] is False
    assert unknown.status_code == 404


# ── Tasks ────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_task_lifecycle():
    task = {"taskId": "T1", "taskName": "Landing page", "assignedTo": "S1", "status": "open"}
    async with _client() as client:
        added = await client.post("/add-task", json=task)
        edited = await client.put(
            "/edit-task", json={"taskId": "T1", "updatedDetails": {"status": "done"}}
        )
        listing = await client.get("/api/tasks")
        deleted = await client.request("DELETE", "/delete-task", json={"taskId": "T1"})
        missing = await client.put(
            "/edit-task", json={"taskId": "T1", "updatedDetails": {"status": "open"}}
        )

    assert added.json() == {"message": "Task Landing page added successfully!"}
    assert edited.json() == {"success": True, "message": "Task updated successfully"}
    assert listing.json() == [{**task, "status": "done"}]
    assert deleted.status_code == 200
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_numeric_field_values_are_stored_as_numbers():
    task = {"taskId": 7, "taskName": "Landing page", "assignedTo": "S1", "status": "open"}
    async with _client() as client:
        certificate = await client.post("/add-certificate", json={**CERTIFICATE, "duration": 3})
        added = await client.post("/add-task", json=task)
        edited = await client.put(
            "/edit-task", json={"taskId": 7, "updatedDetails": {"status": "done"}}
        )
        tasks = await client.get("/api/tasks")
        deleted = await client.request("DELETE", "/delete-task", json={"taskId": 7})
        certificates = await client.get("/api/certificate-numbers")

    assert certificate.status_code == 200
    assert added.status_code == 200
    assert edited.status_code == 200
    assert tasks.json() == [{**task, "status": "done"}]
    assert deleted.status_code == 200
    assert certificates.json()[0]["duration"] == 3


@pytest.mark.asyncio
async def test_numeric_task_id_does_not_match_string_task_id():
    task = {"taskId": "7", "taskName": "x", "assignedTo": "S1", "status": "open"}
    async with _client() as client:
        await client.post("/add-task", json=task)
        missing = await client.request("DELETE", "/delete-task", json={"taskId": 7})
        incomplete = await client.post("/add-task", json={"taskId": 8, "taskName": "y"})

    assert missing.status_code == 404
    assert incomplete.status_code == 400


# ── Student Status ───────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_update_student_status():
    async with _client() as client:
        first = await client.post(
            "/update-student-status", json={"studentId": "S1", "status": "complete"}
        )
        second = await client.post(
            "/update-student-status", json={"studentId": "S1", "status": "incomplete"}
        )
        invalid = await client.post(
            "/update-student-status", json={"studentId": "S1", "status": "pending"}
        )
        listing = await client.get("/api/student-status")

    assert first.json()["success"] is True
    assert second.json()["success"] is True
    assert invalid.status_code == 400
    assert listing.json() == [{"studentId": "S1", "status": "incomplete"}]


# ── Failures ─────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_corrupt_collection_is_500_and_left_untouched(data_dir):
    (data_dir / "tasks.json").write_text("[{oops", encoding="utf-8")

    async with _client() as client:
        listing = await client.get("/api/tasks")
        added = await client.post(
            "/add-task",
            json={"taskId": "T1", "taskName": "x", "assignedTo": "S1", "status": "open"},
        )

    assert listing.status_code == 500
    assert listing.json()["success"] is False
    assert added.status_code == 500
    assert (data_dir / "tasks.json").read_text("utf-8") == "[{oops"


@pytest.mark.asyncio
async def test_non_list_student_ids_is_500_json(data_dir):
    stored = '[{"internshipDomain": "Web", "pdfFile": "x", "studentIds": "S12"}]'
    (data_dir / "internship-domains.json").write_text(stored, encoding="utf-8")

    async with _client() as client:
        lookup = await client.get("/api/internship-domain", params={"studentId": "S1"})
        assigned = await client.post(
            "/api/add-student-to-domain", json={"internshipDomain": "Web", "studentId": "S9"}
        )

    assert lookup.status_code == 500
    assert lookup.json()["success"] is False
    assert assigned.status_code == 500
    assert (data_dir / "internship-domains.json").read_text("utf-8") == stored
