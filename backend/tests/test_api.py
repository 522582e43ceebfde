"""API tests for the syllabus and todo routers."""
from datetime import date, timedelta

from heybuddy.config import settings


def _upload(client, text: str, filename: str = "syllabus.txt"):
    return client.post(
        "/api/syllabi",
        files={"file": (filename, text.encode("utf-8"), "text/plain")},
    )


def _mmddyyyy(d: date) -> str:
    return d.strftime("%m/%d/%Y")


class TestHealth:
    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["version"] == settings.APP_VERSION

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}


class TestUploadSyllabus:
    def test_upload_extracts_and_stores(self, client):
        year = date.today().year
        text = (
            "Course: Intro to Algorithms\n"
            "Instructor: Dr. Ada Lovelace\n"
            f"Midterm Exam due 03/15/{year}\n"
            "Week 3: readings on recursion\n"
        )
        response = _upload(client, text, "algo.txt")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == 1
        assert body["userId"] == settings.DEFAULT_USER_ID
        assert body["filename"] == "algo.txt"
        assert body["parsedContent"]["courseInfo"] == {
            "name": "Intro to Algorithms",
            "instructor": "Dr. Ada Lovelace",
            "schedule": "",
        }
        assert body["parsedContent"]["assignments"] == [f"Midterm Exam due 03/15/{year}"]
        assert body["parsedContent"]["deadlines"] == [
            {"task": f"Midterm Exam due 03/15/{year}", "date": f"{year}-03-15"}
        ]

    def test_filename_is_course_name_fallback(self, client):
        response = _upload(client, "Nothing structured here.\n", "mystery.txt")
        assert response.status_code == 200
        assert response.json()["parsedContent"] == {
            "courseInfo": {"name": "mystery.txt", "instructor": "", "schedule": ""},
            "assignments": [],
            "deadlines": [],
        }

    def test_binary_upload_rejected(self, client):
        response = client.post(
            "/api/syllabi",
            files={"file": ("syllabus.pdf", b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\n", "application/pdf")},
        )
        assert response.status_code == 400
        assert "syllabus.pdf" in response.json()["detail"]
        assert client.get("/api/syllabi").json() == []

    def test_missing_file_rejected(self, client):
        response = client.post("/api/syllabi")
        assert response.status_code == 400
        assert response.json()["detail"] == "No file uploaded"

    def test_oversized_upload_rejected(self, client, monkeypatch):
        monkeypatch.setattr(settings, "MAX_UPLOAD_BYTES", 10)
        response = _upload(client, "Course: Far too long for the limit\n")
        assert response.status_code == 413

    def test_upload_at_limit_accepted_one_byte_over_rejected(self, client, monkeypatch):
        text = "Course: Exact fit\n"
        monkeypatch.setattr(settings, "MAX_UPLOAD_BYTES", len(text.encode("utf-8")))

        accepted = _upload(client, text)
        assert accepted.status_code == 200
        assert accepted.json()["parsedContent"]["courseInfo"]["name"] == "Exact fit"

        rejected = _upload(client, text + "!")
        assert rejected.status_code == 413
        assert len(client.get("/api/syllabi").json()) == 1


class TestGetSyllabi:
    def test_list_and_get(self, client):
        _upload(client, "Course: First\n", "a.txt")
        _upload(client, "Course: Second\n", "b.txt")

        listed = client.get("/api/syllabi").json()
        assert [s["filename"] for s in listed] == ["a.txt", "b.txt"]

        second = client.get(f"/api/syllabi/{listed[1]['id']}").json()
        assert second["parsedContent"]["courseInfo"]["name"] == "Second"

    def test_get_missing_syllabus(self, client):
        response = client.get("/api/syllabi/999")
        assert response.status_code == 404
        assert response.json()["detail"] == "Syllabus not found"


class TestSchedule:
    def test_schedule_ranks_upcoming_deadlines(self, client):
        today = date.today()
        soon = today + timedelta(days=3)
        later = today + timedelta(days=10)
        text = (
            f"Project proposal due {_mmddyyyy(later)}\n"
            f"Homework 1 due {_mmddyyyy(soon)}\n"
        )
        syllabus_id = _upload(client, text).json()["id"]

        response = client.get(f"/api/syllabi/{syllabus_id}/schedule")

        assert response.status_code == 200
        body = response.json()
        assert body["syllabusId"] == syllabus_id
        assert body["tasks"] == [
            {"task": f"Homework 1 due {_mmddyyyy(soon)}", "dueDate": soon.isoformat(), "priority": "high"},
            {"task": f"Project proposal due {_mmddyyyy(later)}", "dueDate": later.isoformat(), "priority": "medium"},
        ]

    def test_schedule_for_missing_syllabus(self, client):
        assert client.get("/api/syllabi/42/schedule").status_code == 404


class TestTodos:
    def test_create_list_and_complete(self, client):
        syllabus_id = _upload(client, "Course: Biology\n").json()["id"]

        created = client.post("/api/todos", json={
            "syllabusId": syllabus_id,
            "task": "Read chapter 4",
            "dueDate": "2025-03-15T00:00:00",
        })
        assert created.status_code == 201
        todo = created.json()
        assert todo["completed"] is False
        assert todo["syllabusId"] == syllabus_id
        assert todo["userId"] == settings.DEFAULT_USER_ID

        listed = client.get("/api/todos").json()
        assert [t["task"] for t in listed] == ["Read chapter 4"]

        updated = client.patch(f"/api/todos/{todo['id']}", json={"completed": True})
        assert updated.status_code == 200
        assert updated.json()["completed"] is True

    def test_todos_sorted_by_due_date(self, client):
        syllabus_id = _upload(client, "Course: Chemistry\n").json()["id"]
        for task, due in [("Later", "2025-05-01T00:00:00"), ("Sooner", "2025-04-01T00:00:00")]:
            client.post("/api/todos", json={"syllabusId": syllabus_id, "task": task, "dueDate": due})

        assert [t["task"] for t in client.get("/api/todos").json()] == ["Sooner", "Later"]

    def test_create_for_missing_syllabus(self, client):
        response = client.post("/api/todos", json={
            "syllabusId": 123,
            "task": "Orphan",
            "dueDate": "2025-03-15T00:00:00",
        })
        assert response.status_code == 404

    def test_invalid_todo_payload(self, client):
        response = client.post("/api/todos", json={"task": "No syllabus"})
        assert response.status_code == 422

    def test_update_missing_todo(self, client):
        response = client.patch("/api/todos/999", json={"completed": True})
        assert response.status_code == 404
        assert response.json()["detail"] == "Todo not found"
