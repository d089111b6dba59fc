import json
from datetime import datetime, timedelta, timezone

from models.student import Student, dump_students, load_students


def _student(**overrides):
    created = datetime(2026, 1, 2, 3, 4, 5, 678901, tzinfo=timezone.utc)
    fields = {
        "id": "student_1_1_abc",
        "name": "Grace Hopper",
        "email": "grace@navy.mil",
        "enrolledCourse": "1",
        "profileImage": None,
        "createdAt": created,
        "updatedAt": created + timedelta(seconds=3),
    }
    fields.update(overrides)
    return Student(**fields)


def test_round_trip_preserves_records_and_timestamps():
    students = [_student(), _student(id="student_2_2_def", enrolledCourse="does-not-exist")]
    restored = load_students(dump_students(students))
    assert restored == students
    assert restored[0].createdAt == students[0].createdAt
    assert restored[0].createdAt.microsecond == 678901


def test_persisted_form_uses_iso_timestamps_and_all_fields():
    payload = json.loads(dump_students([_student()]))
    assert set(payload[0]) == {"id", "name", "email", "enrolledCourse", "profileImage", "createdAt", "updatedAt"}
    assert datetime.fromisoformat(payload[0]["createdAt"].replace("Z", "+00:00")) == _student().createdAt


def test_missing_slot_is_empty_collection():
    assert load_students(None) == []
    assert load_students("") == []


def test_corrupt_content_is_empty_collection():
    assert load_students("{not json") == []
    assert load_students('{"students": []}') == []
    assert load_students('[{"id": "x"}]') == []


def test_naive_timestamps_are_read_as_utc():
    text = json.dumps([{
        "id": "s1",
        "name": "Old Record",
        "email": "old@example.com",
        "enrolledCourse": "3",
        "createdAt": "2024-05-01T10:00:00",
        "updatedAt": "2024-05-01T10:00:00",
    }])
    [student] = load_students(text)
    assert student.createdAt.tzinfo is not None
    assert student.createdAt == datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)
