from __future__ import annotations

import threading

import pytest

from attendance_sessions.core.enums import AttendanceStatus
from attendance_sessions.core.exceptions import AlreadyMarkedError, ConflictError, NotActiveError, ValidationError


@pytest.fixture
def cs_session(container, teacher_id, now_ms):
    return container.lifecycle_service.start_session(
        department="CS", duration_minutes=1, teacher_id=teacher_id, now_ms=now_ms
    )


def test_mark_records_present(container, cs_session, enroll, now_ms, store):
    x = enroll("Asha", "R1")

    record = container.marking_service.mark(x, now_ms=now_ms + 1_000)

    assert record.session_id == cs_session
    assert record.status == AttendanceStatus.PRESENT
    assert store.records[(cs_session, x)].status == AttendanceStatus.PRESENT


def test_second_mark_is_already_marked_and_keeps_record(container, cs_session, enroll, now_ms, store):
    x = enroll("Asha", "R1")
    container.marking_service.mark(x, now_ms=now_ms + 1_000)
    before = store.record_writes

    with pytest.raises(AlreadyMarkedError):
        container.marking_service.mark(x, now_ms=now_ms + 2_000)

    assert store.record_writes == before
    assert store.records[(cs_session, x)].status == AttendanceStatus.PRESENT


def test_already_marked_is_a_conflict():
    assert issubclass(AlreadyMarkedError, ConflictError)


def test_mark_without_open_session(container, enroll, now_ms):
    x = enroll("Asha", "R1")
    with pytest.raises(NotActiveError):
        container.marking_service.mark(x, now_ms=now_ms)


def test_mark_after_window_before_sweep_is_rejected(container, cs_session, enroll, now_ms):
    x = enroll("Asha", "R1")
    with pytest.raises(NotActiveError):
        container.marking_service.mark(x, now_ms=now_ms + 60_000)


def test_mark_for_other_department_student(container, cs_session, enroll, now_ms):
    e = enroll("Dev", "E1", department="EE")
    with pytest.raises(NotActiveError):
        container.marking_service.mark(e, now_ms=now_ms + 1_000)


def test_mark_unknown_student(container, cs_session, now_ms):
    with pytest.raises(NotActiveError):
        container.marking_service.mark("not-a-student", now_ms=now_ms + 1_000)


@pytest.mark.parametrize("student_id", [None, "", "   "])
def test_mark_requires_student_id(container, student_id):
    with pytest.raises(ValidationError):
        container.marking_service.mark(student_id)


def test_mark_after_explicit_close_is_rejected(container, teacher_id, cs_session, enroll, now_ms, store):
    x = enroll("Asha", "R1")
    container.lifecycle_service.close_session(cs_session, teacher_id=teacher_id)

    with pytest.raises(NotActiveError):
        container.marking_service.mark(x, now_ms=now_ms + 1_000)
    assert store.records[(cs_session, x)].status == AttendanceStatus.ABSENT


def test_backfill_first_then_mark_reports_already_marked(container, cs_session, enroll, now_ms, store, repos):
    # Sweep's insert committed before the student's: the ABSENT row wins.
    x = enroll("Asha", "R1")
    repos["attendance_repo"].backfill_absent(session_id=cs_session, department="CS")

    with pytest.raises(AlreadyMarkedError):
        container.marking_service.mark(x, now_ms=now_ms + 59_999)
    assert store.records[(cs_session, x)].status == AttendanceStatus.ABSENT


def test_mark_and_sweep_race_leaves_exactly_one_record_each(container, cs_session, enroll, now_ms, store):
    students = [enroll(f"Student {i}", f"R{i:03d}") for i in range(40)]
    outcomes: dict[str, str] = {}
    barrier = threading.Barrier(len(students) + 1)

    def mark(student_id: str) -> None:
        barrier.wait()
        try:
            container.marking_service.mark(student_id, now_ms=now_ms + 59_999)
            outcomes[student_id] = "marked"
        except (AlreadyMarkedError, NotActiveError):
            outcomes[student_id] = "rejected"

    def sweep() -> None:
        barrier.wait()
        container.lifecycle_service.sweep(now_ms=now_ms + 60_000)

    threads = [threading.Thread(target=mark, args=(sid,)) for sid in students]
    threads.append(threading.Thread(target=sweep))
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)

    assert len(store.records) == len(students)
    for sid in students:
        record = store.records[(cs_session, sid)]
        if outcomes[sid] == "marked":
            assert record.status == AttendanceStatus.PRESENT
        else:
            assert record.status == AttendanceStatus.ABSENT


def test_department_match_is_case_sensitive(container, cs_session, enroll, now_ms, store):
    lower = enroll("Chen", "R9", department="cs")

    with pytest.raises(NotActiveError):
        container.marking_service.mark(lower, now_ms=now_ms + 1_000)

    container.lifecycle_service.sweep(now_ms=now_ms + 60_000)
    assert (cs_session, lower) not in store.records
