from datetime import date

from school_dashboard.attendance.model import AttendanceRecord
from school_dashboard.core.enums import AttendanceBand, AttendanceStatus
from school_dashboard.core.exceptions import MalformedDateError
from school_dashboard.core.issues import IssueCollector
from school_dashboard.statistics.attendance_stats import (
    attendance_summary,
    average_attendance,
    class_attendance_summary,
    classes_attendance_on,
    first_per_day,
    report_totals,
    student_attendance_report,
)
from school_dashboard.statistics.percent import attendance_band, percentage


def _rec(rid, sid, day, status):
    return AttendanceRecord(record_id=rid, student_id=sid, date=day, status=AttendanceStatus(status))


def test_summary_present_absent_present():
    records = [
        _rec("r1", "s", "2024-01-01", "present"),
        _rec("r2", "s", "2024-01-02", "absent"),
        _rec("r3", "s", "2024-01-03", "present"),
    ]

    summary = attendance_summary(records, "s", date(2024, 1, 1), date(2024, 1, 3))

    assert (summary.present, summary.absent, summary.total, summary.percentage) == (2, 1, 3, 67)


def test_summary_without_records_is_zero():
    summary = attendance_summary([], "s", date(2024, 1, 1), date(2024, 1, 31))

    assert summary.total == 0
    assert summary.percentage == 0


def test_holiday_and_no_record_stay_out_of_total():
    records = [
        _rec("r1", "s", "2024-01-01", "present"),
        _rec("r2", "s", "2024-01-02", "holiday"),
        _rec("r3", "s", "2024-01-03", "no-record"),
    ]

    summary = attendance_summary(records, "s", date(2024, 1, 1), date(2024, 1, 3))

    assert summary.total == 1
    assert summary.percentage == 100


def test_summary_respects_range_and_student(attendance):
    summary = attendance_summary(attendance, "s_1", date(2024, 3, 13), date(2024, 3, 14))

    assert (summary.present, summary.absent, summary.late, summary.total) == (0, 1, 1, 2)
    assert summary.percentage == 0
    assert summary.band == AttendanceBand.POOR


def test_duplicate_day_first_record_wins(attendance):
    kept = first_per_day(attendance)

    s2 = [r for r in kept if r.student_id == "s_2"]
    assert [r.record_id for r in s2] == ["a_6"]


def test_class_summary_joins_students_to_todays_record(attendance, students):
    summary = class_attendance_summary(attendance, students, "class_1", date(2024, 3, 15))

    assert summary.total == 2
    assert (summary.present, summary.absent, summary.late) == (1, 1, 0)
    assert summary.percentage == 50
    assert {r.student.student_id: r.status for r in summary.rows} == {
        "s_1": AttendanceStatus.PRESENT,
        "s_2": AttendanceStatus.ABSENT,
    }


def test_class_summary_marks_missing_students(students):
    summary = class_attendance_summary([], students, "class_1", date(2024, 3, 15))

    assert summary.not_marked == 2
    assert all(r.status == AttendanceStatus.NO_RECORD for r in summary.rows)
    assert summary.percentage == 0


def test_classes_attendance_on_covers_every_class(attendance, students):
    by_class = {c.class_id: c.percentage for c in classes_attendance_on(attendance, students, date(2024, 3, 15))}

    assert by_class == {"class_1": 50, "class_2": 100, "class_3": 0}


def test_student_report_and_totals(attendance, students):
    class_1 = [s for s in students if s.class_id == "class_1"]

    rows = student_attendance_report(attendance, class_1, date(2024, 3, 11), date(2024, 3, 15))
    totals = report_totals(rows)

    assert [r.summary.percentage for r in rows] == [60, 0]
    assert totals.students == 2
    assert totals.average_percentage == 30
    assert (totals.present, totals.absent, totals.late) == (3, 2, 1)
    assert totals.excellent_count == 0
    assert totals.poor_count == 2


def test_report_totals_empty():
    totals = report_totals([])

    assert totals.students == 0
    assert totals.average_percentage == 0


def test_average_attendance_is_mean_of_student_ratios(attendance):
    # s_1 3/5, s_2 0/1, s_3 1/1, s_4 0/1
    assert average_attendance(attendance, date(2024, 3, 1), date(2024, 3, 15)) == 40


def test_malformed_record_is_collected_not_raised():
    issues = IssueCollector()
    records = [_rec("ok", "s", "2024-01-01", "present"), _rec("bad", "s", "01/02/2024", "absent")]

    summary = attendance_summary(records, "s", date(2024, 1, 1), date(2024, 1, 31), issues=issues)

    assert summary.total == 1
    assert [i.item_id for i in issues.of_type(MalformedDateError)] == ["bad"]


def test_percentage_rounds_half_up_and_stays_in_bounds():
    assert percentage(1, 8) == 13
    assert percentage(1, 200) == 1
    assert percentage(0, 0) == 0
    assert percentage(5, 5) == 100
    assert percentage(7, 5) == 100


def test_attendance_band_thresholds():
    assert attendance_band(90) == AttendanceBand.EXCELLENT
    assert attendance_band(89) == AttendanceBand.GOOD
    assert attendance_band(70) == AttendanceBand.FAIR
    assert attendance_band(69) == AttendanceBand.POOR


def test_same_day_written_two_ways_counts_once():
    records = [
        _rec("a", "s", " 2024-01-01", "present"),
        _rec("b", "s", "2024-01-01", "absent"),
        _rec("c", "s", "2024-01-01T00:00:00Z", "late"),
    ]

    summary = attendance_summary(records, "s", date(2024, 1, 1), date(2024, 1, 1))

    assert (summary.present, summary.absent, summary.late, summary.total) == (1, 0, 0, 1)
    assert [r.record_id for r in first_per_day(records)] == ["a"]
