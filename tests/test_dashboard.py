from factories import make_student, make_subject, make_mark
from services.dashboard import compute_dashboard_stats


def test_dashboard_stats():
    students = [make_student("a"), make_student("b"), make_student("c")]
    subjects = [make_subject("math", max_marks=100), make_subject("lab", max_marks=50)]
    marks = [
        make_mark("a", "math", 80),
        make_mark("a", "lab", 25),
        make_mark("b", "math", 65),
    ]

    stats = compute_dashboard_stats(students, subjects, marks)

    assert stats == {
        "total_students": 3,
        "total_subjects": 2,
        "completed_assessments": 2,
        "average_percentage": 65.0,
    }


def test_dashboard_average_skips_unresolvable_marks():
    students = [make_student("a")]
    subjects = [make_subject("math"), make_subject("zero", max_marks=0)]
    marks = [
        make_mark("a", "math", 33),
        make_mark("a", "zero", 0),
        make_mark("a", "gone", 10),
    ]

    stats = compute_dashboard_stats(students, subjects, marks)

    assert stats["average_percentage"] == 33.0


def test_dashboard_stats_when_empty():
    stats = compute_dashboard_stats([], [], [])

    assert stats["average_percentage"] == 0
    assert stats["completed_assessments"] == 0
