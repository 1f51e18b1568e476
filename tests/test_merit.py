from factories import make_student, make_subject, make_mark
from services.merit import compute_merit_list, calculate_percentage


def test_ranks_students_by_percentage():
    students = [
        make_student("a", name="A"),
        make_student("b", name="B"),
        make_student("c", name="C"),
    ]
    subjects = [make_subject("math")]
    marks = [
        make_mark("a", "math", 60),
        make_mark("b", "math", 90),
        make_mark("c", "math", 45),
    ]

    entries = compute_merit_list(students, subjects, marks)

    assert [e.student.name for e in entries] == ["B", "A", "C"]
    assert [e.rank for e in entries] == [1, 2, 3]
    assert [e.percentage for e in entries] == [90.0, 60.0, 45.0]


def test_totals_sum_marks_and_max_marks_across_subjects():
    students = [make_student("a")]
    subjects = [make_subject("math", max_marks=100), make_subject("lab", max_marks=50)]
    marks = [make_mark("a", "math", 80), make_mark("a", "lab", 40)]

    entry = compute_merit_list(students, subjects, marks)[0]

    assert entry.total_marks == 120
    assert entry.max_marks == 150
    assert entry.percentage == 80.0
    assert [s.subject.id for s in entry.subjects] == ["math", "lab"]
    assert [s.marks for s in entry.subjects] == [80, 40]


def test_percentage_is_not_rounded_internally():
    students = [make_student("a")]
    subjects = [make_subject("s1", max_marks=3)]
    marks = [make_mark("a", "s1", 2)]

    entry = compute_merit_list(students, subjects, marks)[0]

    assert entry.percentage == 200 / 3


def test_students_without_marks_are_excluded():
    students = [make_student("a"), make_student("b")]
    subjects = [make_subject("math")]
    marks = [make_mark("a", "math", 50)]

    entries = compute_merit_list(students, subjects, marks)

    assert [e.student.id for e in entries] == ["a"]


def test_only_marks_for_the_students_current_semester_count():
    students = [make_student("a", semester="Semester 2")]
    subjects = [make_subject("old", semester="Semester 1"), make_subject("new", semester="Semester 2")]
    marks = [
        make_mark("a", "old", 10, semester="Semester 1"),
        make_mark("a", "new", 70, semester="Semester 2"),
    ]

    entry = compute_merit_list(students, subjects, marks)[0]

    assert entry.total_marks == 70
    assert entry.max_marks == 100


def test_mark_semester_wins_over_subject_semester():
    # subject is tagged for another semester but the mark says Semester 1
    students = [make_student("a", semester="Semester 1")]
    subjects = [make_subject("x", semester="Semester 3")]
    marks = [make_mark("a", "x", 55, semester="Semester 1")]

    entry = compute_merit_list(students, subjects, marks)[0]

    assert entry.total_marks == 55


def test_student_with_marks_only_for_old_semester_is_excluded():
    students = [make_student("a", semester="Semester 2")]
    subjects = [make_subject("math")]
    marks = [make_mark("a", "math", 99, semester="Semester 1")]

    assert compute_merit_list(students, subjects, marks) == []


def test_dangling_subject_mark_is_skipped():
    students = [make_student("d"), make_student("e")]
    subjects = [make_subject("math")]
    marks = [
        make_mark("d", "deleted-subject", 90),
        make_mark("d", "math", 40),
        make_mark("e", "math", 50),
    ]

    entries = {e.student.id: e for e in compute_merit_list(students, subjects, marks)}

    assert entries["d"].total_marks == 40
    assert entries["d"].max_marks == 100
    assert len(entries["d"].subjects) == 1


def test_student_with_only_dangling_marks_is_excluded():
    students = [make_student("d"), make_student("e")]
    subjects = [make_subject("math")]
    marks = [make_mark("d", "deleted-subject", 90), make_mark("e", "math", 50)]

    entries = compute_merit_list(students, subjects, marks)

    assert [e.student.id for e in entries] == ["e"]


def test_marks_for_unknown_students_are_ignored():
    students = [make_student("a")]
    subjects = [make_subject("math")]
    marks = [make_mark("ghost", "math", 100), make_mark("a", "math", 30)]

    entries = compute_merit_list(students, subjects, marks)

    assert len(entries) == 1
    assert entries[0].rank == 1


def test_zero_max_marks_gives_zero_percent():
    students = [make_student("a")]
    subjects = [make_subject("ungraded", max_marks=0)]
    marks = [make_mark("a", "ungraded", 0)]

    entry = compute_merit_list(students, subjects, marks)[0]

    assert entry.max_marks == 0
    assert entry.percentage == 0
    assert calculate_percentage(5, 0) == 0


def test_ties_keep_input_order_and_get_sequential_ranks():
    students = [make_student("x", name="Xavier"), make_student("y", name="Yara"), make_student("z", name="Zoe")]
    subjects = [make_subject("math")]
    marks = [make_mark("x", "math", 70), make_mark("y", "math", 80), make_mark("z", "math", 70)]

    entries = compute_merit_list(students, subjects, marks)

    assert [e.student.id for e in entries] == ["y", "x", "z"]
    assert [e.rank for e in entries] == [1, 2, 3]


def test_ranking_is_global_across_semesters():
    students = [
        make_student("a", semester="Semester 1"),
        make_student("b", semester="Semester 2"),
    ]
    subjects = [make_subject("s1", semester="Semester 1"), make_subject("s2", semester="Semester 2")]
    marks = [
        make_mark("a", "s1", 50, semester="Semester 1"),
        make_mark("b", "s2", 75, semester="Semester 2"),
    ]

    entries = compute_merit_list(students, subjects, marks)

    assert [(e.student.id, e.rank) for e in entries] == [("b", 1), ("a", 2)]


def test_empty_input_gives_empty_list():
    assert compute_merit_list([], [], []) == []
    assert compute_merit_list([], [make_subject("math")], []) == []


def test_sorted_bounded_and_repeatable():
    students = [make_student(str(i)) for i in range(12)]
    subjects = [make_subject("a", max_marks=40), make_subject("b", max_marks=60)]
    marks = []
    for i in range(12):
        marks.append(make_mark(str(i), "a", (i * 7) % 41))
        if i % 3:
            marks.append(make_mark(str(i), "b", (i * 11) % 61))

    first = compute_merit_list(students, subjects, marks)
    second = compute_merit_list(students, subjects, marks)

    assert first == second
    percentages = [e.percentage for e in first]
    assert percentages == sorted(percentages, reverse=True)
    assert [e.rank for e in first] == list(range(1, len(first) + 1))
    for entry in first:
        assert 0 <= entry.percentage <= 100


def test_inputs_are_not_mutated():
    students = [make_student("a"), make_student("b")]
    subjects = [make_subject("math")]
    marks = [make_mark("a", "math", 10), make_mark("b", "math", 20)]
    snapshot = (list(students), list(subjects), list(marks))

    compute_merit_list(students, subjects, marks)

    assert (students, subjects, marks) == snapshot


def test_to_dict_rounds_percentage_for_display():
    students = [make_student("a")]
    subjects = [make_subject("s1", max_marks=3)]
    marks = [make_mark("a", "s1", 2)]

    data = compute_merit_list(students, subjects, marks)[0].to_dict()

    assert data["percentage"] == 66.67
    assert data["rank"] == 1
    assert data["student"]["roll_number"] == "R-a"
    assert data["subjects"][0]["marks"] == 2
