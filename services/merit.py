import logging
from dataclasses import dataclass, field, replace
from typing import List

from services.records import StudentRecord, SubjectRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubjectMarks:
    subject: SubjectRecord
    marks: int

    def to_dict(self):
        return {"subject": self.subject.to_dict(), "marks": self.marks}


@dataclass(frozen=True)
class MeritEntry:
    student: StudentRecord
    subjects: List[SubjectMarks] = field(default_factory=list)
    total_marks: int = 0
    max_marks: int = 0
    percentage: float = 0.0
    rank: int = 0

    def to_dict(self):
        return {
            "student": self.student.to_dict(),
            "subjects": [s.to_dict() for s in self.subjects],
            "total_marks": self.total_marks,
            "max_marks": self.max_marks,
            "percentage": round(self.percentage, 2),
            "rank": self.rank,
        }


def calculate_percentage(total_marks, max_marks):
    if max_marks <= 0:
        return 0.0
    return (total_marks / max_marks) * 100


def group_marks(marks, subjects_by_id):
    """
    Group mark rows by (student_id, semester) using the semester stored on
    the mark. Marks pointing at a missing subject are dropped here.
    """
    grouped = {}
    for mark in marks:
        subject = subjects_by_id.get(mark.subject_id)
        if subject is None:
            logger.debug(
                "Skipping mark %s: subject %s not found", mark.id, mark.subject_id
            )
            continue
        key = (mark.student_id, mark.semester)
        grouped.setdefault(key, []).append(SubjectMarks(subject=subject, marks=mark.marks))
    return grouped


def compute_merit_list(students, subjects, marks):
    """
    Build the ranked merit list for every student that has marks recorded
    for their own semester.

    Ranking is global across all semesters. Entries are sorted by percentage,
    highest first; ``sorted`` is stable so equal percentages keep the order
    the students were passed in. Ranks are the 1-based position in that
    order, so ties still get distinct ranks.
    """
    subjects_by_id = {s.id: s for s in subjects}
    grouped = group_marks(marks, subjects_by_id)

    entries = []
    for student in students:
        semester_marks = grouped.get((student.id, student.semester))
        if not semester_marks:
            continue

        total_marks = sum(item.marks for item in semester_marks)
        max_marks = sum(item.subject.max_marks for item in semester_marks)

        entries.append(MeritEntry(
            student=student,
            subjects=list(semester_marks),
            total_marks=total_marks,
            max_marks=max_marks,
            percentage=calculate_percentage(total_marks, max_marks),
        ))

    ranked = sorted(entries, key=lambda e: e.percentage, reverse=True)
    return assign_ranks(ranked)


def assign_ranks(entries):
    return [replace(entry, rank=index + 1) for index, entry in enumerate(entries)]
