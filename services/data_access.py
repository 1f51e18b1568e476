"""
Reads and writes for students, subjects and marks.

Reads hand back typed records (see ``services.records``); writes validate
their input first and roll the session back if the database rejects them.
"""
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from extensions import db
from models import Student, Subject, Mark
from services.errors import FetchError, NotFoundError, RecordError, ValidationError
from services.records import StudentRecord, SubjectRecord, MarkRecord

logger = logging.getLogger(__name__)

STUDENT_FIELDS = ("name", "roll_number", "email", "phone", "semester", "batch")
STUDENT_REQUIRED = {
    "name": "Name is required",
    "roll_number": "Roll number is required",
    "semester": "Semester is required",
    "batch": "Batch is required",
}
STUDENT_SORT_FIELDS = ("name", "roll_number", "semester")


# =========================================================
# READS
# =========================================================

def list_students():
    rows = Student.query.order_by(Student.name.asc()).all()
    return [StudentRecord.from_model(r) for r in rows]


def list_subjects(semester=None):
    q = Subject.query
    if semester:
        q = q.filter_by(semester=semester)
    rows = q.order_by(Subject.name.asc()).all()
    return [SubjectRecord.from_model(r) for r in rows]


def list_marks(student_id=None, semester=None):
    q = Mark.query
    if student_id:
        q = q.filter_by(student_id=student_id)
    if semester:
        q = q.filter_by(semester=semester)
    rows = q.order_by(Mark.created_at.asc(), Mark.id.asc()).all()
    return [MarkRecord.from_model(r) for r in rows]


def load_merit_inputs():
    """
    Fetch everything the merit list needs.

    Returns ``(students, subjects, marks)`` only once all three reads have
    succeeded; any failure raises ``FetchError`` so nothing is ranked from a
    partial snapshot.
    """
    try:
        students = list_students()
        subjects = list_subjects()
        marks = list_marks()
    except (SQLAlchemyError, RecordError) as exc:
        db.session.rollback()
        logger.error("Failed to load merit list data: %s", exc)
        raise FetchError(f"Could not load merit list data: {exc}") from exc

    logger.debug(
        "Loaded %d students, %d subjects, %d marks",
        len(students), len(subjects), len(marks)
    )
    return students, subjects, marks


def list_students_filtered(search=None, semester=None, batch=None, sort_by="name", order="asc"):
    students = list_students()

    if search:
        term = search.strip().lower()
        students = [
            s for s in students
            if term in s.name.lower() or term in s.roll_number.lower()
        ]
    if semester:
        students = [s for s in students if s.semester == semester]
    if batch:
        students = [s for s in students if s.batch == batch]

    if sort_by not in STUDENT_SORT_FIELDS:
        sort_by = "name"
    return sorted(
        students,
        key=lambda s: getattr(s, sort_by).lower(),
        reverse=(order == "desc")
    )


# =========================================================
# STUDENTS
# =========================================================

def _clean_student_data(data):
    cleaned = {}
    for field in STUDENT_FIELDS:
        value = data.get(field)
        cleaned[field] = str(value).strip() if value is not None else ""

    for field, message in STUDENT_REQUIRED.items():
        if not cleaned[field]:
            raise ValidationError(message, field=field)

    cleaned["email"] = cleaned["email"] or None
    cleaned["phone"] = cleaned["phone"] or None
    return cleaned


def _get_student(student_id):
    student = db.session.get(Student, student_id)
    if not student:
        raise NotFoundError(f"Student {student_id} not found")
    return student


def _commit(action):
    try:
        db.session.commit()
    except IntegrityError as exc:
        db.session.rollback()
        logger.warning("Integrity error while trying to %s: %s", action, exc)
        raise ValidationError(f"Could not {action}: duplicate or invalid data") from exc
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Database error while trying to %s", action)
        raise


def create_student(data):
    cleaned = _clean_student_data(data)

    if Student.query.filter_by(roll_number=cleaned["roll_number"]).first():
        raise ValidationError(
            f"Roll number {cleaned['roll_number']} already exists!",
            field="roll_number"
        )

    student = Student(**cleaned)
    db.session.add(student)
    _commit("add student")

    logger.info("Added student %s", student.roll_number)
    return StudentRecord.from_model(student)


def update_student(student_id, data):
    student = _get_student(student_id)
    cleaned = _clean_student_data(data)

    if cleaned["roll_number"] != student.roll_number:
        clash = Student.query.filter_by(roll_number=cleaned["roll_number"]).first()
        if clash:
            raise ValidationError(
                f"Roll number {cleaned['roll_number']} already exists!",
                field="roll_number"
            )

    for field, value in cleaned.items():
        setattr(student, field, value)
    _commit("update student")

    logger.info("Updated student %s", student.roll_number)
    return StudentRecord.from_model(student)


def delete_student(student_id):
    student = _get_student(student_id)
    db.session.delete(student)
    _commit("delete student")
    logger.info("Deleted student %s and their marks", student_id)


# =========================================================
# SUBJECTS
# =========================================================

def parse_max_marks(value):
    if value is None or str(value).strip() == "":
        return 100
    try:
        max_marks = int(str(value).strip())
    except ValueError:
        raise ValidationError("Maximum marks must be a whole number", field="max_marks")
    if max_marks <= 0:
        raise ValidationError("Maximum marks must be positive", field="max_marks")
    return max_marks


def create_subject(data):
    name = (data.get("name") or "").strip()
    code = (data.get("code") or "").strip()
    semester = (data.get("semester") or "").strip()

    if not all([name, code, semester]):
        raise ValidationError("All fields (Name, Code, Semester) are required")

    max_marks = parse_max_marks(data.get("max_marks"))

    if Subject.query.filter_by(code=code).first():
        raise ValidationError(f"Subject Code '{code}' already exists.", field="code")

    subject = Subject(name=name, code=code, max_marks=max_marks, semester=semester)
    db.session.add(subject)
    _commit("add subject")

    logger.info("Added subject %s (%s)", subject.code, subject.semester)
    return SubjectRecord.from_model(subject)


def delete_subject(subject_id):
    subject = db.session.get(Subject, subject_id)
    if not subject:
        raise NotFoundError(f"Subject {subject_id} not found")
    db.session.delete(subject)
    _commit("delete subject")
    logger.info("Deleted subject %s and its marks", subject_id)


# =========================================================
# MARKS ENTRY
# =========================================================

def parse_marks_value(value, subject):
    try:
        marks = int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"Marks for {subject.code} must be a whole number", field=subject.id)
    if marks < 0 or marks > subject.max_marks:
        raise ValidationError(
            f"Marks for {subject.code} must be between 0 and {subject.max_marks}",
            field=subject.id
        )
    return marks


def save_student_marks(student_id, marks_by_subject):
    """
    Replace a student's marks for their current semester.

    ``marks_by_subject`` maps subject ids to mark values. Every value is
    checked against its subject before anything is written, and the old rows
    are removed in the same transaction as the new rows are added.
    """
    student = _get_student(student_id)

    if not marks_by_subject:
        raise ValidationError("No marks provided")

    validated = []
    for subject_id, value in marks_by_subject.items():
        subject = db.session.get(Subject, subject_id)
        if not subject:
            raise NotFoundError(f"Subject {subject_id} not found")
        validated.append((subject, parse_marks_value(value, subject)))

    try:
        Mark.query.filter_by(
            student_id=student.id,
            semester=student.semester
        ).delete(synchronize_session=False)

        for subject, marks in validated:
            db.session.add(Mark(
                student_id=student.id,
                subject_id=subject.id,
                marks=marks,
                semester=student.semester
            ))
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Saving marks for %s failed", student.roll_number)
        raise

    logger.info(
        "Saved %d marks for %s (%s)",
        len(validated), student.roll_number, student.semester
    )
    return list_marks(student_id=student.id, semester=student.semester)
