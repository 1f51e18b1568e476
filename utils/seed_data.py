import os
import random

from extensions import db
from models import AdminUser, Student, Subject, Mark
from services.auth_service import create_admin_user


SAMPLE_SUBJECTS = [
    {"name": "Mathematics", "code": "MATH101", "max_marks": 100, "semester": "Semester 1"},
    {"name": "Physics", "code": "PHY101", "max_marks": 100, "semester": "Semester 1"},
    {"name": "Chemistry", "code": "CHEM101", "max_marks": 100, "semester": "Semester 1"},
    {"name": "English", "code": "ENG101", "max_marks": 100, "semester": "Semester 1"},
    {"name": "Computer Science", "code": "CS101", "max_marks": 100, "semester": "Semester 1"},
    {"name": "Advanced Mathematics", "code": "MATH201", "max_marks": 100, "semester": "Semester 2"},
    {"name": "Mechanics", "code": "PHY201", "max_marks": 100, "semester": "Semester 2"},
    {"name": "Organic Chemistry", "code": "CHEM201", "max_marks": 100, "semester": "Semester 2"},
    {"name": "Literature", "code": "ENG201", "max_marks": 100, "semester": "Semester 2"},
    {"name": "Data Structures", "code": "CS201", "max_marks": 100, "semester": "Semester 2"},
]

SAMPLE_STUDENTS = [
    ("Alice Johnson", "ST001", "alice@example.com", "+1234567890", "Semester 1", "2024-2025"),
    ("Bob Smith", "ST002", "bob@example.com", "+1234567891", "Semester 1", "2024-2025"),
    ("Charlie Brown", "ST003", "charlie@example.com", "+1234567892", "Semester 1", "2024-2025"),
    ("Diana Prince", "ST004", "diana@example.com", "+1234567893", "Semester 1", "2024-2025"),
    ("Eve Wilson", "ST005", "eve@example.com", "+1234567894", "Semester 1", "2024-2025"),
    ("Frank Miller", "ST006", "frank@example.com", "+1234567895", "Semester 2", "2023-2024"),
    ("Grace Lee", "ST007", "grace@example.com", "+1234567896", "Semester 2", "2023-2024"),
    ("Henry Davis", "ST008", "henry@example.com", "+1234567897", "Semester 2", "2023-2024"),
    ("Ivy Chen", "ST009", "ivy@example.com", "+1234567898", "Semester 2", "2023-2024"),
    ("Jack Thompson", "ST010", "jack@example.com", "+1234567899", "Semester 2", "2023-2024"),
]

# Random marks are drawn from these ranges per semester
MARK_RANGES = {
    "Semester 1": (60, 95),
    "Semester 2": (65, 98),
}


def seed_subjects():
    for s in SAMPLE_SUBJECTS:
        if not Subject.query.filter_by(code=s["code"]).first():
            db.session.add(Subject(**s))

    db.session.commit()
    print("✅ Subjects seeded")


def seed_students():
    for name, roll, email, phone, semester, batch in SAMPLE_STUDENTS:
        if not Student.query.filter_by(roll_number=roll).first():
            db.session.add(Student(
                name=name,
                roll_number=roll,
                email=email,
                phone=phone,
                semester=semester,
                batch=batch
            ))

    db.session.commit()
    print("✅ Students seeded")


def seed_marks(rng=None):
    rng = rng or random.Random()

    for student in Student.query.all():
        low, high = MARK_RANGES.get(student.semester, (60, 95))
        for subject in Subject.query.filter_by(semester=student.semester).all():
            existing = Mark.query.filter_by(
                student_id=student.id,
                subject_id=subject.id,
                semester=student.semester
            ).first()
            if existing:
                continue
            db.session.add(Mark(
                student_id=student.id,
                subject_id=subject.id,
                marks=rng.randint(low, high),
                semester=student.semester
            ))

    db.session.commit()
    print("✅ Marks seeded")


def seed_admin():
    email = os.getenv("ADMIN_EMAIL", "admin@merit.com")
    password = os.getenv("ADMIN_PASSWORD", "admin123")

    if AdminUser.query.filter_by(email=email).first():
        print(f"✅ Admin {email} already exists")
        return

    create_admin_user(email, password)
    print(f"✅ Admin {email} created")


def run_seed():
    seed_subjects()
    seed_students()
    seed_marks()
    seed_admin()
