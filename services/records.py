"""
Typed, read-only views of the stored rows.

The merit computation only ever sees these records, never the ORM objects,
so a session expiring halfway through a request cannot change its input.
"""
from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Optional

from services.errors import RecordError


def _required_text(row, field):
    value = getattr(row, field, None)
    if value is None or str(value).strip() == "":
        raise RecordError(f"{type(row).__name__} is missing '{field}'")
    return str(value)


def _optional_text(row, field):
    value = getattr(row, field, None)
    if value is None or str(value).strip() == "":
        return None
    return str(value)


def _required_int(row, field):
    value = getattr(row, field, None)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise RecordError(f"{type(row).__name__}.{field} is not an integer: {value!r}")


def _iso(value: Optional[datetime]):
    return value.isoformat() if value else None


@dataclass(frozen=True)
class StudentRecord:
    id: str
    name: str
    roll_number: str
    semester: str
    batch: str
    email: Optional[str] = None
    phone: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_model(cls, row):
        return cls(
            id=_required_text(row, "id"),
            name=_required_text(row, "name"),
            roll_number=_required_text(row, "roll_number"),
            semester=_required_text(row, "semester"),
            batch=_required_text(row, "batch"),
            email=_optional_text(row, "email"),
            phone=_optional_text(row, "phone"),
            created_at=getattr(row, "created_at", None),
            updated_at=getattr(row, "updated_at", None),
        )

    def to_dict(self):
        data = asdict(self)
        data["created_at"] = _iso(self.created_at)
        data["updated_at"] = _iso(self.updated_at)
        return data


@dataclass(frozen=True)
class SubjectRecord:
    id: str
    name: str
    code: str
    semester: str
    max_marks: int = 100
    created_at: Optional[datetime] = None

    @classmethod
    def from_model(cls, row):
        max_marks = _required_int(row, "max_marks")
        if max_marks < 0:
            raise RecordError(f"Subject {row.code!r} has negative max_marks")
        return cls(
            id=_required_text(row, "id"),
            name=_required_text(row, "name"),
            code=_required_text(row, "code"),
            semester=_required_text(row, "semester"),
            max_marks=max_marks,
            created_at=getattr(row, "created_at", None),
        )

    def to_dict(self):
        data = asdict(self)
        data["created_at"] = _iso(self.created_at)
        return data


@dataclass(frozen=True)
class MarkRecord:
    id: str
    student_id: str
    subject_id: str
    marks: int
    semester: str
    created_at: Optional[datetime] = None

    @classmethod
    def from_model(cls, row):
        return cls(
            id=_required_text(row, "id"),
            student_id=_required_text(row, "student_id"),
            subject_id=_required_text(row, "subject_id"),
            marks=_required_int(row, "marks"),
            semester=_required_text(row, "semester"),
            created_at=getattr(row, "created_at", None),
        )

    def to_dict(self):
        data = asdict(self)
        data["created_at"] = _iso(self.created_at)
        return data
