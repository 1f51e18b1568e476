import math
from dataclasses import dataclass
from typing import Optional

from services.merit import assign_ranks


def parse_percentage(value):
    """Return a float bound, or None when the value is blank or not a number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    if math.isnan(number):
        return None
    return number


def parse_flag(value):
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def _clean_text(value):
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class MeritFilter:
    semester: Optional[str] = None
    batch: Optional[str] = None
    search: Optional[str] = None
    min_percentage: Optional[float] = None
    max_percentage: Optional[float] = None
    rerank: bool = False

    @classmethod
    def from_args(cls, args):
        args = args or {}
        return cls(
            semester=_clean_text(args.get("semester")),
            batch=_clean_text(args.get("batch")),
            search=_clean_text(args.get("search")),
            min_percentage=parse_percentage(args.get("min_percentage")),
            max_percentage=parse_percentage(args.get("max_percentage")),
            rerank=parse_flag(args.get("rerank")),
        )

    def matches(self, entry):
        student = entry.student
        if self.semester is not None and student.semester != self.semester:
            return False
        if self.batch is not None and student.batch != self.batch:
            return False
        if self.search is not None:
            term = self.search.lower()
            if term not in student.name.lower() and term not in student.roll_number.lower():
                return False
        if self.min_percentage is not None and entry.percentage < self.min_percentage:
            return False
        if self.max_percentage is not None and entry.percentage > self.max_percentage:
            return False
        return True


def filter_merit_list(entries, predicates=None):
    """
    Narrow an already ranked merit list.

    Surviving entries keep their rank from the full list unless the filter
    asks for ``rerank``, in which case they are renumbered 1..n in their
    existing order.
    """
    if predicates is None:
        predicates = MeritFilter()
    elif not isinstance(predicates, MeritFilter):
        predicates = MeritFilter.from_args(predicates)

    filtered = [entry for entry in entries if predicates.matches(entry)]

    if predicates.rerank:
        return assign_ranks(filtered)
    return filtered


def _distinct(values):
    seen = []
    for value in values:
        if value and value not in seen:
            seen.append(value)
    return seen


def available_semesters(entries):
    return _distinct(entry.student.semester for entry in entries)


def available_batches(entries):
    return _distinct(entry.student.batch for entry in entries)
