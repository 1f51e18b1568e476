from .user import AdminUser
from .student import Student
from .subjects import Subject
from .marks import Mark
__all__ = ["AdminUser", "Student", "Subject", "Mark"]
