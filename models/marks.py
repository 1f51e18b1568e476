from extensions import db
from models.student import new_id


class Mark(db.Model):
    __tablename__ = "marks"

    id = db.Column(db.String(36), primary_key=True, default=new_id)

    student_id = db.Column(
        db.String(36),
        db.ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False
    )

    subject_id = db.Column(
        db.String(36),
        db.ForeignKey("subjects.id", ondelete="CASCADE"),
        nullable=False
    )

    marks = db.Column(db.Integer, nullable=False, default=0)
    semester = db.Column(db.String(50), nullable=False)
    created_at = db.Column(db.DateTime, server_default=db.func.now())

    __table_args__ = (
        db.UniqueConstraint("student_id", "subject_id", "semester", name="unique_student_subject_semester"),
        db.Index("idx_marks_student_semester", "student_id", "semester"),
    )

    def __repr__(self):
        return f"<Mark student={self.student_id} subject={self.subject_id}>"
