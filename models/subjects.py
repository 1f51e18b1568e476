# models/subjects.py
from extensions import db
from models.student import new_id


class Subject(db.Model):
    __tablename__ = 'subjects'

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    name = db.Column(db.String(100), nullable=False)
    code = db.Column(db.String(20), nullable=False, unique=True)
    max_marks = db.Column(db.Integer, nullable=False, default=100)
    semester = db.Column(db.String(50), nullable=False, index=True)
    created_at = db.Column(db.DateTime, server_default=db.func.now())

    marks = db.relationship(
        'Mark',
        backref='subject',
        lazy=True,
        cascade='all, delete-orphan'
    )

    def __repr__(self):
        return f'<Subject {self.code}>'
