from extensions import db
from flask_login import UserMixin
from models.student import new_id


class AdminUser(UserMixin, db.Model):
    __tablename__ = "admin_users"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    email = db.Column(db.String(120), unique=True, nullable=False)
    name = db.Column(db.String(100), nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)

    is_active = db.Column(db.Boolean, default=True)
    created_at = db.Column(db.DateTime, server_default=db.func.now())

    # Flask-Login reads the session key from get_id()
    def get_id(self):
        return str(self.id)

    def __repr__(self):
        return f"<AdminUser {self.email}>"
