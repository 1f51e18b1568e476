from werkzeug.security import check_password_hash, generate_password_hash

from extensions import db
from models.user import AdminUser


def authenticate_user(email: str, password: str):
    user = AdminUser.query.filter_by(email=email.strip().lower()).first()

    if not user:
        return None

    if not check_password_hash(user.password_hash, password):
        return None

    if user.is_active is False:
        return None

    return user


def create_admin_user(email: str, password: str, name: str = "Administrator"):
    user = AdminUser(
        email=email.strip().lower(),
        name=name,
        password_hash=generate_password_hash(password),
        is_active=True
    )
    db.session.add(user)
    db.session.commit()
    return user
