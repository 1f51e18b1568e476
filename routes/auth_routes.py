from flask import Blueprint, request, jsonify, session
from flask_login import login_user, logout_user, login_required, current_user
from services.auth_service import authenticate_user

# Define the blueprint
auth_bp = Blueprint("auth", __name__)


# =========================================================
# LOGIN ROUTE
# =========================================================
@auth_bp.route("/login", methods=["POST"])
def login():
    data = request.get_json(silent=True) or request.form
    email = (data.get("email") or "").strip()
    password = data.get("password") or ""

    # 1. Basic Validation
    if not email or not password:
        return jsonify({"error": "Email and password are required"}), 400

    # 2. Authenticate User
    user = authenticate_user(email, password)

    if not user:
        return jsonify({"error": "Invalid email or password"}), 401

    # 3. Log the user in with Flask-Login
    login_user(user)

    return jsonify({
        "status": "success",
        "user": {"id": user.id, "email": user.email, "name": user.name}
    })


@auth_bp.route("/me")
@login_required
def me():
    return jsonify({
        "id": current_user.id,
        "email": current_user.email,
        "name": current_user.name
    })


# =========================================================
# LOGOUT ROUTE
# =========================================================
@auth_bp.route("/logout", methods=["POST"])
@login_required
def logout():
    logout_user()      # Tell Flask-Login to wipe the user session
    session.clear()
    return jsonify({"status": "success"})
