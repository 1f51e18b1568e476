from flask import Blueprint, request, jsonify
from flask_login import login_required
from sqlalchemy.exc import SQLAlchemyError

from services import data_access
from services.errors import NotFoundError, ValidationError

student_bp = Blueprint("students", __name__, url_prefix="/students")


@student_bp.route("", methods=["GET"])
@login_required
def list_students():
    students = data_access.list_students_filtered(
        search=request.args.get("search"),
        semester=request.args.get("semester"),
        batch=request.args.get("batch"),
        sort_by=request.args.get("sort", "name"),
        order=request.args.get("order", "asc")
    )
    return jsonify([s.to_dict() for s in students])


@student_bp.route("", methods=["POST"])
@login_required
def add_student():
    data = request.json or {}
    try:
        student = data_access.create_student(data)
    except ValidationError as e:
        return jsonify({"error": e.message, "field": e.field}), 400
    except SQLAlchemyError as e:
        return jsonify({"error": f"Database Error: {str(e)}"}), 500

    return jsonify({
        "status": "success",
        "message": "Student added successfully!",
        "student": student.to_dict()
    }), 201


@student_bp.route("/<student_id>", methods=["PUT"])
@login_required
def update_student(student_id):
    data = request.json or {}
    try:
        student = data_access.update_student(student_id, data)
    except NotFoundError:
        return jsonify({"error": "Student not found"}), 404
    except ValidationError as e:
        return jsonify({"error": e.message, "field": e.field}), 400
    except SQLAlchemyError as e:
        return jsonify({"error": f"Database Error: {str(e)}"}), 500

    return jsonify({
        "status": "success",
        "message": "Student updated successfully",
        "student": student.to_dict()
    })


@student_bp.route("/<student_id>", methods=["DELETE"])
@login_required
def delete_student(student_id):
    try:
        data_access.delete_student(student_id)
    except NotFoundError:
        return jsonify({"error": "Student not found"}), 404
    except SQLAlchemyError as e:
        return jsonify({"error": f"Database Error: {str(e)}"}), 500

    return jsonify({"status": "deleted"})
