from flask import Blueprint, request, jsonify
from flask_login import login_required
from sqlalchemy.exc import SQLAlchemyError

from services import data_access
from services.errors import NotFoundError, RecordError, ValidationError

marks_bp = Blueprint("marks", __name__)


# =========================================================
# SUBJECTS
# =========================================================

@marks_bp.route("/subjects", methods=["GET"])
@login_required
def list_subjects():
    subjects = data_access.list_subjects(semester=request.args.get("semester"))
    return jsonify([s.to_dict() for s in subjects])


@marks_bp.route("/subjects", methods=["POST"])
@login_required
def add_subject():
    data = request.json or {}
    try:
        subject = data_access.create_subject(data)
    except ValidationError as e:
        return jsonify({"error": e.message, "field": e.field}), 400
    except SQLAlchemyError as e:
        return jsonify({"error": f"Database Error: {str(e)}"}), 500

    return jsonify({
        "status": "success",
        "message": "Subject added successfully!",
        "subject": subject.to_dict()
    }), 201


@marks_bp.route("/subjects/<subject_id>", methods=["DELETE"])
@login_required
def delete_subject(subject_id):
    try:
        data_access.delete_subject(subject_id)
    except NotFoundError:
        return jsonify({"error": "Subject not found"}), 404
    except SQLAlchemyError as e:
        return jsonify({"error": f"Database Error: {str(e)}"}), 500

    return jsonify({"status": "deleted"})


# =========================================================
# MARKS ENTRY
# =========================================================

@marks_bp.route("/marks", methods=["GET"])
@login_required
def list_marks():
    try:
        marks = data_access.list_marks(
            student_id=request.args.get("student_id"),
            semester=request.args.get("semester")
        )
    except (SQLAlchemyError, RecordError) as e:
        return jsonify({"status": "error", "message": str(e)}), 503

    return jsonify([m.to_dict() for m in marks])


@marks_bp.route("/marks", methods=["POST"])
@login_required
def submit_marks():
    data = request.json or {}
    student_id = data.get("student_id")
    entries = data.get("marks") or {}

    if not student_id:
        return jsonify({"error": "student_id required"}), 400
    if not isinstance(entries, dict) or not entries:
        return jsonify({"error": "No marks provided"}), 400

    try:
        saved = data_access.save_student_marks(student_id, entries)
    except NotFoundError as e:
        return jsonify({"error": str(e)}), 404
    except ValidationError as e:
        return jsonify({"error": e.message, "field": e.field}), 400
    except SQLAlchemyError as e:
        return jsonify({"error": str(e)}), 500

    return jsonify({"status": "success", "marks": [m.to_dict() for m in saved]})
