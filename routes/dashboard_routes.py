from flask import Blueprint, jsonify
from flask_login import login_required

from services.dashboard import compute_dashboard_stats
from services.data_access import load_merit_inputs
from services.errors import FetchError

dashboard_bp = Blueprint("dashboard", __name__, url_prefix="/dashboard")


@dashboard_bp.route("/stats")
@login_required
def dashboard_stats():
    try:
        students, subjects, marks = load_merit_inputs()
    except FetchError as e:
        return jsonify({"status": "error", "message": str(e)}), 503

    return jsonify(compute_dashboard_stats(students, subjects, marks))
