import logging

from flask import Blueprint, request, jsonify, send_file, current_app
from flask_login import login_required
from io import BytesIO

from services.data_access import load_merit_inputs
from services.errors import FetchError
from services.merit import compute_merit_list
from services.merit_filter import (
    MeritFilter, filter_merit_list, available_semesters, available_batches
)
from services.merit_export import (
    export_tabular, export_printable, export_filename,
    EXCEL_MIMETYPE, CSV_MIMETYPE, PDF_MIMETYPE
)

logger = logging.getLogger(__name__)

merit_bp = Blueprint("merit", __name__, url_prefix="/merit-list")

TABULAR_FORMATS = {
    "excel": ("xlsx", EXCEL_MIMETYPE),
    "csv": ("csv", CSV_MIMETYPE),
}


def fetch_filtered_merit_list():
    """Rank the full cohort, then apply the request's filters."""
    students, subjects, marks = load_merit_inputs()
    ranked = compute_merit_list(students, subjects, marks)
    predicates = MeritFilter.from_args(request.args)
    return ranked, filter_merit_list(ranked, predicates), predicates


def fetch_failed(exc):
    return jsonify({"status": "error", "message": str(exc)}), 503


@merit_bp.route("", methods=["GET"])
@login_required
def merit_list():
    try:
        ranked, filtered, predicates = fetch_filtered_merit_list()
    except FetchError as e:
        return fetch_failed(e)

    return jsonify({
        "status": "success",
        "count": len(filtered),
        "entries": [e.to_dict() for e in filtered],
        "semesters": available_semesters(ranked),
        "batches": available_batches(ranked),
        "reranked": predicates.rerank
    })


@merit_bp.route("/export/<file_format>", methods=["GET"])
@login_required
def export_merit_list(file_format):
    if file_format != "pdf" and file_format not in TABULAR_FORMATS:
        return jsonify({"error": f"Unsupported export format: {file_format}"}), 400

    try:
        _, filtered, predicates = fetch_filtered_merit_list()
    except FetchError as e:
        return fetch_failed(e)

    logger.info("Exporting %d merit entries as %s", len(filtered), file_format)

    if file_format == "pdf":
        payload = export_printable(
            filtered,
            title_suffix=predicates.semester,
            max_entries=current_app.config.get("MERIT_PRINT_MAX_ENTRIES", 30),
            name_width=current_app.config.get("MERIT_PRINT_NAME_WIDTH", 20)
        )
        extension, mimetype = "pdf", PDF_MIMETYPE
    else:
        payload = export_tabular(filtered, file_format=file_format)
        extension, mimetype = TABULAR_FORMATS[file_format]

    return send_file(
        BytesIO(payload),
        mimetype=mimetype,
        as_attachment=True,
        download_name=export_filename(extension, predicates.semester)
    )
