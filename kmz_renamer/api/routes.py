"""REST API blueprint."""

from __future__ import annotations

import io
import logging

from flask import Blueprint, current_app, jsonify, request, send_file

from ..config import APP_CONFIG
from ..core import ProcessingError
from ..pipelines.rename_pipeline import MISSING_INPUT_MESSAGE
from ..utils.io import base_filename

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)

KMZ_MIMETYPE = "application/vnd.google-earth.kmz"
FAILURE_MESSAGE = "Error processing file. Please try again."


@api_bp.post("/rename")
def rename_placemarks():
    """Rename the placemarks of an uploaded KMZ and return the new archive."""

    kmz_file = request.files.get("kmz_file")
    project_number = request.form.get("project_number", "").strip()

    if not kmz_file or not kmz_file.filename or not project_number:
        return jsonify({"error": MISSING_INPUT_MESSAGE}), 400
    if not _allowed(kmz_file.filename, APP_CONFIG.allowed_kmz_extensions):
        return jsonify({"error": "Invalid KMZ file"}), 400

    try:
        result = _pipeline().run(
            data=kmz_file.read(),
            filename=base_filename(kmz_file.filename),
            project_identifier=project_number,
        )
    except ProcessingError as exc:
        logger.warning("Rejected %s: %s", kmz_file.filename, exc)
        return jsonify({"error": str(exc)}), 400
    except Exception:
        logger.exception("Error processing KMZ %s", kmz_file.filename)
        return jsonify({"error": FAILURE_MESSAGE}), 500

    response = send_file(
        io.BytesIO(result.payload),
        mimetype=KMZ_MIMETYPE,
        as_attachment=True,
        download_name=result.download_name,
    )
    response.headers["X-Renamed-Count"] = str(result.renamed_count)
    response.headers["X-Status-Message"] = result.outcome.status_message()
    return response


def _allowed(filename: str, extensions: tuple[str, ...]) -> bool:
    return "." in filename and filename.rsplit(".", 1)[1].lower() in extensions


def _pipeline():
    return current_app.extensions["rename_pipeline"]
