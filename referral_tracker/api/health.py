import os

from flask import Blueprint, current_app, jsonify, send_from_directory

from ..services.storage import RESUME_PREFIX

bp = Blueprint("health", __name__)


@bp.get("/api/health")
def health():
    return jsonify({"status": "OK", "message": "Server is running"})


@bp.get("/uploads/resumes/<path:filename>")
def uploaded_resume(filename):
    # local backend only; S3 references are served through the candidate route
    directory = os.path.abspath(os.path.join(current_app.config["LOCAL_STORAGE_DIR"], RESUME_PREFIX))
    return send_from_directory(directory, filename, mimetype="application/pdf")
