import io
import os

from flask import current_app, jsonify, request, send_file
from flask_login import login_required, current_user

from . import bp
from .forms import CandidateForm, StatusForm
from ...errors import NotFoundError
from ...services import candidates as service
from ...services.storage import download_bytes


def _int_arg(name, default):
    # non-numeric values fall back to the default, like request.args.get(type=int)
    return request.args.get(name, default=default, type=int)


@bp.post("")
@login_required
def create_candidate():
    form = CandidateForm()
    c = service.create_candidate(
        form.to_input(),
        referrer=current_user._get_current_object(),
        resume=form.resume.data,
    )
    return jsonify({
        "success": True,
        "message": "Candidate referred successfully",
        "candidate": c.to_dict(),
    }), 201


@bp.get("")
@login_required
def list_candidates():
    page = _int_arg("page", 1)
    limit = _int_arg("limit", current_app.config.get("DEFAULT_PAGE_SIZE", 10))
    pagination = service.list_candidates(
        search=request.args.get("search") or None,
        status=request.args.get("status") or None,
        page=page,
        per_page=limit,
    )
    return jsonify({
        "success": True,
        "candidates": [c.to_dict() for c in pagination.items],
        "pagination": {
            "current": page,
            "pages": pagination.pages,
            "total": pagination.total,
        },
    })


@bp.get("/stats")
@login_required
def candidate_stats():
    return jsonify({"success": True, "stats": service.candidate_stats()})


@bp.get("/<int:candidate_id>")
@login_required
def get_candidate(candidate_id):
    c = service.get_candidate(candidate_id)
    return jsonify({"success": True, "candidate": c.to_dict()})


@bp.put("/<int:candidate_id>/status")
@login_required
def update_candidate_status(candidate_id):
    form = StatusForm()
    c = service.update_status(candidate_id, form.status.data)
    return jsonify({
        "success": True,
        "message": "Candidate status updated successfully",
        "candidate": c.to_dict(),
    })


@bp.delete("/<int:candidate_id>")
@login_required
def delete_candidate(candidate_id):
    service.delete_candidate(candidate_id)
    return jsonify({"success": True, "message": "Candidate deleted successfully"})


@bp.get("/<int:candidate_id>/resume")
@login_required
def download_resume(candidate_id):
    c = service.get_candidate(candidate_id)
    if not c.resume_url:
        raise NotFoundError("Resume not found")
    data = download_bytes(c.resume_url)
    filename = os.path.basename(c.resume_url)
    return send_file(io.BytesIO(data), as_attachment=False, download_name=filename, mimetype="application/pdf")
