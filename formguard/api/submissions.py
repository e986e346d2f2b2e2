"""Submissions API — validate, sanitize, and store user input; read it back."""

import uuid
from datetime import datetime, timezone

from fastapi import APIRouter, Body, HTTPException, Request, Query, Response

import structlog

from formguard.models.responses import SubmissionResponse
from formguard.services.rate_limiter import rate_limiter
from formguard.services.submission_store import SubmissionStore
from formguard.validators import sanitize, validate

logger = structlog.get_logger()

router = APIRouter()


def _generate_submission_id() -> str:
    """Generate a short, readable submission ID."""
    return f"sub_{uuid.uuid4().hex[:12]}"


def _get_store(request: Request) -> SubmissionStore:
    store = getattr(request.app.state, "submission_store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="Submission storage is unavailable")
    return store


# ─── Endpoints ───


@router.post("/submissions", status_code=201, response_model=SubmissionResponse)
async def create_submission(request: Request, payload: dict = Body(...)):
    """Validate a record on the server and store its sanitized form.

    Every violated rule is reported in one 422 response.
    """
    # Raises InputValidationError → 422 envelope (see main.py)
    user_input = validate(payload).raise_for_errors()
    clean = sanitize(user_input)
    store = _get_store(request)

    # Only submissions that would be stored count against the quota
    client_ip = request.client.host if request.client else "unknown"
    decision = rate_limiter.check(client_ip)
    if not decision.allowed:
        logger.warning("submission_rate_limited", client_ip=client_ip)
        raise HTTPException(
            status_code=429,
            detail={
                "error": "Rate limit exceeded",
                "message": (
                    f"Maximum {rate_limiter.max_submissions} submissions per "
                    f"{rate_limiter.window_seconds} seconds. Try again later."
                ),
                "remaining": decision.remaining,
                "retry_after_seconds": int(decision.retry_after_seconds) + 1,
            },
        )

    submission_id = _generate_submission_id()
    record = {
        "submission_id": submission_id,
        "name": clean.name,
        "email": clean.email,
        "created_at": datetime.now(timezone.utc).isoformat(),
        "client_ip": client_ip,
    }
    await store.create(submission_id, record)

    logger.info("submission_created", submission_id=submission_id, client_ip=client_ip)

    return SubmissionResponse(**record)


@router.get("/submissions/{submission_id}", response_model=SubmissionResponse)
async def get_submission(submission_id: str, request: Request):
    """Get a stored submission."""
    store = _get_store(request)
    record = await store.get(submission_id)

    if record is None:
        raise HTTPException(status_code=404, detail=f"Submission {submission_id} not found")

    return SubmissionResponse(**record)


@router.get("/submissions", response_model=list[SubmissionResponse])
async def list_submissions(
    request: Request,
    limit: int = Query(default=20, ge=1, le=100),
):
    """List recent submissions, newest first."""
    store = _get_store(request)
    submissions = []
    for sid in await store.list_recent(limit):
        record = await store.get(sid)
        # Expired records linger in the recent list until trimmed
        if record is not None:
            submissions.append(SubmissionResponse(**record))
    return submissions


@router.delete("/submissions/{submission_id}", status_code=204)
async def delete_submission(submission_id: str, request: Request):
    """Delete a stored submission."""
    store = _get_store(request)
    if not await store.delete(submission_id):
        raise HTTPException(status_code=404, detail=f"Submission {submission_id} not found")
    return Response(status_code=204)
