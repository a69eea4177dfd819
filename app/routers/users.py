"""
User profile, dashboard and file upload endpoints (mounted under /api).

Route summary
-------------
GET   /api/user/profile           — caller's profile
PATCH /api/user/profile           — update name / phone / address
PATCH /api/user/business-profile  — update business profile
GET   /api/dashboard              — profile completion and next steps
POST  /api/upload                 — avatar or business document upload
"""
import logging
import os
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import aiofiles
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status

from app.config import settings
from app.dependencies.auth import get_or_create_user
from app.models.database_models import User
from app.models.schemas import (
    BusinessProfileUpdate,
    DashboardResponse,
    DashboardStats,
    UploadResponse,
    UploadType,
    UserProfileResponse,
    UserProfileUpdate,
)
from app.store import Store, get_store
from app.utils.helpers import round_half_up, safe_filename

logger = logging.getLogger(__name__)

router = APIRouter()

_UPLOAD_RULES = {
    UploadType.AVATAR: ("avatars", settings.ALLOWED_AVATAR_TYPES, settings.MAX_AVATAR_SIZE),
    UploadType.DOCUMENT: ("documents", settings.ALLOWED_DOCUMENT_TYPES, settings.MAX_DOCUMENT_SIZE),
}


def profile_response(user: User) -> UserProfileResponse:
    return UserProfileResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        phone=user.phone,
        address=user.address,
        avatar=user.avatar,
        business_profile=user.business_profile or {},
        completed_compliance_items=user.completed_compliance_items or [],
    )


def _safe_remove(path: str) -> None:
    """Delete a file silently, logging warnings but never raising."""
    try:
        if path and os.path.exists(path):
            os.remove(path)
    except OSError as exc:
        logger.warning("Could not remove file %r: %s", path, exc)


# ═══════════════════════════════════════════════════════════════════════════════
# PROFILE
# ═══════════════════════════════════════════════════════════════════════════════

@router.get("/user/profile", response_model=UserProfileResponse)
async def get_profile(user: User = Depends(get_or_create_user)) -> UserProfileResponse:
    return profile_response(user)


@router.patch("/user/profile", response_model=UserProfileResponse)
async def update_profile(
    body: UserProfileUpdate,
    user: User = Depends(get_or_create_user),
    store: Store = Depends(get_store),
) -> UserProfileResponse:
    """Update name, and phone / address when given."""
    user.name = body.name
    if body.phone:
        user.phone = body.phone
    if body.address:
        user.address = body.address
    user = await store.save_user(user)
    return profile_response(user)


@router.patch("/user/business-profile", response_model=UserProfileResponse)
async def update_business_profile(
    body: BusinessProfileUpdate,
    user: User = Depends(get_or_create_user),
    store: Store = Depends(get_store),
) -> UserProfileResponse:
    """Merge the given business fields; the Udyam number must look like UDYAM-XX-00-0000000."""
    user = await store.update_business_profile(
        user,
        businessName=body.business_name,
        industry=body.industry.value if body.industry else None,
        stage=body.stage.value if body.stage else None,
        type=body.type,
        state=body.state,
        udyamNumber=body.udyam_number,
    )
    return profile_response(user)


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(user: User = Depends(get_or_create_user)) -> DashboardResponse:
    """Profile completion percentage, document count and up to three next steps."""
    profile = user.business_profile or {}
    profile_fields = [
        user.name,
        user.email,
        user.avatar,
        profile.get("businessName"),
        profile.get("industry"),
        profile.get("stage"),
        profile.get("state"),
    ]
    completed = sum(1 for field in profile_fields if field is not None)
    profile_completion = round_half_up(completed / len(profile_fields) * 100)
    documents_count = len(profile.get("documents") or [])

    recommendations = []
    if not profile.get("businessName"):
        recommendations.append("Complete your business profile")
    if documents_count == 0:
        recommendations.append("Upload essential business documents")
    if not profile.get("industry"):
        recommendations.append("Specify your industry")
    recommendations.append("Create your business plan")
    recommendations.append("Explore funding options")

    return DashboardResponse(
        user={"name": user.name, "email": user.email, "avatar": user.avatar},
        business_profile=profile,
        stats=DashboardStats(
            profile_completion=profile_completion,
            documents_count=documents_count,
        ),
        recommendations=recommendations[:3],
    )


# ═══════════════════════════════════════════════════════════════════════════════
# UPLOAD
# ═══════════════════════════════════════════════════════════════════════════════

@router.post("/upload", response_model=UploadResponse)
async def upload_file(
    file: Optional[UploadFile] = File(None),
    type: Optional[str] = Form(None),
    user: User = Depends(get_or_create_user),
    store: Store = Depends(get_store),
) -> UploadResponse:
    """
    Store an avatar (JPEG/PNG, 2 MB) or a business document (JPEG/PNG/PDF, 5 MB)
    in the upload directory and record it on the user.
    """
    if file is None or not file.filename or not type:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing file or type")
    try:
        upload_type = UploadType(type)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing file or type")

    folder, allowed_types, max_size = _UPLOAD_RULES[upload_type]
    if file.content_type not in allowed_types:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid file type. Allowed types: {', '.join(allowed_types)}",
        )

    target_dir = os.path.join(settings.UPLOAD_DIR, folder)
    os.makedirs(target_dir, exist_ok=True)
    stored_name = f"{uuid.uuid4().hex}{Path(file.filename).suffix.lower()}"
    file_path = os.path.join(target_dir, stored_name)
    file_size = 0

    # Stream to disk while enforcing the size limit
    async with aiofiles.open(file_path, "wb") as out:
        while True:
            chunk = await file.read(1024 * 1024)   # 1 MB slices
            if not chunk:
                break
            file_size += len(chunk)
            if file_size > max_size:
                await out.close()
                _safe_remove(file_path)
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail=f"File size should be less than {max_size // (1024 * 1024)}MB",
                )
            await out.write(chunk)

    public_id = f"{folder}/{stored_name}"
    url = f"/uploads/{public_id}"
    logger.info("Saved %r -> %s (%d bytes)", file.filename, file_path, file_size)

    if upload_type is UploadType.AVATAR:
        old = user.avatar or {}
        if old.get("public_id"):
            _safe_remove(os.path.join(settings.UPLOAD_DIR, old["public_id"]))
        user.avatar = {"url": url, "public_id": public_id}
        await store.save_user(user)
    else:
        documents = list((user.business_profile or {}).get("documents") or [])
        documents.append(
            {
                "name": safe_filename(file.filename),
                "url": url,
                "public_id": public_id,
                "type": file.content_type,
                "size": file_size,
                "uploadedAt": datetime.now(timezone.utc).isoformat(),
            }
        )
        await store.update_business_profile(user, documents=documents)

    return UploadResponse(url=url, public_id=public_id)
