# 📄 File: app/modules/comments/presentation/api/v1/comments.py
# 🧭 Purpose (Layman Explanation):
# The web addresses for posting on a club's page, replying, deleting and reading
# conversations.
#
# 🧪 Purpose (Technical Summary):
# FastAPI comment endpoints delegating to CommentService.
#
# 🔗 Dependencies:
# - FastAPI router, CommentService, auth gate, group resolver
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted at / and /api/v1)

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from app.modules.comments.domain.services.comment_service import CommentService
from app.modules.comments.presentation.api.schemas.comment_schemas import (
    CommentListResponse,
    CommentRequest,
    CommentResponse,
    DeleteThreadResponse,
)
from app.modules.groups.domain.models.group import Group
from app.modules.groups.presentation.dependencies import get_group
from app.modules.user_management.domain.models.user import User
from app.modules.user_management.presentation.api.schemas.user_schemas import UserSummaryResponse
from app.modules.user_management.presentation.dependencies import get_current_user
from app.shared.config.settings import get_settings
from app.shared.core.schemas import MessageResponse

comments_router = APIRouter(tags=["Comments"])

_settings = get_settings()


@comments_router.post(
    "/group/{group_ref}/comment",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    payload: CommentRequest,
    group: Group = Depends(get_group),
    current_user: User = Depends(get_current_user),
    comment_service: CommentService = Depends(),
) -> CommentResponse:
    comment = await comment_service.create_comment(current_user, group, payload.content)
    return CommentResponse.from_domain(comment, author=UserSummaryResponse.from_domain(current_user))


@comments_router.post(
    "/comment/{comment_id}/reply",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def reply_to_comment(
    comment_id: UUID,
    payload: CommentRequest,
    current_user: User = Depends(get_current_user),
    comment_service: CommentService = Depends(),
) -> CommentResponse:
    reply = await comment_service.reply(current_user, comment_id, payload.content)
    return CommentResponse.from_domain(reply, author=UserSummaryResponse.from_domain(current_user))


@comments_router.delete("/comment/{comment_id}", response_model=MessageResponse)
async def delete_comment(
    comment_id: UUID,
    current_user: User = Depends(get_current_user),
    comment_service: CommentService = Depends(),
) -> MessageResponse:
    """Author delete; refused with 409 while the comment has replies."""
    await comment_service.delete_own(current_user, comment_id)
    return MessageResponse(message="Comment deleted")


@comments_router.delete("/admin-delete-comment/{comment_id}", response_model=DeleteThreadResponse)
async def admin_delete_comment(
    comment_id: UUID,
    current_user: User = Depends(get_current_user),
    comment_service: CommentService = Depends(),
) -> DeleteThreadResponse:
    removed = await comment_service.moderator_delete(current_user, comment_id)
    return DeleteThreadResponse(message="Comment and replies deleted", deleted_count=removed)


@comments_router.get("/group/{group_ref}/comments", response_model=CommentListResponse)
async def list_group_comments(
    page: int = Query(1, ge=1),
    limit: int = Query(_settings.DEFAULT_PAGE_SIZE, ge=1, le=_settings.MAX_PAGE_SIZE),
    sort_by: str = Query("createdAt", alias="sortBy"),
    order: str = Query("desc"),
    group: Group = Depends(get_group),
    comment_service: CommentService = Depends(),
) -> CommentListResponse:
    result = await comment_service.list_group_comments(group, page, limit, sort_by, order)
    return CommentListResponse.from_page(result)


@comments_router.get("/comment/{comment_id}/replies", response_model=CommentListResponse)
async def list_replies(
    comment_id: UUID,
    page: int = Query(1, ge=1),
    limit: int = Query(_settings.DEFAULT_PAGE_SIZE, ge=1, le=_settings.MAX_PAGE_SIZE),
    comment_service: CommentService = Depends(),
) -> CommentListResponse:
    result = await comment_service.list_replies(comment_id, page, limit)
    return CommentListResponse.from_page(result)
