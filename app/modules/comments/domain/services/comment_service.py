# 📄 File: app/modules/comments/domain/services/comment_service.py
# 🧭 Purpose (Layman Explanation):
# The rules for talking on a club's page: only members can comment or reply, people can
# delete their own comments unless someone has replied, and moderators can clear a
# whole thread.
# 🧪 Purpose (Technical Summary):
# Domain service for comment threads: creation and replies (member only), author delete
# blocked by replies, privileged subtree delete, and paginated listings with reply counts.
# 🔗 Dependencies:
# CommentRepository, GroupRepository, MembershipService, ActivityLogRepository
# 🔄 Connected Modules / Calls From:
# comments API endpoints

from dataclasses import dataclass
from typing import Dict, List
from uuid import UUID

from fastapi import Depends

from app.modules.comments.domain.models.comment import (
    Comment,
    GroupTarget,
    ParentCommentTarget,
)
from app.modules.comments.domain.repositories.comment_repository import CommentRepository
from app.modules.groups.domain.models.activity import ActivityAction, ActivityLog
from app.modules.groups.domain.models.group import Group
from app.modules.groups.domain.repositories.activity_log_repository import ActivityLogRepository
from app.modules.groups.domain.repositories.group_repository import GroupRepository
from app.modules.groups.domain.services.membership_service import MembershipService
from app.modules.user_management.domain.models.user import User
from app.modules.user_management.domain.repositories.user_repository import UserRepository
from app.shared.core.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from app.shared.utils.helpers import page_window, total_pages
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)

# Deepest reply chain walked when resolving a thread's group
MAX_THREAD_DEPTH = 32

SORTABLE_FIELDS = {"createdAt"}
SORT_ORDERS = {"asc", "desc"}


@dataclass
class CommentPage:
    comments: List[Comment]
    reply_counts: Dict[UUID, int]
    authors: Dict[UUID, User]
    page: int
    total_pages: int
    total: int


class CommentService:
    """
    Domain service for comment threads.
    """

    def __init__(
        self,
        comment_repository: CommentRepository = Depends(),
        group_repository: GroupRepository = Depends(),
        user_repository: UserRepository = Depends(),
        activity_repository: ActivityLogRepository = Depends(),
        membership_service: MembershipService = Depends(),
    ):
        self.comments = comment_repository
        self.groups = group_repository
        self.users = user_repository
        self.activity = activity_repository
        self.membership = membership_service

    async def get(self, comment_id: UUID) -> Comment:
        comment = await self.comments.get_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    # =========================================================================
    # WRITING
    # =========================================================================

    async def create_comment(self, author: User, group: Group, content: str) -> Comment:
        """
        Post a top-level comment on a group.

        Raises:
            AuthorizationError: If the author is not a member
        """
        await self.membership.require_member(group, author)

        comment = await self.comments.create(Comment(
            content=content,
            author_id=author.user_id,
            target=GroupTarget(group_id=group.group_id),
            group_id=group.group_id,
        ))
        await self.activity.append(ActivityLog(
            group_id=group.group_id,
            user_id=author.user_id,
            action=ActivityAction.COMMENTED,
            comment_id=comment.comment_id,
        ))
        logger.log_user_action("comment.create", str(author.user_id), resource=str(comment.comment_id))
        return comment

    async def reply(self, author: User, parent_id: UUID, content: str) -> Comment:
        """
        Reply to a comment. The author must be a member of the thread's group.

        Raises:
            NotFoundError: If the parent comment or its group is gone
            AuthorizationError: If the author is not a member
        """
        parent = await self.get(parent_id)
        group = await self.resolve_group(parent)
        await self.membership.require_member(group, author)

        reply = await self.comments.create(Comment(
            content=content,
            author_id=author.user_id,
            target=ParentCommentTarget(comment_id=parent.comment_id),
            group_id=group.group_id,
        ))
        logger.log_user_action("comment.reply", str(author.user_id), resource=str(reply.comment_id))
        return reply

    async def resolve_group(self, comment: Comment) -> Group:
        """
        Walk reply links up to the comment that targets a group.

        Raises:
            NotFoundError: If a link in the chain or the group no longer exists
            ValidationError: If the chain is deeper than MAX_THREAD_DEPTH
        """
        current = comment
        for _ in range(MAX_THREAD_DEPTH):
            if isinstance(current.target, GroupTarget):
                group = await self.groups.get_by_id(current.target.group_id)
                if group is None:
                    raise NotFoundError("Group", str(current.target.group_id))
                return group
            parent = await self.comments.get_by_id(current.target.comment_id)
            if parent is None:
                raise NotFoundError("Comment", str(current.target.comment_id))
            current = parent
        raise ValidationError("Reply thread is too deep")

    # =========================================================================
    # DELETING
    # =========================================================================

    async def delete_own(self, user: User, comment_id: UUID) -> None:
        """
        Author delete. Refused while the comment has replies.

        Raises:
            AuthorizationError: If the caller is not the author
            ConflictError: If the comment has replies
        """
        comment = await self.get(comment_id)
        if comment.author_id != user.user_id:
            raise AuthorizationError("You do not have permission to delete this comment")

        replies = await self.comments.count_replies([comment.comment_id])
        if replies.get(comment.comment_id, 0) > 0:
            raise ConflictError("Cannot delete a comment with replies", "COMMENT_HAS_REPLIES")

        await self.comments.delete(comment.comment_id)
        logger.log_user_action("comment.delete", str(user.user_id), resource=str(comment_id))

    async def moderator_delete(self, actor: User, comment_id: UUID) -> int:
        """
        Delete a comment and all its replies. Allowed for the group owner,
        its moderators and site admins.

        Returns:
            Number of comments removed
        """
        comment = await self.get(comment_id)
        group = await self.resolve_group(comment)
        if not actor.is_admin and not await self.membership.is_privileged(group, actor.user_id):
            raise AuthorizationError("You do not have permission to delete this comment")

        removed = await self.comments.delete_subtree(comment.comment_id)
        logger.log_business_event(
            event_type="comment.thread_deleted",
            description=f"Comment thread deleted ({removed} comments)",
            entity_id=str(comment_id),
            entity_type="comment",
            extra={"actor_id": str(actor.user_id), "group_id": str(group.group_id)},
        )
        return removed

    # =========================================================================
    # LISTINGS
    # =========================================================================

    async def list_group_comments(
        self,
        group: Group,
        page: int,
        limit: int,
        sort_by: str = "createdAt",
        order: str = "desc",
    ) -> CommentPage:
        if sort_by not in SORTABLE_FIELDS:
            raise ValidationError(f"Cannot sort comments by {sort_by}", field="sortBy")
        if order not in SORT_ORDERS:
            raise ValidationError("order must be asc or desc", field="order")
        offset, limit = page_window(page, limit)
        comments, total = await self.comments.list_for_group(
            group.group_id, offset, limit, descending=(order == "desc")
        )
        return await self._page(comments, total, page, limit)

    async def list_replies(self, comment_id: UUID, page: int, limit: int) -> CommentPage:
        comment = await self.get(comment_id)
        offset, limit = page_window(page, limit)
        replies, total = await self.comments.list_replies(comment.comment_id, offset, limit)
        return await self._page(replies, total, page, limit)

    async def _page(self, comments: List[Comment], total: int, page: int, limit: int) -> CommentPage:
        reply_counts = await self.comments.count_replies([c.comment_id for c in comments])
        author_ids = list(dict.fromkeys(c.author_id for c in comments))
        authors = {u.user_id: u for u in await self.users.get_many(author_ids)}
        return CommentPage(
            comments=comments,
            reply_counts=reply_counts,
            authors=authors,
            page=page,
            total_pages=total_pages(total, limit),
            total=total,
        )

