# app/services/__init__.py

from .instance_service import InstanceService
from .person_service import PersonService
from .person_follow_service import PersonFollowService
from .local_user_service import LocalUserService
from .community_service import CommunityService
from .post_service import PostService
from .comment_service import CommentService
from .like_service import LikeService

__all__ = [
    "InstanceService",
    "PersonService",
    "PersonFollowService",
    "LocalUserService",
    "CommunityService",
    "PostService",
    "CommentService",
    "LikeService",
]
