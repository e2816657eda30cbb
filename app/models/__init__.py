# app/models/__init__.py

from .instance import InstanceModel
from .person import PersonModel
from .local_user import LocalUserModel
from .person_follow import PersonFollowModel
from .community import CommunityModel
from .post import PostModel
from .post_like import PostLikeModel
from .comment import CommentModel
from .comment_like import CommentLikeModel
from . import aggregates  # noqa: F401  집계 이벤트 등록


__all__ = [
    "InstanceModel",
    "PersonModel",
    "LocalUserModel",
    "PersonFollowModel",
    "CommunityModel",
    "PostModel",
    "PostLikeModel",
    "CommentModel",
    "CommentLikeModel",
]
