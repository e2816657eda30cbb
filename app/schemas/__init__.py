# app/schemas/__init__.py

from .instance import Instance
from .person import (
    Person,
    PersonState,
    PersonInsertForm,
    PersonUpdateForm,
    UsernameAvailability,
)
from .person_follow import FollowState, PersonFollower, PersonFollowerForm, UnfollowResponse
from .local_user import LocalUser, LocalUserInsertForm
from .content import (
    Community,
    CommunityInsertForm,
    Post,
    PostInsertForm,
    Comment,
    CommentInsertForm,
    ContentUpdateForm,
    LikeForm,
)

__all__ = [
    "Instance",
    "Person",
    "PersonState",
    "PersonInsertForm",
    "PersonUpdateForm",
    "UsernameAvailability",
    "FollowState",
    "PersonFollower",
    "PersonFollowerForm",
    "UnfollowResponse",
    "LocalUser",
    "LocalUserInsertForm",
    "Community",
    "CommunityInsertForm",
    "Post",
    "PostInsertForm",
    "Comment",
    "CommentInsertForm",
    "ContentUpdateForm",
    "LikeForm",
]
