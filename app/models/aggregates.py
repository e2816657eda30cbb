# app/models/aggregates.py
"""
인물 집계 카운터(post_count, post_score, comment_count, comment_score) 갱신.

DB 트리거 역할을 하는 ORM mapper 이벤트 모음. 인물/팔로우 서비스는 이 카운터를
직접 쓰지 않는다.

알려진 한계: 댓글이 removed/deleted 되거나 행이 삭제되어도 그 댓글의 점수는
comment_score 에서 빠지지 않는다 (comment_likes 는 DB cascade 로만 지워짐).
"""

from sqlalchemy import event, inspect, select, update
from app.models.person import PersonModel
from app.models.post import PostModel
from app.models.post_like import PostLikeModel
from app.models.comment import CommentModel
from app.models.comment_like import CommentLikeModel

persons = PersonModel.__table__


def _bump(connection, person_id, **deltas):
    values = {name: getattr(persons.c, name) + delta for name, delta in deltas.items()}
    connection.execute(update(persons).where(persons.c.person_id == person_id).values(**values))


def _is_live(target) -> bool:
    return not target.removed and not target.deleted


def _was_live(target) -> bool:
    """flush 직전 값 기준 활성 여부"""
    state = inspect(target)
    flags = []
    for name in ("removed", "deleted"):
        history = state.attrs[name].history
        if history.deleted:
            flags.append(history.deleted[0])
        else:
            flags.append(getattr(target, name))
    return not any(flags)


def _live_delta(target) -> int:
    return int(_is_live(target)) - int(_was_live(target))


# 게시글
@event.listens_for(PostModel, "after_insert")
def _post_inserted(mapper, connection, target):
    if _is_live(target):
        _bump(connection, target.creator_id, post_count=1)


@event.listens_for(PostModel, "after_update")
def _post_updated(mapper, connection, target):
    delta = _live_delta(target)
    if delta:
        _bump(connection, target.creator_id, post_count=delta)


@event.listens_for(PostModel, "after_delete")
def _post_deleted(mapper, connection, target):
    if _was_live(target):
        _bump(connection, target.creator_id, post_count=-1)


# 게시글 좋아요
def _post_creator_id(connection, post_id):
    return connection.execute(
        select(PostModel.creator_id).where(PostModel.post_id == post_id)
    ).scalar()


@event.listens_for(PostLikeModel, "after_insert")
def _post_like_inserted(mapper, connection, target):
    creator_id = _post_creator_id(connection, target.post_id)
    if creator_id is not None:
        _bump(connection, creator_id, post_score=target.score)


@event.listens_for(PostLikeModel, "after_delete")
def _post_like_deleted(mapper, connection, target):
    creator_id = _post_creator_id(connection, target.post_id)
    if creator_id is not None:
        _bump(connection, creator_id, post_score=-target.score)


# 댓글
@event.listens_for(CommentModel, "after_insert")
def _comment_inserted(mapper, connection, target):
    if _is_live(target):
        _bump(connection, target.creator_id, comment_count=1)


@event.listens_for(CommentModel, "after_update")
def _comment_updated(mapper, connection, target):
    delta = _live_delta(target)
    if delta:
        _bump(connection, target.creator_id, comment_count=delta)


@event.listens_for(CommentModel, "after_delete")
def _comment_deleted(mapper, connection, target):
    if _was_live(target):
        _bump(connection, target.creator_id, comment_count=-1)


# 댓글 좋아요
def _comment_creator_id(connection, comment_id):
    return connection.execute(
        select(CommentModel.creator_id).where(CommentModel.comment_id == comment_id)
    ).scalar()


@event.listens_for(CommentLikeModel, "after_insert")
def _comment_like_inserted(mapper, connection, target):
    creator_id = _comment_creator_id(connection, target.comment_id)
    if creator_id is not None:
        _bump(connection, creator_id, comment_score=target.score)


@event.listens_for(CommentLikeModel, "after_delete")
def _comment_like_deleted(mapper, connection, target):
    creator_id = _comment_creator_id(connection, target.comment_id)
    if creator_id is not None:
        _bump(connection, creator_id, comment_score=-target.score)
