"""
Shared fixtures: in-memory SQLite database and services bound to it.
"""
import pytest
import pytest_asyncio
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, build_engine
from app import models  # noqa: F401
from app.services import (
    InstanceService,
    PersonService,
    PersonFollowService,
    LocalUserService,
    CommunityService,
    PostService,
    CommentService,
    LikeService,
)


@pytest.fixture
def engine():
    """Create test database engine."""
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False)


@pytest.fixture
def instance_service(session_factory):
    return InstanceService(session_factory)


@pytest.fixture
def person_service(session_factory):
    return PersonService(session_factory)


@pytest.fixture
def follow_service(session_factory):
    return PersonFollowService(session_factory)


@pytest.fixture
def local_user_service(session_factory):
    return LocalUserService(session_factory)


@pytest.fixture
def community_service(session_factory):
    return CommunityService(session_factory)


@pytest.fixture
def post_service(session_factory):
    return PostService(session_factory)


@pytest.fixture
def comment_service(session_factory):
    return CommentService(session_factory)


@pytest.fixture
def like_service(session_factory):
    return LikeService(session_factory)


@pytest_asyncio.fixture
async def instance(instance_service):
    return await instance_service.read_or_create("my_domain.tld")
