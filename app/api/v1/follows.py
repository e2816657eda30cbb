# app/api/v1/follows.py

from typing import List
from fastapi import APIRouter, Depends, Path
from app.schemas.person import Person
from app.schemas.person_follow import PersonFollower, PersonFollowerForm, UnfollowResponse
from app.services.person_follow_service import PersonFollowService

router = APIRouter()

def get_follow_service() -> PersonFollowService:
    return PersonFollowService()

@router.post(
    "/",
    response_model=PersonFollower,
    summary="인물 팔로우",
    description="팔로우 관계를 만들거나 덮어씁니다."
)
async def follow_person(
    form: PersonFollowerForm,
    follow_service: PersonFollowService = Depends(get_follow_service)
):
    return await follow_service.follow(form)

@router.post(
    "/{follower_id}/{target_id}/accept",
    response_model=PersonFollower,
    summary="팔로우 수락",
    description="원격 인스턴스의 수락 통지를 반영합니다."
)
async def accept_follow(
    follower_id: int = Path(description="팔로우하는 인물 ID"),
    target_id: int = Path(description="팔로우 당하는 인물 ID"),
    follow_service: PersonFollowService = Depends(get_follow_service)
):
    return await follow_service.follow_accepted(target_id, follower_id)

@router.delete(
    "/{follower_id}/{target_id}",
    response_model=UnfollowResponse,
    summary="인물 언팔로우",
    description="팔로우 관계를 해제합니다. 없는 관계면 count 0 을 반환합니다."
)
async def unfollow_person(
    follower_id: int = Path(description="팔로우하는 인물 ID"),
    target_id: int = Path(description="팔로우 당하는 인물 ID"),
    follow_service: PersonFollowService = Depends(get_follow_service)
):
    count = await follow_service.unfollow(
        PersonFollowerForm(follower_id=follower_id, target_id=target_id)
    )
    return UnfollowResponse(count=count)

@router.get(
    "/{person_id}/followers",
    response_model=List[Person],
    summary="팔로워 목록",
    description="인물을 팔로우 중인 인물 목록을 조회합니다."
)
async def get_followers(
    person_id: int = Path(description="인물 ID"),
    follow_service: PersonFollowService = Depends(get_follow_service)
):
    return await follow_service.list_followers(person_id)

@router.get(
    "/{person_id}/following",
    response_model=List[Person],
    summary="팔로잉 목록",
    description="인물이 팔로우 중인 인물 목록을 조회합니다."
)
async def get_following(
    person_id: int = Path(description="인물 ID"),
    follow_service: PersonFollowService = Depends(get_follow_service)
):
    return await follow_service.list_following(person_id)
