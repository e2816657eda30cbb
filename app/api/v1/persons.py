# app/api/v1/persons.py

from typing import List
from fastapi import APIRouter, Depends, Path, Query, status
from app.core.exceptions import NotFoundError
from app.schemas.person import Person, PersonInsertForm, PersonUpdateForm, UsernameAvailability
from app.services.person_service import PersonService

router = APIRouter()

def get_person_service() -> PersonService:
    return PersonService()

@router.post(
    "/",
    response_model=Person,
    status_code=status.HTTP_201_CREATED,
    summary="인물 생성",
    description="새 인물을 생성합니다. 같은 ap_id 가 있으면 409 를 반환합니다."
)
async def create_person(
    form: PersonInsertForm,
    person_service: PersonService = Depends(get_person_service)
):
    return await person_service.create(form)

@router.put(
    "/upsert",
    response_model=Person,
    summary="인물 upsert",
    description="ap_id 기준으로 인물을 생성하거나 덮어씁니다 (연합 프로필 수신용)."
)
async def upsert_person(
    form: PersonInsertForm,
    person_service: PersonService = Depends(get_person_service)
):
    return await person_service.upsert(form)

@router.get(
    "/by-name/{name}",
    response_model=Person,
    summary="이름으로 로컬 인물 조회",
    description="대소문자를 무시하고 로컬 인물을 조회합니다."
)
async def get_person_by_name(
    name: str = Path(description="인물 이름"),
    include_deleted: bool = Query(default=False, description="삭제된 인물 포함 여부"),
    person_service: PersonService = Depends(get_person_service)
):
    person = await person_service.read_from_name(name, include_deleted)
    if not person:
        raise NotFoundError("인물을 찾을 수 없습니다")
    return person

@router.get(
    "/resolve",
    response_model=Person,
    summary="핸들 조회",
    description="name@domain 형태의 핸들로 인물을 조회합니다."
)
async def resolve_person(
    name: str = Query(description="인물 이름"),
    domain: str = Query(description="인스턴스 도메인"),
    person_service: PersonService = Depends(get_person_service)
):
    person = await person_service.read_from_name_and_domain(name, domain)
    if not person:
        raise NotFoundError("인물을 찾을 수 없습니다")
    return person

@router.get(
    "/availability/{name}",
    response_model=UsernameAvailability,
    summary="이름 사용 가능 여부",
    description="로컬 인물 이름이 이미 사용 중이면 409 를 반환합니다."
)
async def check_name_available(
    name: str = Path(description="확인할 이름"),
    person_service: PersonService = Depends(get_person_service)
):
    await person_service.check_name_available(name)
    return UsernameAvailability(name=name, available=True)

@router.get(
    "/{person_id}",
    response_model=Person,
    summary="인물 상세 정보",
    description="삭제되지 않은 인물을 조회합니다."
)
async def get_person(
    person_id: int = Path(description="인물 ID"),
    person_service: PersonService = Depends(get_person_service)
):
    return await person_service.read(person_id)

@router.patch(
    "/{person_id}",
    response_model=Person,
    summary="인물 수정",
    description="넘긴 필드만 수정합니다."
)
async def update_person(
    form: PersonUpdateForm,
    person_id: int = Path(description="인물 ID"),
    person_service: PersonService = Depends(get_person_service)
):
    return await person_service.update(person_id, form)

@router.delete(
    "/{person_id}",
    response_model=Person,
    summary="계정 삭제",
    description="개인 정보를 비우고 삭제 상태로 전환합니다. 행은 남습니다."
)
async def delete_account(
    person_id: int = Path(description="인물 ID"),
    person_service: PersonService = Depends(get_person_service)
):
    return await person_service.delete_account(person_id)

@router.get(
    "/{person_id}/communities",
    response_model=List[int],
    summary="활동한 로컬 커뮤니티",
    description="인물이 글이나 댓글을 쓴 로컬 커뮤니티 ID 목록입니다."
)
async def list_local_community_ids(
    person_id: int = Path(description="인물 ID"),
    person_service: PersonService = Depends(get_person_service)
):
    return await person_service.list_local_community_ids(person_id)
