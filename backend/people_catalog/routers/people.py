"""People catalog API endpoints."""
from typing import Optional
from fastapi import APIRouter, Depends

from ..config import Settings
from ..dependencies import get_app_settings
from ..exceptions import MissingQueryError, PersonNotFoundError
from ..schemas import PeopleListResponse, PersonDetailResponse, SearchResponse
from ..services import catalog_service

router = APIRouter(tags=["people"])


@router.api_route("/people", methods=["GET", "HEAD"], response_model=PeopleListResponse)
def list_people(settings: Settings = Depends(get_app_settings)):
    """List every person in the image directory, sorted by name."""
    people = catalog_service.build_catalog(settings.images_dir)
    return PeopleListResponse(data=people, count=len(people))


@router.api_route("/people/{person_id}", methods=["GET", "HEAD"], response_model=PersonDetailResponse)
def get_person(person_id: str, settings: Settings = Depends(get_app_settings)):
    """
    Get one person by id.

    Ids come from the current directory snapshot, so an id seen in an
    earlier listing may point elsewhere or nowhere after files change.
    """
    people = catalog_service.build_catalog(settings.images_dir)
    person = catalog_service.find_person(people, catalog_service.parse_person_id(person_id))
    if person is None:
        raise PersonNotFoundError()
    return PersonDetailResponse(data=person)


@router.api_route("/search", methods=["GET", "HEAD"], response_model=SearchResponse)
def search_people(q: Optional[str] = None, settings: Settings = Depends(get_app_settings)):
    """Search people by name (case-insensitive) or external id."""
    if not q:
        raise MissingQueryError()

    people = catalog_service.build_catalog(settings.images_dir)
    results = catalog_service.search_people(people, q)
    return SearchResponse(data=results, count=len(results), query=q)
