import logging
from contextlib import contextmanager

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import firestore
from pydantic import ValidationError

from app.repositories.base import DateRange, DocumentRepository, RecordDecodeError
from app.resources import Resource
from app.store import get_db

log = logging.getLogger("uvicorn")


@contextmanager
def store_errors(action: str, noun: str):
    """Map Firestore and decode failures to a 500 with a short message."""
    try:
        yield
    except (GoogleAPIError, GoogleAuthError):
        log.exception("firestore %s %s failed", action, noun)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to {action} {noun}"
        )
    except RecordDecodeError as e:
        log.error("cannot decode %s: %s", e, e.__cause__)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to parse {noun}"
        )


def build_crud_router(resource: Resource) -> APIRouter:
    """
    List/get/create/update/delete for one session collection.

      GET    {prefix}?startDate=&endDate=   newest first
      GET    {prefix}/{session_id}
      POST   {prefix}                       201
      PUT    {prefix}/{session_id}          404 before the body is read
      DELETE {prefix}/{session_id}          404 when absent, else 204
    """
    Record = resource.repository.record_model
    Input = resource.repository.input_model
    noun = resource.noun
    router = APIRouter(prefix=resource.prefix, tags=[resource.tag])

    def get_repo(db: firestore.Client = Depends(get_db)) -> DocumentRepository:
        return resource.repository(db)

    def existing_id(session_id: str, repo: DocumentRepository = Depends(get_repo)) -> str:
        with store_errors("fetch", noun):
            found = repo.exists(session_id)
        if not found:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{noun.capitalize()} not found")
        return session_id

    async def input_body(request: Request):
        raw = await request.body()
        try:
            return Input.model_validate_json(raw)
        except ValidationError:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid request body")

    # A trailing slash is an empty id: same as the collection
    @router.get("", response_model=list[Record], response_model_exclude_none=True)
    @router.get("/", response_model=list[Record], response_model_exclude_none=True, include_in_schema=False)
    def list_sessions(
        repo: DocumentRepository = Depends(get_repo),
        start_date: str | None = Query(None, alias="startDate"),
        end_date: str | None = Query(None, alias="endDate"),
    ):
        with store_errors("fetch", f"{noun}s"):
            return repo.list(DateRange(start=start_date, end=end_date))

    @router.get("/{session_id}", response_model=Record, response_model_exclude_none=True)
    def get_session(session_id: str, repo: DocumentRepository = Depends(get_repo)):
        with store_errors("fetch", noun):
            record = repo.get(session_id)
        if record is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{noun.capitalize()} not found")
        return record

    @router.post("", response_model=Record, response_model_exclude_none=True,
                 status_code=status.HTTP_201_CREATED)
    @router.post("/", response_model=Record, response_model_exclude_none=True,
                 status_code=status.HTTP_201_CREATED, include_in_schema=False)
    def create_session(payload=Depends(input_body), repo: DocumentRepository = Depends(get_repo)):
        with store_errors("create", noun):
            return repo.create(payload)

    @router.put("/{session_id}", response_model=Record, response_model_exclude_none=True)
    def update_session(
        session_id: str = Depends(existing_id),
        payload=Depends(input_body),
        repo: DocumentRepository = Depends(get_repo),
    ):
        with store_errors("update", noun):
            record = repo.update(session_id, payload)
        if record is None:
            # deleted between the write and the re-read
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{noun.capitalize()} not found")
        return record

    @router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_session(session_id: str = Depends(existing_id), repo: DocumentRepository = Depends(get_repo)):
        with store_errors("delete", noun):
            repo.delete(session_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
