"""HTTP handlers for the /posts collection."""

from typing import Annotated

import structlog
from fastapi import APIRouter, HTTPException, Path, Request, Response, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from blog_api.error_handlers import INVALID_POST_ID
from blog_api.metrics import posts_created_total, posts_deleted_total
from blog_api.models import Post, PostCreate
from blog_api.store import PostStore

log = structlog.get_logger()

router = APIRouter(prefix="/posts", tags=["posts"])

POST_NOT_FOUND = "Post not found"

# Ids are signed 64-bit decimal integers: optional sign, digits only.
_ID_PATTERN = r"^[+-]?[0-9]+$"
_ID_MIN = -(2**63)
_ID_MAX = 2**63 - 1

PostId = Annotated[str, Path(pattern=_ID_PATTERN)]


def _store(request: Request) -> PostStore:
    store: PostStore = request.app.state.store
    return store


def _parse_post_id(raw: str) -> int:
    post_id = int(raw)
    if not _ID_MIN <= post_id <= _ID_MAX:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_POST_ID)
    return post_id


async def _read_candidate(request: Request) -> PostCreate:
    """Decode the body as JSON whatever its Content-Type claims."""
    body = await request.body()
    try:
        return PostCreate.model_validate_json(body)
    except ValidationError as exc:
        errors = [{**e, "loc": ("body", *e["loc"])} for e in exc.errors()]
        raise RequestValidationError(errors) from exc


@router.get("", response_model=list[Post])
@router.get("/", response_model=list[Post], include_in_schema=False)
def list_posts(request: Request) -> list[Post]:
    return _store(request).list()


@router.post("", status_code=status.HTTP_201_CREATED, response_model=Post)
@router.post(
    "/", status_code=status.HTTP_201_CREATED, response_model=Post, include_in_schema=False
)
async def create_post(request: Request) -> Post:
    candidate = await _read_candidate(request)
    post = _store(request).create(candidate)
    posts_created_total.add(1)
    await log.ainfo("post_created", post_id=post.id, author=post.author)
    return post


@router.get("/{post_id}", response_model=Post)
def get_post(request: Request, post_id: PostId) -> Post:
    post = _store(request).find_by_id(_parse_post_id(post_id))
    if post is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=POST_NOT_FOUND)
    return post


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(request: Request, post_id: PostId) -> Response:
    parsed = _parse_post_id(post_id)
    if not _store(request).remove(parsed):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=POST_NOT_FOUND)
    posts_deleted_total.add(1)
    log.info("post_deleted", post_id=parsed)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
