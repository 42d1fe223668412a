# files_manager/routers/files.py
import mimetypes
from typing import Any, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import FileResponse
from pydantic import BaseModel
from sqlalchemy.orm import Session

from files_manager.core.errors import NoContent, NotFound, ValidationError
from files_manager.core.ids import ROOT_ID, is_root, is_valid_id
from files_manager.models.file import FOLDER, IMAGE
from files_manager.models.user import User
from files_manager.routers.deps import get_current_user, get_db, get_file_tree, get_optional_user
from files_manager.services.file_tree import FileTree
from files_manager.services.listing import list_files
from files_manager.workers.thumbnails import THUMBNAIL_WIDTHS

router = APIRouter(prefix="/files", tags=["Files"])

DEFAULT_CONTENT_TYPE = "text/plain; charset=utf-8"


class FileUpload(BaseModel):
    # loose types: FileTree.create owns the checks and their error messages
    name: Any = None
    type: Any = None
    parentId: Any = ROOT_ID
    isPublic: Any = False
    data: Any = None


def _page_number(page: Optional[str]) -> int:
    try:
        return max(int(page), 0)
    except (TypeError, ValueError):
        return 0


# --- upload a new file or folder ---
@router.post("", status_code=201)
async def upload_file(
    request: Request,
    payload: Optional[FileUpload] = None,
    user: User = Depends(get_current_user),
    tree: FileTree = Depends(get_file_tree),
):
    payload = payload or FileUpload()
    record = await run_in_threadpool(
        tree.create,
        user,
        name=payload.name,
        type=payload.type,
        parent_id=payload.parentId,
        is_public=payload.isPublic,
        data=payload.data,
    )

    if record.type == IMAGE:
        await request.app.state.thumbnail_queue.enqueue(
            file_id=record.id,
            user_id=user.id,
            display_name=f"Thumbnail generation [{user.id}-{record.id}]",
        )

    return record.to_dict()


# --- show one of the user's files ---
@router.get("/{file_id}")
def get_show(
    file_id: str,
    user: User = Depends(get_current_user),
    tree: FileTree = Depends(get_file_tree),
):
    if not is_valid_id(file_id):
        raise ValidationError("Invalid file ID")
    return tree.get(user, file_id).to_dict()


# --- list the user's files under a folder ---
@router.get("")
def get_index(
    parentId: Optional[str] = None,
    page: Optional[str] = None,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    if not is_root(parentId) and not is_valid_id(parentId):
        raise ValidationError("Invalid parent folder ID")
    return list_files(db, user, parentId, _page_number(page))


@router.put("/{file_id}/publish")
def put_publish(
    file_id: str,
    user: User = Depends(get_current_user),
    tree: FileTree = Depends(get_file_tree),
):
    return tree.set_visibility(user, file_id, True).to_dict()


@router.put("/{file_id}/unpublish")
def put_unpublish(
    file_id: str,
    user: User = Depends(get_current_user),
    tree: FileTree = Depends(get_file_tree),
):
    return tree.set_visibility(user, file_id, False).to_dict()


# --- raw content, for the owner or anyone when public ---
@router.get("/{file_id}/data")
def get_file(
    file_id: str,
    size: Optional[str] = None,
    user: Optional[User] = Depends(get_optional_user),
    tree: FileTree = Depends(get_file_tree),
):
    record = tree.get_readable(user, file_id)
    if record.type == FOLDER:
        raise NoContent()

    if size is not None and size not in {str(width) for width in THUMBNAIL_WIDTHS}:
        raise NotFound()

    path = tree.storage.resolve(record, size)
    content_type = mimetypes.guess_type(record.name)[0] or DEFAULT_CONTENT_TYPE

    return FileResponse(path, media_type=content_type)
