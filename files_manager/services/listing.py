# files_manager/services/listing.py
from typing import List

from sqlalchemy.orm import Session

from files_manager.core.ids import ROOT_PARENT, is_root, normalize_id
from files_manager.models.file import FileRecord
from files_manager.models.user import User

PAGE_SIZE = 20


def list_files(db: Session, owner: User, parent_id=0, page: int = 0) -> List[dict]:
    """
    One page of the owner's files directly under `parent_id`, newest first.

    Pages are zero-based windows of PAGE_SIZE records; past the end the
    result is simply empty.
    """
    parent = ROOT_PARENT if is_root(parent_id) else normalize_id(parent_id)
    page = max(page, 0)

    files = (
        db.query(FileRecord)
        .filter(FileRecord.user_id == owner.id, FileRecord.parent_id == parent)
        .order_by(FileRecord.id.desc())
        .offset(page * PAGE_SIZE)
        .limit(PAGE_SIZE)
        .all()
    )
    return [f.to_dict() for f in files]
