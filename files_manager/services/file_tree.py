# files_manager/services/file_tree.py
import base64
import binascii
from typing import Optional

from loguru import logger
from sqlalchemy.orm import Session

from files_manager.core.errors import NotFound, ValidationError
from files_manager.core.ids import ROOT_ID, ROOT_PARENT, is_valid_id, normalize_id
from files_manager.models.file import FILE_TYPES, FOLDER, FileRecord
from files_manager.models.user import User
from files_manager.services.storage import FileStorageEngine


class FileTree:
    """Owner-scoped access to file records and their parent/child links."""

    def __init__(self, db: Session, storage: FileStorageEngine):
        self.db = db
        self.storage = storage

    def create(
        self,
        owner: User,
        name: Optional[str],
        type: Optional[str],
        parent_id=0,
        is_public: bool = False,
        data: Optional[str] = None,
    ) -> FileRecord:
        if not name or not isinstance(name, str):
            raise ValidationError("Missing name")
        if not isinstance(type, str) or type not in FILE_TYPES:
            raise ValidationError("Missing type")
        if not data and type != FOLDER:
            raise ValidationError("Missing file data")

        parent = self._parent_folder(owner, parent_id)

        record = FileRecord(
            user_id=owner.id,
            name=name,
            type=type,
            is_public=bool(is_public),
            parent_id=parent.id if parent else ROOT_PARENT,
        )

        if type != FOLDER:
            # bytes hit the disk before the record is committed
            record.local_path = self.storage.write(self._decode(data))

        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)

        logger.info(f"User {owner.id} created {type} {record.id}")
        return record

    def get(self, owner: User, file_id: str) -> FileRecord:
        if not is_valid_id(file_id):
            raise NotFound()
        file_id = normalize_id(file_id)

        record = (
            self.db.query(FileRecord)
            .filter(FileRecord.id == file_id, FileRecord.user_id == owner.id)
            .first()
        )
        if not record:
            raise NotFound()
        return record

    def set_visibility(self, owner: User, file_id: str, is_public: bool) -> FileRecord:
        record = self.get(owner, file_id)
        # last writer wins
        record.is_public = is_public
        self.db.commit()
        return record

    def get_readable(self, caller: Optional[User], file_id: str) -> FileRecord:
        """A record the caller may read: its own, or any public one."""
        if not is_valid_id(file_id):
            raise NotFound()
        file_id = normalize_id(file_id)

        record = self.db.query(FileRecord).filter(FileRecord.id == file_id).first()
        if not record:
            raise NotFound()
        if not record.is_public and (caller is None or caller.id != record.user_id):
            raise NotFound()
        return record

    def _parent_folder(self, owner: User, parent_id) -> Optional[FileRecord]:
        # an explicit null parent is not the root
        if parent_id is not None and parent_id in (ROOT_ID, ROOT_PARENT):
            return None
        # bad format, missing record, and non-folder all read the same
        if not is_valid_id(parent_id):
            raise ValidationError("Invalid parent")
        parent_id = normalize_id(parent_id)

        parent = (
            self.db.query(FileRecord)
            .filter(FileRecord.id == parent_id, FileRecord.user_id == owner.id)
            .first()
        )
        if not parent or parent.type != FOLDER:
            raise ValidationError("Invalid parent")
        return parent

    @staticmethod
    def _decode(data) -> bytes:
        try:
            return base64.b64decode(data, validate=True)
        except (binascii.Error, TypeError, ValueError):
            raise ValidationError("Invalid file data")
