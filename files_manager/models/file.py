# files_manager/models/file.py
from sqlalchemy import Boolean, Column, ForeignKey, Index, String

from files_manager.core.ids import ROOT_ID, ROOT_PARENT, new_id
from files_manager.models.database import Base

FOLDER = "folder"
FILE = "file"
IMAGE = "image"
FILE_TYPES = (FOLDER, FILE, IMAGE)


class FileRecord(Base):
    __tablename__ = "files"

    id = Column(String(24), primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    type = Column(String(16), nullable=False)
    is_public = Column(Boolean, nullable=False, default=False)
    parent_id = Column(String(24), nullable=False, default=ROOT_PARENT)   # "0" = root
    local_path = Column(String, nullable=True)   # never sent to clients

    user_id = Column(String(24), ForeignKey("users.id"), nullable=False)

    __table_args__ = (Index("ix_files_user_parent", "user_id", "parent_id"),)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "userId": self.user_id,
            "name": self.name,
            "type": self.type,
            "isPublic": self.is_public,
            "parentId": ROOT_ID if self.parent_id == ROOT_PARENT else self.parent_id,
        }
