# files_manager/models/user.py
from sqlalchemy import Column, String

from files_manager.core.ids import new_id
from files_manager.models.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(String(24), primary_key=True, default=new_id)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)   # werkzeug hash

    def to_dict(self) -> dict:
        return {"id": self.id, "email": self.email}
