# files_manager/routers/app.py
from fastapi import APIRouter, Depends, Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from files_manager.models.file import FileRecord
from files_manager.models.user import User
from files_manager.routers.deps import get_db

router = APIRouter(tags=["App"])


@router.get("/status")
def get_status(request: Request, db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
        db_alive = True
    except SQLAlchemyError:
        db_alive = False

    return {"redis": request.app.state.cache.is_alive(), "db": db_alive}


@router.get("/stats")
def get_stats(db: Session = Depends(get_db)):
    return {
        "users": db.query(User).count(),
        "files": db.query(FileRecord).count(),
    }
