# files_manager/workers/notifications.py
import asyncio
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape
from loguru import logger

from files_manager.core.errors import JobFailure
from files_manager.core.ids import is_valid_id
from files_manager.services.users import get_user

WELCOME_SUBJECT = "Welcome to Files Manager"
TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Environment(
    loader=FileSystemLoader(TEMPLATES_DIR),
    autoescape=select_autoescape(["html"]),
)


def render_welcome(email: str) -> str:
    return templates.get_template("welcome_email.html").render(email=email)


async def send_welcome_email(ctx, *, user_id: Optional[str] = None) -> str:
    """saq task: greet a freshly registered user."""
    if not user_id:
        raise JobFailure("Missing userId")

    user = None
    if is_valid_id(user_id):
        with ctx["session_factory"]() as db:
            user = get_user(db, user_id)
    if user is None:
        raise JobFailure("User not found")

    logger.info(f"Sending welcome email to {user.email}")

    mailer = ctx["mailer"]
    try:
        msg = mailer.build_message(user.email, WELCOME_SUBJECT, render_welcome(user.email))
        await asyncio.to_thread(mailer.send, msg)
    except (OSError, ValueError) as e:
        raise JobFailure(f"Welcome email to {user.email} failed: {e}") from e

    return user.email
