import logging

from sqlmodel import Session, select

from ebookstore.models.user import User, UserRole

logger = logging.getLogger(__name__)


def ensure_default_admin(session: Session, container) -> None:
    """Create the ADMIN user from ADMIN_EMAIL/ADMIN_PASSWORD on first startup.

    Registration only ever yields customers, so this is the way an
    administrator comes to exist. Nothing happens without ADMIN_PASSWORD.
    """
    settings = container.settings
    if not settings.admin_password:
        logger.debug("ADMIN_PASSWORD not set, skipping default admin")
        return

    existing = session.exec(select(User).where(User.email == settings.admin_email)).first()
    if existing:
        return

    admin = User(
        id=container.id_generator.new_id(),
        first_name="Admin",
        last_name="User",
        email=settings.admin_email,
        role=UserRole.ADMIN.value,
        password_hash=container.hasher.hash(settings.admin_password),
    )
    session.add(admin)
    session.commit()
    logger.warning("created default admin | email=%s | id=%s", admin.email, admin.id)
