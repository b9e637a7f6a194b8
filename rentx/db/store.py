"""
Relational store for users and listings.

The store owns the schema and every SQL statement the service issues. Each
write touches a single table and commits on its own; constraint checks
(unique email, listing owner) are left to the database.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import List

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from rentx.core.exceptions import (
    DuplicateEmailError,
    MissingOwnerError,
    StoreError,
    UserNotFoundError,
)
from rentx.db.session import Base
from rentx.models import Listing, User

logger = logging.getLogger(__name__)


def _store_message(exc: SQLAlchemyError) -> str:
    # Prefer the driver's own message over SQLAlchemy's statement dump.
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class Store:
    """Store handle injected into the identity and listing services."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,  # Rows are read after their session closes
            bind=engine,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Yield a session, committing on success and rolling back on failure."""
        db = self.SessionLocal()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def initialize(self) -> None:
        """
        Create the users and listings tables if they do not exist yet.

        Raises:
            SQLAlchemyError: the engine could not be opened or the schema
                could not be created. The service cannot run without it.
        """
        try:
            tables = [User.__table__, Listing.__table__]
            Base.metadata.create_all(self.engine, tables=tables, checkfirst=True)
        except SQLAlchemyError as e:
            logger.error(f"Error creating database tables: {e}")
            raise
        logger.info("Database initialized successfully")

    def health_check(self) -> bool:
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.error(f"Database health check failed: {e}")
            return False

    def insert_user(self, name: str, email: str, password: str) -> int:
        """Insert a user and return its id. Raises DuplicateEmailError."""
        try:
            with self.session_scope() as db:
                user = User(name=name, email=email, password=password)
                db.add(user)
                db.flush()
                return user.id
        except IntegrityError as e:
            raise DuplicateEmailError(_store_message(e)) from e
        except SQLAlchemyError as e:
            raise StoreError(_store_message(e)) from e

    def find_user_by_credentials(self, email: str, password: str) -> int:
        """
        Return the id of the user with exactly this email and password.

        Both fields are compared verbatim; no normalization is applied.
        Raises UserNotFoundError when nothing matches.
        """
        try:
            with self.session_scope() as db:
                user_id = db.query(User.id)\
                    .filter(User.email == email, User.password == password)\
                    .scalar()
        except SQLAlchemyError as e:
            raise StoreError(_store_message(e)) from e

        if user_id is None:
            raise UserNotFoundError(f"No user with email {email} and the given password")
        return user_id

    def insert_listing(
        self,
        user_id: int,
        name: str,
        description: str,
        payment_per_day: int,
        image_path: str,
    ) -> int:
        """Insert a listing and return its id. Raises MissingOwnerError."""
        try:
            with self.session_scope() as db:
                listing = Listing(
                    user_id=user_id,
                    name=name,
                    description=description,
                    payment_per_day=payment_per_day,
                    image_path=image_path,
                )
                db.add(listing)
                db.flush()
                return listing.id
        except IntegrityError as e:
            raise MissingOwnerError(_store_message(e)) from e
        except SQLAlchemyError as e:
            raise StoreError(_store_message(e)) from e

    def list_all(self) -> List[Listing]:
        """All listings in the store's natural row order."""
        try:
            with self.session_scope() as db:
                return db.query(Listing).all()
        except SQLAlchemyError as e:
            raise StoreError(_store_message(e)) from e

    def list_by_owner(self, user_id: int) -> List[Listing]:
        try:
            with self.session_scope() as db:
                return db.query(Listing).filter(Listing.user_id == user_id).all()
        except SQLAlchemyError as e:
            raise StoreError(_store_message(e)) from e
