import secrets
from typing import Optional
from datetime import datetime, timedelta, UTC
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from core.sa.models import User, AuthSession
from core.utils.dates import as_utc

class UserRepository:
    """Repository for users and their bearer-token sessions."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.
        
        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def create_user(self, email: str, name: Optional[str] = None, image: Optional[str] = None) -> User:
        """Create a new user.
        
        Args:
            email: The email the identity provider reports for the user
            name: Optional display name
            image: Optional avatar URL
            
        Returns:
            The created User object
            
        Raises:
            ValueError: If a user with the given email already exists
        """
        existing = self.get_by_email(email)
        if existing:
            raise ValueError(f"User with email '{email}' already exists")

        user = User(email=email, name=name, image=image)
        self.session.add(user)
        try:
            self.session.commit()
            return user
        except IntegrityError:
            self.session.rollback()
            raise ValueError(f"User with email '{email}' already exists")

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.session.query(User).filter(User.id == user_id).one_or_none()

    def get_by_email(self, email: str) -> Optional[User]:
        return self.session.query(User).filter(User.email == email).one_or_none()

    def create_auth_session(self, user_id: int, ttl: Optional[timedelta] = None) -> AuthSession:
        """Issue a new bearer token for a user.
        
        Args:
            user_id: The ID of the user
            ttl: Optional lifetime of the token; tokens without one never expire
            
        Returns:
            The created AuthSession
        """
        now = datetime.now(UTC)
        auth_session = AuthSession(
            token=secrets.token_urlsafe(32),
            user_id=user_id,
            created_at=now,
            expires_at=now + ttl if ttl else None
        )
        self.session.add(auth_session)
        self.session.commit()
        return auth_session

    def get_by_token(self, token: str) -> Optional[User]:
        """Resolve a bearer token to its user.
        
        Returns:
            The User if the token exists and has not expired, None otherwise
        """
        auth_session = (
            self.session.query(AuthSession)
            .filter(AuthSession.token == token)
            .one_or_none()
        )
        if not auth_session:
            return None
        expires_at = as_utc(auth_session.expires_at)
        if expires_at and expires_at <= datetime.now(UTC):
            return None
        return auth_session.user

    def revoke_token(self, token: str) -> bool:
        result = (
            self.session.query(AuthSession)
            .filter(AuthSession.token == token)
            .delete()
        )
        self.session.commit()
        return result > 0
