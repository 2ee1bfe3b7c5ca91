from datetime import UTC, datetime, timedelta

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from tradehub.database import Base


class OAuthState(Base):
    """Pending Roblox sign-in attempt.

    Written when the authorization URL is built and deleted the first time the
    callback looks it up, so each state value can complete at most one login.
    The redirect URI sent to the provider is kept here so the token exchange
    can send the identical value back.
    """

    __tablename__ = "oauth_states"

    state: Mapped[str] = mapped_column(String(128), primary_key=True)
    redirect_uri: Mapped[str] = mapped_column(String(512), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def is_expired(self) -> bool:
        expires = self.expires_at
        # SQLite hands back naive datetimes
        if expires.tzinfo is None:
            expires = expires.replace(tzinfo=UTC)
        return datetime.now(UTC) > expires

    @classmethod
    def get_expiry_time(cls, minutes: int) -> datetime:
        return datetime.now(UTC) + timedelta(minutes=minutes)
