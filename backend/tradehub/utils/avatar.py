from urllib.parse import quote

AVATAR_FALLBACK_URL = "https://ui-avatars.com/api/"
AVATAR_BACKGROUND = "8b5cf6"
AVATAR_COLOR = "fff"


def generate_avatar(username: str, size: int = 150) -> str:
    """Initials avatar URL derived only from the username."""
    return (
        f"{AVATAR_FALLBACK_URL}?name={quote(username, safe='')}"
        f"&background={AVATAR_BACKGROUND}&color={AVATAR_COLOR}&size={size}"
    )
