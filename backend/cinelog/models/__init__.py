from .user import *
from .auth_session import *
from .review import *
from .watchlist_item import *
from .auth_schemas import *

User.model_rebuild()
AuthSession.model_rebuild()
VerificationToken.model_rebuild()
Review.model_rebuild()
WatchlistItem.model_rebuild()

__all__ = [
    "User",
    "UserBase",
    "AuthSession",
    "VerificationToken",
    "Review",
    "ReviewBase",
    "WatchlistItem",
    "LoginEmailRequest",
    "LoginVerifyRequest",
    "Message",
    "Token",
]
