"""Query contributors that attach Facebook credentials to requests."""
from .base import QueryContributor
from .credentials import Credentials
from .tokens import AccessToken, AppAccessToken, UserAccessToken

__all__ = ["QueryContributor", "Credentials", "AccessToken", "UserAccessToken", "AppAccessToken"]
