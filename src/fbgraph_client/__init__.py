"""High-level Facebook Graph API client entrypoints."""
from .auth import AppAccessToken, Credentials, UserAccessToken
from .client import GraphClient
from .exceptions import FacebookException, GraphError, StatusCodeError, UnexpectedResponseError
from .request import GraphRequest, build_request
from .resources import Action
from .simple_types import Argument, arg, encode_simple

__all__ = [
    "GraphClient",
    "Credentials",
    "UserAccessToken",
    "AppAccessToken",
    "GraphError",
    "FacebookException",
    "StatusCodeError",
    "UnexpectedResponseError",
    "GraphRequest",
    "build_request",
    "Action",
    "Argument",
    "arg",
    "encode_simple",
]
