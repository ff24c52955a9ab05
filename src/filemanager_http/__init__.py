"""filemanager-http - request routing and dispatch for a file manager service."""

from filemanager_http._types import Principal
from filemanager_http.api import api_handler
from filemanager_http.app import create_app, dispatch
from filemanager_http.assets import AssetProvider, DirectoryAssets
from filemanager_http.authentication import (
    Authenticator,
    NoAuthentication,
    TokenAuthentication,
)
from filemanager_http.config import ServiceConfig, Settings, get_settings
from filemanager_http.context import RequestContext
from filemanager_http.dependency import context_dependency
from filemanager_http.exceptions import (
    DispatchInternalError,
    FileManagerError,
    InvalidOption,
    error_to_http,
)
from filemanager_http.files import FileInfo
from filemanager_http.handlers import Handlers, checksum_handler, serve_download
from filemanager_http.outcome import Finalize, Outcome, Written, finalize
from filemanager_http.paths import match_url, split_url
from filemanager_http.render import render_file, render_template
from filemanager_http.router import serve_http
from filemanager_http.share import (
    InMemoryShareStore,
    LookupStatus,
    ShareLink,
    ShareLookup,
    ShareStore,
    share_page,
)
from filemanager_http.staticgen import StaticGen
from filemanager_http.users import Rule, User

__all__ = [
    "AssetProvider",
    "Authenticator",
    "DirectoryAssets",
    "DispatchInternalError",
    "FileInfo",
    "FileManagerError",
    "Finalize",
    "Handlers",
    "InMemoryShareStore",
    "InvalidOption",
    "LookupStatus",
    "NoAuthentication",
    "Outcome",
    "Principal",
    "RequestContext",
    "Rule",
    "ServiceConfig",
    "Settings",
    "ShareLink",
    "ShareLookup",
    "ShareStore",
    "StaticGen",
    "TokenAuthentication",
    "User",
    "Written",
    "api_handler",
    "checksum_handler",
    "context_dependency",
    "create_app",
    "dispatch",
    "error_to_http",
    "finalize",
    "get_settings",
    "match_url",
    "render_file",
    "render_template",
    "serve_download",
    "serve_http",
    "share_page",
    "split_url",
]
