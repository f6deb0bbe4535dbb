"""Gateways to the remote index service."""

from .base import IndexGateway
from .http import HTTPIndexGateway

__all__ = ["IndexGateway", "HTTPIndexGateway"]
