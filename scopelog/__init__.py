"""Structured logging with automatic request-context attribute injection.

Usage:
    from scopelog import RequestContext, build

    logger = build(["user_id", "request_id"])
    ctx = RequestContext.background().with_values(user_id="42", request_id="abcd")
    logger.info(ctx, "order placed", ("order_id", 1001))
"""

from scopelog.attributes import Attribute, AttributeLike
from scopelog.context import Context, RequestContext
from scopelog.exceptions import ConfigurationError, ScopelogError, UnknownLevelError
from scopelog.handlers import LeveledLogger, StructlogLeveledLogger
from scopelog.levels import Level
from scopelog.logger import ContextualLogger, build, from_settings

__all__ = [
    "Attribute",
    "AttributeLike",
    "ConfigurationError",
    "Context",
    "ContextualLogger",
    "Level",
    "LeveledLogger",
    "RequestContext",
    "ScopelogError",
    "StructlogLeveledLogger",
    "UnknownLevelError",
    "build",
    "from_settings",
]
