"""
Context-binding logger.

Library code logs through the stdlib ``logging`` tree under the
``magento2`` namespace and never installs handlers; applications
configure output the usual way.

    log = get_logger(__name__).bind(quote_id="abc")
    log.debug("request", method="GET", status=200)
    # -> "request | quote_id=abc method=GET status=200"
"""

import logging
from typing import Any, Dict, MutableMapping, Tuple

# Keys whose values must never reach a log line
REDACTED_KEYS = frozenset({"password", "token", "bearer_token", "authorization"})

# Keyword arguments that belong to Logger._log rather than to the context
_LOGGING_KWARGS = frozenset({"exc_info", "stack_info", "stacklevel", "extra"})


class ContextLogger(logging.LoggerAdapter):
    """LoggerAdapter whose extra keyword arguments become key=value pairs."""

    def __init__(self, logger: logging.Logger, context: Dict[str, Any] = None):
        super().__init__(logger, dict(context or {}))

    def bind(self, **context: Any) -> "ContextLogger":
        """Return a new logger carrying the merged context."""
        return ContextLogger(self.logger, {**self.extra, **context})

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping[str, Any]]:
        context = dict(self.extra)
        for key in [key for key in kwargs if key not in _LOGGING_KWARGS]:
            context[key] = kwargs.pop(key)

        if context:
            pairs = " ".join(f"{key}={_render(key, value)}" for key, value in context.items())
            msg = f"{msg} | {pairs}"
        return msg, kwargs


def _render(key: str, value: Any) -> str:
    if key.lower() in REDACTED_KEYS:
        return "***"
    if isinstance(value, (str, int, float, bool)) or value is None:
        return str(value)
    return repr(value)


def get_logger(name: str) -> ContextLogger:
    return ContextLogger(logging.getLogger(name))
