"""
Request logging middleware.

Logs every completed HTTP request to the console in one of the supported
styles (see ``stylelog.styles.LogStyle``). The style is resolved once when
the middleware is built; an unknown style falls back to ``default``.

Implemented as pure ASGI middleware so the log line is written after the
last body chunk has been sent, not when the endpoint returns.
"""

import logging
from typing import Any, Callable

from starlette.types import ASGIApp, Message, Receive, Scope, Send

from stylelog.console import Console
from stylelog.engine.metadata import extract_context
from stylelog.engine.renderer import LineRenderer
from stylelog.engine.timer import RequestTimer
from stylelog.styles import resolve_style

logger = logging.getLogger("stylelog.access")


class RequestLoggingMiddleware:
    """Time each request and log it once the response has been fully sent."""

    def __init__(
        self,
        app: ASGIApp,
        style: Any = None,
        console: Console | None = None,
        timer_factory: Callable[[], RequestTimer] = RequestTimer,
    ) -> None:
        self.app = app
        self.console = console or Console()
        self.style = resolve_style(style, self.console)
        self.renderer = LineRenderer(self.style, self.console)
        self.timer_factory = timer_factory
        logger.debug("Request logging enabled (style=%s)", self.style.value)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        timer = self.timer_factory().start()
        response_start: Message | None = None
        finished = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_start, finished
            await send(message)

            if message["type"] == "http.response.start":
                response_start = message
            elif (
                message["type"] == "http.response.body"
                and not message.get("more_body", False)
                and response_start is not None
                and not finished
            ):
                finished = True
                elapsed, timestamp = timer.finish()
                self.renderer.render(
                    extract_context(scope, response_start, elapsed, timestamp)
                )

        await self.app(scope, receive, send_wrapper)


def logger_middleware(style: Any = None, console: Console | None = None) -> type:
    """
    Return a middleware class pre-bound to ``style``.

    Handy where a host only accepts a bare class::

        app.add_middleware(logger_middleware("inline"))
    """

    class _BoundRequestLoggingMiddleware(RequestLoggingMiddleware):
        def __init__(self, app: ASGIApp) -> None:
            super().__init__(app, style=style, console=console)

    _BoundRequestLoggingMiddleware.__name__ = f"RequestLoggingMiddleware[{style}]"
    return _BoundRequestLoggingMiddleware
