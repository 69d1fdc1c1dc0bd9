"""
Style layouts for the request logger.

``LineRenderer`` turns a completed ``RequestContext`` into console output.
Each ``LogStyle`` has exactly one layout method; dispatch goes through a
table built from the enum, so adding a style without a layout fails at
construction instead of silently falling through.
"""

from typing import Callable

from stylelog.console import BLUE, CYAN, GREEN, RED, RESET, YELLOW, Console
from stylelog.models.request_context import RequestContext
from stylelog.styles import LogStyle

ERROR_STATUS_THRESHOLD = 400


def _field(label: str, value: object) -> str:
    return f"{YELLOW}{label}:{RESET} {value}"


def _display(value: str | None) -> str:
    return "" if value is None else value


class LineRenderer:
    """Write one request's log output in the bound style."""

    def __init__(self, style: LogStyle, console: Console) -> None:
        self.style = style
        self.console = console
        self._layouts: dict[LogStyle, Callable[[RequestContext], None]] = {
            LogStyle.MINIFIED: self._minified,
            LogStyle.INLINE: self._inline,
            LogStyle.AGENT: self._agent,
            LogStyle.ERROR: self._error,
            LogStyle.DEFAULT: self._default,
        }
        missing = set(LogStyle) - set(self._layouts)
        if missing:
            raise RuntimeError(f"No layout for log styles: {sorted(s.value for s in missing)}")

    def render(self, ctx: RequestContext) -> None:
        # One request's lines must not interleave with another's
        with self.console.atomic():
            self._layouts[self.style](ctx)

    # ── Layouts ────────────────────────────────────────────────────────

    def _minified(self, ctx: RequestContext) -> None:
        self.console.write(
            f"{ctx.method} {GREEN}{ctx.path} {CYAN}{ctx.status_code} {RESET}{ctx.elapsed_ms}ms"
        )

    def _inline(self, ctx: RequestContext) -> None:
        self.console.write(self._summary_line(ctx, accent=CYAN, stamp=GREEN))

    def _error(self, ctx: RequestContext) -> None:
        if ctx.status_code < ERROR_STATUS_THRESHOLD:
            return
        self.console.write(self._summary_line(ctx, accent=RED, stamp=RED))

    def _agent(self, ctx: RequestContext) -> None:
        self.console.start_group(f"{self._prefix(ctx)} {CYAN}AGENT LOG")
        self.console.write(_field("IP", ctx.client_address))
        self.console.write(_field("User Agent", _display(ctx.user_agent)))
        self.console.write(_field("Referer", ctx.referer))
        self.console.end_group()

    def _default(self, ctx: RequestContext) -> None:
        self.console.start_group(f"{self._prefix(ctx)} {BLUE}REQUEST LOG")
        for label, value in (
            ("Timestamp", ctx.timestamp),
            ("Method", ctx.method),
            ("URL", ctx.path),
            ("Status", ctx.status_code),
            ("Time", f"{ctx.elapsed_ms}ms"),
            ("IP", ctx.client_address),
            ("Size", ctx.content_length),
            ("User Agent", _display(ctx.user_agent)),
            ("Referer", ctx.referer),
        ):
            self.console.write(_field(label, value))
        self.console.end_group()

    # ── Helpers ────────────────────────────────────────────────────────

    @staticmethod
    def _prefix(ctx: RequestContext) -> str:
        return f"{GREEN}[{ctx.timestamp}] {RESET}|"

    @staticmethod
    def _summary_line(ctx: RequestContext, accent: str, stamp: str) -> str:
        return (
            f"{stamp}[{ctx.timestamp}]{RESET} {ctx.method} {GREEN}{ctx.path} "
            f"{accent}{ctx.status_code} {RESET}{ctx.elapsed_ms}ms "
            f"{YELLOW}{ctx.content_length}{RESET}"
        )
