"""Leveled logging entry points.

Every call checks the session lazily, appends one line to the active file and
mirrors the message to the console. Nothing here raises into the caller
except explicit initialization with bad options.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.text import Text

from periodlog.config import build_config, load_config
from periodlog.core.clock import SystemClock
from periodlog.core.session import Clock, LogSession, ensure_valid
from periodlog.core.writer import LogWriter, format_line
from periodlog.exceptions import PeriodLogError
from periodlog.logger import log
from periodlog.models.config import LogConfig
from periodlog.models.period import Level
from periodlog.output.console import ConsoleColor
from periodlog.output.console import console as default_console
from periodlog.output.console import error_console as default_error_console

_PREFIXED = {Level.DEBUG, Level.VERBOSE, Level.WARNING, Level.ERROR}
_STDERR = {Level.WARNING, Level.ERROR}


class LogFacade:
    """Owns one logging configuration and its current session."""

    def __init__(
        self,
        config: LogConfig | None = None,
        clock: Clock | None = None,
        console: Console | None = None,
        error_console: Console | None = None,
        writer: LogWriter | None = None,
    ):
        self.config = config if config is not None else LogConfig()
        self.clock = clock if clock is not None else SystemClock()
        self.console = console if console is not None else default_console
        self.error_console = error_console if error_console is not None else default_error_console
        self.writer = writer if writer is not None else LogWriter()
        self.session: LogSession | None = None

    def initialize(self, **options: Any) -> LogSession:
        """Apply options and start a fresh session.

        Raises ConfigError for invalid options (e.g. an unknown rollover period);
        in that case nothing is created and the previous state is kept.
        """
        config = build_config(self.config, **options)
        self.session = LogSession.create(config, self.clock)
        self.config = config
        return self.session

    def current_session(self) -> LogSession:
        """Return a valid session, rolling over if the current one is stale."""
        self.session = ensure_valid(self.session, self.config, self.clock)
        return self.session

    def write(self, level: Level | str, message: str, color: ConsoleColor | str | None = None) -> None:
        """Write message at level to the log file and the console."""
        try:
            level = Level.parse(level)
        except ValueError as e:
            log.warning("%s", e)
            return
        if not self.config.is_enabled(level):
            return

        try:
            line = format_line(level, message, self.clock.now())
            session = self.current_session()
            self.writer.append(session.current_log_file, line)
        except (PeriodLogError, OSError) as e:
            log.warning("Log file write skipped: %s", e)

        if self.config.console_output:
            self._mirror(level, message, color)

    def _mirror(self, level: Level, message: str, color: ConsoleColor | str | None) -> None:
        style = f"level.{level.value.lower()}"
        if level is Level.HOST and color is not None:
            try:
                color = color if isinstance(color, ConsoleColor) else ConsoleColor.parse(color)
            except ValueError as e:
                log.warning("%s", e)
            else:
                style = color.rich_color

        text = f"{level.value}: {message}" if level in _PREFIXED else message
        target = self.error_console if level in _STDERR else self.console
        target.print(Text(text, style=style), highlight=False)

    def host(self, message: str, color: ConsoleColor | str | None = None) -> None:
        self.write(Level.HOST, message, color)

    def debug(self, message: str) -> None:
        self.write(Level.DEBUG, message)

    def verbose(self, message: str) -> None:
        self.write(Level.VERBOSE, message)

    def information(self, message: str) -> None:
        self.write(Level.INFORMATION, message)

    def warning(self, message: str) -> None:
        self.write(Level.WARNING, message)

    def error(self, message: str) -> None:
        self.write(Level.ERROR, message)


_default: LogFacade | None = None


def get_default() -> LogFacade:
    """Return the process-wide facade, creating it from load_config() on first use."""
    global _default
    if _default is None:
        _default = LogFacade(config=load_config())
    return _default


def initialize(**options: Any) -> LogFacade:
    """(Re)initialize the process-wide facade. Raises ConfigError on bad options."""
    global _default
    facade = LogFacade(config=load_config())
    facade.initialize(**options)
    _default = facade
    return facade


def reset_default() -> None:
    """Drop the process-wide facade; the next call recreates it."""
    global _default
    _default = None


def host(message: str, color: ConsoleColor | str | None = None) -> None:
    get_default().host(message, color)


def debug(message: str) -> None:
    get_default().debug(message)


def verbose(message: str) -> None:
    get_default().verbose(message)


def information(message: str) -> None:
    get_default().information(message)


def warning(message: str) -> None:
    get_default().warning(message)


def error(message: str) -> None:
    get_default().error(message)
