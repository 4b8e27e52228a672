"""
Central Logging and Console Utilities.

This module unifies the application's output using the Python standard
`logging` library, backed by `rich` for formatting.

Two channels are kept apart:
1.  **Report output** (`console`): Diagnostics tables and summaries on stdout.
2.  **Log output**: Standard `logging` records rendered by a `RichHandler` on
    stderr, so that machine-readable output (``check --json``) on stdout stays clean.

Both backends can be swapped at runtime via `set_console`, which is how tests
capture output.

Attributes:
    console (_ConsoleProxy): A global, stable reference to the active Rich Console.
"""

import logging
from typing import Any, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

# Custom logging level for Success (higher than INFO, lower than WARNING)
SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

_THEME = Theme(
  {
    "logging.level.success": "green",
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "green",
    "path": "bold blue",
    "rule": "magenta",
  }
)


class _ConsoleProxy:
  """
  A Proxy wrapper around `rich.console.Console`.

  All printing operations are forwarded to the active 'backend' Console. When
  the backend changes, the `logging` handler is rebuilt so that log records
  follow it.

  Attributes:
      _backend (Console): The console for report output.
      _log_backend (Console): The console for log records.
  """

  def __init__(self) -> None:
    """Initializes the proxy with stdout for reports and stderr for logs."""
    self._backend: Console = Console(theme=_THEME)
    self._log_backend: Console = Console(theme=_THEME, stderr=True)
    self._configure_logging()

  def set_backend(self, new_console: Console, log_console: Optional[Console] = None) -> None:
    """
    Injects new Console backends and updates logging handlers.

    The application theme is pushed onto injected consoles so that the
    custom styles used by report tables resolve.

    Args:
        new_console (Console): The console for report output.
        log_console (Optional[Console]): The console for logs. Defaults to `new_console`.
    """
    new_console.push_theme(_THEME)
    if log_console is not None and log_console is not new_console:
      log_console.push_theme(_THEME)
    self._backend = new_console
    self._log_backend = log_console or new_console
    self._configure_logging()

  def reset(self) -> None:
    """
    Resets the proxy to fresh stdout / stderr consoles.
    """
    self._backend = Console(theme=_THEME)
    self._log_backend = Console(theme=_THEME, stderr=True)
    self._configure_logging()

  @property
  def backend(self) -> Console:
    """
    Access the raw report console.

    Returns:
        Console: The currently active implementation.
    """
    return self._backend

  def _configure_logging(self) -> None:
    """
    Directs the standard python logging library to the log console.
    """
    # Remove existing RichHandlers to prevent duplicate logs/wrong destinations
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
      if isinstance(handler, RichHandler):
        root_logger.removeHandler(handler)

    rich_handler = RichHandler(
      console=self._log_backend,
      show_time=False,
      omit_repeated_times=False,
      show_path=False,
      markup=True,
      rich_tracebacks=True,
    )

    root_logger.setLevel(logging.INFO)
    root_logger.addHandler(rich_handler)

  def print(self, *args: Any, **kwargs: Any) -> None:
    """
    Forwards `print` calls to the active backend.

    Args:
        *args: Positional arguments for Rich print.
        **kwargs: Keyword arguments for Rich print.
    """
    self._backend.print(*args, **kwargs)

  def __getattr__(self, name: str) -> Any:
    """
    Fallback to forward any other attributes/methods to the backend.

    Args:
        name (str): Attribute name.

    Returns:
        Any: The attribute from the backend console.
    """
    return getattr(self._backend, name)


console = _ConsoleProxy()


def set_console(new_console: Console, log_console: Optional[Console] = None) -> None:
  """
  Global helper to inject specific console instances.

  Args:
      new_console (Console): The configured Rich console for reports.
      log_console (Optional[Console]): The console for logs; defaults to `new_console`.
  """
  console.set_backend(new_console, log_console)


def reset_console() -> None:
  """
  Global helper to reset logging and console to standard streams.
  """
  console.reset()


def set_verbose(verbose: bool) -> None:
  """
  Enables DEBUG logging for the strict_comparisons package.

  Args:
      verbose (bool): True for debug output, False for the INFO default.
  """
  logging.getLogger("strict_comparisons").setLevel(logging.DEBUG if verbose else logging.NOTSET)


def log_info(msg: str) -> None:
  """
  Logs an informational message via standard logging.

  Args:
      msg (str): The message content. Can include rich markup like [bold].
  """
  logging.info(msg, extra={"markup": True})


def log_success(msg: str) -> None:
  """
  Logs a success message via standard logging.

  Args:
      msg (str): The message content.
  """
  logging.log(SUCCESS_LEVEL_NUM, msg, extra={"markup": True})


def log_warning(msg: str) -> None:
  """
  Logs a warning message via standard logging.

  Args:
      msg (str): The message content.
  """
  logging.warning(msg, extra={"markup": True})


def log_error(msg: str) -> None:
  """
  Logs an error message via standard logging.

  Args:
      msg (str): The message content.
  """
  logging.error(msg, extra={"markup": True})
