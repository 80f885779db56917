#!/usr/bin/env python3
"""
Error reporting for the restrict command line.

Known errors carry a ``details`` dict; the keys set by cut validation and
digests are turned into a one-line hint below the message.
"""
import sys
import traceback
import logging
from functools import wraps
from typing import Callable, TypeVar, Any, Dict, Optional, Union

from .exceptions import (
    RestrictError, ConfigurationError, CutRangeTypeError, DigestError, IndexOutOfRangeError
)

T = TypeVar('T')


def error_hint(error: RestrictError) -> Optional[str]:
    """Short advice derived from an error's details, or None"""
    details = error.details or {}
    if isinstance(error, IndexOutOfRangeError):
        if 'site_length' in details:
            return f"Cut locations must lie within 0..{details['site_length'] - 1} of the site"
        if 'left' in details and 'right' in details:
            return f"Valid indices are {details['left']}..{details['right']}"
        if 'size' in details and details['size'] is not None:
            return f"Valid indices are -1..{details['size'] - 1}"
    elif isinstance(error, DigestError) and 'limit' in details:
        return (f"Raise digest.max_permutation_actions (now {details['limit']}) "
                f"or digest with --no-permutations")
    elif isinstance(error, CutRangeTypeError):
        return "Cut ranges must be VerticalCutRange or HorizontalCutRange"
    elif isinstance(error, ConfigurationError) and 'config_path' in details:
        return f"Check the file given with --config: {details['config_path']}"
    return None


def format_error(error: Exception, verbose: bool = False) -> str:
    """Format an error message for display

    Args:
        error: Exception object
        verbose: Whether to include the full details dict or traceback

    Returns:
        Formatted error message
    """
    if not isinstance(error, RestrictError):
        if verbose:
            return f"Unexpected Error ({error.__class__.__name__}): {error}\n{traceback.format_exc()}"
        return f"Unexpected Error: {error}"

    lines = [f"{error.__class__.__name__}: {error.message}"]
    hint = error_hint(error)
    if hint:
        lines.append(f"  {hint}")
    if verbose and error.details:
        lines.append(f"Details: {error.details}")
    return "\n".join(lines)


def log_exception(logger: logging.Logger,
                  error: Exception,
                  level: int = logging.ERROR,
                  context: Optional[Dict[str, Any]] = None) -> None:
    """Log an exception with its details merged into ``context``

    Tracebacks of known errors are only logged at debug verbosity.
    """
    if isinstance(error, RestrictError):
        ctx = {**(error.details or {}), **(context or {})}
        logger.log(level, f"{error.__class__.__name__}: {error.message}",
                   extra={"context": ctx} if ctx else None,
                   exc_info=logger.isEnabledFor(logging.DEBUG))
    else:
        logger.log(level, f"Unexpected error: {error}",
                   extra={"context": context} if context else None,
                   exc_info=True)


def handle_exceptions(exit_on_error: bool = False) -> Callable[[Callable[..., T]], Callable[..., Union[T, int]]]:
    """Turn exceptions raised by a command into exit codes

    1 for known errors, 2 for anything else and 130 on interrupt.

    Args:
        exit_on_error: Call sys.exit with the code instead of returning it

    Returns:
        Decorator
    """
    def decorator(func: Callable[..., T]) -> Callable[..., Union[T, int]]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> Union[T, int]:
            logger = logging.getLogger(func.__module__)
            context = {"command": func.__name__}
            try:
                return func(*args, **kwargs)
            except KeyboardInterrupt:
                logger.info("Operation cancelled by user")
                print("\nOperation cancelled by user", file=sys.stderr)
                code = 130
            except RestrictError as e:
                log_exception(logger, e, context=context)
                print(format_error(e, verbose=logger.isEnabledFor(logging.DEBUG)), file=sys.stderr)
                code = 1
            except Exception as e:
                log_exception(logger, e, context=context)
                print(format_error(e), file=sys.stderr)
                print("See log for details. Run with --verbose for more information.", file=sys.stderr)
                code = 2
            if exit_on_error:
                sys.exit(code)
            return code
        return wrapper
    return decorator
