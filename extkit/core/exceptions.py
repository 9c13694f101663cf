"""
extkit Exceptions
=================

Errors raised by extkit helpers.

Presentational helpers degrade to safe defaults on missing input and never
raise. Errors are reserved for invalid configuration and arguments outside
an operation's domain.
"""

from __future__ import annotations


class ExtkitError(Exception):
    """Base class for extkit errors."""
    pass


class InvalidConfigurationError(ExtkitError, ValueError):
    """A setting or constructor argument has an unusable value."""
    pass


class InvalidArgumentError(ExtkitError, ValueError):
    """An argument lies outside the operation's domain."""
    pass
