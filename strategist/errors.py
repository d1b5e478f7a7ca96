"""Exception types raised by the strategist package.

Normal operation never raises: empty point sets, missing threats and
exhausted utility all have documented fallbacks. The only failure that is
surfaced to callers is an inconsistent configuration, which is rejected when
the offending object is constructed.
"""


class StrategistError(Exception):
    """Base class for all strategist errors."""


class ConfigurationError(StrategistError, ValueError):
    """A designer-supplied setting is inconsistent or out of range."""
