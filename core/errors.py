"""
Exception taxonomy.

Only authoring mistakes raise: bad configuration and bad catalogue data are
rejected once, at construction time. Per-tick fallbacks (unknown camera
target, stationary bodies, empty source lists) never raise.
"""


class OrreryError(Exception):
    """Base class for all errors raised by the simulation core."""


class ConfigurationError(OrreryError, ValueError):
    """Invalid camera, field or scene configuration."""


class CatalogueError(OrreryError, ValueError):
    """Body catalogue violates its invariants (names, central body, masses)."""
