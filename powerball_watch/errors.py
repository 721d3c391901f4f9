"""Exception taxonomy for the draw check cycle."""


class PowerballWatchError(Exception):
    """Base error."""


class ConnectivityError(PowerballWatchError):
    """The draw page could not be fetched. Transient, worth retrying."""


class ParseFailure(PowerballWatchError):
    """The fetched document could not be turned into a draw."""


class StructuralParseError(ParseFailure):
    """Table shape is not what we expect (missing rows or cells)."""


class InvalidDateError(ParseFailure):
    """The draw date cell is not a MM/DD/YYYY date."""


class CorruptPersistedState(PowerballWatchError):
    """A stored preference value could not be decoded."""


class NotificationError(PowerballWatchError):
    """A notification could not be dispatched."""
