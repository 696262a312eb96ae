"""Import errors surfaced to the caller as user-visible messages."""


class FormatError(ValueError):
    """The input cannot be imported at all (bad header, too few lines, nothing found)."""


__all__ = ['FormatError']
