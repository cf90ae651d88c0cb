"""Errors raised by league persistence."""


class LeagueFileError(OSError):
    """The league file exists but could not be read or parsed.

    Raised instead of starting from an empty league so a damaged file is
    never overwritten by the next recorded win.
    """
