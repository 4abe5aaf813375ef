"""Errors raised by the grammar parser."""


class ParseError(Exception):
    """Raised when a line does not match the audit record grammar.

    Parsing is all-or-nothing: when this is raised, no part of the
    record is returned.
    """
