from __future__ import annotations


class TableError(ValueError):
    """Base class for every failure raised while loading or exporting a table.

    ``str(exc)`` is the message shown to the user.
    """


class IoFailure(TableError):
    pass


class ParseFailure(TableError):
    pass


class EmptyInput(TableError):
    pass


class InvalidShape(TableError):
    pass


class UnsupportedFormat(TableError):
    pass


class UnknownColumn(TableError):
    pass
