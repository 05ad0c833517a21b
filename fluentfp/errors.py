from __future__ import annotations


class FluentError(Exception):
    pass


class NotOkError(FluentError):
    pass


class WrongSideError(FluentError):
    pass


class MustError(FluentError):
    def __init__(self, error: object):
        super().__init__(str(error)); self.error = error
