"""
Statement builder exception classes.
"""


class StmtBuilderError(Exception):
    """Base class for all statement builder errors.
    """


class ValidationError(StmtBuilderError):
    """Error in input validation.
    """
