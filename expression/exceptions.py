# expression/exceptions.py
# This file is part of PCEx - Presence Condition Extraction
#
# Custom exceptions for condition expression parsing and conversion

"""Domain-specific exceptions for preprocessor condition processing.

This module defines exceptions that can be raised while reading condition
expressions and while mapping their variables onto a numbering. Parse errors
are usually swallowed by the reader's drop policy; the variable error marks a
broken invariant and is never expected in normal operation.
"""


class ParseError(RuntimeError):
    """Exception raised when expression parsing fails due to syntax errors.

    Indicates that the input text does not conform to the condition grammar,
    or that a drop policy is configured to throw instead of removing the
    offending sub-expression.
    """

    pass


class UnknownVariableError(LookupError):
    """Raised when a literal name has no index in the active variable numbering."""

    def __init__(self, name: str):
        super().__init__(f"Variable '{name}' is not part of the variable map")
        self.name = name
