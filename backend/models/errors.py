"""
Exceptions raised by the search engine.
"""


class ConfigurationError(ValueError):
    """Raised when an agent or evaluator is built with an unset or unknown setting."""


class SuccessorContractError(RuntimeError):
    """Raised when the successor generator returns nothing for a board that is not terminal."""
