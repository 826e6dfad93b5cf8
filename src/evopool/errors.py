"""
Errors raised by the engine while checking its configuration.
"""

class ValidationError(ValueError):
    """
    Raised by the 'validate()' methods when a setting, or a combination of
    settings, would make the engine misbehave at runtime.
    """
