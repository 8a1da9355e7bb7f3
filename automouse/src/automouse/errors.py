"""Exception types raised by the motion core."""


class AutomouseError(Exception):
    """Base class for all errors raised by automouse."""


class ValidationError(AutomouseError, ValueError):
    """Input arrays or configuration records violate their contract."""


class DomainError(AutomouseError, ValueError):
    """A spline or kinetics query fell outside the built range."""


class NonConvergence(AutomouseError, RuntimeError):
    """An integrating simulator hit its iteration cap before reaching the target."""
