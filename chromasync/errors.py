"""
Error kinds raised across chromasync. Each carries a readable message plus the
context needed to report it as a single log line.
"""
from pathlib import Path


class ChromasyncError(Exception):
    """Base class for every error chromasync reports to the user."""


class InvalidFormat(ChromasyncError, ValueError):
    """Text is not a 6-digit hex color."""


class UnsupportedFormat(ChromasyncError, ValueError):
    """Requested color output format is not one of the supported kinds."""


class DirectiveError(ChromasyncError):
    """A line in the directive block of a blueprint was rejected."""
    def __init__(self, message: str, line: str = ""):
        super().__init__(message)
        self.line = line


class MalformedDirective(DirectiveError):
    """Line starts with the directive prefix but does not follow `%name value`."""


class InvalidDirective(DirectiveError):
    """Directive is well formed but its name or value is not acceptable."""


class BlueprintError(ChromasyncError):
    """Rendering a single blueprint failed. Other blueprints are unaffected."""
    def __init__(self, path: Path | str, reason: str, line: str | None = None):
        super().__init__(f"While parsing blueprint `{path}`. {reason}")
        self.path = Path(path)
        self.reason = reason
        self.line = line


class ColorschemeError(ChromasyncError):
    """Colorscheme file is missing, unreadable or invalid."""
    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message if path is None else f"Colorscheme `{path}`. {message}")
        self.path = Path(path) if path is not None else None


class ExecutionError(ChromasyncError):
    """Post-render script failed to launch or exited with an error."""
    def __init__(self, message: str, returncode: int | None = None):
        super().__init__(message)
        self.returncode = returncode


class SystemSetupError(ChromasyncError):
    """Environment or filesystem problem outside a single blueprint."""
