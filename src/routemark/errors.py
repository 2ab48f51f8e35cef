from pathlib import Path


class RoutemarkError(Exception):
    """Base class for errors raised by routemark."""


class ConfigurationError(RoutemarkError):
    """The project context is missing or invalid; nothing can be annotated."""


class UnsupportedLanguageError(RoutemarkError, ValueError):
    pass


class WriteFailure(RoutemarkError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not write {path}: {reason}")
        self.path = path
        self.reason = reason
