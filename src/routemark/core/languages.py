from pathlib import Path

from routemark.errors import UnsupportedLanguageError

_LANGUAGE_ALIASES = {
    "py": "python",
    "python": "python",
    "rb": "ruby",
    "ruby": "ruby",
}

_EXTENSION_LANGUAGE_MAP = {
    ".py": "python",
    ".rake": "ruby",
    ".rb": "ruby",
}

_SUPPORTED_LANGUAGES = set(_EXTENSION_LANGUAGE_MAP.values())


def normalize_language(language: str) -> str:
    normalized = language.strip().lower()
    resolved = _LANGUAGE_ALIASES.get(normalized, normalized)
    if resolved not in _SUPPORTED_LANGUAGES:
        raise UnsupportedLanguageError(
            f"Unsupported language '{language}'. Supported: {sorted(_SUPPORTED_LANGUAGES)}"
        )
    return resolved


def detect_language_from_path(file_path: Path) -> str:
    suffix = file_path.suffix.lower()
    if suffix in _EXTENSION_LANGUAGE_MAP:
        return _EXTENSION_LANGUAGE_MAP[suffix]
    raise UnsupportedLanguageError(f"Unsupported file extension: {suffix or '(none)'}")


def resolve_language(language: str | None, file_path: Path | None) -> str:
    if language:
        return normalize_language(language)
    if file_path:
        return detect_language_from_path(file_path)
    raise UnsupportedLanguageError("Language must be provided when no file path is available.")
