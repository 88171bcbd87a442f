"""
Reads the producer's JSON cache file into display content
"""
import json
from dataclasses import dataclass, field
from typing import Optional, Tuple

PLACEHOLDER_TEXT = "Waiting for Codex…"


class LoadError(Exception):
    """Base class for cache files that could not be turned into content"""

    def __init__(self, path, message):
        super().__init__(f"{path}: {message}")
        self.path = path


class UnreadableError(LoadError):
    pass


class MalformedError(LoadError):
    pass


class WrongShapeError(LoadError):
    pass


@dataclass(frozen=True)
class DisplayContent:
    text: str = PLACEHOLDER_TEXT
    tooltip: Optional[str] = None
    tags: Tuple[str, ...] = field(default_factory=tuple)


def _ordered_unique(items):
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return tuple(result)


def extract_tags(value):
    """Accepts a list of strings (others skipped) or a single string"""
    if isinstance(value, str):
        return (value,)
    if isinstance(value, list):
        return _ordered_unique(item for item in value if isinstance(item, str))
    return ()


def content_from_document(document):
    """Builds DisplayContent from an already decoded JSON object"""
    text = document.get("text")
    tooltip = document.get("tooltip")
    return DisplayContent(
        text=text if isinstance(text, str) else PLACEHOLDER_TEXT,
        tooltip=tooltip if isinstance(tooltip, str) else None,
        tags=extract_tags(document.get("class")),
    )


def load_content(path):
    """
    Reads and parses the cache file at ``path``.

    Raises UnreadableError, MalformedError or WrongShapeError; the caller
    keeps whatever it displayed before in all three cases.
    """
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise UnreadableError(path, e.strerror or str(e)) from e

    try:
        document = json.loads(raw.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise MalformedError(path, f"not valid UTF-8: {e}") from e
    except ValueError as e:
        raise MalformedError(path, str(e)) from e

    if not isinstance(document, dict):
        raise WrongShapeError(path, f"expected a JSON object, got {type(document).__name__}")

    return content_from_document(document)


def diff_tags(old_tags, new_tags):
    """Returns (to_add, to_remove) turning old_tags into new_tags"""
    old_set = set(old_tags)
    new_set = set(new_tags)
    to_add = tuple(tag for tag in _ordered_unique(new_tags) if tag not in old_set)
    to_remove = tuple(tag for tag in _ordered_unique(old_tags) if tag not in new_set)
    return to_add, to_remove
