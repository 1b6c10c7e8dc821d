"""Related-link classification."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlsplit

from ..models import RelatedLink

_LABELLED_LINK = re.compile(r"^(?P<label>.+?):\s+(?P<uri>\S+)$")

_OPAQUE_SCHEMES = {"mailto", "urn", "tel", "news"}


def is_absolute_uri(text: str) -> bool:
    """Return True for a well-formed absolute URI with no embedded whitespace."""
    candidate = text.strip()
    if not candidate or any(char.isspace() for char in candidate):
        return False
    try:
        parts = urlsplit(candidate)
    except ValueError:
        return False
    if not parts.scheme:
        return False
    if parts.netloc:
        return True
    return parts.scheme.lower() in _OPAQUE_SCHEMES and bool(parts.path)


@dataclass(frozen=True)
class ClassifiedLink:
    """A link ready for rendering; ``uri`` is None for plain text."""

    label: str
    uri: Optional[str] = None


class LinkClassifier:
    """Classifies link lines for one rendered document.

    The first unlabelled absolute URI is labelled with the documented entity's
    name; every later unlabelled URI is labelled with its own text. Create one
    classifier per render.
    """

    def __init__(self, entity_name: str) -> None:
        self.entity_name = entity_name
        self._name_label_used = False

    def classify(self, line: str) -> ClassifiedLink:
        text = line.strip()
        match = _LABELLED_LINK.match(text)
        if match and is_absolute_uri(match.group("uri")):
            label = match.group("label").strip().rstrip(":").strip()
            if label:
                return ClassifiedLink(label=label, uri=match.group("uri"))
        if is_absolute_uri(text):
            return ClassifiedLink(label=self._unlabelled(text), uri=text)
        return ClassifiedLink(label=text)

    def classify_link(self, link: RelatedLink) -> ClassifiedLink:
        if link.uri and link.label_text:
            return ClassifiedLink(label=link.label_text.strip().rstrip(":"), uri=link.uri.strip())
        if link.uri:
            return self.classify(link.uri)
        return self.classify(link.label_text or "")

    def _unlabelled(self, uri: str) -> str:
        if not self._name_label_used:
            self._name_label_used = True
            return self.entity_name
        return uri


__all__ = ["ClassifiedLink", "LinkClassifier", "is_absolute_uri"]
