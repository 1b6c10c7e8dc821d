"""Type name to documentation reference lookup."""

from __future__ import annotations

import builtins
from typing import Dict, Mapping, Optional

from ..errors import TypeResolutionError
from ..models import TypeReference

DEFAULT_BASE_URI = "https://docs.python.org/3/library"

ARRAY_SUFFIX = "[]"


def _builtin_aliases() -> Dict[str, str]:
    aliases: Dict[str, str] = {}
    for name in dir(builtins):
        value = getattr(builtins, name)
        if isinstance(value, type) and not name.startswith("_"):
            aliases[name] = f"builtins.{name}"
    return aliases


class TypeResolver:
    """Maps bare type names to canonical references with documentation URIs.

    Dotted names are treated as already qualified. Short names go through the
    alias table, which defaults to the Python builtins. A trailing ``[]`` is
    stripped before the lookup and reattached to the returned name.
    """

    def __init__(
        self,
        base_uri: Optional[str] = None,
        aliases: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.base_uri = (base_uri or DEFAULT_BASE_URI).rstrip("/")
        self.aliases: Dict[str, str] = _builtin_aliases()
        if aliases:
            self.aliases.update(aliases)
        self._folded = {key.lower(): value for key, value in self.aliases.items()}

    def lookup(self, type_name: str) -> TypeReference:
        name = type_name.strip()
        is_array = name.endswith(ARRAY_SUFFIX)
        bare = name[: -len(ARRAY_SUFFIX)] if is_array else name
        if not bare:
            raise TypeResolutionError(f"Cannot resolve empty type name '{type_name}'")

        qualified = self.aliases.get(bare) or self._folded.get(bare.lower())
        if qualified is None:
            if "." not in bare or bare.startswith(".") or bare.endswith("."):
                raise TypeResolutionError(f"No documentation reference for type '{bare}'")
            qualified = bare

        suffix = ARRAY_SUFFIX if is_array else ""
        return TypeReference(
            name=f"{qualified}{suffix}",
            documentation_uri=f"{self.base_uri}/{qualified}",
        )


__all__ = ["ARRAY_SUFFIX", "DEFAULT_BASE_URI", "TypeResolver"]
