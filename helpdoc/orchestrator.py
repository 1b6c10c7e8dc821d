"""Pipeline orchestration: resolve a help source, build a model, render it."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Optional, Union

from .config import HelpDocConfig
from .errors import UnsupportedSourceError
from .logging import get_logger
from .models import HelpModel
from .parsing.sectioner import CommentBlockSectioner, extract_comment_block
from .providers.base import HelpProvider
from .providers.python import PythonHelpProvider
from .providers.types import TypeResolver
from .rendering.dialects import DialectName
from .rendering.engine import RenderOptions, render_text

YAML_SUFFIXES = frozenset({".yml", ".yaml"})


class Orchestrator:
    """Coordinates help extraction and rendering for a single request at a time.

    The orchestrator holds only collaborators and configuration defaults;
    every render builds its own model and options, so one instance can serve
    concurrent requests.

    Resolving a name imports its module, which runs that module's top-level
    code. Pass ``allowed_modules`` to restrict names to the listed top-level
    packages; any other name is reported as unsupported.
    """

    def __init__(
        self,
        provider: HelpProvider | None = None,
        type_resolver: TypeResolver | None = None,
        config: HelpDocConfig | None = None,
        allowed_modules: Iterable[str] | None = None,
    ) -> None:
        self.config = config
        self.allowed_modules = frozenset(allowed_modules) if allowed_modules is not None else None
        self.provider: HelpProvider = provider or PythonHelpProvider()
        if type_resolver is None and config is not None:
            type_resolver = TypeResolver(config.types.base_uri, config.types.aliases)
        self.type_resolver = type_resolver or TypeResolver()
        self.comment_marker = config.parsing.comment_marker if config is not None else "#"
        self.logger = get_logger("orchestrator")

    def run_render(
        self,
        *,
        name: Optional[str] = None,
        path: Union[str, Path, None] = None,
        target: Any = None,
        dialect: Union[DialectName, str, None] = None,
        heading_level: Optional[int] = None,
        fill_missing: Optional[bool] = None,
    ) -> str:
        """Render help for exactly one of ``name``, ``path`` or ``target``."""
        options = self.build_options(
            dialect=dialect, heading_level=heading_level, fill_missing=fill_missing
        )
        model = self.build_model(name=name, path=path, target=target)
        self.logger.info("Rendering help for %s as %s", model.name, options.dialect.value)
        return render_text(model, options)

    def build_options(
        self,
        *,
        dialect: Union[DialectName, str, None] = None,
        heading_level: Optional[int] = None,
        fill_missing: Optional[bool] = None,
    ) -> RenderOptions:
        defaults = self.config.render if self.config is not None else None
        if dialect is None:
            dialect = (defaults.dialect if defaults else None) or DialectName.MARKDOWN
        if heading_level is None:
            heading_level = (defaults.heading_level if defaults else None) or 1
        if fill_missing is None:
            fill_missing = defaults.fill_missing if defaults else False
        return RenderOptions(
            dialect=dialect,
            heading_level=heading_level,
            fill_missing=fill_missing,
            type_resolver=self.type_resolver,
        )

    def build_model(
        self,
        *,
        name: Optional[str] = None,
        path: Union[str, Path, None] = None,
        target: Any = None,
    ) -> HelpModel:
        provided = [value for value in (name, path, target) if value is not None]
        if len(provided) != 1:
            raise ValueError("Provide exactly one of name, path or target")

        if path is not None:
            file_path = Path(path).expanduser()
            if file_path.suffix.lower() in YAML_SUFFIXES:
                return self._model_from_yaml(file_path)
            return self._model_from_provider(file_path, label=file_path.stem)
        if name is not None:
            if not self.is_allowed_name(name):
                raise UnsupportedSourceError(f"{name!r} is outside the allowed modules")
            return self._model_from_provider(name, label=name)
        return self._model_from_provider(target, label=getattr(target, "__name__", None))

    def is_allowed_name(self, name: str) -> bool:
        if self.allowed_modules is None:
            return True
        return name.split(".", 1)[0] in self.allowed_modules

    def _model_from_yaml(self, path: Path) -> HelpModel:
        if not path.is_file():
            raise UnsupportedSourceError(f"YAML file not found: {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise UnsupportedSourceError(f"{path} is not valid UTF-8 text") from exc
        block = extract_comment_block(text, self.comment_marker)
        self.logger.debug("Extracted %d comment lines from %s", len(block.splitlines()), path)
        sectioner = CommentBlockSectioner(self.comment_marker)
        return sectioner.parse(block, name=path.name)

    def _model_from_provider(self, ref: Any, *, label: Optional[str]) -> HelpModel:
        source = self.provider.resolve(ref)
        if source is None:
            raise UnsupportedSourceError(f"No help metadata found for {ref!r}")
        if isinstance(source, HelpModel):
            return source.finalize()
        if not label:
            raise UnsupportedSourceError(f"Help text for {ref!r} has no entity name")
        return CommentBlockSectioner(comment_marker=None).parse(source, name=label)


__all__ = ["Orchestrator", "YAML_SUFFIXES"]
