"""Help provider backed by Python introspection."""

from __future__ import annotations

import ast
import importlib
import inspect
from pathlib import Path
from typing import Any, List, Optional

from ..errors import UnsupportedSourceError
from ..logging import get_logger
from ..models import KIND_CALLABLE, KIND_COMMENT, HelpModel, Parameter
from ..parsing.sectioner import CommentBlockSectioner, is_verbatim, reflow

logger = get_logger("providers.python")

_SELF_NAMES = {"self", "cls"}
_POSITIONAL_KINDS = {
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.VAR_POSITIONAL,
}


class PythonHelpProvider:
    """Builds help models from Python callables, dotted names and source files.

    Callables are described by their signature and docstring. A docstring that
    uses help keywords (``.SYNOPSIS``, ``.EXAMPLE`` ...) is sectioned like a
    comment block when its first line is a keyword; any other docstring contributes its first paragraph as the
    synopsis and the remainder as the description. Source files are parsed
    with :mod:`ast` and never executed.
    """

    def __init__(self) -> None:
        self._sectioner = CommentBlockSectioner(comment_marker=None)

    def resolve(self, ref: Any) -> Optional[HelpModel]:
        if isinstance(ref, Path) or (isinstance(ref, str) and ref.endswith(".py")):
            return self.from_source_file(Path(ref))
        if isinstance(ref, str):
            target = self._import_dotted(ref)
            if target is None:
                return None
            return self.from_object(target, name=ref)
        if inspect.ismodule(ref) or callable(ref):
            return self.from_object(ref)
        return None

    def from_object(self, target: Any, *, name: Optional[str] = None) -> Optional[HelpModel]:
        doc = inspect.getdoc(target)
        if inspect.ismodule(target):
            if not doc:
                return None
            model = HelpModel(name=name or target.__name__, kind=KIND_COMMENT)
            self._apply_docstring(model, doc)
            return model.finalize()

        if not callable(target):
            return None

        label = name or getattr(target, "__qualname__", None) or getattr(target, "__name__", None)
        if not label:
            return None
        model = HelpModel(name=label, kind=KIND_CALLABLE)
        if doc:
            self._apply_docstring(model, doc)
        self._apply_signature(model, target)
        return model.finalize()

    def from_source_file(self, path: Path) -> Optional[HelpModel]:
        if not path.is_file():
            logger.debug("Source file %s does not exist", path)
            return None
        try:
            source = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise UnsupportedSourceError(f"{path} is not valid UTF-8 text") from exc
        try:
            tree = ast.parse(source, filename=str(path))
        except SyntaxError as exc:
            logger.warning("Cannot parse %s: %s", path, exc)
            return None
        doc = ast.get_docstring(tree)
        if not doc:
            return None
        model = HelpModel(name=path.stem, kind=KIND_COMMENT)
        self._apply_docstring(model, doc)
        return model.finalize()

    def _import_dotted(self, dotted: str) -> Any:
        parts = dotted.split(".")
        if not all(part.strip() for part in parts):
            logger.debug("Not a dotted import path: %r", dotted)
            return None
        for split in range(len(parts), 0, -1):
            module_name = ".".join(parts[:split])
            try:
                target: Any = importlib.import_module(module_name)
            except (ImportError, ValueError, TypeError):
                continue
            try:
                for attribute in parts[split:]:
                    target = getattr(target, attribute)
            except AttributeError:
                logger.debug("Module %s has no attribute path %s", module_name, dotted)
                return None
            return target
        logger.debug("Unable to import %s", dotted)
        return None

    def _apply_docstring(self, model: HelpModel, doc: str) -> None:
        lines = doc.splitlines()
        first = next((index for index, line in enumerate(lines) if line.strip()), None)
        tokens = self._sectioner.tokenize(lines)
        if tokens and tokens[0].line_index == first:
            parsed = self._sectioner.parse(doc, name=model.name)
            model.synopsis = parsed.synopsis
            model.description = parsed.description
            model.examples = parsed.examples
            model.notes = parsed.notes
            model.related_links = parsed.related_links
            model.component = parsed.component
            model.functionality = parsed.functionality
            model.role = parsed.role
            return

        paragraphs = reflow(doc.splitlines())
        if paragraphs and not is_verbatim(paragraphs[0]):
            model.synopsis = paragraphs[0]
            paragraphs = paragraphs[1:]
        model.description = paragraphs

    def _apply_signature(self, model: HelpModel, target: Any) -> None:
        try:
            signature = inspect.signature(target)
        except (TypeError, ValueError):
            logger.debug("No signature available for %s", model.name)
            return

        parameters: List[Parameter] = []
        position = 0
        for index, param in enumerate(signature.parameters.values()):
            if index == 0 and param.name in _SELF_NAMES:
                continue
            if param.kind is inspect.Parameter.VAR_KEYWORD:
                model.accepts_common_parameters = True
                continue

            type_name = _annotation_name(param.annotation)
            has_default = param.default is not inspect.Parameter.empty
            if has_default and param.default is False and type_name == "bool":
                type_name = "Switch"

            slot: Optional[int] = None
            if param.kind in _POSITIONAL_KINDS:
                slot = position
                position += 1

            pipeline = param.kind is inspect.Parameter.VAR_POSITIONAL
            parameters.append(
                Parameter(
                    name=param.name,
                    type=type_name,
                    position=slot,
                    mandatory=not has_default and not pipeline,
                    default_value=repr(param.default) if has_default else None,
                    accepts_pipeline_input=pipeline,
                )
            )
            if pipeline:
                model.input_types.append(type_name)

        model.parameters = parameters
        model.parameter_sets = [list(parameters)]

        returns = signature.return_annotation
        if returns is not inspect.Signature.empty and returns not in (None, "None"):
            model.output_types.append(_annotation_name(returns))


def _annotation_name(annotation: Any) -> str:
    if annotation is inspect.Parameter.empty:
        return "Object"
    if isinstance(annotation, str):
        return annotation
    if isinstance(annotation, type):
        module = annotation.__module__
        if module == "builtins":
            return annotation.__name__
        return f"{module}.{annotation.__qualname__}"
    return str(annotation).replace("typing.", "")


__all__ = ["PythonHelpProvider"]
