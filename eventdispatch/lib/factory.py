"""Object factory used to build named listener handlers."""

from __future__ import annotations

import importlib
import inspect
import logging
from typing import Any

from eventdispatch.lib.exceptions import InvalidConfig

logger = logging.getLogger(__name__)


def import_string(path: str) -> Any:
    """Import an attribute from a dotted path.

    Both ``package.module.Name`` and ``package.module:Name`` are accepted.

    Args:
        path (str): The dotted path to import.

    Returns:
        Any: The imported attribute, usually a class.

    Raises:
        InvalidConfig: If the module can't be imported or has no such attribute.
    """
    if ":" in path:
        module_name, _, attr_path = path.partition(":")
    else:
        module_name, _, attr_path = path.rpartition(".")

    if not module_name or not attr_path:
        raise InvalidConfig(f"'{path}' is not a dotted import path")

    try:
        obj = importlib.import_module(module_name)
    except ImportError as e:
        raise InvalidConfig(f"Can't import '{path}': {e}") from e

    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as e:
            raise InvalidConfig(f"Module '{module_name}' has no attribute '{attr_path}'") from e
    return obj


class ObjectFactory:
    """Builds objects from identifiers, classes or definition dicts.

    Named definitions registered with :meth:`set` take priority over import paths, so
    an application can bind ``"payments"`` to a configured listener and refer to it by
    that name in the listener map.
    """

    def __init__(self, definitions: dict[str, Any] | None = None) -> None:
        self._definitions: dict[str, Any] = {}
        for identifier, definition in (definitions or {}).items():
            self.set(identifier, definition)

    def set(self, identifier: str, definition: Any) -> None:
        """Register a definition under a name."""
        self._definitions[identifier] = definition

    def has(self, identifier: str) -> bool:
        return identifier in self._definitions

    def create_object(self, definition: Any) -> Any:
        """Create a new instance from a definition.

        A new object is built on every call; nothing is cached.

        Args:
            definition: A registered name, a dotted import path, a class, or a dict
                with a ``"class"`` key whose other entries become keyword arguments.

        Returns:
            Any: The constructed object.

        Raises:
            InvalidConfig: If the definition type is unsupported or can't be resolved.
        """
        if isinstance(definition, str):
            if definition in self._definitions:
                return self._build(self._definitions[definition])
            logger.debug("Creating object from import path: %s", definition)
            return self._instantiate(import_string(definition), {})
        return self._build(definition)

    def _build(self, definition: Any) -> Any:
        if isinstance(definition, str):
            return self._instantiate(import_string(definition), {})
        if inspect.isclass(definition):
            return self._instantiate(definition, {})
        if isinstance(definition, dict):
            params = dict(definition)
            cls = params.pop("class", None)
            if cls is None:
                raise InvalidConfig("Object definition dict must contain a 'class' element")
            if isinstance(cls, str):
                cls = import_string(cls)
            return self._instantiate(cls, params)
        if callable(definition):
            return definition()
        raise InvalidConfig(f"Unsupported definition type: {type(definition).__name__}")

    @staticmethod
    def _instantiate(cls: Any, params: dict[str, Any]) -> Any:
        if not inspect.isclass(cls):
            raise InvalidConfig(f"{cls!r} is not a class")
        return cls(**params)
