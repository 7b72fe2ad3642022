"""
Named match predicates and value transforms for field definitions.

A field's ``matchExpression`` / ``valueExpression`` names a callable that
was registered here. Nothing is ever evaluated as code: unknown names and
callables that raise are logged and count as "no match".
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from launchbar.logger import get_logger

logger = get_logger("expressions")

Predicate = Callable[[str], bool]
Transform = Callable[[str], Any]


class ExpressionRegistry:
    """Registry of named predicates and transforms applied to tokens."""

    def __init__(self) -> None:
        self._predicates: dict[str, Predicate] = {}
        self._transforms: dict[str, Transform] = {}

    def register_predicate(self, name: str, predicate: Predicate) -> None:
        self._predicates[name] = predicate

    def register_transform(self, name: str, transform: Transform) -> None:
        self._transforms[name] = transform

    def predicate(self, name: str) -> Callable[[Predicate], Predicate]:
        """Decorator form of :meth:`register_predicate`."""

        def decorator(func: Predicate) -> Predicate:
            self.register_predicate(name, func)
            return func

        return decorator

    def transform(self, name: str) -> Callable[[Transform], Transform]:
        """Decorator form of :meth:`register_transform`."""

        def decorator(func: Transform) -> Transform:
            self.register_transform(name, func)
            return func

        return decorator

    def matches(self, name: str, token: str) -> bool:
        """Evaluate predicate ``name`` against ``token``.

        Only a literal ``True`` result is a match.
        """
        predicate = self._predicates.get(name)
        if predicate is None:
            logger.warning(f"Unknown match expression {name!r}; treating as no match")
            return False
        try:
            return predicate(token) is True
        except Exception:
            logger.exception(f"Match expression {name!r} failed for token {token!r}")
            return False

    def apply(self, name: str, token: str) -> tuple[bool, Optional[Any]]:
        """Apply transform ``name`` to ``token``.

        Returns:
            ``(True, value)`` on success, ``(False, None)`` when the transform
            is unknown or raised.
        """
        transform = self._transforms.get(name)
        if transform is None:
            logger.warning(f"Unknown value expression {name!r}; treating as no match")
            return False, None
        try:
            return True, transform(token)
        except Exception:
            logger.exception(f"Value expression {name!r} failed for token {token!r}")
            return False, None

    @classmethod
    def with_builtins(cls) -> "ExpressionRegistry":
        """Registry pre-loaded with a handful of generally useful expressions."""
        registry = cls()
        registry.register_predicate("alpha", str.isalpha)
        registry.register_predicate("digits", str.isdigit)
        registry.register_predicate("upper", lambda token: token.isupper())
        registry.register_predicate("positive", lambda token: float(token) > 0)
        registry.register_transform("upper", str.upper)
        registry.register_transform("lower", str.lower)
        registry.register_transform("int", int)
        registry.register_transform("float", float)
        return registry
