"""Signature algorithm registry."""

from __future__ import annotations

from collections.abc import Callable

from http_signatures.algorithm.base import SUPPORTED_DIGESTS, Algorithm
from http_signatures.algorithm.hmac import Hmac
from http_signatures.algorithm.null import Null
from http_signatures.algorithm.rsa import Rsa
from http_signatures.common.logging import get_logger
from http_signatures.exceptions import UnknownAlgorithm

logger = get_logger(__name__)

AlgorithmFactory = Callable[[], Algorithm]

_registry: dict[str, AlgorithmFactory] = {}


def register(name: str, factory: AlgorithmFactory) -> None:
    """
    Register an algorithm factory under a name.

    The factory must build an algorithm whose ``name`` equals the
    registered name.

    Raises:
        ValueError: If the name is already registered
    """
    if name in _registry:
        raise ValueError(f"Algorithm already registered: {name}")
    _registry[name] = factory
    logger.debug("Registered signature algorithm", algorithm=name)


def create(name: str) -> Algorithm:
    """
    Look up an algorithm by its identifier.

    Raises:
        UnknownAlgorithm: If no algorithm is registered under the name
    """
    factory = _registry.get(name)
    if factory is None:
        raise UnknownAlgorithm(name)
    return factory()


def available() -> tuple[str, ...]:
    """Names of all registered algorithms."""
    return tuple(sorted(_registry))


def _register_builtins() -> None:
    for digest in SUPPORTED_DIGESTS:
        register(f"hmac-{digest}", lambda digest=digest: Hmac(digest))
        register(f"rsa-{digest}", lambda digest=digest: Rsa(digest))


_register_builtins()

__all__ = [
    "Algorithm",
    "AlgorithmFactory",
    "Hmac",
    "Null",
    "Rsa",
    "available",
    "create",
    "register",
]
