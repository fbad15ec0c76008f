"""Uniform result envelope returned to the transport layer.

Handlers raise domain exceptions.  ``execute`` runs a handler call and
folds the outcome into a ``ServiceResult`` carrying the data or the
error kind plus an HTTP-style status hint.  The core itself never
assumes any transport beyond that hint.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

import structlog

from storefront.domain.exceptions import DomainException, StoreFailure

logger = structlog.get_logger(__name__)

T = TypeVar("T")

OK = 200
CREATED = 201


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    data: T | None = None
    error: str | None = None
    error_kind: str | None = None
    status_hint: int = OK
    exception: DomainException | None = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None


def execute(
    fn: Callable[..., T], *args: Any, status_hint: int = OK, **kwargs: Any
) -> ServiceResult[T]:
    """Call ``fn(*args, **kwargs)`` and wrap the outcome.

    Domain exceptions become their own kind and status hint.  Anything
    else escaping the call is treated as a fault of the store layer and
    reported as ``StoreFailure`` (500) with the original exception as
    its cause.
    """
    operation = getattr(fn, "__qualname__", repr(fn))
    try:
        data = fn(*args, **kwargs)
    except DomainException as exc:
        logger.info(
            "Operation rejected",
            operation=operation,
            error_kind=exc.kind,
            error=str(exc),
        )
        return ServiceResult(
            error=str(exc),
            error_kind=exc.kind,
            status_hint=exc.status_hint,
            exception=exc,
        )
    except Exception as exc:
        logger.exception("Store failure", operation=operation)
        failure = StoreFailure(str(exc) or type(exc).__name__)
        failure.__cause__ = exc
        return ServiceResult(
            error=str(failure),
            error_kind=failure.kind,
            status_hint=failure.status_hint,
            exception=failure,
        )
    return ServiceResult(data=data, status_hint=status_hint)
