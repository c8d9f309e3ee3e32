"""Query and QueryHandler base classes with authorization gate."""

from __future__ import annotations

from abc import ABCMeta, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar, dataclass_transform

from pydantic import BaseModel

from panelauth.domain.shared.authorization.gate import wrap_run_with_auth

if TYPE_CHECKING:
    from panelauth.domain.shared.authorization.policy import Policy


class Query(BaseModel):
    __public__: ClassVar[bool] = False


class Result(BaseModel): ...


Q = TypeVar("Q", bound=Query)
R = TypeVar("R", bound=Result)


@dataclass_transform()
class _QueryHandlerMeta(ABCMeta):
    """Metaclass that combines ABC with auto-dataclass and __auth__ gate for subclasses."""

    def __new__(mcs, name: str, bases: tuple[type, ...], namespace: dict[str, Any]):
        cls = super().__new__(mcs, name, bases, namespace)
        if any(isinstance(b, mcs) for b in bases):
            cls = dataclass(cls)

            original_run = cls.__dict__.get("run")
            if original_run is not None:
                cls.run = wrap_run_with_auth(original_run)

        return cls


class QueryHandler(Generic[Q, R], metaclass=_QueryHandlerMeta):
    """Base class for query handlers. Subclasses are automatically dataclasses.

    Declare __auth__ to enforce role-based access:
        class MyHandler(QueryHandler[MyQuery, MyResult]):
            __auth__ = requires_feature(Feature.LOGIN_REPORTS)
            principal: Principal
    """

    __auth__: ClassVar[Policy]

    @abstractmethod
    async def run(self, query: Q) -> R: ...
