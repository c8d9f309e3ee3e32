"""Command and CommandHandler base classes with authorization gate."""

from __future__ import annotations

from abc import ABCMeta, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar, dataclass_transform

from pydantic import BaseModel

from panelauth.domain.shared.authorization.gate import wrap_run_with_auth

if TYPE_CHECKING:
    from panelauth.domain.shared.authorization.policy import Policy


class Command(BaseModel):
    __public__: ClassVar[bool] = False


class Result(BaseModel): ...


C = TypeVar("C", bound=Command)
R = TypeVar("R", bound=Result)


@dataclass_transform()
class _CommandHandlerMeta(ABCMeta):
    """Metaclass that combines ABC with auto-dataclass and __auth__ gate for subclasses."""

    def __new__(mcs, name: str, bases: tuple[type, ...], namespace: dict[str, Any]):
        cls = super().__new__(mcs, name, bases, namespace)
        if any(isinstance(b, mcs) for b in bases):
            cls = dataclass(cls)

            original_run = cls.__dict__.get("run")
            if original_run is not None:
                cls.run = wrap_run_with_auth(original_run)

        return cls


class CommandHandler(Generic[C, R], metaclass=_CommandHandlerMeta):
    """Base class for command handlers. Subclasses are automatically dataclasses.

    Declare __auth__ to enforce role-based access:
        class MyHandler(CommandHandler[MyCmd, MyResult]):
            __auth__ = can_manage(Role.AGENT)
            principal: Principal
    """

    __auth__: ClassVar[Policy]

    @abstractmethod
    async def run(self, cmd: C) -> R: ...
