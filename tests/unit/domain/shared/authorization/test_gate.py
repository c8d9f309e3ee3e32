"""Tests for the handler-level authorization gate and startup validation."""

import logging

import pytest

from panelauth.domain.auth.model.identity import Anonymous
from panelauth.domain.auth.model.principal import Principal
from panelauth.domain.auth.model.role import Role
from panelauth.domain.shared.authorization.gate import check_handler_access
from panelauth.domain.shared.authorization.policy import can_manage
from panelauth.domain.shared.authorization.startup import (
    check_handler_class,
    validate_all_handlers,
)
from panelauth.domain.shared.command import Command, CommandHandler, Result
from panelauth.domain.shared.error import AuthorizationError, ConfigurationError
from panelauth.domain.shared.query import Query, QueryHandler
from panelauth.domain.shared.query import Result as QueryResult


class CreateAgent(Command):
    name: str = "new agent"


class CreateAgentResult(Result):
    created: bool


class CreateAgentHandler(CommandHandler[CreateAgent, CreateAgentResult]):
    __auth__ = can_manage(Role.AGENT)
    principal: Principal | Anonymous

    async def run(self, cmd: CreateAgent) -> CreateAgentResult:
        return CreateAgentResult(created=True)


class Ping(Query):
    __public__ = True


class PingResult(QueryResult):
    pong: bool


class PingHandler(QueryHandler[Ping, PingResult]):
    async def run(self, query: Ping) -> PingResult:
        return PingResult(pong=True)


class Unprotected(Query):
    pass


class UnprotectedHandler(QueryHandler[Unprotected, PingResult]):
    async def run(self, query: Unprotected) -> PingResult:
        return PingResult(pong=True)


class TestHandlerGate:
    @pytest.mark.asyncio
    async def test_allowed_principal_runs(self) -> None:
        handler = CreateAgentHandler(principal=Principal(user_id="m-1", role="MASTER"))

        result = await handler.run(CreateAgent())

        assert result.created is True

    @pytest.mark.asyncio
    async def test_denied_principal_raises_access_denied(self) -> None:
        handler = CreateAgentHandler(principal=Principal(user_id="a-1", role="AGENT"))

        with pytest.raises(AuthorizationError) as exc_info:
            await handler.run(CreateAgent())

        assert exc_info.value.code == "access_denied"
        assert "role 'AGENT'" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_anonymous_raises_missing_token(self) -> None:
        handler = CreateAgentHandler(principal=Anonymous())

        with pytest.raises(AuthorizationError) as exc_info:
            await handler.run(CreateAgent())

        assert exc_info.value.code == "missing_token"

    @pytest.mark.asyncio
    async def test_public_query_skips_gate(self) -> None:
        result = await PingHandler().run(Ping())

        assert result.pong is True

    @pytest.mark.asyncio
    async def test_missing_policy_raises_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError, match="UnprotectedHandler"):
            await UnprotectedHandler().run(Unprotected())

    def test_decision_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        handler = CreateAgentHandler(principal=Principal(user_id="m-1", role="MASTER"))

        with caplog.at_level(logging.DEBUG, logger="panelauth.authz"):
            check_handler_access(handler, CreateAgent())

        assert "allowed=True" in caplog.text
        assert "CreateAgentHandler" in caplog.text

    def test_handlers_are_dataclasses(self) -> None:
        principal = Principal(user_id="m-1", role="MASTER")

        assert CreateAgentHandler(principal=principal) == CreateAgentHandler(principal=principal)


class TestStartupValidation:
    def test_protected_handler_passes(self) -> None:
        check_handler_class(CreateAgentHandler)

    def test_public_handler_passes(self) -> None:
        check_handler_class(PingHandler)

    def test_unprotected_handler_fails(self) -> None:
        with pytest.raises(ConfigurationError, match="UnprotectedHandler"):
            check_handler_class(UnprotectedHandler)

    def test_explicit_list_reports_every_violation(self) -> None:
        class AlsoUnprotected(Command):
            pass

        class AlsoUnprotectedHandler(CommandHandler[AlsoUnprotected, CreateAgentResult]):
            async def run(self, cmd: AlsoUnprotected) -> CreateAgentResult:
                return CreateAgentResult(created=False)

        with pytest.raises(ConfigurationError) as exc_info:
            validate_all_handlers([CreateAgentHandler, UnprotectedHandler, AlsoUnprotectedHandler])

        assert "2 handler(s)" in exc_info.value.message
        assert "AlsoUnprotectedHandler" in exc_info.value.message

    def test_application_handlers_are_protected(self) -> None:
        from panelauth.domain.auth.util.di.provider import HANDLERS

        validate_all_handlers(HANDLERS)
