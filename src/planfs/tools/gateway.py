"""Tool execution with policy and validation."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass

from planfs.core.context import OperationContext
from planfs.core.errors import FileToolError
from planfs.core.policy import Decision, ToolPolicy
from planfs.core.settings import Settings
from planfs.sandbox.paths import PathResolver
from planfs.sandbox.roots import SettingsRootProvider
from planfs.services.descriptions import DescriptionLookup
from planfs.services.short_url import ShortUrlResolver, load_short_url_map
from planfs.tools.dispatch import dispatch
from planfs.tools.registry import ToolRegistry, register_file_tools
from planfs.tools.requests import request_from_args
from planfs.tools.results import OperationResult, Status
from planfs.tools.schemas import ToolCall, ToolResult
from planfs.utils.jsonschema import validate_jsonschema
from planfs.utils.redact import summarize_args

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfirmationRequired(Exception):
    tool_name: str
    reason: str


class ToolGateway:
    def __init__(
        self,
        registry: ToolRegistry,
        policy: ToolPolicy,
        resolver: PathResolver,
        settings: Settings,
        short_urls: ShortUrlResolver | None = None,
    ) -> None:
        self._registry = registry
        self._policy = policy
        self._resolver = resolver
        self._settings = settings
        self._short_urls = short_urls

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    async def execute(self, call: ToolCall) -> ToolResult:
        spec = self._registry.get(call.tool)
        decision = self._policy.evaluate(spec.name, spec.risk_level)
        if decision.decision is Decision.DENY:
            logger.warning(
                "Denied %s for scope %s: %s", spec.name, call.scope_id, decision.reason
            )
            return ToolResult(
                call_id=call.call_id,
                ok=False,
                result=None,
                error=decision.reason,
                error_kind=None,
                elapsed_ms=0,
            )
        if decision.decision is Decision.CONFIRM and call.requires_confirm:
            raise ConfirmationRequired(spec.name, decision.reason)

        logger.info(
            "Running %s for scope %s with %s",
            spec.name,
            call.scope_id,
            summarize_args(call.args),
        )
        start = time.perf_counter()
        try:
            validate_jsonschema(spec.args_schema, call.args)
        except FileToolError as exc:
            return self._to_tool_result(call, OperationResult.failure(exc), start)

        request = request_from_args(spec.operation, call.args)
        context = OperationContext.from_settings(
            self._settings, call.scope_id, spec.root_kind, self._short_urls
        )
        outcome = await asyncio.to_thread(dispatch, request, context, self._resolver)
        return self._to_tool_result(call, outcome, start)

    def _to_tool_result(
        self, call: ToolCall, outcome: OperationResult, start: float
    ) -> ToolResult:
        elapsed_ms = int((time.perf_counter() - start) * 1000)
        if not outcome.ok:
            logger.info("%s failed after %d ms: %s", call.tool, elapsed_ms, outcome.text)
            return ToolResult(
                call_id=call.call_id,
                ok=False,
                result=None,
                error=outcome.text,
                error_kind=outcome.error,
                elapsed_ms=elapsed_ms,
            )
        return ToolResult(
            call_id=call.call_id,
            ok=True,
            result=outcome.text,
            error=None,
            error_kind=outcome.error,
            elapsed_ms=elapsed_ms,
            advisory=outcome.status is Status.ADVISORY,
        )


def build_gateway(
    settings: Settings, describe: DescriptionLookup | None = None
) -> ToolGateway:
    registry = ToolRegistry()
    register_file_tools(registry, describe)
    policy = ToolPolicy(
        confirm_tools=settings.confirm_tools, deny_tools=settings.deny_tools
    )
    resolver = PathResolver(SettingsRootProvider.from_settings(settings))
    short_urls = (
        load_short_url_map(settings.short_url_map_path)
        if settings.short_url_map_path is not None
        else None
    )
    return ToolGateway(registry, policy, resolver, settings, short_urls)
