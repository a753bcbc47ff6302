"""Minimal build-tool host model.

The checker only needs a narrow view of the build tool: the resolved file
dependencies and modules of a compilation, its error/warning channels and
output assets, and an async ``emit`` hook to subscribe to. Build tools are
adapted to notice-checker by filling in a Compilation and firing the hook.
"""
from __future__ import annotations

from typing import Any, Awaitable, Callable, Optional

from pydantic import BaseModel, Field

from notice_checker.models.policy import PolicyViolation

EmitCallback = Callable[["Compilation"], Awaitable[None]]


class Module(BaseModel):
    """A module record of the build graph."""

    model_config = {"extra": "forbid"}

    resource: Optional[str] = Field(default=None, description="Module file path")
    delegate_data: Optional[dict[str, Any]] = Field(
        default=None,
        description="Set when the module is resolved through a delegate",
    )
    original_request: Optional[str] = Field(
        default=None,
        description="Resource path of the request the delegate stands in for",
    )
    issuer_context: Optional[str] = Field(
        default=None,
        description="Directory of the module that issued the request",
    )


class Compilation(BaseModel):
    """State of a single build run as seen by the checker."""

    model_config = {"extra": "forbid"}

    file_dependencies: list[str] = Field(
        default_factory=list,
        description="Absolute paths of files the build depends on",
    )
    modules: list[Module] = Field(default_factory=list)
    errors: list[PolicyViolation] = Field(default_factory=list)
    warnings: list[PolicyViolation] = Field(default_factory=list)
    assets: dict[str, str] = Field(
        default_factory=dict,
        description="Emitted artifacts keyed by output filename",
    )


class AsyncHook:
    """Async lifecycle hook; taps run one after another in tap order."""

    def __init__(self) -> None:
        self._taps: list[tuple[str, EmitCallback]] = []

    @property
    def taps(self) -> list[str]:
        """Names of the subscribed callbacks."""
        return [name for name, _ in self._taps]

    def tap_promise(self, name: str, callback: EmitCallback) -> None:
        """Subscribe an async callback under a plugin name."""
        self._taps.append((name, callback))

    async def call(self, compilation: Compilation) -> None:
        """Run every subscribed callback with the compilation."""
        for _, callback in self._taps:
            await callback(compilation)


class CompilerHooks:
    """Lifecycle hooks exposed by the compiler."""

    def __init__(self) -> None:
        self.emit = AsyncHook()


class Compiler:
    """Build driver that plugins are applied to."""

    def __init__(self, watch_mode: bool = False) -> None:
        self.watch_mode = watch_mode
        self.hooks = CompilerHooks()

    async def run(self, compilation: Compilation) -> Compilation:
        """Run the emit phase for a compilation.

        Args:
            compilation: Compilation to emit.

        Returns:
            The same compilation, with errors, warnings and assets added
            by the subscribed plugins.
        """
        await self.hooks.emit.call(compilation)
        return compilation
