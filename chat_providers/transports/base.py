"""Transport contract shared by all wire families.

A transport speaks one provider-native protocol. It receives a resolved
:class:`~chat_providers.base.credentials.ServiceTarget`, the normalized request
and the sampling options, and never sees ``ChatOptions`` or the provider
registry directly.

Each call opens its own SDK / HTTP client and closes it before returning (or
when the native stream is exhausted or closed).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterator, List, Optional

from ..base.credentials import ServiceTarget
from ..base.errors import ErrorCode, ProviderError
from ..base.models import ChatResponse, NormalizedChatRequest, SamplingOptions
from ..base.provider_registry import WireFamily
from ..base.streaming import NativeStreamEvent


class Transport(ABC):
    """Provider-native chat and listing operations for one wire family."""

    family: WireFamily
    sdk_name: str = ""

    def _sdk(self) -> Any:
        """Return the SDK sentinel (``None`` when the SDK is not installed)."""
        return True

    def check_available(self, provider: str, model: Optional[str] = None) -> None:
        """Raise ``ProviderError(UNSUPPORTED)`` when the backing SDK is missing."""
        if self._sdk() is None:
            raise ProviderError(
                code=ErrorCode.UNSUPPORTED,
                message=f"{self.sdk_name} SDK not installed",
                provider=provider,
                model=model,
            )

    @abstractmethod
    def exec_chat(
        self,
        target: ServiceTarget,
        request: NormalizedChatRequest,
        sampling: Optional[SamplingOptions],
    ) -> ChatResponse:
        """Send one request and return the normalized response."""

    @abstractmethod
    def exec_chat_stream(
        self,
        target: ServiceTarget,
        request: NormalizedChatRequest,
        sampling: SamplingOptions,
    ) -> Iterator[NativeStreamEvent]:
        """Yield native events for one streamed completion."""

    @abstractmethod
    def list_model_names(self, target: ServiceTarget) -> List[str]:
        """Return the model names this family can serve for ``target``."""


__all__ = ["Transport"]
