# zerosource/generation_client.py

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional, Protocol

import requests
from pydantic import ValidationError

from zerosource.config.settings import Settings, get_settings
from zerosource.models.generation import AnalysisResult, ComponentSpec

logger = logging.getLogger(__name__)


class GenerationService(Protocol):
    """
    Anything that can deep-validate a README and generate source from it.

    The CLI only depends on this shape, so a real HTTP service, a mock or a
    local rule engine are interchangeable.
    """

    def analyze(
        self,
        document: str,
        options: Optional[Mapping[str, Any]] = None,
    ) -> AnalysisResult:
        ...

    def generate(
        self,
        document: str,
        component: ComponentSpec,
        language: str,
        options: Optional[Mapping[str, Any]] = None,
    ) -> str:
        ...


@dataclass
class GenerationClientConfig:
    """
    Configuration for talking to a generation service.
    """

    base_url: str
    timeout: int = 120
    model: Optional[str] = None
    api_key: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "GenerationClientConfig":
        """
        Build configuration from Settings (ZEROSOURCE_* env / .env).

        Raises GenerationClientError if no service URL is configured.
        """
        settings = settings or get_settings()
        if not settings.deep_validation_available:
            raise GenerationClientError(
                "No generation service configured (set ZEROSOURCE_GENERATION_URL)"
            )

        api_key = settings.API_KEY.get_secret_value() if settings.API_KEY else None

        return cls(
            base_url=str(settings.GENERATION_URL).strip().rstrip("/"),
            timeout=settings.REQUEST_TIMEOUT,
            model=settings.MODEL_NAME,
            api_key=api_key,
        )


class GenerationClientError(RuntimeError):
    """
    Error raised when a generation service request fails or returns
    something we cannot interpret.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class GenerationClient:
    """
    Minimal HTTP client for a generation service.

    Methods:
        - is_alive() -> bool
        - healthcheck() -> bool (alias)
        - analyze(document, options=None) -> AnalysisResult
        - generate(document, component, language, options=None) -> str
    """

    def __init__(
        self,
        config: Optional[GenerationClientConfig] = None,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
        model: Optional[str] = None,
    ) -> None:
        if config is None:
            if base_url is not None:
                config = GenerationClientConfig(base_url=base_url)
            else:
                config = GenerationClientConfig.from_settings()

        # Overrides go on a copy; the caller's config may be shared.
        overrides: Dict[str, Any] = {}
        if base_url is not None:
            overrides["base_url"] = base_url.rstrip("/")
        if timeout is not None:
            overrides["timeout"] = timeout
        if model is not None:
            overrides["model"] = model

        self.config = replace(config, **overrides)
        self.base_url: str = self.config.base_url.rstrip("/")
        self.timeout: int = self.config.timeout

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.config.api_key:
            headers["Authorization"] = f"Bearer {self.config.api_key}"
        return headers

    def _options(self, options: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        merged: Dict[str, Any] = dict(options or {})
        if self.config.model and "model" not in merged:
            merged["model"] = self.config.model
        return merged

    def _post(self, endpoint: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self.base_url}{endpoint}"
        logger.debug("POST %s", url)

        try:
            resp = requests.post(
                url,
                json=payload,
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as exc:
            raise GenerationClientError(
                f"Error contacting generation service at {url}: {exc}",
                url=url,
            ) from exc

        if not resp.ok:
            raise GenerationClientError(
                f"Generation service returned HTTP {resp.status_code} for {url}: "
                f"{(resp.text or '')[:200]}",
                status_code=resp.status_code,
                url=url,
            )

        try:
            data = resp.json()
        except ValueError as exc:
            raise GenerationClientError(
                f"Generation service returned a non-JSON body for {url}",
                status_code=resp.status_code,
                url=url,
            ) from exc

        if not isinstance(data, dict):
            raise GenerationClientError(
                f"Expected a JSON object from {url}, got {type(data).__name__}",
                status_code=resp.status_code,
                url=url,
            )
        return data

    # ------------------------------------------------------------------
    # Healthcheck
    # ------------------------------------------------------------------
    def is_alive(self) -> bool:
        """
        Call /api/isalive and return True on any 2xx response.
        """
        url = f"{self.base_url}/api/isalive"
        try:
            resp = requests.get(url, headers=self._headers(), timeout=self.timeout)
        except requests.exceptions.RequestException:
            logger.debug("Healthcheck failed for %s", url, exc_info=True)
            return False
        return bool(resp.ok)

    def healthcheck(self) -> bool:
        return self.is_alive()

    # ------------------------------------------------------------------
    # Service calls
    # ------------------------------------------------------------------
    def analyze(
        self,
        document: str,
        options: Optional[Mapping[str, Any]] = None,
    ) -> AnalysisResult:
        """
        Ask the service for a deep (semantic) review of a README.
        """
        data = self._post(
            "/api/analyze",
            {"document": document, "options": self._options(options)},
        )
        try:
            return AnalysisResult.model_validate(data)
        except ValidationError as exc:
            raise GenerationClientError(
                f"Malformed analysis response: {exc}",
                url=f"{self.base_url}/api/analyze",
            ) from exc

    def generate(
        self,
        document: str,
        component: ComponentSpec,
        language: str,
        options: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """
        Generate the source text of one component described by the README.
        """
        data = self._post(
            "/api/generate",
            {
                "document": document,
                "component": component.model_dump(),
                "language": language,
                "options": self._options(options),
            },
        )
        source = data.get("source")
        if not isinstance(source, str):
            raise GenerationClientError(
                "Malformed generation response: missing string field 'source'",
                url=f"{self.base_url}/api/generate",
            )
        return source
