"""Logfire tracing for the Local Library catalog server."""

import functools
import logging
import os
from collections.abc import Callable
from typing import Any

import logfire
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class ObservabilityConfig(BaseModel):
    """Configuration for Logfire observability."""

    token: str = Field(default_factory=lambda: os.getenv("LOGFIRE_TOKEN", ""))
    service_name: str = "local-library"
    environment: str = Field(default_factory=lambda: os.getenv("ENVIRONMENT", "development"))

    enabled: bool = Field(
        default_factory=lambda: os.getenv("LOGFIRE_ENABLED", "true").lower() == "true"
    )
    console_output: bool = Field(
        default_factory=lambda: os.getenv("LOGFIRE_CONSOLE", "false").lower() == "true"
    )
    send_to_logfire: bool = Field(
        default_factory=lambda: os.getenv("LOGFIRE_SEND", "false").lower() == "true"
    )


def initialize_observability(config: ObservabilityConfig | None = None) -> ObservabilityConfig:
    """Configure logfire from ``config`` (or the environment)."""
    config = config or ObservabilityConfig()

    if not config.enabled:
        logger.debug("Observability disabled via configuration")
        return config

    logfire.configure(
        token=config.token or None,
        service_name=config.service_name,
        environment=config.environment,
        send_to_logfire=config.send_to_logfire,
        console=None if config.console_output else False,
    )
    logger.info("Logfire configured for environment %s", config.environment)
    return config


def trace_resource(resource_type: str, uri: str):
    """Wrap an async resource handler in a logfire span."""

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any):
            with logfire.span(
                f"resource.read.{resource_type}",
                resource_uri=uri,
                resource_type=resource_type,
            ) as span:
                result = await func(*args, **kwargs)

                if isinstance(result, dict):
                    span.set_attribute("result.status_code", result.get("status_code"))
                    body = result.get("body")
                    if isinstance(body, list):
                        span.set_attribute("result.item_count", len(body))

                return result

        return wrapper

    return decorator
