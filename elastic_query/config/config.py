"""
Elasticsearch connection configuration.

ElasticConnection is a read-only record of where requests are sent: the
endpoint, the timeout the transport should use, and an optional index.
It can be created directly or loaded from environment variables.
"""

from __future__ import annotations

import logging
import math
import os
from datetime import timedelta
from typing import Any, Optional
from urllib.parse import urlparse

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from elastic_query.constants import (
    DEFAULT_TIMEOUT_SECONDS,
    ENV_ELASTIC_ENDPOINT,
    ENV_ELASTIC_INDEX,
    ENV_ELASTIC_TIMEOUT,
)
from elastic_query.exception import ConfigurationError

logger = logging.getLogger(__name__)


class ElasticConnection(BaseModel):
    """Elasticsearch connection settings."""

    model_config = ConfigDict(frozen=True)

    endpoint: str = Field(
        ...,
        description="Base URL of the Elasticsearch server",
        examples=["http://localhost:9200"],
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        description="Request timeout in seconds for the transport",
    )
    index: Optional[str] = Field(
        default=None,
        description="Index to search; omitted from the path when not set",
    )

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid Elasticsearch connection: {e}") from e

    @classmethod
    def model_validate(cls, obj: Any, **kwargs: Any) -> ElasticConnection:
        """Validate a mapping or object, raising ConfigurationError on failure."""
        try:
            return super().model_validate(obj, **kwargs)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid Elasticsearch connection: {e}") from e

    @classmethod
    def model_validate_json(cls, json_data: Any, **kwargs: Any) -> ElasticConnection:
        """Validate a JSON document, raising ConfigurationError on failure."""
        try:
            return super().model_validate_json(json_data, **kwargs)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid Elasticsearch connection: {e}") from e

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        """Endpoint must be an absolute http(s) URL."""
        parsed = urlparse(v.strip())
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"Endpoint must be an absolute http(s) URL, got '{v}'")
        return v.strip()

    @field_validator("timeout", mode="before")
    @classmethod
    def convert_timeout(cls, v: Any) -> Any:
        """Accept a timedelta as well as seconds."""
        if isinstance(v, timedelta):
            return v.total_seconds()
        return v

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Timeout must be a positive, finite number of seconds."""
        if not math.isfinite(v) or v <= 0:
            raise ValueError(f"Timeout must be positive and finite, got {v}")
        return v

    @field_validator("index")
    @classmethod
    def validate_index(cls, v: Optional[str]) -> Optional[str]:
        """Index, when given, cannot be blank."""
        if v is None:
            return v
        if not v.strip():
            raise ValueError("Index cannot be empty or whitespace")
        return v.strip()

    @property
    def timeout_delta(self) -> timedelta:
        return timedelta(seconds=self.timeout)

    @classmethod
    def from_env(cls) -> ElasticConnection:
        """Load connection settings from environment variables.

        Reads ELASTIC_ENDPOINT (required), ELASTIC_TIMEOUT (seconds) and
        ELASTIC_INDEX, after loading any .env file.

        Returns:
            ElasticConnection built from the environment.

        Raises:
            ConfigurationError: If the endpoint is missing or any value is invalid.
        """
        load_dotenv()

        endpoint = os.getenv(ENV_ELASTIC_ENDPOINT, "").strip()
        if not endpoint:
            raise ConfigurationError(
                f"Elasticsearch configuration incomplete. Please configure {ENV_ELASTIC_ENDPOINT}."
            )

        data: dict = {"endpoint": endpoint}

        timeout = os.getenv(ENV_ELASTIC_TIMEOUT, "").strip()
        if timeout:
            try:
                data["timeout"] = float(timeout)
            except ValueError as e:
                raise ConfigurationError(
                    f"{ENV_ELASTIC_TIMEOUT} must be a number of seconds, got '{timeout}'"
                ) from e

        index = os.getenv(ENV_ELASTIC_INDEX, "").strip()
        if index:
            data["index"] = index
        else:
            logger.warning(
                f"{ENV_ELASTIC_INDEX} not set. Requests will use the default index path."
            )

        return cls(**data)
