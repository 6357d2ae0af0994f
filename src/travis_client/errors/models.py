"""Travis v3 error payload model."""

from dataclasses import dataclass
from typing import Any

import httpx


@dataclass
class TravisErrorPayload:
    """Error body returned by the Travis v3 API.

    Example body::

        {
            "@type": "error",
            "error_type": "not_found",
            "error_message": "repository not found (or insufficient access)",
            "resource_type": "repository"
        }
    """

    error_type: str | None = None  # machine-readable kind, e.g. "not_found"
    error_message: str | None = None  # human-readable explanation
    resource_type: str | None = None  # resource the error refers to

    # Any other members the API sent along
    extensions: dict[str, Any] | None = None

    @classmethod
    def from_response(cls, response: httpx.Response) -> "TravisErrorPayload | None":
        """Parse a Travis error payload from an HTTP response.

        Args:
            response: HTTP response object

        Returns:
            TravisErrorPayload or None if the body is not a Travis error document
        """
        try:
            data = response.json()
        except (ValueError, TypeError, AttributeError):
            # JSON decode errors, type errors, or missing .json() method
            return None

        if not isinstance(data, dict):
            return None

        known_fields = {"@type", "error_type", "error_message", "resource_type"}
        if data.get("@type") != "error" and not any(
            field in data for field in ("error_type", "error_message")
        ):
            return None

        extensions = {k: v for k, v in data.items() if k not in known_fields}

        return cls(
            error_type=data.get("error_type"),
            error_message=data.get("error_message"),
            resource_type=data.get("resource_type"),
            extensions=extensions if extensions else None,
        )

    def to_exception_message(self) -> str:
        """Convert the payload to an exception message."""
        lines = []

        if self.error_message:
            lines.append(self.error_message)
        elif self.error_type:
            lines.append(self.error_type)

        if self.error_type and self.error_message:
            lines.append(f"Error Type: {self.error_type}")

        if self.resource_type:
            lines.append(f"Resource Type: {self.resource_type}")

        if self.extensions:
            lines.append("Extension fields:")
            for key, value in self.extensions.items():
                lines.append(f"  - {key}: {value}")

        return "\n".join(lines) if lines else "Unknown API error"
