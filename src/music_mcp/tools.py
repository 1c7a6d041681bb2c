"""Tool definitions for the Music MCP server."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Literal

from pydantic import BaseModel, ConfigDict, ValidationError

ParameterKind = Literal["number", "string", "boolean"]


class ToolInputError(ValueError):
    """Raised when tool arguments are rejected before any command runs."""


class ToolParameters(BaseModel):
    """Base parameters schema for MCP tools.

    Unknown arguments are dropped so that tools without parameters accept
    whatever a client sends.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


@dataclass(frozen=True)
class ParameterSpec:
    """Advertised schema for a single tool parameter.

    Attributes:
        name: Argument name as sent by the client.
        kind: JSON type of the argument.
        description: Human-readable explanation shown to the client.
        required: Whether the argument must be supplied.
        minimum: Lower bound advertised for numbers.
        maximum: Upper bound advertised for numbers.
        enum: Closed set of values advertised for strings.
    """

    name: str
    kind: ParameterKind
    description: str
    required: bool = False
    minimum: float | None = None
    maximum: float | None = None
    enum: tuple[str, ...] | None = None

    def to_schema(self) -> Dict[str, Any]:
        """Render the JSON schema property for this parameter."""

        schema: Dict[str, Any] = {"type": self.kind}
        if self.enum is not None:
            schema["enum"] = list(self.enum)
        schema["description"] = self.description
        if self.minimum is not None:
            schema["minimum"] = self.minimum
        if self.maximum is not None:
            schema["maximum"] = self.maximum
        return schema


@dataclass(frozen=True)
class ToolDefinition:
    """Description of a tool that can be registered with the server.

    Attributes:
        name: Unique name of the tool.
        description: Human-readable description of the tool purpose.
        parameters_model: Pydantic model used to validate input parameters.
        handler: Callable that runs the tool and returns its reply text.
        parameters: Advertised parameter schema, in declaration order.
    """

    name: str
    description: str
    parameters_model: type[ToolParameters]
    handler: Callable[[Dict[str, Any]], str]
    parameters: tuple[ParameterSpec, ...] = field(default_factory=tuple)

    def validate(self, parameters: Dict[str, Any]) -> Dict[str, Any]:
        """Validate and coerce incoming tool parameters.

        Args:
            parameters: Input parameters provided for the tool.

        Raises:
            ToolInputError: If parameter validation fails.

        Returns:
            Validated parameter dictionary keyed by the client-facing names.
        """

        try:
            model = self.parameters_model.model_validate(parameters)
        except ValidationError as error:
            details = "; ".join(
                f"{'.'.join(str(part) for part in item['loc']) or 'arguments'}: "
                f"{item['msg']}"
                for item in error.errors()
            )
            raise ToolInputError(
                f"Invalid parameters for tool '{self.name}': {details}"
            ) from error
        return model.model_dump(by_alias=True, exclude_none=True)

    def input_schema(self) -> Dict[str, Any]:
        """Return the JSON schema advertised for the tool arguments."""

        return {
            "type": "object",
            "properties": {spec.name: spec.to_schema() for spec in self.parameters},
            "required": [spec.name for spec in self.parameters if spec.required],
        }

    def metadata(self) -> Dict[str, Any]:
        """Return a discovery-friendly description of the tool."""

        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }
