"""Tests for flattening pydantic validation errors."""

from pydantic import BaseModel, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from appconfigr.config.validator import flatten_pydantic_errors


class ServerConfig(BaseModel):
    """Simple model for validation testing."""

    host: str = Field(min_length=1)
    port: int = Field(ge=1, le=65535)


class ClusterConfig(BaseModel):
    """Model with a nested list."""

    servers: list[ServerConfig]


def _errors_for(model: type[BaseModel], data: object) -> list[str]:
    try:
        model.model_validate(data)
    except PydanticValidationError as e:
        return flatten_pydantic_errors(e)
    raise AssertionError("validation unexpectedly succeeded")


class TestFlattenPydanticErrors:
    """Tests for flatten_pydantic_errors()."""

    def test_one_message_per_field(self) -> None:
        """Test that each failing field is reported."""
        result = _errors_for(ServerConfig, {"host": "", "port": 0})
        assert len(result) == 2
        assert result[0].startswith("Field 'host'")
        assert result[1].startswith("Field 'port'")

    def test_received_value_included(self) -> None:
        """Test that the offending input is shown."""
        result = _errors_for(ServerConfig, {"host": "h", "port": "abc"})
        assert "received: 'abc'" in result[0]

    def test_missing_field_has_no_received_value(self) -> None:
        """Test the message for a required field that is absent."""
        result = _errors_for(ServerConfig, {"host": "h"})
        assert result == ["Field 'port': Field required"]

    def test_nested_location_uses_dots(self) -> None:
        """Test list indexes in the field path."""
        result = _errors_for(ClusterConfig, {"servers": [{"host": "h", "port": 70000}]})
        assert result[0].startswith("Field 'servers.0.port'")

    def test_root_error(self) -> None:
        """Test errors without a location."""
        try:
            TypeAdapter(int).validate_python("abc")
        except PydanticValidationError as e:
            result = flatten_pydantic_errors(e)
        assert result[0].startswith("Field '<root>'")

    def test_returns_strings(self) -> None:
        """Test the return type."""
        result = _errors_for(ServerConfig, {})
        assert all(isinstance(item, str) for item in result)
