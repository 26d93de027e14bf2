"""Lookup from an install command to its output model."""

from pydantic import BaseModel

# ("install", "run") -> InstallRunOutput, ("install", "status") -> InstallStatusOutput
_SCHEMA_REGISTRY: dict[tuple[str, str], type[BaseModel]] = {}


def register_output_schema(domain: str, command_name: str, schema_class: type[BaseModel]) -> None:
    """Bind ``cmd_<command_name>`` in ``dotlink.api.<domain>`` to ``schema_class``.

    Raises:
        ValueError: If the command already has a schema
    """
    key = (domain, command_name)
    if key in _SCHEMA_REGISTRY:
        raise ValueError(f"Schema already registered for {domain}.{command_name}")
    _SCHEMA_REGISTRY[key] = schema_class


def get_output_schema(domain: str, command_name: str) -> type[BaseModel] | None:
    return _SCHEMA_REGISTRY.get((domain, command_name))
