"""Output schema registry, kept apart from the schemas to avoid circular imports."""

from pydantic import BaseModel

# (domain, command_name) -> schema class, e.g. ("parse", "parse") -> ParseOutput
_SCHEMA_REGISTRY: dict[tuple[str, str], type[BaseModel]] = {}


def register_output_schema(domain: str, command_name: str, schema_class: type[BaseModel]) -> None:
    """Register an output schema for a command.

    Args:
        domain: Domain name (e.g., "format", "parse", "config")
        command_name: Command name without the "cmd_" prefix
        schema_class: Pydantic model describing the output structure
    """
    key = (domain, command_name)
    if key in _SCHEMA_REGISTRY:
        raise ValueError(f"Schema already registered for {domain}.{command_name}")
    _SCHEMA_REGISTRY[key] = schema_class


def get_output_schema(domain: str, command_name: str) -> type[BaseModel] | None:
    """Return the schema registered for a command, or None."""
    return _SCHEMA_REGISTRY.get((domain, command_name))
