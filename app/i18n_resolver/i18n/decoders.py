"""Catalog source decoders.

A decoder turns the raw bytes of a catalog source into plain Python data;
parse_messages() then flattens that data into message definitions. Decoders
are looked up by file extension so new formats can be plugged in with
register_decoder().
"""

import json
import tomllib
from typing import Any, Callable, Dict, List

import yaml

from i18n_resolver.i18n.models import PLURAL_CATEGORIES, MessageDefinition

Decoder = Callable[[bytes], Any]

_RESERVED_FIELDS = {
    "id",
    "description",
    "hash",
    "leftdelim",
    "rightdelim",
    "translation",
    *PLURAL_CATEGORIES,
}

_decoders: Dict[str, Decoder] = {}


def _decode_yaml(raw: bytes) -> Any:
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ValueError(f"invalid YAML: {e}") from e


def _decode_json(raw: bytes) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"invalid JSON: {e}") from e


def _decode_toml(raw: bytes) -> Any:
    try:
        return tomllib.loads(raw.decode("utf-8"))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ValueError(f"invalid TOML: {e}") from e


def register_decoder(extension: str, decoder: Decoder) -> None:
    """Register a decoder for a catalog file extension.

    Args:
        extension: File extension without the leading dot (e.g., "yaml").
        decoder: Callable taking raw bytes and returning decoded data.
            It should raise ValueError on malformed input.
    """
    _decoders[extension.lower().lstrip(".")] = decoder


def get_decoder(extension: str) -> Decoder:
    """Get the decoder registered for an extension.

    Raises:
        KeyError: If no decoder is registered for the extension.
    """
    normalized = extension.lower().lstrip(".")
    if normalized not in _decoders:
        raise KeyError(f"No catalog decoder registered for extension: {extension}")
    return _decoders[normalized]


def registered_extensions() -> List[str]:
    return sorted(_decoders)


def decode_catalog(raw: bytes, extension: str) -> Dict[str, MessageDefinition]:
    """Decode raw catalog bytes into message definitions.

    Args:
        raw: Raw catalog source.
        extension: Format of the source, selects the decoder.

    Returns:
        Mapping of message key to MessageDefinition.

    Raises:
        KeyError: If no decoder handles the extension.
        ValueError: If the source is malformed.
    """
    return parse_messages(get_decoder(extension)(raw))


def parse_messages(data: Any) -> Dict[str, MessageDefinition]:
    """Flatten decoded catalog data into message definitions.

    Accepted shapes:
    - a mapping of key to text, message definition, or nested namespace
      (nested keys are joined with ".")
    - a list of message definitions, each carrying an "id"

    A nested mapping is read as a message definition when every key is a
    reserved field name (id, description, hash, leftdelim, rightdelim,
    zero, one, two, few, many, other, translation; case-insensitive) and
    every value is a string. A namespace made only of such names, e.g.
    ``user: {id: "User ID", description: "Notes"}``, is therefore taken
    as a definition and rejected for having no text. Rename the keys, or
    use the list form, to keep such messages.

    Args:
        data: Output of a decoder.

    Returns:
        Mapping of message key to MessageDefinition.

    Raises:
        ValueError: If the data does not describe messages.
    """
    messages: Dict[str, MessageDefinition] = {}
    if data is None:
        return messages

    if isinstance(data, list):
        for item in data:
            if not isinstance(item, dict) or not _is_definition(item):
                raise ValueError(f"expected a message definition, got: {item!r}")
            fields = _normalize_fields(item)
            key = fields.get("id")
            if not isinstance(key, str) or not key:
                raise ValueError(f"message definition without id: {item!r}")
            messages[key] = _build_definition(key, fields)
        return messages

    if not isinstance(data, dict):
        raise ValueError(f"expected a mapping of messages, got {type(data).__name__}")

    _flatten(data, "", messages)
    return messages


def _flatten(
    node: Dict[Any, Any], prefix: str, messages: Dict[str, MessageDefinition]
) -> None:
    for name, value in node.items():
        key = f"{prefix}{name}"
        if isinstance(value, str):
            messages[key] = MessageDefinition(id=key, other=value)
        elif isinstance(value, dict) and _is_definition(value):
            messages[key] = _build_definition(key, _normalize_fields(value))
        elif isinstance(value, dict):
            _flatten(value, f"{key}.", messages)
        else:
            raise ValueError(
                f"unsupported value for message {key!r}: {type(value).__name__}"
            )


def _is_definition(value: Dict[Any, Any]) -> bool:
    if not value:
        return False
    for name, field_value in value.items():
        if not isinstance(name, str) or name.lower() not in _RESERVED_FIELDS:
            return False
        if field_value is not None and not isinstance(field_value, str):
            return False
    return True


def _normalize_fields(value: Dict[str, Any]) -> Dict[str, Any]:
    return {name.lower(): field_value for name, field_value in value.items()}


def _build_definition(key: str, fields: Dict[str, Any]) -> MessageDefinition:
    other = fields.get("other") or fields.get("translation")
    variants = {
        category: fields.get(category) for category in PLURAL_CATEGORIES[:-1]
    }
    if not other and not any(variants.values()):
        raise ValueError(f"message {key!r} has no text")
    return MessageDefinition(
        id=key,
        other=other,
        description=fields.get("description"),
        **variants,
    )


register_decoder("yaml", _decode_yaml)
register_decoder("yml", _decode_yaml)
register_decoder("json", _decode_json)
register_decoder("toml", _decode_toml)
