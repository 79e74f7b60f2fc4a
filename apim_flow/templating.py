import json
import re
from typing import Any, Mapping
from xml.sax.saxutils import escape

PLACEHOLDER = re.compile(r"\{\{([^}]+)\}\}")

_QUOTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}

def escape_xml(value: str) -> str:
    return escape(value, _QUOTE_ENTITIES)

def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join("" if v is None else _stringify(v) for v in value)
    if isinstance(value, dict):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return str(value)

def render_template(template: str, values: Mapping[str, Any]) -> str:
    """Substitute {{name}} placeholders.

    Unknown or null values render as empty text, booleans as true/false and
    everything else is XML-escaped so it cannot leave its placeholder position.
    """
    def substitute(match: "re.Match[str]") -> str:
        value = values.get(match.group(1).strip())
        if value is None:
            return ""
        if isinstance(value, bool):
            return _stringify(value)
        return escape_xml(_stringify(value))

    return PLACEHOLDER.sub(substitute, template)
