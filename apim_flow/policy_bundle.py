import textwrap
from dataclasses import dataclass
from typing import Iterable, List, Tuple
from .schemas import ResolvedPolicy
from .templating import render_template

FRAGMENT_INDENT = "    "

@dataclass(frozen=True)
class PolicyBundleDocument:
    inbound: Tuple[str, ...] = ()
    outbound: Tuple[str, ...] = ()
    on_error: Tuple[str, ...] = ()
    # no policy contributes to backend; kept so the document has all four sections
    backend: Tuple[str, ...] = ()

    def to_xml(self) -> str:
        lines = ["<policies>"]
        lines += _section("inbound", self.inbound, placeholder=True)
        lines += _section("backend", self.backend, placeholder=False)
        lines += _section("outbound", self.outbound, placeholder=True)
        lines += _section("on-error", self.on_error, placeholder=True)
        lines += ["</policies>", ""]
        return "\n".join(lines)

def _section(name: str, fragments: Tuple[str, ...], placeholder: bool) -> List[str]:
    lines = [f"  <{name}>", f"{FRAGMENT_INDENT}<base />"]
    if fragments:
        lines += [textwrap.indent(fragment, FRAGMENT_INDENT) for fragment in fragments]
    elif placeholder:
        lines.append(f"{FRAGMENT_INDENT}<!-- no {name} policies selected -->")
    lines.append(f"  </{name}>")
    return lines

def assemble_bundle(resolved: Iterable[ResolvedPolicy]) -> PolicyBundleDocument:
    inbound: List[str] = []
    outbound: List[str] = []
    on_error: List[str] = []

    for item in resolved:
        definition = item.definition
        if definition.inbound_template:
            inbound.append(render_template(definition.inbound_template, item.config))
        if definition.outbound_template:
            outbound.append(render_template(definition.outbound_template, item.config))
        if definition.on_error_template:
            on_error.append(render_template(definition.on_error_template, item.config))

    return PolicyBundleDocument(
        inbound=tuple(inbound),
        outbound=tuple(outbound),
        on_error=tuple(on_error),
    )
