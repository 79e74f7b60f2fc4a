"""
Unit tests for policy bundle assembly.
"""

from apim_flow.policy_bundle import PolicyBundleDocument, assemble_bundle
from apim_flow.schemas import PolicyDefinition, ResolvedPolicy

EMPTY_BUNDLE = "\n".join([
    "<policies>",
    "  <inbound>",
    "    <base />",
    "    <!-- no inbound policies selected -->",
    "  </inbound>",
    "  <backend>",
    "    <base />",
    "  </backend>",
    "  <outbound>",
    "    <base />",
    "    <!-- no outbound policies selected -->",
    "  </outbound>",
    "  <on-error>",
    "    <base />",
    "    <!-- no on-error policies selected -->",
    "  </on-error>",
    "</policies>",
    "",
])


def _resolved(templates, config=None, pack_id="pack"):
    return ResolvedPolicy(
        pack_id=pack_id,
        definition=PolicyDefinition(category="c", id="p", templates=templates),
        config=config or {},
    )


class TestAssembleBundle:
    """Test cases for assemble_bundle."""

    def test_empty_bundle_has_placeholders(self):
        assert assemble_bundle([]).to_xml() == EMPTY_BUNDLE

    def test_fragments_follow_resolution_order(self):
        bundle = assemble_bundle([
            _resolved({"inbound": "<first v=\"{{v}}\" />"}, {"v": 1}),
            _resolved({"inbound": "<second />", "outbound": "<out />"}),
        ])

        assert bundle.inbound == ('<first v="1" />', "<second />")
        assert bundle.outbound == ("<out />",)
        assert bundle.on_error == ()
        assert bundle.backend == ()

    def test_rendered_document_indents_fragments(self):
        xml = assemble_bundle([_resolved({"inbound": "<a>\n  <b />\n</a>"})]).to_xml()

        assert "    <base />\n    <a>\n      <b />\n    </a>\n  </inbound>" in xml
        assert "<!-- no inbound policies selected -->" not in xml
        assert "<!-- no outbound policies selected -->" in xml

    def test_camel_case_on_error_is_accepted(self):
        bundle = assemble_bundle([_resolved({"onError": "<retry />"})])

        assert bundle.on_error == ("<retry />",)

    def test_hyphenated_on_error_wins_over_camel_case(self):
        bundle = assemble_bundle([_resolved({"on-error": "<hyphen />", "onError": "<camel />"})])

        assert bundle.on_error == ("<hyphen />",)

    def test_backend_section_never_has_placeholder(self):
        xml = PolicyBundleDocument(inbound=("<x />",)).to_xml()

        assert "  <backend>\n    <base />\n  </backend>" in xml
        assert "no backend policies" not in xml

    def test_same_input_gives_same_document(self):
        items = [_resolved({"inbound": "<a v=\"{{v}}\" />"}, {"v": "x&y"})]

        assert assemble_bundle(items).to_xml() == assemble_bundle(items).to_xml()
        assert 'v="x&amp;y"' in assemble_bundle(items).to_xml()
