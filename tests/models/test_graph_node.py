"""
Tests for the graph node model and hypermedia classification.
"""

import pytest

from heracles.models import GraphNode, NodeKind, classify, is_hypermedia_iri

from fixtures import HYDRA_NS, SCHEMA_NS


@pytest.mark.unit
class TestGraphNodeFromJsonLd:
    """Tests for building nodes from expanded JSON-LD."""

    def test_reads_identity_types_and_properties(self):
        """Keywords are split from properties."""
        node = GraphNode.from_jsonld({
            "@id": "http://temp.uri/api/events",
            "@type": [HYDRA_NS + "Collection"],
            HYDRA_NS + "totalItems": [{"@value": 1}],
        })

        assert node.iri == "http://temp.uri/api/events"
        assert node.types == frozenset({HYDRA_NS + "Collection"})
        assert node.properties == {HYDRA_NS + "totalItems": [{"@value": 1}]}
        assert node.graph is None

    def test_single_type_string(self):
        """A compacted single type is accepted."""
        node = GraphNode.from_jsonld({"@type": SCHEMA_NS + "Event"})

        assert node.types == frozenset({SCHEMA_NS + "Event"})
        assert node.is_anonymous

    def test_graph_container(self):
        """Nodes naming a graph expose the nested block."""
        node = GraphNode.from_jsonld({"@id": "some:named.graph", "@graph": [{"@id": "x:y"}]})

        assert node.is_graph_container
        assert node.graph == [{"@id": "x:y"}]

    def test_blank_node_is_anonymous(self):
        assert GraphNode.from_jsonld({"@id": "_:b0"}).is_anonymous
        assert not GraphNode.from_jsonld({"@id": "http://temp.uri/"}).is_anonymous

    def test_hypermedia_properties(self):
        """Only Hydra namespace properties are reported."""
        node = GraphNode.from_jsonld({
            "@id": "http://temp.uri/api/events/1",
            SCHEMA_NS + "name": [{"@value": "Event 1"}],
            HYDRA_NS + "operation": [{"@id": "_:b0"}],
        })

        assert list(node.hypermedia_properties()) == [HYDRA_NS + "operation"]


@pytest.mark.unit
class TestClassify:
    """Tests for node classification."""

    @pytest.mark.parametrize("type_name,expected", [
        ("Collection", NodeKind.COLLECTION),
        ("Operation", NodeKind.OPERATION),
        ("ApiDocumentation", NodeKind.API_DOCUMENTATION),
        ("IriTemplate", NodeKind.HYPERMEDIA),
        ("PartialCollectionView", NodeKind.HYPERMEDIA),
    ])
    def test_pure_hydra_types_are_controls(self, type_name, expected):
        kind = classify(GraphNode(types=frozenset({HYDRA_NS + type_name})))

        assert kind == expected
        assert kind.is_control

    def test_untyped_node_is_link(self):
        kind = classify(GraphNode(iri="http://temp.uri/api/events/1"))

        assert kind == NodeKind.LINK
        assert not kind.is_control

    def test_domain_type(self):
        assert classify(GraphNode(types=frozenset({SCHEMA_NS + "Event"}))) == NodeKind.DOMAIN

    def test_mixed_vocabulary_is_domain(self):
        """A node with any non-Hydra type is data."""
        node = GraphNode(types=frozenset({HYDRA_NS + "Operation", SCHEMA_NS + "CreateAction"}))

        assert classify(node) == NodeKind.DOMAIN

    def test_entry_point_is_data(self):
        """An EntryPoint stays in the payload even though it is a Hydra type."""
        kind = classify(GraphNode(types=frozenset({HYDRA_NS + "EntryPoint"})))

        assert kind == NodeKind.ENTRY_POINT
        assert not kind.is_control

    def test_entry_point_wins_over_mixed_types(self):
        node = GraphNode(types=frozenset({HYDRA_NS + "EntryPoint", SCHEMA_NS + "WebSite"}))

        assert classify(node) == NodeKind.ENTRY_POINT


@pytest.mark.unit
def test_is_hypermedia_iri():
    assert is_hypermedia_iri(HYDRA_NS + "member")
    assert not is_hypermedia_iri(SCHEMA_NS + "member")
    assert not is_hypermedia_iri(None)
