"""Tests for the Mermaid exporter."""

from erdkit.export.mermaid import render_mermaid
from erdkit.ir.schema import Attribute, Cardinality, Diagram, Entity, Relation


def _entity(entity_id, name, attributes=None):
    return Entity(
        id=entity_id,
        logical_name=name,
        physical_name=name.lower(),
        attributes=attributes or [],
    )


def _relation(relation_id, source, target, name, cardinality=Cardinality.ONE_TO_MANY):
    return Relation(
        id=relation_id,
        from_entity_id=source,
        from_attribute="id",
        to_entity_id=target,
        cardinality=cardinality,
        name=name,
    )


def test_render_mermaid(sample_diagram):
    """Full output for a small diagram."""
    expected = (
        "```mermaid\n"
        "erDiagram\n"
        "    Customer {\n"
        "        name VARCHAR(100) UK\n"
        "    }\n"
        "    Order {\n"
        "        order_id INT PK\n"
        "        customer_id INT FK\n"
        "    }\n"
        "    Customer ||--o{ Order : places\n"
        "```\n"
    )
    assert render_mermaid(sample_diagram) == expected


def test_render_mermaid_empty():
    """An empty diagram still produces a valid block."""
    assert render_mermaid(Diagram()) == "```mermaid\nerDiagram\n```\n"


def test_entities_sorted_case_insensitively():
    """'apple' comes before 'Zebra'."""
    diagram = Diagram(
        entities={"z": _entity("z", "Zebra"), "a": _entity("a", "apple")},
        relations=[_relation("r1", "z", "a", "eats")],
    )
    output = render_mermaid(diagram)
    assert output.index("    apple {") < output.index("    Zebra {")
    assert "    Zebra ||--o{ apple : eats\n" in output


def test_output_independent_of_insertion_order(sample_diagram):
    """Permuting the entity mapping and relation list gives identical bytes."""
    permuted = Diagram(
        entities=dict(reversed(list(sample_diagram.entities.items()))),
        relations=list(reversed(sample_diagram.relations)),
    )
    assert render_mermaid(permuted) == render_mermaid(sample_diagram)
    assert render_mermaid(sample_diagram) == render_mermaid(sample_diagram)


def test_attribute_order():
    """PK first, then FK, then the rest, each by case-insensitive logical name."""
    entity = _entity(
        "e1",
        "Thing",
        [
            Attribute(logical_name="beta", physical_name="beta", data_type="TEXT"),
            Attribute(logical_name="Alpha", physical_name="alpha", data_type="TEXT"),
            Attribute(
                logical_name="zeta", physical_name="zeta_id", data_type="INT", is_foreign_key=True
            ),
            Attribute(
                logical_name="Parent", physical_name="parent_id", data_type="INT", is_foreign_key=True
            ),
            Attribute(logical_name="id", physical_name="id", data_type="INT", is_primary_key=True),
        ],
    )
    output = render_mermaid(Diagram(entities={"e1": entity}))
    lines = [line.strip() for line in output.splitlines()[3:8]]
    assert lines == [
        "id INT PK",
        "parent_id INT FK",
        "zeta_id INT FK",
        "alpha TEXT",
        "beta TEXT",
    ]
    # Stored order is left alone
    assert [a.logical_name for a in entity.attributes][0] == "beta"


def test_attribute_suffixes():
    """UK is dropped for primary keys; defaults and auto-increment never show."""
    entity = _entity(
        "e1",
        "Thing",
        [
            Attribute(
                logical_name="id",
                physical_name="id",
                data_type="INT",
                is_primary_key=True,
                is_foreign_key=True,
                is_unique=True,
                is_auto_increment=True,
                default_value="0",
            ),
            Attribute(
                logical_name="code",
                physical_name="item code",
                data_type="CHAR",
                length="8",
                is_unique=True,
            ),
        ],
    )
    output = render_mermaid(Diagram(entities={"e1": entity}))
    assert "        id INT PK FK\n" in output
    assert "        item_code CHAR(8) UK\n" in output
    assert "AUTO" not in output
    assert "DEFAULT" not in output


def test_relations_sorted():
    """By source, then target, then relation name, all case-insensitive."""
    diagram = Diagram(
        entities={
            "a": _entity("a", "alpha"),
            "b": _entity("b", "Beta"),
            "c": _entity("c", "gamma"),
        },
        relations=[
            _relation("r1", "b", "a", "back"),
            _relation("r2", "a", "c", "to_gamma", Cardinality.ONE_TO_ONE),
            _relation("r3", "a", "b", "Zed", Cardinality.MANY_TO_MANY),
            _relation("r4", "a", "b", "amber"),
        ],
    )
    output = render_mermaid(diagram)
    relation_lines = [line.strip() for line in output.splitlines() if ":" in line]
    assert relation_lines == [
        "alpha ||--o{ Beta : amber",
        "alpha }o--o{ Beta : Zed",
        "alpha ||--|| gamma : to_gamma",
        "Beta ||--o{ alpha : back",
    ]


def test_dangling_relations_dropped(sample_diagram):
    """Relations to unknown entities never appear."""
    sample_diagram.relations.append(_relation("r9", "nowhere", "e2", "lost"))
    output = render_mermaid(sample_diagram)
    assert "haunts" not in output
    assert "lost" not in output
    assert output.count(" : ") == 1


def test_names_use_export_tokens():
    """Entity and relation names are tokenized; empty ones use the fallback."""
    diagram = Diagram(
        entities={
            "a": _entity("a", "고객 주문"),
            "b": Entity(id="b", logical_name="", physical_name="x"),
        },
        relations=[_relation("r1", "a", "b", "주문 has")],
    )
    output = render_mermaid(diagram)
    assert "    고객_주문 {\n" in output
    assert "    entity {\n" in output
    assert "    고객_주문 ||--o{ entity : 주문_has\n" in output


def test_render_mermaid_does_not_mutate(sample_diagram):
    """Sorting works on copies."""
    before = sample_diagram.model_dump()
    render_mermaid(sample_diagram)
    assert sample_diagram.model_dump() == before
