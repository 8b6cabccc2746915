"""Tests for the Markdown exporter."""

from erdkit.export.markdown import render_markdown
from erdkit.ir.schema import Diagram

HEADER = (
    "| Attribute | Logical Name | Physical Name | Type | Default | Constraints |\n"
    "|-----------|--------------|---------------|------|---------|-------------|\n"
)


def test_render_markdown(sample_diagram):
    """Full document for a small diagram."""
    expected = (
        "# ERD Diagram\n\n"
        "## Entities\n\n"
        "### Customer (customers)\n"
        "**Logical Name**: Customer | **Physical Name**: customers\n\n"
        + HEADER
        + "| Name | Name | name | VARCHAR(100) | 'anon' | UNIQUE |\n"
        "\n"
        "### Order (orders)\n"
        "**Logical Name**: Order | **Physical Name**: orders\n\n"
        + HEADER
        + "| Order ID | Order ID | order_id | INT | - | PK, AUTO_INCREMENT, NOT NULL |\n"
        "| Customer | Customer | customer_id | INT | - | FK |\n"
        "\n"
        "## Relations\n\n"
        "- Customer (1:N) → Order (places)\n"
    )
    assert render_markdown(sample_diagram) == expected


def test_render_markdown_empty():
    """An empty diagram is just the title."""
    assert render_markdown(Diagram()) == "# ERD Diagram\n\n"


def test_render_markdown_skips_dangling(sample_diagram):
    """Relations with a missing endpoint are not listed."""
    output = render_markdown(sample_diagram)
    assert "haunts" not in output
    assert "ghost" not in output


def test_render_markdown_entity_without_attributes(sample_diagram):
    """No table is emitted for an entity without attributes."""
    sample_diagram.entities["e1"].attributes = []
    output = render_markdown(sample_diagram)
    section = output.split("### Customer (customers)\n")[1].split("### Order")[0]
    assert "|" not in section.replace("**Logical Name**: Customer | ", "")


def test_render_markdown_sorted_by_id(sample_diagram):
    """Entity sections follow entity ids, not dict order."""
    reordered = Diagram(
        entities=dict(reversed(list(sample_diagram.entities.items()))),
        relations=sample_diagram.relations,
    )
    assert render_markdown(reordered) == render_markdown(sample_diagram)


def test_render_markdown_does_not_mutate(sample_diagram):
    """Rendering leaves the diagram untouched."""
    before = sample_diagram.model_dump()
    render_markdown(sample_diagram)
    assert sample_diagram.model_dump() == before
