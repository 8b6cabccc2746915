"""Shared fixtures for erdkit tests."""

import pytest
from erdkit.ir.schema import Attribute, Cardinality, Diagram, Entity, Relation


@pytest.fixture
def sample_diagram() -> Diagram:
    """Two entities, one live relation and one dangling relation."""
    customer = Entity(
        id="e1",
        logical_name="Customer",
        physical_name="customers",
        attributes=[
            Attribute(
                logical_name="Name",
                physical_name="name",
                data_type="VARCHAR",
                length="100",
                default_value="'anon'",
                is_unique=True,
            ),
        ],
    )
    order = Entity(
        id="e2",
        logical_name="Order",
        physical_name="orders",
        attributes=[
            Attribute(
                logical_name="Order ID",
                physical_name="order_id",
                data_type="INT",
                is_primary_key=True,
                is_nullable=False,
                is_auto_increment=True,
            ),
            Attribute(
                logical_name="Customer",
                physical_name="customer_id",
                data_type="INT",
                is_foreign_key=True,
                foreign_key_reference="customers.id",
            ),
        ],
    )
    return Diagram(
        # Deliberately not in id order
        entities={"e2": order, "e1": customer},
        relations=[
            Relation(
                id="r1",
                from_entity_id="e1",
                from_attribute="id",
                to_entity_id="e2",
                to_attribute="customer_id",
                cardinality=Cardinality.ONE_TO_MANY,
                name="places",
            ),
            Relation(
                id="r2",
                from_entity_id="e1",
                from_attribute="id",
                to_entity_id="ghost",
                cardinality=Cardinality.ONE_TO_ONE,
                name="haunts",
            ),
        ],
    )
