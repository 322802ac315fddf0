"""Shared fixtures for dataknobs_fields tests."""

import pytest

from dataknobs_fields import FloatField, IntField, SchemaValidator, StringField


@pytest.fixture
def signup_schema():
    """A schema for a typical signup form."""
    schema = SchemaValidator("signup")
    schema.add_string_field(
        StringField("username").required().min_length(3).max_length(20).alphanumeric()
    )
    schema.add_string_field(StringField("email").required().email())
    schema.add_string_field(StringField("website").url())
    schema.add_int_field(IntField("age").gte(18).lte(120))
    schema.add_float_field(FloatField("score").gte(0.0).lte(100.0))
    return schema
