"""
Shared test fixtures.
"""

import pytest

from schemagen.core.types import FieldDescriptor, FieldKind
from schemagen.store.memory import InMemoryModelLibrary


@pytest.fixture
def user_properties() -> list[FieldDescriptor]:
    """The email/age model used across generator tests."""
    return [
        FieldDescriptor(
            name="email",
            kind=FieldKind.STRING,
            required=True,
            unique=True,
            min=5,
            max=100,
        ),
        FieldDescriptor(
            name="age",
            kind=FieldKind.NUMBER,
            required=False,
        ),
    ]


@pytest.fixture
def every_kind() -> list[FieldDescriptor]:
    """One required property of each kind, in declaration order."""
    return [
        FieldDescriptor(name=kind.value.lower(), kind=kind, required=True)
        for kind in FieldKind
    ]


@pytest.fixture
def library() -> InMemoryModelLibrary:
    """Create an empty in-memory library."""
    return InMemoryModelLibrary()
