"""graphql-mocks exceptions."""

from __future__ import annotations


class MockError(Exception):
    """Base exception for all mocking errors."""


class MockConfigurationError(MockError):
    """Invalid arguments passed while setting up mocks."""


class NoMockDefinedError(MockError):
    """A leaf type has neither a registered nor a default mock."""

    def __init__(self, type_name: str):
        super().__init__(f'No mock defined for type "{type_name}"')
        self.type_name = type_name


class SchemaError(MockError):
    """Schema construction or resolver attachment failed."""
