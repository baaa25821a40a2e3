"""Mocking settings via Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class MockSettings(BaseSettings):
    """Defaults applied when callers leave mocking options unset."""

    model_config = SettingsConfigDict(env_prefix="GRAPHQL_MOCKS_")

    seed: int | None = None
    preserve_resolvers: bool = False
    tracing_enabled: bool = False
