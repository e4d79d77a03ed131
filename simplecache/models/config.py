"""Cache configuration model."""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from simplecache import settings


class CacheConfig(BaseModel):
    """Options consumed by CacheRepository and HierarchicalCache."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    table: str = "cache"
    key_column: str = Field(default="key", alias="keyColumn")
    payload_column: str = Field(default="cache", alias="payloadColumn")
    default_lifetime_seconds: int = Field(default=3600, alias="defaultLifetimeSeconds")
    base: str | None = None
    delimiter: str = "/"
    placeholder: str = "_"

    @field_validator("default_lifetime_seconds")
    @classmethod
    def clamp_lifetime(cls, v: int) -> int:
        return max(0, v)

    @field_validator("table", "key_column", "payload_column", "delimiter", "placeholder")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("must not be empty")
        return v

    @model_validator(mode="after")
    def distinct_delimiter(self) -> "CacheConfig":
        if self.delimiter == self.placeholder:
            raise ValueError("delimiter and placeholder must differ")
        return self

    @classmethod
    def from_env(cls) -> "CacheConfig":
        """Build config from environment-backed settings."""
        return cls(
            table=settings.CACHE_TABLE,
            key_column=settings.CACHE_KEY_COLUMN,
            payload_column=settings.CACHE_PAYLOAD_COLUMN,
            default_lifetime_seconds=settings.CACHE_DEFAULT_LIFETIME,
            base=settings.HIERARCHY_BASE,
            delimiter=settings.HIERARCHY_DELIMITER,
            placeholder=settings.HIERARCHY_PLACEHOLDER,
        )
