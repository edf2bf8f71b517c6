from typing import Annotated, Optional
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

# YAML leaves "prefix:" and "package_name:" as None when they have no value
EmptyIfNone = Annotated[str, BeforeValidator(lambda value: "" if value is None else value)]


class ProductConfig(BaseModel):
    """Product-level settings the generator hands to a path mapper."""
    model_config = ConfigDict(frozen=True)

    package_name: EmptyIfNone = Field(default="", description="Dotted, colon or backslash delimited package namespace")


class PathMapperConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    prefix: EmptyIfNone = Field(default="", description="Static first path segment, skipped when empty")
    append_package: bool = Field(default=False, description="Append one segment per package name piece")
    formatter: Optional[str] = Field(default=None, description="Language key of the package path formatter; lowercase segments when unset")
