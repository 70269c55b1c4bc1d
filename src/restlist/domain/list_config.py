"""Process-wide configuration for list route generation."""

from pydantic import BaseModel, ConfigDict, Field


class ListConfig(BaseModel):
    """Cross-cutting knobs read by every list route.

    Fields left out when the config is built stay ``None``; ``configure``
    replaces the whole object, so omitted knobs do not keep prior values.
    A ``None`` warning flag silences the missing-capability diagnostic and
    a ``None`` method name disables filtering lookups.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    warning: bool | None = Field(
        default=None,
        description="Log a warning when a model has no searchable capability",
    )
    method_name: str | None = Field(
        default=None,
        alias="methodName",
        description="Name of the model method returning searchable fields",
    )
