"""
Pydantic schemas describing user setting definitions to seed.

Resolution of optional fields:

=================  ========  ===========================
field              required  when absent
=================  ========  ===========================
default_value      yes       SettingValidationError
value_type         yes       SettingValidationError
user_value         no        stored as NULL
linux_default      no        ""
mac_default        no        ""
windows_default    no        ""
insert_or_ignore   no        False (strict insert)
=================  ========  ===========================

Every field also accepts its camelCase alias (``defaultValue``,
``valueType``...) so definitions can be copied from client code unchanged.
"""

from enum import Enum, IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class UserSettingValueType(IntEnum):
    """How a consumer should interpret the stored string. Tags are persisted; never renumber."""

    STRING = 0
    INT = 1
    FLOAT = 2
    OBJECT = 3
    ARRAY = 4
    BOOLEAN = 5


class RowShape(str, Enum):
    """Column subset written for one insertion."""

    SIMPLE = "simple"
    FULL = "full"


class ConflictPolicy(str, Enum):
    """What happens when the key already exists."""

    STRICT = "strict"
    IGNORE = "ignore"


class UserSettingOptions(BaseModel):
    """Options for seeding a single user setting."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    # Required, but modelled as optional so absence is reported by the seeder
    # as a SettingValidationError rather than a pydantic error
    default_value: str | None = Field(None, description="Default value for all platforms")
    value_type: UserSettingValueType | None = Field(None, description="Value type tag")

    user_value: str | None = Field(None, description="Initial user value, stored as NULL when absent")
    linux_default: str = Field("", description="Linux-specific default")
    mac_default: str = Field("", description="macOS-specific default")
    windows_default: str = Field("", description="Windows-specific default")
    insert_or_ignore: bool = Field(False, description="Leave an existing row untouched instead of failing")

    @field_validator("value_type", mode="before")
    @classmethod
    def _parse_value_type(cls, v: Any) -> Any:
        """Accept value type names ("string", "boolean") as well as tags."""
        if isinstance(v, str):
            if v.isdigit():
                return int(v)
            try:
                return UserSettingValueType[v.upper()]
            except KeyError:
                valid = [t.name.lower() for t in UserSettingValueType]
                raise ValueError(f"Value type must be one of: {valid}")
        return v

    @field_validator("linux_default", "mac_default", "windows_default", mode="before")
    @classmethod
    def _none_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @property
    def has_user_value(self) -> bool:
        return self.user_value is not None

    @property
    def has_platform_defaults(self) -> bool:
        return bool(self.linux_default or self.mac_default or self.windows_default)

    @property
    def row_shape(self) -> RowShape:
        if self.has_user_value or self.has_platform_defaults:
            return RowShape.FULL
        return RowShape.SIMPLE

    @property
    def conflict_policy(self) -> ConflictPolicy:
        return ConflictPolicy.IGNORE if self.insert_or_ignore else ConflictPolicy.STRICT


class UserSettingConfig(BaseModel):
    """A key paired with its options, as consumed by batch seeding."""

    model_config = ConfigDict(frozen=True)

    key: str | None
    options: UserSettingOptions
