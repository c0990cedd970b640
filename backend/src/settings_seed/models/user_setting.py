"""UserSetting model: the per-user settings key/value table.

Values are stored as strings; ``valueType`` tells consumers how to read them.
Column names are camelCase because desktop clients read the table directly.
"""

from sqlalchemy import Column, DateTime, Integer, SmallInteger, String, Text, func

from ..core.database import Base


class UserSetting(Base):
    """One row per setting key.

    The platform default columns and ``valueType`` carry server defaults so an
    insert that only names ``key``, ``defaultValue`` and ``valueType`` still
    yields a complete row.
    """

    __tablename__ = "user_setting"

    id = Column(Integer, primary_key=True, autoincrement=True)
    key = Column(String(255), nullable=False, unique=True)
    user_value = Column("userValue", Text, nullable=True)
    default_value = Column("defaultValue", Text, nullable=False)
    linux_default = Column("linuxDefault", Text, nullable=False, server_default="")
    mac_default = Column("macDefault", Text, nullable=False, server_default="")
    windows_default = Column("windowsDefault", Text, nullable=False, server_default="")
    value_type = Column("valueType", SmallInteger, nullable=False, server_default="0")
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        "updatedAt", DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now()
    )

    def __repr__(self) -> str:
        return f"<UserSetting(key='{self.key}')>"
