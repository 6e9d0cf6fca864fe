"""User roles."""

import enum


class Role(str, enum.Enum):
    """Roles a user can hold. Values match the names stored in the database."""

    ADMIN = "ADMIN"
    USER = "USER"
    SUPERADMIN = "SUPERADMIN"
