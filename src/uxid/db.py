"""SQLAlchemy column type for UXIDs.

UXIDs are stored as plain strings, so loading and dumping are identity
operations. The type carries generation options (prefix, size, rand_size)
so a column can produce its own default values:

    class User(SQLModel, table=True):
        id: str = Field(sa_column=uxid_column(prefix="usr", primary_key=True))
"""

from typing import Any

from sqlalchemy import Column, String
from sqlalchemy.types import TypeDecorator

from uxid.enums import Size
from uxid.exceptions import CastError
from uxid.service import get_uxid_service


class UXIDType(TypeDecorator):
    """String-backed column type that generates and validates UXIDs."""

    impl = String
    cache_ok = True

    def __init__(
        self,
        prefix: str | None = None,
        size: Size | str | None = None,
        rand_size: int | None = None,
        length: int | None = None,
    ):
        super().__init__(length=length)
        self.prefix = prefix
        self.size = size
        self.rand_size = rand_size

    @property
    def options(self) -> dict[str, Any]:
        """Generation options configured for this column."""
        return {"prefix": self.prefix, "size": self.size, "rand_size": self.rand_size}

    def autogenerate(self) -> str:
        """Generate a new UXID using the column options."""
        return get_uxid_service().generate_unchecked(**self.options)

    def default_factory(self) -> str:
        """Column default callable; same as ``autogenerate``."""
        return self.autogenerate()

    @staticmethod
    def cast(value: Any) -> str | None:
        """Cast input to a storable UXID string.

        Raises:
            CastError: If the value is not a str, bytes or None
        """
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, bytes | bytearray):
            try:
                return bytes(value).decode("utf-8")
            except UnicodeDecodeError as e:
                raise CastError(value) from e
        raise CastError(value)

    @staticmethod
    def load(value: Any) -> Any:
        """Database value to Python value; stored and wire formats are equal."""
        return value

    @staticmethod
    def dump(value: Any) -> Any:
        """Python value to database value; stored and wire formats are equal."""
        return value

    def process_bind_param(self, value, dialect):
        return self.dump(self.cast(value))

    def process_result_value(self, value, dialect):
        return self.load(value)

    @property
    def python_type(self) -> type:
        return str


def uxid_column(
    *args: Any,
    prefix: str | None = None,
    size: Size | str | None = None,
    rand_size: int | None = None,
    **kwargs: Any,
) -> Column:
    """Build a ``Column`` of ``UXIDType`` that generates its own default.

    Extra positional and keyword arguments are passed to ``Column``
    (e.g. ``primary_key=True``).
    """
    column_type = UXIDType(prefix=prefix, size=size, rand_size=rand_size)
    kwargs.setdefault("default", column_type.default_factory)
    return Column(*args, column_type, **kwargs)
