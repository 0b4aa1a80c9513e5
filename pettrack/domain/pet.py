"""Pet entity."""

from pettrack.domain.errors import DomainError
from pettrack.domain.ids import new_id

NAME_MAX_LENGTH = 255


def _validate(name: str) -> None:
    if not name or not name.strip():
        raise DomainError("Pet name is required")
    if len(name) > NAME_MAX_LENGTH:
        raise DomainError(f"Pet name cannot exceed {NAME_MAX_LENGTH} characters")


class Pet:
    """A pet whose name is checked on construction and on every rename.

    The name is stored exactly as given; surrounding whitespace only matters
    for the emptiness check. A rejected rename leaves the pet unchanged.
    """

    __slots__ = ("_id", "_name")

    def __init__(self, id: str, name: str) -> None:
        _validate(name)
        self._id = id
        self._name = name

    @classmethod
    def create(cls, name: str) -> "Pet":
        """Build a new pet with a freshly generated id."""
        return cls(new_id(), name)

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        _validate(value)
        self._name = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pet):
            return NotImplemented
        return self._id == other._id and self._name == other._name

    def __repr__(self) -> str:
        return f"Pet(id={self._id!r}, name={self._name!r})"
