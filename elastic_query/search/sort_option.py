"""Sort options for search requests."""

from dataclasses import dataclass

from elastic_query.exception import InvalidArgumentError


@dataclass(frozen=True)
class SortOption:
    """
    Sort on a single field.

    Attributes:
        name: Field to sort on
        ascending: Sort direction
        ignore_unmapped: Tolerate the field being absent from the mapping
            instead of failing the sort
    """

    name: str
    ascending: bool = True
    ignore_unmapped: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidArgumentError("sort option requires a non-empty field name")

    @property
    def order(self) -> str:
        return "asc" if self.ascending else "desc"
