from collections.abc import ItemsView, Iterator
from typing import Any, Self, TypeVar

import attrs
import cattrs

from ._conv import converter
from .exceptions import IniError

DEFAULT_SECTION = ""

# Field types that fit in a single value.
SCALARS = (str, int, float)

T = TypeVar("T")


@attrs.define
class Section:
    """Keys mapped to their values.

    Indexing a missing key raises KeyError; use get() to check for it instead.

    Attributes:
        keys: The key-value pairs.
    """

    keys: dict[str, str] = attrs.field(factory=dict)

    def insert(self, name: str, value: str):
        """Set a key, overwriting any previous value.

        Args:
            name: The key name.
            value: The value.
        """

        self.keys[name] = value

    def get(self, name: str, default: str | None = None) -> str | None:
        """Get the value of a key, or default if it does not exist."""

        return self.keys.get(name, default)

    def __getitem__(self, name: str) -> str:
        return self.keys[name]

    def __contains__(self, name: object) -> bool:
        return name in self.keys

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys)

    def __len__(self) -> int:
        return len(self.keys)

    def items(self) -> ItemsView[str, str]:
        return self.keys.items()

    def to_dict(self) -> dict[str, str]:
        return dict(self.keys)

    def structure(self, cls: type[T]) -> T:
        """Convert the section into an attrs class.

        Booleans may be written as true/false, yes/no, on/off or 1/0.

        Args:
            cls: The attrs class to convert to.

        Returns:
            An instance of cls.

        Raises:
            IniError: A key is missing or could not be converted.
        """

        try:
            return converter.structure(self.keys, cls)
        except (cattrs.BaseValidationError, ValueError, KeyError) as e:
            raise IniError(f"section does not fit {cls.__name__}: {e}") from e

    @classmethod
    def unstructure(cls, obj: Any) -> Self:
        """Create a section from an attrs instance.

        Args:
            obj: The instance. Fields set to their defaults or None are left out.

        Returns:
            The section.

        Raises:
            IniError: A field is not a string, number or boolean.
        """

        keys = {}

        for k, v in converter.unstructure(obj).items():
            if v is None:
                continue
            elif not isinstance(v, SCALARS):
                raise IniError(f"field {k!r} is not a scalar: {v!r}")

            keys[k] = str(v)

        return cls(keys)


@attrs.define
class Ini:
    """An INI document, a mapping of section names to sections.

    The default section (named "") always exists and holds the keys declared before any section header.

    Attributes:
        sections: The sections, by name.
    """

    sections: dict[str, Section] = attrs.field(factory=dict, converter=dict)

    def __attrs_post_init__(self):
        self.sections.setdefault(DEFAULT_SECTION, Section())

    def add_section(self, name: str) -> Section:
        """Create an empty section, replacing any previous section with the same name.

        Args:
            name: The section name.

        Returns:
            The new section.
        """

        section = self.sections[name] = Section()
        return section

    def section(self, name: str) -> Section:
        """Get a section for modification.

        Raises:
            KeyError: The section does not exist.
        """

        return self.sections[name]

    def get(self, name: str, default: Section | None = None) -> Section | None:
        return self.sections.get(name, default)

    def __getitem__(self, name: str) -> Section:
        return self.sections[name]

    def __contains__(self, name: object) -> bool:
        return name in self.sections

    def __iter__(self) -> Iterator[str]:
        return iter(self.sections)

    def __len__(self) -> int:
        return len(self.sections)

    def items(self) -> ItemsView[str, Section]:
        return self.sections.items()

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Copy the document into plain dicts of sections mapped to their keys."""

        return {name: section.to_dict() for name, section in self.sections.items()}

    @classmethod
    def from_str(cls, text: str) -> Self:
        """Parse INI text. See lexini.parse()."""

        from .parser import parse

        return parse(text)
