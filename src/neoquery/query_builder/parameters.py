"""Parameter allocation shared by the Cypher and Gremlin builders.

Names are ``p0, p1, ...`` in bind order. A binder belongs to one query build
and must not be shared between threads.
"""

from collections.abc import Iterator, Mapping
from typing import Any

from neoquery.core.config import PlaceholderStyle

PARAMETER_PREFIX = "p"

CYPHER_PLACEHOLDERS: dict[PlaceholderStyle, str] = {
    "braces": "{{{name}}}",
    "dollar": "${name}",
}
GREMLIN_PLACEHOLDER = "{name}"


class ParameterBag(Mapping[str, Any]):
    """Ordered, append-only mapping of generated names to values."""

    def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(initial or {})

    def add(self, value: Any) -> str:
        """Append a value under the next free name and return that name."""
        index = len(self._values)
        name = f"{PARAMETER_PREFIX}{index}"
        # Seeded bags may hold names out of sequence
        while name in self._values:
            index += 1
            name = f"{PARAMETER_PREFIX}{index}"
        self._values[name] = value
        return name

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ParameterBag({self._values!r})"


class ParameterBinder:
    """Externalizes literal values into a :class:`ParameterBag`."""

    def __init__(self, bag: ParameterBag | None = None, placeholder: str = CYPHER_PLACEHOLDERS["braces"]) -> None:
        """Initialize the binder.

        Args:
            bag: Bag to append to; numbering continues from its length, skipping taken names
            placeholder: Format string with a ``{name}`` field for the token
        """
        self._bag = bag if bag is not None else ParameterBag()
        self._placeholder = placeholder

    @property
    def bag(self) -> ParameterBag:
        return self._bag

    def bind(self, value: Any) -> str:
        """Add a parameter and return its generated name."""
        return self._bag.add(value)

    def placeholder(self, value: Any) -> str:
        """Add a parameter and return the token that refers to it in query text."""
        return self._placeholder.format(name=self.bind(value))
