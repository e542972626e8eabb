"""Named, per-element property arrays and a container that keeps them in sync."""

from __future__ import annotations

import copy
from typing import Any

from meshcore.exceptions import InvalidInputException


class PropertyArray:
    """A named array of values, one per element, with a default fill value."""

    def __init__(self, name: str, default: Any = None) -> None:
        self.name = name
        self.default = default
        self._data: list[Any] = []

    def _fresh(self) -> Any:
        return copy.deepcopy(self.default)

    def resize(self, n: int) -> None:
        """Resize to ``n`` elements, filling new slots with the default."""
        if n < 0:
            raise InvalidInputException(f"Cannot resize property to {n} elements.")
        current = len(self._data)
        if n < current:
            del self._data[n:]
        else:
            self._data.extend(self._fresh() for _ in range(n - current))

    def push_back(self) -> None:
        """Append one element holding the default value."""
        self._data.append(self._fresh())

    def swap(self, i0: int, i1: int) -> None:
        """Exchange the values stored at ``i0`` and ``i1``."""
        self._data[i0], self._data[i1] = self._data[i1], self._data[i0]

    def clone(self) -> PropertyArray:
        """Return a deep copy of this array."""
        other = PropertyArray(self.name, copy.deepcopy(self.default))
        other._data = copy.deepcopy(self._data)
        return other

    def __getitem__(self, idx: int) -> Any:
        return self._data[idx]

    def __setitem__(self, idx: int, value: Any) -> None:
        self._data[idx] = value

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"PropertyArray({self.name!r}, size={len(self._data)})"


class Property:
    """A handle to a property array; falsy when it refers to nothing."""

    def __init__(self, array: PropertyArray | None = None) -> None:
        self._array = array

    def reset(self) -> None:
        """Detach the handle from its array."""
        self._array = None

    def __bool__(self) -> bool:
        return self._array is not None

    def _require(self) -> PropertyArray:
        if self._array is None:
            raise InvalidInputException("Access through an invalid property handle.")
        return self._array

    def __getitem__(self, idx: int) -> Any:
        return self._require()[idx]

    def __setitem__(self, idx: int, value: Any) -> None:
        self._require()[idx] = value

    def vector(self) -> list[Any]:
        """Return the underlying list of values (shared, not copied)."""
        return self._require()._data

    def __repr__(self) -> str:
        name = self._array.name if self._array is not None else None
        return f"Property({name!r})"


class PropertyContainer:
    """A set of uniquely named property arrays that always share one size."""

    def __init__(self) -> None:
        self._arrays: list[PropertyArray] = []
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def n_properties(self) -> int:
        """Number of property arrays held."""
        return len(self._arrays)

    def properties(self) -> list[str]:
        """Names of all properties, in the order they were added."""
        return [array.name for array in self._arrays]

    def _find(self, name: str) -> PropertyArray | None:
        return next((a for a in self._arrays if a.name == name), None)

    def add(self, name: str, default: Any = None) -> Property:
        """Add a property named ``name``; raise if the name is taken."""
        if self._find(name) is not None:
            raise InvalidInputException(
                f'[PropertyContainer] A property with name "{name}" already exists.\n'
            )
        array = PropertyArray(name, default)
        array.resize(self._size)
        self._arrays.append(array)
        return Property(array)

    def exists(self, name: str) -> bool:
        """Whether a property with this name exists."""
        return self._find(name) is not None

    def get(self, name: str) -> Property:
        """Return the named property, or an invalid handle if it is missing."""
        return Property(self._find(name))

    def get_or_add(self, name: str, default: Any = None) -> Property:
        """Return the named property, creating it first if necessary."""
        prop = self.get(name)
        if not prop:
            prop = self.add(name, default)
        return prop

    def remove(self, prop: Property) -> None:
        """Delete the array the handle refers to and invalidate the handle."""
        for i, array in enumerate(self._arrays):
            if array is prop._array:
                del self._arrays[i]
                prop.reset()
                break

    def clear(self) -> None:
        """Delete all properties and reset the size to zero."""
        self._arrays.clear()
        self._size = 0

    def resize(self, n: int) -> None:
        """Resize every array to ``n`` elements."""
        for array in self._arrays:
            array.resize(n)
        self._size = n

    def push_back(self) -> None:
        """Add one default element to every array."""
        for array in self._arrays:
            array.push_back()
        self._size += 1

    def swap(self, i0: int, i1: int) -> None:
        """Swap elements ``i0`` and ``i1`` in every array."""
        for array in self._arrays:
            array.swap(i0, i1)

    def copy(self) -> PropertyContainer:
        """Return a deep copy of the container and all its arrays."""
        other = PropertyContainer()
        other._arrays = [array.clone() for array in self._arrays]
        other._size = self._size
        return other