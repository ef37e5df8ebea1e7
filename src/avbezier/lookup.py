"""Lookup table of (input, output) samples of a curve."""

from __future__ import annotations

from typing import Any, Callable, Dict, Generic, Iterable, Iterator, List, NamedTuple, Optional, Tuple, TypeVar

import numpy as np
from numpy.typing import NDArray

from avbezier.common import check_index

OutputT = TypeVar("OutputT")


class LookUpEntry(NamedTuple):
    """A single sample of a lookup table."""

    input: Any
    output: Any


###############################################################################
# AvLookUpTable
###############################################################################
class AvLookUpTable(Generic[OutputT]):
    """Immutable table of samples spaced along a number line, sorted ascending by input.

    Built once (usually by `BezierCurve.create_lookup_table`) and afterwards used
    for nearest-neighbour queries in input space and in output space, and to
    bracket local minima of functions evaluated over the outputs.
    """

    def __init__(self, entries: Iterable[Tuple[Any, OutputT]]):
        """Initialize the table, sorting the given (input, output) pairs by input.

        Args:
            entries: Iterable of (input, output) pairs in any order
        """
        self._entries: List[LookUpEntry] = [
            LookUpEntry(inp, out) for inp, out in sorted(entries, key=lambda entry: entry[0])
        ]
        self._inputs: NDArray[np.float64] = np.array([entry.input for entry in self._entries], dtype=np.float64)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> LookUpEntry:
        return self._entries[check_index(index, len(self._entries), type(self).__name__)]

    def __iter__(self) -> Iterator[LookUpEntry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(count={len(self._entries)})"

    @property
    def inputs(self) -> NDArray[np.float64]:
        """Read-only view on the sorted inputs of this table."""
        view = self._inputs.view()
        view.flags.writeable = False
        return view

    @property
    def outputs(self) -> List[OutputT]:
        """The outputs of this table, ordered by input."""
        return [entry.output for entry in self._entries]

    ###########################################################################
    # Lookups in input space
    ###########################################################################
    def closest_input_index(self, value: Any) -> Optional[int]:
        """
        Index of the entry whose input is closest to _value_.

        Inputs outside of the table range are clamped to the first or last entry.
        If _value_ lies exactly between two entries the later one is chosen.

        Returns:
            The index, or None if this table is empty.
        """
        count = len(self._entries)
        if count == 0:
            return None
        if count == 1:
            return 0
        if value <= self._entries[0].input:
            return 0
        if value >= self._entries[-1].input:
            return count - 1

        # last index with an input strictly smaller than value
        index = int(np.searchsorted(self._inputs, value, side="left")) - 1
        if index >= count - 1:
            return count - 1

        dist_index = abs(self._entries[index].input - value)
        dist_next = abs(self._entries[index + 1].input - value)
        if dist_index < dist_next:
            return index
        return index + 1

    def closest_entry(self, value: Any) -> Optional[LookUpEntry]:
        """Entry whose input is closest to _value_, or None if this table is empty."""
        index = self.closest_input_index(value)
        if index is None:
            return None
        return self._entries[index]

    def closest_output(self, value: Any) -> Optional[OutputT]:
        """Output of the entry whose input is closest to _value_, or None if this table is empty."""
        index = self.closest_input_index(value)
        if index is None:
            return None
        return self._entries[index].output

    ###########################################################################
    # Lookups in output space
    ###########################################################################
    def closest_entry_index_to_output(self, output: OutputT) -> Optional[int]:
        """
        Index of the entry whose output is closest to _output_ (squared euclidean distance).

        Scans all entries; on equal distances the first entry wins.

        Returns:
            The index, or None if this table is empty.
        """
        closest: Optional[Tuple[int, Any]] = None

        for index, entry in enumerate(self._entries):
            dist = output.distance_squared(entry.output)  # type: ignore[attr-defined]
            if closest is None or dist < closest[1]:
                closest = (index, dist)

        return closest[0] if closest is not None else None

    def closest_entry_to_output(self, output: OutputT) -> Optional[LookUpEntry]:
        """Entry whose output is closest to _output_, or None if this table is empty."""
        index = self.closest_entry_index_to_output(output)
        if index is None:
            return None
        return self._entries[index]

    def approximate_to_zero(self, producer: Callable[[OutputT], Any]) -> List[int]:
        """
        Indices of all local minima of _producer_ evaluated over the outputs of this table.

        The first index qualifies if its value is smaller than the next one, the
        last index if its value is smaller than the previous one, and an interior
        index if its value is less or equal to both neighbours. Equal values on
        flat stretches therefore produce adjacent candidates; the result is meant
        as a superset of brackets to be refined by a local search.

        Args:
            producer: Continuous function mapping an output to a scalar

        Returns:
            List of indices, empty if this table is empty.
        """
        cache: Dict[int, Any] = {}

        def value_at(index: int) -> Any:
            if index not in cache:
                cache[index] = producer(self._entries[index].output)
            return cache[index]

        count = len(self._entries)
        indices: List[int] = []

        for i in range(count):
            current = value_at(i)
            prev = value_at(i - 1) if i > 0 else current
            nxt = value_at(i + 1) if i < count - 1 else current

            if i == 0 and current < nxt:
                indices.append(i)
            elif i == count - 1 and current < prev:
                indices.append(i)
            elif current <= nxt and current <= prev:
                indices.append(i)

        return indices
