# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
ChunkResolver: map a logical row number onto the chunk that holds it.

A chunked column is a sequence of chunks of varying (possibly zero) length.
The resolver keeps the running totals of the chunk lengths so a row number
can be turned into `(chunk_index, offset_in_chunk)` with a binary search.
The last chunk hit is remembered as scans tend to walk rows in order.
"""

from bisect import bisect_right
from typing import List
from typing import Tuple

import pyarrow


class ChunkResolver:
    __slots__ = ("offsets", "num_rows", "_last_chunk")

    def __init__(self, column: pyarrow.ChunkedArray):
        offsets: List[int] = [0]
        for chunk in column.iterchunks():
            offsets.append(offsets[-1] + len(chunk))
        # offsets[c] is the first row of chunk c, offsets[-1] the total row count
        self.offsets = offsets
        self.num_rows: int = offsets[-1]
        self._last_chunk: int = 0

    @property
    def num_chunks(self) -> int:
        return len(self.offsets) - 1

    def resolve(self, i: int) -> Tuple[int, int]:
        """
        Return the chunk index and the offset within that chunk of row `i`.

        `i` must be in `[0, num_rows)`, bounds are checked by the callers.
        """
        offsets = self.offsets
        if len(offsets) == 2:
            return 0, i

        chunk = self._last_chunk
        if offsets[chunk] <= i < offsets[chunk + 1]:
            return chunk, i - offsets[chunk]

        # bisect_right lands after any run of zero-length chunks sharing the
        # same start, so the chunk found always holds at least one row
        chunk = bisect_right(offsets, i) - 1
        self._last_chunk = chunk
        return chunk, i - offsets[chunk]
