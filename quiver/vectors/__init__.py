# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

from quiver.vectors.arrow_vector import ArrowVector
from quiver.vectors.chunk_resolver import ChunkResolver

__all__ = ("ArrowVector", "ChunkResolver")
