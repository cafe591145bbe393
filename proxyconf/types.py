from typing import Iterable, Sequence, Union

# TYPES
#: Byte input accepted by the parsers, allowed types
ByteInputType = Union[
    bytes,
    bytearray,
    memoryview,
    Sequence[int],
    Iterable[int],
]
