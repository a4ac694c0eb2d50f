"""
Serialization for pymatrix.

A matrix is stored as a protobuf message holding its height, width and
row-major values as doubles, one format for every element type.

Public API:
    dump_to_proto(matrix, path)   - Write to a file
    load_from_proto(path, dtype)  - Read from a file
    encode(matrix) / decode(payload, dtype)
    to_proto(matrix) / from_proto(message, dtype)
"""

from pymatrix.io.proto import (
    MatrixProto,
    to_proto,
    from_proto,
    encode,
    decode,
    dump_to_proto,
    load_from_proto,
)

__all__ = [
    "MatrixProto",
    "to_proto",
    "from_proto",
    "encode",
    "decode",
    "dump_to_proto",
    "load_from_proto",
]
