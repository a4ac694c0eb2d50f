"""
Protobuf wire codec for Matrix.

Every element type shares one wire format, a message with the matrix
dimensions and its values as doubles in row-major order:

    syntax = "proto3";
    package pymatrix;

    message Matrix {
      int32 height = 1;
      int32 width = 2;
      repeated double data = 3;
    }

The message class is built at import time from a descriptor, so no
generated ``_pb2`` module is needed.

Encoding widens every element to float64. Decoding casts back to the
requested element type (integers truncate toward zero), which is exact
for floats and for integers within +/- 2**53. Integer matrices holding
larger values are still written, with a UserWarning.
"""

from __future__ import annotations

import os
import warnings
from typing import Any

import numpy as np
from numpy.typing import DTypeLike
from google.protobuf import descriptor_pb2, descriptor_pool, message_factory
from google.protobuf.message import Message

from pymatrix.core.dtypes import (
    DEFAULT_DTYPE,
    EXACT_INTEGER_LIMIT,
    is_integer_dtype,
    resolve_dtype,
)
from pymatrix.core.exceptions import DimensionError
from pymatrix.matrix.dense import Matrix

PROTO_PACKAGE = 'pymatrix'
PROTO_MESSAGE = 'Matrix'


def _build_message_class() -> type[Message]:
    F = descriptor_pb2.FieldDescriptorProto

    file_proto = descriptor_pb2.FileDescriptorProto()
    file_proto.name = 'pymatrix/matrix.proto'
    file_proto.package = PROTO_PACKAGE
    file_proto.syntax = 'proto3'

    message = file_proto.message_type.add()
    message.name = PROTO_MESSAGE
    for number, name, field_type, label in (
        (1, 'height', F.TYPE_INT32, F.LABEL_OPTIONAL),
        (2, 'width', F.TYPE_INT32, F.LABEL_OPTIONAL),
        (3, 'data', F.TYPE_DOUBLE, F.LABEL_REPEATED),
    ):
        field = message.field.add()
        field.name = name
        field.number = number
        field.type = field_type
        field.label = label

    pool = descriptor_pool.DescriptorPool()
    pool.AddSerializedFile(file_proto.SerializeToString())
    descriptor = pool.FindMessageTypeByName(f'{PROTO_PACKAGE}.{PROTO_MESSAGE}')
    return message_factory.GetMessageClass(descriptor)


MatrixProto = _build_message_class()


def to_proto(matrix: Matrix) -> Any:
    """
    Fill a MatrixProto message from ``matrix``.

    Warns:
        UserWarning: If an integer matrix holds values a double cannot
            represent exactly
    """
    values = matrix.to_array()
    if is_integer_dtype(values.dtype):
        if np.any((values > EXACT_INTEGER_LIMIT) | (values < -EXACT_INTEGER_LIMIT)):
            warnings.warn(
                f"Integer values beyond +/-2**53 lose precision when serialized "
                f"as doubles (matrix of shape {matrix.shape})",
                stacklevel=2,
            )

    message = MatrixProto()
    message.height = matrix.height
    message.width = matrix.width
    message.data.extend(values.astype(np.float64).ravel().tolist())
    return message


def from_proto(message: Any, dtype: DTypeLike = DEFAULT_DTYPE) -> Matrix:
    """
    Rebuild a Matrix from a MatrixProto message.

    Raises:
        DimensionError: If the data length is not height * width
    """
    resolved = resolve_dtype(dtype)
    height, width = message.height, message.width
    if height < 0 or width < 0 or len(message.data) != height * width:
        raise DimensionError(
            f"data: {len(message.data)} values do not fill a {height} x {width} matrix",
            expected=height * width,
            actual=len(message.data),
        )

    values = np.array(message.data, dtype=np.float64).reshape(height, width)
    return Matrix.from_array(values.astype(resolved), copy=False)


def encode(matrix: Matrix) -> bytes:
    """Serialize ``matrix`` to protobuf bytes."""
    return to_proto(matrix).SerializeToString()


def decode(payload: bytes, dtype: DTypeLike = DEFAULT_DTYPE) -> Matrix:
    """
    Parse protobuf bytes into a Matrix of ``dtype``.

    Raises:
        google.protobuf.message.DecodeError: If the payload is malformed
    """
    message = MatrixProto()
    message.ParseFromString(payload)
    return from_proto(message, dtype)


def dump_to_proto(matrix: Matrix, path: str | os.PathLike) -> None:
    """Write ``matrix`` to ``path``, overwriting any existing content."""
    payload = encode(matrix)
    with open(path, 'wb') as f:
        f.write(payload)


def load_from_proto(path: str | os.PathLike, dtype: DTypeLike = DEFAULT_DTYPE) -> Matrix:
    """
    Read a matrix written by dump_to_proto.

    Raises:
        FileNotFoundError: If path does not exist
        google.protobuf.message.DecodeError: If the file is not a valid message
    """
    with open(path, 'rb') as f:
        payload = f.read()
    return decode(payload, dtype)
