"""
Binary serialization of region quadtrees.

Layout (all integers little-endian):

    width   uint32
    height  uint32
    node    pre-order stream, one of
              0x00 r g b a          leaf
              0x01 node node node node   interior, children in canonical order

The shape is self-describing from the tags, so no length fields are
stored. Bounding boxes are not stored either: the decoder rebuilds them
from width/height with the same quadrant rule used by the builder.
"""

from __future__ import annotations

import logging
import struct

from regionqt.core.data_types import Rgba
from regionqt.core.errors import CorruptDataError
from regionqt.core.geometry import BoundingBox
from regionqt.quadtree.node import Interior, Leaf, RegionNode, iter_nodes

logger = logging.getLogger(__name__)

HEADER = struct.Struct("<II")

TAG_LEAF = 0
TAG_INTERIOR = 1

LEAF_SIZE = 5  # tag + 4 channels
INTERIOR_SIZE = 1


def encode(root: RegionNode, width: int, height: int) -> bytes:
    """
    Serialize a tree.

    Args:
        root: Root node
        width: Image width recorded in the header
        height: Image height recorded in the header

    Returns:
        Encoded bytes
    """
    out = bytearray(HEADER.pack(width, height))

    for node in iter_nodes(root):
        if node.is_leaf:
            out.append(TAG_LEAF)
            out.extend(node.color)
        else:
            out.append(TAG_INTERIOR)

    logger.debug("Encoded %dx%d tree into %d bytes", width, height, len(out))
    return bytes(out)


def encoded_size(root: RegionNode) -> int:
    """Byte size encode() would produce for this tree."""
    return HEADER.size + sum(
        LEAF_SIZE if node.is_leaf else INTERIOR_SIZE for node in iter_nodes(root)
    )


class _Reader:
    """Cursor over the node stream."""

    def __init__(self, data: bytes, offset: int) -> None:
        self.data = data
        self.offset = offset

    def take(self, count: int) -> bytes:
        end = self.offset + count
        if end > len(self.data):
            raise CorruptDataError("Truncated node stream", offset=self.offset)
        chunk = self.data[self.offset : end]
        self.offset = end
        return chunk

    def read_node(self, bounding: BoundingBox) -> RegionNode:
        tag_offset = self.offset
        tag = self.take(1)[0]

        if tag == TAG_LEAF:
            return Leaf(bounding, Rgba(*self.take(4)))

        if tag == TAG_INTERIOR:
            if bounding.is_empty or not bounding.is_divisible:
                raise CorruptDataError(
                    f"Interior node on indivisible region {bounding!r}", offset=tag_offset
                )
            children = tuple(self.read_node(quadrant) for quadrant in bounding.quadrants())
            return Interior(bounding, children)

        raise CorruptDataError(f"Invalid node tag 0x{tag:02x}", offset=tag_offset)


def decode(data: bytes) -> tuple[RegionNode, int, int]:
    """
    Deserialize a tree produced by encode().

    Args:
        data: Encoded bytes

    Returns:
        Tuple of (root, width, height)

    Raises:
        CorruptDataError: On a short header, zero dimensions, truncated
            stream, unknown tag, or trailing bytes
    """
    data = bytes(data)

    if len(data) < HEADER.size:
        raise CorruptDataError(f"Header needs {HEADER.size} bytes, got {len(data)}")

    width, height = HEADER.unpack_from(data)
    if width == 0 or height == 0:
        raise CorruptDataError(f"Invalid tree dimensions {width}x{height}")

    reader = _Reader(data, HEADER.size)
    root = reader.read_node(BoundingBox.from_size(width, height))

    if reader.offset != len(data):
        raise CorruptDataError(
            f"{len(data) - reader.offset} trailing bytes after tree", offset=reader.offset
        )

    logger.debug("Decoded %dx%d tree from %d bytes", width, height, len(data))
    return root, width, height
