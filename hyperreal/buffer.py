"""Vertex attribute layouts and CPU-side vertex and index buffers."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import Iterable, Iterator, Union

import numpy as np


class ShaderDataType(IntEnum):
    NONE = 0
    FLOAT = 1
    FLOAT2 = 2
    FLOAT3 = 3
    FLOAT4 = 4
    MAT3 = 5
    MAT4 = 6
    INT = 7
    INT2 = 8
    INT3 = 9
    INT4 = 10
    BOOL = 11


_SIZES = {
    ShaderDataType.FLOAT: 4,
    ShaderDataType.FLOAT2: 4 * 2,
    ShaderDataType.FLOAT3: 4 * 3,
    ShaderDataType.FLOAT4: 4 * 4,
    ShaderDataType.MAT3: 4 * 3 * 3,
    ShaderDataType.MAT4: 4 * 4 * 4,
    ShaderDataType.INT: 4,
    ShaderDataType.INT2: 4 * 2,
    ShaderDataType.INT3: 4 * 3,
    ShaderDataType.INT4: 4 * 4,
    ShaderDataType.BOOL: 1,
}

_COMPONENTS = {
    ShaderDataType.FLOAT: 1,
    ShaderDataType.FLOAT2: 2,
    ShaderDataType.FLOAT3: 3,
    ShaderDataType.FLOAT4: 4,
    ShaderDataType.MAT3: 3 * 3,
    ShaderDataType.MAT4: 4 * 4,
    ShaderDataType.INT: 1,
    ShaderDataType.INT2: 2,
    ShaderDataType.INT3: 3,
    ShaderDataType.INT4: 4,
    ShaderDataType.BOOL: 1,
}


def shader_data_type_size(data_type: ShaderDataType) -> int:
    """Size in bytes of one value of ``data_type``."""
    try:
        return _SIZES[ShaderDataType(data_type)]
    except KeyError:
        raise ValueError(f"Unknown ShaderDataType: {data_type!r}") from None


@dataclass
class BufferElement:
    """One vertex attribute: its type, name and byte offset in a vertex."""

    data_type: ShaderDataType
    name: str
    normalized: bool = False
    offset: int = 0
    size: int = field(init=False)

    def __post_init__(self) -> None:
        self.data_type = ShaderDataType(self.data_type)
        self.size = shader_data_type_size(self.data_type)

    def component_count(self) -> int:
        try:
            return _COMPONENTS[self.data_type]
        except KeyError:
            raise ValueError(f"Unknown ShaderDataType: {self.data_type!r}") from None


ElementSpec = Union[BufferElement, tuple]


class BufferLayout:
    """Ordered vertex attributes with offsets and stride worked out."""

    def __init__(self, elements: Iterable[ElementSpec] = ()) -> None:
        self._elements: list[BufferElement] = []
        offset = 0
        for spec in elements:
            element = spec if isinstance(spec, BufferElement) else BufferElement(*spec)
            element = replace(element, offset=offset)
            offset += element.size
            self._elements.append(element)
        self._stride = offset

    @property
    def stride(self) -> int:
        return self._stride

    @property
    def elements(self) -> tuple[BufferElement, ...]:
        return tuple(self._elements)

    def __iter__(self) -> Iterator[BufferElement]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"BufferLayout({self._elements!r})"


class VertexBuffer:
    """Vertex data as 32-bit floats with the layout that describes it."""

    def __init__(self, vertices: Iterable[float], layout: BufferLayout | None = None) -> None:
        self.data = np.array(vertices, dtype=np.float32).ravel()
        self.layout = layout if layout is not None else BufferLayout()

    @property
    def size(self) -> int:
        """Size of the data in bytes."""
        return int(self.data.nbytes)

    @property
    def vertex_count(self) -> int:
        if self.layout.stride == 0:
            raise ValueError("Vertex buffer has no layout!")
        return self.size // self.layout.stride


class IndexBuffer:
    """Triangle indices as unsigned 32-bit integers."""

    def __init__(self, indices: Iterable[int]) -> None:
        values = np.array(list(indices), dtype=np.int64).ravel()
        if (values < 0).any() or (values > 0xFFFFFFFF).any():
            raise ValueError("Indices must fit in an unsigned 32-bit integer")
        self.indices = values.astype(np.uint32)

    @property
    def count(self) -> int:
        return int(self.indices.size)