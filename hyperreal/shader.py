"""Shader sources, the '#type' file format and a named shader library."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

_TYPE_TOKEN = "#type"
_LINE_END = re.compile(r"[\r\n]")
_LINE_ENDS = re.compile(r"[\r\n]*")


class ShaderType(Enum):
    VERTEX = "vertex"
    FRAGMENT = "fragment"


def shader_type_from_string(type_name: str) -> ShaderType:
    """Map a '#type' name to its stage; 'pixel' means fragment."""
    if type_name == "vertex":
        return ShaderType.VERTEX
    if type_name in ("fragment", "pixel"):
        return ShaderType.FRAGMENT
    raise ValueError(f"Unknown shader type: {type_name!r}")


def read_file(filepath: PathLike) -> str:
    """Read a shader file as text, keeping its line endings."""
    return Path(filepath).read_bytes().decode("utf-8")


def preprocess(source: str) -> dict[ShaderType, str]:
    """Split a combined shader file into its stages at '#type' lines."""
    sections: dict[ShaderType, str] = {}
    pos = source.find(_TYPE_TOKEN)
    while pos != -1:
        eol = _LINE_END.search(source, pos)
        if eol is None:
            raise ValueError("Syntax error: '#type' line has no line ending")
        begin = pos + len(_TYPE_TOKEN) + 1
        shader_type = shader_type_from_string(source[begin:eol.start()])
        next_line = _LINE_ENDS.match(source, eol.start()).end()
        pos = source.find(_TYPE_TOKEN, next_line)
        sections[shader_type] = source[next_line:] if pos == -1 else source[next_line:pos]
    return sections


@dataclass
class Shader:
    """A named shader program given by its stage sources."""

    name: str
    sources: dict[ShaderType, str] = field(default_factory=dict)

    @classmethod
    def from_file(cls, filepath: PathLike) -> Shader:
        """Load a combined shader file; the name is the file's stem."""
        return cls(Path(filepath).stem, preprocess(read_file(filepath)))


class ShaderLibrary:
    """Shaders kept by unique name."""

    def __init__(self) -> None:
        self._shaders: dict[str, Shader] = {}

    def add(self, shader: Shader, name: str | None = None) -> None:
        key = shader.name if name is None else name
        if self.exists(key):
            raise ValueError(f"Shader already exists: {key!r}")
        self._shaders[key] = shader

    def load(self, filepath: PathLike, name: str | None = None) -> Shader:
        shader = Shader.from_file(filepath)
        self.add(shader, name)
        return shader

    def get(self, name: str) -> Shader:
        try:
            return self._shaders[name]
        except KeyError:
            raise KeyError(f"Shader not found: {name!r}") from None

    def exists(self, name: str) -> bool:
        return name in self._shaders

    def __contains__(self, name: object) -> bool:
        return name in self._shaders

    def __len__(self) -> int:
        return len(self._shaders)