"""Layers and the ordered stack that holds them."""

from __future__ import annotations

from typing import Iterator, Optional

from .events import Event
from .timestep import Timestep


class Layer:
    """A unit of the application that receives updates and events.

    The base hooks keep simple bookkeeping about what the layer has seen.
    Subclasses override them to add behaviour.
    """

    def __init__(self, name: str = "Layer") -> None:
        self.name = name
        self.attached = False
        self.elapsed = 0.0
        self.last_event: Optional[Event] = None
        self.frames_rendered = 0

    def on_attach(self) -> None:
        """Called when the layer is pushed onto a stack."""
        self.attached = True

    def on_detach(self) -> None:
        """Called when the layer is taken off a stack."""
        self.attached = False

    def on_update(self, ts: Timestep) -> None:
        """Called once per frame with the time since the last frame."""
        self.elapsed += float(ts)

    def on_event(self, event: Event) -> None:
        """Called for each event that reaches this layer."""
        self.last_event = event

    def on_imgui_render(self) -> None:
        """Called once per frame while the debug interface is drawn."""
        self.frames_rendered += 1

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


class LayerStack:
    """Layers below, overlays on top; iteration runs bottom to top."""

    def __init__(self) -> None:
        self._layers: list[Layer] = []
        self._insert_index = 0

    def _find(self, layer: Layer) -> int | None:
        return next((i for i, item in enumerate(self._layers) if item is layer), None)

    def push_layer(self, layer: Layer) -> None:
        self._layers.insert(self._insert_index, layer)
        self._insert_index += 1

    def push_overlay(self, overlay: Layer) -> None:
        self._layers.append(overlay)

    def pop_layer(self, layer: Layer) -> None:
        index = self._find(layer)
        if index is not None:
            del self._layers[index]
            self._insert_index = max(0, self._insert_index - 1)

    def pop_overlay(self, overlay: Layer) -> None:
        index = self._find(overlay)
        if index is not None:
            del self._layers[index]

    def __iter__(self) -> Iterator[Layer]:
        return iter(list(self._layers))

    def __reversed__(self) -> Iterator[Layer]:
        return reversed(list(self._layers))

    def __len__(self) -> int:
        return len(self._layers)