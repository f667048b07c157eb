# hyperreal

The platform-independent core of a small 2D game engine, in plain Python with numpy:

- `hyperreal.keycodes`: the `Key` and `MouseButton` code tables, as `IntEnum`s.
- `hyperreal.timestep`: `Timestep`, the frame time. It has `seconds` and `milliseconds`, converts with `float()`, and can be multiplied by a number.
- `hyperreal.events`: window, application, key and mouse events. Each one has an `EventType`, `EventCategory` flags, an `is_in_category()` check and a `handled` flag. `EventDispatcher.dispatch()` hands an event to a handler when the event has the requested class.
- `hyperreal.layers`: `Layer`, which has the hooks `on_attach`, `on_detach`, `on_update`, `on_event` and `on_imgui_render`, and `LayerStack`. In a `LayerStack`, layers always stay below overlays. Iterating runs from bottom to top, and `reversed()` runs from top to bottom.
- `hyperreal.instrumentor`: `Instrumentor`, `InstrumentationTimer`, `profile_scope()` and the `profile_function` decorator. Together they write timed scopes as trace-event JSON, which trace viewers can read.
- `hyperreal.log`: `init()` sets up the core logger (`"HyperReal"`) and the client logger (`"APP"`) at a `TRACE` level. Both write to standard output, and the output is coloured on a terminal.
- `hyperreal.buffer`: `ShaderDataType` and `shader_data_type_size()`. `BufferElement` and `BufferLayout` work out attribute offsets and the stride. `VertexBuffer` holds float32 data and `IndexBuffer` holds uint32 indices, both as numpy arrays.
- `hyperreal.camera`: `OrthographicCamera`, with a settable `position` and `rotation` (in degrees about z). It gives its projection, view and view-projection matrices as 4×4 numpy arrays.
- `hyperreal.input`: `Input`, the abstract source of key, button and cursor state, and `InputState`, which keeps that state up to date from events.
- `hyperreal.camera_controller`: `OrthographicCameraController`. It pans with W/A/S/D, rotates with Q/E when rotation is on, zooms with the mouse wheel (never below 0.25) and follows window resizes.
- `hyperreal.shader`: `preprocess()` splits a combined shader file into `ShaderType` stages at its `#type` lines. `Shader.from_file()` names a shader after the file's stem. `ShaderLibrary` keeps shaders by unique name.

## Install

```
pip install .
```

## Example

```python
from hyperreal.events import EventDispatcher, WindowResizeEvent
from hyperreal.layers import Layer, LayerStack


class Game(Layer):
    def on_event(self, event):
        EventDispatcher(event).dispatch(WindowResizeEvent, self.on_resize)

    def on_resize(self, event):
        print(event)          # WindowResizeEvent: 1280, 720
        return False          # not handled: keep propagating


stack = LayerStack()
stack.push_layer(Game("Game"))

event = WindowResizeEvent(1280, 720)
for layer in reversed(stack):
    layer.on_event(event)
    if event.handled:
        break
```

Moving the camera from input events:

```python
from hyperreal.camera_controller import OrthographicCameraController
from hyperreal.events import KeyPressedEvent, MouseScrolledEvent
from hyperreal.input import InputState
from hyperreal.keycodes import Key
from hyperreal.timestep import Timestep

inputs = InputState()
controller = OrthographicCameraController(1280 / 720, input_source=inputs)

inputs.on_event(KeyPressedEvent(Key.D, 0))
controller.on_update(Timestep(0.1))          # moves 0.5 units to the right
controller.on_event(MouseScrolledEvent(0.0, 1.0))
print(controller.camera.position, controller.zoom_level)
```

The controller only reads key state through its `Input`. If you pass no `input_source`, it makes an `InputState` of its own, and no events reach that state. Feed key events to the `InputState` you pass in.

Profiling:

```python
from hyperreal.instrumentor import get_instrumentor, profile_function, profile_scope

@profile_function
def load():
    ...

get_instrumentor().begin_session("Startup", "profile-startup.json")
with profile_scope("startup"):
    load()
get_instrumentor().end_session()
```

Shader files:

```python
from hyperreal.shader import ShaderLibrary, ShaderType

library = ShaderLibrary()
shader = library.load("assets/shaders/Texture.glsl")   # registered as "Texture"
vertex_source = library.get("Texture").sources[ShaderType.VERTEX]
```

`ShaderLibrary.add()` raises `ValueError` when a name is already taken. `get()` raises `KeyError` for an unknown name. An unknown `#type` name raises `ValueError`.

## What it does not do

This package opens no window and draws nothing. It has no application run loop, no graphics context, and no GPU upload of buffers, shaders or textures. It also has no texture loading and no quad renderer. `Shader` only holds the stage sources and does not compile them. Camera matrices, buffer layouts and vertex data are computed and held in memory, ready for a renderer of your choice.

## Tests

```
pip install .[test]
pytest
```