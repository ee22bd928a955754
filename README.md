# apidesign

A collection of small, working examples of common API design idioms,
each in its own module. Nothing outside the standard library is needed.

| Module | What it shows |
| --- | --- |
| `apidesign.stacks` | `Stack`, a generic LIFO stack whose `pop` returns a default value when empty, and `IntStack`, whose default is `0` |
| `apidesign.arglist` | `Arg`, a value that is empty or holds a bool, int, float or string, with type tests and conversions; `ArgType`; and `ArgList`, a chainable list of named arguments |
| `apidesign.command_stack` | `CommandStack`, an integer stack driven by the commands `Push`, `Pop` and `IsEmpty` |
| `apidesign.adapter` | `Adapter`, which owns an `Original` and supplies the extra flag its `do_something` needs |
| `apidesign.proxy` | `Proxy`, which forwards to an `Original`; both implement the abstract `Service` |
| `apidesign.facade` | `Facade`, which drives `Original1` and `Original2`, created lazily by `FacadeImpl` |
| `apidesign.renderers` | The abstract `Renderer`, the concrete `OpenGlRenderer`, `DirectxRenderer`, `MesaRenderer` and `UserRenderer`, the function `create_renderer` and the registry `RenderFactory` |
| `apidesign.observer` | `Subject`, which notifies subscribed observers such as `MyObserver` of numbered messages |
| `apidesign.singleton` | `Singleton`, with one lazily created, thread-safe instance per class |
| `apidesign.timer` | `AutoTimer`, a named timer whose `elapsed()` gives the seconds since it was created |

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

A stack:

```python
from apidesign.stacks import IntStack

stack = IntStack()
stack.push(10)
print(stack.is_empty())   # False
print(stack.pop())        # 10
print(stack.pop())        # 0 (empty stack gives the default)
print(stack.is_empty())   # True
```

Arguments and conversions:

```python
from apidesign.arglist import Arg, ArgList

args = ArgList().add("count", 3).add("name", "42abc")
print(args.get("count").to_string())          # "3"
print(args.get("name").to_int())              # 42 (leading integer is parsed)
print(args.get("missing").is_empty())         # True
print(Arg(2.5).to_string())                   # "2.500000"
```

Note that a boolean `Arg` converts inversely to numbers: `Arg(True).to_int()`
is `0` and `Arg(False).to_int()` is `1`.

A data-driven stack:

```python
from apidesign.arglist import ArgList
from apidesign.command_stack import CommandStack

stack = CommandStack()
stack.command("Push", ArgList().add("value", 10))
print(stack.command("Pop").to_int())        # 10
print(stack.command("IsEmpty").to_bool())   # True
```

An unknown command raises `ValueError`.

Renderers, built in and registered:

```python
from apidesign.renderers import RenderFactory, UserRenderer, create_renderer

create_renderer("opengl").render()           # also "directx" and "mesa"

RenderFactory.register_renderer("user", UserRenderer.create)
renderer = RenderFactory.create_renderer("user")
renderer.render()
RenderFactory.unregister_renderer("user")
```

`create_renderer` and `RenderFactory.create_renderer` raise `ValueError` for
a kind they do not know. Registering a kind that is already registered keeps
the first registration.

Observers:

```python
from apidesign.observer import MyObserver, Subject

subject = Subject()
first = MyObserver("first")
subject.subscribe(1, first)
subject.notify(1)
print(first.received)      # [1]
subject.unsubscribe(1, first)
```

The singleton:

```python
from apidesign.singleton import Singleton

assert Singleton.get_instance() is Singleton.get_instance()
# Singleton() raises TypeError
```

A timer:

```python
from apidesign.timer import AutoTimer

with AutoTimer("work") as timer:
    ...
print(timer.elapsed())
```

`Adapter` and `Proxy` can likewise be used in a `with` block; leaving it
releases the wrapped object.

## Demo commands

Each demo prints what the corresponding example does:

```
apidesign-stack
apidesign-command-stack
apidesign-adapter
apidesign-proxy
apidesign-facade
apidesign-renderers
apidesign-singleton
```

## Limitations

The renderers do not draw anything: they record the scene name, viewport
size, camera position and look-at point they are given, and `render()` only
counts frames. The observer and timer modules have no demo command.