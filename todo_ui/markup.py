"""Component decorator and HTML helpers used by the todo views.

Components are generator functions that yield HTML chunks:

    @component
    def Badge(*, text=""):
        yield f'<span class="badge">{escape(text)}</span>'

    html = str(Badge(text="New"))

Async generator functions are supported the same way and can await
remote calls before yielding:

    @component
    async def Page(*, page):
        await page.mount()
        yield '<main>'
        ...

    html = await Page(page=page).render()

Components that accept `_content` as their first parameter receive the
nested children (an iterable of chunks) in that slot.
"""

import asyncio
import inspect

from markupsafe import Markup, escape

__all__ = [
    "component",
    "Markup",
    "escape",
    "render_attr",
    "render_class",
    "render_aria",
    "render_data",
]


def component(fn):
    """Wrap a (sync or async) generator function as a renderable component.

    Args:
        fn: Generator function yielding HTML chunks.

    Returns:
        A class whose instances iterate (or async-iterate) over the chunks
        and render to a string.
    """
    params = list(inspect.signature(fn).parameters)
    takes_content = bool(params) and params[0] == "_content"
    is_async = inspect.isasyncgenfunction(fn)

    class Component:
        __slots__ = ("_content", "_props")

        def __init__(self, _content=None, **props):
            self._content = _content
            self._props = props

        def _call_fn(self):
            if takes_content:
                return fn(self._content, **self._props)
            return fn(**self._props)

        if is_async:
            def __aiter__(self):
                return self._call_fn()

            async def render(self) -> Markup:
                """Render component to markup (async)."""
                return Markup("".join([chunk async for chunk in self._call_fn()]))

            def __str__(self):
                try:
                    asyncio.get_running_loop()
                except RuntimeError:
                    return str(asyncio.run(self.render()))
                raise RuntimeError(
                    f"Use 'await {fn.__name__}(...).render()' inside a running event loop"
                )
        else:
            def __iter__(self):
                return iter(self._call_fn())

            def render(self) -> Markup:
                return Markup("".join(self._call_fn()))

            def __str__(self):
                return str(self.render())

            def __html__(self):
                return self.render()

    Component.__name__ = fn.__name__
    Component.__qualname__ = fn.__qualname__
    Component.__doc__ = fn.__doc__
    Component.__wrapped__ = fn
    return Component


def render_attr(name: str, value) -> Markup:
    """Render a single HTML attribute.

    - True: renders just the attribute name (e.g., " disabled")
    - False/None: renders nothing
    - Other values: renders name="escaped_value"

    Example:
        >>> render_attr("disabled", True)
        Markup(' disabled')
        >>> render_attr("id", "todo-1")
        Markup(' id="todo-1"')
    """
    if value is True:
        return Markup(f" {name}")
    if value is False or value is None:
        return Markup("")
    return Markup(' {}="{}"').format(Markup(name), value)


def render_class(*values) -> str:
    """Join class names from strings, lists/tuples and {name: flag} dicts.

    Example:
        >>> render_class("row", {"done": True, "muted": False}, ["lg"])
        'row done lg'
    """
    classes = []
    queue = list(values)

    while queue:
        value = queue.pop(0)
        if not value:
            continue
        if isinstance(value, str):
            classes.append(value)
        elif isinstance(value, dict):
            classes.extend(k for k, v in value.items() if v)
        elif isinstance(value, (list, tuple)):
            queue[0:0] = list(value)

    return " ".join(classes)


def render_aria(attrs: dict) -> Markup:
    """Render aria-* attributes; booleans become "true"/"false".

    Example:
        >>> render_aria({"label": "Delete todo", "hidden": True})
        Markup(' aria-label="Delete todo" aria-hidden="true"')
    """
    parts = []
    for k, v in attrs.items():
        if v is None:
            continue
        if isinstance(v, bool):
            v = "true" if v else "false"
        parts.append(render_attr(f"aria-{k}", v))
    return Markup("").join(parts)


def render_data(attrs: dict) -> Markup:
    """Render data-* attributes, skipping None values."""
    return Markup("").join(
        render_attr(f"data-{k}", v) for k, v in attrs.items() if v is not None
    )
