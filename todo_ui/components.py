"""HTML components for the todo app.

Interactive elements carry `data-action` / `data-todo-id` (or
`data-view`) attributes naming the view-model operation they trigger.
The list element carries `data-auto-animate` and rows are keyed by todo
id so that re-fetched lists animate instead of remounting.
"""

from todo_ui.markup import (
    component,
    escape,
    render_aria,
    render_attr,
    render_class,
    render_data,
)
from todo_ui.models import Todo
from todo_ui.styles import style_for
from todo_ui.views import ALL_VIEW, CreateTodoModel, TodoListModel, TodoPage

__all__ = [
    "CheckIcon",
    "XMarkIcon",
    "TodoItem",
    "TodoList",
    "TabTrigger",
    "CreateTodoForm",
    "IndexPage",
]

CHECKBOX_CLASS = (
    "flex h-6 w-6 items-center justify-center rounded-6 border border-gray-300 "
    "focus:border-gray-700 focus:outline-none "
    "data-[state=checked]:border-gray-700 data-[state=checked]:bg-gray-700"
)
TAB_CLASS = (
    "rounded-full py-3 font-bold "
    "data-[state=active]:bg-gray-700 data-[state=active]:text-white"
)


def _svg(path: str, attrs: dict):
    rendered = "".join(render_attr(k.rstrip("_").replace("_", "-"), v) for k, v in attrs.items())
    yield (
        '<svg xmlns="http://www.w3.org/2000/svg" fill="none" viewBox="0 0 24 24"'
        f' stroke-width="1.5" stroke="currentColor"{rendered}>'
        f'<path stroke-linecap="round" stroke-linejoin="round" d="{path}"/>'
        "</svg>"
    )


@component
def CheckIcon(**attrs):
    yield from _svg("M4.5 12.75l6 6 9-13.5", attrs)


@component
def XMarkIcon(**attrs):
    yield from _svg("M6 18L18 6M6 6l12 12", attrs)


@component
def TodoItem(*, todo: Todo):
    """One row: status checkbox, label and delete button."""
    style = style_for(todo.status)
    checkbox_id = f"todo-{todo.id}"

    yield f'<li{render_attr("id", f"todo-item-{todo.id}")}{render_data({"key": todo.id})}>'
    yield f'<div class="{style.row_class}"{render_data({"status": todo.status.value})}>'

    yield (
        f'<button type="button" role="checkbox"{render_attr("id", checkbox_id)}'
        f' class="{CHECKBOX_CLASS}"'
        f'{render_aria({"checked": style.checked})}'
        f'{render_data({"state": style.state, "action": "toggle", "todo-id": todo.id})}>'
    )
    if style.checked:
        yield from CheckIcon(class_="h-4 w-4 text-white", aria_hidden="true")
    yield "</button>"

    yield f'<label class="{style.label_class}"{render_attr("for", checkbox_id)}>{escape(todo.body)}</label>'

    yield (
        '<button type="button" class="ml-auto p-1"'
        f'{render_aria({"label": "Delete todo"})}'
        f'{render_data({"action": "delete", "todo-id": todo.id})}>'
    )
    yield from XMarkIcon(width=24, height=24, aria_hidden="true", focusable="false")
    yield "</button>"

    yield "</div></li>"


@component
def TodoList(*, model: TodoListModel):
    """Rows for whatever the model fetched last, in the order returned."""
    yield (
        '<ul class="grid grid-cols-1 gap-y-3" data-auto-animate'
        f'{render_data({"statuses": " ".join(s.value for s in model.statuses)})}'
        f'{render_aria({"busy": model.is_busy})}>'
    )
    for todo in model.todos:
        yield from TodoItem(todo=todo)
    yield "</ul>"


@component
def TabTrigger(*, value: str, label: str, active: bool):
    state = "active" if active else "inactive"
    padding = "px-8" if value == ALL_VIEW else "px-6"
    yield (
        f'<button type="button" role="tab"{render_attr("id", f"tab-{value}")}'
        f' class="{render_class(TAB_CLASS, padding)}"'
        f'{render_aria({"selected": active, "controls": f"panel-{value}"})}'
        f'{render_attr("tabindex", None if active else "-1")}'
        f'{render_data({"state": state, "action": "select-view", "view": value})}>'
        f"{escape(label)}</button>"
    )


@component
def CreateTodoForm(*, model: CreateTodoModel):
    yield (
        '<form class="group flex items-center justify-between rounded-12 border border-gray-200'
        ' py-2 pr-4 focus-within:border-gray-400"'
        f'{render_data({"action": "create"})}>'
    )
    yield (
        '<label for="add-todo" class="sr-only">Add todo</label>'
        '<input id="add-todo" name="body" type="text" placeholder="Add todo"'
        ' class="flex-1 px-4 text-base placeholder:text-gray-400 focus:outline-none"'
        f'{render_attr("value", model.value)}/>'
    )
    yield (
        '<button type="submit" class="rounded-full bg-gray-700 px-5 py-2 text-white"'
        f'{render_attr("disabled", model.create_todo.is_loading)}>Add</button>'
    )
    yield "</form>"


def _tab_label(key: str) -> str:
    return "All" if key == ALL_VIEW else key


@component
async def IndexPage(*, page: TodoPage):
    """Whole page. Mounting fetches the active view before rendering it."""
    await page.mount()

    yield '<main class="mx-auto w-[480px] pt-12"><div class="rounded-12 bg-white p-8 shadow-sm">'
    yield '<h1 class="text-center text-4xl font-extrabold text-gray-900">Todo App</h1>'

    yield '<div class="mt-10">'
    yield f'<div role="tablist" class="mb-10 space-x-2"{render_aria({"label": "Manage your todos"})}>'
    for key in page.keys:
        for chunk in TabTrigger(value=key, label=_tab_label(key), active=key == page.selected):
            yield chunk
    yield "</div>"

    yield (
        f'<div role="tabpanel" class="TabsContent"{render_attr("id", f"panel-{page.selected}")}'
        f'{render_aria({"labelledby": f"tab-{page.selected}"})}'
        f'{render_data({"state": "active"})}>'
    )
    for chunk in TodoList(model=page.active):
        yield chunk
    yield "</div></div>"

    yield '<div class="pt-10">'
    for chunk in CreateTodoForm(model=page.create_form):
        yield chunk
    yield "</div>"

    yield "</div></main>"
