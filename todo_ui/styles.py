"""Row styling per todo status."""

from typing import NamedTuple

from todo_ui.models import Status


class StyleDescriptor(NamedTuple):
    checked: bool
    state: str
    row_class: str
    label_class: str


_ROW = "flex items-center rounded-12 border border-gray-200 px-4 py-3 shadow-sm"
_LABEL = "block pl-3 font-medium"

STATUS_STYLES: dict[Status, StyleDescriptor] = {
    Status.PENDING: StyleDescriptor(
        checked=False,
        state="unchecked",
        row_class=f"{_ROW} bg-white",
        label_class=f"{_LABEL} text-slate-700",
    ),
    Status.COMPLETED: StyleDescriptor(
        checked=True,
        state="checked",
        row_class=f"{_ROW} bg-gray-50",
        label_class=f"{_LABEL} text-slate-500 line-through",
    ),
}


def style_for(status) -> StyleDescriptor:
    """Style for a status; anything unrecognized renders as pending."""
    return STATUS_STYLES.get(status, STATUS_STYLES[Status.PENDING])
