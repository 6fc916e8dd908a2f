"""Plain-text rendering of the school list view."""

from app.schemas.school import School
from app.schemas.state import ControllerState

HEADERS = ("Name", "Address", "Phone")


def _row(school: School) -> tuple[str, str, str]:
    return (school.name, school.address or "", school.phone or "")


def render_table(rows: list[tuple[str, ...]]) -> str:
    """Left-aligned columns sized to their widest cell."""
    widths = [
        max(len(cell) for cell in column) for column in zip(HEADERS, *rows)
    ]
    lines = [
        "  ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()
        for cells in (HEADERS, *rows)
    ]
    lines.insert(1, "  ".join("-" * width for width in widths))
    return "\n".join(lines)


def render_school_list(state: ControllerState) -> str:
    """Render a snapshot the way the list screen shows it."""
    parts = []
    if state.error_message:
        parts.append(f"Error: {state.error_message}")

    if state.is_loading:
        parts.append("Loading...")
    elif not state.items:
        parts.append("No schools found.")
    else:
        rows = []
        for school in state.items:
            if school.id == state.editing_id and state.editing_draft is not None:
                draft = state.editing_draft
                rows.append((draft.name, draft.address or "", draft.phone or ""))
            else:
                rows.append(_row(school))
        parts.append(render_table(rows))

    return "\n".join(parts)
