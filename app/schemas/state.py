"""List view state and the events that change it.

ControllerState is an immutable snapshot. ``reduce()`` is the only way to
derive the next snapshot, and it handles a closed set of events:

- LoadStarted / LoadSucceeded / LoadFailed
- OperationStarted / OperationFailed / ValidationFailed
- CreateFormOpened / CreateFormCancelled / DraftChanged / CreateSucceeded
- EditStarted / EditDraftChanged / EditCancelled / UpdateSucceeded
- DeleteSucceeded
"""

from pydantic import BaseModel

from app.schemas.school import DraftField, School, SchoolDraft


class ControllerState(BaseModel):
    """Snapshot of the school list view."""

    items: tuple[School, ...] = ()
    is_loading: bool = True
    error_message: str | None = None
    creating: bool = False
    draft_new: SchoolDraft = SchoolDraft()
    editing_id: int | None = None
    editing_draft: SchoolDraft | None = None

    model_config = {"frozen": True}

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    def find(self, school_id: int) -> School | None:
        """Get a school in the list by ID."""
        for school in self.items:
            if school.id == school_id:
                return school
        return None


# ============== Events ==============


class Event(BaseModel):
    """Base class for state events."""

    model_config = {"frozen": True}


class LoadStarted(Event):
    pass


class LoadSucceeded(Event):
    items: tuple[School, ...]


class LoadFailed(Event):
    message: str


class OperationStarted(Event):
    pass


class OperationFailed(Event):
    message: str


class ValidationFailed(Event):
    message: str


class CreateFormOpened(Event):
    pass


class CreateFormCancelled(Event):
    pass


class DraftChanged(Event):
    field: DraftField
    value: str


class CreateSucceeded(Event):
    school: School


class EditStarted(Event):
    school: School


class EditDraftChanged(Event):
    field: DraftField
    value: str


class EditCancelled(Event):
    pass


class UpdateSucceeded(Event):
    school_id: int
    school: School


class DeleteSucceeded(Event):
    school_id: int


def reduce(state: ControllerState, event: Event) -> ControllerState:
    """Return the snapshot that results from applying ``event`` to ``state``."""
    if isinstance(event, LoadStarted):
        return state.model_copy(update={"is_loading": True, "error_message": None})

    if isinstance(event, LoadSucceeded):
        return state.model_copy(update={"items": event.items, "is_loading": False})

    if isinstance(event, LoadFailed):
        return state.model_copy(
            update={"error_message": event.message, "is_loading": False}
        )

    if isinstance(event, OperationStarted):
        return state.model_copy(update={"error_message": None})

    if isinstance(event, (OperationFailed, ValidationFailed)):
        return state.model_copy(update={"error_message": event.message})

    if isinstance(event, CreateFormOpened):
        return state.model_copy(update={"creating": True})

    if isinstance(event, CreateFormCancelled):
        return state.model_copy(
            update={
                "creating": False,
                "draft_new": SchoolDraft(),
                "error_message": None,
            }
        )

    if isinstance(event, DraftChanged):
        return state.model_copy(
            update={"draft_new": state.draft_new.with_field(event.field, event.value)}
        )

    if isinstance(event, CreateSucceeded):
        return state.model_copy(
            update={
                "items": (event.school, *state.items),
                "draft_new": SchoolDraft(),
                "creating": False,
            }
        )

    if isinstance(event, EditStarted):
        # Only one row is edited at a time; a previous draft is dropped.
        return state.model_copy(
            update={
                "editing_id": event.school.id,
                "editing_draft": SchoolDraft.from_school(event.school),
            }
        )

    if isinstance(event, EditDraftChanged):
        if state.editing_draft is None:
            return state
        return state.model_copy(
            update={
                "editing_draft": state.editing_draft.with_field(event.field, event.value)
            }
        )

    if isinstance(event, EditCancelled):
        return state.model_copy(update={"editing_id": None, "editing_draft": None})

    if isinstance(event, UpdateSucceeded):
        items = tuple(
            event.school if school.id == event.school_id else school
            for school in state.items
        )
        return state.model_copy(
            update={"items": items, "editing_id": None, "editing_draft": None}
        )

    if isinstance(event, DeleteSucceeded):
        items = tuple(school for school in state.items if school.id != event.school_id)
        update = {"items": items}
        if event.school_id == state.editing_id:
            update.update(editing_id=None, editing_draft=None)
        return state.model_copy(update=update)

    raise TypeError(f"Unknown event: {type(event).__name__}")
