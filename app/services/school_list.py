"""School list service.

The module-level coroutines perform one request each and return the event
describing its outcome; they never touch state. SchoolListController owns the
current snapshot and applies those events through ``dispatch()``.
"""

import inspect
import logging
from collections.abc import Awaitable, Callable

from app.core.errors import SchoolClientError, SchoolNotFoundError, SchoolValidationError
from app.schemas.school import DraftField, SchoolDraft
from app.schemas.state import (
    ControllerState,
    CreateFormCancelled,
    CreateFormOpened,
    CreateSucceeded,
    DeleteSucceeded,
    DraftChanged,
    EditCancelled,
    EditDraftChanged,
    EditStarted,
    Event,
    LoadFailed,
    LoadStarted,
    LoadSucceeded,
    OperationFailed,
    OperationStarted,
    UpdateSucceeded,
    ValidationFailed,
    reduce,
)
from app.services.school_api import SchoolApiClient

logger = logging.getLogger(__name__)

DELETE_PROMPT = "Delete this school?"

Confirm = Callable[[str], bool | Awaitable[bool]]
Listener = Callable[[ControllerState], None]


def validate_draft(draft: SchoolDraft) -> None:
    """Raise SchoolValidationError when the draft has no usable name."""
    if not draft.has_name():
        raise SchoolValidationError()


# ============== Commands ==============


async def load_schools(api: SchoolApiClient) -> Event:
    try:
        schools = await api.list_schools()
    except SchoolClientError as e:
        return LoadFailed(message=e.message)
    return LoadSucceeded(items=tuple(schools))


async def create_school(api: SchoolApiClient, draft: SchoolDraft) -> Event:
    try:
        school = await api.create_school(draft)
    except SchoolClientError as e:
        return OperationFailed(message=e.message)
    return CreateSucceeded(school=school)


async def update_school(
    api: SchoolApiClient, school_id: int, values: SchoolDraft
) -> Event:
    try:
        school = await api.update_school(school_id, values)
    except SchoolClientError as e:
        return OperationFailed(message=e.message)
    return UpdateSucceeded(school_id=school_id, school=school)


async def delete_school(api: SchoolApiClient, school_id: int) -> Event:
    try:
        await api.delete_school(school_id)
    except SchoolClientError as e:
        return OperationFailed(message=e.message)
    return DeleteSucceeded(school_id=school_id)


# ============== Controller ==============


class SchoolListController:
    """Client-side mirror of the schools collection.

    ``confirm`` is asked before every delete and may be a plain function or a
    coroutine function; a falsy answer cancels the delete.
    """

    def __init__(self, api: SchoolApiClient, confirm: Confirm):
        self.api = api
        self.confirm = confirm
        self.state = ControllerState()
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` with every new snapshot. Returns an unsubscriber."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, event: Event) -> ControllerState:
        self.state = reduce(self.state, event)
        for listener in list(self._listeners):
            listener(self.state)
        return self.state

    # --- Loading ---

    async def load(self) -> ControllerState:
        """Replace the list with the server's current collection."""
        self.dispatch(LoadStarted())
        return self.dispatch(await load_schools(self.api))

    # --- Create ---

    def open_create(self) -> ControllerState:
        return self.dispatch(CreateFormOpened())

    def set_draft_field(self, field: DraftField, value: str) -> ControllerState:
        return self.dispatch(DraftChanged(field=field, value=value))

    def cancel_create(self) -> ControllerState:
        return self.dispatch(CreateFormCancelled())

    async def create(self, draft: SchoolDraft | None = None) -> ControllerState:
        """Create a school from ``draft`` (the form's draft by default)."""
        if draft is None:
            draft = self.state.draft_new
        try:
            validate_draft(draft)
        except SchoolValidationError as e:
            return self.dispatch(ValidationFailed(message=e.message))

        self.dispatch(OperationStarted())
        return self.dispatch(await create_school(self.api, draft))

    # --- Edit ---

    def start_edit(self, school_id: int) -> ControllerState:
        school = self.state.find(school_id)
        if school is None:
            raise SchoolNotFoundError(school_id)
        return self.dispatch(EditStarted(school=school))

    def set_edit_field(self, field: DraftField, value: str) -> ControllerState:
        return self.dispatch(EditDraftChanged(field=field, value=value))

    def cancel_edit(self) -> ControllerState:
        return self.dispatch(EditCancelled())

    async def update(self, school_id: int, values: SchoolDraft) -> ControllerState:
        """Send ``values`` for one school and swap in the server's answer."""
        try:
            validate_draft(values)
        except SchoolValidationError as e:
            return self.dispatch(ValidationFailed(message=e.message))

        self.dispatch(OperationStarted())
        return self.dispatch(await update_school(self.api, school_id, values))

    async def save_edit(self) -> ControllerState:
        """Submit the row being edited. Does nothing when no row is."""
        if self.state.editing_id is None or self.state.editing_draft is None:
            return self.state
        return await self.update(self.state.editing_id, self.state.editing_draft)

    # --- Delete ---

    async def delete(self, school_id: int) -> ControllerState:
        """Delete a school after the user confirms."""
        answer = self.confirm(DELETE_PROMPT)
        if inspect.isawaitable(answer):
            answer = await answer
        if not answer:
            logger.debug("Delete of school %s declined", school_id)
            return self.state

        self.dispatch(OperationStarted())
        return self.dispatch(await delete_school(self.api, school_id))
