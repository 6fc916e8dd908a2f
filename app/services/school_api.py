"""REST client for the schools collection."""

import logging

import httpx
from pydantic import ValidationError

from app.core.config import settings
from app.core.errors import SchoolHTTPError, SchoolTransportError
from app.schemas.school import School, SchoolDraft, SchoolList

logger = logging.getLogger(__name__)


class SchoolApiClient:
    """Thin wrapper over the four ``/api/schools`` endpoints.

    Raises SchoolHTTPError for non-2xx answers and SchoolTransportError when
    the request fails or the body does not parse. The underlying
    ``httpx.AsyncClient`` is owned by the caller.
    """

    def __init__(self, client: httpx.AsyncClient, path: str | None = None):
        self.client = client
        self.path = (path or settings.SCHOOLS_PATH).rstrip("/")

    def _item_path(self, school_id: int) -> str:
        return f"{self.path}/{school_id}"

    async def _request(
        self,
        method: str,
        url: str,
        failure: str,
        **kwargs,
    ) -> httpx.Response:
        logger.debug("%s %s", method, url)
        try:
            response = await self.client.request(method, url, **kwargs)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise SchoolTransportError.from_exception(e) from e

        if not response.is_success:
            logger.warning("%s %s returned %s", method, url, response.status_code)
            raise SchoolHTTPError(
                f"{failure}: {response.status_code}", response.status_code
            )
        return response

    async def list_schools(self) -> list[School]:
        """Fetch every school, in server order."""
        response = await self._request("GET", self.path, "Failed to fetch schools")
        try:
            return SchoolList.validate_json(response.content)
        except ValidationError as e:
            raise SchoolTransportError.from_exception(e) from e

    async def create_school(self, draft: SchoolDraft) -> School:
        """Create a school; the server assigns its id."""
        response = await self._request(
            "POST", self.path, "Create failed", json=draft.to_payload()
        )
        school = self._parse_school(response)
        logger.info("Created school %s", school.id)
        return school

    async def update_school(self, school_id: int, draft: SchoolDraft) -> School:
        """Replace a school's fields and return the stored representation."""
        response = await self._request(
            "PUT", self._item_path(school_id), "Update failed", json=draft.to_payload()
        )
        school = self._parse_school(response)
        logger.info("Updated school %s", school_id)
        return school

    async def delete_school(self, school_id: int) -> None:
        """Delete a school. Any 2xx counts as success; the body is ignored."""
        await self._request("DELETE", self._item_path(school_id), "Delete failed")
        logger.info("Deleted school %s", school_id)

    @staticmethod
    def _parse_school(response: httpx.Response) -> School:
        try:
            return School.model_validate_json(response.content)
        except ValidationError as e:
            raise SchoolTransportError.from_exception(e) from e
