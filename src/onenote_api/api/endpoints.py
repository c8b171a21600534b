"""Endpoint wrappers for the OneNote notebooks, sections and pages API.

Each method builds a relative URL (and JSON or multipart body where needed)
and delegates to OneNoteApiBase.request.
"""

import json
from urllib.parse import quote

from onenote_api.api.base import OneNoteApiBase, RequestData
from onenote_api.batch import BatchRequest
from onenote_api.models.errors import RequestError, ResponsePackage
from onenote_api.models.hierarchy import Revision
from onenote_api.pages.document import OneNotePage

_READ_ONLY_FILTER = "$filter=userRole%20ne%20Microsoft.OneNote.Api.UserRole'Reader'"

Result = ResponsePackage | RequestError


class OneNoteApi(OneNoteApiBase):
    """Wrapper for calling the OneNote API endpoints."""

    async def create_notebook(self, name: str) -> Result:
        return await self.request(self._get_notebooks_url(), json.dumps({"name": name}))

    async def create_page(self, page: OneNotePage, section_id: str | None = None) -> Result:
        """Create a page from a OneNotePage, in ``section_id`` or the default section."""
        section_path = f"/sections/{section_id}" if section_id else ""
        return await self.request(f"{section_path}/pages", page.to_form_data())

    async def get_recent_notebooks(self, include_personal: bool) -> Result:
        flag = "true" if include_personal else "false"
        url = (
            "/notebooks/Microsoft.OneNote.Api.GetRecentNotebooks"
            f"(includePersonalNotebooks={flag})"
        )
        return await self.request(url)

    async def get_notebook_wopi_properties(
        self, notebook_self_path: str, frame_action: str
    ) -> Result:
        url = f"{notebook_self_path}/Microsoft.OneNote.Api.GetWopiProperties(frameAction='{frame_action}')"
        return await self.request(url, is_full_url=True)

    async def get_notebooks_from_web_urls(self, notebook_web_urls: list[str]) -> Result:
        url = "/notebooks/Microsoft.OneNote.Api.GetNotebooksFromWebUrls()"
        return await self.request(url, json.dumps(notebook_web_urls))

    async def send_batch_request(self, batch: BatchRequest) -> Result:
        """POST a batch to ``/$batch`` on the beta endpoint.

        Only this call goes to beta; the shared ``use_beta_api`` flag is left
        alone so concurrent calls keep their own version. The multi-part
        response body is returned unparsed; see parse_batch_response.
        """
        body = batch.build()
        return await self.request(
            "/$batch", body, http_method="POST", parse_json=False, beta=True
        )

    async def get_page(self, page_id: str) -> Result:
        return await self.request(f"/pages/{page_id}")

    async def get_page_content(self, page_id: str) -> Result:
        return await self.request(f"/pages/{page_id}/content", parse_json=False)

    async def get_pages(self, top: int | None = None, section_id: str | None = None) -> Result:
        page_path = "/pages"
        if top is not None and top > 0:
            page_path += f"?top={top}"
        if section_id:
            page_path = f"/sections/{section_id}{page_path}"
        return await self.request(page_path)

    async def update_page(self, page_id: str, revisions: list[Revision]) -> Result:
        """PATCH page content with a list of revisions."""
        data = json.dumps([revision.model_dump(exclude_none=True) for revision in revisions])
        return await self.request(
            f"/pages/{page_id}/content", data, "application/json", "PATCH"
        )

    async def create_section(self, notebook_id: str, name: str) -> Result:
        return await self.request(
            f"/notebooks/{notebook_id}/sections/", json.dumps({"name": name})
        )

    async def get_notebooks(self, exclude_read_only_notebooks: bool = True) -> Result:
        return await self.request(self._get_notebooks_url(0, exclude_read_only_notebooks))

    async def get_notebooks_with_expanded_sections(
        self, expands: int = 2, exclude_read_only_notebooks: bool = True
    ) -> Result:
        return await self.request(self._get_notebooks_url(expands, exclude_read_only_notebooks))

    async def get_notebook_by_name(self, name: str) -> Result:
        return await self.request(
            f"/notebooks?filter=name%20eq%20%27{quote(name)}%27&orderby=createdTime"
        )

    async def get_default_notebook(self) -> Result:
        return await self.request("/notebooks?filter=isDefault%20eq%20true%20")

    async def pages_search(self, query: str) -> Result:
        return await self.request(self._get_search_url(query))

    async def perform_api_call(
        self,
        url: str,
        data: RequestData | None = None,
        content_type: str | None = None,
        http_method: str | None = None,
        is_full_url: bool = False,
    ) -> Result:
        """Send any request through the shared URL, header and error handling."""
        return await self.request(url, data, content_type, http_method, is_full_url)

    @classmethod
    def _get_expands(cls, expands: int) -> str:
        """Nested $expand so notebooks come back with ``expands`` levels of children."""
        if expands <= 0:
            return ""
        s = "$expand=sections,sectionGroups"
        return s if expands == 1 else f"{s}({cls._get_expands(expands - 1)})"

    @classmethod
    def _get_notebooks_url(cls, num_expands: int = 0, exclude_read_only_notebooks: bool = True) -> str:
        # Read-only notebooks are excluded by default since callers mostly save into the result
        query = _READ_ONLY_FILTER if exclude_read_only_notebooks else ""
        if num_expands:
            query += f"&{cls._get_expands(num_expands)}"
        return f"/notebooks?{query}"

    @staticmethod
    def _get_search_url(query: str) -> str:
        return f"/pages?search={quote(query)}"
