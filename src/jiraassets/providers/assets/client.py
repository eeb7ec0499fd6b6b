"""Thin REST client for the Assets object API."""

from typing import Any, Optional

import requests
from pydantic import BaseModel, ValidationError

from jiraassets._package import PACKAGE_NAME, __version__
from jiraassets.config.settings import DEFAULT_API_URL
from jiraassets.exceptions import AssetsApiError
from jiraassets.helpers.logger import get_logger
from jiraassets.models.assets import (
    AssetObject,
    AttributeDefinition,
    ObjectAttribute,
    ObjectPayload,
    ObjectSchema,
    ObjectType,
    StatusOption,
)

logger = get_logger(__name__)

# Query used when listing the attributes of an object type.
ATTRIBUTE_LISTING_PARAMS = {
    "onlyValueEditable": "true",
    "orderByName": "false",
    "includeValuesExist": "false",
    "excludeParentAttributes": "false",
    "includeChildren": "true",
    "orderByRequired": "false",
}


class AssetsClient:
    """
    Wrapper around a requests session scoped to one Assets workspace.

    Every call blocks until the HTTP round-trip completes. Failures are never
    retried; they are raised as AssetsApiError carrying the request context.
    """

    def __init__(
        self,
        workspace_id: str,
        user: str,
        password: str,
        api_url: str = DEFAULT_API_URL,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            workspace_id: Assets workspace every request is scoped to
            user: Account used for basic authentication
            password: API token of the account
            api_url: Base URL of the API gateway
            timeout: Optional per-request timeout in seconds
            session: Pre-built session, mainly for tests
        """
        self.workspace_id = workspace_id
        self.base_url = f"{api_url.rstrip('/')}/jsm/assets/workspace/{workspace_id}/v1"
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.auth = (user, password)
        self.session.headers.update(
            {
                "Accept": "application/json",
                "Content-Type": "application/json",
                "User-Agent": f"{PACKAGE_NAME}/{__version__}",
            }
        )

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    @staticmethod
    def _response_error(
        message: str, method: str, url: str, response: requests.Response
    ) -> AssetsApiError:
        return AssetsApiError(
            message,
            url=response.url or url,
            method=method,
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.text,
        )

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        payload: Optional[dict[str, Any]] = None,
        model: Optional[type[BaseModel]] = None,
        many: bool = False,
    ) -> Any:
        """
        Send one request and parse the response.

        :param model: Model the body is validated into; the raw JSON is returned when None.
        :param many: Validate the body as a list of model items.
        :raises AssetsApiError: On transport failures, error statuses and bodies that do not
            parse into the expected model.
        """
        url = self._url(path)
        logger.debug("Assets API request", method=method, url=url)
        try:
            response = self.session.request(
                method, url, params=params, json=payload, timeout=self.timeout
            )
        except requests.RequestException as e:
            raise AssetsApiError(f"{method} {url} failed: {e}", url=url, method=method) from e

        if response.status_code >= 400:
            raise self._response_error(
                f"{method} {url} returned {response.status_code}: {response.text}", method, url, response
            )

        data = None
        if response.content:
            try:
                data = response.json()
            except ValueError as e:
                raise self._response_error(
                    f"{method} {url} returned a non-JSON body", method, url, response
                ) from e

        if model is None:
            return data
        if many and not isinstance(data or [], list):
            raise self._response_error(
                f"{method} {url} returned an unexpected body: expected a list", method, url, response
            )
        try:
            if many:
                return [model.model_validate(item) for item in data or []]
            return model.model_validate(data)
        except ValidationError as e:
            raise self._response_error(
                f"{method} {url} returned an unexpected body: {e.error_count()} validation error(s)",
                method,
                url,
                response,
            ) from e

    # Object schema

    def get_object_schema(self, object_schema_id: str) -> ObjectSchema:
        """GET objectschema/{id}"""
        return self._request("GET", f"objectschema/{object_schema_id}", model=ObjectSchema)

    def list_object_types(self, object_schema_id: str) -> list[ObjectType]:
        """GET objectschema/{id}/objecttypes/flat"""
        return self._request(
            "GET", f"objectschema/{object_schema_id}/objecttypes/flat", model=ObjectType, many=True
        )

    def list_object_type_attributes(self, object_type_id: str) -> list[AttributeDefinition]:
        """GET objecttype/{id}/attributes (value-editable attributes, including children)"""
        return self._request(
            "GET",
            f"objecttype/{object_type_id}/attributes",
            params=ATTRIBUTE_LISTING_PARAMS,
            model=AttributeDefinition,
            many=True,
        )

    def list_status_types(self, object_schema_id: Optional[str] = None) -> list[StatusOption]:
        """GET config/statustype"""
        params = {"objectSchemaId": object_schema_id} if object_schema_id else None
        return self._request(
            "GET", "config/statustype", params=params, model=StatusOption, many=True
        )

    # Objects

    def create_object(self, payload: ObjectPayload) -> AssetObject:
        """POST object/create"""
        return self._request(
            "POST", "object/create", payload=payload.to_payload(), model=AssetObject
        )

    def get_object(self, object_id: str) -> AssetObject:
        """GET object/{id}"""
        return self._request("GET", f"object/{object_id}", model=AssetObject)

    def update_object(self, object_id: str, payload: ObjectPayload) -> AssetObject:
        """PUT object/{id}"""
        return self._request(
            "PUT", f"object/{object_id}", payload=payload.to_payload(), model=AssetObject
        )

    def delete_object(self, object_id: str) -> None:
        """DELETE object/{id}"""
        self._request("DELETE", f"object/{object_id}")

    def get_object_attributes(self, object_id: str) -> list[ObjectAttribute]:
        """GET object/{id}/attributes"""
        return self._request(
            "GET", f"object/{object_id}/attributes", model=ObjectAttribute, many=True
        )

    def close(self) -> None:
        self.session.close()
