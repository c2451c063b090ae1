"""Async client for the Graphcool system API.

Sends addProject / cloneProject GraphQL mutations over an injected
httpx.AsyncClient and turns the `project` payload into ProjectInfo.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from graphcool.api.errors import ApiError
from graphcool.models.config import GraphcoolConfig
from graphcool.models.project import ProjectInfo, Region

_PROJECT_FIELDS = """
    project {
      id
      name
      schema
      alias
      region
      version
    }
"""

ADD_PROJECT_MUTATION = f"""
mutation addProject($name: String!, $schema: String!, $alias: String, $region: Region) {{
  addProject(input: {{
    name: $name,
    schema: $schema,
    alias: $alias,
    region: $region,
    clientMutationId: "graphcool-cli"
  }}) {{{_PROJECT_FIELDS}  }}
}}
"""

CLONE_PROJECT_MUTATION = f"""
mutation cloneProject(
  $projectId: String!,
  $name: String!,
  $includeData: Boolean!,
  $includeMutationCallbacks: Boolean!
) {{
  cloneProject(input: {{
    projectId: $projectId,
    name: $name,
    includeData: $includeData,
    includeMutationCallbacks: $includeMutationCallbacks,
    clientMutationId: "graphcool-cli"
  }}) {{{_PROJECT_FIELDS}  }}
}}
"""


class SystemApiClient:
    """Client for the system API endpoint.

    The httpx client is owned by the caller (opened per command
    invocation); this class only adds the endpoint, auth header, and
    GraphQL envelope.

    Args:
        http: Open httpx.AsyncClient used for every request.
        config: CLI configuration providing the endpoint and token.
        log: Logger for request tracing.
    """

    def __init__(
        self,
        http: httpx.AsyncClient,
        config: GraphcoolConfig,
        log: logging.Logger | None = None,
    ) -> None:
        self._http = http
        self._config = config
        self._log = log or logging.getLogger("graphcool.api")

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._config.token:
            headers["Authorization"] = f"Bearer {self._config.token}"
        return headers

    async def _send(self, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        """POST a GraphQL request and return its `data` object.

        Raises:
            ApiError: If the response body carries an `errors` array.
            httpx.HTTPStatusError: On a non-2xx response without `errors`.
        """
        endpoint = self._config.system_api_endpoint
        self._log.debug("POST %s variables=%s", endpoint, sorted(variables))
        response = await self._http.post(
            endpoint,
            json={"query": query, "variables": variables},
            headers=self._headers(),
        )
        self._log.debug("%s responded %s", endpoint, response.status_code)

        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and body.get("errors"):
            raise ApiError(body["errors"], request_id=response.headers.get("request-id"))

        response.raise_for_status()
        if not isinstance(body, dict) or "data" not in body:
            raise ValueError(f"Unexpected response from {endpoint}: {response.text[:200]}")
        return body["data"]

    async def create_project(
        self,
        name: str,
        schema: str,
        alias: str | None = None,
        region: Region | None = None,
    ) -> ProjectInfo:
        """Create a project from schema text via the addProject mutation."""
        variables: dict[str, Any] = {
            "name": name,
            "schema": schema,
            "alias": alias,
            "region": region.api_value if region else None,
        }
        data = await self._send(ADD_PROJECT_MUTATION, variables)
        return ProjectInfo.from_api(data["addProject"]["project"])

    async def clone_project(
        self,
        source_project_id: str,
        name: str,
        include_data: bool,
        include_mutation_callbacks: bool,
    ) -> ProjectInfo:
        """Clone an existing project via the cloneProject mutation."""
        variables: dict[str, Any] = {
            "projectId": source_project_id,
            "name": name,
            "includeData": include_data,
            "includeMutationCallbacks": include_mutation_callbacks,
        }
        data = await self._send(CLONE_PROJECT_MUTATION, variables)
        return ProjectInfo.from_api(data["cloneProject"]["project"])
