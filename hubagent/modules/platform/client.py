import logging
from typing import List, Optional, Union

import httpx

from hubagent.exceptions import PlatformError
from hubagent.modules.api import Command, CommandReport

logger = logging.getLogger(__name__)


class PlatformClient:
    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = 10.0,
        verify: Union[bool, str] = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the platform client.

        Args:
            base_url: Platform URL, e.g. https://platform.hub.traefik.io/agent
            token: Agent token sent as a bearer credential
            timeout: Request timeout in seconds
            verify: TLS verification flag or path to a CA bundle
            transport: Optional httpx transport, mostly for tests
        """
        self.base_url = base_url.rstrip("/")

        if self.base_url.startswith("http://") and verify:
            logger.warning("Using HTTP without TLS - this should only be used for local development!")

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Authorization": f"Bearer {token}"},
            timeout=timeout,
            verify=verify,
            transport=transport,
        )

    async def list_pending_commands(self) -> List[Command]:
        """
        Fetch the commands waiting to be applied by this agent.

        Raises:
            PlatformError: On a non-2xx answer
            httpx.HTTPError: On transport failures
        """
        response = await self._client.get("/commands")
        if not response.is_success:
            raise PlatformError(response.status_code, response.text)

        return [Command.model_validate(item) for item in response.json()]

    async def send_command_reports(self, reports: List[CommandReport]) -> None:
        """
        Send a batch of command reports.

        Raises:
            PlatformError: On a non-2xx answer
            httpx.HTTPError: On transport failures
        """
        body = {"reports": [report.to_wire() for report in reports]}

        response = await self._client.post("/command-reports", json=body)
        if not response.is_success:
            raise PlatformError(response.status_code, response.text)

    async def close(self) -> None:
        await self._client.aclose()
