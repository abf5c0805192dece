"""HTTP transport using aiohttp — implements TransportPort."""

import logging
from typing import Mapping, Optional

import aiohttp

from vyos_client.config import ClientConfig
from vyos_client.errors import VyOSHTTPError

logger = logging.getLogger(__name__)


class HttpTransport:
    """POSTs request bodies to ``{host}/{endpoint}``.

    A session is opened per call, so one transport can be shared by
    concurrent tasks.
    """

    def __init__(self, config: ClientConfig):
        self._config = config

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _timeout(self) -> aiohttp.ClientTimeout:
        return aiohttp.ClientTimeout(total=self._config.timeout)

    async def post(
        self,
        endpoint: str,
        body: bytes,
        content_type: str = "",
        params: Optional[Mapping[str, str]] = None,
    ) -> bytes:
        """Send one POST and return the raw response body.

        Raises:
            VyOSHTTPError: status outside 200-299 (body kept on the error).
            aiohttp.ClientError: network failures, unchanged.
        """
        url = self._config.url_for(endpoint)
        headers = {"Content-Type": content_type} if content_type else {}
        kwargs = {}
        if self._config.skip_tls_verify:
            kwargs["ssl"] = False

        logger.debug("POST %s (%d bytes)", url, len(body))
        async with aiohttp.ClientSession(timeout=self._timeout()) as session:
            async with session.post(
                url, data=body, headers=headers, params=params, **kwargs
            ) as resp:
                data = await resp.read()
                if resp.status < 200 or resp.status > 299:
                    logger.warning("POST %s returned HTTP %d", url, resp.status)
                    raise VyOSHTTPError(resp.status, data)
                return data
