import asyncio
import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from cdn_bot.config import Settings
from cdn_bot.core.errors import InfrastructureError

logger = logging.getLogger(__name__)

INVALIDATION_PATHS = ["/*"]


class CloudFrontInvalidator:
    """Creates wildcard invalidations on the configured CloudFront distribution."""

    def __init__(self, settings: Settings, client: Optional[Any] = None):
        self.settings = settings
        self._client = client
        self.executor = ThreadPoolExecutor(max_workers=2)

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = boto3.client("cloudfront", region_name=self.settings.aws_region)
        return self._client

    def build_request(self) -> dict:
        # CallerReference must be unique per request; epoch millis is enough
        return {
            "DistributionId": self.settings.cdn_distribution,
            "InvalidationBatch": {
                "CallerReference": str(int(time.time() * 1000)),
                "Paths": {
                    "Quantity": len(INVALIDATION_PATHS),
                    "Items": list(INVALIDATION_PATHS),
                },
            },
        }

    def create_invalidation(self) -> str:
        request = self.build_request()
        try:
            response = self.client.create_invalidation(**request)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"CloudFront invalidation failed for {request['DistributionId']}: {str(e)}")
            raise InfrastructureError(f"CloudFront invalidation failed: {str(e)}") from e

        invalidation_id = response["Invalidation"]["Id"]
        logger.info(f"Created invalidation {invalidation_id} on {request['DistributionId']}")
        return invalidation_id

    async def invalidate(self) -> str:
        """Invalidate every path of the distribution and return the invalidation id."""
        return await asyncio.get_event_loop().run_in_executor(
            self.executor,
            self.create_invalidation
        )
