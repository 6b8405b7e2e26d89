import datetime
import boto3
import pytest
from botocore.stub import ANY, Stubber

from cdn_bot.core.cdn import CloudFrontInvalidator
from cdn_bot.core.errors import InfrastructureError


@pytest.fixture
def cloudfront():
    return boto3.client(
        "cloudfront",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing"
    )


@pytest.fixture
def invalidator(settings, cloudfront):
    return CloudFrontInvalidator(settings, client=cloudfront)


def invalidation_response(invalidation_id):
    return {
        "Location": f"https://cloudfront.amazonaws.com/2020-05-31/distribution/E2TESTDISTRIBUTION/invalidation/{invalidation_id}",
        "Invalidation": {
            "Id": invalidation_id,
            "Status": "InProgress",
            "CreateTime": datetime.datetime(2024, 1, 1),
            "InvalidationBatch": {
                "Paths": {"Quantity": 1, "Items": ["/*"]},
                "CallerReference": "1704067200000"
            }
        }
    }


class TestCloudFrontInvalidator:
    def test_build_request(self, invalidator):
        request = invalidator.build_request()

        assert request["DistributionId"] == "E2TESTDISTRIBUTION"
        assert request["InvalidationBatch"]["Paths"] == {"Quantity": 1, "Items": ["/*"]}
        assert request["InvalidationBatch"]["CallerReference"].isdigit()

    @pytest.mark.asyncio
    async def test_invalidate_returns_id(self, invalidator, cloudfront):
        with Stubber(cloudfront) as stubber:
            stubber.add_response(
                "create_invalidation",
                invalidation_response("I2J0I21PCUYOIK"),
                {
                    "DistributionId": "E2TESTDISTRIBUTION",
                    "InvalidationBatch": {
                        "CallerReference": ANY,
                        "Paths": {"Quantity": 1, "Items": ["/*"]}
                    }
                }
            )

            invalidation_id = await invalidator.invalidate()

            stubber.assert_no_pending_responses()

        assert invalidation_id == "I2J0I21PCUYOIK"

    @pytest.mark.asyncio
    async def test_invalidate_client_error(self, invalidator, cloudfront):
        with Stubber(cloudfront) as stubber:
            stubber.add_client_error(
                "create_invalidation",
                service_error_code="NoSuchDistribution",
                service_message="The specified distribution does not exist.",
                http_status_code=404
            )

            with pytest.raises(InfrastructureError, match="NoSuchDistribution"):
                await invalidator.invalidate()

    def test_client_created_lazily(self, settings):
        invalidator = CloudFrontInvalidator(settings)

        assert invalidator._client is None
