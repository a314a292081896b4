import boto3
import pytest
from moto import mock_aws

from share_config import ShareConfig

REGION = "eu-north-1"
TABLE_NAME = "Shares"


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    # Keep boto3 away from any real account
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", REGION)


@pytest.fixture
def share_config():
    return ShareConfig(table_name=TABLE_NAME, region_name=REGION)


@pytest.fixture
def setup_dynamodb():
    # Mock AWS environment
    with mock_aws():
        dynamodb = boto3.resource("dynamodb", region_name=REGION)

        table = dynamodb.create_table(
            TableName=TABLE_NAME,
            KeySchema=[{"AttributeName": "id", "KeyType": "HASH"}],
            AttributeDefinitions=[{"AttributeName": "id", "AttributeType": "S"}],
            BillingMode="PAY_PER_REQUEST",
        )
        table.wait_until_exists()
        yield table
