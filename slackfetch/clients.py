from __future__ import annotations

import boto3

from slackfetch.settings import Settings


def _client_kwargs(service_name: str, settings: Settings) -> dict:
    client_kwargs: dict = {"service_name": service_name}
    if settings.aws_region:
        client_kwargs["region_name"] = settings.aws_region
    if settings.aws_access_key_id and settings.aws_secret_access_key:
        client_kwargs["aws_access_key_id"] = settings.aws_access_key_id
        client_kwargs["aws_secret_access_key"] = settings.aws_secret_access_key
    if settings.aws_endpoint_url:
        client_kwargs["endpoint_url"] = settings.aws_endpoint_url
    return client_kwargs


def get_s3_client(settings: Settings):
    return boto3.client(**_client_kwargs("s3", settings))


def get_sns_client(settings: Settings):
    return boto3.client(**_client_kwargs("sns", settings))
