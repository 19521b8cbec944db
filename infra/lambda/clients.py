from functools import lru_cache

import boto3

import config


# Built once per process and shared read-only across invocations.
@lru_cache(maxsize=None)
def session():
    return boto3.Session(**config.service_account())


@lru_cache(maxsize=None)
def cognito():
    return session().client("cognito-idp")


@lru_cache(maxsize=None)
def table():
    return session().resource("dynamodb").Table(config.table_name())
