"""
Paging through a DynamoDB table scan with keypager.

DynamoDB continues a scan from a LastEvaluatedKey map; the loader turns it
into an opaque string page key and back.
"""

import logging
from typing import Any

import boto3

from keypager import (
    LoadFailedError,
    decode_dynamo_key,
    encode_dynamo_key,
    new_pager,
    with_next_page_loader,
    with_page_size,
)

logging.basicConfig(level=logging.DEBUG)

client = boto3.client("dynamodb", region_name="us-east-1")


def load_movies(context: Any, page_key: str, page_size: int) -> tuple[list[dict], str]:
    kwargs: dict[str, Any] = {"TableName": "Movies", "Limit": page_size}
    if page_key:
        kwargs["ExclusiveStartKey"] = decode_dynamo_key(page_key)
    response = client.scan(**kwargs)
    last_key = response.get("LastEvaluatedKey")
    return response["Items"], encode_dynamo_key(last_key) if last_key else ""


# Single page, e.g. for an API endpoint that hands the cursor to its client
pager = new_pager(with_next_page_loader(load_movies), with_page_size(25))
page = pager.page()
if page is not None:
    print(f"First page: {page.count} movies, more={page.has_more}, cursor={page.next_page_key}")

# Everything, starting from scratch
pager = new_pager(with_next_page_loader(load_movies), with_page_size(100))
try:
    movies = pager.all()
except LoadFailedError as e:
    print(f"Stopped after {len(e.partial_items)} movies: {e}")
    movies = e.partial_items

print(f"Loaded {len(movies)} movies")
