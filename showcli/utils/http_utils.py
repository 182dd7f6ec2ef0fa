"""
Fetching single values from JSON endpoints.
"""

import json

import requests

from showcli.errors import RemoteFetchFailed, RemoteFieldMissing
from showcli.utils.output import information


def fetch_json_field(url, field, verbose=False, missing_message=None):
    """
    GET a JSON document and return one top-level field from it.

    Args:
        url (str): Endpoint to query
        field (str): Name of the field to return
        verbose (bool): Print the raw response body
        missing_message (str, optional): Message used when the field is absent

    Returns:
        The field value

    Raises:
        RemoteFetchFailed: On transport errors, error statuses or invalid JSON
        RemoteFieldMissing: If the field is absent or null
    """
    try:
        response = requests.get(url)
    except requests.RequestException as e:
        raise RemoteFetchFailed(url, e) from e

    body = response.text
    if verbose:
        information(f"Received response: {body}")

    try:
        response.raise_for_status()
    except requests.HTTPError as e:
        raise RemoteFetchFailed(url, e) from e

    try:
        document = json.loads(body)
    except ValueError as e:
        raise RemoteFetchFailed(url, f"invalid JSON ({e})") from e

    value = document.get(field) if isinstance(document, dict) else None
    if value is None:
        raise RemoteFieldMissing(field, missing_message)
    return value
