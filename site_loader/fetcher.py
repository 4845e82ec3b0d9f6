"""
Module for loading the site's JSON data files.

Every page load retrieves the whole resource set at once. The retrievals are
fanned out over a thread pool that shares one ``urllib3`` connection pool,
and joined with an all-or-nothing barrier: a single failed or unparsable
document fails the whole batch and nothing is rendered from it.
"""
import json
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from types import MappingProxyType

import urllib3

from .config import BASE_DATA_PATH, JSON_FILES


class DataLoadError(Exception):
    """Raised when any resource of the batch cannot be fetched or parsed."""


def resource_key(name):
    """Return the store key for a resource identifier.

    :param name: Identifier, with or without the ``.json`` extension.
    :type name: str
    :returns: The identifier with the extension stripped.
    :rtype: str
    """
    return name[:-len('.json')] if name.endswith('.json') else name


def resource_location(base_path, name):
    """Build the location of one resource under the base path.

    :param base_path: Directory or URL holding the JSON documents.
    :type base_path: str
    :param name: Resource identifier.
    :type name: str
    :returns: ``<base_path>/<identifier>.json``
    :rtype: str
    """
    return f"{str(base_path).rstrip('/')}/{resource_key(name)}.json"


def is_remote(base_path):
    return str(base_path).startswith(('http://', 'https://'))


def fetch_json(base_path, name, http):
    """Retrieve and parse a single JSON resource.

    Remote base paths are fetched with the shared pool manager; anything else
    is read from the local filesystem.

    :param base_path: Directory or URL holding the JSON documents.
    :type base_path: str
    :param name: Resource identifier.
    :type name: str
    :param http: Connection pool used for remote resources.
    :type http: urllib3.PoolManager
    :returns: The parsed JSON value.
    :raises DataLoadError: On a network error, a non-success status, a
        missing file, or a body that is not valid JSON.
    """
    location = resource_location(base_path, name)

    if is_remote(base_path):
        try:
            response = http.request('GET', location)
        except urllib3.exceptions.HTTPError as e:
            raise DataLoadError(f"Failed to load {name}: {e}") from e
        if not 200 <= response.status < 300:
            reason = response.reason or 'Network or Path Error'
            raise DataLoadError(f"Failed to load {name}: {response.status} {reason}")
        body = response.data
    else:
        try:
            body = Path(location).read_bytes()
        except OSError as e:
            raise DataLoadError(f"Failed to load {name}: {e}") from e

    try:
        return json.loads(body)
    except (ValueError, RecursionError) as e:
        raise DataLoadError(f"Failed to parse {name}: {e}") from e


def load_all_data(base_path=BASE_DATA_PATH, json_files=JSON_FILES, http=None):
    """Fetch every resource concurrently and assemble the loaded store.

    All retrievals start without waiting for one another. The pool is left
    to drain before a failure is reported, so no retrieval is still running
    once this function returns or raises.

    :param base_path: Directory or URL holding the JSON documents.
    :type base_path: str
    :param json_files: Ordered resource identifiers to fetch.
    :type json_files: list[str]
    :param http: Optional pool manager; a new one is created when omitted.
    :type http: urllib3.PoolManager
    :returns: Read-only mapping of identifier (no extension) to parsed JSON.
    :rtype: types.MappingProxyType
    :raises DataLoadError: If any single resource fails.
    """
    print("Starting data loading...")
    http = http or urllib3.PoolManager(maxsize=max(len(json_files), 1))
    data = {}
    errors = []

    with ThreadPoolExecutor(max_workers=max(len(json_files), 1)) as pool:
        futures = {
            name: pool.submit(fetch_json, base_path, name, http)
            for name in json_files
        }

    # Leaving the with-block waits for every outstanding retrieval.
    for name, future in futures.items():
        try:
            data[resource_key(name)] = future.result()
        except DataLoadError as e:
            print(f"Error during data loading: {e}")
            errors.append(e)

    if errors:
        raise errors[0]

    print(f"All core data loaded successfully. ({len(data)} resources)")
    return MappingProxyType(data)
