# pipeline/sources/firestore/download.py
#
# IO-only: page through the Firestore REST API and save every document of the
# submissions collection as one raw JSON file.
#
# Design decisions:
#   - The REST endpoint (documents.list) is used instead of the Firebase Admin
#     SDK so the pipeline keeps a single HTTP client (httpx) for all IO.
#   - Pages are accumulated in memory: the collection holds one document per
#     municipal self-assessment, so it stays in the low thousands.
#   - The JSON is written to a .tmp file and renamed only after every page was
#     fetched. A failed run never leaves a truncated raw file behind.
#   - Transport errors and 5xx responses are retried up to `retries` times.
#     4xx responses (bad project, missing permission) fail immediately.
#   - `client` is injectable so tests can drive the pagination with
#     httpx.MockTransport and no network.
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import httpx

from pipeline.config import FirestoreSource
from pipeline.log import log

_PAGE_SIZE = 300


def download_submissoes(
    source: FirestoreSource,
    raw_dir: Path,
    timeout: int = 60,
    retries: int = 3,
    client: httpx.Client | None = None,
) -> Path:
    """Download all documents of the Firestore collection to a JSON file.

    Args:
        source:  Firestore project/collection to read.
        raw_dir: Directory where the raw file is saved. Created if absent.
        timeout: HTTP timeout per request in seconds.
        retries: Attempts per page for transient failures.
        client:  Optional pre-built httpx client (tests).

    Returns:
        Path to ``<raw_dir>/<collection>.json``, a JSON array of Firestore
        documents in their typed-value wire format.

    Raises:
        httpx.HTTPError: if a page still fails after all retries, or on 4xx.
        ValueError: if retries is not positive.
    """
    raw_dir.mkdir(parents=True, exist_ok=True)
    final_path = raw_dir / f"{source.collection}.json"
    tmp_path = final_path.with_suffix(".tmp.json")

    owns_client = client is None
    http = client or httpx.Client(timeout=timeout, follow_redirects=True)
    try:
        documents: list[dict[str, Any]] = []
        page_token: str | None = None
        page = 0
        while True:
            payload = _fetch_page(http, source, page_token, retries)
            documents.extend(payload.get("documents", []))
            page += 1
            page_token = payload.get("nextPageToken")
            if not page_token:
                break
        log(f"  Firestore {source.collection}: {len(documents)} documents in {page} page(s)")

        tmp_path.write_text(json.dumps(documents, ensure_ascii=False), encoding="utf-8")
        tmp_path.replace(final_path)
        return final_path
    except Exception:
        if tmp_path.exists():
            tmp_path.unlink()
        raise
    finally:
        if owns_client:
            http.close()


def _fetch_page(
    http: httpx.Client,
    source: FirestoreSource,
    page_token: str | None,
    retries: int,
) -> dict[str, Any]:
    params: dict[str, str | int] = {"pageSize": _PAGE_SIZE}
    if page_token:
        params["pageToken"] = page_token
    if source.api_key:
        params["key"] = source.api_key

    if retries <= 0:
        raise ValueError(f"retries must be positive, got {retries}")

    for attempt in range(1, retries + 1):
        try:
            response = http.get(source.documents_url, params=params)
            response.raise_for_status()
            return response.json()  # type: ignore[no-any-return]
        except httpx.HTTPStatusError as err:
            if err.response.status_code < 500 or attempt == retries:
                raise
            log(f"  Firestore: attempt {attempt}/{retries} failed (HTTP {err.response.status_code}), retrying")
        except httpx.TransportError as err:
            if attempt == retries:
                raise
            log(f"  Firestore: attempt {attempt}/{retries} failed ({err}), retrying")
    # unreachable: the last attempt returns or raises
    raise RuntimeError("Firestore download loop exited without a response")
