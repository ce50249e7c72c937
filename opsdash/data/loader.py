"""
Source retrieval (published sheet URLs or a local folder) and parsing into a Snapshot.
"""
from __future__ import annotations

import asyncio
from pathlib import Path

import requests

from opsdash.config import DOMAINS, FETCH_TIMEOUT, SHEET_URLS
from opsdash.data.chargebacks import parse_chargebacks
from opsdash.data.mappers import map_business, map_csat, map_productivity, map_qa, map_refunds
from opsdash.data.schemas import Snapshot
from opsdash.data.tokenizer import parse_csv


# ---------------------------------------------------------------------------
# Fetching
# ---------------------------------------------------------------------------

def fetch_text(
    url: str,
    session: requests.Session | None = None,
    timeout: float = FETCH_TIMEOUT,
) -> str:
    """GET one sheet export. Any transport or HTTP failure yields ""."""
    getter = session.get if session is not None else requests.get
    try:
        response = getter(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        print(f"  Warning: fetch failed for {url}: {exc}")
        return ""
    # Sheets exports are UTF-8 but served as text/csv without a charset
    response.encoding = "utf-8"
    return response.text


async def fetch_all(
    urls: dict[str, str] | None = None,
    session: requests.Session | None = None,
    timeout: float = FETCH_TIMEOUT,
) -> dict[str, str]:
    """Fetch every source concurrently; one failing source never blocks the rest."""
    urls = SHEET_URLS if urls is None else urls
    domains = list(urls)
    texts = await asyncio.gather(*(
        asyncio.to_thread(fetch_text, urls[d], session, timeout) for d in domains
    ))
    return dict(zip(domains, texts))


def read_folder(folder: Path) -> dict[str, str]:
    """Read <domain>.csv files from a local folder; a missing or undecodable file is ""."""
    texts = {}
    for domain in DOMAINS:
        path = Path(folder) / f"{domain}.csv"
        try:
            texts[domain] = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            print(f"  Warning: skipping {path.name}: {exc}")
            texts[domain] = ""
    return texts


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_sources(texts: dict[str, str]) -> Snapshot:
    """Turn the six raw texts into one Snapshot of typed records."""
    snapshot = Snapshot(
        qa=map_qa(parse_csv(texts.get("qa"))),
        productivity=map_productivity(parse_csv(texts.get("productivity"))),
        csat=map_csat(parse_csv(texts.get("csat"))),
        refunds=map_refunds(parse_csv(texts.get("refunds"))),
        chargebacks=parse_chargebacks(texts.get("chargebacks")),
        business=map_business(parse_csv(texts.get("business"))),
    )
    for domain, count in snapshot.counts().items():
        print(f"  {domain}: {count:,} records")
    return snapshot
