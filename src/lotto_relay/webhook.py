"""
Delivery of formatted results to a Discord webhook.
"""

from __future__ import annotations

import logging

import httpx

from .errors import WebhookError
from .formatter import CALENDAR_MARKER

logger = logging.getLogger("lotto-relay.webhook")

DISCORD_MESSAGE_LIMIT = 2000
REQUEST_TIMEOUT = 10.0


def _cut_block(block: str, max_len: int) -> list[str]:
    """Cut one oversized entry at line breaks, then spaces, then anywhere."""
    pieces = []
    while len(block) > max_len:
        cut = block.rfind("\n", 0, max_len + 1)
        if cut <= 0:
            cut = block.rfind(" ", 0, max_len + 1)
        if cut <= 0:
            cut = max_len
        pieces.append(block[:cut].rstrip())
        block = block[cut:].lstrip()
    if block:
        pieces.append(block)
    return pieces


def split_message(text: str, max_len: int = DISCORD_MESSAGE_LIMIT) -> list[str]:
    """Split formatted results into chunks Discord will accept.

    Entries (blocks separated by a blank line) are packed whole. A date
    header that ends a chunk moves forward with the entry that did not fit,
    as long as both fit together. Only an entry longer than ``max_len`` on its
    own is cut, and its pieces are sent as separate chunks.
    """
    text = text.strip()
    if len(text) <= max_len:
        return [text] if text else []

    chunks: list[list[str]] = [[]]
    for block in (b.strip() for b in text.split("\n\n")):
        if not block:
            continue
        current = chunks[-1]
        if len("\n\n".join(current + [block])) <= max_len:
            current.append(block)
            continue

        pieces = _cut_block(block, max_len)
        if (
            len(current) > 1
            and current[-1].startswith(CALENDAR_MARKER)
            and len(current[-1]) + 2 + len(pieces[0]) <= max_len
        ):
            pieces[0] = f"{current.pop()}\n\n{pieces[0]}"
        chunks.extend([piece] for piece in pieces)

    return ["\n\n".join(chunk) for chunk in chunks if chunk]


async def send_message(webhook_url: str, message: str, client: httpx.AsyncClient | None = None) -> int:
    """
    Post a message to a Discord webhook.

    Long messages are sent as several consecutive posts. There is no retry:
    the first failing post aborts delivery.

    Args:
        webhook_url: Discord webhook URL
        message: Formatted message
        client: Optional client to reuse (a short-lived one is created otherwise)

    Returns:
        Number of posts made

    Raises:
        WebhookError: If the URL is empty or Discord rejects or never answers a post
    """
    if not webhook_url.strip():
        raise WebhookError("No Discord webhook URL configured. Set one in config.json or LOTTO_RELAY_WEBHOOK.")

    chunks = split_message(message)
    if not chunks:
        logger.debug("Nothing to send")
        return 0

    try:
        if client is not None:
            await _post_chunks(client, webhook_url, chunks)
        else:
            async with httpx.AsyncClient() as own_client:
                await _post_chunks(own_client, webhook_url, chunks)
    except httpx.TimeoutException:
        raise WebhookError("Discord is not responding. Try again later.") from None
    except httpx.HTTPStatusError as e:
        raise WebhookError(
            f"Discord returned HTTP {e.response.status_code}: {e.response.reason_phrase}"
        ) from None
    except httpx.RequestError as e:
        raise WebhookError(f"Failed to connect to Discord: {e}") from None

    logger.info(f"✅ Sent {len(chunks)} message(s) to Discord")
    return len(chunks)


async def _post_chunks(client: httpx.AsyncClient, webhook_url: str, chunks: list[str]) -> None:
    for chunk in chunks:
        response = await client.post(webhook_url, json={"content": chunk}, timeout=REQUEST_TIMEOUT)
        response.raise_for_status()
