"""
Item Processor
==============

Runs a batch of items one at a time, in input order.

For each item:
1. Look up the operation (unknown names fail)
2. Classify the identifier and check it matches the operation
3. Run the handler and collect its warnings
4. Emit a success record, or, with continue-on-failure, an error record

Without continue-on-failure the first failing item aborts the batch and no
later item is processed.
"""

import logging
import traceback
from typing import Any, Callable, Dict, Iterable, List, Mapping, Tuple, Union

from .config import Credentials
from .errors import InvalidIdentifierError, UnsupportedOperationError, YouTubePlusError
from .identifier import IdentifierKind, classify
from .models import ItemFailure, ItemInput, ItemOutcome, ItemSuccess
from .operations import (
    HandlerResult,
    get_channel_info,
    get_transcript,
    list_channel_videos,
    list_playlist_videos,
)

logger = logging.getLogger(__name__)

Handler = Callable[..., HandlerResult]

# operation name -> (identifier kind it needs, handler)
OPERATIONS: Dict[str, Tuple[IdentifierKind, Handler]] = {
    "getTranscript": (IdentifierKind.VIDEO, get_transcript),
    "getChannelInfo": (IdentifierKind.CHANNEL, get_channel_info),
    "listChannelVideos": (IdentifierKind.CHANNEL, list_channel_videos),
    "listPlaylistVideos": (IdentifierKind.PLAYLIST, list_playlist_videos),
}


def process_item(item: ItemInput, creds: Credentials, item_index: int = 0) -> ItemSuccess:
    """
    Process one item.

    Raises:
        YouTubePlusError subclasses on any fatal failure
    """
    if item.operation not in OPERATIONS:
        raise UnsupportedOperationError(item.operation, item_index)
    required_kind, handler = OPERATIONS[item.operation]

    parsed = classify(item.identifier)
    if parsed.kind != required_kind or not parsed.id:
        raise InvalidIdentifierError(item.operation, item.identifier, item_index)

    logger.info(f"Item {item_index}: {item.operation} {parsed.kind.value}={parsed.id}")

    result: Dict[str, Any] = {"originalIdentifier": item.identifier}
    fields, warnings = handler(parsed.id, item.options, creds)
    result.update(fields)

    for w in warnings:
        logger.warning(f"Item {item_index}: {w}")
    return ItemSuccess(item_index=item_index, result=result, warnings=warnings)


def _as_item(raw: Union[ItemInput, Mapping[str, Any]]) -> ItemInput:
    return raw if isinstance(raw, ItemInput) else ItemInput.model_validate(raw)


def process_batch(
    items: Iterable[Union[ItemInput, Mapping[str, Any]]],
    creds: Credentials,
    continue_on_fail: bool = False,
) -> List[ItemOutcome]:
    """
    Process items sequentially.

    Args:
        items: ItemInput objects or plain dicts with the same keys
        creds: Credentials read once for the whole batch
        continue_on_fail: Turn failures into error records instead of raising

    Returns:
        One outcome per processed item, in input order
    """
    outcomes: List[ItemOutcome] = []

    for item_index, raw in enumerate(items):
        try:
            outcomes.append(process_item(_as_item(raw), creds, item_index))
        except Exception as e:
            if not continue_on_fail:
                raise

            error_index = item_index
            if isinstance(e, YouTubePlusError) and isinstance(e.item_index, int):
                error_index = e.item_index

            logger.error(f"Item {item_index} failed: {type(e).__name__}: {e}")
            outcomes.append(ItemFailure(
                item_index=item_index,
                error_item_index=error_index,
                error=str(e) or "Unknown error during execution.",
                details=traceback.format_exc(),
            ))

    return outcomes
