"""
Support-chat intent resolver.

    resolve(utterance, context, catalog, orders) -> BotResponse

Pure apart from an injected delay that emulates network latency for the
typing indicator. The delay never influences the returned value.
"""

import random
import time
from typing import Callable, Optional, Tuple

from models import Intent, ConversationContext, BotResponse
from catalog import Catalog, OrderBook
from classifier import classify
from response_generator import fallback_reply
from app_config import CHAT_MIN_DELAY_MS, CHAT_MAX_DELAY_MS
from chat_logger import get_logger, clip_message

logger = get_logger("nexmart_chat")


# ─────────────────────────────────────────────
# LATENCY STRATEGIES
# ─────────────────────────────────────────────

def no_delay() -> None:
    return None


def random_delay(min_ms: int = CHAT_MIN_DELAY_MS, max_ms: int = CHAT_MAX_DELAY_MS,
                 sleep: Callable[[float], None] = time.sleep) -> Callable[[], None]:
    """Build a delay that sleeps uniformly between min_ms and max_ms."""
    if min_ms < 0 or max_ms < min_ms:
        raise ValueError(f"invalid delay window: {min_ms}..{max_ms} ms")

    def delay() -> None:
        sleep(random.uniform(min_ms, max_ms) / 1000.0)

    return delay


# ─────────────────────────────────────────────
# RESOLVER
# ─────────────────────────────────────────────

def resolve_detailed(
    utterance: str,
    context: ConversationContext,
    catalog: Catalog,
    orders: OrderBook,
    delay: Optional[Callable[[], None]] = None,
) -> Tuple[Intent, BotResponse]:
    """
    Map one utterance to its intent and exactly one structured response.

    Callers must not pass blank input. Any error raised while classifying or
    inside a handler (including catalog/order lookups) is logged and turned
    into the fallback help links; nothing escapes.
    """
    try:
        result = classify(utterance)
        intent = result.intent
        response = result.rule.handler(result, context, catalog, orders)
        logger.debug(
            f'Resolved | message="{clip_message(utterance)}" | '
            f"intent={result.intent.value} | entities={result.entities_dict()} | "
            f"response={type(response).__name__}"
        )
    except Exception as e:
        logger.error(
            f'Resolver error | message="{clip_message(str(utterance))}" | error={e}',
            exc_info=True,
        )
        intent, response = Intent.FALLBACK, fallback_reply()

    try:
        if delay is None:
            delay = random_delay()
        delay()
    except Exception as e:
        logger.warning(f"Latency strategy failed: {e}")

    return intent, response


def resolve(
    utterance: str,
    context: ConversationContext,
    catalog: Catalog,
    orders: OrderBook,
    delay: Optional[Callable[[], None]] = None,
) -> BotResponse:
    """Map one utterance to exactly one structured response."""
    return resolve_detailed(utterance, context, catalog, orders, delay)[1]
