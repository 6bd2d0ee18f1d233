"""
Processing cost estimate for a generation request.

Rough per-call prices; reported in non-production debug output only.

Dependencies: kram.models.generation
System role: Diagnostics
"""

from kram.models.generation import KramPatternRequest

IMAGE_COST_USD = 0.04
HD_MULTIPLIER = 2
CHAT_COST_USD = 0.005


def estimate_processing_cost(request: KramPatternRequest) -> dict[str, float]:
    """
    Estimate the upstream cost of one generation.

    Args:
        request: Generation request

    Returns:
        dict: dalle, chatgpt and total cost in USD
    """
    quality = request.dalle_options.quality if request.dalle_options else None
    dalle_cost = IMAGE_COST_USD * (HD_MULTIPLIER if quality == "hd" else 1)
    return {
        "dalle": dalle_cost,
        "chatgpt": CHAT_COST_USD,
        "total": round(dalle_cost + CHAT_COST_USD, 4),
    }
