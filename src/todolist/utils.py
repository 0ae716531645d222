from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Sequence, Union


# PUBLIC_INTERFACE
def list_envelope(items: Union[Sequence[Any], Iterable[Any]]) -> Dict[str, Any]:
    """
    Build the standard envelope for list endpoints.

    Args:
        items: The list/iterable of items, in display order.

    Returns:
        Dict with keys: items, total.
    """
    materialized: List[Any] = list(items) if not isinstance(items, list) else items
    return {"items": materialized, "total": len(materialized)}


# PUBLIC_INTERFACE
def configure_logging(level: str) -> None:
    """Configure root logging once; unknown level names fall back to INFO."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
