"""
Bounded loading of a single catalog item for the detail pages
"""
import asyncio
from enum import Enum
from typing import Awaitable, Callable, Optional

from pydantic import BaseModel

from codemurf.core.errors import BackendAPIError, CodemurfError, ItemNotFoundError
from codemurf.core.logging_config import LoggingConfig
from codemurf.core.metrics import catalog_detail_loads_total
from codemurf.models.catalog import CatalogItem

logger = LoggingConfig.get_logger(__name__)

DEFAULT_TIMEOUT = 10.0


class LoadOutcome(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    TIMED_OUT = "timed_out"
    FAILED = "failed"


class DetailResult(BaseModel):
    """Outcome of a detail load; `item` is set only when found"""

    outcome: LoadOutcome
    item: Optional[CatalogItem] = None
    error: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.outcome is LoadOutcome.FOUND


async def load_item_detail(
    fetch: Callable[[str], Awaitable[CatalogItem]],
    item_id: str,
    timeout: float = DEFAULT_TIMEOUT,
    kind: str = "templates",
) -> DetailResult:
    """
    Fetch one item, giving up after `timeout` seconds.

    The fetch is cancelled when the timeout expires. Errors never escape;
    they are reported as the result's outcome.
    """
    try:
        item = await asyncio.wait_for(fetch(item_id), timeout=timeout)
    except asyncio.TimeoutError:
        result = DetailResult(outcome=LoadOutcome.TIMED_OUT, error=f"Timed out after {timeout}s")
    except ItemNotFoundError as e:
        result = DetailResult(outcome=LoadOutcome.NOT_FOUND, error=e.message)
    except BackendAPIError as e:
        outcome = LoadOutcome.NOT_FOUND if e.status_code == 404 else LoadOutcome.FAILED
        result = DetailResult(outcome=outcome, error=e.message)
    except CodemurfError as e:
        result = DetailResult(outcome=LoadOutcome.FAILED, error=e.message)
    except Exception as e:
        logger.error(f"Unexpected error loading {kind} {item_id}: {e}", exc_info=True)
        result = DetailResult(outcome=LoadOutcome.FAILED, error=str(e))
    else:
        if item is None:
            result = DetailResult(outcome=LoadOutcome.NOT_FOUND, error=f"{item_id} not found")
        else:
            result = DetailResult(outcome=LoadOutcome.FOUND, item=item)

    catalog_detail_loads_total.labels(kind=kind, outcome=result.outcome.value).inc()
    if not result.found:
        logger.info(
            f"Detail load for {kind} {item_id}: {result.outcome.value}",
            extra={"item_id": item_id, "outcome": result.outcome.value, "error": result.error},
        )
    return result
