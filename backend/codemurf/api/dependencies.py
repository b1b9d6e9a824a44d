"""
Shared request parsing and error mapping for routes
"""
from typing import Optional

from fastapi import HTTPException, Query
from pydantic import ValidationError

from codemurf.core.errors import BackendAPIError, CodemurfError
from codemurf.services.catalog_filter import CatalogQuery


async def catalog_query(
    search: Optional[str] = Query(None, description="Case-insensitive text search"),
    category: Optional[str] = Query(None, description="Category, or All"),
    difficulty: Optional[str] = Query(None, description="Easy, Medium, Tough, or All"),
    type: Optional[str] = Query(None, description="Item type, or All"),
    plan: Optional[str] = Query(None, description="Free, Paid, or All"),
    sort: Optional[str] = Query(None, description="popular, rating, newest or price"),
    currency: Optional[str] = Query(None, description="usd or inr"),
) -> CatalogQuery:
    """Gallery filters from the query string; unknown sort or currency gives 422"""
    values = {
        "search": search,
        "category": category,
        "difficulty": difficulty,
        "item_type": type,
        "plan_type": plan,
    }
    if sort:
        values["sort_by"] = sort
    if currency:
        values["currency"] = currency
    try:
        return CatalogQuery(**values)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))


def http_exception_for(error: CodemurfError) -> HTTPException:
    """
    Map a domain error onto the status the browser should see.

    Backend client errors (4xx) pass through; backend server errors
    become 502.
    """
    status_code = error.status_code
    if isinstance(error, BackendAPIError) and status_code >= 500:
        status_code = 502
    return HTTPException(status_code=status_code, detail=error.message)
