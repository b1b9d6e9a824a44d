"""
Prometheus metrics configuration
"""
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, Info, generate_latest
from prometheus_client.registry import REGISTRY

# ============================================================================
# HTTP Request Metrics
# ============================================================================

http_requests_total = Counter(
    'http_requests_total',
    'Total number of HTTP requests',
    ['method', 'endpoint', 'status_code']
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint', 'status_code'],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0)
)

http_errors_total = Counter(
    'http_errors_total',
    'Total number of HTTP errors',
    ['method', 'endpoint', 'status_code', 'error_type']
)

# ============================================================================
# Backend API Metrics
# ============================================================================

backend_requests_total = Counter(
    'backend_requests_total',
    'Total number of requests sent to the backend API',
    ['method', 'endpoint', 'outcome']  # outcome: 'success', 'http_error', 'unavailable', 'invalid_body'
)

backend_request_duration_seconds = Histogram(
    'backend_request_duration_seconds',
    'Backend API request duration in seconds',
    ['method', 'endpoint'],
    buckets=(0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0)
)

# ============================================================================
# Catalog Metrics
# ============================================================================

catalog_detail_loads_total = Counter(
    'catalog_detail_loads_total',
    'Detail page loads by outcome',
    ['kind', 'outcome']  # outcome: 'found', 'not_found', 'timed_out', 'failed'
)

catalog_source_failures_total = Counter(
    'catalog_source_failures_total',
    'Gallery loads that fell back to an empty list',
    ['kind']
)

api_key_actions_total = Counter(
    'api_key_actions_total',
    'Profile API-key actions',
    ['action', 'status']  # status: 'success', 'failed'
)

# ============================================================================
# Site Info
# ============================================================================

site_info = Info(
    'codemurf_site',
    'Catalog source and backend the site is serving from'
)


def record_site_info(catalog_source: str, backend_api_url: str, page_size: int):
    site_info.info({
        'catalog_source': catalog_source,
        'backend_api_url': backend_api_url,
        'catalog_page_size': str(page_size),
    })


def get_metrics():
    """
    Get Prometheus metrics in text format

    Returns:
        bytes: Metrics in Prometheus text format
    """
    return generate_latest(REGISTRY)


def get_metrics_content_type():
    return CONTENT_TYPE_LATEST
