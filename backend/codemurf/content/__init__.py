"""
Hardcoded marketing content for the informational pages
"""
from codemurf.content.changelog import filter_releases
from codemurf.content.events import filter_events
from codemurf.content.feature_requests import filter_feature_requests

__all__ = ["filter_releases", "filter_events", "filter_feature_requests"]
