"""
Community feature requests shown on /feature-requests
"""
from typing import List

POPULAR_VOTE_THRESHOLD = 150

REQUEST_STATS = [
    {"number": "1,250+", "label": "Total Requests", "description": "Community-submitted features"},
    {"number": "180", "label": "In Development", "description": "Currently being built"},
    {"number": "95", "label": "Completed", "description": "Released features"},
    {"number": "5,000+", "label": "Total Votes", "description": "Community engagement"},
]

FILTER_OPTIONS = [
    {"value": "all", "label": "All Requests", "count": "1,250"},
    {"value": "popular", "label": "Most Popular", "count": "45"},
    {"value": "recent", "label": "Recent", "count": "30"},
    {"value": "in-progress", "label": "In Progress", "count": "180"},
    {"value": "completed", "label": "Completed", "count": "95"},
    {"value": "planned", "label": "Planned", "count": "120"},
]

_STATUS_FILTERS = {
    "in-progress": "In Progress",
    "completed": "Completed",
    "planned": "Planned",
}

STATUS_CLASSES = {
    "Completed": "badge-green",
    "In Progress": "badge-blue",
    "Planned": "badge-purple",
    "Under Review": "badge-yellow",
}
PRIORITY_CLASSES = {"high": "badge-red", "medium": "badge-yellow", "low": "badge-green"}

FEATURE_REQUESTS: List[dict] = [
    {
        "id": 1,
        "title": "Advanced Code Refactoring AI",
        "description": "AI-powered tool that can automatically refactor legacy code to modern standards "
                       "while maintaining functionality.",
        "category": "AI Enhancement",
        "status": "In Progress",
        "votes": 245,
        "comments": 18,
        "author": "Sarah Chen",
        "created": "2 weeks ago",
        "priority": "high",
        "tags": ["AI", "Refactoring", "Code Quality"],
    },
    {
        "id": 2,
        "title": "Real-time Collaborative Coding",
        "description": "Enable multiple developers to work on the same codebase simultaneously with live "
                       "conflict resolution.",
        "category": "Collaboration",
        "status": "Under Review",
        "votes": 189,
        "comments": 24,
        "author": "Mike Rodriguez",
        "created": "1 month ago",
        "priority": "medium",
        "tags": ["Collaboration", "Real-time", "Team"],
    },
    {
        "id": 3,
        "title": "Custom AI Model Training",
        "description": "Allow users to train custom AI models on their specific codebase and coding patterns.",
        "category": "AI Models",
        "status": "Planned",
        "votes": 156,
        "comments": 12,
        "author": "Alex Kim",
        "created": "3 weeks ago",
        "priority": "high",
        "tags": ["AI", "Training", "Customization"],
    },
    {
        "id": 4,
        "title": "Visual Workflow Designer",
        "description": "Drag-and-drop interface for creating complex automation workflows without writing code.",
        "category": "UI/UX",
        "status": "Completed",
        "votes": 134,
        "comments": 31,
        "author": "Emily Watson",
        "created": "2 months ago",
        "priority": "medium",
        "tags": ["Visual", "Workflow", "No-code"],
    },
    {
        "id": 5,
        "title": "Mobile App Development Kit",
        "description": "Comprehensive toolkit for generating mobile applications with AI assistance.",
        "category": "Mobile",
        "status": "In Progress",
        "votes": 112,
        "comments": 15,
        "author": "David Brown",
        "created": "1 week ago",
        "priority": "high",
        "tags": ["Mobile", "AI", "Development"],
    },
    {
        "id": 6,
        "title": "Advanced Security Scanning",
        "description": "AI-powered security vulnerability detection and automatic fix suggestions.",
        "category": "Security",
        "status": "Under Review",
        "votes": 98,
        "comments": 9,
        "author": "Lisa Chang",
        "created": "5 days ago",
        "priority": "high",
        "tags": ["Security", "AI", "Automation"],
    },
]

DEVELOPMENT_PROCESS = [
    {"step": 1, "title": "Community Submission",
     "description": "Community members submit feature requests with detailed descriptions and use cases."},
    {"step": 2, "title": "Community Voting",
     "description": "Other community members vote and comment on submissions to gauge interest and provide feedback."},
    {"step": 3, "title": "Team Review",
     "description": "Our product team reviews popular requests for feasibility, alignment, and technical requirements."},
    {"step": 4, "title": "Development",
     "description": "Approved features enter development phase with regular updates and community involvement."},
    {"step": 5, "title": "Release",
     "description": "Completed features are released to the community with documentation and celebration."},
]

TOP_CATEGORIES = [
    {"name": "AI Enhancements", "count": 285, "description": "Improvements to AI capabilities and intelligence"},
    {"name": "User Interface", "count": 156, "description": "UI/UX improvements and new interface features"},
    {"name": "Integrations", "count": 142, "description": "Third-party tool and service integrations"},
    {"name": "Performance", "count": 98, "description": "Speed and efficiency improvements"},
]


def filter_feature_requests(selected: str = "all", search: str = "") -> List[dict]:
    """
    Requests matching a filter option.

    'popular' keeps requests with more than 150 votes; the status filters
    match exactly; anything else (including 'recent') keeps every request.
    An optional search narrows by title, description and tags.
    """
    if selected == "popular":
        requests = [r for r in FEATURE_REQUESTS if r["votes"] > POPULAR_VOTE_THRESHOLD]
    elif selected in _STATUS_FILTERS:
        requests = [r for r in FEATURE_REQUESTS if r["status"] == _STATUS_FILTERS[selected]]
    else:
        requests = list(FEATURE_REQUESTS)

    needle = (search or "").strip().lower()
    if needle:
        requests = [
            r for r in requests
            if needle in r["title"].lower()
            or needle in r["description"].lower()
            or any(needle in tag.lower() for tag in r["tags"])
        ]
    return requests
