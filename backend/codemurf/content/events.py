"""
Upcoming and past community events shown on /events
"""
from typing import List

EVENT_STATS = [
    {"number": "50+", "label": "Events This Year", "description": "Workshops, meetups, conferences"},
    {"number": "25,000+", "label": "Total Attendees", "description": "Developers worldwide"},
    {"number": "100+", "label": "Expert Speakers", "description": "Industry leaders and innovators"},
    {"number": "40+", "label": "Countries", "description": "Global community reach"},
]

EVENT_CATEGORIES = [
    {"value": "all", "label": "All Events", "count": "25"},
    {"value": "conference", "label": "Conferences", "count": "8"},
    {"value": "workshop", "label": "Workshops", "count": "12"},
    {"value": "meetup", "label": "Meetups", "count": "15"},
    {"value": "webinar", "label": "Webinars", "count": "20"},
    {"value": "hackathon", "label": "Hackathons", "count": "6"},
]

# Badge classes keyed by attendance type and registration status
EVENT_TYPE_CLASSES = {"Virtual": "badge-blue", "In-Person": "badge-green", "Hybrid": "badge-purple"}
EVENT_STATUS_CLASSES = {
    "Early Bird": "badge-green",
    "Registration Open": "badge-blue",
    "Registration Opens Soon": "badge-yellow",
    "Sold Out": "badge-red",
}


def _speaker(name: str, role: str, company: str) -> dict:
    return {"name": name, "role": role, "company": company}


UPCOMING_EVENTS: List[dict] = [
    {
        "id": 1,
        "title": "Codemurf Developer Conference 2025",
        "description": "Our biggest event of the year featuring keynotes, workshops, and networking "
                       "opportunities with the Codemurf community.",
        "category": "conference",
        "date": "March 15-17, 2025",
        "time": "9:00 AM - 6:00 PM EST",
        "location": "Virtual & San Francisco, CA",
        "type": "Hybrid",
        "attendees": "5,000+ expected",
        "price": "Free",
        "status": "Early Bird",
        "highlights": ["Keynote by Codemurf founders", "50+ technical sessions", "Hands-on workshops",
                       "Community showcase", "Networking opportunities"],
        "speakers": [_speaker("Alex Chen", "CEO, Codemurf", "Codemurf"),
                     _speaker("Sarah Rodriguez", "CTO, Codemurf", "Codemurf"),
                     _speaker("John Smith", "VP Engineering", "Microsoft")],
    },
    {
        "id": 2,
        "title": "AI Code Generation Masterclass",
        "description": "Deep dive into advanced AI code generation techniques with hands-on labs and "
                       "real-world examples.",
        "category": "workshop",
        "date": "February 28, 2025",
        "time": "2:00 PM - 5:00 PM EST",
        "location": "Online",
        "type": "Virtual",
        "attendees": "500 spots",
        "price": "Free",
        "status": "Registration Open",
        "highlights": ["Advanced prompt engineering", "Custom model training", "Performance optimization",
                       "Best practices", "Q&A with experts"],
        "speakers": [_speaker("Dr. Emily Watson", "AI Research Lead", "Codemurf"),
                     _speaker("Mike Chen", "Senior AI Engineer", "Codemurf")],
    },
    {
        "id": 3,
        "title": "Community Showcase & Networking",
        "description": "Monthly event where community members present their projects and connect with "
                       "fellow developers.",
        "category": "meetup",
        "date": "February 14, 2025",
        "time": "7:00 PM - 9:00 PM EST",
        "location": "Online",
        "type": "Virtual",
        "attendees": "1,000+ participants",
        "price": "Free",
        "status": "Open",
        "highlights": ["Community project demos", "Networking breakout rooms", "Lightning talks",
                       "Prize giveaways", "Open discussions"],
        "speakers": [_speaker("Community Members", "Various", "Codemurf Community")],
    },
    {
        "id": 4,
        "title": "Building Production AI Apps",
        "description": "Learn how to build, deploy, and scale AI-powered applications in production environments.",
        "category": "webinar",
        "date": "February 10, 2025",
        "time": "1:00 PM - 2:30 PM EST",
        "location": "Online",
        "type": "Virtual",
        "attendees": "Unlimited",
        "price": "Free",
        "status": "Registration Open",
        "highlights": ["Production deployment strategies", "Scaling considerations", "Monitoring and debugging",
                       "Security best practices", "Live Q&A session"],
        "speakers": [_speaker("David Kim", "VP Engineering", "Codemurf"),
                     _speaker("Lisa Chang", "DevOps Lead", "Codemurf")],
    },
    {
        "id": 5,
        "title": "Codemurf Global Hackathon",
        "description": "48-hour global hackathon building innovative AI-powered applications using Codemurf tools.",
        "category": "hackathon",
        "date": "April 5-7, 2025",
        "time": "All Day",
        "location": "Global (Virtual)",
        "type": "Virtual",
        "attendees": "2,000+ hackers",
        "price": "Free",
        "status": "Registration Opens Soon",
        "highlights": ["$50,000 in prizes", "Mentorship from experts", "Real-time support",
                       "Demo day presentations", "Job opportunities"],
        "speakers": [_speaker("Codemurf Team", "Mentors & Judges", "Codemurf")],
    },
    {
        "id": 6,
        "title": "Mobile AI Development Workshop",
        "description": "Hands-on workshop for building AI-powered mobile applications using Codemurf mobile toolkit.",
        "category": "workshop",
        "date": "March 8, 2025",
        "time": "10:00 AM - 4:00 PM EST",
        "location": "New York, NY",
        "type": "In-Person",
        "attendees": "100 seats",
        "price": "$99",
        "status": "Early Bird",
        "highlights": ["React Native development", "Flutter integration", "Mobile-specific AI features",
                       "App store optimization", "Lunch and networking"],
        "speakers": [_speaker("Michael Brown", "Mobile Lead", "Codemurf"),
                     _speaker("Jennifer Liu", "React Native Expert", "Facebook")],
    },
]

PAST_EVENTS = [
    {"title": "Codemurf Developer Summit 2024", "date": "November 2024", "attendees": "3,500+",
     "highlights": "Product roadmap reveal, community awards"},
    {"title": "AI Code Quality Workshop", "date": "October 2024", "attendees": "800+",
     "highlights": "Code review automation, quality metrics"},
    {"title": "Open Source Contribution Day", "date": "September 2024", "attendees": "1,200+",
     "highlights": "50+ contributions, documentation updates"},
]


def filter_events(category: str = "all") -> List[dict]:
    """Upcoming events in one category; 'all' keeps every event"""
    if not category or category == "all":
        return list(UPCOMING_EVENTS)
    return [event for event in UPCOMING_EVENTS if event["category"] == category]
