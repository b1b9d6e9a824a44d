"""
Community page content
"""

COMMUNITY_STATS = [
    {"number": "25,000+", "label": "Community Members", "description": "Active developers worldwide"},
    {"number": "500+", "label": "Daily Discussions", "description": "Questions, tips, and solutions"},
    {"number": "150+", "label": "Open Source Contributors", "description": "Contributing to our ecosystem"},
    {"number": "50+", "label": "Community Events", "description": "Workshops, meetups, and webinars"},
]

COMMUNITY_CHANNELS = [
    {
        "name": "Discord Community",
        "description": "Join our vibrant Discord server for real-time discussions, support, and collaboration "
                       "with fellow developers.",
        "members": "15,000+ members",
        "link": "https://discord.gg/codemurf",
        "features": ["Real-time chat", "Voice channels", "Screen sharing", "Community events"],
    },
    {
        "name": "GitHub Discussions",
        "description": "Participate in technical discussions, feature requests, and contribute to our "
                       "open-source projects.",
        "members": "8,000+ developers",
        "link": "https://github.com/codemurf/discussions",
        "features": ["Technical discussions", "Feature requests", "Bug reports", "Code reviews"],
    },
    {
        "name": "Reddit Community",
        "description": "Share your projects, get feedback, and discover amazing AI-powered applications built "
                       "by our community.",
        "members": "12,000+ subscribers",
        "link": "https://reddit.com/r/codemurf",
        "features": ["Project showcases", "Tutorials", "Community feedback", "AMAs"],
    },
    {
        "name": "Twitter/X Community",
        "description": "Follow us for the latest updates, tips, and announcements from the Codemurf team.",
        "members": "20,000+ followers",
        "link": "https://twitter.com/codemurf",
        "features": ["News & updates", "Quick tips", "Community highlights", "Live threads"],
    },
]

COMMUNITY_PROGRAMS = [
    {
        "title": "Codemurf Ambassadors",
        "description": "Become a community leader and help shape the future of AI-powered development tools.",
        "benefits": ["Exclusive access to beta features", "Direct line to our team", "Speaking opportunities",
                     "Special recognition"],
    },
    {
        "title": "Open Source Contributors",
        "description": "Contribute to our open-source projects and help build the tools that millions of "
                       "developers use.",
        "benefits": ["GitHub contributor status", "Swag and rewards", "Mentorship opportunities", "Resume boost"],
    },
    {
        "title": "Community Mentors",
        "description": "Share your expertise and help fellow developers learn and grow in their AI development "
                       "journey.",
        "benefits": ["Mentor badge", "Priority support", "Exclusive workshops", "Networking events"],
    },
    {
        "title": "Beta Testers",
        "description": "Get early access to new features and help us improve Codemurf before official releases.",
        "benefits": ["Early feature access", "Direct feedback channel", "Bug bounty rewards",
                     "Beta tester recognition"],
    },
]

COMMUNITY_EVENTS = [
    {"title": "Codemurf Developer Conference 2025", "date": "March 15-17, 2025", "type": "Virtual Conference",
     "description": "Join us for our biggest event of the year featuring workshops, keynotes, and networking.",
     "attendees": "5,000+ expected", "status": "Early Bird"},
    {"title": "AI Code Generation Workshop", "date": "February 28, 2025", "type": "Online Workshop",
     "description": "Learn advanced techniques for AI-powered code generation and optimization.",
     "attendees": "500 spots", "status": "Registration Open"},
    {"title": "Community Showcase", "date": "February 14, 2025", "type": "Virtual Meetup",
     "description": "Community members present their amazing projects built with Codemurf tools.",
     "attendees": "1,000+ participants", "status": "Free Event"},
    {"title": "Open Source Contribution Day", "date": "January 30, 2025", "type": "Global Event",
     "description": "Worldwide event where we contribute to open-source projects together.",
     "attendees": "2,000+ contributors", "status": "Join Anytime"},
]

FEATURED_MEMBERS = [
    {"name": "Alex Chen", "role": "Community Leader",
     "bio": "Full-stack developer who has built 20+ projects using Codemurf. Active mentor and contributor.",
     "contributions": ["100+ forum answers", "5 open-source contributions", "Workshop organizer"]},
    {"name": "Sarah Rodriguez", "role": "AI Researcher",
     "bio": "PhD in Machine Learning, shares cutting-edge AI development techniques with the community.",
     "contributions": ["50+ technical posts", "Research paper author", "Beta tester"]},
    {"name": "David Kim", "role": "Open Source Contributor",
     "bio": "Senior engineer who has contributed significantly to our core libraries and documentation.",
     "contributions": ["Major code contributions", "Documentation improvements", "Bug fixes"]},
    {"name": "Emily Watson", "role": "Content Creator",
     "bio": "Creates amazing tutorials and educational content to help developers learn Codemurf.",
     "contributions": ["Video tutorials", "Blog posts", "Live streaming"]},
]

COMMUNITY_RESOURCES = [
    {"title": "Getting Started Guide",
     "description": "Everything you need to know to join and participate in our community."},
    {"title": "Community Guidelines",
     "description": "Our code of conduct and guidelines for respectful community participation."},
    {"title": "FAQ", "description": "Frequently asked questions about community participation and programs."},
    {"title": "Contribution Guide",
     "description": "Learn how to contribute to our open-source projects and community initiatives."},
]
