"""
About page content
"""

ABOUT_STATS = [
    {"number": "10,000+", "label": "Developers Served", "description": "Developers worldwide using our platform daily"},
    {"number": "500M+", "label": "Lines of Code Generated", "description": "AI-powered code generation and optimization"},
    {"number": "99.9%", "label": "Uptime SLA", "description": "Reliable, enterprise-grade infrastructure"},
    {"number": "50+", "label": "Countries", "description": "Global reach across continents"},
]

TEAM_MEMBERS = [
    {"name": "Alex Chen", "role": "CEO & Co-Founder",
     "bio": "Former Microsoft principal engineer with 15+ years in AI and developer tools. "
            "PhD in Computer Science from Stanford.",
     "linkedin": "https://linkedin.com/in/alexchen",
     "expertise": ["AI/ML", "Product Strategy", "Enterprise Software"]},
    {"name": "Sarah Rodriguez", "role": "CTO & Co-Founder",
     "bio": "Ex-Google staff engineer who led AI initiatives. MIT graduate with expertise in large-scale "
            "distributed systems.",
     "linkedin": "https://linkedin.com/in/sarahrodriguez",
     "expertise": ["System Architecture", "AI Research", "Engineering Leadership"]},
    {"name": "David Kim", "role": "VP of Engineering",
     "bio": "Previously at Amazon AWS, led teams building developer infrastructure used by millions of "
            "developers globally.",
     "linkedin": "https://linkedin.com/in/davidkim",
     "expertise": ["Cloud Infrastructure", "DevOps", "Team Building"]},
    {"name": "Emily Watson", "role": "VP of Product",
     "bio": "Former product leader at GitHub and Atlassian, passionate about developer experience and "
            "productivity tools.",
     "linkedin": "https://linkedin.com/in/emilywatson",
     "expertise": ["Product Management", "UX Design", "Developer Relations"]},
    {"name": "Michael Brown", "role": "Head of AI Research",
     "bio": "PhD in Machine Learning from CMU, published 50+ papers in top AI conferences. Expert in code "
            "generation models.",
     "linkedin": "https://linkedin.com/in/michaelbrown",
     "expertise": ["Machine Learning", "NLP", "Research"]},
    {"name": "Lisa Chang", "role": "VP of Marketing",
     "bio": "Built and scaled developer communities at HashiCorp and Docker. Expert in developer-focused "
            "go-to-market strategies.",
     "linkedin": "https://linkedin.com/in/lisachang",
     "expertise": ["Developer Marketing", "Community Building", "Growth"]},
]

MILESTONES = [
    {"year": "2020", "title": "Company Founded",
     "description": "Codemurf was founded with a vision to democratize AI-powered software development."},
    {"year": "2021", "title": "Seed Funding",
     "description": "Raised $5M seed round led by Andreessen Horowitz to build our core AI platform."},
    {"year": "2022", "title": "First 1,000 Users",
     "description": "Reached our first major milestone of 1,000 active developers using our platform."},
    {"year": "2023", "title": "Series A",
     "description": "Secured $20M Series A funding to accelerate product development and team growth."},
    {"year": "2024", "title": "Enterprise Launch",
     "description": "Launched enterprise-grade features and security, onboarding Fortune 500 companies."},
    {"year": "2025", "title": "Global Expansion",
     "description": "Expanded to serve 10,000+ developers across 50+ countries worldwide."},
]

VALUES = [
    {"title": "Developer-First",
     "description": "Every decision we make prioritizes the developer experience. We build tools that developers "
                    "actually want to use, making their daily work more productive and enjoyable."},
    {"title": "Innovation & Research",
     "description": "We push the boundaries of what's possible with AI and software development. Our research "
                    "team continuously explores new frontiers in code generation and developer productivity."},
    {"title": "Transparency & Trust",
     "description": "We believe in open communication, ethical AI practices, and building long-term "
                    "relationships based on trust with our developer community."},
    {"title": "Global Impact",
     "description": "Our mission is to democratize software development worldwide, making advanced AI tools "
                    "accessible to developers regardless of their location or background."},
]

TESTIMONIALS = [
    {"quote": "Codemurf has transformed how our team approaches software development. The AI-powered code "
              "generation has increased our productivity by 40%.",
     "author": "Jennifer Liu", "role": "Senior Software Engineer", "company": "TechCorp Inc."},
    {"quote": "The quality of generated code is exceptional. It's like having a senior developer pair "
              "programming with you 24/7.",
     "author": "Marcus Johnson", "role": "Lead Developer", "company": "StartupXYZ"},
    {"quote": "What impressed me most is how Codemurf understands context and generates code that actually "
              "follows our team's coding standards.",
     "author": "Priya Patel", "role": "Engineering Manager", "company": "Enterprise Solutions Ltd."},
]
