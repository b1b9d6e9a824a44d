"""
Reference data for marketplace forms and filters
"""
from typing import Dict, List, Union

ALL = "All"

TEMPLATE_CATEGORIES = [
    ALL,
    "Web Development",
    "Mobile Development",
    "UI/UX Design",
    "Data Science",
    "Machine Learning",
    "DevOps",
    "Backend Development",
    "Frontend Development",
    "Full Stack",
    "Database",
    "Cloud Computing",
    "Cybersecurity",
    "Game Development",
    "Blockchain",
    "IoT",
    "API Development",
    "Microservices",
    "E-commerce",
    "Social Media",
    "Education",
    "Healthcare",
    "Finance",
    "Real Estate",
    "Travel",
    "Food & Beverage",
    "Entertainment",
    "Sports",
    "News & Media",
    "Non-Profit",
    "Government",
    "Other",
]

# Marketplace items are graded on a three-step scale
DIFFICULTY_LEVELS = ["Easy", "Medium", "Tough"]

TEMPLATE_TYPES = [
    ALL,
    "Web Application",
    "Mobile App",
    "Desktop App",
    "API",
    "Library",
    "Framework",
    "Tool",
    "Plugin",
    "Theme",
    "Component",
    "Template",
    "Boilerplate",
    "Starter Kit",
    "Tutorial",
    "Documentation",
    "Configuration",
    "Script",
    "Other",
]

PLAN_TYPES = ["Free", "Paid"]

TECH_STACKS = [
    "React", "Vue.js", "Angular", "Next.js", "Nuxt.js", "Node.js", "Express.js",
    "Django", "Flask", "FastAPI", "Spring Boot", "Laravel", "Ruby on Rails",
    "ASP.NET", "PHP", "Python", "JavaScript", "TypeScript", "Java", "C#", "C++",
    "Go", "Rust", "Swift", "Kotlin", "Dart", "Flutter", "React Native", "Ionic",
    "Unity", "MongoDB", "PostgreSQL", "MySQL", "SQLite", "Redis",
    "Elasticsearch", "Docker", "Kubernetes", "AWS", "Azure", "Google Cloud",
    "Firebase", "Supabase", "Vercel", "Netlify", "TailwindCSS", "Bootstrap",
    "Material-UI", "Chakra UI", "Sass", "GraphQL", "REST API", "Socket.IO",
    "WebRTC", "PWA", "Electron", "Tauri", "Vite", "Webpack", "Jest", "Cypress",
    "Playwright", "Storybook", "Figma", "Other",
]

COMPONENT_CATEGORIES = [
    "Navigation",
    "Layout",
    "Forms",
    "Data Display",
    "User Interface",
    "Content",
    "Media",
    "Interactive",
    "Widgets",
    "Sections",
]

COMPONENT_TYPES = ["React", "Vue", "Angular", "HTML/CSS", "Svelte", "Flutter"]

USER_ROLES = {
    "ADMIN": "admin",
    "PREMIUM": "premium",
    "FREE": "free",
}

SORT_OPTIONS = [
    {"value": "popular", "label": "Most Popular"},
    {"value": "rating", "label": "Highest Rated"},
    {"value": "newest", "label": "Newest"},
    {"value": "price", "label": "Price: Low to High"},
]

CURRENCIES: List[Dict[str, str]] = [
    {"code": "USD", "symbol": "$", "name": "US Dollar"},
    {"code": "EUR", "symbol": "€", "name": "Euro"},
    {"code": "GBP", "symbol": "£", "name": "British Pound"},
    {"code": "INR", "symbol": "₹", "name": "Indian Rupee"},
    {"code": "JPY", "symbol": "¥", "name": "Japanese Yen"},
    {"code": "CAD", "symbol": "C$", "name": "Canadian Dollar"},
    {"code": "AUD", "symbol": "A$", "name": "Australian Dollar"},
    {"code": "CHF", "symbol": "Fr", "name": "Swiss Franc"},
    {"code": "CNY", "symbol": "¥", "name": "Chinese Yuan"},
    {"code": "SEK", "symbol": "kr", "name": "Swedish Krona"},
    {"code": "SGD", "symbol": "S$", "name": "Singapore Dollar"},
    {"code": "BRL", "symbol": "R$", "name": "Brazilian Real"},
    {"code": "KRW", "symbol": "₩", "name": "South Korean Won"},
    {"code": "AED", "symbol": "د.إ", "name": "UAE Dirham"},
    {"code": "OTHER", "symbol": "", "name": "Other"},
]

DEFAULT_CURRENCY = CURRENCIES[0]

_CURRENCIES_BY_CODE = {currency["code"]: currency for currency in CURRENCIES}


def get_currency_by_code(code: str) -> Dict[str, str]:
    """Look up a currency; unknown codes fall back to USD"""
    return _CURRENCIES_BY_CODE.get((code or "").upper(), DEFAULT_CURRENCY)


def format_amount(amount: Union[int, float]) -> str:
    if float(amount).is_integer():
        return str(int(amount))
    return f"{amount:.2f}"


def format_price(amount: Union[int, float], currency_code: str = "USD") -> str:
    """Render an amount with its currency symbol, e.g. '$12' or '₹499'"""
    currency = get_currency_by_code(currency_code)
    return f"{currency['symbol']}{format_amount(amount)}"


def is_valid_category(category: str) -> bool:
    return category in TEMPLATE_CATEGORIES or category in COMPONENT_CATEGORIES


def is_valid_difficulty(difficulty: str) -> bool:
    return difficulty in DIFFICULTY_LEVELS


def is_valid_type(item_type: str) -> bool:
    return item_type in TEMPLATE_TYPES or item_type in COMPONENT_TYPES


def is_valid_plan_type(plan_type: str) -> bool:
    return plan_type in PLAN_TYPES


def is_valid_tech_stack(tech_stack: str) -> bool:
    return tech_stack in TECH_STACKS


def is_valid_currency(currency_code: str) -> bool:
    return currency_code in _CURRENCIES_BY_CODE


def reference_data() -> dict:
    """Everything the create/edit forms and gallery filters need"""
    return {
        "template_categories": TEMPLATE_CATEGORIES,
        "component_categories": [ALL] + COMPONENT_CATEGORIES,
        "difficulty_levels": DIFFICULTY_LEVELS,
        "template_types": TEMPLATE_TYPES,
        "component_types": COMPONENT_TYPES,
        "plan_types": PLAN_TYPES,
        "tech_stacks": TECH_STACKS,
        "currencies": CURRENCIES,
        "sort_options": SORT_OPTIONS,
    }
