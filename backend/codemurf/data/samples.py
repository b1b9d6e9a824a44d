"""
Bundled sample catalog used when the gallery is not backed by the API
"""
from typing import List, Optional, Sequence

from codemurf.data.reference import ALL
from codemurf.models.catalog import CatalogItem


def _template(id, title, category, type_, difficulty, plan, inr, usd, rating, downloads,
              likes, description, developer, tags, created_at, image):
    return {
        "id": id,
        "title": title,
        "category": category,
        "type": type_,
        "difficultyLevel": difficulty,
        "planType": plan,
        "pricingINR": inr,
        "pricingUSD": usd,
        "rating": rating,
        "downloads": downloads,
        "likes": likes,
        "shortDescription": description,
        "developerName": developer,
        "tags": tags,
        "createdAt": created_at,
        "previewImages": [f"/static/templates/{image}.svg"],
    }


_SAMPLE_TEMPLATE_DATA = [
    _template(1, "SaaS Landing Page", "Web Development", "Web Application", "Easy", "Free", 0, 0, 4.8, 3420, 210,
              "Conversion-focused landing page with pricing table and testimonials",
              "Sarah Johnson", ["landing", "saas", "responsive"], "2024-01-05", "saas-landing"),
    _template(2, "Admin Dashboard Pro", "Frontend Development", "Web Application", "Tough", "Paid", 1499, 18, 4.9, 1890, 322,
              "Full admin dashboard with charts, tables and role-based navigation",
              "Mike Chen", ["dashboard", "charts", "admin"], "2024-01-08", "admin-dashboard"),
    _template(3, "Portfolio Starter", "UI/UX Design", "Starter Kit", "Easy", "Free", 0, 0, 4.5, 2750, 140,
              "Minimal personal portfolio with project grid and contact form",
              "Emma Davis", ["portfolio", "minimal"], "2024-01-12", "portfolio"),
    _template(4, "E-commerce Storefront", "E-commerce", "Web Application", "Medium", "Paid", 1999, 24, 4.7, 1560, 198,
              "Storefront with product listing, cart and checkout flow",
              "Alex Rodriguez", ["shop", "cart", "checkout"], "2024-01-15", "storefront"),
    _template(5, "Blog Engine Theme", "Web Development", "Theme", "Easy", "Free", 0, 0, 4.3, 2210, 96,
              "Markdown-driven blog theme with tags, search and dark mode",
              "Lisa Wang", ["blog", "markdown", "dark-mode"], "2024-01-18", "blog"),
    _template(6, "Fitness Tracker App", "Mobile Development", "Mobile App", "Medium", "Paid", 899, 11, 4.6, 980, 120,
              "Workout logging app with progress charts and reminders",
              "David Kim", ["mobile", "health", "charts"], "2024-01-22", "fitness"),
    _template(7, "REST API Boilerplate", "API Development", "Boilerplate", "Medium", "Free", 0, 0, 4.4, 3100, 175,
              "Typed REST API scaffold with auth, validation and OpenAPI docs",
              "Rachel Green", ["api", "auth", "openapi"], "2024-01-25", "rest-api"),
    _template(8, "Crypto Wallet UI", "Blockchain", "Web Application", "Tough", "Paid", 2499, 30, 4.2, 640, 88,
              "Wallet interface with balances, transfers and transaction history",
              "Tom Wilson", ["crypto", "wallet", "web3"], "2024-01-29", "crypto-wallet"),
    _template(9, "Restaurant Ordering", "Food & Beverage", "Web Application", "Medium", "Paid", 1199, 14, 4.5, 720, 104,
              "Menu browsing and online ordering with table reservations",
              "Priya Sharma", ["restaurant", "ordering"], "2024-02-02", "restaurant"),
    _template(10, "Course Platform", "Education", "Web Application", "Tough", "Paid", 2999, 36, 4.8, 1340, 256,
              "Online course platform with lessons, quizzes and progress tracking",
              "Arjun Patel", ["education", "lms", "video"], "2024-02-06", "course-platform"),
    _template(11, "Real Estate Listings", "Real Estate", "Web Application", "Medium", "Free", 0, 0, 4.1, 1120, 64,
              "Property listing site with map search and saved favourites",
              "Olivia Brown", ["listings", "maps"], "2024-02-09", "real-estate"),
    _template(12, "Chat Application", "Social Media", "Web Application", "Tough", "Paid", 1799, 22, 4.7, 1460, 230,
              "Realtime chat with rooms, typing indicators and file sharing",
              "Noah Martinez", ["chat", "realtime", "websocket"], "2024-02-13", "chat"),
    _template(13, "Weather Widget", "Frontend Development", "Component", "Easy", "Free", 0, 0, 4.0, 2890, 77,
              "Animated weather widget with hourly and weekly forecast",
              "Sophia Lee", ["weather", "widget"], "2024-02-16", "weather"),
    _template(14, "Finance Tracker", "Finance", "Web Application", "Medium", "Paid", 999, 12, 4.6, 870, 142,
              "Personal budget tracker with categories and monthly reports",
              "Liam Anderson", ["finance", "budget", "charts"], "2024-02-20", "finance"),
    _template(15, "Travel Booking", "Travel", "Web Application", "Tough", "Paid", 2199, 27, 4.4, 530, 91,
              "Flight and hotel search with itinerary builder",
              "Mia Thompson", ["travel", "booking"], "2024-02-23", "travel"),
    _template(16, "Job Board", "Web Development", "Web Application", "Medium", "Free", 0, 0, 4.2, 1980, 118,
              "Job board with company profiles, filters and applications",
              "Ethan Walker", ["jobs", "filters"], "2024-02-27", "job-board"),
    _template(17, "ML Model Dashboard", "Machine Learning", "Tool", "Tough", "Paid", 2599, 32, 4.9, 760, 201,
              "Experiment tracking dashboard with metrics and model comparison",
              "Ava Robinson", ["ml", "experiments", "charts"], "2024-03-01", "ml-dashboard"),
    _template(18, "DevOps Status Page", "DevOps", "Tool", "Easy", "Free", 0, 0, 4.3, 1650, 83,
              "Public status page with incident history and uptime bars",
              "James White", ["status", "uptime"], "2024-03-05", "status-page"),
    _template(19, "Event Ticketing", "Entertainment", "Web Application", "Medium", "Paid", 1299, 16, 4.5, 690, 97,
              "Event pages with seat selection and QR tickets",
              "Isabella Harris", ["events", "tickets"], "2024-03-08", "ticketing"),
    _template(20, "Healthcare Portal", "Healthcare", "Web Application", "Tough", "Paid", 2799, 34, 4.6, 410, 73,
              "Patient portal with appointments, records and messaging",
              "Lucas Clark", ["health", "appointments"], "2024-03-12", "healthcare"),
    _template(21, "News Magazine", "News & Media", "Theme", "Easy", "Free", 0, 0, 4.1, 1430, 69,
              "Magazine layout with featured stories and category pages",
              "Charlotte Lewis", ["news", "magazine"], "2024-03-15", "news"),
    _template(22, "IoT Control Panel", "IoT", "Web Application", "Tough", "Paid", 1899, 23, 4.3, 380, 58,
              "Device dashboard with live sensor readings and controls",
              "Benjamin Young", ["iot", "sensors", "realtime"], "2024-03-19", "iot-panel"),
    _template(23, "Nonprofit Donations", "Non-Profit", "Web Application", "Easy", "Free", 0, 0, 4.4, 920, 112,
              "Campaign pages with donation progress and donor wall",
              "Amelia King", ["donations", "campaigns"], "2024-03-22", "nonprofit"),
    _template(24, "Game Leaderboard", "Game Development", "Component", "Medium", "Free", 0, 0, 4.2, 1270, 134,
              "Animated leaderboard with seasons, ranks and player cards",
              "Henry Scott", ["game", "leaderboard"], "2024-03-26", "leaderboard"),
]


_SAMPLE_COMPONENT_DATA = [
    {
        "id": 1,
        "title": "Modern Navigation Bar",
        "category": "Navigation",
        "type": "React",
        "language": "TypeScript",
        "difficultyLevel": "Easy",
        "planType": "Free",
        "pricingINR": 0,
        "pricingUSD": 0,
        "rating": 4.8,
        "downloads": 1250,
        "views": 3400,
        "likes": 89,
        "shortDescription": "Responsive navigation bar with dropdown menus and mobile hamburger menu",
        "fullDescription": "A fully responsive navigation component built with React and Tailwind CSS. "
                           "Features include dropdown menus, mobile hamburger menu, smooth animations, "
                           "and accessibility support.",
        "previewImages": ["/static/components/navbar-preview.svg"],
        "gitRepoUrl": "https://github.com/example/navbar",
        "liveDemoUrl": "https://navbar-demo.vercel.app",
        "dependencies": ["react", "tailwindcss", "framer-motion"],
        "tags": ["responsive", "accessible", "animated"],
        "developerName": "Sarah Johnson",
        "developerExperience": "5+ years",
        "isAvailableForDev": True,
        "featured": True,
        "popular": True,
        "createdAt": "2024-01-15",
    },
    {
        "id": 2,
        "title": "Dashboard Sidebar",
        "category": "Layout",
        "type": "React",
        "language": "JavaScript",
        "difficultyLevel": "Medium",
        "planType": "Paid",
        "pricingINR": 499,
        "pricingUSD": 6,
        "rating": 4.9,
        "downloads": 890,
        "views": 2200,
        "likes": 156,
        "shortDescription": "Collapsible sidebar with navigation icons and smooth animations",
        "fullDescription": "A modern dashboard sidebar component with collapsible functionality, icon "
                           "navigation, and smooth transitions. Includes dark/light theme support.",
        "previewImages": ["/static/components/sidebar-preview.svg"],
        "gitRepoUrl": "https://github.com/example/sidebar",
        "liveDemoUrl": "https://sidebar-demo.vercel.app",
        "dependencies": ["react", "tailwindcss", "lucide-react"],
        "tags": ["dashboard", "collapsible", "animated"],
        "developerName": "Mike Chen",
        "developerExperience": "7+ years",
        "isAvailableForDev": True,
        "featured": True,
        "popular": False,
        "createdAt": "2024-01-20",
    },
    {
        "id": 3,
        "title": "Contact Form",
        "category": "Forms",
        "type": "React",
        "language": "TypeScript",
        "difficultyLevel": "Easy",
        "planType": "Free",
        "pricingINR": 0,
        "pricingUSD": 0,
        "rating": 4.6,
        "downloads": 2100,
        "views": 4800,
        "likes": 134,
        "shortDescription": "Beautiful contact form with validation and email integration",
        "fullDescription": "A responsive contact form component with built-in validation, error "
                           "handling, and email integration.",
        "previewImages": ["/static/components/contact-form-preview.svg"],
        "gitRepoUrl": "https://github.com/example/contact-form",
        "liveDemoUrl": "https://contact-form-demo.vercel.app",
        "dependencies": ["react", "react-hook-form", "yup", "nodemailer"],
        "tags": ["form", "validation", "email"],
        "developerName": "Emma Davis",
        "developerExperience": "4+ years",
        "isAvailableForDev": True,
        "featured": False,
        "popular": True,
        "createdAt": "2024-01-25",
    },
    {
        "id": 4,
        "title": "Data Table",
        "category": "Data Display",
        "type": "React",
        "language": "TypeScript",
        "difficultyLevel": "Tough",
        "planType": "Paid",
        "pricingINR": 799,
        "pricingUSD": 10,
        "rating": 4.7,
        "downloads": 567,
        "views": 1890,
        "likes": 78,
        "shortDescription": "Advanced data table with sorting, filtering, and pagination",
        "fullDescription": "A comprehensive data table component with sorting, filtering, pagination, "
                           "row selection, and export functionality.",
        "previewImages": ["/static/components/data-table-preview.svg"],
        "gitRepoUrl": "https://github.com/example/data-table",
        "liveDemoUrl": "https://data-table-demo.vercel.app",
        "dependencies": ["react", "react-table", "tailwindcss", "xlsx"],
        "tags": ["table", "sorting", "filtering", "pagination"],
        "developerName": "Alex Rodriguez",
        "developerExperience": "6+ years",
        "isAvailableForDev": True,
        "featured": True,
        "popular": False,
        "createdAt": "2024-02-01",
    },
    {
        "id": 5,
        "title": "Hero Section",
        "category": "Sections",
        "type": "React",
        "language": "JavaScript",
        "difficultyLevel": "Easy",
        "planType": "Free",
        "pricingINR": 0,
        "pricingUSD": 0,
        "rating": 4.5,
        "downloads": 3200,
        "views": 6500,
        "likes": 245,
        "shortDescription": "Modern hero section with gradient backgrounds and animations",
        "fullDescription": "A hero section component with gradient backgrounds, parallax effects, and "
                           "smooth animations. Includes call-to-action buttons and responsive design.",
        "previewImages": ["/static/components/hero-section-preview.svg"],
        "gitRepoUrl": "https://github.com/example/hero-section",
        "liveDemoUrl": "https://hero-demo.vercel.app",
        "dependencies": ["react", "framer-motion", "tailwindcss"],
        "tags": ["hero", "landing", "animated"],
        "developerName": "Lisa Wang",
        "developerExperience": "3+ years",
        "isAvailableForDev": True,
        "featured": False,
        "popular": True,
        "createdAt": "2024-02-05",
    },
    {
        "id": 6,
        "title": "Modal Dialog",
        "category": "User Interface",
        "type": "React",
        "language": "TypeScript",
        "difficultyLevel": "Medium",
        "planType": "Paid",
        "pricingINR": 299,
        "pricingUSD": 4,
        "rating": 4.8,
        "downloads": 1560,
        "views": 3200,
        "likes": 98,
        "shortDescription": "Customizable modal dialog with backdrop blur and animations",
        "fullDescription": "A versatile modal dialog component with backdrop blur, smooth animations, "
                           "and multiple size options. Includes keyboard navigation.",
        "previewImages": ["/static/components/modal-dialog-preview.svg"],
        "gitRepoUrl": "https://github.com/example/modal",
        "liveDemoUrl": "https://modal-demo.vercel.app",
        "dependencies": ["react", "framer-motion", "focus-trap-react"],
        "tags": ["modal", "dialog", "accessible"],
        "developerName": "David Kim",
        "developerExperience": "5+ years",
        "isAvailableForDev": True,
        "featured": False,
        "popular": False,
        "createdAt": "2024-02-10",
    },
    {
        "id": 7,
        "title": "Pricing Cards",
        "category": "Content",
        "type": "React",
        "language": "JavaScript",
        "difficultyLevel": "Easy",
        "planType": "Free",
        "pricingINR": 0,
        "pricingUSD": 0,
        "rating": 4.7,
        "downloads": 2800,
        "views": 5600,
        "likes": 187,
        "shortDescription": "Beautiful pricing cards with hover effects and glassmorphism",
        "fullDescription": "Pricing card components with glassmorphism design, hover effects, and "
                           "responsive layout.",
        "previewImages": ["/static/components/pricing-cards-preview.svg"],
        "gitRepoUrl": "https://github.com/example/pricing-cards",
        "liveDemoUrl": "https://pricing-demo.vercel.app",
        "dependencies": ["react", "tailwindcss", "framer-motion"],
        "tags": ["pricing", "cards", "glassmorphism"],
        "developerName": "Rachel Green",
        "developerExperience": "4+ years",
        "isAvailableForDev": True,
        "featured": True,
        "popular": True,
        "createdAt": "2024-02-15",
    },
    {
        "id": 8,
        "title": "Image Gallery",
        "category": "Media",
        "type": "React",
        "language": "TypeScript",
        "difficultyLevel": "Medium",
        "planType": "Paid",
        "pricingINR": 599,
        "pricingUSD": 7,
        "rating": 4.6,
        "downloads": 890,
        "views": 2100,
        "likes": 112,
        "shortDescription": "Responsive image gallery with lightbox and lazy loading",
        "fullDescription": "A responsive image gallery component with lightbox, lazy loading, and "
                           "masonry layout. Includes zoom, navigation, and thumbnails.",
        "previewImages": ["/static/components/image-gallery-preview.svg"],
        "gitRepoUrl": "https://github.com/example/image-gallery",
        "liveDemoUrl": "https://gallery-demo.vercel.app",
        "dependencies": ["react", "react-image-gallery", "intersection-observer"],
        "tags": ["gallery", "lightbox", "lazy-loading"],
        "developerName": "Tom Wilson",
        "developerExperience": "6+ years",
        "isAvailableForDev": True,
        "featured": False,
        "popular": False,
        "createdAt": "2024-02-20",
    },
]

SAMPLE_TEMPLATES: List[CatalogItem] = [CatalogItem.model_validate(data) for data in _SAMPLE_TEMPLATE_DATA]
SAMPLE_COMPONENTS: List[CatalogItem] = [CatalogItem.model_validate(data) for data in _SAMPLE_COMPONENT_DATA]


def get_components_by_category(
    category: Optional[str],
    components: Sequence[CatalogItem] = SAMPLE_COMPONENTS,
) -> List[CatalogItem]:
    """Components in `category`; no category (or "All") keeps every one"""
    if not category or category == ALL:
        return list(components)
    return [component for component in components if component.category == category]


def get_featured_components(components: Sequence[CatalogItem] = SAMPLE_COMPONENTS) -> List[CatalogItem]:
    return [component for component in components if component.featured]


def get_popular_components(components: Sequence[CatalogItem] = SAMPLE_COMPONENTS) -> List[CatalogItem]:
    return [component for component in components if component.popular]
