"""Static synonym tables for role, skill and location expansion.

Keys are canonical (lowercase, trimmed). Values are alias terms in the exact
form they are emitted into queries, already quoted where they are phrases.
The tables are wrapped in MappingProxyType and never mutated.
"""

from collections.abc import Mapping
from types import MappingProxyType

DEFAULT_EXCLUSIONS: tuple[str, ...] = ("intern", "junior", "bootcamp", "entry", "trainee")

ROLE_SYNONYMS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "software engineer": (
        '"software engineer"', "developer", "programmer", "SWE", '"software developer"', "engineer",
    ),
    "data scientist": (
        '"data scientist"', '"machine learning"', '"ml engineer"', '"ai scientist"', '"data analyst"',
    ),
    "product manager": ('"product manager"', "PM", '"product owner"', '"program manager"'),
    "designer": (
        "designer", '"ux designer"', '"ui designer"', '"product designer"', '"visual designer"',
    ),
    "marketing": ("marketing", '"digital marketing"', '"growth marketing"', '"content marketing"'),
    "sales": (
        "sales", '"account executive"', '"sales rep"', '"business development"', '"account manager"',
    ),
    "engineer": ("engineer", '"software engineer"', "developer", "programmer", "SWE"),
    "developer": ("developer", '"software developer"', '"web developer"', "programmer", "engineer"),
    "analyst": ("analyst", '"data analyst"', '"business analyst"', '"financial analyst"'),
})

SKILL_SYNONYMS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "javascript": ("JavaScript", "JS", "Node.js", "NodeJS"),
    "typescript": ("TypeScript", "TS"),
    "python": ("Python", "py"),
    "react": ("React", "ReactJS", "React.js"),
    "node": ("Node.js", "NodeJS", "Node"),
    "aws": ("AWS", '"Amazon Web Services"'),
    "kubernetes": ("Kubernetes", "k8s"),
    "docker": ("Docker", "containerization"),
    "sql": ("SQL", "PostgreSQL", "MySQL", "database"),
    "machine learning": ('"machine learning"', "ML", '"artificial intelligence"', "AI"),
})

LOCATION_EQUIVALENTS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "nyc": ("NYC", '"New York"', '"New York City"', "Manhattan", "Brooklyn"),
    "new york": ("NYC", '"New York"', '"New York City"', "Manhattan"),
    "sf": ("SF", '"San Francisco"', '"Bay Area"', '"Silicon Valley"'),
    "san francisco": ("SF", '"San Francisco"', '"Bay Area"'),
    "la": ("LA", '"Los Angeles"', '"Greater LA"'),
    "los angeles": ("LA", '"Los Angeles"', '"Greater LA"'),
    "boston": ("Boston", '"Greater Boston"', "Cambridge", "Somerville"),
    "seattle": ("Seattle", '"Greater Seattle"', "Bellevue", "Redmond"),
    "chicago": ("Chicago", '"Greater Chicago"', '"Chicagoland"'),
    "austin": ("Austin", '"Greater Austin"', '"Austin TX"'),
    "denver": ("Denver", '"Greater Denver"', "Boulder"),
    "london": ("London", '"Greater London"', "UK"),
    "toronto": ("Toronto", '"Greater Toronto"', "Canada"),
    "remote": ("remote", '"remote work"', '"work from home"', "WFH"),
})
