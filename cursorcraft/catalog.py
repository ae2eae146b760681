"""Catalog of platforms, frameworks, and packages offered by the wizard.

The wizard walks the user through platform -> framework -> packages; this
module holds the fixed choices for each step and the filters that narrow
the package list to what fits the chosen platform and framework.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from cursorcraft.generator.models import Platform


class Framework(BaseModel):
    """A framework option within a platform."""

    id: str
    name: str
    description: str = ""
    category: str = ""
    logo: str = ""


class PlatformInfo(BaseModel):
    """A platform and the frameworks available for it."""

    id: Platform
    name: str
    description: str = ""
    icon: str = ""
    frameworks: list[Framework] = Field(default_factory=list)


class PackageOption(BaseModel):
    """A package the user can add to the project."""

    id: str
    name: str
    description: str = ""
    platforms: list[Platform] = Field(default_factory=list)
    frameworks: list[str] | None = Field(
        default=None,
        description="Framework ids this package is limited to; None means any",
    )
    category: str = ""


def _fw(fw_id: str, name: str, description: str, category: str, logo: str) -> Framework:
    return Framework(id=fw_id, name=name, description=description, category=category, logo=logo)


PLATFORMS: list[PlatformInfo] = [
    PlatformInfo(
        id=Platform.WEB,
        name="Web Application",
        description="Build for browsers with responsive design",
        icon="globe",
        frameworks=[
            _fw("next", "Next.js", "React framework for production", "Frontend", "logo-nextjs.svg"),
            _fw("react", "React", "JavaScript library for user interfaces", "Frontend", "logo-react.svg"),
            _fw("vue", "Vue.js", "Progressive JavaScript framework", "Frontend", "logo-vue.svg"),
            _fw("angular", "Angular", "Platform for building web applications", "Frontend", "logo-angular.svg"),
            _fw("svelte", "Svelte", "Cybernetically enhanced web apps", "Frontend", "logo-svelte.svg"),
            _fw("node", "Node.js", "JavaScript runtime for backends", "Backend", "logo-nodejs.svg"),
            _fw("express", "Express", "Fast, unopinionated web framework for Node.js", "Backend", "logo-express.svg"),
            _fw("nestjs", "NestJS", "Progressive Node.js framework", "Backend", "logo-nestjs.svg"),
        ],
    ),
    PlatformInfo(
        id=Platform.MOBILE,
        name="Mobile Application",
        description="Native or cross-platform mobile apps",
        icon="smartphone",
        frameworks=[
            _fw("react-native", "React Native", "Build native apps using React", "Cross-Platform", "logo-react-native.svg"),
            _fw("flutter", "Flutter", "Google's UI toolkit for mobile", "Cross-Platform", "logo-flutter.svg"),
            _fw("ionic", "Ionic", "Cross-platform mobile app development", "Cross-Platform", "logo-ionic.svg"),
            _fw("swift", "Swift", "Native iOS app development", "Native", "logo-swift.svg"),
            _fw("kotlin", "Kotlin", "Native Android app development", "Native", "logo-kotlin.svg"),
        ],
    ),
    PlatformInfo(
        id=Platform.DESKTOP,
        name="Desktop Application",
        description="Cross-platform desktop applications",
        icon="monitor",
        frameworks=[
            _fw("electron", "Electron", "Build cross-platform desktop apps with JavaScript", "Cross-Platform", "logo-electron.svg"),
            _fw("tauri", "Tauri", "Lightweight desktop apps with web UI", "Cross-Platform", "logo-tauri.svg"),
            _fw("qt", "Qt", "Cross-platform application framework", "Cross-Platform", "logo-qt.svg"),
        ],
    ),
    PlatformInfo(
        id=Platform.API,
        name="API Service",
        description="RESTful or GraphQL API endpoints",
        icon="server",
        frameworks=[
            _fw("express", "Express", "Fast, unopinionated web framework for Node.js", "Node.js", "logo-express.svg"),
            _fw("nestjs", "NestJS", "Progressive Node.js framework", "Node.js", "logo-nestjs.svg"),
            _fw("fastapi", "FastAPI", "Modern, fast API framework for Python", "Python", "logo-fastapi.svg"),
            _fw("django", "Django", "High-level Python web framework", "Python", "logo-django.svg"),
            _fw("spring", "Spring Boot", "Java-based framework for microservices", "Java", "logo-spring.svg"),
            _fw("dotnet", ".NET Core", "Cross-platform framework for building APIs", ".NET", "logo-dotnet.svg"),
        ],
    ),
]

_WEB, _MOBILE, _API = Platform.WEB, Platform.MOBILE, Platform.API
_REACT_FAMILY = ["react", "next", "react-native"]
_REACT_WEB = ["react", "next"]
_NODE_BACKENDS = ["node", "express", "nestjs"]

PACKAGES: list[PackageOption] = [
    # Security
    PackageOption(id="auth", name="Authentication", description="User authentication and authorization",
                  platforms=[_WEB, _MOBILE, _API], category="Security"),
    # State management
    PackageOption(id="redux", name="Redux", description="Predictable state container",
                  platforms=[_WEB, _MOBILE], frameworks=_REACT_FAMILY, category="State Management"),
    PackageOption(id="zustand", name="Zustand", description="Small, fast state management solution",
                  platforms=[_WEB, _MOBILE], frameworks=_REACT_FAMILY, category="State Management"),
    PackageOption(id="mobx", name="MobX", description="Simple, scalable state management",
                  platforms=[_WEB, _MOBILE], frameworks=_REACT_FAMILY, category="State Management"),
    PackageOption(id="vuex", name="Vuex", description="State management pattern and library for Vue.js",
                  platforms=[_WEB], frameworks=["vue"], category="State Management"),
    PackageOption(id="pinia", name="Pinia", description="Intuitive, type safe store for Vue",
                  platforms=[_WEB], frameworks=["vue"], category="State Management"),
    # Database
    PackageOption(id="prisma", name="Prisma", description="Next-generation ORM for Node.js",
                  platforms=[_WEB, _API], frameworks=_NODE_BACKENDS, category="Database"),
    PackageOption(id="mongoose", name="Mongoose", description="MongoDB object modeling for Node.js",
                  platforms=[_WEB, _API], frameworks=_NODE_BACKENDS, category="Database"),
    PackageOption(id="sequelize", name="Sequelize", description="ORM for Node.js supporting multiple SQL dialects",
                  platforms=[_WEB, _API], frameworks=_NODE_BACKENDS, category="Database"),
    PackageOption(id="typeorm", name="TypeORM", description="ORM for TypeScript and JavaScript",
                  platforms=[_WEB, _API], frameworks=_NODE_BACKENDS, category="Database"),
    # UI frameworks
    PackageOption(id="tailwind", name="Tailwind CSS", description="Utility-first CSS framework",
                  platforms=[_WEB, _MOBILE], category="UI Framework"),
    PackageOption(id="bootstrap", name="Bootstrap", description="Popular CSS framework",
                  platforms=[_WEB], category="UI Framework"),
    PackageOption(id="mui", name="Material UI", description="React components for faster development",
                  platforms=[_WEB], frameworks=_REACT_WEB, category="UI Framework"),
    PackageOption(id="chakra", name="Chakra UI", description="Simple, modular component library",
                  platforms=[_WEB], frameworks=_REACT_WEB, category="UI Framework"),
    PackageOption(id="shadcn", name="shadcn/ui", description="Beautifully designed components",
                  platforms=[_WEB], frameworks=_REACT_WEB, category="UI Framework"),
    # Testing
    PackageOption(id="jest", name="Jest", description="JavaScript testing framework",
                  platforms=[_WEB, _MOBILE, _API], category="Testing"),
    PackageOption(id="testing-library", name="Testing Library", description="Simple and complete testing utilities",
                  platforms=[_WEB, _MOBILE], frameworks=[*_REACT_FAMILY, "vue", "angular"], category="Testing"),
    PackageOption(id="cypress", name="Cypress", description="End-to-end testing framework",
                  platforms=[_WEB], category="Testing"),
    # Data fetching
    PackageOption(id="react-query", name="React Query", description="Data fetching and caching library",
                  platforms=[_WEB, _MOBILE], frameworks=_REACT_FAMILY, category="API/Data Fetching"),
    PackageOption(id="swr", name="SWR", description="React Hooks for data fetching",
                  platforms=[_WEB], frameworks=_REACT_WEB, category="API/Data Fetching"),
    PackageOption(id="axios", name="Axios", description="Promise-based HTTP client",
                  platforms=[_WEB, _MOBILE, _API], category="API/Data Fetching"),
    # Forms
    PackageOption(id="react-hook-form", name="React Hook Form", description="Performant, flexible forms with easy validation",
                  platforms=[_WEB, _MOBILE], frameworks=_REACT_FAMILY, category="Forms"),
    PackageOption(id="formik", name="Formik", description="Build forms in React without tears",
                  platforms=[_WEB, _MOBILE], frameworks=_REACT_FAMILY, category="Forms"),
    # Validation
    PackageOption(id="zod", name="Zod", description="TypeScript-first schema validation",
                  platforms=[_WEB, _MOBILE, _API], category="Validation"),
]


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------


def get_platform(platform: Platform | str) -> PlatformInfo | None:
    """Return the catalog entry for *platform*, or ``None`` if unknown."""
    for info in PLATFORMS:
        if info.id.value == _platform_value(platform):
            return info
    return None


def get_frameworks_by_platform(platform: Platform | str) -> list[Framework]:
    """Return the frameworks offered for *platform* (empty if unknown)."""
    info = get_platform(platform)
    return list(info.frameworks) if info else []


def get_packages_by_platform_and_framework(
    platform: Platform | str, framework_id: str
) -> list[PackageOption]:
    """Return packages that support *platform* and, if restricted, *framework_id*."""
    value = _platform_value(platform)
    return [
        pkg
        for pkg in PACKAGES
        if any(p.value == value for p in pkg.platforms)
        and (pkg.frameworks is None or framework_id in pkg.frameworks)
    ]


def get_packages_by_ids(package_ids: list[str]) -> list[PackageOption]:
    """Return the packages whose id is in *package_ids*, in catalog order."""
    wanted = set(package_ids)
    return [pkg for pkg in PACKAGES if pkg.id in wanted]


def find_framework(value: str, platform: Platform | str | None = None) -> Framework | None:
    """Find a framework by id or by case-insensitive display name.

    When *platform* is given only that platform's frameworks are searched.
    """
    needle = value.strip().lower()
    platforms = [get_platform(platform)] if platform is not None else PLATFORMS
    for info in platforms:
        if info is None:
            continue
        for framework in info.frameworks:
            if needle in (framework.id, framework.name.lower()):
                return framework
    return None


def _platform_value(platform: Platform | str) -> str:
    return platform.value if isinstance(platform, Platform) else str(platform).lower()
