"""Built-in manifest defaults for newly scaffolded packages."""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping

ORG: Final[str] = "pi-cubed"
ORG_DISPLAY_NAME: Final[str] = "Pi Cubed"
GITHUB_ROOT: Final[str] = "https://github.com"

DEFAULT_VERSION: Final[str] = "0.1.0"
DEFAULT_LICENSE: Final[str] = "MIT"
DEFAULT_PACKAGE_MANAGER: Final[str] = "yarn"

ENGINE_PLATFORM: Final[str] = "node"

MANIFEST_FILENAME: Final[str] = "package.json"
GITIGNORE_FILENAME: Final[str] = ".gitignore"
GITIGNORE_URL: Final[str] = (
    "https://raw.githubusercontent.com/github/gitignore/main/Node.gitignore"
)

DEPS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "ramda": "^0.25.0",
    }
)

DEV_DEPS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "ava": "^0.25.0",
        "babel-cli": "^6.26.0",
        "babel-preset-env": "^1.6.1",
        "babel-register": "^6.26.0",
        "nyc": "^11.4.1",
        "prettier": "^1.10.2",
    }
)

SCRIPTS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "build": "babel src -d lib",
        "test": "ava",
        "coverage": "nyc ava",
        "format": "prettier --single-quote --write 'src/**/*.js' 'test/**/*.js'",
        "prepublishOnly": "yarn build",
    }
)

ENGINES: Final[Mapping[str, str]] = MappingProxyType(
    {
        ENGINE_PLATFORM: ">=8.0.0",
    }
)


def default_author() -> dict[str, str]:
    return {"name": ORG_DISPLAY_NAME}


def default_homepage(name: str) -> str:
    """Return the GitHub homepage for ``name`` under the default org."""
    return f"{GITHUB_ROOT}/{ORG}/{name}"


def default_bugs(homepage: str) -> dict[str, str]:
    return {"url": f"{homepage}/issues"}
