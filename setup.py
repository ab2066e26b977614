from pathlib import Path
from setuptools import setup, find_namespace_packages


def _read_version() -> str:
    init = Path(__file__).parent / "src" / "sitefavicon" / "__init__.py"
    for line in init.read_text(encoding="utf-8").splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip("'\"")
    raise RuntimeError("__version__ not found in src/sitefavicon/__init__.py")


setup(
    name="sitefavicon",
    version=_read_version(),
    description="Favicon bundle generation and staged HTML injection for generated static sites",
    author="GAHEOS",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["sitefavicon", "sitefavicon.*"]),
    install_requires=[],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["sitefavicon=sitefavicon.cli:main"]},
)
