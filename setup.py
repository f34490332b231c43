"""Setup script for localize-ui."""

from setuptools import setup, find_packages
from pathlib import Path

# Read README
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""

# Read version
version_file = Path(__file__).parent / "localize_ui" / "__version__.py"
version_info = {}
exec(version_file.read_text(), version_info)

setup(
    name="localize-ui",
    version=version_info["__version__"],
    author=version_info["__author__"],
    description=version_info["__description__"],
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["localize_ui", "localize_ui.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Localization",
        "Topic :: Software Development :: Internationalization",
        "Topic :: Software Development :: User Interfaces",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.8",
    install_requires=[
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
        "dev": [
            "pytest>=7.0",
            "pytest-cov>=4.0",
            "black>=23.0",
            "flake8>=6.0",
            "build>=1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "localize-ui=localize_ui.cli:main",
        ],
    },
    keywords="localization i18n ios strings ui fonts segmented-control",
)
