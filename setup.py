#!/usr/bin/env python3
"""
Setup script for ngx-e2e.

Installs the ``ngx_e2e`` page-object library from ``src/``. Use
`pip install -e .[dev]` for a development checkout with the test tools.
"""

import sys

if sys.version_info < (3, 11):
    sys.exit("Error: ngx-e2e requires Python 3.11 or higher.")

try:
    from setuptools import find_packages, setup
except ImportError:
    sys.exit("Error: setuptools is required. Install it with: pip install setuptools")

# Read version from __version__.py for consistency
try:
    import re
    from pathlib import Path

    version_file = Path(__file__).parent / "src" / "ngx_e2e" / "__version__.py"
    version_content = version_file.read_text(encoding="utf-8")
    version_match = re.search(r'^__version__\s*=\s*["\']([^"\']+)["\']', version_content, re.M)
    version = version_match.group(1) if version_match else "0.1.0"
except OSError:
    version = "0.1.0"

# Read long description from README if available
try:
    from pathlib import Path

    readme_path = Path(__file__).parent / "README.md"
    if readme_path.exists():
        long_description = readme_path.read_text(encoding="utf-8")
        long_description_content_type = "text/markdown"
    else:
        long_description = "Playwright page objects for the ngx-admin demo application"
        long_description_content_type = "text/plain"
except OSError:
    long_description = "Playwright page objects for the ngx-admin demo application"
    long_description_content_type = "text/plain"

# Core dependencies
install_requires = [
    "playwright>=1.40.0",
    "pydantic>=2.5.0",
    "pydantic-settings>=2.1.0",
]

# Development dependencies
extras_require = {
    "dev": [
        "pytest>=7.4.0",
        "pytest-asyncio>=0.24.0",
        "requests>=2.31.0",
        "black>=23.0.0",
        "flake8>=6.1.0",
        "mypy>=1.7.0",
        "pytest-cov>=4.1.0",
    ],
}
extras_require["test"] = [
    "pytest>=7.4.0",
    "pytest-asyncio>=0.24.0",
    "requests>=2.31.0",
]

setup(
    name="ngx-e2e",
    version=version,
    description="Playwright page objects for the ngx-admin demo application",
    long_description=long_description,
    long_description_content_type=long_description_content_type,
    author="ngx-e2e Team",
    license="MIT",
    python_requires=">=3.11",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=install_requires,
    extras_require=extras_require,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Framework :: Pytest",
        "Topic :: Software Development :: Testing",
    ],
    keywords=["playwright", "e2e", "page-object", "ngx-admin", "testing"],
)
