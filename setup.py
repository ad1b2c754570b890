"""Setup configuration for lighthouse_sheet"""

from setuptools import setup, find_packages

setup(
    name="lighthouse-to-spreadsheet",
    version="0.1.0",
    description=(
        "CLI tool that appends Lighthouse performance results, tagged with "
        "git state, to a Google Sheet."
    ),
    author="Lighthouse to Spreadsheet Contributors",
    author_email="",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "requests>=2.28.0",
        "google-auth>=2.0.0",
        "pydantic-settings>=2.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "black>=22.0",
            "flake8>=4.0",
            "mypy>=0.950",
        ],
    },
    entry_points={
        "console_scripts": [
            "lighthouse-to-spreadsheet=lighthouse_sheet.main:main",
        ],
    },
)
