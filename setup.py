from setuptools import find_packages, setup

setup(
    name="migration-tracker",
    version="0.1.0",
    description="Data-center migration tracker with fuzzy customer resolution for CSV imports",
    python_requires=">=3.10",
    packages=find_packages(include=["migration_tracker", "migration_tracker.*"], exclude=["migration_tracker.tests"]),
    install_requires=[
        "click",
        "numpy",
        "pandas",
        "python-dotenv",
        "rapidfuzz",
        "sqlalchemy>=1.4"
    ],
    extras_require={"dev": ["pytest"]},
    entry_points={
        "console_scripts": [
            "migration-tracker=migration_tracker.cli.main:cli",
        ],
    },
)
