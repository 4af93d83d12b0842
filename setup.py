import os

from setuptools import find_packages, setup

exec(open("pgpartsync/_version.py").read())

with open(
    os.path.join(os.path.dirname(__file__), "README.md"), encoding="utf-8"
) as readme:
    README = readme.read()


setup(
    name="django-pgpartsync",
    version=__version__,  # noqa
    packages=find_packages(exclude=["tests"]),
    include_package_data=True,
    license="MIT License",
    description="Reconcile declared PostgreSQL table partitioning with the database.",
    long_description=README,
    long_description_content_type="text/markdown",
    keywords=[
        "django",
        "postgres",
        "partitioning",
        "migrations",
    ],
    classifiers=[
        "Environment :: Web Environment",
        "Framework :: Django",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.8",
    install_requires=[
        "Django>=3.2,<6.0",
        "python-dateutil>=2.8.0,<=3.0.0",
        "structlog>=21.1.0",
    ],
    extras_require={
        "test": [
            "psycopg2-binary>=2.9",
            "pytest>=7.0",
            "pytest-django>=4.5",
            "pytest-cov>=4.0",
            "coverage>=6.2",
            "tox>=3.28",
            "freezegun>=1.2",
        ],
        "analysis": [
            "black==22.3.0",
            "flake8==7.2.0",
            "isort==6.0.1",
            "docformatter==1.7.7",
            "mypy==1.16.0",
            "django-stubs==4.2.7",
            "types-python-dateutil==2.9.0.20250516",
        ],
    },
)
