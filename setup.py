from setuptools import setup

with open("README.md", 'r') as f:
    long_description = f.read()

setup(
    name='campsearch',
    version='1.0',
    description='Find campsites bookable for N nights from a chosen weekday',
    license="MIT",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=['campsearch', 'campsearch.api'],
    python_requires=">=3.9",
    # external packages as dependencies
    install_requires=[
        "api-client>=1.3,<2.0",
        "fake-useragent>=1.2",
        "fastapi>=0.100",
        "pydantic>=2.0,<3.0",
        "python-dateutil>=2.8",
        "rich>=13.0",
        "typer>=0.9",
        "uvicorn>=0.23",
    ],
    extras_require={
        "test": [
            "click>=8.2",
            "httpx>=0.24",
            "pytest>=7.0",
            "responses>=0.23",
        ],
    },
    scripts=[
        'scripts/camping.py',
    ],
    entry_points={
        "console_scripts": ["campsearch=campsearch.cli:app"],
    },
)
