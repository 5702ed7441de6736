from setuptools import setup, find_packages

setup(
    name="meilisearch_client",
    version="0.1",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "httpx>=0.27.0",
        "pydantic>=2.4",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    python_requires='>=3.11',
)
