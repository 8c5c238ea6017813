from setuptools import setup, find_packages

setup(
    name="xmlext",
    version="0.1.0",
    packages=find_packages(include=["xmlext", "xmlext.*"]),
    python_requires=">=3.10",
    install_requires=[
        "lxml",
        "pydantic>=2",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
