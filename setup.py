
from setuptools import setup, find_packages

setup(
    name="displayedness",
    version="0.1",
    packages=find_packages(include=["displayedness", "displayedness.*"]),
    python_requires=">=3.8",
    install_requires=[
        "selenium>=4.11",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-mock",
        ],
    },
)
