from setuptools import setup, find_packages

setup(
    name="yandexWebmaster",
    version="0.1.0",
    description="Typed client and command line for the Yandex Webmaster API",
    author="Your Name",
    author_email="you@example.com",
    packages=find_packages(include=["api_clients", "api_clients.*", "yandexWebmaster", "yandexWebmaster.*"]),
    python_requires=">=3.10",
    install_requires=[
        "click>=8.0",
        "requests>=2.31.0",
        "pydantic>=2.5",
        "tabulate>=0.8.9",
        "keyring>=23.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "requests-mock>=1.11",
            "pytest-socket>=0.6",
        ],
    },
    entry_points={
        "console_scripts": ["yandex-webmaster=yandexWebmaster.cli.__main__:main"],
    },
    license="MIT",
)
