from setuptools import setup, find_packages

setup(
    name="snipls",
    version="0.1.0",
    description="Language server with React snippets and a dynamic JSX tag expander",
    packages=find_packages(include=["snipls", "snipls.*"]),
    python_requires=">=3.11",
    install_requires=[
        "click>=8.0",
        "pydantic>=2.0",
        "tomli>=2.0",
        "tomli-w>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
        ],
    },
    entry_points={
        "console_scripts": [
            "snipls=snipls.cli:cli",
            "snipls-server=snipls.server_cli:main",
        ],
    },
)
