from setuptools import setup, find_packages

setup(
    name="daybook-api",
    version="1.0.0",
    description="Daybook productivity API: tasks, comments, goals and assistant integration",
    author="jetgause",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["api_server", "config"],
    install_requires=[
        "fastapi>=0.104.0",
        "uvicorn>=0.24.0",
        "pydantic>=2.0.0",
        "dataclasses-json>=0.6.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "httpx>=0.25.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "daybook-server=api_server:main",
        ],
    },
    python_requires=">=3.8",
)
