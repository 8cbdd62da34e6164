from setuptools import setup, find_namespace_packages

setup(
    name="elise_reads",
    version="0.1.0",
    packages=find_namespace_packages(include=['api*', 'cli*', 'core*']),
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "Click",
        "SQLAlchemy>=2.0",
        "fastapi",
        "uvicorn",
        "pydantic[email]>=2",
        "python-multipart",
        "python-jose[cryptography]",
        "bcrypt",
        "python-dotenv",
        "requests",
        "Pillow",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
    entry_points={
        "console_scripts": [
            "elise-reads=cli.main:main",
        ],
    },
)
