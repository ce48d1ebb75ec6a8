from setuptools import find_packages, setup

setup(
    name="redis-key-copy",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "redis",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-cov",
        ],
    },
    entry_points={
        "console_scripts": [
            "redis-key-copy=redis_key_copy.cli:main",
        ],
    },
    python_requires=">=3.10",
)
