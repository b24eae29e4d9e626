"""
Setup script for the Android all-files storage access bridge.
"""

from setuptools import setup, find_packages

setup(
    name="allfiles-bridge",
    version="0.1.0",
    description="Check and request Android all-files storage access from a hybrid app",
    author="Allfiles Bridge Team",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "pydantic>=2.0.0",
        "python-dotenv>=1.0.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "android": [
            "pyjnius>=1.5.0",
        ],
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "allfiles-bridge=allfiles_bridge.main:cli",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Operating System :: Android",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
